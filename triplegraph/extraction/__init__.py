"""
Extraction helpers: model call throttling and triple deduplication.
"""

from .deduplicator import TripleSet, deduplicate
from .throttle import Throttle

__all__ = ["TripleSet", "deduplicate", "Throttle"]
