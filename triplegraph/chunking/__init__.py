"""
Text chunking.
"""

from .chunker import Chunker

__all__ = ["Chunker"]
