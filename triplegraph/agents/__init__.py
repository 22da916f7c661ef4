"""
LLM-based agents.

Agents:
- ChunkSummarizer: Title + one-sentence summary per chunk
- TripleExtractor: Single most salient triple per summary
"""

from .base import BaseAgent, DEFAULT_MODEL
from .summarizer import ChunkSummarizer
from .triple_extractor import TripleExtractor, strip_code_fence, validate_triple

__all__ = [
    "BaseAgent",
    "DEFAULT_MODEL",
    "ChunkSummarizer",
    "TripleExtractor",
    "strip_code_fence",
    "validate_triple",
]
