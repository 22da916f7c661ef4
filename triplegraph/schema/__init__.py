"""
Schema definitions for chunks, triples and graph records.
"""

from .chunks import Chunk, Summary
from .triples import Triple, ExtractionFailure, ExtractionResult
from .graph import GraphNode, GraphEdge, RunGraph

__all__ = [
    "Chunk",
    "Summary",
    "Triple",
    "ExtractionFailure",
    "ExtractionResult",
    "GraphNode",
    "GraphEdge",
    "RunGraph",
]
