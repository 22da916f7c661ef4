"""
Pipeline orchestration.

Chunks → Summarize → Extract (throttled) → Deduplicate → Materialize (Neo4j)
"""

from .pipeline import Pipeline, PipelineConfig
from .state import ChunkFailure, PipelineState, PipelineStage

__all__ = [
    "Pipeline",
    "PipelineConfig",
    "ChunkFailure",
    "PipelineState",
    "PipelineStage",
]
