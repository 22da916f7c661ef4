"""
Pipeline state management.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..extraction.deduplicator import TripleSet
from ..schema.chunks import Chunk
from ..schema.graph import RunGraph


class PipelineStage(Enum):
    """Pipeline execution stages."""

    INIT = "init"
    SUMMARIZING = "summarizing"
    EXTRACTING = "extracting"
    DEDUPLICATING = "deduplicating"
    MATERIALIZING = "materializing"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass
class ChunkFailure:
    """A chunk that contributed no triple because a model call raised."""

    index: int
    chunk: Chunk
    error: str


@dataclass
class PipelineState:
    """
    Pipeline execution state.

    Tracks progress through stages and everything reported along the way.
    """

    stage: PipelineStage = PipelineStage.INIT

    # Processing state
    chunks: list[Chunk] = field(default_factory=list)
    current_chunk_index: int = 0
    triples: TripleSet = field(default_factory=TripleSet)

    # Output
    graph: Optional[RunGraph] = None

    # Tracking
    failures: list[ChunkFailure] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    processing_log: list[str] = field(default_factory=list)

    # Metrics
    chunks_processed: int = 0
    triples_extracted: int = 0
    writes_committed: int = 0

    def log(self, message: str) -> None:
        """Add a log message."""
        self.processing_log.append(message)

    def add_error(self, error: str) -> None:
        """Add an error message."""
        self.errors.append(error)
        self.log(f"ERROR: {error}")

    def add_warning(self, warning: str) -> None:
        """Add a warning message."""
        self.warnings.append(warning)
        self.log(f"WARNING: {warning}")

    def add_failure(self, index: int, chunk: Chunk, error: Exception) -> None:
        """Record a chunk whose model call raised."""
        self.failures.append(ChunkFailure(index=index, chunk=chunk, error=str(error)))
        self.add_error(f"Chunk {index} failed: {error}")

    def advance_to(self, stage: PipelineStage) -> None:
        """Advance to a new stage."""
        self.log(f"Stage: {self.stage.value} → {stage.value}")
        self.stage = stage

    @property
    def succeeded(self) -> bool:
        return self.stage == PipelineStage.COMPLETED

    def summary(self) -> dict:
        """Return a summary of the pipeline state."""
        return {
            "stage": self.stage.value,
            "chunks_total": len(self.chunks),
            "chunks_processed": self.chunks_processed,
            "chunks_failed": len(self.failures),
            "triples_extracted": self.triples_extracted,
            "unique_triples": len(self.triples),
            "nodes": len(self.graph.nodes) if self.graph is not None else 0,
            "edges": len(self.graph.edges) if self.graph is not None else 0,
            "writes_committed": self.writes_committed,
            "errors": len(self.errors),
            "warnings": len(self.warnings),
        }
