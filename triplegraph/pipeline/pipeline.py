"""
Main extraction pipeline.

chunks → summarize → extract (throttled) → deduplicate → materialize

Each stage consumes the previous stage's full output. Model calls run one at
a time; per-chunk failures are recorded and skipped.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, TypeVar

from neo4j.exceptions import DriverError, Neo4jError

from ..agents.base import DEFAULT_MODEL
from ..agents.summarizer import ChunkSummarizer
from ..agents.triple_extractor import TripleExtractor
from ..chunking.chunker import Chunker
from ..errors import MaterializationError, TripleGraphError
from ..extraction.deduplicator import TripleSet
from ..extraction.throttle import Throttle
from ..materialize.materializer import GraphMaterializer, check_identifier
from ..schema.chunks import Chunk, Summary
from ..schema.triples import ExtractionFailure, Triple
from ..store.neo4j_store import GraphConnection, Neo4jConfig, Neo4jConnection, open_session
from .state import PipelineStage, PipelineState

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class PipelineConfig:
    """Pipeline configuration."""

    # LLM (LiteLLM format)
    model: str = DEFAULT_MODEL
    max_tokens: int = 1024
    temperature: float = 0.0

    # Pause between model calls, in seconds
    throttle_seconds: float = 1.0

    # Chunking (run_text only)
    chunk_size: int = 1000
    chunk_overlap: int = 200

    # Graph records
    node_label: str = "Entity"
    relationship_type: str = "RELATION"

    def __post_init__(self) -> None:
        check_identifier(self.node_label)
        check_identifier(self.relationship_type)


def _default_connection() -> GraphConnection:
    return Neo4jConnection(Neo4jConfig.from_env())


class Pipeline:
    """
    Triple extraction and materialization pipeline.

    Collaborators are created once and passed in; nothing is held in module
    globals. The graph store connection is opened only for the
    materialization stage and always released before run() returns.
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        connect: Callable[[], GraphConnection] = _default_connection,
        summarizer: Optional[ChunkSummarizer] = None,
        extractor: Optional[TripleExtractor] = None,
        throttle: Optional[Throttle] = None,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            config: Pipeline configuration
            connect: Opens a graph store connection; called once per run
            summarizer: Chunk summarizer (built from config by default)
            extractor: Triple extractor (built from config by default)
            throttle: Call throttle (built from config by default)
        """
        self.config = config or PipelineConfig()
        self.connect = connect

        llm_params = {
            "model": self.config.model,
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
        }
        self.summarizer = summarizer or ChunkSummarizer(**llm_params)
        self.extractor = extractor or TripleExtractor(**llm_params)
        self.throttle = throttle or Throttle(self.config.throttle_seconds)

    def run(self, chunks: Iterable[Chunk], materialize: bool = True) -> PipelineState:
        """
        Run the pipeline over a batch of chunks.

        Args:
            chunks: Chunks to process, in order
            materialize: Write to the graph store; False stops after
                deduplication

        Returns:
            Final pipeline state. A failed materialization is reported in
            state.errors and the ERROR stage, not raised.
        """
        state = PipelineState(chunks=list(chunks))
        total = len(state.chunks)

        # Stage 1: Summarize
        state.advance_to(PipelineStage.SUMMARIZING)
        summaries: list[tuple[int, Summary]] = []
        for i, chunk in enumerate(state.chunks):
            state.current_chunk_index = i
            summary = self._call(state, i, chunk, self.summarizer.summarize, chunk)
            if summary is not None:
                summaries.append((i, summary))
        state.log(f"Summarized {len(summaries)}/{total} chunks")

        # Stage 2: Extract
        state.advance_to(PipelineStage.EXTRACTING)
        extracted: list[Triple] = []
        for i, summary in summaries:
            state.current_chunk_index = i
            logger.info("Extracting triple from chunk %d/%d", i + 1, total)
            result = self._call(state, i, summary.chunk, self.extractor.extract, summary.text)
            state.chunks_processed += 1
            if result is None:
                continue
            if isinstance(result, ExtractionFailure):
                state.add_warning(f"No triple extracted from chunk {i} ({result.reason})")
                continue
            extracted.append(result)
        state.triples_extracted = len(extracted)

        # Stage 3: Deduplicate
        state.advance_to(PipelineStage.DEDUPLICATING)
        state.triples = TripleSet(extracted)
        state.log(f"Unique triples: {len(state.triples)} of {len(extracted)}")

        # Stage 4: Materialize
        if materialize and len(state.triples):
            state.advance_to(PipelineStage.MATERIALIZING)
            if not self._materialize(state):
                return state
        elif materialize:
            state.log("No triples to materialize")

        state.advance_to(PipelineStage.COMPLETED)
        state.log(f"Completed: {state.summary()}")
        logger.info("Pipeline completed: %s", state.summary())
        return state

    def run_text(
        self,
        text: str,
        metadata: Optional[dict[str, Any]] = None,
        materialize: bool = True,
    ) -> PipelineState:
        """
        Chunk raw text and run the pipeline on it.

        Args:
            text: Text content to process
            metadata: Metadata attached to every chunk
            materialize: Write to the graph store

        Returns:
            Final pipeline state
        """
        chunker = Chunker(
            chunk_size=self.config.chunk_size,
            chunk_overlap=self.config.chunk_overlap,
        )
        return self.run(chunker.chunk(text, metadata), materialize=materialize)

    def _call(
        self,
        state: PipelineState,
        index: int,
        chunk: Chunk,
        fn: Callable[..., T],
        *args: Any,
    ) -> Optional[T]:
        """Make one throttled model call, recording a failure instead of raising."""
        try:
            return fn(*args)
        except Exception as e:
            logger.error("Model call failed for chunk %d: %s", index, e)
            state.add_failure(index, chunk, e)
            return None
        finally:
            self.throttle.wait()

    def _materialize(self, state: PipelineState) -> bool:
        try:
            with open_session(self.connect) as session:
                materializer = GraphMaterializer(
                    session,
                    label=self.config.node_label,
                    relationship=self.config.relationship_type,
                )
                state.graph = materializer.materialize(state.triples)
                state.writes_committed = materializer.writes
        except MaterializationError as e:
            state.graph = e.graph
            state.writes_committed = e.writes_committed
            self._fail(state, f"Materialization failed: {e}")
            return False
        except (TripleGraphError, Neo4jError, DriverError) as e:
            self._fail(state, f"Graph store unavailable: {e}")
            return False

        state.log(f"Materialized {state.graph.summary()}")
        return True

    def _fail(self, state: PipelineState, message: str) -> None:
        logger.error(message)
        state.add_error(message)
        state.advance_to(PipelineStage.ERROR)
