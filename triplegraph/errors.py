"""
Error types raised by triplegraph.

Malformed model output is not an error: the triple extractor returns an
ExtractionFailure value instead.
"""

from typing import Any, Optional


class TripleGraphError(Exception):
    """Base class for triplegraph errors."""


class ConfigError(TripleGraphError):
    """Required configuration is missing or invalid."""


class MaterializationError(TripleGraphError):
    """
    A graph store write failed during materialization.

    Writes issued before the failure are not rolled back.
    """

    def __init__(
        self,
        message: str,
        graph: Optional[Any] = None,
        writes_committed: int = 0,
    ) -> None:
        super().__init__(message)
        self.graph = graph
        self.writes_committed = writes_committed
