"""
Chunk and summary definitions.

Chunks come from the chunker (or any external source) and are consumed once
per pipeline run.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Chunk:
    """A bounded segment of source text."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Summary:
    """Title and summary generated for a chunk."""

    chunk: Chunk
    text: str
