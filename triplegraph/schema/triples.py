"""
Triple definitions.

A Triple is the atomic extracted fact. Extraction either produces a Triple or
an ExtractionFailure describing why no fact was extracted.
"""

import json
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Triple(BaseModel):
    """
    Subject-relationship-object fact.

    Fields are compared as literal strings: "Paris" and "paris" are
    different subjects.
    """

    model_config = ConfigDict(frozen=True)

    subject: str = Field(..., min_length=1)
    object: str = Field(..., min_length=1)
    relationship: str = Field(..., min_length=1)

    def to_wire(self) -> dict[str, str]:
        """Return the triple using the keys the model is asked to produce."""
        return {
            "node": self.subject,
            "target_node": self.object,
            "relationship": self.relationship,
        }

    def key(self) -> str:
        """Canonical serialization used for deduplication."""
        return json.dumps(self.to_wire(), ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "Triple":
        return cls(
            subject=data["node"],
            object=data["target_node"],
            relationship=data["relationship"],
        )

    def __str__(self) -> str:
        return f"({self.subject})-[{self.relationship}]->({self.object})"


class ExtractionFailure(BaseModel):
    """No triple could be extracted from a model response."""

    model_config = ConfigDict(frozen=True)

    reason: str
    raw: Optional[Any] = None


ExtractionResult = Union[Triple, ExtractionFailure]
