"""
Triple extraction agent.

Asks the model for the single most salient relationship in a text and
validates the JSON it returns. The model is not bound to the requested
schema, so anything that does not validate becomes an ExtractionFailure
rather than an exception.
"""

import json
import logging
import re
from typing import Any

from ..schema.triples import ExtractionFailure, ExtractionResult, Triple
from .base import BaseAgent

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("node", "target_node", "relationship")

_FENCE = re.compile(r"```json|```")


def strip_code_fence(text: str) -> str:
    """
    Remove a ```json fence wrapped around a response.

    Only responses that start with the ```json marker are touched.
    """
    text = text.strip()
    if text.startswith("```json"):
        text = _FENCE.sub("", text).strip()
    return text


def validate_triple(data: Any) -> ExtractionResult:
    """
    Check a parsed response and build a Triple from it.

    Args:
        data: Value produced by json.loads

    Returns:
        Triple, or ExtractionFailure("invalid_shape") if the value is not an
        object with non-empty string node/target_node/relationship fields
    """
    if not isinstance(data, dict):
        return ExtractionFailure(reason="invalid_shape", raw=data)

    for key in REQUIRED_KEYS:
        value = data.get(key)
        if not isinstance(value, str) or not value.strip():
            return ExtractionFailure(reason="invalid_shape", raw=data)

    return Triple.from_wire(data)


class TripleExtractor(BaseAgent):
    """
    Extract one subject-relationship-object triple from a text.

    The input is normally a chunk summary.
    """

    PROMPT_TEMPLATE = """You are a precise graph relationship extractor.
Extract a single relationship from the text and format it as a JSON object with this exact structure:

{{
  "node": "Person/Entity",
  "target_node": "Related Entity",
  "relationship": "Type of Relationship"
}}

Identify the MOST salient relationship mentioned in the text. Be precise.

Now, here's the text:
{text}
"""

    def format_input(self, text: str, **kwargs: Any) -> str:
        return self.PROMPT_TEMPLATE.format(text=text)

    def parse_output(self, response: str, **kwargs: Any) -> ExtractionResult:
        """
        Parse LLM response into a Triple.

        Args:
            response: Raw LLM response text

        Returns:
            Triple, or ExtractionFailure when the response is not valid JSON
            or does not have the expected shape
        """
        raw_text = strip_code_fence(response)

        try:
            data = json.loads(raw_text)
        except json.JSONDecodeError:
            logger.warning("Failed to parse triple JSON: %r", raw_text)
            return ExtractionFailure(reason="invalid_json", raw=raw_text)

        result = validate_triple(data)
        if isinstance(result, ExtractionFailure):
            logger.warning(
                "Parsed JSON does not match expected triple format: %r", data
            )
        return result

    def extract(self, text: str) -> ExtractionResult:
        """Extract a triple from text. Model errors propagate."""
        return self.execute(text=text)
