"""
Chunk summarization agent.

Produces a short "Title: ... / Summary: ..." text for each chunk. The two-line
format is requested but not enforced; the response is passed on as-is.
"""

from typing import Any

from ..schema.chunks import Chunk, Summary
from .base import BaseAgent


class ChunkSummarizer(BaseAgent):
    """Summarize a chunk into a title and a one-sentence summary."""

    PROMPT_TEMPLATE = """For the following text:
1. Generate a short and clear Title (max 10 words).
2. Summarize the main idea in one sentence (max 30 words).

Text:
{text}

Format the output strictly like this:

Title: [your generated title]
Summary: [your generated summary]
"""

    def format_input(self, chunk: Chunk, **kwargs: Any) -> str:
        return self.PROMPT_TEMPLATE.format(text=chunk.content)

    def parse_output(self, response: str, chunk: Chunk, **kwargs: Any) -> Summary:
        return Summary(chunk=chunk, text=response)

    def summarize(self, chunk: Chunk) -> Summary:
        """Summarize one chunk. Model errors propagate."""
        return self.execute(chunk=chunk)
