"""
Recursive character text splitter.

Defaults follow the extraction runs this pipeline was built for:
- chunk_size: 1000 characters
- chunk_overlap: 200 characters
- separators: paragraph > newline > sentence > space
"""

from typing import Any, Optional

from langchain_text_splitters import RecursiveCharacterTextSplitter

from ..schema.chunks import Chunk


class Chunker:
    """
    Split raw text into overlapping chunks.

    Uses recursive character splitting with configurable separators.
    """

    # Default separators in priority order
    DEFAULT_SEPARATORS = [
        "\n\n",  # Paragraph
        "\n",  # Newline
        ". ",  # English period
        " ",  # Space
        "",  # Character (fallback)
    ]

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        separators: Optional[list[str]] = None,
    ) -> None:
        """
        Initialize chunker.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between chunks
            separators: Custom separators in priority order
        """
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.separators = separators or self.DEFAULT_SEPARATORS

        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            separators=self.separators,
            length_function=len,
            is_separator_regex=False,
        )

    def chunk(self, text: str, metadata: Optional[dict[str, Any]] = None) -> list[Chunk]:
        """
        Split text into chunks.

        Args:
            text: Document text to split
            metadata: Metadata copied onto every chunk

        Returns:
            List of Chunk objects, each tagged with its index
        """
        base = dict(metadata or {"source": "text"})
        docs = self._splitter.create_documents([text])

        return [
            Chunk(content=doc.page_content, metadata={**base, "chunk_index": i})
            for i, doc in enumerate(docs)
        ]
