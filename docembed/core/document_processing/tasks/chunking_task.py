"""
Text chunking task.

Splits full document text into paragraph chunks, breaking paragraphs that
exceed the size ceiling with RecursiveCharacterTextSplitter. The policy is
deterministic: identical text always yields identical chunks.

Dependencies: langchain_text_splitters
System role: First stage of the chunk-and-embed pipeline
"""

import re

from langchain_text_splitters import RecursiveCharacterTextSplitter

from docembed.core.constants import MAX_CHUNK_SIZE

from ..models import TextChunk

_PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n\s*")
_SEPARATORS = ["\n", ". ", "? ", "! ", "; ", ", ", " ", ""]


class ChunkingTask:
    """Split text into ordered, size-bounded TextChunks."""

    def __init__(self, max_chunk_size: int = MAX_CHUNK_SIZE) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            max_chunk_size: Maximum chunk size in characters

        Raises:
            ValueError: When max_chunk_size is not in 1..MAX_CHUNK_SIZE
        """
        if not 0 < max_chunk_size <= MAX_CHUNK_SIZE:
            raise ValueError(
                f"max_chunk_size must be between 1 and {MAX_CHUNK_SIZE}, got {max_chunk_size}"
            )
        self.max_chunk_size = max_chunk_size
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=max_chunk_size,
            chunk_overlap=0,
            separators=_SEPARATORS,
            keep_separator="end",
            length_function=len,
        )

    def chunk(self, full_text: str, document_reference: str) -> list[TextChunk]:
        """
        Split text into chunks.

        Args:
            full_text: Flat document text (may be empty)
            document_reference: Label copied into every chunk

        Returns:
            list[TextChunk]: Chunks in document order, empty for blank text
        """
        if not full_text or not full_text.strip():
            return []

        pieces: list[str] = []
        for paragraph in self._paragraphs(full_text):
            if len(paragraph) <= self.max_chunk_size:
                pieces.append(paragraph)
            else:
                pieces.extend(self._split_long(paragraph))

        return [
            TextChunk(
                content=piece,
                document_reference=document_reference,
                sequence_index=index,
            )
            for index, piece in enumerate(pieces)
        ]

    def _paragraphs(self, full_text: str) -> list[str]:
        normalized = full_text.replace("\r\n", "\n").replace("\r", "\n")
        stripped = (part.strip() for part in _PARAGRAPH_BREAK.split(normalized))
        return [part for part in stripped if part]

    def _split_long(self, paragraph: str) -> list[str]:
        pieces = []
        for piece in self._splitter.split_text(paragraph):
            # Single runs longer than the ceiling are cut by position
            for start in range(0, len(piece), self.max_chunk_size):
                segment = piece[start:start + self.max_chunk_size].strip()
                if segment:
                    pieces.append(segment)
        return pieces


_DEFAULT_TASK = ChunkingTask()


def break_into_chunks(full_text: str, document_reference: str) -> list[TextChunk]:
    """
    Break text into chunks using the default MAX_CHUNK_SIZE ceiling.

    Args:
        full_text: Flat document text (may be empty)
        document_reference: Label copied into every chunk

    Returns:
        list[TextChunk]: Chunks in document order
    """
    return _DEFAULT_TASK.chunk(full_text, document_reference)
