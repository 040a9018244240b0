"""
Text chunk domain model.

Represents one contiguous, bounded-length slice of a document's text and the
embedding attached to it.

Dependencies: pydantic
System role: Unit of work for the chunk-and-embed pipeline
"""

from pydantic import BaseModel, ConfigDict, Field


class TextChunk(BaseModel):
    """Document chunk with an embedding that is written at most once."""

    model_config = ConfigDict(validate_assignment=True)

    content: str | None = Field(default=None, description="Chunk text (None chunks are skipped)")
    embedding: list[float] | None = Field(default=None, description="Embedding vector")
    document_reference: str = Field(description="Path, URL or other id of the source document")
    sequence_index: int = Field(default=0, ge=0, description="Position of the chunk in its document")

    @property
    def has_embedding(self) -> bool:
        return self.embedding is not None

    def attach_embedding(self, embedding: list[float]) -> None:
        """
        Set the embedding vector.

        Args:
            embedding: Vector returned by the provider

        Raises:
            ValueError: When the chunk already has an embedding
        """
        if self.embedding is not None:
            raise ValueError(
                f"Chunk {self.sequence_index} of {self.document_reference} already has an embedding"
            )
        self.embedding = list(embedding)
