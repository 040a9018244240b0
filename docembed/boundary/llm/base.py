"""
Embedding client protocol.

Dependencies: docembed.core.document_processing.models
System role: Outbound contract for remote embedding providers
"""

from typing import Protocol, runtime_checkable

from docembed.core.document_processing.models import EmbeddingOptions, EmbeddingsResponse


@runtime_checkable
class EmbeddingClient(Protocol):
    """Remote provider that turns input texts into embedding vectors."""

    async def get_embeddings(self, options: EmbeddingOptions) -> EmbeddingsResponse:
        """
        Request embeddings for options.input.

        Implementations raise errors from docembed.core.exceptions so the
        resilience policy can classify them.
        """
        ...
