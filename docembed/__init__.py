"""
docembed: chunk document text and attach embeddings from a remote provider.

Exports the embedder entry points and the text chunk model.
"""

from docembed.core.document_processing import (
    AzureOpenAIEmbedding,
    BaseEmbedding,
    TextChunk,
    break_into_chunks,
    create_embedding,
)

__all__ = [
    "AzureOpenAIEmbedding",
    "BaseEmbedding",
    "TextChunk",
    "break_into_chunks",
    "create_embedding",
]
