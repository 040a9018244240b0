"""
Models for the chunk-and-embed pipeline.

Exports: TextChunk, EmbeddingOptions, EmbeddingItem, EmbeddingsResponse
"""

from .embedding_request import EmbeddingItem, EmbeddingOptions, EmbeddingsResponse
from .text_chunk import TextChunk

__all__ = [
    "TextChunk",
    "EmbeddingOptions",
    "EmbeddingItem",
    "EmbeddingsResponse",
]
