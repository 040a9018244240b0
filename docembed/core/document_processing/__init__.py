"""
Chunk-and-embed pipeline.

Splits document text into bounded chunks and attaches embeddings from Azure
OpenAI, with retry and timeout around every remote call.

Dependencies: langchain_text_splitters, openai, tenacity, pydantic
System role: Document embedding entrypoint
"""

from .models import EmbeddingItem, EmbeddingOptions, EmbeddingsResponse, TextChunk
from .tasks import AzureOpenAIEmbedding, BaseEmbedding, ChunkingTask, break_into_chunks
from .factory import create_embedding

__all__ = [
    "AzureOpenAIEmbedding",
    "BaseEmbedding",
    "ChunkingTask",
    "EmbeddingItem",
    "EmbeddingOptions",
    "EmbeddingsResponse",
    "TextChunk",
    "break_into_chunks",
    "create_embedding",
]
