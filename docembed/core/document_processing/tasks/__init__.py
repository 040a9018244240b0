"""
Task modules for the chunk-and-embed pipeline.

Exports: ChunkingTask, break_into_chunks, BaseEmbedding, AzureOpenAIEmbedding
"""

from .chunking_task import ChunkingTask, break_into_chunks
from .embedding_task import AzureOpenAIEmbedding, BaseEmbedding

__all__ = [
    "ChunkingTask",
    "break_into_chunks",
    "BaseEmbedding",
    "AzureOpenAIEmbedding",
]
