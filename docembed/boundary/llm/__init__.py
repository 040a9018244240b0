"""
Remote embedding provider adapters.

Exports: EmbeddingClient, AzureOpenAIEmbeddingClient, LlmClientFactory
"""

from .azure_openai_client import AzureOpenAIEmbeddingClient
from .base import EmbeddingClient
from .client_factory import LlmClientFactory

__all__ = [
    "EmbeddingClient",
    "AzureOpenAIEmbeddingClient",
    "LlmClientFactory",
]
