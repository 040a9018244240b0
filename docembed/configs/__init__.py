"""
Configuration management module.

Provides type-safe configuration using Pydantic Settings and the call-time
configuration lookup used by the embedder.
"""

from docembed.configs.azure_openai import AzureOpenAISettings
from docembed.configs.dynamic import (
    AZURE_OPENAI_EMBEDDING_NAME_KEY,
    DynamicConfiguration,
    EnvironmentConfiguration,
    MappingConfiguration,
)
from docembed.configs.embedding_pipeline import EmbeddingPipelineSettings
from docembed.configs.settings import Settings, get_settings

__all__ = [
    "AZURE_OPENAI_EMBEDDING_NAME_KEY",
    "AzureOpenAISettings",
    "DynamicConfiguration",
    "EmbeddingPipelineSettings",
    "EnvironmentConfiguration",
    "MappingConfiguration",
    "Settings",
    "get_settings",
]
