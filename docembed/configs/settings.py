"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from docembed.configs.azure_openai import AzureOpenAISettings
from docembed.configs.base import DocembedSettings
from docembed.configs.embedding_pipeline import EmbeddingPipelineSettings


class Settings(DocembedSettings):
    """Unified application settings aggregating all config modules."""

    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging",
    )
    azure_openai: AzureOpenAISettings = Field(default_factory=AzureOpenAISettings)
    embedding_pipeline: EmbeddingPipelineSettings = Field(
        default_factory=EmbeddingPipelineSettings
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Used for startup wiring. The embedding deployment name is read through
    DynamicConfiguration on every call instead.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
