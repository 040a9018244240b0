"""
Embedding pipeline configuration settings.

Resilience and chunking knobs for the chunk-and-embed pipeline.

Dependencies: pydantic_settings
System role: Pipeline tuning configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docembed.configs.base import DocembedSettings
from docembed.core.constants import (
    DEFAULT_RETRY_BUDGET,
    DEFAULT_RETRY_DELAY_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    MAX_CHUNK_SIZE,
)


class EmbeddingPipelineSettings(DocembedSettings):
    """Settings for the chunk-and-embed pipeline."""

    model_config = SettingsConfigDict(env_prefix="EMBEDDING_PIPELINE_")

    # Resilience settings
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Maximum duration of a single remote call attempt",
    )
    retry_budget: int = Field(
        default=DEFAULT_RETRY_BUDGET,
        ge=0,
        description="Retries after the first attempt (total attempts = budget + 1)",
    )
    retry_delay_seconds: float = Field(
        default=DEFAULT_RETRY_DELAY_SECONDS,
        ge=0,
        description="Constant delay between attempts",
    )

    # Chunking settings
    max_chunk_size: int = Field(
        default=MAX_CHUNK_SIZE,
        gt=0,
        le=MAX_CHUNK_SIZE,
        description="Maximum chunk size in characters",
    )

    # Concurrency settings
    max_concurrency: int = Field(
        default=1,
        ge=1,
        description="Concurrent chunk calls per document (1 = sequential)",
    )
