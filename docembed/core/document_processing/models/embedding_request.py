"""
Request and response models for the remote embedding provider.

Dependencies: pydantic
System role: Wire contract between the embedder and provider adapters
"""

from pydantic import BaseModel, ConfigDict, Field


class EmbeddingOptions(BaseModel):
    """Embedding request: deployment name plus ordered input texts."""

    model_config = ConfigDict(frozen=True)

    deployment_name: str = Field(min_length=1, description="Model deployment identifier")
    input: list[str] = Field(min_length=1, description="Texts to embed, in order")


class EmbeddingItem(BaseModel):
    """Single embedding result."""

    index: int = Field(default=0, description="Position of the matching input text")
    embedding: list[float] = Field(description="Embedding vector")


class EmbeddingsResponse(BaseModel):
    """Provider response; results are ordered like the request inputs."""

    data: list[EmbeddingItem] = Field(default_factory=list)
    model: str | None = Field(default=None, description="Model reported by the provider")
