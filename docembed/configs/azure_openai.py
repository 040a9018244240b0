"""
Azure OpenAI configuration settings.

Credentials and the embedding deployment name for the Azure OpenAI resource.

Dependencies: pydantic_settings
System role: Remote embedding provider configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docembed.configs.base import DocembedSettings


class AzureOpenAISettings(DocembedSettings):
    """Azure OpenAI resource configuration."""

    model_config = SettingsConfigDict(env_prefix="AZURE_OPENAI_")

    api_key: str | None = Field(
        default=None,
        description="Azure OpenAI API key",
    )
    endpoint: str | None = Field(
        default=None,
        description="Azure OpenAI resource endpoint (https://<name>.openai.azure.com)",
    )
    api_version: str = Field(
        default="2024-02-01",
        description="Azure OpenAI REST API version",
    )
    embedding_name: str | None = Field(
        default=None,
        description="Embedding model deployment name",
    )
