"""
LLM client factory.

Builds SDK clients from AzureOpenAISettings so the embedder never touches
credentials directly.

Dependencies: openai, python-dotenv, docembed.configs
System role: Remote client instantiation
"""

import logging

from dotenv import load_dotenv
from openai import AsyncAzureOpenAI

from docembed.configs import AzureOpenAISettings
from docembed.core.exceptions import ConfigurationError

from .azure_openai_client import AzureOpenAIEmbeddingClient
from .base import EmbeddingClient

load_dotenv()

logger = logging.getLogger(__name__)


class LlmClientFactory:
    """Create remote provider clients from settings."""

    def __init__(self, settings: AzureOpenAISettings | None = None) -> None:
        """
        Initialize factory.

        Args:
            settings: Azure OpenAI settings (loaded from environment if None)
        """
        self._settings = settings or AzureOpenAISettings()

    def create_openai_client(self) -> AsyncAzureOpenAI:
        """
        Create the Azure OpenAI SDK client.

        Returns:
            AsyncAzureOpenAI: Configured async client

        Raises:
            ConfigurationError: When the API key or endpoint is missing
        """
        if not self._settings.api_key or not self._settings.api_key.strip():
            raise ConfigurationError(
                "Azure OpenAI API key is not configured",
                key="AZURE_OPENAI_API_KEY",
            )
        if not self._settings.endpoint or not self._settings.endpoint.strip():
            raise ConfigurationError(
                "Azure OpenAI endpoint is not configured",
                key="AZURE_OPENAI_ENDPOINT",
            )

        logger.info(
            f"{__name__}:create_openai_client - Creating client for "
            f"endpoint={self._settings.endpoint}, api_version={self._settings.api_version}"
        )
        # Retries and timeouts are owned by ResiliencePolicy
        return AsyncAzureOpenAI(
            api_key=self._settings.api_key,
            azure_endpoint=self._settings.endpoint,
            api_version=self._settings.api_version,
            max_retries=0,
        )

    def create_embedding_client(self) -> EmbeddingClient:
        """Create the embedding client used by the embedder."""
        return AzureOpenAIEmbeddingClient(self.create_openai_client())
