"""Tests for LlmClientFactory."""

from unittest.mock import patch

import pytest

from docembed.boundary.llm import AzureOpenAIEmbeddingClient, LlmClientFactory
from docembed.configs import AzureOpenAISettings
from docembed.core.exceptions import ConfigurationError


class TestLlmClientFactory:
    """Tests for SDK client construction."""

    def test_creates_client_with_settings(self) -> None:
        """Should pass credentials to AsyncAzureOpenAI and disable SDK retries."""
        settings = AzureOpenAISettings(
            api_key="test-key",
            endpoint="https://my-resource.openai.azure.com",
            api_version="2024-02-01",
        )
        with patch("docembed.boundary.llm.client_factory.AsyncAzureOpenAI") as mock_azure:
            LlmClientFactory(settings).create_openai_client()

        mock_azure.assert_called_once_with(
            api_key="test-key",
            azure_endpoint="https://my-resource.openai.azure.com",
            api_version="2024-02-01",
            max_retries=0,
        )

    def test_create_embedding_client_wraps_sdk_client(self) -> None:
        settings = AzureOpenAISettings(api_key="k", endpoint="https://e.openai.azure.com")
        with patch("docembed.boundary.llm.client_factory.AsyncAzureOpenAI"):
            client = LlmClientFactory(settings).create_embedding_client()

        assert isinstance(client, AzureOpenAIEmbeddingClient)

    def test_loads_settings_from_environment(self) -> None:
        env = {
            "AZURE_OPENAI_API_KEY": "env-key",
            "AZURE_OPENAI_ENDPOINT": "https://env-resource.openai.azure.com",
        }
        with patch.dict("os.environ", env, clear=True):
            with patch("docembed.boundary.llm.client_factory.AsyncAzureOpenAI") as mock_azure:
                LlmClientFactory().create_openai_client()

        assert mock_azure.call_args.kwargs["api_key"] == "env-key"

    @pytest.mark.parametrize(
        ("api_key", "endpoint", "missing"),
        [
            (None, "https://e.openai.azure.com", "AZURE_OPENAI_API_KEY"),
            ("  ", "https://e.openai.azure.com", "AZURE_OPENAI_API_KEY"),
            ("key", None, "AZURE_OPENAI_ENDPOINT"),
        ],
    )
    def test_missing_credentials_raise(self, api_key, endpoint, missing) -> None:
        settings = AzureOpenAISettings(api_key=api_key, endpoint=endpoint)

        with pytest.raises(ConfigurationError) as exc_info:
            LlmClientFactory(settings).create_openai_client()

        assert exc_info.value.key == missing
