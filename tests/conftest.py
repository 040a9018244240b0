"""
Shared test fixtures and configuration for entire test suite.

Provides: Fake embedding clients, client factory doubles, fast resilience policy
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import asyncio
from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from docembed.configs import AZURE_OPENAI_EMBEDDING_NAME_KEY, MappingConfiguration
from docembed.core.document_processing.models import (
    EmbeddingItem,
    EmbeddingOptions,
    EmbeddingsResponse,
)
from docembed.core.resilience import ResiliencePolicy


class FakeEmbeddingClient:
    """
    In-memory EmbeddingClient.

    Records every request. Behaviour per call comes from ``responder``, which
    receives the options and returns a vector or raises.
    """

    def __init__(
        self,
        responder: Callable[[EmbeddingOptions], list[float]] | None = None,
        delay: float = 0.0,
    ) -> None:
        self.calls: list[EmbeddingOptions] = []
        self._responder = responder or (lambda options: [0.1, 0.2])
        self._delay = delay

    async def get_embeddings(self, options: EmbeddingOptions) -> EmbeddingsResponse:
        self.calls.append(options)
        if self._delay:
            await asyncio.sleep(self._delay)
        vector = self._responder(options)
        return EmbeddingsResponse(data=[EmbeddingItem(index=0, embedding=vector)])


@pytest.fixture
def fake_client() -> FakeEmbeddingClient:
    """Fake client returning [0.1, 0.2] for every call."""
    return FakeEmbeddingClient()


@pytest.fixture
def make_factory() -> Callable[[object], MagicMock]:
    """Build a LlmClientFactory double that hands out the given client."""

    def _make(client: object) -> MagicMock:
        factory = MagicMock()
        factory.create_embedding_client.return_value = client
        return factory

    return _make


@pytest.fixture
def config() -> MappingConfiguration:
    """Configuration holding an embedding deployment name."""
    return MappingConfiguration({AZURE_OPENAI_EMBEDDING_NAME_KEY: "text-embedding-ada-002"})


@pytest.fixture
def fast_policy() -> ResiliencePolicy:
    """Default retry budget and timeout with no delay between attempts."""
    return ResiliencePolicy(timeout_seconds=7.0, retry_budget=3, retry_delay_seconds=0)
