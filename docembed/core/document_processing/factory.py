"""
Embedder factory.

Configures logging and wires the default configuration, client factory and
resilience policy.

Dependencies: docembed.configs, docembed.boundary.llm, docembed.observability
System role: Embedder instantiation
"""

import logging

from docembed.boundary.llm import LlmClientFactory
from docembed.configs import EnvironmentConfiguration, Settings, get_settings
from docembed.core.resilience import ResiliencePolicy
from docembed.observability import configure_logging

from .tasks import AzureOpenAIEmbedding

logger = logging.getLogger(__name__)


def create_embedding(settings: Settings | None = None) -> AzureOpenAIEmbedding:
    """
    Create an embedder configured from the environment.

    Args:
        settings: Application settings (cached settings if None)

    Returns:
        AzureOpenAIEmbedding: Embedder reading its deployment name at call time

    Raises:
        ConfigurationError: When Azure OpenAI credentials are missing
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    pipeline_settings = settings.embedding_pipeline

    logger.info(
        f"{__name__}:create_embedding - timeout={pipeline_settings.timeout_seconds}s, "
        f"retry_budget={pipeline_settings.retry_budget}, "
        f"max_concurrency={pipeline_settings.max_concurrency}"
    )
    return AzureOpenAIEmbedding(
        config=EnvironmentConfiguration(),
        client_factory=LlmClientFactory(settings.azure_openai),
        policy=ResiliencePolicy.from_settings(pipeline_settings),
        settings=pipeline_settings,
    )
