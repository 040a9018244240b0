"""
Azure OpenAI embedding client.

Wraps openai.AsyncAzureOpenAI and maps SDK errors onto the pipeline's error
taxonomy: 401/403 become AuthorizationError, everything else from the SDK
becomes TransientProviderError.

Dependencies: openai
System role: Embedding provider adapter
"""

import logging

from openai import (
    APIConnectionError,
    APIError,
    APIStatusError,
    APITimeoutError,
    AsyncAzureOpenAI,
    AuthenticationError,
    PermissionDeniedError,
)

from docembed.core.document_processing.models import (
    EmbeddingItem,
    EmbeddingOptions,
    EmbeddingsResponse,
)
from docembed.core.exceptions import AuthorizationError, TransientProviderError

logger = logging.getLogger(__name__)


class AzureOpenAIEmbeddingClient:
    """EmbeddingClient backed by an Azure OpenAI deployment."""

    def __init__(self, client: AsyncAzureOpenAI) -> None:
        self._client = client

    async def get_embeddings(self, options: EmbeddingOptions) -> EmbeddingsResponse:
        """
        Request embeddings from Azure OpenAI.

        Args:
            options: Deployment name and input texts

        Returns:
            EmbeddingsResponse: Vectors in input order

        Raises:
            AuthorizationError: Credentials or permissions rejected
            TransientProviderError: Network, timeout, throttling or other API failure
        """
        try:
            response = await self._client.embeddings.create(
                model=options.deployment_name,
                input=list(options.input),
            )
        except (AuthenticationError, PermissionDeniedError) as e:
            raise AuthorizationError(
                f"Azure OpenAI rejected the request: {e.message}",
                status_code=e.status_code,
            ) from e
        except APITimeoutError as e:
            raise TransientProviderError(
                "Azure OpenAI request timed out",
                timed_out=True,
            ) from e
        except APIConnectionError as e:
            raise TransientProviderError(f"Azure OpenAI connection failed: {e.message}") from e
        except APIStatusError as e:
            raise TransientProviderError(
                f"Azure OpenAI returned an error: {e.message}",
                status_code=e.status_code,
            ) from e
        except APIError as e:
            raise TransientProviderError(f"Azure OpenAI request failed: {e.message}") from e

        if not response.data:
            raise TransientProviderError(
                "Azure OpenAI returned no embeddings",
                details={"deployment_name": options.deployment_name},
            )

        logger.debug(
            f"{__name__}:get_embeddings - Received {len(response.data)} embeddings "
            f"from {options.deployment_name}"
        )
        return EmbeddingsResponse(
            data=[
                EmbeddingItem(index=item.index, embedding=item.embedding)
                for item in response.data
            ],
            model=response.model,
        )
