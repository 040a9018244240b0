"""
Embedding task using Azure OpenAI.

Breaks text into chunks and attaches an embedding to every chunk with content.
Each remote call runs through ResiliencePolicy. The deployment name is read
from DynamicConfiguration on every call.

Dependencies: docembed.boundary.llm, docembed.core.resilience, asyncio
System role: Second stage of the chunk-and-embed pipeline
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any

from docembed.boundary.llm import EmbeddingClient, LlmClientFactory
from docembed.configs import (
    AZURE_OPENAI_EMBEDDING_NAME_KEY,
    DynamicConfiguration,
    EmbeddingPipelineSettings,
)
from docembed.core.exceptions import (
    AuthorizationError,
    ConfigurationError,
    IngestionRequiredSignal,
    TransientProviderError,
)
from docembed.core.resilience import ResiliencePolicy
from docembed.observability import (
    LogEvents,
    log_exception_with_context,
    log_with_context,
)

from ..models import EmbeddingOptions, EmbeddingsResponse, TextChunk
from .chunking_task import ChunkingTask

logger = logging.getLogger(__name__)


class BaseEmbedding(ABC):
    """Chunk-and-embed interface."""

    @abstractmethod
    async def embed(
        self,
        full_text: str,
        doc_type: Any,
        document_reference: str,
        cancel_event: asyncio.Event | None = None,
    ) -> list[TextChunk]:
        """Break text into chunks and attach an embedding to each chunk."""

    @abstractmethod
    def get_embedding_options(self, text: str) -> EmbeddingOptions:
        """Build the remote request for one chunk of text."""


class AzureOpenAIEmbedding(BaseEmbedding):
    """Embed document chunks with an Azure OpenAI embedding deployment."""

    def __init__(
        self,
        config: DynamicConfiguration,
        client_factory: LlmClientFactory,
        policy: ResiliencePolicy | None = None,
        chunking_task: ChunkingTask | None = None,
        max_concurrency: int | None = None,
        settings: EmbeddingPipelineSettings | None = None,
    ) -> None:
        """
        Initialize embedder with injected collaborators.

        Args:
            config: Call-time configuration holding the deployment name
            client_factory: Factory for the remote embedding client
            policy: Resilience policy (built from settings if None)
            chunking_task: Chunker (built from settings if None)
            max_concurrency: Concurrent chunk calls (settings value if None)
            settings: Pipeline settings (loaded from environment only when a
                collaborator above is missing)

        Raises:
            ValueError: When max_concurrency is below 1
        """
        missing = policy is None or chunking_task is None or max_concurrency is None
        if settings is None and missing:
            settings = EmbeddingPipelineSettings()

        self._config = config
        self._client: EmbeddingClient = client_factory.create_embedding_client()
        self._policy = policy or ResiliencePolicy.from_settings(settings)
        self._chunking_task = chunking_task or ChunkingTask(settings.max_chunk_size)
        self._max_concurrency = (
            max_concurrency if max_concurrency is not None else settings.max_concurrency
        )
        if self._max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")

    async def embed(
        self,
        full_text: str,
        doc_type: Any,
        document_reference: str,
        cancel_event: asyncio.Event | None = None,
    ) -> list[TextChunk]:
        """
        Break text into chunks and add an embedding to each chunk with content.

        Args:
            full_text: Full document text
            doc_type: Document type used upstream for text extraction (unused here)
            document_reference: Where the document came from (path, url, ...)
            cancel_event: Optional event that stops in-flight and pending calls

        Returns:
            list[TextChunk]: Chunks in document order with embeddings attached

        Raises:
            ConfigurationError: Deployment name missing or blank
            AuthorizationError: Provider rejected credentials after retries
            TransientProviderError: Provider failure after retries
            IngestionRequiredSignal: Provider requested re-ingestion
            asyncio.CancelledError: cancel_event was set
        """
        chunks = self._chunking_task.chunk(full_text, document_reference)

        logger.info(
            f"{__name__}:embed - Embedding {len(chunks)} chunks for {document_reference}"
        )

        if self._max_concurrency == 1:
            for chunk in chunks:
                if cancel_event is not None and cancel_event.is_set():
                    raise asyncio.CancelledError()
                await self._embed_chunk(chunk, cancel_event)
        else:
            await self._embed_concurrently(chunks, cancel_event)

        return chunks

    def get_embedding_options(self, text: str) -> EmbeddingOptions:
        """
        Embedding options for Azure OpenAI.

        Args:
            text: Chunk text to embed

        Returns:
            EmbeddingOptions: Deployment name plus the single input text

        Raises:
            ConfigurationError: Deployment name missing or blank
        """
        embedding_name = self._config.get(AZURE_OPENAI_EMBEDDING_NAME_KEY)
        if embedding_name is None or not embedding_name.strip():
            log_with_context(
                logger,
                logging.ERROR,
                f"{__name__}:get_embedding_options - Embedding deployment name is not configured",
                event=LogEvents.CONFIGURATION_FAILURE,
                key=AZURE_OPENAI_EMBEDDING_NAME_KEY,
            )
            raise ConfigurationError(
                "Embedding deployment name is missing or blank",
                key=AZURE_OPENAI_EMBEDDING_NAME_KEY,
            )

        return EmbeddingOptions(deployment_name=embedding_name, input=[text])

    async def _embed_chunk(
        self,
        chunk: TextChunk,
        cancel_event: asyncio.Event | None,
    ) -> None:
        """
        Embed one chunk in place, skipping chunks without content.

        Provider failures that carry an HTTP status (AuthorizationError, or a
        TransientProviderError with status_code) are logged with the
        authorization-failure event before being re-raised.
        """
        if chunk.content is None:
            log_with_context(
                logger,
                logging.DEBUG,
                f"{__name__}:_embed_chunk - Skipping chunk without content",
                event=LogEvents.CHUNK_SKIPPED,
                document_reference=chunk.document_reference,
                chunk_index=chunk.sequence_index,
            )
            return

        options = self.get_embedding_options(chunk.content)

        async def request() -> EmbeddingsResponse:
            response = await self._client.get_embeddings(options)
            if not response.data:
                raise TransientProviderError(
                    "Embedding response contained no results",
                    details={"document_reference": chunk.document_reference},
                )
            return response

        try:
            response = await self._policy.execute(
                request,
                cancel_event=cancel_event,
                operation_name="get_embeddings",
            )
        except (AuthorizationError, TransientProviderError) as e:
            if isinstance(e, AuthorizationError) or e.status_code is not None:
                log_exception_with_context(
                    logger,
                    "Please check credentials and exception details for more info.",
                    e,
                    event=LogEvents.AUTHORIZATION_FAILURE,
                    document_reference=chunk.document_reference,
                    chunk_index=chunk.sequence_index,
                    status_code=e.status_code,
                )
            raise
        except IngestionRequiredSignal:
            log_with_context(
                logger,
                logging.INFO,
                f"{__name__}:_embed_chunk - Provider requested re-ingestion",
                event=LogEvents.INGESTION_REQUIRED,
                document_reference=chunk.document_reference,
                chunk_index=chunk.sequence_index,
            )
            raise

        chunk.attach_embedding(response.data[0].embedding)

    async def _embed_concurrently(
        self,
        chunks: list[TextChunk],
        cancel_event: asyncio.Event | None,
    ) -> None:
        """
        Embed chunks with bounded concurrency.

        Each task writes only its own chunk, so list order is preserved. The
        first failure cancels every sibling and is re-raised.
        """
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def run(chunk: TextChunk) -> None:
            async with semaphore:
                if cancel_event is not None and cancel_event.is_set():
                    raise asyncio.CancelledError()
                await self._embed_chunk(chunk, cancel_event)

        tasks = [asyncio.ensure_future(run(chunk)) for chunk in chunks]
        if not tasks:
            return

        try:
            done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        except asyncio.CancelledError:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        if pending:
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

        # Report the failure of the earliest chunk that failed
        for task in tasks:
            if task.done() and not task.cancelled() and task.exception() is not None:
                raise task.exception()
        for task in tasks:
            if task.cancelled() and task in done:
                raise asyncio.CancelledError()
