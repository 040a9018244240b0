"""
Resilience policy for remote embedding calls.

Composes a per-attempt timeout inside a bounded retry loop. Retry is outermost,
so every attempt (including retries) gets its own time limit. Failures tagged
INGESTION_REQUIRED are never retried; everything else is retried until the
budget runs out and the last failure is re-raised.

Dependencies: tenacity, asyncio
System role: Retry + timeout wrapper around a single remote call
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_fixed,
)

from docembed.configs.embedding_pipeline import EmbeddingPipelineSettings
from docembed.core.constants import (
    DEFAULT_RETRY_BUDGET,
    DEFAULT_RETRY_DELAY_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
)
from docembed.core.exceptions import ErrorKind, TransientProviderError, error_kind
from docembed.observability import LogEvents, log_with_context

logger = logging.getLogger(__name__)

T = TypeVar("T")


def should_retry(exc: BaseException) -> bool:
    """
    Decide whether a failed attempt may be retried.

    Cancellation and other BaseExceptions are never retried, nor is the
    ingestion-required signal. Every other Exception is retried.
    """
    if not isinstance(exc, Exception):
        return False
    return error_kind(exc) is not ErrorKind.INGESTION_REQUIRED


async def _race_cancellation(
    awaitable: Awaitable[T],
    cancel_event: asyncio.Event,
) -> T:
    """Await awaitable unless cancel_event fires first."""
    work = asyncio.ensure_future(awaitable)
    waiter = asyncio.ensure_future(cancel_event.wait())
    try:
        done, _ = await asyncio.wait(
            {work, waiter},
            return_when=asyncio.FIRST_COMPLETED,
        )
    finally:
        for task in (work, waiter):
            if not task.done():
                task.cancel()

    if work in done:
        return work.result()
    raise asyncio.CancelledError()


class ResiliencePolicy:
    """Retry-on-error plus per-attempt timeout for one remote call."""

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        retry_budget: int = DEFAULT_RETRY_BUDGET,
        retry_delay_seconds: float = DEFAULT_RETRY_DELAY_SECONDS,
    ) -> None:
        """
        Initialize policy.

        Args:
            timeout_seconds: Time limit for each attempt
            retry_budget: Retries after the first attempt
            retry_delay_seconds: Constant delay between attempts

        Raises:
            ValueError: When any limit is out of range
        """
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if retry_budget < 0:
            raise ValueError("retry_budget cannot be negative")
        if retry_delay_seconds < 0:
            raise ValueError("retry_delay_seconds cannot be negative")

        self.timeout_seconds = timeout_seconds
        self.retry_budget = retry_budget
        self.retry_delay_seconds = retry_delay_seconds

    @classmethod
    def from_settings(cls, settings: EmbeddingPipelineSettings) -> "ResiliencePolicy":
        """Build a policy from pipeline settings."""
        return cls(
            timeout_seconds=settings.timeout_seconds,
            retry_budget=settings.retry_budget,
            retry_delay_seconds=settings.retry_delay_seconds,
        )

    @property
    def max_attempts(self) -> int:
        return self.retry_budget + 1

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        cancel_event: asyncio.Event | None = None,
        operation_name: str = "remote_call",
    ) -> T:
        """
        Run operation under the policy.

        Args:
            operation: Zero-argument factory returning a fresh awaitable per attempt
            cancel_event: Optional event that aborts the current and future attempts
            operation_name: Label used in log records

        Returns:
            The operation result from the first successful attempt

        Raises:
            asyncio.CancelledError: cancel_event was set
            Exception: The last failure once retries are exhausted, or the
                first non-retryable failure
        """

        async def sleep(seconds: float) -> None:
            if cancel_event is None:
                await asyncio.sleep(seconds)
                return
            try:
                await asyncio.wait_for(cancel_event.wait(), timeout=seconds)
            except asyncio.TimeoutError:
                return
            raise asyncio.CancelledError()

        def before_sleep(retry_state: RetryCallState) -> None:
            exc = retry_state.outcome.exception() if retry_state.outcome else None
            log_with_context(
                logger,
                logging.WARNING,
                f"{__name__}:execute - {operation_name} attempt "
                f"{retry_state.attempt_number}/{self.max_attempts} failed, retrying",
                event=LogEvents.EMBEDDING_RETRY,
                attempt=retry_state.attempt_number,
                error_type=type(exc).__name__ if exc else None,
                error_msg=str(exc) if exc else None,
            )

        def on_exhausted(retry_state: RetryCallState) -> T:
            exc = retry_state.outcome.exception()
            log_with_context(
                logger,
                logging.ERROR,
                f"{__name__}:execute - {operation_name} failed after "
                f"{retry_state.attempt_number} attempts",
                event=LogEvents.EMBEDDING_RETRIES_EXHAUSTED,
                attempts=retry_state.attempt_number,
                error_type=type(exc).__name__,
                error_msg=str(exc),
            )
            return retry_state.outcome.result()

        retrying = AsyncRetrying(
            retry=retry_if_exception(should_retry),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_fixed(self.retry_delay_seconds),
            sleep=sleep,
            before_sleep=before_sleep,
            retry_error_callback=on_exhausted,
            reraise=True,
        )
        return await retrying(self._run_attempt, operation, cancel_event)

    async def _run_attempt(
        self,
        operation: Callable[[], Awaitable[T]],
        cancel_event: asyncio.Event | None,
    ) -> T:
        """Run a single attempt bounded by the timeout."""
        if cancel_event is not None and cancel_event.is_set():
            raise asyncio.CancelledError()

        awaitable = operation()
        if cancel_event is not None:
            awaitable = _race_cancellation(awaitable, cancel_event)

        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout_seconds)
        except asyncio.TimeoutError as e:
            raise TransientProviderError(
                f"Remote call timed out after {self.timeout_seconds}s",
                timed_out=True,
            ) from e
