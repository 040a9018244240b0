"""
Exception hierarchy for the chunk-and-embed pipeline.

Every error carries an ErrorKind tag. Retry decisions inspect the tag rather
than the class, so adapters may raise any subclass as long as the kind is right.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized error taxonomy for embedding
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced by the pipeline."""

    CONFIGURATION = "configuration"
    TRANSIENT_PROVIDER = "transient_provider"
    AUTHORIZATION = "authorization"
    INGESTION_REQUIRED = "ingestion_required"


class EmbeddingPipelineError(Exception):
    """Base exception for all embedding pipeline errors."""

    kind: ErrorKind = ErrorKind.TRANSIENT_PROVIDER

    def __init__(
        self,
        message: str,
        kind: ErrorKind | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize base exception with message, kind and optional context.

        Args:
            message: Human-readable error message
            kind: Failure kind (defaults to the class-level kind)
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        if kind is not None:
            self.kind = kind
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(EmbeddingPipelineError):
    """Raised when a required configuration value is missing or blank."""

    kind = ErrorKind.CONFIGURATION

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            key: Configuration key that failed validation
            details: Additional context
        """
        details = details or {}
        if key:
            details["key"] = key
        self.key = key
        super().__init__(message, details=details)


class TransientProviderError(EmbeddingPipelineError):
    """Raised for network, timeout, rate-limit and generic provider failures."""

    kind = ErrorKind.TRANSIENT_PROVIDER

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        timed_out: bool = False,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize transient provider error.

        Args:
            message: Error message
            status_code: HTTP status returned by the provider, if any
            timed_out: True when the attempt exceeded its time limit
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        if timed_out:
            details["timed_out"] = True
        self.status_code = status_code
        self.timed_out = timed_out
        super().__init__(message, details=details)


class AuthorizationError(EmbeddingPipelineError):
    """Raised when the provider rejects credentials or permissions."""

    kind = ErrorKind.AUTHORIZATION

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize authorization error.

        Args:
            message: Error message
            status_code: HTTP status returned by the provider (401/403)
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details=details)


class IngestionRequiredSignal(EmbeddingPipelineError):
    """
    Domain signal telling the caller to restart ingestion.

    Not a fault. Bypasses retry and propagates on first occurrence.
    """

    kind = ErrorKind.INGESTION_REQUIRED

    def __init__(
        self,
        message: str = "Document must be re-ingested",
        document_reference: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize ingestion-required signal.

        Args:
            message: Signal message
            document_reference: Document that needs re-ingestion
            details: Additional context
        """
        details = details or {}
        if document_reference:
            details["document_reference"] = document_reference
        super().__init__(message, details=details)


def error_kind(exc: BaseException) -> ErrorKind | None:
    """Return the ErrorKind tag of exc, or None for untagged exceptions."""
    kind = getattr(exc, "kind", None)
    return kind if isinstance(kind, ErrorKind) else None
