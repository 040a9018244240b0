"""
Stable log event identifiers.

Dependencies: enum (stdlib)
System role: Event ids attached to log records for dashboards and alerts
"""

from enum import Enum


class LogEvents(str, Enum):
    """Event ids recorded in the ``event`` field of log records."""

    AUTHORIZATION_FAILURE = "authorization_failure"
    CONFIGURATION_FAILURE = "configuration_failure"
    EMBEDDING_RETRY = "embedding_retry"
    EMBEDDING_RETRIES_EXHAUSTED = "embedding_retries_exhausted"
    INGESTION_REQUIRED = "ingestion_required"
    CHUNK_SKIPPED = "chunk_skipped"
