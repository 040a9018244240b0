"""Tests for the embedding error taxonomy."""

import pytest

from docembed.core.exceptions import (
    AuthorizationError,
    ConfigurationError,
    EmbeddingPipelineError,
    ErrorKind,
    IngestionRequiredSignal,
    TransientProviderError,
    error_kind,
)


class TestErrorKinds:
    """Test kind tags on each error."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (ConfigurationError("missing", key="k"), ErrorKind.CONFIGURATION),
            (TransientProviderError("503", status_code=503), ErrorKind.TRANSIENT_PROVIDER),
            (AuthorizationError("401", status_code=401), ErrorKind.AUTHORIZATION),
            (IngestionRequiredSignal(), ErrorKind.INGESTION_REQUIRED),
        ],
    )
    def test_kind(self, error: EmbeddingPipelineError, kind: ErrorKind) -> None:
        assert error.kind is kind
        assert error_kind(error) is kind

    def test_explicit_kind_overrides_class_kind(self) -> None:
        error = EmbeddingPipelineError("custom", kind=ErrorKind.INGESTION_REQUIRED)

        assert error.kind is ErrorKind.INGESTION_REQUIRED
        assert EmbeddingPipelineError("other").kind is ErrorKind.TRANSIENT_PROVIDER

    def test_untagged_exception_has_no_kind(self) -> None:
        assert error_kind(RuntimeError("x")) is None


class TestErrorDetails:
    """Test context captured in details."""

    def test_transient_details(self) -> None:
        error = TransientProviderError("timed out", timed_out=True)

        assert error.timed_out is True
        assert error.status_code is None
        assert error.details == {"timed_out": True}
        assert str(error) == "timed out | Details: {'timed_out': True}"

    def test_configuration_details(self) -> None:
        error = ConfigurationError("missing", key="azure_openai_embedding_name")

        assert error.key == "azure_openai_embedding_name"
        assert error.details["key"] == "azure_openai_embedding_name"

    def test_ingestion_signal_reference(self) -> None:
        error = IngestionRequiredSignal(document_reference="doc1")

        assert error.details == {"document_reference": "doc1"}
        assert error.message == "Document must be re-ingested"

    def test_str_without_details(self) -> None:
        assert str(AuthorizationError("denied")) == "denied"
