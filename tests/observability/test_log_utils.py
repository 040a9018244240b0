"""Tests for safe structured logging helpers."""

import logging

import pytest

from docembed.observability import (
    LogEvents,
    configure_logging,
    get_logger,
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)


class TestSafeLogValue:
    """Test value rendering."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "None"),
            ("text", "text"),
            ([0.1, 0.2, 0.3], "list(3 items)"),
            ((1, 2), "tuple(2 items)"),
            ({"a": 1}, "dict(1 keys)"),
            (42, "42"),
            (LogEvents.AUTHORIZATION_FAILURE, "authorization_failure"),
        ],
    )
    def test_renders_value(self, value, expected) -> None:
        assert safe_log_value(value) == expected

    def test_truncates_long_strings(self) -> None:
        rendered = safe_log_value("x" * 600, max_length=100)

        assert rendered.startswith("x" * 100)
        assert "truncated, 600 total" in rendered

    def test_unrenderable_value(self) -> None:
        class Broken:
            def __str__(self) -> str:
                raise RuntimeError("nope")

        assert safe_log_value(Broken()) == "<unable to log: RuntimeError>"


class TestLogHelpers:
    """Test context logging."""

    def test_log_with_context_sets_extra_and_event(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("docembed.tests")

        with caplog.at_level(logging.INFO, logger="docembed.tests"):
            log_with_context(
                logger,
                logging.INFO,
                "embedded",
                event=LogEvents.EMBEDDING_RETRY,
                embedding=[0.1, 0.2],
            )

        record = caplog.records[-1]
        assert record.event == "embedding_retry"
        assert record.embedding == "list(2 items)"

    def test_log_exception_with_context(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("docembed.tests")
        error = ValueError("bad credentials")

        with caplog.at_level(logging.ERROR, logger="docembed.tests"):
            log_exception_with_context(
                logger,
                "failed",
                error,
                event=LogEvents.AUTHORIZATION_FAILURE,
                document_reference="doc1",
            )

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.error_type == "ValueError"
        assert record.error_msg == "bad credentials"
        assert record.event == "authorization_failure"
        assert record.exc_info[1] is error


class TestConfigureLogging:
    """Test root logger configuration."""

    def test_sets_level_and_single_handler(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("debug")
            configure_logging("debug")

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
