"""
Unit tests for logging setup and formatters.
"""

import json
import logging

import pytest

from senior_events.monitoring.logging import (
    ROOT_LOGGER_NAME,
    JsonFormatter,
    LoggingOptions,
    TextFormatter,
    configure_logging,
    with_context,
)


@pytest.fixture
def package_logger():
    """Package logger, restored after the test."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, propagate, level = list(logger.handlers), logger.propagate, logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        name="senior_events.catalog.store",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# =============================================================================
# Formatters
# =============================================================================


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_base_fields(self):
        """Should emit level, logger and message."""
        data = json.loads(JsonFormatter().format(_record()))

        assert data["level"] == "WARNING"
        assert data["logger"] == "senior_events.catalog.store"
        assert data["msg"] == "hello"
        assert "source" not in data

    def test_context_fields(self):
        """Should include context fields present on the record."""
        data = json.loads(JsonFormatter().format(_record(source="remote", region="brasil")))

        assert data["source"] == "remote"
        assert data["region"] == "brasil"

    def test_non_ascii(self):
        """Should keep non-ASCII text readable."""
        assert "Gamificação" in JsonFormatter().format(_record("Gamificação"))


class TestTextFormatter:
    """Tests for TextFormatter."""

    def test_plain(self):
        """Should render level, logger and message."""
        line = TextFormatter().format(_record())
        assert line == "WARNING senior_events.catalog.store hello"

    def test_with_context(self):
        """Should render context in brackets."""
        line = TextFormatter().format(_record(source="fallback"))
        assert "[source=fallback]" in line


# =============================================================================
# Setup
# =============================================================================


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_single_handler(self, package_logger):
        """Should not stack handlers when called twice."""
        configure_logging()
        configure_logging(LoggingOptions(level="DEBUG"))

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.DEBUG

    def test_json_option(self, package_logger):
        """Should install the JSON formatter when asked."""
        configure_logging(LoggingOptions(json_logs=True))
        assert isinstance(package_logger.handlers[0].formatter, JsonFormatter)

    def test_unknown_level_defaults_to_info(self, package_logger):
        """Should fall back to INFO for an unknown level name."""
        configure_logging(LoggingOptions(level="chatty"))
        assert package_logger.level == logging.INFO


class TestWithContext:
    """Tests for with_context."""

    def test_injects_fields(self, caplog):
        """Should attach context fields to emitted records."""
        logger = logging.getLogger("senior_events.tests.context")
        adapter = with_context(logger, source="remote", region="brasil")

        with caplog.at_level(logging.INFO, logger="senior_events.tests.context"):
            adapter.info("loaded")

        record = caplog.records[-1]
        assert record.source == "remote"
        assert record.region == "brasil"
        assert not hasattr(record, "section")

    def test_event_key(self, caplog):
        """Should attach the event key when given."""
        logger = logging.getLogger("senior_events.tests.context")
        adapter = with_context(logger, event_key="Sarau Paulistano")

        with caplog.at_level(logging.INFO, logger="senior_events.tests.context"):
            adapter.info("opened")

        assert caplog.records[-1].event_key == "Sarau Paulistano"

    def test_call_extra_wins(self, caplog):
        """Should let per-call extra override adapter context."""
        logger = logging.getLogger("senior_events.tests.context")
        adapter = with_context(logger, source="remote")

        with caplog.at_level(logging.INFO, logger="senior_events.tests.context"):
            adapter.info("loaded", extra={"source": "fallback"})

        assert caplog.records[-1].source == "fallback"
