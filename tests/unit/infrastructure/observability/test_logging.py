"""Tests for structured logging."""

import json
import logging
import sys

from worshipboard.domain.exceptions import ProviderError
from worshipboard.infrastructure.observability.logging import (
    CompactExceptionFormatter,
    CorrelationIdFilter,
    CustomJsonFormatter,
    configure_logging,
    get_correlation_id,
    set_correlation_id,
)


def _record(message: str = "hello", exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="worshipboard.test",
        level=logging.ERROR,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=exc_info,
    )


class TestCorrelationId:
    """Test correlation ID functionality."""

    def test_set_and_get_correlation_id(self):
        result = set_correlation_id("test-123-abc")

        assert result == "test-123-abc"
        assert get_correlation_id() == "test-123-abc"

    def test_set_correlation_id_generates_uuid_when_none(self):
        result = set_correlation_id(None)

        assert len(result) == 36
        assert get_correlation_id() == result

    def test_filter_stamps_record(self):
        set_correlation_id("filter-id")
        record = _record()

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "filter-id"


class TestLoggingConfiguration:
    """Test logging configuration."""

    def test_configure_logging_debug_level(self):
        configure_logging(log_level="DEBUG", json_format=False, app_name="test-app")

        assert logging.getLogger("test").getEffectiveLevel() <= logging.DEBUG

    def test_configure_logging_replaces_handlers(self):
        configure_logging(log_level="INFO", json_format=False)
        configure_logging(log_level="INFO", json_format=True)

        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, CustomJsonFormatter)

    def test_text_format_uses_compact_formatter(self):
        configure_logging(log_level="INFO", json_format=False)

        formatter = logging.getLogger().handlers[0].formatter
        assert isinstance(formatter, CompactExceptionFormatter)

    def test_http_client_loggers_quieted(self):
        configure_logging(log_level="DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING


class TestFormatters:
    def test_json_formatter_fields(self):
        set_correlation_id("json-id")
        record = _record("Live plan fetched")
        CorrelationIdFilter().filter(record)
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Live plan fetched"
        assert payload["level"] == "ERROR"
        assert payload["logger"] == "worshipboard.test"
        assert payload["correlation_id"] == "json-id"

    def test_compact_formatter_root_cause_first(self):
        try:
            try:
                raise ValueError("socket closed")
            except ValueError as e:
                raise ProviderError("Planning Center request failed") from e
        except ProviderError:
            exc_info = sys.exc_info()

        text = CompactExceptionFormatter().formatException(exc_info)

        cause_at = text.index("╰─► ValueError: socket closed")
        error_at = text.index("╰─► ProviderError: Planning Center request failed")
        assert cause_at < error_at

    def test_compact_formatter_without_exception(self):
        assert CompactExceptionFormatter().formatException((None, None, None)) == ""
