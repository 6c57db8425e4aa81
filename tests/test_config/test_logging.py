"""Testes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
create_json_formatter, create_plain_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from app.observability import bind_correlation_id, get_correlation_id
from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    create_plain_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
        ],
    )
    def test_levels(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_plain_output_option(self) -> None:
        configure_logging(json_output=False)
        formatter = logging.getLogger().handlers[0].formatter
        assert not type(formatter).__module__.startswith("pythonjsonlogger")

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "coachlink"

    def test_get_logger_returns_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")
        assert get_logger("same.module").name == "same.module"


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("coachlink", lambda: "corr-123")
        record = _record()

        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "coachlink"

    def test_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"

        filter_.filter(record)

        assert record.correlation_id == "explicit-id"

    def test_empty_without_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""

    def test_reads_bound_launch_id(self) -> None:
        filter_ = CorrelationIdFilter("coachlink", get_correlation_id)
        record = _record()

        with bind_correlation_id("launch-42"):
            filter_.filter(record)

        assert record.correlation_id == "launch-42"
        assert get_correlation_id() == ""


class TestFormatters:
    def test_required_fields_and_rename_map(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_output(self) -> None:
        from pythonjsonlogger.json import JsonFormatter

        formatter = create_json_formatter()
        assert isinstance(formatter, JsonFormatter)

        record = _record("bootstrap_navigated")
        record.correlation_id = "abc-123"
        record.service = "coachlink"
        record.route = "/screens/main/homepage"

        data = json.loads(formatter.format(record))

        assert data["message"] == "bootstrap_navigated"
        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["correlation_id"] == "abc-123"
        assert data["service"] == "coachlink"
        assert data["route"] == "/screens/main/homepage"

    def test_plain_formatter_output(self) -> None:
        record = _record("session_cleared")
        record.correlation_id = "abc"
        record.service = "coachlink"

        output = create_plain_formatter().format(record)

        assert "[coachlink:abc]" in output
        assert "session_cleared" in output
