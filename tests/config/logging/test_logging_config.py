"""Testes para config.logging.

Cobre: configure_logging, log_api_call, CorrelationIdFilter,
SensitiveDataFilter e create_json_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    SensitiveDataFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_api_call,
    mask_sensitive,
)


def _record(msg: str = "evento", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    @pytest.mark.parametrize(
        ("level", "expected"),
        [("INFO", logging.INFO), ("debug", logging.DEBUG), ("ERROR", logging.ERROR)],
    )
    def test_levels(self, level: str, expected: int) -> None:
        configure_logging(level=level)

        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="LOUD")

    def test_replaces_handlers_and_adds_filters(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging(correlation_id_getter=lambda: "corr-1")

        assert len(root.handlers) == 1
        filters = root.handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, SensitiveDataFilter) for f in filters)
        assert logging.getLogger("httpx").level == logging.WARNING


class TestFilters:
    def test_correlation_id_from_getter(self) -> None:
        record = _record()

        CorrelationIdFilter("svc", lambda: "corr-1").filter(record)

        assert record.correlation_id == "corr-1"
        assert record.service == "svc"

    def test_extra_correlation_id_wins(self) -> None:
        record = _record(correlation_id="from-extra")

        CorrelationIdFilter("svc", lambda: "corr-1").filter(record)

        assert record.correlation_id == "from-extra"

    def test_mask_sensitive(self) -> None:
        masked = mask_sensitive("Authorization: Bearer abc.DEF-123 to +19148440001")

        assert masked == "Authorization: Bearer *** to +***0001"

    def test_sensitive_filter_rewrites_message(self) -> None:
        record = logging.LogRecord(
            "test", logging.INFO, __file__, 1, "phone %s", ("+19148440001",), None
        )

        SensitiveDataFilter().filter(record)

        assert record.getMessage() == "phone +***0001"


class TestJsonFormatter:
    def test_output_fields(self) -> None:
        formatter = create_json_formatter()
        record = _record("attentive_request_ok", correlation_id="c", service="s", status_code=200)

        output = json.loads(formatter.format(record))

        assert output["level"] == "INFO"
        assert output["logger"] == "test"
        assert output["message"] == "attentive_request_ok"
        assert output["status_code"] == 200
        assert set(FIELD_RENAME_MAP) <= set(REQUIRED_LOG_FIELDS)

    def test_timestamp_is_utc_with_milliseconds(self) -> None:
        record = _record(correlation_id="c", service="s")
        record.created = 1705314600.042
        record.msecs = 42.0

        output = json.loads(create_json_formatter().format(record))

        assert output["timestamp"] == "2024-01-15T10:30:00.042Z"
        assert "asctime" not in output


class TestLogApiCall:
    def test_success_is_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("tests.api_call")

        with caplog.at_level(logging.DEBUG, logger="tests.api_call"):
            log_api_call(logger, "GET", "/segments", 200, elapsed_ms=12.345)

        record = caplog.records[-1]
        assert record.levelno == logging.DEBUG
        assert record.getMessage() == "attentive_request_ok"
        assert record.elapsed_ms == 12.35

    @pytest.mark.parametrize("status_code", [429, None])
    def test_failure_is_warning(
        self, caplog: pytest.LogCaptureFixture, status_code: int | None
    ) -> None:
        logger = get_logger("tests.api_call")

        with caplog.at_level(logging.DEBUG, logger="tests.api_call"):
            log_api_call(logger, "POST", "/messages/send", status_code)

        assert caplog.records[-1].levelno == logging.WARNING
        assert caplog.records[-1].getMessage() == "attentive_request_failed"
