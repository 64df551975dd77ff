"""Unit tests for logging configuration."""
import json
import logging
import sys

from drone_delivery.core.logging import (
    ContextLogger,
    JSONFormatter,
    get_logger,
    setup_logging,
)


class TestJSONFormatter:
    """Test structured log output."""

    def test_format_basic_record(self):
        record = logging.makeLogRecord({
            "name": "drone_delivery.test",
            "levelname": "INFO",
            "msg": "Location %s",
            "args": ("accepted",),
        })

        payload = json.loads(JSONFormatter().format(record))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "drone_delivery.test"
        assert payload["message"] == "Location accepted"
        assert payload["timestamp"].endswith("Z")

    def test_context_fields_included(self):
        record = logging.makeLogRecord({
            "msg": "Location rejected",
            "field": "latitude",
            "value": 91.0,
            "environment": "test",
        })

        payload = json.loads(JSONFormatter().format(record))

        assert payload["field"] == "latitude"
        assert payload["value"] == 91.0
        assert payload["environment"] == "test"

    def test_exception_info(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.makeLogRecord({"msg": "failed", "exc_info": sys.exc_info()})

        payload = json.loads(JSONFormatter().format(record))

        assert payload["exception"]["type"] == "RuntimeError"
        assert payload["exception"]["message"] == "boom"


class TestLoggerFactory:
    """Test logger helpers."""

    def test_get_logger_plain(self):
        assert isinstance(get_logger("drone_delivery.plain"), logging.Logger)

    def test_get_logger_with_context(self):
        logger = get_logger("drone_delivery.ctx", {"environment": "test"})

        assert isinstance(logger, ContextLogger)
        _, kwargs = logger.process("msg", {"extra": {"field": "longitude"}})
        assert kwargs["extra"] == {"field": "longitude", "environment": "test"}

    def test_setup_logging_installs_single_handler(self):
        root = setup_logging(level="DEBUG", json_format=True)

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
