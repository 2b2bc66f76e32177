"""
Unit Tests for the JSON backend
"""

import json
import logging

from logbridge.core.entities.structured_record import StructuredRecord
from logbridge.core.messages.message import ParameterizedMessage
from logbridge.core.value_objects.level import Level
from logbridge.core.value_objects.marker import Marker
from logbridge.infrastructure.logging.structured_logger import StructuredFormatter, StructuredLogger
from logbridge.wrappers.logger_wrapper import LoggerWrapper
from tests.fixtures.test_data import SAMPLE_FULL_RENDERING


def _lines(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines()]


class TestStructuredLogger:
    """Test suite for StructuredLogger."""

    def test_json_line_per_record(self, stream):
        """Test that each record is a single JSON object."""
        backend = StructuredLogger("tests.json.lines", level="DEBUG", stream=stream)
        backend.info("first {}", 1)
        backend.debug("second")

        entries = _lines(stream)
        assert [entry["message"] for entry in entries] == ["first 1", "second"]
        assert entries[0]["level"] == "INFO"
        assert entries[0]["logger"] == "tests.json.lines"
        assert entries[0]["function"] == "test_json_line_per_record"

    def test_level_threshold(self, stream):
        """Test that records below the configured level are dropped."""
        backend = StructuredLogger("tests.json.threshold", level="WARN", stream=stream)
        assert not backend.is_enabled(Level.INFO)
        backend.info("dropped")
        backend.log_message(None, None, Level.DEBUG, ParameterizedMessage("dropped"))
        assert stream.getvalue() == ""

    def test_structured_record_fields(self, stream, sample_record):
        """Test that records keep their structure in the JSON output."""
        backend = StructuredLogger("tests.json.record", stream=stream)
        LoggerWrapper(backend).info(sample_record, marker=Marker("AUDIT"))

        entry = _lines(stream)[0]
        assert entry["message"] == SAMPLE_FULL_RENDERING
        assert entry["marker"] == "AUDIT"
        assert entry["structured_data"] == {
            "id": "login",
            "type": "AppEvent",
            "message": "user signed in",
            "params": {"a": "1", "b": "2"},
        }
        assert entry["function"] == "test_structured_record_fields"

    def test_parameterized_template_kept(self, stream):
        """Test that the template is recorded next to the text."""
        backend = StructuredLogger("tests.json.template", stream=stream)
        LoggerWrapper(backend).warn("moved {}", 5)

        entry = _lines(stream)[0]
        assert entry["message"] == "moved 5"
        assert entry["message_template"] == "moved {}"

    def test_exception_included(self, stream):
        """Test that exception text is serialized."""
        backend = StructuredLogger("tests.json.exception", stream=stream)
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            LoggerWrapper(backend).exception("failed")

        entry = _lines(stream)[0]
        assert entry["level"] == "ERROR"
        assert "RuntimeError: boom" in entry["exception"]

    def test_record_without_id_has_no_structured_id(self, stream):
        """Test records that render empty."""
        backend = StructuredLogger("tests.json.empty", stream=stream)
        LoggerWrapper(backend).info(StructuredRecord(type="AppEvent"))

        entry = _lines(stream)[0]
        assert entry["message"] == ""
        assert entry["structured_data"]["id"] is None


class TestStructuredFormatter:
    """Test suite for StructuredFormatter."""

    def test_non_serializable_extra(self):
        """Test that unserializable extras are stringified."""
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "text", (), None)
        record.payload = object()
        entry = json.loads(StructuredFormatter().format(record))
        assert entry["payload"].startswith("<object object")
        assert entry["timestamp"].endswith("+00:00")
