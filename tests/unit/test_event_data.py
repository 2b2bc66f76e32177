"""
Unit Tests for EventData

Covers reserved key routing and ordering, rendering and the JSON and XML
exports.
"""

import json

import pytest

from logbridge.core.entities.event_data import EVENT_DATETIME, EventData
from logbridge.core.entities.structured_record import FULL
from logbridge.core.exceptions import EventDecodeError, FieldValidationError, StructuredDataIdValidationError
from tests.fixtures.test_data import EVENT_DATETIME as SAMPLE_DATETIME
from tests.fixtures.test_data import EVENT_DATETIME_TEXT, SAMPLE_EVENT, VALUE_33


@pytest.fixture
def event():
    """Event built from the sample mapping."""
    return EventData(SAMPLE_EVENT)


class TestEventDataReservedKeys:
    """Test suite for reserved key handling."""

    def test_reserved_keys_route_to_attributes(self, event):
        """Test that reserved keys set typed attributes, not fields."""
        assert event.event_id == "Transfer@18060"
        assert event.id.enterprise_number == 18060
        assert event.message == "funds moved"
        assert event.event_type == "Audit"
        assert "EventId" not in event.fields
        assert list(event.fields) == ["ToAccount", "FromAccount", "Amount"]

    def test_reserved_keys_first(self, event):
        """Test that iteration presents reserved keys ahead of fields."""
        event.event_datetime = SAMPLE_DATETIME
        assert list(event) == [
            "EventId", "EventMessage", "EventType", "EventDateTime",
            "ToAccount", "FromAccount", "Amount",
        ]

    def test_len_counts_present_reserved_keys_only(self):
        """Test that missing reserved keys are not counted."""
        event = EventData(event_type="Audit")
        event["Amount"] = "1"
        assert len(event) == 2
        assert list(event) == ["EventType", "Amount"]
        assert "EventId" not in event
        assert "EventType" in event

    def test_put_after_construction(self, event):
        """Test the generic put path for reserved and ordinary keys."""
        event.put("EventMessage", "changed")
        event.put("Currency", "EUR")
        assert event.message == "changed"
        assert event["Currency"] == "EUR"
        assert event.get("EventMessage") == "changed"
        assert event.get("missing", "dflt") == "dflt"

    def test_event_id_cannot_be_none(self, event):
        """Test that the id may not be cleared."""
        with pytest.raises(StructuredDataIdValidationError):
            event.event_id = None

    def test_datetime_from_text(self):
        """Test parsing of the date format."""
        event = EventData({EVENT_DATETIME: EVENT_DATETIME_TEXT})
        assert event.event_datetime.year == 2024
        assert event[EVENT_DATETIME] == EVENT_DATETIME_TEXT

    def test_bad_datetime_rejected(self):
        """Test that unparseable dates fail on put."""
        with pytest.raises(FieldValidationError):
            EventData({EVENT_DATETIME: "yesterday"})

    def test_field_limits_apply(self, event):
        """Test that ordinary fields keep the record validation."""
        with pytest.raises(FieldValidationError):
            event["Amount"] = "9" * 33


class TestEventDataRendering:
    """Test suite for wire text rendering."""

    def test_full_rendering(self, event):
        """Test the full form with the datetime as first parameter."""
        event.event_datetime = SAMPLE_DATETIME
        assert event.render(FULL) == (
            'Audit [Transfer@18060 EventDateTime="2024-03-05T14:07:09.123" '
            'ToAccount="123456" FromAccount="654321" Amount="200.00"] funds moved'
        )

    def test_equality_includes_datetime(self):
        """Test that events differing only in time are unequal."""
        first = EventData(SAMPLE_EVENT, event_datetime=SAMPLE_DATETIME)
        second = EventData(SAMPLE_EVENT)
        assert first != second
        second.event_datetime = SAMPLE_DATETIME
        assert first == second


class TestEventDataExport:
    """Test suite for JSON and XML export."""

    def test_to_json_orders_reserved_keys_first(self, event):
        """Test the JSON key order."""
        data = json.loads(event.to_json())
        assert list(data) == ["EventId", "EventMessage", "EventType", "ToAccount", "FromAccount", "Amount"]

    def test_json_round_trip(self, event):
        """Test that JSON import restores an equal event."""
        event.event_datetime = SAMPLE_DATETIME.replace(microsecond=123000)
        assert EventData.from_json(event.to_json()) == event

    def test_xml_export(self, event):
        """Test the XML layout."""
        xml = event.to_xml()
        assert xml.startswith('<event><entry key="EventId">Transfer@18060</entry>')
        assert '<entry key="Amount">200.00</entry>' in xml

    def test_xml_round_trip(self, event):
        """Test that XML import restores an equal event."""
        assert EventData.from_xml(event.to_xml()) == event

    @pytest.mark.parametrize("payload", ["<event><entry>", "<other/>", "<event><entry>x</entry></event>"])
    def test_bad_xml(self, payload):
        """Test that malformed XML raises EventDecodeError."""
        with pytest.raises(EventDecodeError) as exc_info:
            EventData.from_xml(payload)
        assert exc_info.value.error_code == "EVENT_DECODE_FAILED"

    def test_bad_json(self):
        """Test that malformed JSON raises EventDecodeError."""
        with pytest.raises(EventDecodeError):
            EventData.from_json("{not json")

    def test_json_with_invalid_datetime(self):
        """Test that well-formed JSON with an unparseable date raises EventDecodeError."""
        with pytest.raises(EventDecodeError) as exc_info:
            EventData.from_json('{"EventId": "login", "EventDateTime": "garbage"}')
        assert isinstance(exc_info.value.__cause__, FieldValidationError)

    def test_json_with_oversized_value(self):
        """Test that well-formed JSON with a 33-character value raises EventDecodeError."""
        payload = json.dumps({"EventId": "login", "Amount": VALUE_33})
        with pytest.raises(EventDecodeError):
            EventData.from_json(payload)

    def test_xml_with_oversized_value(self):
        """Test that well-formed XML with a 33-character value raises EventDecodeError."""
        payload = f'<event><entry key="EventId">login</entry><entry key="Amount">{VALUE_33}</entry></event>'
        with pytest.raises(EventDecodeError) as exc_info:
            EventData.from_xml(payload)
        assert exc_info.value.error_code == "EVENT_DECODE_FAILED"
        assert isinstance(exc_info.value.__cause__, FieldValidationError)

    def test_non_string_message_exported(self):
        """Test that a non-string EventMessage is stored as text and exports to JSON."""
        event = EventData({"EventId": "login", "EventMessage": 5, "a": "1"})
        assert event.message == "5"
        assert json.loads(event.to_json())["EventMessage"] == "5"
