"""
EventData: a StructuredRecord with reserved event metadata.

The reserved keys (EventId, EventMessage, EventType, EventDateTime) are
always presented first, in that order, when the event is iterated or
exported. Writing a reserved key through the generic put path sets the
matching typed attribute instead of storing an ordinary field.
"""
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..exceptions.logbridge_exceptions import EventDecodeError
from ..exceptions.validation_exceptions import (
    FieldValidationError,
    StructuredDataIdValidationError,
    ValidationError,
)
from .structured_record import StructuredRecord

EVENT_ID = "EventId"
EVENT_MESSAGE = "EventMessage"
EVENT_TYPE = "EventType"
EVENT_DATETIME = "EventDateTime"

RESERVED_KEYS = (EVENT_ID, EVENT_MESSAGE, EVENT_TYPE, EVENT_DATETIME)

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


def format_event_datetime(value: datetime) -> str:
    """Format as yyyy-MM-ddTHH:mm:ss.SSS"""
    return value.strftime(DATE_FORMAT)[:-3]


def parse_event_datetime(value: str) -> datetime:
    return datetime.strptime(value, DATE_FORMAT)


class EventDataModel(BaseModel):
    """Serialization model; reserved keys first, then arbitrary fields"""
    model_config = ConfigDict(extra="allow")

    event_id: Optional[str] = Field(default=None, alias=EVENT_ID)
    event_message: Optional[str] = Field(default=None, alias=EVENT_MESSAGE)
    event_type: Optional[str] = Field(default=None, alias=EVENT_TYPE)
    event_datetime: Optional[str] = Field(default=None, alias=EVENT_DATETIME)


class EventData(StructuredRecord):
    """Structured record describing a business event."""

    def __init__(self, data: Optional[Mapping[str, Any]] = None, *,
                 event_id: Optional[str] = None, message: Optional[str] = None,
                 event_type: Optional[str] = None, event_datetime: Optional[datetime] = None):
        super().__init__(id=event_id, message=message, type=event_type)
        self._datetime: Optional[datetime] = None
        if event_datetime is not None:
            self.event_datetime = event_datetime
        if data:
            self.put_all(data)

    # Typed accessors

    @property
    def event_id(self) -> Optional[str]:
        return self.id.render() if self.id is not None else None

    @event_id.setter
    def event_id(self, value: str) -> None:
        if value is None:
            raise StructuredDataIdValidationError(value, "eventId cannot be None")
        self.id = value

    @property
    def event_type(self) -> Optional[str]:
        return self.type

    @event_type.setter
    def event_type(self, value: Optional[str]) -> None:
        self.type = value

    @property
    def event_datetime(self) -> Optional[datetime]:
        return self._datetime

    @event_datetime.setter
    def event_datetime(self, value: Any) -> None:
        if value is None:
            return
        if isinstance(value, str):
            try:
                value = parse_event_datetime(value)
            except ValueError:
                raise FieldValidationError(EVENT_DATETIME, value, "Unparseable event date") from None
        elif not isinstance(value, datetime):
            raise FieldValidationError(EVENT_DATETIME, value, "Event date must be a datetime")
        self._datetime = value

    # Generic put path

    def put(self, key: str, value: Any) -> None:
        """Set a reserved attribute or an ordinary field"""
        if key == EVENT_ID:
            self.event_id = value
        elif key == EVENT_MESSAGE:
            self.message = None if value is None else str(value)
        elif key == EVENT_TYPE:
            self.event_type = value
        elif key == EVENT_DATETIME:
            self.event_datetime = value
        else:
            self.set_field(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        if key in RESERVED_KEYS:
            value = self._reserved().get(key)
            return default if value is None else value
        return self.get_field(key, default)

    def put_all(self, data: Mapping[str, Any]) -> None:
        for key, value in data.items():
            self.put(key, value)

    def __setitem__(self, key: str, value: Any) -> None:
        self.put(key, value)

    def __getitem__(self, key: str) -> Any:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    # Ordered key-value view

    def _reserved(self) -> Dict[str, Any]:
        reserved = {
            EVENT_ID: self.event_id,
            EVENT_MESSAGE: self.message,
            EVENT_TYPE: self.type,
            EVENT_DATETIME: format_event_datetime(self._datetime) if self._datetime else None,
        }
        return {key: value for key, value in reserved.items() if value is not None}

    def items(self) -> List[Tuple[str, Any]]:
        return list(self._reserved().items()) + super().items()

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.items())

    def __iter__(self) -> Iterator[str]:
        return iter([key for key, _ in self.items()])

    def __len__(self) -> int:
        return len(self._reserved()) + super().__len__()

    def __contains__(self, key: object) -> bool:
        if key in RESERVED_KEYS:
            return key in self._reserved()
        return super().__contains__(key)

    def sd_params(self) -> List[Tuple[str, str]]:
        params = super().sd_params()
        if self._datetime is not None:
            params.insert(0, (EVENT_DATETIME, format_event_datetime(self._datetime)))
        return params

    # Serialization

    def to_model(self) -> EventDataModel:
        return EventDataModel.model_validate(self.to_dict())

    def to_json(self) -> str:
        return self.to_model().model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, payload: str) -> 'EventData':
        try:
            model = EventDataModel.model_validate_json(payload)
        except PydanticValidationError as e:
            raise EventDecodeError("JSON", str(e)) from e
        try:
            return cls(model.model_dump(by_alias=True, exclude_none=True))
        except ValidationError as e:
            raise EventDecodeError("JSON", str(e)) from e

    def to_xml(self) -> str:
        root = ET.Element("event")
        for key, value in self.items():
            entry = ET.SubElement(root, "entry", key=key)
            entry.text = str(value)
        return ET.tostring(root, encoding="unicode")

    @classmethod
    def from_xml(cls, payload: str) -> 'EventData':
        try:
            root = ET.fromstring(payload)
        except ET.ParseError as e:
            raise EventDecodeError("XML", str(e)) from e
        if root.tag != "event":
            raise EventDecodeError("XML", f"unexpected root element <{root.tag}>")
        data = {}
        for entry in root.iter("entry"):
            key = entry.get("key")
            if key is None:
                raise EventDecodeError("XML", "entry without key attribute")
            data[key] = entry.text or ""
        try:
            return cls(data)
        except ValidationError as e:
            raise EventDecodeError("XML", str(e)) from e

    # Equality

    def _key(self) -> tuple:
        return super()._key() + (self._datetime,)

    def __repr__(self) -> str:
        return (f"EventData(event_id={self.event_id!r}, message={self.message!r}, "
                f"event_type={self.event_type!r}, event_datetime={self._datetime!r}, "
                f"fields={dict(super().items())!r})")
