"""
StructuredRecord entity: an RFC 5424 style structured log entry.

Wire format::

    full mode:       <type> [<id> <key>="<value>" ...] <message>
    data-only mode:  [<id> <key>="<value>" ...]

A record that lacks its type (full mode), its id or its fields renders as
the empty string rather than raising.
"""
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from ..exceptions.validation_exceptions import (
    ValidationError,
    FieldValidationError,
    RecordTypeValidationError,
)
from ..messages.message import Message
from ..value_objects.structured_data_id import StructuredDataId, MAX_LENGTH

FULL = "full"

IdLike = Union[StructuredDataId, str, None]


def _coerce_id(sd_id: IdLike) -> Optional[StructuredDataId]:
    if sd_id is None or isinstance(sd_id, StructuredDataId):
        return sd_id
    return StructuredDataId.from_string(sd_id)


class StructuredRecord(Message):
    """Mutable structured log entry with a canonical string renderer.

    Field values are strings of at most 32 characters; anything else is
    rejected when it is set, never at render time.
    """

    def __init__(self, id: IdLike = None, message: Optional[str] = None,
                 type: Optional[str] = None, fields: Optional[Mapping[str, Any]] = None):
        self._id = _coerce_id(id)
        self._message = message
        self._type: Optional[str] = None
        self._fields: Dict[str, str] = {}
        if type is not None:
            self.type = type
        if fields:
            self.put_all(fields)

    # Attributes

    @property
    def id(self) -> Optional[StructuredDataId]:
        return self._id

    @id.setter
    def id(self, value: IdLike) -> None:
        self._id = _coerce_id(value)

    @property
    def type(self) -> Optional[str]:
        return self._type

    @type.setter
    def type(self, value: Optional[str]) -> None:
        if value is not None and len(value) > MAX_LENGTH:
            raise RecordTypeValidationError(
                value, f"Structured data type exceeds maximum length of {MAX_LENGTH} characters"
            )
        self._type = value

    @property
    def message(self) -> Optional[str]:
        return self._message

    @message.setter
    def message(self, value: Optional[str]) -> None:
        self._message = value

    @property
    def fields(self) -> Mapping[str, str]:
        """Read-only snapshot of the fields"""
        return MappingProxyType(dict(self._fields))

    # Field mutation

    def set_field(self, key: str, value: Any) -> None:
        """Set a field value.

        Raises:
            FieldValidationError: if the key is empty, or the value is None
                or longer than 32 characters
        """
        if not key or not isinstance(key, str):
            raise FieldValidationError(key, value, "Field key must be a non-empty string")
        if value is None:
            raise FieldValidationError(key, value, "Field value cannot be None")
        text = value if isinstance(value, str) else str(value)
        if len(text) > MAX_LENGTH:
            raise FieldValidationError(
                key, value, f"Structured data values are limited to {MAX_LENGTH} characters"
            )
        self._fields[key] = text

    def get_field(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._fields.get(key, default)

    def remove_field(self, key: str) -> Optional[str]:
        """Remove a field, returning its previous value"""
        return self._fields.pop(key, None)

    def put_all(self, data: Mapping[str, Any]) -> None:
        for key, value in data.items():
            self.set_field(key, value)

    def clear(self) -> None:
        """Remove all fields; type, id and message are kept"""
        self._fields.clear()

    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_field(key, value)

    def __delitem__(self, key: str) -> None:
        del self._fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._fields))

    def items(self) -> List[Tuple[str, str]]:
        return list(self._fields.items())

    # Rendering

    def sd_params(self) -> List[Tuple[str, str]]:
        """Name/value pairs emitted inside the brackets"""
        return list(self._fields.items())

    def resolve_id(self, default_id: Optional[StructuredDataId] = None) -> Optional[StructuredDataId]:
        """Effective id after applying ``default_id``"""
        if self._id is not None:
            return self._id.merge_with(default_id)
        return default_id

    def render(self, mode: Optional[str] = None, default_id: Optional[StructuredDataId] = None) -> str:
        """Format the record as described in RFC 5424.

        Args:
            mode: ``"full"`` includes the type and message; anything else
                renders only the bracketed structured data.
            default_id: id merged into (or used instead of) the record's id.

        Returns:
            The formatted text, or ``""`` when the type (full mode), the id
            or the fields are missing.
        """
        full = mode == FULL
        if full and self._type is None:
            return ""

        try:
            sd_id = self.resolve_id(default_id)
        except ValidationError:
            return ""

        params = self.sd_params()
        if sd_id is None or not sd_id.name or not params:
            return ""

        parts = []
        if full:
            parts.append(self._type)
            parts.append(" ")
        parts.append("[")
        parts.append(sd_id.render())
        for key, value in params:
            parts.append(f' {key}="{value}"')
        parts.append("]")
        if full and self._message is not None:
            parts.append(" ")
            parts.append(self._message)
        return "".join(parts)

    def as_string(self, mode: Optional[str] = FULL) -> str:
        return self.render(mode)

    # Message protocol

    @property
    def formatted_message(self) -> str:
        return self.render(FULL)

    @property
    def template(self) -> Optional[str]:
        return self._message

    @property
    def parameters(self) -> None:
        return None

    # Equality

    def _key(self) -> tuple:
        return (self._type, self._id, self._message, self._fields)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(id={self._id!r}, message={self._message!r}, "
                f"type={self._type!r}, fields={self._fields!r})")
