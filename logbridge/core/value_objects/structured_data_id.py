"""StructuredDataId value object (RFC 5424 SD-ID)"""

from typing import Any, Iterable, Optional, Tuple

from ..exceptions.validation_exceptions import StructuredDataIdValidationError

RESERVED = -1
MAX_LENGTH = 32


def _as_tuple(keys: Optional[Iterable[str]]) -> Tuple[str, ...]:
    return tuple(keys) if keys is not None else ()


class StructuredDataId:
    """Immutable SD-ID: a name optionally qualified by an enterprise number.

    The canonical form is ``name`` for reserved ids and ``name@number``
    otherwise. It is at most 32 characters long. The public constructor
    requires both a name and a positive enterprise number. Use
    :meth:`from_string` for the legacy ``name[@number]`` form, which also
    allows reserved (and nameless) ids.
    """

    __slots__ = ('_name', '_enterprise_number', '_required', '_optional')

    RESERVED = RESERVED
    MAX_LENGTH = MAX_LENGTH

    def __init__(self, name: str, enterprise_number: int,
                 required: Optional[Iterable[str]] = None,
                 optional: Optional[Iterable[str]] = None):
        if not name:
            raise StructuredDataIdValidationError(name, "No structured id name was supplied")
        if enterprise_number <= 0:
            raise StructuredDataIdValidationError(name, "No enterprise number was supplied")
        combined = f"{name}@{enterprise_number}"
        if len(combined) > MAX_LENGTH:
            raise StructuredDataIdValidationError(
                combined, f"Length of id exceeds maximum of {MAX_LENGTH} characters"
            )
        self._init(name, enterprise_number, required, optional)

    def _init(self, name: Optional[str], enterprise_number: int,
              required: Optional[Iterable[str]], optional: Optional[Iterable[str]]) -> None:
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_enterprise_number', enterprise_number)
        object.__setattr__(self, '_required', _as_tuple(required))
        object.__setattr__(self, '_optional', _as_tuple(optional))

    @classmethod
    def _unchecked(cls, name: Optional[str], enterprise_number: int,
                   required: Optional[Iterable[str]], optional: Optional[Iterable[str]]) -> 'StructuredDataId':
        instance = cls.__new__(cls)
        instance._init(name, enterprise_number, required, optional)
        return instance

    @classmethod
    def from_string(cls, combined_name: Optional[str],
                    required: Optional[Iterable[str]] = None,
                    optional: Optional[Iterable[str]] = None) -> 'StructuredDataId':
        """Create an id from ``name`` or ``name@enterpriseNumber``"""
        if combined_name is not None and len(combined_name) > MAX_LENGTH:
            raise StructuredDataIdValidationError(
                combined_name, f"Length of id exceeds maximum of {MAX_LENGTH} characters"
            )

        index = combined_name.find("@") if combined_name is not None else -1
        if index > 0:
            suffix = combined_name[index + 1:]
            digits = suffix[1:] if suffix.startswith("-") else suffix
            if not (digits.isascii() and digits.isdigit()):
                raise StructuredDataIdValidationError(
                    combined_name, f"Enterprise number '{suffix}' is not an integer"
                )
            enterprise_number = int(suffix)
            return cls._unchecked(combined_name[:index], enterprise_number, required, optional)

        return cls._unchecked(combined_name, RESERVED, required, optional)

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def enterprise_number(self) -> int:
        return self._enterprise_number

    @property
    def required(self) -> Tuple[str, ...]:
        return self._required

    @property
    def optional(self) -> Tuple[str, ...]:
        return self._optional

    @property
    def is_reserved(self) -> bool:
        """True when the id carries no enterprise number"""
        return self._enterprise_number <= 0

    def merge_with(self, default: Optional['StructuredDataId']) -> 'StructuredDataId':
        """Fill in missing parts of this id from ``default``.

        A nameless id adopts the default wholesale. A named id keeps its
        name and key lists, and takes the default's enterprise number only
        when it has none of its own. Neither input is modified.

        Raises:
            StructuredDataIdValidationError: if the merged id exceeds 32 characters
        """
        if default is None:
            return self
        if not self._name:
            return default
        if not self.is_reserved or default.is_reserved:
            return self
        return StructuredDataId(self._name, default.enterprise_number, self._required, self._optional)

    def render(self) -> str:
        """Canonical textual form"""
        name = self._name or ""
        if self.is_reserved:
            return name
        return f"{name}@{self._enterprise_number}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            'name': self._name,
            'enterprise_number': self._enterprise_number,
            'required': list(self._required),
            'optional': list(self._optional),
            'id': self.render()
        }

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _key(self) -> tuple:
        return (self._name, self._enterprise_number, self._required, self._optional)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructuredDataId):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"StructuredDataId(name={self._name!r}, enterprise_number={self._enterprise_number}, "
                f"required={self._required!r}, optional={self._optional!r})")


TIME_QUALITY = StructuredDataId.from_string(
    "timeQuality", None, ["tzKnown", "isSynced", "syncAccuracy"])
ORIGIN = StructuredDataId.from_string(
    "origin", None, ["ip", "enterpriseId", "software", "swVersion"])
META = StructuredDataId.from_string(
    "meta", None, ["sequenceId", "sysUpTime", "language"])

StructuredDataId.TIME_QUALITY = TIME_QUALITY
StructuredDataId.ORIGIN = ORIGIN
StructuredDataId.META = META
