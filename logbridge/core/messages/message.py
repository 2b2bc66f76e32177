"""
Loggable message payloads.

Every message exposes the final text, the template it came from and its
parameters. Formatting is deferred until the text is first requested.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Tuple

from . import formatter


class Message(ABC):
    """A payload that can be handed to a logging backend."""

    @property
    @abstractmethod
    def formatted_message(self) -> Optional[str]:
        """The message rendered as text."""

    @property
    @abstractmethod
    def template(self) -> Optional[str]:
        """The format portion of the message."""

    @property
    @abstractmethod
    def parameters(self) -> Optional[Tuple[Any, ...]]:
        """Parameter values, or None."""

    def __str__(self) -> str:
        return self.formatted_message or ""


class SimpleMessage(Message):
    """Fixed text with no parameters."""

    __slots__ = ('_text',)

    def __init__(self, text: Optional[str] = None):
        self._text = text

    @property
    def formatted_message(self) -> Optional[str]:
        return self._text

    @property
    def template(self) -> Optional[str]:
        return self._text

    @property
    def parameters(self) -> None:
        return None

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"SimpleMessage[message={self._text}]"


class ParameterizedMessage(Message):
    """A ``{}`` template plus positional arguments, formatted on first access.

    When the last argument is an exception that no placeholder consumes,
    it is exposed as :attr:`throwable` instead of being substituted.
    """

    __slots__ = ('_template', '_args', '_formatted', '_throwable')

    def __init__(self, template: Optional[str], args: Optional[Sequence[Any]] = None,
                 throwable: Optional[BaseException] = None):
        self._template = template
        self._args = tuple(args) if args is not None else ()
        self._formatted: Optional[str] = None
        self._throwable = throwable

    def _format(self) -> None:
        if self._template is None or not self._args:
            self._formatted = self._template
            if self._throwable is None and self._args:
                self._throwable = formatter.throwable_candidate(self._args)
            return
        text, consumed = formatter.substitute(self._template, self._args)
        self._formatted = text
        if self._throwable is None and consumed < len(self._args):
            self._throwable = formatter.throwable_candidate(self._args)

    @property
    def formatted_message(self) -> Optional[str]:
        if self._formatted is None:
            self._format()
        return self._formatted

    @property
    def template(self) -> Optional[str]:
        return self._template

    @property
    def parameters(self) -> Tuple[Any, ...]:
        return self._args

    @property
    def throwable(self) -> Optional[BaseException]:
        """Trailing exception argument left over after substitution"""
        if self._formatted is None:
            self._format()
        return self._throwable

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._template == other._template and self._args == other._args

    __hash__ = None

    def __repr__(self) -> str:
        return f"ParameterizedMessage[template={self._template}, args={self._args!r}]"
