"""
Backend logger interfaces, from plainest to richest capability.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional, Union

from ..messages.message import Message
from ..value_objects.level import Level
from ..value_objects.marker import Marker

ExcInfo = Union[BaseException, bool, None]


class ILogger(ABC):
    """Plain backend: per-level methods that do their own ``{}`` formatting."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Logger name."""
        pass

    @abstractmethod
    def is_enabled(self, level: Level) -> bool:
        """Check whether ``level`` is enabled."""
        pass

    @abstractmethod
    def trace(self, message: str, *args: Any, exc_info: ExcInfo = None) -> None:
        """Log at TRACE level."""
        pass

    @abstractmethod
    def debug(self, message: str, *args: Any, exc_info: ExcInfo = None) -> None:
        """Log at DEBUG level."""
        pass

    @abstractmethod
    def info(self, message: str, *args: Any, exc_info: ExcInfo = None) -> None:
        """Log at INFO level."""
        pass

    @abstractmethod
    def warn(self, message: str, *args: Any, exc_info: ExcInfo = None) -> None:
        """Log at WARN level."""
        pass

    @abstractmethod
    def error(self, message: str, *args: Any, exc_info: ExcInfo = None) -> None:
        """Log at ERROR level."""
        pass


class IMarkerAwareLogger(ILogger):
    """Backend whose per-level methods and level checks accept a marker."""

    @abstractmethod
    def is_enabled(self, level: Level, marker: Optional[Marker] = None) -> bool:
        pass

    @abstractmethod
    def trace(self, message: str, *args: Any, marker: Optional[Marker] = None,
              exc_info: ExcInfo = None) -> None:
        pass

    @abstractmethod
    def debug(self, message: str, *args: Any, marker: Optional[Marker] = None,
              exc_info: ExcInfo = None) -> None:
        pass

    @abstractmethod
    def info(self, message: str, *args: Any, marker: Optional[Marker] = None,
             exc_info: ExcInfo = None) -> None:
        pass

    @abstractmethod
    def warn(self, message: str, *args: Any, marker: Optional[Marker] = None,
             exc_info: ExcInfo = None) -> None:
        pass

    @abstractmethod
    def error(self, message: str, *args: Any, marker: Optional[Marker] = None,
              exc_info: ExcInfo = None) -> None:
        pass


class ILocationAwareLogger(IMarkerAwareLogger):
    """Backend that can attribute records to the caller past a boundary."""

    @abstractmethod
    def log(self, marker: Optional[Marker], caller_boundary: Optional[str], level: Level,
            message: Optional[str], exc_info: ExcInfo = None) -> None:
        """Log pre-formatted text on behalf of the caller beyond ``caller_boundary``."""
        pass


class IMessageLogger(ILocationAwareLogger):
    """Backend that accepts Message payloads, structured records included."""

    @abstractmethod
    def log_message(self, marker: Optional[Marker], caller_boundary: Optional[str], level: Level,
                    message: Message, exc_info: ExcInfo = None) -> None:
        """Log a Message on behalf of the caller beyond ``caller_boundary``."""
        pass


class ILoggerFactory(ABC):
    """Resolves logger names to backend instances."""

    @abstractmethod
    def get_logger(self, name: str) -> ILogger:
        pass
