"""
Capability-detecting logger wrapper.

The wrapper is the facade handed to application code. It classifies its
backend once, at construction, and routes every call through the richest
protocol that backend supports:

    MESSAGE_AWARE   backend.log_message(marker, boundary, level, Message, exc_info)
    LOCATION_AWARE  backend.log(marker, boundary, level, text, exc_info)
    MARKER_AWARE    backend.<level>(msg, *args, marker=marker, exc_info=exc_info)
    PLAIN           backend.<level>(msg, *args, exc_info=exc_info)

Nothing is formatted when the level is disabled on the backend.
"""
from typing import Any, Callable, Optional, Tuple, Union

from ..core.interfaces.logger_interface import ExcInfo, IMessageLogger
from ..core.messages import formatter
from ..core.messages.message import Message, ParameterizedMessage, SimpleMessage
from ..core.value_objects.capability import CapabilityTier
from ..core.value_objects.level import Level
from ..core.value_objects.marker import Marker
from .capability import detect_capability

LogArg = Union[str, Message, None]


def _log_method(level: Level) -> Callable[..., None]:
    def log_at(self: 'LoggerWrapper', msg: LogArg, *args: Any, marker: Optional[Marker] = None,
               exc_info: ExcInfo = None) -> None:
        self._dispatch(level, msg, args, marker, exc_info, self._caller_boundary)

    log_at.__name__ = log_at.__qualname__ = level.method_name
    log_at.__doc__ = f"Log ``msg`` at {level.name} level."
    return log_at


def _enabled_method(level: Level) -> Callable[..., bool]:
    def is_level_enabled(self: 'LoggerWrapper', marker: Optional[Marker] = None) -> bool:
        return self.is_enabled(level, marker)

    is_level_enabled.__name__ = is_level_enabled.__qualname__ = f"is_{level.method_name}_enabled"
    is_level_enabled.__doc__ = f"Check whether {level.name} is enabled on the backend."
    return is_level_enabled


class LoggerWrapper(IMessageLogger):
    """Facade over a backend logger of any capability tier.

    The wrapper holds no state besides the backend, its tier and the caller
    boundary, so independently created wrappers around the same backend
    behave identically. It adds no locking and never catches backend
    errors.
    """

    FQCN = f"{__name__}.LoggerWrapper"

    def __init__(self, logger: Any, caller_boundary: Optional[str] = None):
        self._logger = logger
        self._tier = detect_capability(logger)
        self._caller_boundary = caller_boundary or LoggerWrapper.FQCN

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def tier(self) -> CapabilityTier:
        return self._tier

    @property
    def caller_boundary(self) -> str:
        return self._caller_boundary

    @property
    def backend(self) -> Any:
        return self._logger

    def is_enabled(self, level: Level, marker: Optional[Marker] = None) -> bool:
        if self._tier.accepts_marker:
            return self._logger.is_enabled(level, marker)
        return self._logger.is_enabled(level)

    trace = _log_method(Level.TRACE)
    debug = _log_method(Level.DEBUG)
    info = _log_method(Level.INFO)
    warn = _log_method(Level.WARN)
    error = _log_method(Level.ERROR)

    warning = warn

    is_trace_enabled = _enabled_method(Level.TRACE)
    is_debug_enabled = _enabled_method(Level.DEBUG)
    is_info_enabled = _enabled_method(Level.INFO)
    is_warn_enabled = _enabled_method(Level.WARN)
    is_error_enabled = _enabled_method(Level.ERROR)

    def exception(self, msg: LogArg, *args: Any, marker: Optional[Marker] = None,
                  exc_info: ExcInfo = True) -> None:
        """Log at ERROR level with the exception currently being handled."""
        self._dispatch(Level.ERROR, msg, args, marker, exc_info, self._caller_boundary)

    def log(self, marker: Optional[Marker], caller_boundary: Optional[str], level: Level,
            message: Optional[str], exc_info: ExcInfo = None) -> None:
        self._dispatch(level, message, (), marker, exc_info, caller_boundary or self._caller_boundary)

    def log_message(self, marker: Optional[Marker], caller_boundary: Optional[str], level: Level,
                    message: Message, exc_info: ExcInfo = None) -> None:
        self._dispatch(level, message, (), marker, exc_info, caller_boundary or self._caller_boundary)

    def _dispatch(self, level: Level, msg: LogArg, args: Tuple[Any, ...], marker: Optional[Marker],
                  exc_info: ExcInfo, caller_boundary: str) -> None:
        if not self.is_enabled(level, marker):
            return

        tier = self._tier
        if tier == CapabilityTier.MESSAGE_AWARE:
            message = _as_message(msg, args)
            if exc_info is None:
                exc_info = _trailing_exception(message)
            self._logger.log_message(marker, caller_boundary, level, message, exc_info)
            return

        if tier == CapabilityTier.LOCATION_AWARE:
            message = _as_message(msg, args)
            text = message.formatted_message
            if exc_info is None:
                exc_info = _trailing_exception(message)
            self._logger.log(marker, caller_boundary, level, text, exc_info)
            return

        # Lower tiers format for themselves; a Message arrives pre-rendered
        if isinstance(msg, Message):
            if exc_info is None:
                exc_info = _trailing_exception(msg)
            msg, args = msg.formatted_message, ()
        method = getattr(self._logger, level.method_name)
        if tier == CapabilityTier.MARKER_AWARE:
            method(msg, *args, marker=marker, exc_info=exc_info)
        else:
            method(msg, *args, exc_info=exc_info)

    def __repr__(self) -> str:
        return f"LoggerWrapper(backend={self._logger!r}, tier={self._tier.name})"


def _as_message(msg: LogArg, args: Tuple[Any, ...]) -> Message:
    if isinstance(msg, Message):
        return msg
    if args:
        return ParameterizedMessage(msg, args)
    return SimpleMessage(msg)


def _trailing_exception(message: Message) -> Optional[BaseException]:
    # Only a trailing exception argument can be left over, so skip formatting otherwise
    if not isinstance(message, ParameterizedMessage):
        return None
    if formatter.throwable_candidate(message.parameters) is None:
        return None
    return message.throwable
