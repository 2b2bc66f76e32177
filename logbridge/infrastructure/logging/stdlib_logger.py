"""
Location-aware backend on top of the standard logging module.
"""
import logging
from typing import Any, Dict, Optional, Union

from ...core.interfaces.logger_interface import ExcInfo, ILocationAwareLogger
from ...core.messages.message import ParameterizedMessage
from ...core.value_objects.level import Level
from ...core.value_objects.marker import Marker
from .records import exc_tuple, find_caller


class StdlibLogger(ILocationAwareLogger):
    """Backend that hands records to a stdlib ``logging.Logger``.

    Records are attributed to the first caller outside the supplied caller
    boundary, so file, line and function point at application code rather
    than at the facade.
    """

    FQCN = f"{__name__}.StdlibLogger"

    def __init__(self, logger: Union[str, logging.Logger]):
        self.logger = logging.getLogger(logger) if isinstance(logger, str) else logger

    @property
    def name(self) -> str:
        return self.logger.name

    def is_enabled(self, level: Level, marker: Optional[Marker] = None) -> bool:
        return self.logger.isEnabledFor(level.stdlib_level)

    def trace(self, message: str, *args: Any, marker: Optional[Marker] = None,
              exc_info: ExcInfo = None) -> None:
        self._log_formatted(Level.TRACE, message, args, marker, exc_info)

    def debug(self, message: str, *args: Any, marker: Optional[Marker] = None,
              exc_info: ExcInfo = None) -> None:
        self._log_formatted(Level.DEBUG, message, args, marker, exc_info)

    def info(self, message: str, *args: Any, marker: Optional[Marker] = None,
             exc_info: ExcInfo = None) -> None:
        self._log_formatted(Level.INFO, message, args, marker, exc_info)

    def warn(self, message: str, *args: Any, marker: Optional[Marker] = None,
             exc_info: ExcInfo = None) -> None:
        self._log_formatted(Level.WARN, message, args, marker, exc_info)

    def error(self, message: str, *args: Any, marker: Optional[Marker] = None,
              exc_info: ExcInfo = None) -> None:
        self._log_formatted(Level.ERROR, message, args, marker, exc_info)

    def log(self, marker: Optional[Marker], caller_boundary: Optional[str], level: Level,
            message: Optional[str], exc_info: ExcInfo = None) -> None:
        self._emit(level, marker, caller_boundary, message, exc_info)

    def _log_formatted(self, level: Level, message: str, args: tuple,
                       marker: Optional[Marker], exc_info: ExcInfo) -> None:
        if not self.logger.isEnabledFor(level.stdlib_level):
            return
        parameterized = ParameterizedMessage(message, args)
        text = parameterized.formatted_message
        if exc_info is None:
            exc_info = parameterized.throwable
        self._emit(level, marker, StdlibLogger.FQCN, text, exc_info)

    def _emit(self, level: Level, marker: Optional[Marker], caller_boundary: Optional[str],
              text: Optional[str], exc_info: ExcInfo, extra: Optional[Dict[str, Any]] = None) -> None:
        """Build and handle a record attributed to the caller past the boundary."""
        stdlib_level = level.stdlib_level
        if not self.logger.isEnabledFor(stdlib_level):
            return

        fn, lno, func = find_caller(caller_boundary or StdlibLogger.FQCN)
        record_extra = dict(extra) if extra else {}
        if marker is not None:
            record_extra["marker"] = marker.name

        record = self.logger.makeRecord(
            self.logger.name,
            stdlib_level,
            fn,
            lno,
            text,
            (),
            exc_tuple(exc_info),
            func=func,
            extra=record_extra or None,
        )
        self.logger.handle(record)

    def __repr__(self) -> str:
        return f"StdlibLogger(name={self.name!r})"
