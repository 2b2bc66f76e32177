"""
A direct no-operation implementation of ILogger.
"""
from typing import Any

from ..core.interfaces.logger_interface import ExcInfo, ILogger, ILoggerFactory
from ..core.value_objects.level import Level


class NOPLogger(ILogger):
    """Logger that discards everything; every level reports disabled."""

    @property
    def name(self) -> str:
        """Always "NOP"."""
        return "NOP"

    def is_enabled(self, level: Level) -> bool:
        return False

    def trace(self, message: str, *args: Any, exc_info: ExcInfo = None) -> None:
        pass

    def debug(self, message: str, *args: Any, exc_info: ExcInfo = None) -> None:
        pass

    def info(self, message: str, *args: Any, exc_info: ExcInfo = None) -> None:
        pass

    def warn(self, message: str, *args: Any, exc_info: ExcInfo = None) -> None:
        pass

    def error(self, message: str, *args: Any, exc_info: ExcInfo = None) -> None:
        pass

    def __repr__(self) -> str:
        return "NOPLogger()"


NOP_LOGGER = NOPLogger()


class NOPLoggerFactory(ILoggerFactory):
    """Factory handing out the shared NOP logger for every name."""

    def get_logger(self, name: str) -> ILogger:
        return NOP_LOGGER
