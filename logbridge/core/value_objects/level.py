"""Severity levels shared by the facade and its backends"""

import logging
from enum import IntEnum

TRACE_LEVEL_NUM = 5

logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")


class Level(IntEnum):
    """Facade severity levels, ordered from most to least verbose"""
    TRACE = 0
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @property
    def method_name(self) -> str:
        """Name of the per-level logging method"""
        return self.name.lower()

    @property
    def stdlib_level(self) -> int:
        """Equivalent level number in the standard logging module"""
        return _STDLIB_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> 'Level':
        """Parse a level name, accepting stdlib spellings such as WARNING"""
        key = name.strip().upper()
        if key == "WARNING":
            key = "WARN"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown level: {name}") from None


_STDLIB_LEVELS = {
    Level.TRACE: TRACE_LEVEL_NUM,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
}
