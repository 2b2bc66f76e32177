"""Facade loggers handed to application code"""

from .capability import detect_capability
from .logger_wrapper import LoggerWrapper
from .event_logger import EventLogger

__all__ = [
    'detect_capability',
    'LoggerWrapper',
    'EventLogger'
]
