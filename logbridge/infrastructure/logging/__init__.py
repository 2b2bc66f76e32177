"""Backends built on the standard logging module"""

from .records import find_caller, exc_tuple
from .stdlib_logger import StdlibLogger
from .structured_logger import StructuredLogger, StructuredFormatter, structured_payload

__all__ = [
    'find_caller',
    'exc_tuple',
    'StdlibLogger',
    'StructuredLogger',
    'StructuredFormatter',
    'structured_payload'
]
