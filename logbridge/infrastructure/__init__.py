"""Concrete backend implementations"""

from .nop_logger import NOPLogger, NOP_LOGGER, NOPLoggerFactory
from .logging import StdlibLogger, StructuredLogger, StructuredFormatter

__all__ = [
    'NOPLogger',
    'NOP_LOGGER',
    'NOPLoggerFactory',
    'StdlibLogger',
    'StructuredLogger',
    'StructuredFormatter'
]
