"""Backend interfaces"""

from .logger_interface import (
    ExcInfo,
    ILogger,
    IMarkerAwareLogger,
    ILocationAwareLogger,
    IMessageLogger,
    ILoggerFactory,
)

__all__ = [
    'ExcInfo',
    'ILogger',
    'IMarkerAwareLogger',
    'ILocationAwareLogger',
    'IMessageLogger',
    'ILoggerFactory'
]
