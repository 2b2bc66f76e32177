"""Logger factories and binding"""

from .logger_factory import (
    StdlibLoggerFactory,
    StructuredLoggerFactory,
    LoggerFactoryBuilder,
    LoggerFactoryBinder,
    get_logger,
    get_logger_factory,
    set_logger_factory,
    reset_logger_factory,
)

__all__ = [
    'StdlibLoggerFactory',
    'StructuredLoggerFactory',
    'LoggerFactoryBuilder',
    'LoggerFactoryBinder',
    'get_logger',
    'get_logger_factory',
    'set_logger_factory',
    'reset_logger_factory'
]
