"""
LogBridge: a logging facade with RFC 5424 structured data support.

Application code asks for a logger with :func:`get_logger` and logs plain
text, ``{}`` templates or :class:`StructuredRecord` instances. The bound
backend decides where the output goes.
"""
import logging

from .core.entities import StructuredRecord, EventData, FULL
from .core.exceptions import (
    ValidationError,
    StructuredDataIdValidationError,
    FieldValidationError,
    RecordTypeValidationError,
    LogBridgeException,
    BindingError,
    EventDecodeError,
)
from .core.interfaces import ILogger, IMarkerAwareLogger, ILocationAwareLogger, IMessageLogger, ILoggerFactory
from .core.messages import Message, SimpleMessage, ParameterizedMessage, format_message
from .core.value_objects import CapabilityTier, Level, Marker, StructuredDataId, get_marker
from .factories import (
    LoggerFactoryBinder,
    LoggerFactoryBuilder,
    get_logger,
    get_logger_factory,
    set_logger_factory,
    reset_logger_factory,
)
from .wrappers import EventLogger, LoggerWrapper, detect_capability

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'StructuredRecord',
    'EventData',
    'FULL',
    'ValidationError',
    'StructuredDataIdValidationError',
    'FieldValidationError',
    'RecordTypeValidationError',
    'LogBridgeException',
    'BindingError',
    'EventDecodeError',
    'ILogger',
    'IMarkerAwareLogger',
    'ILocationAwareLogger',
    'IMessageLogger',
    'ILoggerFactory',
    'Message',
    'SimpleMessage',
    'ParameterizedMessage',
    'format_message',
    'CapabilityTier',
    'Level',
    'Marker',
    'StructuredDataId',
    'get_marker',
    'LoggerFactoryBinder',
    'LoggerFactoryBuilder',
    'get_logger',
    'get_logger_factory',
    'set_logger_factory',
    'reset_logger_factory',
    'EventLogger',
    'LoggerWrapper',
    'detect_capability'
]
