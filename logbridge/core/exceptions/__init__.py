"""Core domain exceptions"""

from .validation_exceptions import (
    ValidationError,
    StructuredDataIdValidationError,
    FieldValidationError,
    RecordTypeValidationError,
)
from .logbridge_exceptions import LogBridgeException, BindingError, EventDecodeError

__all__ = [
    'ValidationError',
    'StructuredDataIdValidationError',
    'FieldValidationError',
    'RecordTypeValidationError',
    'LogBridgeException',
    'BindingError',
    'EventDecodeError'
]
