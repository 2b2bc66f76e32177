"""Validation exceptions raised while building identifiers and records"""

from typing import Any, Dict, Optional


class ValidationError(ValueError):
    """Raised when structured data validation fails"""

    def __init__(self, message: str, field: Optional[str] = None, value: Optional[Any] = None):
        self.field = field
        self.value = value
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization"""
        return {
            'error_type': self.__class__.__name__,
            'message': str(self),
            'field': self.field,
            'value': self.value
        }


class StructuredDataIdValidationError(ValidationError):
    """SD-ID name or enterprise number is invalid"""

    def __init__(self, sd_id: Optional[str], reason: str):
        super().__init__(f"Invalid structured data id '{sd_id}': {reason}", 'id', sd_id)
        self.sd_id = sd_id
        self.reason = reason


class FieldValidationError(ValidationError):
    """Structured data field key or value is invalid"""

    def __init__(self, key: Optional[str], value: Any, reason: str):
        super().__init__(f"Invalid value for field '{key}': {reason}", key, value)
        self.key = key
        self.reason = reason


class RecordTypeValidationError(ValidationError):
    """Structured data type is invalid"""

    def __init__(self, record_type: str, reason: str):
        super().__init__(f"Invalid structured data type '{record_type}': {reason}", 'type', record_type)
        self.record_type = record_type
        self.reason = reason
