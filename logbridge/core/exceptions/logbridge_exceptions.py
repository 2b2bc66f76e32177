from typing import Dict, Any, Optional


class LogBridgeException(Exception):
    """Base exception for facade operations"""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization"""
        return {
            'error_type': self.__class__.__name__,
            'message': str(self),
            'error_code': self.error_code,
            'details': self.details
        }


class BindingError(LogBridgeException):
    """Logger factory could not be bound"""

    def __init__(self, target: str, reason: str = ""):
        message = f"Failed to bind logger factory '{target}'"
        if reason:
            message += f": {reason}"
        super().__init__(
            message,
            error_code="BINDING_FAILED",
            details={"target": target, "reason": reason}
        )


class EventDecodeError(LogBridgeException):
    """Serialized event data could not be decoded"""

    def __init__(self, payload_format: str, reason: str = ""):
        message = f"Error decoding {payload_format} event data"
        if reason:
            message += f": {reason}"
        super().__init__(
            message,
            error_code="EVENT_DECODE_FAILED",
            details={"format": payload_format, "reason": reason}
        )
