"""
Structured JSON logger backend with native Message support.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from ...core.entities.structured_record import StructuredRecord
from ...core.interfaces.logger_interface import ExcInfo, IMessageLogger
from ...core.messages.message import Message
from ...core.value_objects.level import Level
from ...core.value_objects.marker import Marker
from .stdlib_logger import StdlibLogger


def structured_payload(record: StructuredRecord) -> Dict[str, Any]:
    """JSON-friendly view of a structured record"""
    return {
        "id": record.id.render() if record.id is not None else None,
        "type": record.type,
        "message": record.message,
        "params": dict(record.sd_params()),
    }


class StructuredLogger(StdlibLogger, IMessageLogger):
    """Structured logger implementation with JSON formatting and Message support."""

    FQCN = f"{__name__}.StructuredLogger"

    def __init__(self, name: str = "structured", level: str = "INFO", stream: Optional[TextIO] = None):
        super().__init__(name)
        self.logger.setLevel(Level.from_name(level).stdlib_level)

        # Console handler
        if not self.logger.handlers:
            handler = logging.StreamHandler(stream or sys.stdout)
            handler.setFormatter(StructuredFormatter())
            self.logger.addHandler(handler)

        # Prevent duplicate logs
        self.logger.propagate = False

    def log_message(self, marker: Optional[Marker], caller_boundary: Optional[str], level: Level,
                    message: Message, exc_info: ExcInfo = None) -> None:
        """Log a Message, keeping structured records as structured fields."""
        if not self.logger.isEnabledFor(level.stdlib_level):
            return

        extra: Dict[str, Any] = {}
        if isinstance(message, StructuredRecord):
            extra["structured_data"] = structured_payload(message)
        elif message.parameters:
            extra["message_template"] = message.template

        self._emit(level, marker, caller_boundary or StructuredLogger.FQCN,
                   message.formatted_message, exc_info, extra)

    def __repr__(self) -> str:
        return f"StructuredLogger(name={self.name!r})"


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    RESERVED_ATTRS = frozenset({
        'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
        'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
        'thread', 'threadName', 'processName', 'process', 'stack_info',
        'exc_info', 'exc_text', 'message', 'timestamp', 'taskName'
    })

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS:
                # Ensure value is JSON serializable
                try:
                    json.dumps(value)
                    log_entry[key] = value
                except (TypeError, ValueError):
                    log_entry[key] = str(value)

        try:
            return json.dumps(log_entry, ensure_ascii=False, separators=(',', ':'))
        except (TypeError, ValueError):
            # Fallback to string representation if JSON serialization fails
            return str(log_entry)
