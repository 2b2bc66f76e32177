"""
Event logging on top of the facade.
"""
import threading
from typing import Optional, Tuple, Union

from ..config import get_config
from ..core.entities.event_data import EventData
from ..core.messages.message import Message, SimpleMessage
from ..core.value_objects.level import Level
from ..core.value_objects.marker import Marker, get_marker
from .logger_wrapper import LoggerWrapper

STRUCTURED = "structured"
JSON = "json"
XML = "xml"


class EventLogger:
    """Logs EventData records at INFO level tagged with the event marker.

    The wrapper is created on first use from the configured logger name and
    reports callers past this class.
    """

    FQCN = f"{__name__}.EventLogger"

    _wrapper: Optional[LoggerWrapper] = None
    _marker: Optional[Marker] = None
    _lock = threading.Lock()

    @classmethod
    def _get_wrapper(cls) -> Tuple[LoggerWrapper, Marker]:
        """Return the wrapper and marker as one consistent pair"""
        with cls._lock:
            if cls._wrapper is None:
                from ..factories.logger_factory import get_logger
                config = get_config()
                cls._marker = get_marker(config.events.marker)
                cls._wrapper = get_logger(config.events.logger_name, caller_boundary=EventLogger.FQCN)
            return cls._wrapper, cls._marker

    @classmethod
    def marker(cls) -> Marker:
        return cls._get_wrapper()[1]

    @classmethod
    def log_event(cls, data: Union[EventData, Message], fmt: Optional[str] = None) -> None:
        """Log an event.

        Args:
            data: the event to log; a Message that is not EventData is
                logged unchanged.
            fmt: "structured", "json" or "xml"; defaults to the configured
                event format.

        Raises:
            ValueError: if ``fmt`` is not a known format
        """
        wrapper, marker = cls._get_wrapper()
        if not wrapper.is_enabled(Level.INFO, marker):
            return

        message = data
        if isinstance(data, EventData):
            fmt = (fmt or get_config().events.format).lower()
            if fmt == JSON:
                message = SimpleMessage(data.to_json())
            elif fmt == XML:
                message = SimpleMessage(data.to_xml())
            elif fmt != STRUCTURED:
                raise ValueError(f"Unknown event format: {fmt}")

        wrapper.log_message(marker, EventLogger.FQCN, Level.INFO, message)

    @classmethod
    def reset(cls) -> None:
        """Drop the cached wrapper so configuration changes take effect"""
        with cls._lock:
            cls._wrapper = None
            cls._marker = None
