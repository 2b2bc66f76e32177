"""Core entities"""

from .structured_record import StructuredRecord, FULL
from .event_data import (
    EventData,
    EventDataModel,
    EVENT_ID,
    EVENT_MESSAGE,
    EVENT_TYPE,
    EVENT_DATETIME,
    RESERVED_KEYS,
)

__all__ = [
    'StructuredRecord',
    'FULL',
    'EventData',
    'EventDataModel',
    'EVENT_ID',
    'EVENT_MESSAGE',
    'EVENT_TYPE',
    'EVENT_DATETIME',
    'RESERVED_KEYS'
]
