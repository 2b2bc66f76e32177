"""Core value objects"""

from .level import Level, TRACE_LEVEL_NUM
from .capability import CapabilityTier
from .marker import Marker, get_marker
from .structured_data_id import StructuredDataId, RESERVED, MAX_LENGTH, TIME_QUALITY, ORIGIN, META

__all__ = [
    'Level',
    'TRACE_LEVEL_NUM',
    'CapabilityTier',
    'Marker',
    'get_marker',
    'StructuredDataId',
    'RESERVED',
    'MAX_LENGTH',
    'TIME_QUALITY',
    'ORIGIN',
    'META'
]
