"""Backend capability tiers"""

from enum import IntEnum


class CapabilityTier(IntEnum):
    """Richest logging protocol a backend supports"""
    PLAIN = 0
    MARKER_AWARE = 1
    LOCATION_AWARE = 2
    MESSAGE_AWARE = 3

    @property
    def accepts_marker(self) -> bool:
        return self >= CapabilityTier.MARKER_AWARE

    @property
    def accepts_caller_boundary(self) -> bool:
        return self >= CapabilityTier.LOCATION_AWARE
