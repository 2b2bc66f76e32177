"""
Backend capability detection.
"""
from typing import Any

from ..core.interfaces.logger_interface import ILocationAwareLogger, IMarkerAwareLogger, IMessageLogger
from ..core.value_objects.capability import CapabilityTier

CAPABILITY_ATTR = "logbridge_capability"

_REQUIRED_CALLABLE = {
    CapabilityTier.MESSAGE_AWARE: "log_message",
    CapabilityTier.LOCATION_AWARE: "log",
}


def _declared_capability(backend: Any) -> CapabilityTier:
    declared = getattr(type(backend), CAPABILITY_ATTR, None)
    if not isinstance(declared, CapabilityTier):
        return CapabilityTier.PLAIN

    # Fall back tier by tier until the backend has what the tier calls
    tier = declared
    while tier > CapabilityTier.MARKER_AWARE:
        if callable(getattr(backend, _REQUIRED_CALLABLE[tier], None)):
            return tier
        tier = CapabilityTier(tier - 1)
    return tier


def detect_capability(backend: Any) -> CapabilityTier:
    """Determine the richest protocol ``backend`` supports.

    Subclasses of the backend interfaces are classified by type. Other
    objects may declare a ``logbridge_capability`` class attribute, which is
    honoured only when the callable the tier relies on is present.
    Everything else is treated as a plain logger.
    """
    if isinstance(backend, IMessageLogger):
        return CapabilityTier.MESSAGE_AWARE
    if isinstance(backend, ILocationAwareLogger):
        return CapabilityTier.LOCATION_AWARE
    if isinstance(backend, IMarkerAwareLogger):
        return CapabilityTier.MARKER_AWARE
    return _declared_capability(backend)
