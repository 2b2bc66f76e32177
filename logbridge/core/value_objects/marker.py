"""Marker value object used to tag log statements"""

import threading
from dataclasses import dataclass
from typing import Dict, Tuple, Union


@dataclass(frozen=True)
class Marker:
    """Named tag that may reference other markers"""
    name: str
    references: Tuple['Marker', ...] = ()

    def __post_init__(self):
        if not self.name:
            raise ValueError("Marker name cannot be empty")

    def contains(self, other: Union['Marker', str]) -> bool:
        """Check whether this marker is, or references, the given marker"""
        name = other.name if isinstance(other, Marker) else other
        if self.name == name:
            return True
        return any(ref.contains(name) for ref in self.references)

    def with_reference(self, other: 'Marker') -> 'Marker':
        """Return a copy of this marker that also references ``other``"""
        if other in self.references:
            return self
        return Marker(self.name, self.references + (other,))

    def __str__(self) -> str:
        return self.name


_markers: Dict[str, Marker] = {}
_markers_lock = threading.Lock()


def get_marker(name: str) -> Marker:
    """Get or create the process-wide marker with the given name"""
    with _markers_lock:
        marker = _markers.get(name)
        if marker is None:
            marker = Marker(name)
            _markers[name] = marker
        return marker
