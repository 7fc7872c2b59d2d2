"""Immutable key/value containers."""

from .entry import MapEntry
from .views import MapOf, MapView

__all__ = ["MapEntry", "MapOf", "MapView"]
