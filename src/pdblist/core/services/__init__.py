"""Core atom list services."""

from .record_store import RecordStore
from .selection_service import SelectionService
from .geometry_service import GeometryService

__all__ = [
    "RecordStore",
    "SelectionService",
    "GeometryService",
]
