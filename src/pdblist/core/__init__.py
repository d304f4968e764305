"""Core domain models and services for atom record lists."""

from .domain.models.atom import AtomRecord
from .domain.models.atom_sequence import AtomSequence, Position, Range
from .domain.interfaces.node_allocator import NodeAllocator
from .services.record_store import RecordStore
from .services.selection_service import SelectionService
from .services.geometry_service import GeometryService

__all__ = [
    "AtomRecord",
    "AtomSequence",
    "Position",
    "Range",
    "NodeAllocator",
    "RecordStore",
    "SelectionService",
    "GeometryService",
]
