"""Core domain models and interfaces."""

from .models.atom import AtomRecord
from .models.atom_sequence import AtomSequence, Position, Range
from .interfaces.node_allocator import NodeAllocator
from .implementations.heap_allocator import HeapAllocator

__all__ = [
    "AtomRecord",
    "AtomSequence",
    "Position",
    "Range",
    "NodeAllocator",
    "HeapAllocator",
]
