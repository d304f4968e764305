"""Domain interface implementations."""

from .heap_allocator import HeapAllocator

__all__ = ["HeapAllocator"]
