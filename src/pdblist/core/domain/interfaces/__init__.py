"""Domain interfaces."""

from .node_allocator import NodeAllocator

__all__ = ["NodeAllocator"]
