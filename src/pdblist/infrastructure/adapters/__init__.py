"""Adapters for external libraries."""

from .biopython_adapter import BiopythonAdapter

__all__ = [
    "BiopythonAdapter",
]
