"""Infrastructure adapters connecting the core to external libraries."""

from .adapters.biopython_adapter import BiopythonAdapter

__all__ = [
    "BiopythonAdapter",
]
