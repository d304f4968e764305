"""Default allocator creating atom records on the heap."""

import logging
from typing import Optional

from ..interfaces.node_allocator import NodeAllocator
from ..models.atom import AtomRecord

logger = logging.getLogger(__name__)


class HeapAllocator(NodeAllocator):
    """Allocates plain AtomRecord instances."""

    def allocate(self) -> Optional[AtomRecord]:
        try:
            return AtomRecord()
        except MemoryError:
            logger.warning("Out of memory allocating atom record")
            return None
