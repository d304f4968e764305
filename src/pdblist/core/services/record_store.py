#!/usr/bin/env python3
# src/pdblist/core/services/record_store.py

"""
Service for allocating, copying and releasing atom records.
"""

import logging
from dataclasses import fields
from typing import Optional

from ..domain.models.atom import AtomRecord
from ..domain.models.atom_sequence import AtomSequence
from ..domain.interfaces.node_allocator import NodeAllocator

logger = logging.getLogger(__name__)

# Atom attributes; the owner reference is bookkeeping, not data
_RECORD_FIELDS = tuple(f.name for f in fields(AtomRecord) if f.name != "_owner")


class RecordStore:
    """Allocation and copy primitives shared by the list transforms."""

    def __init__(self, allocator: Optional[NodeAllocator] = None):
        """Initialize store with an allocation strategy."""
        from ..domain.implementations.heap_allocator import HeapAllocator

        self._allocator = allocator or HeapAllocator()

    def allocate_node(self) -> Optional[AtomRecord]:
        """
        Allocate one blank record that belongs to no sequence.

        Returns:
            The new record, or None if the allocator failed
        """
        record = self._allocator.allocate()
        if record is None:
            logger.warning("Atom record allocation failed")
        return record

    @staticmethod
    def copy_record_fields(dest: AtomRecord, src: AtomRecord) -> None:
        """
        Copy every atom attribute of src into dest.

        The owner of dest is left untouched. All attribute values are
        immutable, so dest shares no mutable state with src.
        """
        for name in _RECORD_FIELDS:
            value = getattr(src, name)
            if name == "coordinates" and value is not None:
                value = tuple(float(v) for v in value)
            setattr(dest, name, value)

    def copy_record(self, src: AtomRecord) -> Optional[AtomRecord]:
        """Allocate a new record holding a copy of src, or None on failure."""
        record = self.allocate_node()
        if record is not None:
            self.copy_record_fields(record, src)
        return record

    @staticmethod
    def release_sequence(atoms: Optional[AtomSequence]) -> None:
        """Release every record of a sequence; None is accepted."""
        if atoms is None or atoms.released:
            return
        atoms.release()
