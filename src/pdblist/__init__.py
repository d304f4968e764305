"""Atom record lists for macromolecular structures."""

from typing import Optional, Sequence, Tuple

import numpy as np

from .core.domain.models.atom import AtomRecord, coordinates_from_xyz, pad_atom_name
from .core.domain.models.atom_sequence import AtomSequence, Position, Range
from .core.domain.interfaces.node_allocator import NodeAllocator
from .core.services.record_store import RecordStore
from .core.services.selection_service import SelectionService
from .core.services.geometry_service import GeometryService
from .exceptions import EmptyAggregateError, PdbListError, ReleasedSequenceError

__version__ = "0.1.0"


def select_atoms_as_copy(
    atoms: AtomSequence, selectors: Sequence[str]
) -> Tuple[AtomSequence, int]:
    """Copy the atoms named by 4 character selectors; see SelectionService."""
    return SelectionService().select_atoms_as_copy(atoms, selectors)


def center_of_geometry(rng: Range) -> np.ndarray:
    """Centre of geometry of a range; see GeometryService."""
    return GeometryService().center_of_geometry(rng)


def release_sequence(atoms: Optional[AtomSequence]) -> None:
    """Release every record of a sequence; None is accepted. See RecordStore."""
    RecordStore.release_sequence(atoms)


__all__ = [
    "AtomRecord",
    "AtomSequence",
    "Position",
    "Range",
    "NodeAllocator",
    "RecordStore",
    "SelectionService",
    "GeometryService",
    "EmptyAggregateError",
    "PdbListError",
    "ReleasedSequenceError",
    "coordinates_from_xyz",
    "pad_atom_name",
    "select_atoms_as_copy",
    "center_of_geometry",
    "release_sequence",
]
