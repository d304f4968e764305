"""Domain model classes."""

from .atom import AtomRecord, Coordinates, coordinates_from_xyz, pad_atom_name
from .atom_sequence import AtomSequence, Position, Range

__all__ = [
    "AtomRecord",
    "Coordinates",
    "coordinates_from_xyz",
    "pad_atom_name",
    "AtomSequence",
    "Position",
    "Range",
]
