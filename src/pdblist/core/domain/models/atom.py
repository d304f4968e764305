#!/usr/bin/env python3
# src/pdblist/core/domain/models/atom.py

"""
Domain model representing a single atom record of a structure.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from ....constants import ATOM_NAME_WIDTH, NULL_COORDINATE

Coordinates = Tuple[float, float, float]


def pad_atom_name(name: str) -> str:
    """Left-justify an atom name into the fixed-width tag used for selection."""
    return name.strip().ljust(ATOM_NAME_WIDTH)[:ATOM_NAME_WIDTH]


def coordinates_from_xyz(
    x: float, y: float, z: float, null_value: float = NULL_COORDINATE
) -> Optional[Coordinates]:
    """
    Convert legacy x, y, z values into record coordinates.

    An atom only counts as unplaced when all three axes carry the null
    marker; a single real axis keeps the coordinates.

    Args:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate
        null_value: Threshold at or above which an axis is unknown

    Returns:
        Tuple of floats, or None when the position is unknown
    """
    if x >= null_value and y >= null_value and z >= null_value:
        return None
    return (float(x), float(y), float(z))


@dataclass
class AtomRecord:
    """Represents one atom of a structure."""

    atom_name: str = " " * ATOM_NAME_WIDTH
    coordinates: Optional[Coordinates] = None
    atom_number: int = 0
    residue_name: str = ""
    residue_number: int = 0
    insertion_code: str = " "
    chain_id: str = "A"
    alt_loc: str = " "
    occupancy: float = 1.0
    b_factor: float = 0.0
    element: str = ""
    record_type: str = "ATOM"
    # Sequence that currently holds this record
    _owner: Any = field(default=None, init=False, repr=False, compare=False)

    @property
    def has_coordinates(self) -> bool:
        return self.coordinates is not None

    @property
    def owner(self) -> Any:
        return self._owner

    @property
    def residue_key(self) -> Tuple[str, int, str]:
        """Chain, residue number and insertion code identifying the residue."""
        return (self.chain_id, self.residue_number, self.insertion_code)
