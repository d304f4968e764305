"""Service for geometric aggregates over ranges of an atom sequence."""

import logging
from typing import Iterable

import numpy as np

from ..domain.models.atom import AtomRecord
from ..domain.models.atom_sequence import AtomSequence, Range
from ...constants import BACKBONE_ATOMS, CA_ATOM, MAIN_CHAIN_EXTRA_ATOMS
from ...exceptions import EmptyAggregateError

logger = logging.getLogger(__name__)

_MAIN_CHAIN = BACKBONE_ATOMS + MAIN_CHAIN_EXTRA_ATOMS


def _mean_position(records: Iterable[AtomRecord]) -> np.ndarray:
    """Mean of the known coordinates; raises if there are none."""
    total = np.zeros(3)
    natom = 0
    for record in records:
        if record.coordinates is not None:
            total += record.coordinates
            natom += 1

    if natom == 0:
        raise EmptyAggregateError("No atoms with coordinates in range")
    return total / natom


class GeometryService:
    """Service computing centres of geometry without copying atoms."""

    def center_of_geometry(self, rng: Range) -> np.ndarray:
        """
        Find the centre of geometry of a range, ignoring unknown coordinates.

        Args:
            rng: Atoms from rng.start up to, not including, rng.stop

        Returns:
            numpy array of shape (3,)

        Raises:
            EmptyAggregateError: If no atom in the range has coordinates
        """
        return _mean_position(rng)

    def center_of_geometry_all(self, atoms: AtomSequence) -> np.ndarray:
        """Find the centre of geometry of a whole sequence."""
        return self.center_of_geometry(atoms.whole_range())

    def sidechain_center_of_geometry(self, rng: Range) -> np.ndarray:
        """
        Find the centre of geometry of the side chain atoms in a range.

        Main chain atoms are skipped: N, CA, C, O, OXT and the amide and
        alpha hydrogens. When nothing else has coordinates, as for glycine,
        the C-alpha position is returned instead.

        Raises:
            EmptyAggregateError: If neither side chain nor CA is placed
        """
        try:
            return _mean_position(
                atom for atom in rng if atom.atom_name[:4] not in _MAIN_CHAIN
            )
        except EmptyAggregateError:
            return _mean_position(atom for atom in rng if atom.atom_name[:4] == CA_ATOM)

    def residue_centers(self, atoms: AtomSequence) -> np.ndarray:
        """
        Get the centre of geometry of every residue.

        Returns:
            numpy array of shape (n_residues, 3); residues without any
            known coordinate give a row of NaN
        """
        centers = []
        for rng in atoms.residue_ranges():
            try:
                centers.append(self.center_of_geometry(rng))
            except EmptyAggregateError:
                first = rng.start.record
                logger.debug(
                    f"No coordinates for residue {first.chain_id}"
                    f"{first.residue_number}{first.insertion_code.strip()}"
                )
                centers.append(np.full(3, np.nan))

        if not centers:
            return np.empty((0, 3))
        return np.vstack(centers)
