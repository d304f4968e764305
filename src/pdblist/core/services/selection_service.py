"""Service for selecting atoms from a sequence into an independent copy."""

import logging
from typing import Callable, Optional, Sequence, Tuple

from ..domain.models.atom import AtomRecord
from ..domain.models.atom_sequence import AtomSequence
from .record_store import RecordStore
from ...constants import ATOM_NAME_WIDTH, BACKBONE_ATOMS, CA_ATOM, HYDROGEN_ELEMENTS

logger = logging.getLogger(__name__)


def matches_selector(atom_name: str, selectors: Sequence[str]) -> bool:
    """
    Check an atom name against selectors, stopping at the first match.

    Selectors are compared over exactly ATOM_NAME_WIDTH characters, so
    short names must already be space padded ("CA  ", not "CA").
    """
    tag = atom_name[:ATOM_NAME_WIDTH]
    for selector in selectors:
        if tag == selector[:ATOM_NAME_WIDTH]:
            return True
    return False


def is_hydrogen(record: AtomRecord) -> bool:
    """Hydrogens are taken from the element, else from the atom name."""
    element = record.element.strip().upper()
    if element:
        return element in HYDROGEN_ELEMENTS
    return record.atom_name.lstrip().startswith("H")


class SelectionService:
    """Service producing filtered deep copies of atom sequences."""

    def __init__(self, store: Optional[RecordStore] = None):
        """Initialize service with a record store."""
        self._store = store or RecordStore()

    def select_where(
        self, atoms: AtomSequence, predicate: Callable[[AtomRecord], bool]
    ) -> Tuple[AtomSequence, int]:
        """
        Copy the atoms accepted by a predicate into a new sequence.

        The input sequence is not modified. If an allocation fails, every
        record copied so far is released and an empty result is returned.

        Args:
            atoms: Input sequence
            predicate: Called once per atom, in order

        Returns:
            Tuple of (new sequence, number of atoms copied)
        """
        selected = AtomSequence()
        count = 0

        for atom in atoms:
            if not predicate(atom):
                continue

            record = self._store.copy_record(atom)
            if record is None:
                logger.warning(
                    f"Allocation failed after copying {count} atoms; "
                    "discarding partial selection"
                )
                self._store.release_sequence(selected)
                return AtomSequence(), 0

            selected.append(record)
            count += 1

        logger.debug(f"Selected {count} of {len(atoms)} atoms")
        return selected, count

    def select_atoms_as_copy(
        self, atoms: AtomSequence, selectors: Sequence[str]
    ) -> Tuple[AtomSequence, int]:
        """
        Copy the atoms whose names match any of the selectors.

        Each selector must be a space padded 4 character atom name, e.g.
        "N   ", "CA  ", "C   ", "O   ". An atom matching several selectors
        is copied once.

        Args:
            atoms: Input sequence
            selectors: Atom names to keep

        Returns:
            Tuple of (new sequence, number of atoms kept)
        """
        selectors = tuple(selectors)
        return self.select_where(
            atoms, lambda atom: matches_selector(atom.atom_name, selectors)
        )

    def select_ca(self, atoms: AtomSequence) -> Tuple[AtomSequence, int]:
        """Copy only the C-alpha atoms."""
        return self.select_atoms_as_copy(atoms, (CA_ATOM,))

    def select_backbone(self, atoms: AtomSequence) -> Tuple[AtomSequence, int]:
        """Copy only the N, CA, C and O atoms."""
        return self.select_atoms_as_copy(atoms, BACKBONE_ATOMS)

    def strip_hydrogens(self, atoms: AtomSequence) -> Tuple[AtomSequence, int]:
        """Copy every atom except hydrogens."""
        return self.select_where(atoms, lambda atom: not is_hydrogen(atom))
