"""Adapter turning parsed Biopython structures into atom sequences."""

import logging
from typing import Optional

from Bio.PDB.Atom import Atom
from Bio.PDB.Entity import Entity

from ...core.domain.models.atom import AtomRecord, coordinates_from_xyz, pad_atom_name
from ...core.domain.models.atom_sequence import AtomSequence
from ...core.services.record_store import RecordStore

logger = logging.getLogger(__name__)


class BiopythonAdapter:
    """Adapter for structures already parsed by Bio.PDB."""

    def __init__(self, store: Optional[RecordStore] = None):
        """Initialize adapter with the record store used for allocation."""
        self._store = store or RecordStore()

    def to_atom_sequence(self, entity: Entity, model_index: int = 0) -> AtomSequence:
        """
        Convert a Bio.PDB entity into an atom sequence.

        Args:
            entity: Structure, Model, Chain or Residue
            model_index: Model to use when entity is a Structure

        Returns:
            AtomSequence in file order; empty if an allocation failed
        """
        if entity.level == "S":
            models = list(entity)
            if not models:
                return AtomSequence()
            entity = models[model_index]

        atoms = AtomSequence()
        for atom in entity.get_atoms():
            record = self._store.allocate_node()
            if record is None:
                logger.warning(
                    f"Allocation failed converting {entity.get_id()}; "
                    f"discarding {len(atoms)} atoms"
                )
                self._store.release_sequence(atoms)
                return AtomSequence()
            self._fill_record(record, atom)
            atoms.append(record)

        logger.debug(f"Converted {len(atoms)} atoms from {entity.get_id()}")
        return atoms

    @staticmethod
    def _fill_record(record: AtomRecord, atom: Atom) -> None:
        """Copy Bio.PDB atom attributes into a record."""
        residue = atom.get_parent()
        hetflag, resseq, icode = residue.get_id()
        chain = residue.get_parent()

        x, y, z = (float(v) for v in atom.get_coord())
        record.atom_name = pad_atom_name(atom.get_name())
        record.coordinates = coordinates_from_xyz(x, y, z)
        record.atom_number = atom.get_serial_number() or 0
        record.residue_name = residue.get_resname()
        record.residue_number = resseq
        record.insertion_code = icode
        record.chain_id = chain.id if chain is not None else " "
        record.alt_loc = atom.get_altloc()
        record.occupancy = atom.get_occupancy() or 0.0
        record.b_factor = atom.get_bfactor()
        record.element = atom.element or ""
        record.record_type = "ATOM" if hetflag == " " else "HETATM"
