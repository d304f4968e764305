"""Tests for converting Bio.PDB entities into atom sequences."""

import numpy as np
import pytest
from Bio.PDB.Atom import Atom
from Bio.PDB.Chain import Chain
from Bio.PDB.Model import Model
from Bio.PDB.Residue import Residue
from Bio.PDB.Structure import Structure

from pdblist import RecordStore, select_atoms_as_copy
from pdblist.infrastructure.adapters.biopython_adapter import BiopythonAdapter


def build_atom(name, coord, serial, element):
    return Atom(
        name,
        np.array(coord, "f"),
        15.0,
        1.0,
        " ",
        name.center(4),
        serial,
        element=element,
    )


@pytest.fixture
def structure():
    """Two models; the first holds an alanine and a ligand with no position."""
    structure = Structure("test")
    for model_id in (0, 1):
        model = Model(model_id)
        chain = Chain("B")
        alanine = Residue((" ", 7, " "), "ALA", "    ")
        for serial, (name, coord, element) in enumerate(
            [
                ("N", (0.0, 0.0, 0.0), "N"),
                ("CA", (1.5, 0.0, 0.0), "C"),
                ("C", (3.0, 0.0, 0.0), "C"),
            ],
            start=1,
        ):
            alanine.add(build_atom(name, coord, serial, element))
        chain.add(alanine)

        if model_id == 0:
            ligand = Residue(("H_ZN", 8, " "), "ZN", "    ")
            ligand.add(build_atom("ZN", (9999.0, 9999.0, 9999.0), 4, "ZN"))
            chain.add(ligand)

        model.add(chain)
        structure.add(model)
    return structure


def test_converts_first_model(structure):
    atoms = BiopythonAdapter().to_atom_sequence(structure)

    assert len(atoms) == 4
    assert [a.atom_name for a in atoms] == ["N   ", "CA  ", "C   ", "ZN  "]
    ca = atoms[1]
    assert ca.coordinates == pytest.approx((1.5, 0.0, 0.0))
    assert ca.residue_name == "ALA"
    assert ca.residue_number == 7
    assert ca.chain_id == "B"
    assert ca.element == "C"
    assert ca.b_factor == pytest.approx(15.0)
    assert ca.record_type == "ATOM"


def test_sentinel_coordinates_become_unknown(structure):
    atoms = BiopythonAdapter().to_atom_sequence(structure)
    zinc = atoms[3]
    assert zinc.coordinates is None
    assert zinc.record_type == "HETATM"


def test_selects_model_by_index(structure):
    atoms = BiopythonAdapter().to_atom_sequence(structure, model_index=1)
    assert len(atoms) == 3


def test_converts_chain_and_residue(structure):
    adapter = BiopythonAdapter()
    chain = structure[0]["B"]
    assert len(adapter.to_atom_sequence(chain)) == 4
    assert len(adapter.to_atom_sequence(chain[7])) == 3


def test_converted_atoms_can_be_selected(structure):
    atoms = BiopythonAdapter().to_atom_sequence(structure)
    selected, count = select_atoms_as_copy(atoms, ["CA  "])
    assert count == 1
    assert selected[0].atom_number == 2


def test_allocation_failure_returns_empty_sequence(structure, failing_allocator):
    allocator = failing_allocator(fail_after=2)
    adapter = BiopythonAdapter(RecordStore(allocator))

    atoms = adapter.to_atom_sequence(structure)

    assert len(atoms) == 0
    assert all(record.owner is None for record in allocator.allocated)
