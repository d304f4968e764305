import pytest

from pdblist import AtomRecord, AtomSequence, NodeAllocator


def make_atom(name, coordinates, residue_number=1, residue_name="ALA", element=None, chain_id="A"):
    """Build a record with a padded name, element defaulting to the first letter."""
    if element is None:
        element = name.strip()[0]
    return AtomRecord(
        atom_name=name.ljust(4),
        coordinates=coordinates,
        residue_name=residue_name,
        residue_number=residue_number,
        chain_id=chain_id,
        element=element,
    )


class FailingAllocator(NodeAllocator):
    """Allocator that fails after a fixed number of records."""

    def __init__(self, fail_after):
        self.fail_after = fail_after
        self.allocated = []

    def allocate(self):
        if len(self.allocated) >= self.fail_after:
            return None
        record = AtomRecord()
        self.allocated.append(record)
        return record


@pytest.fixture
def tripeptide():
    """ALA-GLY-SER with an amide hydrogen on the alanine."""
    atoms = [
        make_atom("N", (0.0, 0.0, 0.0), 1, "ALA"),
        make_atom("CA", (1.0, 0.0, 0.0), 1, "ALA"),
        make_atom("C", (2.0, 0.0, 0.0), 1, "ALA"),
        make_atom("O", (2.0, 1.0, 0.0), 1, "ALA"),
        make_atom("CB", (1.0, -1.0, 0.0), 1, "ALA"),
        make_atom("H", (0.0, 1.0, 0.0), 1, "ALA"),
        make_atom("N", (3.0, 0.0, 0.0), 2, "GLY"),
        make_atom("CA", (4.0, 0.0, 0.0), 2, "GLY"),
        make_atom("C", (5.0, 0.0, 0.0), 2, "GLY"),
        make_atom("O", (5.0, 1.0, 0.0), 2, "GLY"),
        make_atom("N", (6.0, 0.0, 0.0), 3, "SER"),
        make_atom("CA", (7.0, 0.0, 0.0), 3, "SER"),
        make_atom("C", (8.0, 0.0, 0.0), 3, "SER"),
        make_atom("O", (8.0, 1.0, 0.0), 3, "SER"),
        make_atom("CB", (7.0, -1.0, 0.0), 3, "SER"),
        make_atom("OG", (7.0, -2.0, 0.0), 3, "SER"),
    ]
    return AtomSequence(atoms)


@pytest.fixture
def failing_allocator():
    return FailingAllocator


@pytest.fixture(name="make_atom")
def make_atom_fixture():
    return make_atom
