"""Constants shared by the atom list primitives."""

# Legacy marker for an undetermined coordinate on any axis
NULL_COORDINATE = 9999.0

ATOM_NAME_WIDTH = 4

CA_ATOM = "CA  "
BACKBONE_ATOMS = ("N   ", "CA  ", "C   ", "O   ")

HYDROGEN_ELEMENTS = ("H", "D")

# Main chain atoms beyond N, CA, C, O; never part of a side chain
MAIN_CHAIN_EXTRA_ATOMS = (
    "OXT ",
    "H   ",
    "HN  ",
    "H1  ",
    "H2  ",
    "H3  ",
    "HA  ",
    "HA2 ",
    "HA3 ",
)
