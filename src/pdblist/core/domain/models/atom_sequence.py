#!/usr/bin/env python3
# src/pdblist/core/domain/models/atom_sequence.py

"""
Domain model for an ordered, exclusively owned sequence of atom records,
with positions and half-open ranges inside it.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

import numpy as np

from .atom import AtomRecord
from ....exceptions import ReleasedSequenceError


class AtomSequence:
    """Ordered atom records in file order; each record has a single owner."""

    def __init__(self, records: Optional[Iterable[AtomRecord]] = None):
        """
        Initialize a sequence, taking ownership of the given records.

        Args:
            records: Optional records to append in order

        Raises:
            ValueError: If any record already belongs to a sequence; no
                record is taken in that case
        """
        self._records: List[AtomRecord] = []
        self._released = False

        records = list(records or ())
        if any(record.owner is not None for record in records):
            raise ValueError("Atom record already belongs to a sequence")
        if len({id(record) for record in records}) != len(records):
            raise ValueError("Atom record listed more than once")
        for record in records:
            self.append(record)

    @property
    def released(self) -> bool:
        return self._released

    def _check_live(self) -> None:
        if self._released:
            raise ReleasedSequenceError("Atom sequence has been released")

    def append(self, record: AtomRecord) -> None:
        """
        Append a record, taking ownership of it.

        Raises:
            ValueError: If the record already belongs to a sequence
        """
        self._check_live()
        if record.owner is not None:
            raise ValueError("Atom record already belongs to a sequence")
        record._owner = self
        self._records.append(record)

    def release(self) -> None:
        """Detach every record and invalidate the sequence."""
        for record in self._records:
            record._owner = None
        self._records = []
        self._released = True

    def __len__(self) -> int:
        self._check_live()
        return len(self._records)

    def __iter__(self) -> Iterator[AtomRecord]:
        self._check_live()
        return iter(self._records)

    def __getitem__(self, index: int) -> AtomRecord:
        self._check_live()
        return self._records[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AtomSequence):
            return NotImplemented
        self._check_live()
        other._check_live()
        return self._records == other._records

    def __repr__(self) -> str:
        if self._released:
            return "AtomSequence(released)"
        return f"AtomSequence({len(self._records)} atoms)"

    def position(self, index: int) -> "Position":
        """Get the position at an index; len(self) is the terminal marker."""
        self._check_live()
        if not 0 <= index <= len(self._records):
            raise IndexError(f"Position {index} outside sequence of {len(self)}")
        return Position(self, index)

    def begin(self) -> "Position":
        return self.position(0)

    def end(self) -> "Position":
        return self.position(len(self))

    def whole_range(self) -> "Range":
        return Range(self.begin(), self.end())

    def find_next_residue(self, start: "Position") -> "Position":
        """
        Find the first atom of the residue following the one at start.

        Args:
            start: Position of an atom in this sequence

        Returns:
            Position of the next residue, or the terminal marker
        """
        self._check_live()
        if start.sequence is not self:
            raise ValueError("Position belongs to a different sequence")
        if start.is_end:
            return start
        key = self._records[start.index].residue_key
        index = start.index + 1
        while index < len(self._records) and self._records[index].residue_key == key:
            index += 1
        return Position(self, index)

    def residue_ranges(self) -> Iterator["Range"]:
        """Yield one range per residue, in order."""
        start = self.begin()
        while not start.is_end:
            stop = self.find_next_residue(start)
            yield Range(start, stop)
            start = stop

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms in the sequence.

        Returns:
            numpy array of shape (n_atoms, 3); unknown positions are NaN
        """
        self._check_live()
        coords = np.full((len(self._records), 3), np.nan)
        for i, record in enumerate(self._records):
            if record.coordinates is not None:
                coords[i] = record.coordinates
        return coords


@dataclass(frozen=True)
class Position:
    """A slot in an atom sequence; index == len(sequence) marks the end."""

    sequence: AtomSequence
    index: int

    @property
    def is_end(self) -> bool:
        return self.index >= len(self.sequence)

    @property
    def record(self) -> AtomRecord:
        if self.is_end:
            raise IndexError("Terminal position has no record")
        return self.sequence[self.index]

    def next(self) -> "Position":
        return self.sequence.position(self.index + 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.sequence is other.sequence and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.sequence), self.index))


@dataclass(frozen=True)
class Range:
    """Half-open span [start, stop) of one atom sequence."""

    start: Position
    stop: Position

    def __post_init__(self):
        if self.start.sequence is not self.stop.sequence:
            raise ValueError("Range positions belong to different sequences")
        if self.start.index > self.stop.index:
            raise ValueError(
                f"Range start {self.start.index} follows stop {self.stop.index}"
            )

    @classmethod
    def to_end(cls, start: Position) -> "Range":
        return cls(start, start.sequence.end())

    @property
    def sequence(self) -> AtomSequence:
        return self.start.sequence

    def __len__(self) -> int:
        return self.stop.index - self.start.index

    def __iter__(self) -> Iterator[AtomRecord]:
        sequence = self.sequence
        for index in range(self.start.index, self.stop.index):
            yield sequence[index]
