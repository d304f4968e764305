"""Exceptions raised by pdblist."""


class PdbListError(Exception):
    """Base class for pdblist errors."""

    pass


class EmptyAggregateError(PdbListError, ValueError):
    """Raised when an aggregate is requested over atoms without coordinates."""

    pass


class ReleasedSequenceError(PdbListError, RuntimeError):
    """Raised when a released atom sequence is used again."""

    pass
