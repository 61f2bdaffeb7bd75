"""
Exceptions raised by the Tower of Hanoi solver.
"""


class HanoiError(Exception):
    """Base class for solver errors."""


class InvalidDiskCount(HanoiError, ValueError):
    """The requested disk count is not an integer or is out of range."""


class IllegalMoveError(HanoiError, ValueError):
    """A move breaks the puzzle rules for the current rod state."""


class InternalConsistencyError(HanoiError, RuntimeError):
    """The solver's own rod bookkeeping went out of sync."""
