"""
Errors raised by the Bermuda Triangle solver.
"""


class PuzzleConfigError(ValueError):
    """Puzzle input has the wrong shape (sides, pieces or board rows)."""


class SearchInvariantError(RuntimeError):
    """The search reached a state that only a traversal bug can produce."""
