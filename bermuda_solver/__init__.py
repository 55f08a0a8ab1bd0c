"""
bermuda_solver - Bermuda Triangle puzzle solver package

Core components:
- Arrangement: piece placements on the triangular board
- Piece: triangular pieces with a colored dot on each edge
- solve / solve_puzzle: backtracking search over every fitting placement
"""

from .board import Arrangement, BoardSides, Dot, Piece, Placement, Position
from .errors import PuzzleConfigError, SearchInvariantError
from .pieces import ALL_PIECES, BOARD_SIDES
from .solver import (
    distinct_layouts,
    fits_constraints,
    iter_solutions,
    required_colors,
    solve,
    solve_puzzle,
)
from .verify import find_violations, is_valid
from .viz import display_arrangement, render_svg
