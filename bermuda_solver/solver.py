"""
Bermuda Triangle puzzle solver using backtracking.
"""

import logging
from itertools import islice
from math import prod
from typing import Iterable, Iterator

from .board import (
    BOARD_ROWS,
    DOTS_PER_SIDE,
    ROTATIONS,
    ROW_LENGTHS,
    Arrangement,
    BoardSides,
    Dot,
    Piece,
    Placement,
    Position,
    above_neighbor_edge_index,
    bottom_border_index,
    left_neighbor_edge_index,
    touches_bottom_border,
)
from .config import CFG, solution_cap
from .errors import PuzzleConfigError
from .pieces import ALL_PIECES, BOARD_SIDES

logger = logging.getLogger(__name__)

# The dots already decided around a cell: 1, 2 or 3 of them, in edge order
DotSituation = tuple[Dot, ...]


def required_colors(
    arrangement: Arrangement,
    position: Position,
    sides: BoardSides,
) -> DotSituation:
    """Determine the dots a piece placed at `position` has to match.

    Built up in edge order:
    1. left: the left side of the board in col 0, else the touching edge of
       the piece to the left.
    2. right or top: the right side of the board in the last col, else for
       a ▽ cell the bottom of the △ above it.
    3. bottom: only for the last cell of the last row.

    The first step always adds one dot and the others at most one each.

    Neighbors read here are always placed already because cells are filled
    left to right, top to bottom.
    """
    row, col = position.row, position.col

    if col == 0:
        situation = [sides.left[row]]
    else:
        neighbor = arrangement.placed(position.left())
        situation = [neighbor.edge(left_neighbor_edge_index(col))]

    if col == arrangement.row_length(row) - 1:
        situation.append(sides.right[row])
    elif col % 2:
        above = arrangement.placed(position.above())
        situation.append(above.edge(above_neighbor_edge_index()))

    if row == BOARD_ROWS - 1 and col == ROW_LENGTHS[-1] - 1:
        situation.append(sides.bottom[bottom_border_index(col)])

    return tuple(situation)


def fits_constraints(required: DotSituation, piece: Piece) -> list[int]:
    """Determine the rotations of the piece that match the dots given.

    Returns:
        Rotations 0-2 in ascending order; empty when the piece doesn't fit.
    """
    return [
        rotation
        for rotation in ROTATIONS
        if all(
            piece.dots[(rotation + i) % 3] == dot
            for i, dot in enumerate(required)
        )
    ]


def bottom_border_color(
    position: Position,
    situation: DotSituation,
    sides: BoardSides,
) -> Dot | None:
    """Bottom side dot a △ of the last row must show, if not in `situation`.

    `required_colors` only carries the bottom dot for the last cell; the
    other △ cells of the last row sit on the bottom side too.
    """
    if not touches_bottom_border(position.row, position.col):
        return None
    if len(situation) == 3:
        return None
    return sides.bottom[bottom_border_index(position.col)]


def fitting_rotations(
    situation: DotSituation,
    piece: Piece,
    bottom: Dot | None = None,
) -> list[int]:
    """Rotations matching the situation and, when given, the bottom dot."""
    rotations = fits_constraints(situation, piece)
    if bottom is None:
        return rotations
    return [rot for rot in rotations if piece.edge(2, rot) == bottom]


def validate_puzzle(pieces: list[Piece], sides: BoardSides, rows: int) -> None:
    """Check input shapes once, before searching.

    Raises:
        PuzzleConfigError: on any malformed side, piece list or row count.
    """
    if not 1 <= rows <= BOARD_ROWS:
        raise PuzzleConfigError(f"Need 1 to {BOARD_ROWS} rows, got {rows}")

    for name in ("left", "right", "bottom"):
        side = getattr(sides, name)
        if len(side) != DOTS_PER_SIDE:
            raise PuzzleConfigError(
                f"Board {name} side needs {DOTS_PER_SIDE} dots, got {len(side)}"
            )
        for dot in side:
            if not isinstance(dot, Dot):
                raise PuzzleConfigError(f"Unknown dot {dot!r} on {name} side")

    cell_count = sum(ROW_LENGTHS)
    if len(pieces) != cell_count:
        raise PuzzleConfigError(
            f"Need exactly {cell_count} pieces, got {len(pieces)}"
        )

    seen: set[int] = set()
    for piece in pieces:
        if len(piece.dots) != 3:
            raise PuzzleConfigError(
                f"Piece {piece.index} needs 3 dots, got {len(piece.dots)}"
            )
        if not all(isinstance(dot, Dot) for dot in piece.dots):
            raise PuzzleConfigError(f"Piece {piece.index} has an unknown dot")
        if piece.index in seen:
            raise PuzzleConfigError(f"Piece index {piece.index} is used twice")
        seen.add(piece.index)


def solve(
    pieces: list[Piece],
    arrangement: Arrangement,
    sides: BoardSides,
) -> Iterator[Arrangement]:
    """
    Backtracking solver. Yields every complete arrangement reachable from
    `arrangement` using `pieces`.

    Strategy:
    - Take the first open cell (row-major)
    - Try each remaining piece, in list order, in each matching rotation
    - For each fit, recurse on a copy of the arrangement without the piece

    Args:
        pieces: Pieces still available in this branch
        arrangement: Placements so far, never mutated
        sides: Board side dots
    """
    spot = arrangement.next_open_cell()
    if spot is None:
        yield arrangement
        return

    situation = required_colors(arrangement, spot, sides)
    bottom = bottom_border_color(spot, situation, sides)

    for piece in pieces:
        for rotation in fitting_rotations(situation, piece, bottom):
            new_arrangement = arrangement.copy()
            new_arrangement.place(spot, Placement(piece, rotation))

            new_remaining = [p for p in pieces if p.index != piece.index]
            yield from solve(new_remaining, new_arrangement, sides)


def iter_solutions(
    pieces: list[Piece] | None = None,
    sides: BoardSides | None = None,
    rows: int | None = None,
) -> Iterator[Arrangement]:
    """Validate the puzzle and lazily enumerate its solutions."""
    pieces = ALL_PIECES if pieces is None else pieces
    sides = BOARD_SIDES if sides is None else sides
    rows = CFG.ROWS if rows is None else rows

    validate_puzzle(pieces, sides, rows)
    return solve(pieces, Arrangement.empty(rows), sides)


def solve_puzzle(
    pieces: list[Piece] | None = None,
    sides: BoardSides | None = None,
    rows: int | None = None,
    max_solutions: int | None = None,
) -> list[Arrangement]:
    """
    Main entry point. Solves the first `rows` rows of the board.

    Args:
        pieces: Piece list, defaults to the game's sixteen pieces
        sides: Board side dots, defaults to the game's board
        rows: Rows to fill (1-4), defaults to configuration
        max_solutions: Stop after this many solutions, 0 for no limit,
            None for configuration (whose default is no limit)
    """
    pieces = ALL_PIECES if pieces is None else pieces
    rows = CFG.ROWS if rows is None else rows
    cap = solution_cap(max_solutions)
    logger.info(
        "Solving %d row(s) with %d pieces (limit: %s)",
        rows, len(pieces), cap or "none",
    )

    solutions = []
    for number, solution in enumerate(
        islice(iter_solutions(pieces, sides, rows), cap), start=1
    ):
        logger.debug("Solution %d: %s", number, solution.to_indexes())
        solutions.append(solution)

    logger.info("Found %d solution(s)", len(solutions))
    return solutions


def search_space_size(piece_count: int = 16) -> int:
    """Ways to lay out `piece_count` pieces in 3 orientations each, unchecked."""
    return prod(n * 3 for n in range(1, piece_count + 1))


def layout_key(arrangement: Arrangement) -> tuple:
    """What the board looks like: rotated dots per cell, piece identity ignored."""
    return tuple(
        tuple(None if p is None else p.edges() for p in row)
        for row in arrangement.rows
    )


def distinct_layouts(solutions: Iterable[Arrangement]) -> list[Arrangement]:
    """Drop solutions that only swap identical pieces, keeping first seen."""
    seen = set()
    unique = []
    for solution in solutions:
        key = layout_key(solution)
        if key not in seen:
            seen.add(key)
            unique.append(solution)
    return unique
