"""
Independent check of an arrangement against the board.

Unlike the solver, which only looks at the edges already decided when it
fills a cell, this walks every edge of every placed piece and reports each
mismatch. Open cells are skipped, so partial boards can be checked too.
"""

from .board import (
    BOARD_ROWS,
    Arrangement,
    BoardSides,
    Position,
    bottom_border_index,
    is_upward_cell,
    touches_bottom_border,
)

# Edge positions by cell orientation
UP_LEFT, UP_RIGHT, UP_BOTTOM = 0, 1, 2
DOWN_LEFT, DOWN_TOP, DOWN_RIGHT = 0, 1, 2


def _right_edge(pos: Position) -> int:
    return UP_RIGHT if is_upward_cell(pos.row, pos.col) else DOWN_RIGHT


def find_violations(arrangement: Arrangement, sides: BoardSides) -> list[str]:
    """Return a description of every mismatched edge and reused piece."""
    problems = []
    owners: dict[int, Position] = {}
    full_board = len(arrangement.rows) == BOARD_ROWS

    for pos, placement in arrangement.cells():
        if placement is None:
            continue

        index = placement.piece.index
        if index in owners:
            problems.append(f"piece {index} used at {owners[index]} and {pos}")
        owners.setdefault(index, pos)

        last_col = arrangement.row_length(pos.row) - 1

        # Board sides
        if pos.col == 0 and placement.edge(UP_LEFT) != sides.left[pos.row]:
            problems.append(
                f"{pos} left edge {placement.edge(UP_LEFT)} "
                f"!= left side {sides.left[pos.row]}"
            )
        if pos.col == last_col and placement.edge(UP_RIGHT) != sides.right[pos.row]:
            problems.append(
                f"{pos} right edge {placement.edge(UP_RIGHT)} "
                f"!= right side {sides.right[pos.row]}"
            )
        if full_board and touches_bottom_border(pos.row, pos.col):
            expected = sides.bottom[bottom_border_index(pos.col)]
            if placement.edge(UP_BOTTOM) != expected:
                problems.append(
                    f"{pos} bottom edge {placement.edge(UP_BOTTOM)} "
                    f"!= bottom side {expected}"
                )

        # Neighbors
        if pos.col > 0:
            left = arrangement[pos.left()]
            if left is not None:
                theirs = left.edge(_right_edge(pos.left()))
                ours = placement.edge(UP_LEFT if pos.points_up else DOWN_LEFT)
                if theirs != ours:
                    problems.append(f"{pos} left edge {ours} != {pos.left()} {theirs}")
        if not pos.points_up:
            above = arrangement[pos.above()]
            if above is not None:
                theirs = above.edge(UP_BOTTOM)
                ours = placement.edge(DOWN_TOP)
                if theirs != ours:
                    problems.append(f"{pos} top edge {ours} != {pos.above()} {theirs}")

    return problems


def is_valid(arrangement: Arrangement, sides: BoardSides) -> bool:
    return not find_violations(arrangement, sides)
