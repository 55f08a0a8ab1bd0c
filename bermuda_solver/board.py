"""
Bermuda Triangle board model.

Coordinate system:
- row 0 is the top tip of the board, rows grow downward
- row r holds 2r + 1 cells, numbered by col from left to right
- even columns point up (△), odd columns point down (▽)

Edge numbering (the conceptual positions a rotated piece is read at):
- △ (up):   0 = left, 1 = right, 2 = bottom
- ▽ (down): 0 = left, 1 = top,   2 = right

Adjacency:
- every cell but the first of a row has a left neighbor (col - 1)
- ▽ has a top neighbor, the △ at (row - 1, col - 1)
- col 0 touches the left side of the board, the last col the right side
- △ cells of the last row touch the bottom side
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .errors import SearchInvariantError

ROW_LENGTHS: tuple[int, ...] = (1, 3, 5, 7)
BOARD_ROWS = len(ROW_LENGTHS)
DOTS_PER_SIDE = BOARD_ROWS
ROTATIONS: tuple[int, ...] = (0, 1, 2)

# Up cell's bottom edge, read by the down cell below-right of it
ABOVE_NEIGHBOR_EDGE = 2


class Dot(str, Enum):
    """A colored dot on one edge of a piece or board side."""
    RED = "Red"
    YELLOW = "Yellow"
    GREEN = "Green"
    BLUE = "Blue"
    WHITE = "White"
    BLACK = "Black"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Piece:
    """A triangular piece: three dots listed clockwise.

    Two pieces with the same dots are still different pieces; `index` is
    the identity reported in solutions.
    """
    index: int
    dots: tuple[Dot, Dot, Dot]

    def edge(self, edge_position: int, rotation: int) -> Dot:
        return edge_color_of_piece(self, edge_position, rotation)


@dataclass(frozen=True)
class BoardSides:
    """Dots along the board. Left and right top to bottom, bottom left to right."""
    left: tuple[Dot, ...]
    right: tuple[Dot, ...]
    bottom: tuple[Dot, ...]


@dataclass(frozen=True)
class Position:
    """A cell on the board. P(row, col)."""
    row: int
    col: int

    @property
    def points_up(self) -> bool:
        return is_upward_cell(self.row, self.col)

    def left(self) -> "Position":
        """Left neighbor (opposite orientation). Only valid for col > 0."""
        return Position(self.row, self.col - 1)

    def above(self) -> "Position":
        """Top neighbor of a ▽ cell: the △ one row up, one col left."""
        return Position(self.row - 1, self.col - 1)

    def __str__(self) -> str:
        return f"{self.row}.{self.col}"


@dataclass(frozen=True)
class Placement:
    """How a piece sits in a cell."""
    piece: Piece
    rotation: int

    def edge(self, edge_position: int) -> Dot:
        return edge_color_of_piece(self.piece, edge_position, self.rotation)

    def edges(self) -> tuple[Dot, Dot, Dot]:
        """Dots at conceptual positions 0, 1, 2 after rotation."""
        return tuple(self.edge(p) for p in ROTATIONS)

    def __str__(self) -> str:
        return f"{self.piece.index}.{self.rotation}"


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

def edge_color_of_piece(piece: Piece, edge_position: int, rotation: int) -> Dot:
    """Account for rotation and return the dot at the edge position given."""
    return piece.dots[(edge_position + rotation) % 3]


def row_lengths() -> tuple[int, ...]:
    return ROW_LENGTHS


def is_upward_cell(row: int, col: int) -> bool:
    return col % 2 == 0


def left_neighbor_edge_index(col: int) -> int:
    """Edge of the left neighbor that touches a cell in column `col`.

    A ▽ cell (odd col) touches the right edge (1) of the △ to its left.
    A △ cell (even col) touches the right edge (2) of the ▽ to its left.
    """
    return 1 if col % 2 else 2


def above_neighbor_edge_index() -> int:
    return ABOVE_NEIGHBOR_EDGE


def touches_bottom_border(row: int, col: int) -> bool:
    return row == BOARD_ROWS - 1 and is_upward_cell(row, col)


def bottom_border_index(col: int) -> int:
    """Index into the bottom side for a △ cell of the last row."""
    return col // 2


# ---------------------------------------------------------------------------
# Arrangement
# ---------------------------------------------------------------------------

@dataclass
class Arrangement:
    """Piece placements on the board, row by row. None marks an open cell.

    Partial boards (the first `rows` rows only) are allowed for test runs.
    """
    rows: list[list[Placement | None]]

    @classmethod
    def empty(cls, rows: int = BOARD_ROWS) -> "Arrangement":
        """Create an arrangement with the first `rows` rows open."""
        return cls(rows=[[None] * length for length in ROW_LENGTHS[:rows]])

    def copy(self) -> "Arrangement":
        """Copy for backtracking - placements are immutable, rows are copied."""
        return Arrangement(rows=[list(row) for row in self.rows])

    def __getitem__(self, pos: Position) -> Placement | None:
        return self.rows[pos.row][pos.col]

    def row_length(self, row: int) -> int:
        return len(self.rows[row])

    def placed(self, pos: Position) -> Placement:
        """Placement at a cell that must already be filled."""
        placement = self[pos]
        if placement is None:
            raise SearchInvariantError(f"Can't read cell {pos} without a piece!")
        return placement

    def place(self, pos: Position, placement: Placement) -> None:
        """Place a piece (mutates). Check constraints first!"""
        if self[pos] is not None:
            raise SearchInvariantError(f"Cell {pos} is already taken")
        if placement.piece.index in self.used_pieces():
            raise SearchInvariantError(
                f"Piece {placement.piece.index} is already on the board"
            )
        self.rows[pos.row][pos.col] = placement

    def cells(self) -> Iterator[tuple[Position, Placement | None]]:
        for row, cells in enumerate(self.rows):
            for col, placement in enumerate(cells):
                yield Position(row, col), placement

    def used_pieces(self) -> set[int]:
        return {p.piece.index for _, p in self.cells() if p is not None}

    def next_open_cell(self) -> Position | None:
        return next_open_cell(self)

    def is_complete(self) -> bool:
        return self.next_open_cell() is None

    def to_indexes(self) -> list[list[tuple[int, int] | None]]:
        """(piece index, rotation) per cell, for display and serialization."""
        return [
            [None if p is None else (p.piece.index, p.rotation) for p in row]
            for row in self.rows
        ]


def next_open_cell(arrangement: Arrangement) -> Position | None:
    """First open cell, scanning rows top to bottom and cols left to right."""
    for pos, placement in arrangement.cells():
        if placement is None:
            return pos
    return None
