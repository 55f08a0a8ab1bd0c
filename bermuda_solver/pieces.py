"""
Board sides and piece definitions for the Bermuda Triangle.
"""

from .board import BoardSides, Dot, Piece

# Color abbreviations
r = Dot.RED
y = Dot.YELLOW
g = Dot.GREEN
b = Dot.BLUE
w = Dot.WHITE
k = Dot.BLACK


def make_piece(index: int, dots: list[Dot]) -> Piece:
    """Helper to create a piece from its clockwise dots."""
    return Piece(index, tuple(dots))


def make_pieces(dot_lists: list[list[Dot]]) -> list[Piece]:
    """Number pieces by their position in the list."""
    return [make_piece(i, dots) for i, dots in enumerate(dot_lists)]


# Left and right sides are listed top to bottom, bottom left to right
BOARD_SIDES = BoardSides(
    left=(w, r, w, y),
    right=(b, r, g, k),
    bottom=(g, g, w, g),
)

# Three dots per piece, clockwise. ['Red', 'Yellow', 'Blue'] looks like:
#        /\
#       / r y\
#      /  b   \
#      --------
PIECE_DOTS: list[list[Dot]] = [
    [r, k, g],  # 0
    [r, w, y],
    [y, w, g],
    [b, k, w],  # 3
    [y, g, b],
    [b, w, w],
    [r, k, g],  # 6
    [r, g, k],
    [g, k, k],
    [y, g, k],  # 9
    [r, g, w],
    [y, w, g],
    [b, k, w],  # 12
    [r, g, y],
    [b, b, w],
    [y, k, b],  # 15
]

ALL_PIECES: list[Piece] = make_pieces(PIECE_DOTS)

# Colors for each dot (for visualization)
DOT_COLORS: dict[Dot, str] = {
    Dot.RED: "#d62828",
    Dot.YELLOW: "#f7c815",
    Dot.GREEN: "#2a9d4b",
    Dot.BLUE: "#1f5fbf",
    Dot.WHITE: "#ffffff",
    Dot.BLACK: "#111111",
}

PIECE_COLOR = "#c8a165"  # Wood
EMPTY_COLOR = "#1b2856"
