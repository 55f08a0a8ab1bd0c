from bermuda_solver.board import Arrangement, Placement, Position
from bermuda_solver.pieces import ALL_PIECES, BOARD_SIDES
from bermuda_solver.verify import find_violations, is_valid


def _placement(index, rotation):
    return Placement(ALL_PIECES[index], rotation)


def test_fitting_first_cell_is_valid():
    arrangement = Arrangement(rows=[[_placement(3, 2)]])
    assert is_valid(arrangement, BOARD_SIDES)


def test_wrong_rotation_breaks_both_sides():
    arrangement = Arrangement(rows=[[_placement(3, 0)]])
    problems = find_violations(arrangement, BOARD_SIDES)
    assert len(problems) == 2
    assert "left side" in problems[0]
    assert "right side" in problems[1]


def test_neighbor_mismatch_is_reported():
    arrangement = Arrangement.empty(2)
    arrangement.place(Position(0, 0), _placement(3, 2))
    arrangement.place(Position(1, 0), _placement(0, 0))
    # Green on the left, the piece to the left shows Black
    arrangement.place(Position(1, 1), _placement(8, 0))

    problems = find_violations(arrangement, BOARD_SIDES)
    assert problems == ["1.1 left edge Green != 1.0 Black"]


def test_top_mismatch_is_reported():
    arrangement = Arrangement.empty(2)
    arrangement.place(Position(0, 0), _placement(5, 2))  # White bottom
    arrangement.place(Position(1, 0), _placement(0, 0))
    arrangement.place(Position(1, 1), _placement(8, 1))  # Black, Black on left, top

    problems = find_violations(arrangement, BOARD_SIDES)
    assert problems == ["1.1 top edge Black != 0.0 White"]


def test_reused_piece_is_reported():
    arrangement = Arrangement(rows=[
        [_placement(3, 2)],
        [_placement(3, 2), None, None],
    ])
    problems = find_violations(arrangement, BOARD_SIDES)
    assert any("piece 3 used at 0.0 and 1.0" == p for p in problems)


def test_open_cells_are_skipped():
    assert is_valid(Arrangement.empty(), BOARD_SIDES)


def test_bottom_side_checked_on_full_board_only():
    rows = [[None] * n for n in (1, 3, 5, 7)]
    # Piece 8 (Green, Black, Black) at rotation 1 shows Black, Black, Green
    rows[3][2] = _placement(8, 1)
    assert is_valid(Arrangement(rows=rows), BOARD_SIDES)

    rows[3][2] = _placement(8, 0)
    problems = find_violations(Arrangement(rows=rows), BOARD_SIDES)
    assert problems == ["3.2 bottom edge Black != bottom side Green"]
