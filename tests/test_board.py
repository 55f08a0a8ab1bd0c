import pytest

from bermuda_solver.board import (
    Arrangement,
    Dot,
    Placement,
    Position,
    above_neighbor_edge_index,
    bottom_border_index,
    edge_color_of_piece,
    is_upward_cell,
    left_neighbor_edge_index,
    next_open_cell,
    row_lengths,
    touches_bottom_border,
)
from bermuda_solver.errors import SearchInvariantError
from bermuda_solver.pieces import ALL_PIECES


def test_rotation_zero_reads_piece_unchanged():
    for piece in ALL_PIECES:
        assert tuple(edge_color_of_piece(piece, p, 0) for p in range(3)) == piece.dots


def test_rotations_are_distinct_unless_monochrome():
    for piece in ALL_PIECES:
        reads = {tuple(piece.edge(p, rot) for p in range(3)) for rot in range(3)}
        expected = 1 if len(set(piece.dots)) == 1 else 3
        assert len(reads) == expected


def test_edge_color_wraps_around():
    piece = ALL_PIECES[5]  # Blue, White, White
    assert piece.edge(0, 2) == Dot.WHITE
    assert piece.edge(1, 2) == Dot.BLUE
    assert piece.edge(2, 2) == Dot.WHITE


def test_geometry_predicates():
    assert row_lengths() == (1, 3, 5, 7)
    assert is_upward_cell(3, 0)
    assert not is_upward_cell(3, 1)
    assert left_neighbor_edge_index(1) == 1
    assert left_neighbor_edge_index(2) == 2
    assert above_neighbor_edge_index() == 2
    assert Position(2, 3).above() == Position(1, 2)
    assert Position(2, 3).left() == Position(2, 2)


def test_bottom_border_cells():
    bottom = [col for col in range(7) if touches_bottom_border(3, col)]
    assert bottom == [0, 2, 4, 6]
    assert [bottom_border_index(col) for col in bottom] == [0, 1, 2, 3]
    assert not touches_bottom_border(2, 0)


def test_next_open_cell_scans_row_major():
    arrangement = Arrangement.empty(2)
    assert next_open_cell(arrangement) == Position(0, 0)

    arrangement.place(Position(0, 0), Placement(ALL_PIECES[3], 2))
    arrangement.place(Position(1, 0), Placement(ALL_PIECES[0], 0))
    assert arrangement.next_open_cell() == Position(1, 1)
    assert not arrangement.is_complete()


def test_empty_arrangement_shape():
    assert [len(row) for row in Arrangement.empty().rows] == [1, 3, 5, 7]
    assert [len(row) for row in Arrangement.empty(3).rows] == [1, 3, 5]
    assert Arrangement.empty(1).next_open_cell() == Position(0, 0)


def test_copy_does_not_share_rows():
    original = Arrangement.empty(2)
    clone = original.copy()
    clone.place(Position(0, 0), Placement(ALL_PIECES[3], 2))

    assert original[Position(0, 0)] is None
    assert clone.used_pieces() == {3}


def test_place_rejects_taken_cell_and_reused_piece():
    arrangement = Arrangement.empty(2)
    arrangement.place(Position(0, 0), Placement(ALL_PIECES[3], 2))

    with pytest.raises(SearchInvariantError):
        arrangement.place(Position(0, 0), Placement(ALL_PIECES[5], 2))
    with pytest.raises(SearchInvariantError):
        arrangement.place(Position(1, 0), Placement(ALL_PIECES[3], 0))


def test_reading_open_cell_fails_loudly():
    with pytest.raises(SearchInvariantError):
        Arrangement.empty(2).placed(Position(1, 0))


def test_to_indexes():
    arrangement = Arrangement.empty(2)
    arrangement.place(Position(0, 0), Placement(ALL_PIECES[14], 2))
    assert arrangement.to_indexes() == [[(14, 2)], [None, None, None]]
