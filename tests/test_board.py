import pytest

from mobagen.chess.board import (
    IllegalMoveError,
    Move,
    MoveState,
    MoveType,
    PieceColor,
    PieceData,
    PieceType,
    WorldState,
)
from mobagen.point2d import Point2D

REAL_TYPES = [t for t in PieceType if t is not PieceType.PIECEMASK]


def started():
    state = WorldState()
    state.reset()
    return state


@pytest.mark.parametrize("color", list(PieceColor))
@pytest.mark.parametrize("kind", REAL_TYPES)
def test_pack_unpack_round_trip(color, kind):
    piece = PieceData(color, kind)
    assert PieceData.unpack(piece.pack()) == piece
    assert 0 <= piece.pack() < 16


def test_opposite_color():
    assert PieceColor.WHITE.opposite() is PieceColor.BLACK
    assert PieceColor.BLACK.opposite() is PieceColor.WHITE


def test_to_char_case_follows_color():
    assert PieceData(PieceColor.BLACK, PieceType.KING).to_char() == "k"
    assert PieceData(PieceColor.WHITE, PieceType.KING).to_char() == "K"
    assert PieceData.empty().to_char() == "."
    assert PieceData.wrong().to_char() == "."


def test_off_board_is_wrong():
    state = started()
    for pos in (Point2D(-1, 0), Point2D(8, 3), Point2D(2, -1), Point2D(0, 8)):
        assert state.piece_at_position(pos) == PieceData.wrong()


def test_set_and_get_both_nibbles():
    state = WorldState()
    left = PieceData(PieceColor.BLACK, PieceType.QUEEN)
    right = PieceData(PieceColor.WHITE, PieceType.KNIGHT)
    state.set_piece_at_position(left, Point2D(2, 5))
    state.set_piece_at_position(right, Point2D(3, 5))
    assert state.piece_at_position(Point2D(2, 5)) == left
    assert state.piece_at_position(Point2D(3, 5)) == right
    state.set_piece_at_position(PieceData.empty(), Point2D(2, 5))
    assert state.piece_at_position(Point2D(3, 5)) == right


def test_set_off_board_raises():
    with pytest.raises(IndexError):
        WorldState().set_piece_at_position(PieceData.empty(), Point2D(8, 0))


def test_reset_layout():
    state = started()
    assert state.turn is PieceColor.WHITE
    assert state.piece_at_position(Point2D(4, 0)) == PieceData(PieceColor.WHITE, PieceType.KING)
    assert state.piece_at_position(Point2D(3, 7)) == PieceData(PieceColor.BLACK, PieceType.QUEEN)
    for column in range(8):
        assert state.piece_at_position(Point2D(column, 1)).piece is PieceType.PAWN
        assert state.piece_at_position(Point2D(column, 4)).piece is PieceType.NONE


def test_str_of_start_position():
    lines = str(started()).splitlines(keepends=True)
    assert lines[-1] == "  A B C D E F G H\n"
    assert lines[0][1:].upper() == lines[7][1:]
    assert lines[1][1:].upper() == lines[6][1:]
    assert lines[0][0] == "8" and lines[7][0] == "1"


def test_move_passes_turn_and_empties_origin():
    state = started()
    pawn = state.piece_at_position(Point2D(4, 1))
    state.move(Point2D(4, 1), Point2D(4, 3))
    assert state.piece_at_position(Point2D(4, 3)) == pawn
    assert state.piece_at_position(Point2D(4, 1)) == PieceData.empty()
    assert state.turn is PieceColor.BLACK


def test_capture():
    state = WorldState()
    rook = PieceData(PieceColor.WHITE, PieceType.ROOK)
    state.set_piece_at_position(rook, Point2D(0, 0))
    state.set_piece_at_position(PieceData(PieceColor.BLACK, PieceType.PAWN), Point2D(0, 5))
    state.move(Point2D(0, 0), Point2D(0, 5))
    assert state.piece_at_position(Point2D(0, 5)) == rook


def test_move_wrong_turn_raises_and_keeps_state():
    state = started()
    before = state.copy()
    with pytest.raises(IllegalMoveError):
        state.move(Point2D(0, 6), Point2D(0, 5))
    assert state == before


def test_move_onto_own_piece_raises():
    state = started()
    with pytest.raises(IllegalMoveError):
        state.move(Point2D(0, 0), Point2D(0, 1))


def test_move_off_board_raises():
    state = started()
    with pytest.raises(IllegalMoveError):
        state.move(Point2D(-1, 0), Point2D(0, 2))
    with pytest.raises(IllegalMoveError):
        state.move(Point2D(0, 1), Point2D(0, 9))


def test_copy_is_independent():
    state = started()
    clone = state.copy()
    clone.move(Point2D(1, 1), Point2D(1, 2))
    assert clone != state
    assert state.piece_at_position(Point2D(1, 1)).piece is PieceType.PAWN


def test_generate_list_of_moves():
    piece = PieceData(PieceColor.BLACK, PieceType.BISHOP)
    origin = Point2D(2, 7)
    targets = [Point2D(1, 6), Point2D(3, 6), Point2D(4, 5)]
    moves = Move.generate_list_of_moves(piece, origin, targets)
    assert [m.target for m in moves] == targets
    assert all(m.origin == origin for m in moves)
    assert all(m.piece_data() == piece for m in moves)
    assert all(m.move_type is MoveType.NORMAL for m in moves)


def test_move_state_ordering_and_accessors():
    first = Move(Point2D(4, 1), Point2D(4, 3), PieceColor.WHITE, PieceType.PAWN)
    last = Move(Point2D(4, 6), Point2D(4, 4), PieceColor.BLACK, PieceType.PAWN)
    low = MoveState(started(), [first, last], -3)
    high = MoveState(started(), [first], 5)
    assert sorted([high, low]) == [low, high]
    assert low.first_move() == first
    assert low.current_move() == last
    assert high.current_move() == high.first_move()