from mobagen.chess.board import PieceColor, PieceData, PieceType, WorldState
from mobagen.chess.heuristics import distance_to_center, material_score
from mobagen.point2d import Point2D

W = PieceColor.WHITE
B = PieceColor.BLACK


def board(*placements):
    world = WorldState()
    for color, kind, (x, y) in placements:
        world.set_piece_at_position(PieceData(color, kind), Point2D(x, y))
    return world


def test_distance_to_center_corner_and_center():
    assert distance_to_center(Point2D(0, 0)) == 0
    assert distance_to_center(Point2D(3, 3)) == 3


def test_distance_to_center_range_and_symmetry():
    for x in range(8):
        for y in range(8):
            value = distance_to_center(Point2D(x, y))
            assert 0 <= value <= 3
            assert value == distance_to_center(Point2D(7 - x, 7 - y))
            assert value == distance_to_center(Point2D(y, x))


def test_start_position_is_balanced():
    world = WorldState()
    world.reset()
    assert material_score(world) == 0


def test_empty_board_scores_zero():
    assert material_score(WorldState()) == 0


def test_colour_swap_negates_score():
    white = board((W, PieceType.QUEEN, (3, 3)))
    black = board((B, PieceType.QUEEN, (3, 3)))
    assert material_score(white) > 0
    assert material_score(white) == -material_score(black)


def test_removing_black_piece_favours_white():
    world = WorldState()
    world.reset()
    world.set_piece_at_position(PieceData.empty(), Point2D(3, 7))
    assert material_score(world) > 0


def test_queen_outweighs_rook():
    queen = board((W, PieceType.QUEEN, (0, 0)))
    rook = board((W, PieceType.ROOK, (0, 0)))
    assert material_score(queen) > material_score(rook)


def test_king_in_check_lowers_score():
    safe = board((W, PieceType.KING, (4, 0)), (B, PieceType.ROOK, (0, 7)))
    checked = board((W, PieceType.KING, (4, 0)), (B, PieceType.ROOK, (4, 7)))
    safe_king = material_score(safe) + material_score(board((B, PieceType.ROOK, (0, 7))))
    checked_king = material_score(checked) + material_score(board((B, PieceType.ROOK, (4, 7))))
    assert checked_king < safe_king


def test_score_does_not_change_board():
    world = WorldState()
    world.reset()
    before = bytes(world.state)
    material_score(world)
    assert bytes(world.state) == before
    assert world.turn is W