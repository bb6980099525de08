"""Static evaluation of a chess position; positive favours white."""

from __future__ import annotations

from mobagen.chess import search as _search
from mobagen.chess.board import PieceColor, PieceType, WorldState
from mobagen.chess.pawn import Pawn
from mobagen.chess.pieces import Bishop, Knight, Queen, Rook
from mobagen.point2d import Point2D

_BOARD_SIDE = 8


def distance_to_center(location: Point2D) -> int:
    """Closeness to the centre, 0 to 3, taken along the nearer axis."""
    doubled_x = location.x * 2 - 7
    doubled_y = location.y * 2 - 7
    return 3 - (min(abs(doubled_x), abs(doubled_y)) - 1) // 2


def _piece_score(state: WorldState, location: Point2D, kind: PieceType, color: PieceColor) -> int:
    king = _search.King
    if kind is PieceType.KING:
        return (
            1000
            + len(king.attack_moves(state, location))
            + distance_to_center(location)
            - king.is_in_check(state, color) * 10
        )
    if kind is PieceType.QUEEN:
        return 90 + len(Queen.attack_moves(state, location)) + distance_to_center(location)
    if kind is PieceType.ROOK:
        return 50 + len(Rook.attack_moves(state, location)) + distance_to_center(location)
    if kind is PieceType.KNIGHT:
        return 35 + len(Knight.attack_moves(state, location)) + distance_to_center(location)
    if kind is PieceType.BISHOP:
        return 30 + len(Bishop.attack_moves(state, location)) + distance_to_center(location)
    # pawn
    moves = len(Pawn.possible_moves(state, location))
    score = 10 + moves + distance_to_center(location)
    score += len(Pawn.attack_moves(state, location))
    score += len(Pawn.cover_moves(state, location))
    if moves == 0:
        score -= 2
    score -= 2 * Pawn.count_doubles(state, location)
    if Pawn.is_isolated(state, location):
        score -= 1
    return score


_SCORED = {
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.PAWN,
}


def material_score(state: WorldState) -> int:
    """Sum of piece values, mobility and placement; black pieces count negative."""
    score = 0
    for line in range(_BOARD_SIDE):
        for column in range(_BOARD_SIDE):
            location = Point2D(column, line)
            piece = state.piece_at_position(location)
            if piece.piece not in _SCORED:
                continue
            value = _piece_score(state, location, piece.piece, piece.color)
            score += -value if piece.color is PieceColor.BLACK else value
    return score