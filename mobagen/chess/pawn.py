"""Move generation and structure checks for pawns."""

from __future__ import annotations

from typing import Set

from mobagen.chess.board import PieceColor, PieceData, PieceType, WorldState
from mobagen.point2d import Point2D

_BOARD_SIDE = 8


def _forward(color: PieceColor) -> int:
    return 1 if color is PieceColor.WHITE else -1


def _is_piece(other: PieceData) -> bool:
    return other.piece is not PieceType.WRONG and other.piece is not PieceType.NONE


def _diagonals(world: WorldState, origin: Point2D, wanted: PieceColor, allow_empty: bool) -> Set[Point2D]:
    """Forward diagonal squares that are empty (if allowed) or hold a ``wanted`` piece."""
    dy = _forward(world.piece_at_position(origin).color)
    points: Set[Point2D] = set()
    for dx in (1, -1):
        target = Point2D(origin.x + dx, origin.y + dy)
        other = world.piece_at_position(target)
        if (allow_empty and other.piece is PieceType.NONE) or (_is_piece(other) and other.color == wanted):
            points.add(target)
    return points


class Pawn:
    @staticmethod
    def possible_moves(world: WorldState, origin: Point2D) -> Set[Point2D]:
        """Squares the pawn can move to: one or two steps forward, or a diagonal capture."""
        piece = world.piece_at_position(origin)
        if piece.piece is not PieceType.PAWN:
            return set()
        dy = _forward(piece.color)
        start_row = 1 if piece.color is PieceColor.WHITE else 6
        points: Set[Point2D] = set()

        ahead = Point2D(origin.x, origin.y + dy)
        if world.piece_at_position(ahead).piece is PieceType.NONE:
            points.add(ahead)
            if origin.y == start_row:
                two_ahead = Point2D(origin.x, origin.y + 2 * dy)
                if world.piece_at_position(two_ahead).piece is PieceType.NONE:
                    points.add(two_ahead)

        points |= _diagonals(world, origin, piece.color.opposite(), allow_empty=False)
        return points

    @staticmethod
    def attack_moves(world: WorldState, origin: Point2D) -> Set[Point2D]:
        """Forward diagonals that are empty or hold an enemy piece."""
        piece = world.piece_at_position(origin)
        if piece.piece is not PieceType.PAWN:
            return set()
        return _diagonals(world, origin, piece.color.opposite(), allow_empty=True)

    @staticmethod
    def cover_moves(world: WorldState, origin: Point2D) -> Set[Point2D]:
        """Forward diagonals that are empty or hold a friendly piece."""
        piece = world.piece_at_position(origin)
        if piece.piece is not PieceType.PAWN:
            return set()
        return _diagonals(world, origin, piece.color, allow_empty=True)

    @staticmethod
    def count_doubles(world: WorldState, origin: Point2D) -> int:
        """Number of other friendly pawns in the same column; 0 for a non-pawn."""
        piece = world.piece_at_position(origin)
        if piece.piece is not PieceType.PAWN:
            return 0
        same = sum(
            1
            for y in range(_BOARD_SIDE)
            if (other := world.piece_at_position(Point2D(origin.x, y))).piece is PieceType.PAWN
            and other.color == piece.color
        )
        return same - 1

    @staticmethod
    def is_isolated(world: WorldState, origin: Point2D) -> bool:
        """True unless an identical pawn stands on one of the eight surrounding squares.

        A square without a pawn also counts as isolated.
        """
        piece = world.piece_at_position(origin)
        if piece.piece is not PieceType.PAWN:
            return True
        adjacency = (
            origin.right(),
            origin.left(),
            origin.up().left(),
            origin.up().right(),
            origin.down().left(),
            origin.down().right(),
            origin.up(),
            origin.down(),
        )
        return not any(world.piece_at_position(pos) == piece for pos in adjacency)