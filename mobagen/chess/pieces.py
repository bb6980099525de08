"""Move generation for bishops, rooks, queens and knights."""

from __future__ import annotations

from typing import Sequence, Set

from mobagen.chess.board import PieceType, WorldState
from mobagen.point2d import Point2D

_DIAGONALS = (Point2D(1, 1), Point2D(-1, 1), Point2D(1, -1), Point2D(-1, -1))
_ORTHOGONALS = (Point2D(0, 1), Point2D(0, -1), Point2D(1, 0), Point2D(-1, 0))
_ALL_DIRECTIONS = _ORTHOGONALS + _DIAGONALS

_KNIGHT_ATTACK_DELTAS = (
    Point2D(-1, 2), Point2D(1, 2), Point2D(-2, 1), Point2D(2, 1),
    Point2D(-2, -1), Point2D(2, -1), Point2D(-1, -2), Point2D(1, -2),
)
# The covering table repeats two leftward jumps and leaves out their rightward mirrors.
_KNIGHT_COVER_DELTAS = (
    Point2D(-1, 2), Point2D(1, 2), Point2D(-2, 1), Point2D(-2, 1),
    Point2D(-2, -1), Point2D(-2, -1), Point2D(-1, -2), Point2D(1, -2),
)


def _slide(
    world: WorldState, origin: Point2D, kind: PieceType, directions: Sequence[Point2D], covering: bool
) -> Set[Point2D]:
    """Walk each direction until the edge or a piece.

    Attacking keeps an enemy blocker; covering keeps a friendly one.
    """
    piece = world.piece_at_position(origin)
    if piece.piece is not kind:
        return set()
    moves: Set[Point2D] = set()
    for direction in directions:
        current = origin + direction
        other = world.piece_at_position(current)
        while other.piece is not PieceType.WRONG:
            if other.piece is PieceType.NONE:
                moves.add(current)
            else:
                if (other.color == piece.color) == covering:
                    moves.add(current)
                break
            current = current + direction
            other = world.piece_at_position(current)
    return moves


def _jump(world: WorldState, origin: Point2D, deltas: Sequence[Point2D], covering: bool) -> Set[Point2D]:
    piece = world.piece_at_position(origin)
    if piece.piece is not PieceType.KNIGHT:
        return set()
    moves: Set[Point2D] = set()
    for delta in deltas:
        target = origin + delta
        other = world.piece_at_position(target)
        if other.piece is PieceType.WRONG:
            continue
        if other.piece is not PieceType.NONE and (other.color == piece.color) != covering:
            continue
        moves.add(target)
    return moves


class Bishop:
    @staticmethod
    def attack_moves(world: WorldState, origin: Point2D) -> Set[Point2D]:
        return _slide(world, origin, PieceType.BISHOP, _DIAGONALS, covering=False)

    @staticmethod
    def cover_moves(world: WorldState, origin: Point2D) -> Set[Point2D]:
        return _slide(world, origin, PieceType.BISHOP, _DIAGONALS, covering=True)


class Rook:
    @staticmethod
    def attack_moves(world: WorldState, origin: Point2D) -> Set[Point2D]:
        return _slide(world, origin, PieceType.ROOK, _ORTHOGONALS, covering=False)

    @staticmethod
    def cover_moves(world: WorldState, origin: Point2D) -> Set[Point2D]:
        return _slide(world, origin, PieceType.ROOK, _ORTHOGONALS, covering=True)


class Queen:
    @staticmethod
    def attack_moves(world: WorldState, origin: Point2D) -> Set[Point2D]:
        return _slide(world, origin, PieceType.QUEEN, _ALL_DIRECTIONS, covering=False)

    @staticmethod
    def cover_moves(world: WorldState, origin: Point2D) -> Set[Point2D]:
        return _slide(world, origin, PieceType.QUEEN, _ALL_DIRECTIONS, covering=True)


class Knight:
    @staticmethod
    def attack_moves(world: WorldState, origin: Point2D) -> Set[Point2D]:
        return _jump(world, origin, _KNIGHT_ATTACK_DELTAS, covering=False)

    @staticmethod
    def cover_moves(world: WorldState, origin: Point2D) -> Set[Point2D]:
        return _jump(world, origin, _KNIGHT_COVER_DELTAS, covering=True)