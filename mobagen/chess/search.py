"""King moves, move listing and a three-ply move search."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Set

from mobagen.chess import heuristics as _heuristics
from mobagen.chess.board import Move, MoveState, PieceColor, PieceType, WorldState
from mobagen.chess.pawn import Pawn
from mobagen.chess.pieces import Bishop, Knight, Queen, Rook
from mobagen.point2d import Point2D

_BOARD_SIDE = 8
_KING_DIRECTIONS = (
    Point2D(0, 1), Point2D(0, -1), Point2D(1, 0), Point2D(-1, 0),
    Point2D(1, 1), Point2D(-1, 1), Point2D(1, -1), Point2D(-1, -1),
)


def _squares() -> Iterable[Point2D]:
    for line in range(_BOARD_SIDE):
        for column in range(_BOARD_SIDE):
            yield Point2D(column, line)


class King:
    @staticmethod
    def attack_moves(world: WorldState, origin: Point2D) -> Set[Point2D]:
        """Adjacent squares that are empty or hostile and not covered by the enemy."""
        piece = world.piece_at_position(origin)
        if piece.piece is not PieceType.KING:
            return set()
        attacked = list_places_king_cannot_go(world, piece.color)
        moves: Set[Point2D] = set()
        for direction in _KING_DIRECTIONS:
            target = origin + direction
            other = world.piece_at_position(target)
            if other.piece is PieceType.WRONG:
                continue
            if (other.piece is PieceType.NONE or other.color != piece.color) and target not in attacked:
                moves.add(target)
        return moves

    @staticmethod
    def cover_moves_naive(world: WorldState, origin: Point2D) -> Set[Point2D]:
        """Adjacent squares that are empty or hold a friendly piece."""
        piece = world.piece_at_position(origin)
        if piece.piece is not PieceType.KING:
            return set()
        moves: Set[Point2D] = set()
        for direction in _KING_DIRECTIONS:
            target = origin + direction
            other = world.piece_at_position(target)
            if other.piece is PieceType.WRONG:
                continue
            if other.piece is PieceType.NONE or other.color == piece.color:
                moves.add(target)
        return moves

    @staticmethod
    def find_king(world: WorldState, color: PieceColor) -> Point2D:
        """Return the square of ``color``'s king, or ``Point2D(0, 0)`` if there is none."""
        for location in _squares():
            piece = world.piece_at_position(location)
            if piece.color == color and piece.piece is PieceType.KING:
                return location
        return Point2D(0, 0)

    @staticmethod
    def is_in_check(world: WorldState, color: PieceColor) -> int:
        """Count the opposing moves that land on ``color``'s king."""
        king_location = King.find_king(world, color)
        return sum(1 for move in list_moves(world, color.opposite()) if move.target == king_location)


_MOVE_GENERATORS: Dict[PieceType, Callable[[WorldState, Point2D], Set[Point2D]]] = {
    PieceType.ROOK: Rook.attack_moves,
    PieceType.BISHOP: Bishop.attack_moves,
    PieceType.PAWN: Pawn.possible_moves,
    PieceType.QUEEN: Queen.attack_moves,
    PieceType.KNIGHT: Knight.attack_moves,
    PieceType.KING: King.attack_moves,
}

_COVER_GENERATORS: Dict[PieceType, Callable[[WorldState, Point2D], Set[Point2D]]] = {
    PieceType.ROOK: Rook.cover_moves,
    PieceType.BISHOP: Bishop.cover_moves,
    PieceType.PAWN: Pawn.cover_moves,
    PieceType.QUEEN: Queen.cover_moves,
    PieceType.KNIGHT: Knight.cover_moves,
    PieceType.KING: King.cover_moves_naive,
}


def list_moves(state: WorldState, turn: PieceColor) -> List[Move]:
    """Every move available to the pieces of ``turn``, square by square."""
    moves: List[Move] = []
    for location in _squares():
        piece = state.piece_at_position(location)
        if piece.piece is PieceType.NONE or piece.color != turn:
            continue
        generator = _MOVE_GENERATORS.get(piece.piece)
        if generator is None:
            continue
        targets = sorted(generator(state, location), key=lambda p: (p.y, p.x))
        moves.extend(Move.generate_list_of_moves(piece, location, targets))
    return moves


def list_places_king_cannot_go(state: WorldState, turn: PieceColor) -> Set[Point2D]:
    """Squares covered by the pieces opposing ``turn``."""
    covered: Set[Point2D] = set()
    for location in _squares():
        piece = state.piece_at_position(location)
        if piece.piece in (PieceType.NONE, PieceType.WRONG) or piece.color == turn:
            continue
        generator = _COVER_GENERATORS.get(piece.piece)
        if generator is not None:
            covered |= generator(state, location)
    return covered


def _expand(parents: Iterable[MoveState]) -> List[MoveState]:
    children: List[MoveState] = []
    for parent in parents:
        for move in list_moves(parent.state, parent.state.turn):
            board = parent.state.copy()
            board.move(move.origin, move.target)
            children.append(MoveState(board, parent.moves + [move], _heuristics.material_score(board)))
    return children


def _ordered(states: List[MoveState], ascending_turn: PieceColor) -> List[MoveState]:
    if not states:
        raise ValueError("no moves available to search")
    ascending = states[0].state.turn == ascending_turn
    return sorted(states, key=lambda s: s.score, reverse=not ascending)


def next_move(state: WorldState) -> Move:
    """Pick a move by looking three plies ahead with the material score.

    Raises ``ValueError`` when some ply has no moves at all.
    """
    first = _ordered(_expand([MoveState(state.copy())]), PieceColor.WHITE)
    second = _ordered(_expand(first), PieceColor.BLACK)
    third = _ordered(_expand(second), PieceColor.WHITE)
    return third[0].first_move()