"""Chess board state packed into nibbles, pieces and moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, List

from mobagen.point2d import Point2D

_BOARD_SIDE = 8
_BOARD_BYTES = _BOARD_SIDE * _BOARD_SIDE // 2


class IllegalMoveError(ValueError):
    """Raised when a move cannot be played on the current board."""


class MoveType(IntEnum):
    NORMAL = 0b000
    CAPTURE = 0b001
    EN_PASSANT = 0b010
    CASTLING = 0b011
    PROMOTE_TO_BISHOP = 0b100
    PROMOTE_TO_KNIGHT = 0b101
    PROMOTE_TO_ROOK = 0b110
    PROMOTE_TO_QUEEN = 0b111


class PieceType(IntEnum):
    NONE = 0b0000
    KING = 0b0001
    QUEEN = 0b0010
    BISHOP = 0b0011
    KNIGHT = 0b0100
    ROOK = 0b0101
    PAWN = 0b0110
    WRONG = 0b0111
    PIECEMASK = 0b0111


class PieceColor(IntEnum):
    BLACK = 0
    WHITE = 1

    def opposite(self) -> PieceColor:
        return PieceColor.BLACK if self is PieceColor.WHITE else PieceColor.WHITE


_PIECE_CHARS = {
    PieceType.PAWN: "p",
    PieceType.ROOK: "r",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}


@dataclass(frozen=True)
class PieceData:
    """A coloured piece; packs into four bits (colour in bit 0, type in bits 1-3)."""

    color: PieceColor = PieceColor.WHITE
    piece: PieceType = PieceType.NONE

    @classmethod
    def empty(cls) -> PieceData:
        return cls(PieceColor.WHITE, PieceType.NONE)

    @classmethod
    def wrong(cls) -> PieceData:
        return cls(PieceColor.WHITE, PieceType.WRONG)

    def pack(self) -> int:
        return int(self.color) | (int(self.piece) << 1)

    @classmethod
    def unpack(cls, data: int) -> PieceData:
        return cls(PieceColor(data & 0b1), PieceType((data >> 1) & 0b111))

    def to_char(self) -> str:
        char = _PIECE_CHARS.get(self.piece, ".")
        return char.upper() if self.color is PieceColor.WHITE else char


@dataclass(frozen=True)
class Move:
    """A move of one piece; coordinates are kept to three bits each."""

    origin: Point2D
    target: Point2D
    color: PieceColor
    piece: PieceType
    move_type: MoveType = MoveType.NORMAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", Point2D(self.origin.x & 0b111, self.origin.y & 0b111))
        object.__setattr__(self, "target", Point2D(self.target.x & 0b111, self.target.y & 0b111))

    def piece_data(self) -> PieceData:
        return PieceData(self.color, self.piece)

    @classmethod
    def generate_list_of_moves(cls, piece: PieceData, origin: Point2D, targets: Iterable[Point2D]) -> List[Move]:
        """Return one normal move of ``piece`` from ``origin`` to each target."""
        return [cls(origin, target, piece.color, piece.piece, MoveType.NORMAL) for target in targets]


def _on_board(pos: Point2D) -> bool:
    return 0 <= pos.x < _BOARD_SIDE and 0 <= pos.y < _BOARD_SIDE


@dataclass
class WorldState:
    """An 8x8 board, two squares per byte, and the colour to move."""

    turn: PieceColor = PieceColor.WHITE
    state: bytearray = field(default_factory=lambda: bytearray(_BOARD_BYTES))

    def end_turn(self) -> None:
        self.turn = self.turn.opposite()

    def piece_at_position(self, pos: Point2D) -> PieceData:
        """Return the piece on ``pos``, or ``PieceData.wrong()`` off the board."""
        if not _on_board(pos):
            return PieceData.wrong()
        value = self.state[(pos.y * _BOARD_SIDE + pos.x) // 2]
        nibble = value & 0x0F if pos.x % 2 == 0 else value >> 4
        return PieceData.unpack(nibble)

    def set_piece_at_position(self, piece: PieceData, pos: Point2D) -> None:
        if not _on_board(pos):
            raise IndexError(f"position {pos} is outside the board")
        packed = piece.pack()
        index = (pos.y * _BOARD_SIDE + pos.x) // 2
        value = self.state[index]
        if pos.x % 2 == 0:
            value = (value & 0xF0) | packed
        else:
            value = (value & 0x0F) | (packed << 4)
        self.state[index] = value

    def move(self, origin: Point2D, target: Point2D) -> None:
        """Move the piece on ``origin`` to ``target`` and pass the turn.

        Raises ``IllegalMoveError`` when the origin is off the board, holds a
        piece of the wrong colour, or the target is off the board or holds a
        piece of the same colour.
        """
        piece_from = self.piece_at_position(origin)
        piece_to = self.piece_at_position(target)

        if piece_from.piece is PieceType.WRONG:
            raise IllegalMoveError(f"Wrong FROM piece at position: {origin}")
        if piece_from.color != self.turn:
            raise IllegalMoveError(f"Piece color does not match the turn at position: {origin}")
        if piece_to.piece is PieceType.WRONG:
            raise IllegalMoveError(f"Wrong TO position: {target}")
        if piece_to.piece is PieceType.NONE or piece_from.color != piece_to.color:
            self.set_piece_at_position(piece_from, target)
            self.set_piece_at_position(PieceData.empty(), origin)
            self.end_turn()
            return
        raise IllegalMoveError(f"WRONG piece at position: {origin}")

    def reset(self) -> None:
        """Clear the board and set up the starting position, white to move."""
        self.turn = PieceColor.WHITE
        self.state = bytearray(_BOARD_BYTES)
        back_rank = (
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        )
        for column, kind in enumerate(back_rank):
            self.set_piece_at_position(PieceData(PieceColor.WHITE, kind), Point2D(column, 0))
            self.set_piece_at_position(PieceData(PieceColor.WHITE, PieceType.PAWN), Point2D(column, 1))
            self.set_piece_at_position(PieceData(PieceColor.BLACK, PieceType.PAWN), Point2D(column, 6))
            self.set_piece_at_position(PieceData(PieceColor.BLACK, kind), Point2D(column, 7))

    def copy(self) -> WorldState:
        return WorldState(self.turn, bytearray(self.state))

    def __str__(self) -> str:
        lines = []
        for line in range(_BOARD_SIDE - 1, -1, -1):
            row = "".join(" " + self.piece_at_position(Point2D(col, line)).to_char() for col in range(_BOARD_SIDE))
            lines.append(f"{line + 1}{row}\n")
        lines.append("  A B C D E F G H\n")
        return "".join(lines)


@dataclass
class MoveState:
    """A board reached by a sequence of moves, with its evaluation."""

    state: WorldState
    moves: List[Move] = field(default_factory=list)
    score: int = 0

    def __lt__(self, other: MoveState) -> bool:
        if not isinstance(other, MoveState):
            return NotImplemented
        return self.score < other.score

    def current_move(self) -> Move:
        return self.moves[-1]

    def first_move(self) -> Move:
        return self.moves[0]