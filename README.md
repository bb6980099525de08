# mobagen

A small, dependency-free Python toolkit for simple 2D games, with a chess
rules engine built on top of it.

## What is in it

- `mobagen.random` – `range_int(start, end)` returns an integer in
  `[start, end]`, both ends included; `range_float(start, end)` returns a float
  between the two. Equal ends return that value.
- `mobagen.point2d` – `Point2D`, an immutable, hashable integer point with
  `+` and `-`, the neighbours `up()`, `down()`, `left()`, `right()`, the
  constants `Point2D.UP` `(0, -1)`, `DOWN`, `LEFT`, `RIGHT` and `INFINITE`,
  and `str()` in the form `{x, y}`.
- `mobagen.vector2` – `Vector2`, an immutable float vector in screen
  coordinates (`Vector2.up()` is `(0, -1)`), with arithmetic, indexing,
  `rotate(degrees)`, `rotate_towards(up)`, `angle_degree()`,
  `angle_radian()`, `magnitude()`, `sqr_magnitude()`, `distance()`,
  `distance_squared()`, `normalized()`, and the constructors `zero()`,
  `identity()`, `from_degree()`, `from_radian()` and `random(start, end)`.
  Two vectors compare equal when their squared distance is below `1e-6`.
  `Vector3` is a plain three-component dataclass.
- `mobagen.transform` – `Transform` with `position`, `scale` and `rotation`
  (the vector that points up).
- `mobagen.polygon` – `Polygon` and the shapes `Circle(sample)`, `Square()`
  and `Hexagon()`. `drawable_points(transform)` scales, rotates and moves the
  points; `edges(transform)` returns the closed outline as integer segments.
- `mobagen.color` – `Color32` (one byte per channel, `from_packed` /
  `packed` for the `0xAABBGGRR` word, `from_colorf`, `lerp`, `light`, `dark`,
  `random`), `Colorf` (float channels, `from_packed`, `from_color32`,
  `hsv_to_rgb`) and a palette of named colours in `Colors`, such as
  `Colors.RED` or `Colors.LIGHT_BLUE`.

## Chess

`mobagen.chess` holds the board, move generation, an evaluation and a search.

```python
from mobagen.chess.board import WorldState
from mobagen.chess.heuristics import material_score
from mobagen.chess.search import next_move

state = WorldState()
state.reset()
print(state)                  # drawn from rank 8 down to rank 1
print(material_score(state))  # positive means white is ahead

move = next_move(state)
state.move(move.origin, move.target)
print(state)
```

- `mobagen.chess.board` – `WorldState` stores the board two squares per
  byte and the colour to move. `piece_at_position` returns a `PieceData`, or
  `PieceData.wrong()` off the board. `move(origin, target)` moves a piece and
  passes the turn, raising `IllegalMoveError` (a `ValueError`) when the move
  is not allowed. `PieceData` packs into four bits (`pack` / `unpack`);
  `Move` records origin, target, colour, piece and `MoveType`; `MoveState`
  pairs a board with the moves that reached it and its score.
- `mobagen.chess.pieces` – `Bishop`, `Rook`, `Queen` and `Knight`, each with
  `attack_moves` (squares it can move to or capture on) and `cover_moves`
  (squares it defends).
- `mobagen.chess.pawn` – `Pawn` with `possible_moves`, `attack_moves`,
  `cover_moves`, `count_doubles` and `is_isolated`.
- `mobagen.chess.search` – `King` (`attack_moves`, `cover_moves_naive`,
  `find_king`, `is_in_check`), `list_moves(state, turn)`,
  `list_places_king_cannot_go(state, turn)` and `next_move(state)`, which
  looks three plies ahead and raises `ValueError` when a ply has no moves.
- `mobagen.chess.heuristics` – `material_score(state)` (piece values,
  mobility, centre placement and pawn structure; black counts negative) and
  `distance_to_center(location)`.

The move rules are simplified: there is no castling, en passant or
promotion, and moves that leave one's own king in check are not rejected.

## What it does not do

This package is a library only. It has no window, no drawing, no input
handling, no game loop or scene objects, and no command to run; drawing a
board or shape is left to the caller, using the points, edges and colours
the package computes.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```