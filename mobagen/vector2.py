"""Floating-point two- and three-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from mobagen.random import range_float

_DEG2RAD = (math.pi * 2) / 360
_EPSILON = 1.0e-6

Scalar = Union[int, float]


@dataclass(frozen=True, eq=False)
class Vector2:
    """An immutable 2D vector; ``y`` grows downwards, so ``up`` is ``(0, -1)``.

    Equality is approximate: two vectors are equal when the squared length
    of their difference is below ``1e-6``.
    """

    x: float = 0.0
    y: float = 0.0

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def up(cls) -> Vector2:
        return cls(0.0, -1.0)

    @classmethod
    def down(cls) -> Vector2:
        return cls(0.0, 1.0)

    @classmethod
    def left(cls) -> Vector2:
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls) -> Vector2:
        return cls(1.0, 0.0)

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def identity(cls) -> Vector2:
        return cls(1.0, 1.0)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __pos__(self) -> Vector2:
        return Vector2(self.x, self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Scalar, Vector2]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> Vector2:
        if isinstance(other, (int, float)):
            return Vector2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other: Union[Scalar, Vector2]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self - other).sqr_magnitude() < _EPSILON

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("Out of Vector2 range")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def rotate(self, degrees: float) -> Vector2:
        """Return this vector rotated by ``degrees``."""
        sin = math.sin(degrees * _DEG2RAD)
        cos = math.cos(degrees * _DEG2RAD)
        return Vector2(cos * self.x - sin * self.y, sin * self.x + cos * self.y)

    def rotate_towards(self, up: Vector2) -> Vector2:
        """Rotate by the angle that ``up`` makes with the up direction."""
        return self.rotate(up.angle_degree())

    def angle_degree(self) -> float:
        return math.degrees(self.angle_radian())

    def angle_radian(self) -> float:
        return math.atan2(self.x, -self.y)

    @classmethod
    def random(cls, start: float, end: float) -> Vector2:
        return cls(range_float(start, end), range_float(start, end))

    @classmethod
    def from_radian(cls, radian: float) -> Vector2:
        return cls(math.cos(radian), math.sin(radian))

    @classmethod
    def from_degree(cls, degree: float) -> Vector2:
        return cls.from_radian(degree * (math.pi / 180))

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def distance(self, other: Vector2) -> float:
        return math.sqrt(self.distance_squared(other))

    def distance_squared(self, other: Vector2) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def normalized(self) -> Vector2:
        """Return a unit vector, or this vector unchanged if it has no length."""
        magnitude = self.magnitude()
        if magnitude > 0.0:
            return self / magnitude
        return Vector2(self.x, self.y)


@dataclass
class Vector3:
    """A plain 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0