"""Simple polygon shapes placed through a transform."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from mobagen.transform import Transform
from mobagen.vector2 import Vector2

Edge = Tuple[Tuple[int, int], Tuple[int, int]]


class Polygon:
    """A closed polygon given by its points in local space."""

    def __init__(self, points: Optional[Iterable[Vector2]] = None) -> None:
        self.points: List[Vector2] = list(points) if points is not None else []

    def drawable_points(self, transform: Transform) -> List[Vector2]:
        """Return the points scaled, rotated and moved by ``transform``."""
        angle = transform.rotation.angle_degree()
        return [
            Vector2(transform.scale.x * p.x, transform.scale.y * p.y).rotate(angle) + transform.position
            for p in self.points
        ]

    def edges(self, transform: Transform) -> List[Edge]:
        """Return the closed outline as integer line segments."""
        pts = self.drawable_points(transform)
        return [
            ((int(a.x), int(a.y)), (int(b.x), int(b.y)))
            for a, b in zip(pts, pts[1:] + pts[:1])
        ]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.points!r})"


class Circle(Polygon):
    """A unit circle approximated by ``sample`` points."""

    def __init__(self, sample: int) -> None:
        super().__init__(Vector2.up().rotate(360.0 * i / sample) for i in range(sample))


class Square(Polygon):
    """A square with unit distance from centre to corners."""

    def __init__(self) -> None:
        super().__init__(Vector2.up().rotate(angle) for angle in (45, 135, 225, 315))


class Hexagon(Polygon):
    """A regular hexagon with a corner pointing up."""

    def __init__(self) -> None:
        super().__init__(Vector2.up().rotate(angle) for angle in range(0, 360, 60))