"""Position, scale and rotation of a 2D object."""

from __future__ import annotations

from dataclasses import dataclass, field

from mobagen.vector2 import Vector2


@dataclass
class Transform:
    """Where an object sits; ``rotation`` is the vector that points up."""

    position: Vector2 = field(default_factory=Vector2.zero)
    scale: Vector2 = field(default_factory=Vector2.identity)
    rotation: Vector2 = field(default_factory=Vector2.zero)