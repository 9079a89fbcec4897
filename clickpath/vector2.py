"""Integer 2D vector used for screen positions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """An immutable integer position on the screen grid."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)