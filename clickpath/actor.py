"""Objects that live in a level and take part in the game loop."""

from __future__ import annotations

from clickpath.core import Color
from clickpath.vector2 import Vector2


class Actor:
    """Base object of a level: a position plus active and expired flags."""

    def __init__(self) -> None:
        self.position = Vector2()
        self._active = True
        self._expired = False

    def update(self, delta_time: float) -> None:
        """Advance the actor by one frame."""

    def draw(self) -> None:
        """Render the actor."""

    def set_position(self, new_position: Vector2) -> None:
        self.position = new_position

    def is_active(self) -> bool:
        return self._active and not self._expired

    def set_active(self, active: bool) -> None:
        self._active = active

    def destroy(self) -> None:
        """Mark the actor for removal at the end of the frame."""
        self._expired = True

    @property
    def expired(self) -> bool:
        return self._expired


class DrawableActor(Actor):
    """An actor drawn as a string of characters in one colour."""

    def __init__(self, image: str = "", color: Color = Color.WHITE) -> None:
        super().__init__()
        self.image = image
        self.color = color

    def draw(self) -> None:
        from clickpath.engine import Engine

        super().draw()
        Engine.get().draw(self.position, self.image, self.color)

    def width(self) -> int:
        return len(self.image)

    def intersect(self, other: DrawableActor) -> bool:
        """Axis-aligned overlap test on one row."""
        low = self.position.x
        high = self.position.x + self.width()
        other_low = other.position.x
        other_high = other.position.x + other.width()

        if other_low > high:
            return False
        if other_high < low:
            return False
        return self.position.y == other.position.y