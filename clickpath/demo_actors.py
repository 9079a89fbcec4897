"""Actors of the path-finding demo: walls, the player and the start marker."""

from __future__ import annotations

from typing import TYPE_CHECKING

from clickpath.actor import DrawableActor
from clickpath.core import Color, Key
from clickpath.engine import Engine
from clickpath.vector2 import Vector2

if TYPE_CHECKING:
    from clickpath.demo_level import DemoLevel


def _mouse_on_screen(engine: Engine) -> bool:
    mouse = engine.mouse_position()
    size = engine.screen_size()
    return not (mouse.x < 0 or mouse.x > size.x or mouse.y < 0 or mouse.y > size.y)


class Wall(DrawableActor):
    """An obstacle cell drawn as '#'."""

    def __init__(self, x: int, y: int, color: Color) -> None:
        super().__init__("#", color)
        self.position = Vector2(x, y)


class Player(DrawableActor):
    """The goal marker; a right click moves it and starts a path search."""

    def __init__(self, level: DemoLevel) -> None:
        super().__init__("e", Color.GREEN)
        self.position = Vector2(0, 0)
        self._level = level

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        engine = Engine.get()

        if engine.get_key_down(Key.ESCAPE):
            engine.quit_game()

        if engine.get_key_down(Key.RBUTTON) and _mouse_on_screen(engine):
            self.position = engine.mouse_position()
            self._level.set_end(self.position)
            self._level.draw_path()


class Start(DrawableActor):
    """The start marker; a left click moves it and resets the search."""

    def __init__(self, level: DemoLevel) -> None:
        super().__init__("s", Color.RED)
        self._level = level

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        engine = Engine.get()

        if engine.get_key_down(Key.LBUTTON) and _mouse_on_screen(engine):
            self.position = engine.mouse_position()
            self._level.set_start(self.position)
            self._level.clear_data()
            self._level.print_check = 0