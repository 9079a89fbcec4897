"""The game engine: frame loop, input state, drawing and level hosting."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Optional, TextIO

from clickpath.core import Color, CursorType, Key
from clickpath.screen import Character, ScreenBuffer
from clickpath.vector2 import Vector2

if TYPE_CHECKING:
    from clickpath.actor import Actor
    from clickpath.level import Level

_KEY_COUNT = 255


@dataclass
class KeyState:
    """Whether a key is down now and whether it was down last frame."""

    is_key_down: bool = False
    was_key_down: bool = False


class Engine:
    """Runs the game loop for one level; the last engine created is global."""

    _instance: ClassVar[Optional[Engine]] = None

    def __init__(
        self,
        screen_size: Vector2 = Vector2(40, 25),
        *,
        output: Optional[TextIO] = None,
        input_source: Optional[Callable[[Engine], None]] = None,
    ) -> None:
        self._quit = False
        self.main_level: Optional[Level] = None
        self._screen_size = screen_size
        self._output = output
        self._input_source = input_source
        self._key_states = [KeyState() for _ in range(_KEY_COUNT)]
        self._mouse_position = Vector2()

        Engine._instance = self

        self.target_frame_rate = 60.0
        self._frame_time = 1.0 / 60.0
        self.set_target_frame_rate(60.0)

        self._image_buffer: list[Character] = []
        self._clear_image_buffer()

        self._render_targets = (ScreenBuffer(screen_size), ScreenBuffer(screen_size))
        self._current_target = 0
        self._present()

    @staticmethod
    def get() -> Engine:
        """Return the engine created most recently."""
        if Engine._instance is None:
            raise RuntimeError("no engine has been created")
        return Engine._instance

    @property
    def should_quit(self) -> bool:
        return self._quit

    def run(self) -> None:
        """Run frames at the target rate until the game is quit."""
        previous = time.perf_counter()
        try:
            while not self._quit:
                current = time.perf_counter()
                delta_time = current - previous
                if delta_time < self._frame_time:
                    time.sleep(self._frame_time - delta_time)
                    continue

                self._process_input()
                self.update(delta_time)
                self.render()
                self.save_previous_key_states()
                previous = current

                if self.main_level is not None:
                    self.main_level.process_added_and_destroyed_actors()
        except KeyboardInterrupt:
            self.quit_game()

    def load_level(self, new_level: Level) -> None:
        self.main_level = new_level

    def add_actor(self, new_actor: Actor) -> None:
        if self.main_level is None:
            return
        self.main_level.add_actor(new_actor)

    def destroy_actor(self, target_actor: Actor) -> None:
        if self.main_level is None:
            return
        target_actor.destroy()

    def set_cursor_type(self, cursor_type: CursorType) -> None:
        self._renderer().set_cursor_type(cursor_type)

    def draw(self, position: Vector2, image: str, color: Color = Color.WHITE) -> None:
        """Write text into the frame; it runs on into the next row if long."""
        start = position.y * self._screen_size.x + position.x
        for offset, char in enumerate(image):
            index = start + offset
            if 0 <= index < len(self._image_buffer):
                self._image_buffer[index] = Character(char, int(color))

    def screen_size(self) -> Vector2:
        return self._screen_size

    def set_target_frame_rate(self, target_frame_rate: float) -> None:
        if target_frame_rate <= 0:
            raise ValueError("target frame rate must be positive")
        self.target_frame_rate = target_frame_rate
        self._frame_time = 1.0 / target_frame_rate

    def get_key(self, key: int) -> bool:
        return self._key_state(key).is_key_down

    def get_key_down(self, key: int) -> bool:
        state = self._key_state(key)
        return state.is_key_down and not state.was_key_down

    def get_key_up(self, key: int) -> bool:
        state = self._key_state(key)
        return not state.is_key_down and state.was_key_down

    def mouse_position(self) -> Vector2:
        return self._mouse_position

    def quit_game(self) -> None:
        self._quit = True

    def feed_key(self, key: int, pressed: bool) -> None:
        """Record a key press or release event."""
        self._key_state(key).is_key_down = pressed

    def feed_mouse(self, x: int, y: int, left: bool, right: bool) -> None:
        """Record a mouse event: cursor cell and button states."""
        self._mouse_position = Vector2(x, y)
        self._key_states[Key.LBUTTON].is_key_down = left
        self._key_states[Key.RBUTTON].is_key_down = right

    def save_previous_key_states(self) -> None:
        for state in self._key_states:
            state.was_key_down = state.is_key_down

    def update(self, delta_time: float) -> None:
        if self.main_level is not None:
            self.main_level.update(delta_time)

    def render(self) -> None:
        """Draw the level into the back buffer and show it."""
        self._clear_image_buffer()
        if self.main_level is not None:
            self.main_level.draw()
        self._renderer().draw(self._image_buffer)
        self._present()

    def frame_text(self) -> str:
        """Plain text of the frame currently shown."""
        return self._render_targets[1 - self._current_target].text()

    def _key_state(self, key: int) -> KeyState:
        if not 0 <= key < _KEY_COUNT:
            raise IndexError(f"key code out of range: {key}")
        return self._key_states[key]

    def _renderer(self) -> ScreenBuffer:
        return self._render_targets[self._current_target]

    def _process_input(self) -> None:
        if self._input_source is not None:
            self._input_source(self)

    def _present(self) -> None:
        front = self._renderer()
        if self._output is not None:
            cursor = "\x1b[?25h" if front.cursor_visible else "\x1b[?25l"
            self._output.write(cursor + "\x1b[H" + front._ansi())
            self._output.flush()
        self._current_target = 1 - self._current_target

    def _clear_image_buffer(self) -> None:
        count = self._screen_size.x * self._screen_size.y
        self._image_buffer = [Character() for _ in range(count)]


def main(argv: Optional[list[str]] = None) -> int:
    """Run an empty engine in the terminal."""
    parser = argparse.ArgumentParser(description="Run the console engine.")
    parser.add_argument("--fps", type=float, default=60.0, help="target frame rate")
    parser.add_argument(
        "--frames", type=int, default=0, help="stop after this many frames (0: never)"
    )
    args = parser.parse_args(argv)

    frames_seen = 0

    def _count_frames(engine: Engine) -> None:
        nonlocal frames_seen
        frames_seen += 1
        if args.frames and frames_seen > args.frames:
            engine.quit_game()

    engine = Engine(output=sys.stdout, input_source=_count_frames)
    engine.set_target_frame_rate(args.fps)
    engine.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())