"""The click-to-path demo level and the command that runs it."""

from __future__ import annotations

import argparse
import contextlib
import os
import re
import select
import sys
from collections import deque
from typing import Optional, TextIO

from clickpath.astar import AStar, Node
from clickpath.core import Color, Key
from clickpath.demo_actors import Player, Start, Wall
from clickpath.engine import Engine
from clickpath.level import Level
from clickpath.timer import Timer
from clickpath.vector2 import Vector2

STATUS_MESSAGES = {
    0: "Waiting for a path",
    1: "A* search succeeded",
    -1: "A* search failed",
}

_MOVE_INTERVAL = 0.15
_REVEAL_INTERVAL = 0.01
_ORIGIN = Vector2(0, 0)


class DemoLevel(Level):
    """Click to place start and goal, press Enter to toggle obstacles."""

    def __init__(self) -> None:
        super().__init__()
        size = Engine.get().screen_size()
        self.walls = [[0] * size.y for _ in range(size.x)]
        self.ways: deque[Vector2] = deque()
        self.closed_ways: deque[Vector2] = deque()
        self.show_closed_ways: list[Vector2] = []
        self.closed_list: list[Node] = []
        self.path: list[Node] = []
        self.start_xy = Vector2()
        self.end_xy = Vector2()
        self.start_vector = Vector2()
        self.end_vector = Vector2()
        self.print_check = 0
        self.astar = AStar()
        self._move_timer = Timer(_MOVE_INTERVAL)
        self._reveal_timer = Timer(_REVEAL_INTERVAL)

        self.player = Player(self)
        self.add_actor(self.player)
        self.add_actor(Start(self))
        self.create_wall()

    def create_wall(self) -> None:
        """Surround the screen with a border of walls."""
        size = Engine.get().screen_size()
        for y in range(1, size.y - 1):
            self.add_actor(Wall(0, y, Color.BLUE))
            self.add_actor(Wall(size.x - 1, y, Color.BLUE))
        for x in range(size.x):
            self.add_actor(Wall(x, 0, Color.BLUE))
            self.add_actor(Wall(x, size.y - 1, Color.BLUE))

    def set_start(self, position: Vector2) -> None:
        self.start_xy = position

    def set_end(self, position: Vector2) -> None:
        self.end_xy = position

    def go_through_path(self, delta_time: float) -> None:
        """Step the player one cell along the path every interval."""
        self._move_timer.update(delta_time)
        if not self._move_timer.is_time_out():
            return
        self._move_timer.reset()
        if self.ways:
            self.player.set_position(self.ways.popleft())

    def show_closed_path(self, delta_time: float) -> None:
        """Reveal one more searched cell every interval."""
        self._reveal_timer.update(delta_time)
        if not self._reveal_timer.is_time_out():
            return
        self._reveal_timer.reset()
        if self.closed_ways:
            self.show_closed_ways.append(self.closed_ways.popleft())

    def clear_data(self) -> None:
        self.ways.clear()
        self.closed_ways.clear()
        self.show_closed_ways.clear()
        self.closed_list.clear()

    def draw_path(self) -> None:
        """Search from start to end and queue the steps and searched cells."""
        self.clear_data()

        self.start_vector = self.start_xy
        self.end_vector = self.end_xy
        start_node = Node(self.start_vector)
        end_node = Node(self.end_vector)

        self.print_check = -1
        self.path = self.astar.find_path(start_node, end_node, self, self.walls)
        if self.path:
            self.print_check = 1
        self.ways.extend(node.position for node in self.path)
        if self.ways:
            self.ways.popleft()

        path_positions = {node.position for node in self.path}
        for node in self.closed_list:
            position = node.position
            if self._is_marker(position) or position in path_positions:
                continue
            self.closed_ways.append(position)

    def draw(self) -> None:
        super().draw()
        engine = Engine.get()

        path_positions = {node.position for node in self.path}
        for node in self.closed_list:
            position = node.position
            if self._is_marker(position):
                continue
            if position in path_positions and position != self.player.position:
                engine.draw(position, "@", Color.SKY)

        for position in self.show_closed_ways:
            engine.draw(position, "@", Color.GRAY)

        message = STATUS_MESSAGES.get(self.print_check)
        if message is not None:
            engine.draw(Vector2(0, engine.screen_size().y - 1), message)

    def create_obstacle(self) -> None:
        """Toggle an obstacle under the mouse when Enter is pressed."""
        engine = Engine.get()
        mouse = engine.mouse_position()
        size = engine.screen_size()
        x, y = mouse.x, mouse.y

        if not engine.get_key_down(Key.RETURN):
            return
        if x < 1 or x > size.x - 2 or y < 1 or y > size.y - 2:
            return

        if self.walls[x][y] == 1:
            for actor in self.actors:
                if actor.position.x == x and actor.position.y == y:
                    actor.destroy()
                    self.walls[x][y] = 0
        else:
            self.add_actor(Wall(x, y, Color.RED))
            self.walls[x][y] = 1

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self.go_through_path(delta_time)
        self.show_closed_path(delta_time)
        self.create_obstacle()

    def _is_marker(self, position: Vector2) -> bool:
        return position in (self.start_vector, self.end_vector, _ORIGIN)


_EVENT = re.compile(r"\x1b\[<(\d+);(\d+);(\d+)([Mm])|\x1b|[\r\n]|.", re.DOTALL)
_MOUSE_ON = "\x1b[2J\x1b[?1003h\x1b[?1006h"
_MOUSE_OFF = "\x1b[?1003l\x1b[?1006l\x1b[?25h\x1b[0m\n"


class _TerminalInput:
    """Feeds keys and mouse events from a terminal into the engine."""

    def __init__(self, stream: TextIO, output: TextIO) -> None:
        self._fd = stream.fileno()
        self._output = output
        self._saved: Optional[list] = None
        self._pressed: list[Key] = []
        self._left = False
        self._right = False

    def __enter__(self) -> _TerminalInput:
        import termios
        import tty

        self._saved = termios.tcgetattr(self._fd)
        tty.setcbreak(self._fd)
        self._output.write(_MOUSE_ON)
        self._output.flush()
        return self

    def __exit__(self, *exc_info: object) -> None:
        import termios

        self._output.write(_MOUSE_OFF)
        self._output.flush()
        if self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)

    def __call__(self, engine: Engine) -> None:
        for key in self._pressed:
            engine.feed_key(key, False)
        self._pressed.clear()

        for match in _EVENT.finditer(self._read()):
            if match.group(1) is not None:
                self._mouse_event(engine, match)
            elif match.group(0) == "\x1b":
                self._press(engine, Key.ESCAPE)
            elif match.group(0) in "\r\n":
                self._press(engine, Key.RETURN)

    def _press(self, engine: Engine, key: Key) -> None:
        engine.feed_key(key, True)
        self._pressed.append(key)

    def _mouse_event(self, engine: Engine, match: re.Match) -> None:
        code = int(match.group(1))
        x = int(match.group(2)) - 1
        y = int(match.group(3)) - 1
        if not code & 32:
            down = match.group(4) == "M"
            button = code & 3
            if button == 0:
                self._left = down
            elif button == 2:
                self._right = down
        engine.feed_mouse(x, y, self._left, self._right)

    def _read(self) -> str:
        chunks = []
        while select.select([self._fd], [], [], 0)[0]:
            data = os.read(self._fd, 1024)
            if not data:
                break
            chunks.append(data)
        return b"".join(chunks).decode("utf-8", "replace")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the path-finding demo in the terminal."""
    parser = argparse.ArgumentParser(description="Click-to-path A* demo.")
    parser.add_argument(
        "--frames", type=int, default=0, help="stop after this many frames (0: never)"
    )
    args = parser.parse_args(argv)

    terminal = (
        _TerminalInput(sys.stdin, sys.stdout) if sys.stdin.isatty() else None
    )
    frames_seen = 0

    def _input(engine: Engine) -> None:
        nonlocal frames_seen
        frames_seen += 1
        if args.frames and frames_seen > args.frames:
            engine.quit_game()
            return
        if terminal is not None:
            terminal(engine)

    with terminal if terminal is not None else contextlib.nullcontext():
        engine = Engine(output=sys.stdout, input_source=_input)
        engine.load_level(DemoLevel())
        engine.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())