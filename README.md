# clickpath

A small frame-based terminal game engine, and a demo that uses it to show
A* path finding on a 40 × 25 character grid.

The engine holds one level of actors, updates and draws them once per
frame at a target frame rate (60 frames per second by default), keeps the
state of keys and mouse buttons between frames, and composes each frame
into a grid of coloured character cells that it writes to the terminal
with ANSI escape sequences.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demo

```
clickpath
```

Options:

- `--frames N` — stop after N frames (the default, 0, runs until quit).

The screen is framed by a blue wall. In the demo:

- **Left click** places the start marker `s` and clears the previous search.
- **Right click** moves the player `e` to the clicked cell, takes it as the
  goal and runs A* from the start to it. The player then steps along the
  found path every 0.15 seconds, while the cells the search examined but
  did not use are revealed as grey `@`, one every 0.01 seconds.
- **Enter** places a red wall under the mouse cursor, or removes the one
  already there. These walls are the obstacles the search avoids.
- **Escape** quits.

The bottom line shows `Waiting for a path`, `A* search succeeded` or
`A* search failed`. Moves are eight-directional: straight steps cost 1 and
diagonal steps 1.414, with straight-line distance to the goal as the
heuristic.

To start the bare engine with no level loaded:

```
clickpath-engine
```

It takes `--fps RATE` (target frame rate, default 60) and `--frames N`
(stop after N frames, default 0 for never).

## Using the engine

The building blocks live in these modules:

- `clickpath.core` — `Color`, `CursorType` and `Key` (virtual key codes),
  plus `random_int`, `random_percent` and `log`.
- `clickpath.vector2` — `Vector2`, an immutable integer 2-D position.
- `clickpath.timer` — `Timer`, which counts elapsed time toward a limit.
- `clickpath.actor` — `Actor` and `DrawableActor`, the objects placed in a
  level.
- `clickpath.level` — `Level`, which holds actors and applies additions and
  removals between frames (`process_added_and_destroyed_actors`).
- `clickpath.screen` — `Character` and `ScreenBuffer`, the cell grid a frame
  is drawn to.
- `clickpath.engine` — `Engine` and `KeyState`: the frame loop, input state
  and drawing. `Engine.get()` returns the engine created most recently.
- `clickpath.astar` — `Node` and `AStar`, the path search. `AStar` takes an
  optional grid size; without one it uses the current engine's screen size.
  `find_path` takes a wall grid indexed `walls[x][y]`, where 1 marks a
  blocked cell, and returns the nodes from start to goal, or an empty list.
- `clickpath.demo_actors` — `Wall`, `Player` and `Start`.
- `clickpath.demo_level` — `DemoLevel` and the `clickpath` command.

Input can be fed to an `Engine` directly with `feed_key` and `feed_mouse`,
a frame advanced with `update`, `render` and `save_previous_key_states`,
and `frame_text` returns the frame last shown as plain text. This makes
levels easy to drive from tests:

```python
from clickpath.engine import Engine
from clickpath.demo_level import DemoLevel

engine = Engine()
level = DemoLevel()
engine.load_level(level)
level.process_added_and_destroyed_actors()
engine.render()
print(engine.frame_text())
```

## Limits

- Keyboard and mouse input in the demo needs a POSIX terminal that supports
  SGR mouse reporting; it is read through `termios`. When standard input is
  not a terminal, the demo still draws frames but receives no input.
- Only Enter, Escape and the left and right mouse buttons are read from the
  terminal; other keys are ignored.
- The border wall is drawn but is not part of the obstacle grid, so the
  search may route along the border cells.
- There is no saving or loading of obstacle layouts.