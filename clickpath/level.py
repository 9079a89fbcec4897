"""A level: the collection of actors that the engine updates and draws."""

from __future__ import annotations

from clickpath.actor import Actor


class Level:
    """Holds actors; additions and removals take effect between frames."""

    def __init__(self) -> None:
        self.actors: list[Actor] = []
        self._added: list[Actor] = []

    def add_actor(self, new_actor: Actor) -> None:
        """Queue an actor to join the level at the end of the frame."""
        self._added.append(new_actor)

    def process_added_and_destroyed_actors(self) -> None:
        """Drop expired actors, then bring in the queued ones."""
        self.actors = [actor for actor in self.actors if not actor.expired]
        if self._added:
            self.actors.extend(self._added)
            self._added.clear()

    def update(self, delta_time: float) -> None:
        for actor in self.actors:
            if actor.is_active():
                actor.update(delta_time)

    def draw(self) -> None:
        for actor in self.actors:
            if actor.is_active():
                actor.draw()