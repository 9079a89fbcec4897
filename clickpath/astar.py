"""A* path search over the screen grid, with diagonal moves."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, NamedTuple, Optional

from clickpath.vector2 import Vector2


class _Direction(NamedTuple):
    dx: int
    dy: int
    cost: float


_DIAGONAL_COST = 1.414

# Down, up, right, left, then the four diagonals.
_DIRECTIONS = (
    _Direction(0, 1, 1.0),
    _Direction(0, -1, 1.0),
    _Direction(1, 0, 1.0),
    _Direction(-1, 0, 1.0),
    _Direction(1, 1, _DIAGONAL_COST),
    _Direction(1, -1, _DIAGONAL_COST),
    _Direction(-1, 1, _DIAGONAL_COST),
    _Direction(-1, -1, _DIAGONAL_COST),
)


class Node:
    """A grid cell visited by the search, linked to the cell it came from."""

    def __init__(self, position: Vector2, parent: Optional[Node] = None) -> None:
        self.position = position
        self.parent = parent
        self.g_cost = 0.0
        self.h_cost = 0.0
        self.f_cost = 0.0

    def __sub__(self, other: Node) -> Vector2:
        return self.position - other.position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.position == other.position

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Node({self.position.x}, {self.position.y}, f={self.f_cost:.3f})"


class AStar:
    """Finds a path between two nodes, avoiding cells marked 1 in a wall grid.

    The grid bounds are ``size`` when given, otherwise the running engine's
    screen size.
    """

    def __init__(self, size: Optional[Vector2] = None) -> None:
        self._size = size
        self.open_list: list[Node] = []
        self.closed_list: list[Node] = []
        self.start_node: Optional[Node] = None
        self.goal_node: Optional[Node] = None

    def find_path(
        self,
        start_node: Node,
        goal_node: Node,
        level: Any,
        walls: Sequence[Sequence[int]],
    ) -> list[Node]:
        """Return the nodes from start to goal, or an empty list if none.

        Every node closed during the search is also appended to
        ``level.closed_list`` when a level is given. ``walls`` is indexed
        ``walls[x][y]``.
        """
        self.open_list = [start_node]
        self.closed_list = []
        self.start_node = start_node
        self.goal_node = goal_node
        size = self._grid_size()

        while self.open_list:
            current = min(self.open_list, key=lambda node: node.f_cost)

            if current == goal_node:
                return self._construct_path(current)

            self.open_list.remove(current)

            if current in self.closed_list:
                continue

            self.closed_list.append(current)
            if level is not None:
                level.closed_list.append(current)

            for direction in _DIRECTIONS:
                x = current.position.x + direction.dx
                y = current.position.y + direction.dy

                if not (0 <= x < size.x and 0 <= y < size.y):
                    continue
                if walls[x][y] == 1:
                    continue

                neighbor = Node(Vector2(x, y), current)
                neighbor.g_cost = current.g_cost + direction.cost
                neighbor.h_cost = self._heuristic(neighbor, goal_node)
                neighbor.f_cost = neighbor.g_cost + neighbor.h_cost

                existing = next(
                    (node for node in self.open_list if node == neighbor), None
                )
                if (
                    existing is None
                    or neighbor.g_cost < existing.g_cost
                    or neighbor.f_cost < existing.f_cost
                ):
                    self.open_list.append(neighbor)

        return []

    def _grid_size(self) -> Vector2:
        if self._size is not None:
            return self._size
        from clickpath.engine import Engine

        return Engine.get().screen_size()

    @staticmethod
    def _construct_path(goal_node: Node) -> list[Node]:
        path = []
        node: Optional[Node] = goal_node
        while node is not None:
            path.append(node)
            node = node.parent
        path.reverse()
        return path

    @staticmethod
    def _heuristic(node: Node, goal_node: Node) -> float:
        diff = node - goal_node
        return math.hypot(diff.x, diff.y)