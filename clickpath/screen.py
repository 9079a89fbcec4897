"""Off-screen character buffers used for double-buffered drawing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from clickpath.core import CursorType
from clickpath.vector2 import Vector2

_RESET = "\x1b[0m"

_CURSOR_SHAPES = {
    CursorType.NO_CURSOR: (1, False),
    CursorType.SOLID_CURSOR: (100, True),
    CursorType.NORMAL_CURSOR: (20, True),
}


@dataclass(frozen=True)
class Character:
    """One screen cell: a character and its colour attribute bits."""

    image: str = " "
    color: int = 0


class ScreenBuffer:
    """A width by height grid of characters plus cursor settings."""

    def __init__(self, size: Vector2) -> None:
        if size.x <= 0 or size.y <= 0:
            raise ValueError(f"screen size must be positive, got {size}")
        self.size = size
        self.cursor_size = 1
        self.cursor_visible = False
        self._cells = [Character() for _ in range(size.x * size.y)]

    @property
    def cells(self) -> tuple[Character, ...]:
        return tuple(self._cells)

    def set_cursor_type(self, cursor_type: CursorType) -> None:
        self.cursor_size, self.cursor_visible = _CURSOR_SHAPES[cursor_type]

    def clear(self) -> None:
        """Blank every character; colours are left as they are."""
        self._cells = [Character(" ", cell.color) for cell in self._cells]

    def draw(self, cells: Iterable[Character]) -> None:
        """Replace the whole grid with the given cells, row by row."""
        new_cells = list(cells)
        expected = self.size.x * self.size.y
        if len(new_cells) != expected:
            raise ValueError(
                f"expected {expected} cells, got {len(new_cells)}"
            )
        self._cells = new_cells

    def text(self) -> str:
        """The grid as plain text, one line per row."""
        return "\n".join("".join(cell.image for cell in row) for row in self._rows())

    def _rows(self) -> Iterator[Sequence[Character]]:
        width = self.size.x
        for start in range(0, len(self._cells), width):
            yield self._cells[start:start + width]

    def _ansi(self) -> str:
        """The grid as text with terminal colour escapes."""
        lines = []
        for row in self._rows():
            parts = []
            current = None
            for cell in row:
                if cell.color != current:
                    parts.append(_ansi_code(cell.color))
                    current = cell.color
                parts.append(cell.image)
            parts.append(_RESET)
            lines.append("".join(parts))
        return "\n".join(lines)


def _ansi_code(attribute: int) -> str:
    if attribute == 0:
        return _RESET
    foreground = attribute & 0x7
    index = (
        (1 if foreground & 0x4 else 0)
        | (2 if foreground & 0x2 else 0)
        | (4 if foreground & 0x1 else 0)
    )
    base = 90 if attribute & 0x8 else 30
    return f"\x1b[{base + index}m"