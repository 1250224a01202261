"""A two dimensional buffer of character cells with change tracking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, NamedTuple

from wcwidth import wcwidth

# The zero character; as the last drawn character it marks a cell dirty.
_NUL = "\x00"


def _rune_width(ch: str) -> int:
    """Display width of a character in cells: 0, 1 or 2."""
    return max(wcwidth(ch), 0)


class CellContent(NamedTuple):
    """What a cell holds: main character, combining characters, style, width."""

    mainc: str
    combc: tuple[str, ...]
    style: Any
    width: int


@dataclass(slots=True)
class _Cell:
    curr_main: str = _NUL
    curr_comb: tuple[str, ...] = ()
    curr_style: Any = None
    last_main: str = _NUL
    last_comb: tuple[str, ...] = ()
    last_style: Any = None
    width: int = 0
    lock: bool = False


class CellBuffer:
    """A grid of character cells, as kept by screen implementations.

    Each cell remembers what was last drawn, so that only cells whose
    content changed need to be redrawn.  Coordinates outside the buffer
    are ignored.  Not thread safe.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._w = 0
        self._h = 0
        self._cells: list[_Cell] = []
        self.resize(width, height)

    def _cell(self, x: int, y: int) -> _Cell | None:
        if 0 <= x < self._w and 0 <= y < self._h:
            return self._cells[y * self._w + x]
        return None

    def set_content(
        self,
        x: int,
        y: int,
        mainc: str,
        combc: Iterable[str] | None = None,
        style: Any = None,
    ) -> None:
        """Set the main character, combining characters and style of a cell."""
        cell = self._cell(x, y)
        if cell is None:
            return
        for dx in range(1, cell.width):
            self.set_dirty(x + dx, y, True)
        cell.curr_comb = tuple(combc) if combc else ()
        if cell.curr_main != mainc:
            cell.width = _rune_width(mainc)
        cell.curr_main = mainc
        cell.curr_style = style

    def get_content(self, x: int, y: int) -> CellContent:
        """The content of a cell.

        Empty cells and control characters read as a single-width space.
        Outside the buffer, the result is ``("\\x00", (), None, 0)``.
        """
        cell = self._cell(x, y)
        if cell is None:
            return CellContent(_NUL, (), None, 0)
        mainc, width = cell.curr_main, cell.width
        if width == 0 or mainc < " ":
            mainc, width = " ", 1
        return CellContent(mainc, cell.curr_comb, cell.curr_style, width)

    def size(self) -> tuple[int, int]:
        """The buffer size as ``(width, height)`` in cells."""
        return self._w, self._h

    def invalidate(self) -> None:
        """Mark every cell dirty."""
        for cell in self._cells:
            cell.last_main = _NUL

    def dirty(self, x: int, y: int) -> bool:
        """Whether a cell changed since it was last marked clean.

        Locked cells and cells outside the buffer are never dirty.
        """
        cell = self._cell(x, y)
        if cell is None or cell.lock:
            return False
        return (
            cell.last_main == _NUL
            or cell.last_main != cell.curr_main
            or cell.last_style != cell.curr_style
            or cell.last_comb != cell.curr_comb
        )

    def set_dirty(self, x: int, y: int, dirty: bool) -> None:
        """Force a cell dirty, or mark it as displayed when *dirty* is false."""
        cell = self._cell(x, y)
        if cell is None:
            return
        if dirty:
            cell.last_main = _NUL
            return
        if cell.curr_main == _NUL:
            cell.curr_main = " "
        cell.last_main = cell.curr_main
        cell.last_comb = cell.curr_comb
        cell.last_style = cell.curr_style

    def lock_cell(self, x: int, y: int) -> None:
        """Keep a cell from being drawn until it is unlocked."""
        cell = self._cell(x, y)
        if cell is not None:
            cell.lock = True

    def unlock_cell(self, x: int, y: int) -> None:
        """Remove a cell's lock and mark it dirty."""
        cell = self._cell(x, y)
        if cell is None:
            return
        cell.lock = False
        self.set_dirty(x, y, True)

    def resize(self, w: int, h: int) -> None:
        """Change the dimensions, keeping the contents that still fit.

        All cells are left dirty so they will be redrawn.
        """
        if w == self._w and h == self._h:
            return
        if w < 0 or h < 0:
            raise ValueError(f"invalid buffer size {w}x{h}")
        cells = [_Cell() for _ in range(w * h)]
        for y in range(min(h, self._h)):
            for x in range(min(w, self._w)):
                old = self._cells[y * self._w + x]
                cells[y * w + x] = _Cell(
                    curr_main=old.curr_main,
                    curr_comb=old.curr_comb,
                    curr_style=old.curr_style,
                    width=old.width,
                )
        self._cells = cells
        self._w = w
        self._h = h

    def fill(self, r: str, style: Any = None) -> None:
        """Fill every cell with a single-width character and style."""
        for cell in self._cells:
            cell.curr_main = r
            cell.curr_comb = ()
            cell.curr_style = style
            cell.width = 1