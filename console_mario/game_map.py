"""The playing field and its text rendering."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Protocol

try:
    from curses import error as _CursesError
except ImportError:  # pragma: no cover - platforms without curses

    class _CursesError(Exception):
        """Placeholder for platforms where curses is unavailable."""


_AIR = " "
_WATER = "~"
_WATER_ROWS = 3


class _Drawable(Protocol):
    """An object that can be painted onto a console map."""

    @property
    def left(self) -> int: ...

    @property
    def right(self) -> int: ...

    @property
    def top(self) -> int: ...

    @property
    def bottom(self) -> int: ...

    @property
    def brush(self) -> str: ...


class _Window(Protocol):
    def addstr(self, text: str) -> object: ...

    def refresh(self) -> object: ...


class GameMap(ABC):
    """A rectangular playing field of fixed size."""

    def __init__(self, height: int, width: int) -> None:
        self.height = height
        self.width = width

    def is_below_map(self, y: int) -> bool:
        return y > self.height

    def is_on_map(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    @abstractmethod
    def clear(self) -> None:
        """Reset the field to its empty background."""

    @abstractmethod
    def refresh_map(self) -> None:
        """Paint every registered object onto the field."""

    @abstractmethod
    def remove_objs(self) -> None:
        """Forget every registered object."""


class ConsoleGameMap(GameMap):
    """A map drawn as rows of characters: air above, three rows of water below."""

    def __init__(self, height: int, width: int) -> None:
        super().__init__(height, width)
        self._objs: List[_Drawable] = []
        self._cells: List[List[str]] = []
        self.clear()

    def add_obj(self, obj: _Drawable) -> None:
        self._objs.append(obj)

    def clear(self) -> None:
        water_from = self.height - _WATER_ROWS
        self._cells = [
            [_WATER if row >= water_from else _AIR] * self.width
            for row in range(self.height)
        ]

    def refresh_map(self) -> None:
        for obj in self._objs:
            brush = obj.brush
            for x in range(obj.left, obj.right):
                for y in range(obj.top, obj.bottom):
                    if self.is_on_map(x, y):
                        self._cells[y][x] = brush

    def remove_obj(self, obj: _Drawable) -> None:
        self._objs[:] = [item for item in self._objs if item is not obj]

    def remove_objs(self) -> None:
        self._objs.clear()

    @property
    def objs(self) -> tuple:
        return tuple(self._objs)

    @property
    def rows(self) -> List[str]:
        """The current picture, one string per row."""
        return ["".join(row) for row in self._cells]

    def render(self) -> str:
        """The current picture as text, each row ended by a newline."""
        return "".join(f"{row}\n" for row in self.rows)

    def show(self, window: _Window) -> None:
        """Write the picture to a curses window and refresh it."""
        for row in self.rows:
            try:
                window.addstr(row)
                window.addstr("\n")
            except _CursesError:
                # Output past the window's edge is dropped, as curses does.
                pass
        window.refresh()