"""Terminal set-up and keyboard input through curses."""

from __future__ import annotations

import curses
import enum
from contextlib import contextmanager
from typing import Any, Iterator

_ESCAPE = 27


class UserInput(enum.Enum):
    """What the player asked for during one frame."""

    EXIT = enum.auto()
    MAP_LEFT = enum.auto()
    MAP_RIGHT = enum.auto()
    MARIO_JUMP = enum.auto()
    NO_INPUT = enum.auto()


_KEYS = {
    ord("a"): UserInput.MAP_RIGHT,
    ord("d"): UserInput.MAP_LEFT,
    ord(" "): UserInput.MARIO_JUMP,
    _ESCAPE: UserInput.EXIT,
}


def key_to_input(key: int) -> UserInput:
    """Map a key code as returned by ``getch`` to a player action."""
    return _KEYS.get(key, UserInput.NO_INPUT)


def get_user_input(window: Any) -> UserInput:
    """Read one pending key from the window without waiting."""
    return key_to_input(window.getch())


def init_settings(window: Any) -> None:
    """Hide the cursor, stop echo, make reads non-blocking and disable scrolling."""
    try:
        curses.curs_set(0)
    except curses.error:
        # Some terminals cannot hide the cursor.
        pass
    curses.noecho()
    window.nodelay(True)
    window.scrollok(False)


def set_cursor_start_position(window: Any) -> None:
    window.move(0, 0)


@contextmanager
def terminal_session() -> Iterator[Any]:
    """Start curses for the game and restore the terminal afterwards."""
    window = curses.initscr()
    try:
        init_settings(window)
        yield window
    finally:
        curses.endwin()