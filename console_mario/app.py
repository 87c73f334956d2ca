"""The game loop and the command that starts it."""

from __future__ import annotations

import argparse
import time
from typing import Any, Callable, Optional, Sequence

from .console_ui import ConsoleMario, ConsoleUIFactory
from .game import Game
from .levels import FirstLevel, GameLevel
from .terminal import (
    UserInput,
    get_user_input,
    set_cursor_start_position,
    terminal_session,
)

FRAME_DELAY = 0.04
PAUSE_DELAY = 1.0


class Session:
    """One play-through: the game, its levels and the per-frame steps."""

    def __init__(self, sleep: Optional[Callable[[float], Any]] = None) -> None:
        self._sleep = sleep if sleep is not None else time.sleep
        self.game = Game()
        self.ui_factory = ConsoleUIFactory(self.game)
        self.level: GameLevel = FirstLevel(self.ui_factory)

    @property
    def mario(self) -> ConsoleMario:
        mario = self.ui_factory.mario
        assert mario is not None
        return mario

    def handle_input(self, user_input: UserInput) -> None:
        """Apply one player action."""
        mario = self.mario
        match user_input:
            case UserInput.MAP_LEFT:
                # Probe the step first; scroll only if the player is not blocked.
                mario.move_map_left()
                if not self.game.check_static_collisions(mario):
                    self.game.move_map_left()
                mario.move_map_right()
            case UserInput.MAP_RIGHT:
                mario.move_map_right()
                if not self.game.check_static_collisions(mario):
                    self.game.move_map_right()
                mario.move_map_left()
            case UserInput.MARIO_JUMP:
                mario.jump()
            case UserInput.EXIT:
                self.game.finish()

    def update(self) -> None:
        """Advance the game's state by one frame."""
        game = self.game
        game.move_objs_horizontally()
        game.check_horizontally_static_collisions()

        game.move_objs_vertically()
        game.check_mario_collision()
        game.check_vertically_static_collisions()

        mario = self.mario
        if self.ui_factory.game_map.is_below_map(mario.top) or not mario.is_active:
            self.level.restart()
            self._sleep(PAUSE_DELAY)

        if game.is_level_end:
            if not self.level.is_final():
                next_level = self.level.get_next()
                assert next_level is not None
                self.level = next_level
                self._sleep(PAUSE_DELAY)
                game.start_level()
            else:
                game.finish()

    def draw(self, window: Any) -> None:
        """Paint the current frame onto the window."""
        game_map = self.ui_factory.game_map
        game_map.clear()
        game_map.refresh_map()
        set_cursor_start_position(window)
        game_map.show(window)

    @property
    def is_finished(self) -> bool:
        return self.game.is_finished


def run(window: Any) -> None:
    """Play the game on a prepared curses window until it is over."""
    session = Session()
    while True:
        session.handle_input(get_user_input(window))
        session.update()
        session.draw(window)
        time.sleep(FRAME_DELAY)
        if session.is_finished:
            break


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="console-mario",
        description="A side-scrolling platform game in the terminal. "
        "Keys: a/d scroll, space jumps, Esc quits.",
    )
    parser.parse_args(argv)
    with terminal_session() as window:
        run(window)
    return 0