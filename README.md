# console-mario

A small side-scrolling platformer that runs in a terminal. Guide `@` across
ships (`#`) and boxes (`-`), knock coins (`$`) out of question boxes (`?`) by
jumping into them from below, and stomp enemies (`e`) by falling onto them.
Dropping off the bottom of the map or running into an enemy any other way
restarts the level. Touching the last platform of a level moves on to the
next one; finishing the second level ends the game.

## Installation

```
pip install .
```

The game draws with the standard `curses` module, so it needs a system where
`curses` is available (Linux, macOS and other POSIX systems). The map is 200
columns wide and 30 lines tall; a smaller terminal shows only part of it.

## Playing

```
console-mario
```

| Key     | Action                                   |
|---------|------------------------------------------|
| `a`     | walk left (the map scrolls right)        |
| `d`     | walk right (the map scrolls left)        |
| `Space` | jump (only while not already in the air) |
| `Esc`   | quit                                     |

The command takes no options besides `--help`. The game runs at about 25
frames a second and pauses for a second when a level restarts or changes.

## Using the pieces

The game logic does not need a terminal:

- `console_mario.geometry` – `Coord`, `Speed`, `Rect` and the `Movable`,
  `MapMovable` and `Collisionable` behaviours.
- `console_mario.objects` – `Box`, `Ship`, `Enemy`, `FullBox`, `Mario`,
  `Money`.
- `console_mario.game` – `Game`, which holds a level's objects, moves them and
  resolves collisions.
- `console_mario.game_map` – `GameMap` and `ConsoleGameMap`, which paints
  objects into rows of characters (`rows`, `render()`) or onto a curses window
  (`show(window)`).
- `console_mario.console_ui` – `ConsoleUIFactory`, which builds the console
  objects and registers them with a `Game` and its map.
- `console_mario.levels` – `FirstLevel` and `SecondLevel`.
- `console_mario.terminal` – `UserInput`, `key_to_input()`, and the curses
  helpers `get_user_input()`, `init_settings()`, `set_cursor_start_position()`
  and the `terminal_session()` context manager.
- `console_mario.app` – `Session`, one play-through stepped frame by frame,
  plus `run(window)` and `main()`.

Render the first level as text:

```python
from console_mario.console_ui import ConsoleUIFactory
from console_mario.game import Game
from console_mario.levels import FirstLevel

game = Game()
factory = ConsoleUIFactory(game)
level = FirstLevel(factory)

game_map = factory.game_map
game_map.clear()
game_map.refresh_map()
print(game_map.render())
```

Step a session without a terminal; `sleep` replaces the pauses between
levels:

```python
from console_mario.app import Session
from console_mario.terminal import UserInput

session = Session(sleep=lambda seconds: None)
session.handle_input(UserInput.MARIO_JUMP)
for _ in range(10):
    session.update()
print(session.mario.top, session.is_finished)
```

## What it does not do

There is no score, coin count or lives counter, no saving of progress, and no
way to load levels other than the two built in. The only front end is the
curses terminal; `console_mario.terminal` and `console_mario.app` import
`curses` and cannot be used where it is missing.

## Running the tests

```
pip install ".[test]"
pytest
```