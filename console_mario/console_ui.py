"""Console versions of the game objects and the factory that builds levels."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from .game import Game
from .game_map import ConsoleGameMap, GameMap
from .geometry import CoordLike
from .objects import Box, Enemy, FullBox, Mario, Money, Ship


class UIFactory(ABC):
    """Creates level objects and registers them with the game."""

    def __init__(self, game: Game) -> None:
        self.game = game

    @abstractmethod
    def clear_data(self) -> None:
        """Drop every object of the current level."""

    @abstractmethod
    def create_box(self, top_left: CoordLike, width: int, height: int) -> None:
        """Place a brick block."""

    @abstractmethod
    def create_enemy(self, top_left: CoordLike, width: int, height: int) -> None:
        """Place an enemy."""

    @abstractmethod
    def create_full_box(self, top_left: CoordLike, width: int, height: int) -> None:
        """Place a question block."""

    @abstractmethod
    def create_mario(self, top_left: CoordLike, width: int, height: int) -> None:
        """Place the player, replacing any previous one."""

    @abstractmethod
    def create_money(self, top_left: CoordLike, width: int, height: int) -> None:
        """Place a coin."""

    @abstractmethod
    def create_ship(self, top_left: CoordLike, width: int, height: int) -> None:
        """Place a platform."""

    @property
    @abstractmethod
    def game_map(self) -> GameMap:
        """The map the objects are drawn on."""

    @property
    @abstractmethod
    def mario(self) -> Optional[Mario]:
        """The current player object."""


class ConsoleBox(Box):
    @property
    def brush(self) -> str:
        return "-"


class ConsoleEnemy(Enemy):
    @property
    def brush(self) -> str:
        return "e"


class ConsoleFullBox(FullBox):
    @property
    def brush(self) -> str:
        return "?" if self.is_active else "-"


class ConsoleMario(Mario):
    @property
    def brush(self) -> str:
        return "@"


class ConsoleMoney(Money):
    @property
    def brush(self) -> str:
        return "$"


class ConsoleShip(Ship):
    @property
    def brush(self) -> str:
        return "#"


class ConsoleUIFactory(UIFactory):
    """Builds console objects, registering them with the game and the map."""

    MAP_HEIGHT = 30
    MAP_WIDTH = 200

    def __init__(self, game: Game) -> None:
        super().__init__(game)
        self._game_map = ConsoleGameMap(self.MAP_HEIGHT, self.MAP_WIDTH)
        self._mario: Optional[ConsoleMario] = None
        self.boxes: List[ConsoleBox] = []
        self.full_boxes: List[ConsoleFullBox] = []
        self.ships: List[ConsoleShip] = []
        self.enemies: List[ConsoleEnemy] = []
        self.moneys: List[ConsoleMoney] = []

    def clear_data(self) -> None:
        self.game.remove_objs()
        self._game_map.remove_objs()
        self._mario = None
        self.boxes.clear()
        self.full_boxes.clear()
        self.ships.clear()
        self.enemies.clear()
        self.moneys.clear()

    def create_box(self, top_left: CoordLike, width: int, height: int) -> None:
        box = ConsoleBox(top_left, width, height)
        self.boxes.append(box)
        self.game.add_map_movable(box)
        self.game.add_static_obj(box)
        self._game_map.add_obj(box)

    def create_enemy(self, top_left: CoordLike, width: int, height: int) -> None:
        enemy = ConsoleEnemy(top_left, width, height)
        self.enemies.append(enemy)
        self.game.add_map_movable(enemy)
        self.game.add_movable(enemy)
        self.game.add_collisionable(enemy)
        self._game_map.add_obj(enemy)

    def create_full_box(self, top_left: CoordLike, width: int, height: int) -> None:
        full_box = ConsoleFullBox(top_left, width, height, self)
        self.full_boxes.append(full_box)
        self.game.add_collisionable(full_box)
        self.game.add_map_movable(full_box)
        self.game.add_static_obj(full_box)
        self._game_map.add_obj(full_box)

    def create_mario(self, top_left: CoordLike, width: int, height: int) -> None:
        old = self._mario
        if old is not None:
            self.game.remove_collisionable(old)
            self.game.remove_movable(old)
            self._game_map.remove_obj(old)
        self.game.remove_mario()

        mario = ConsoleMario(top_left, width, height)
        self._mario = mario
        self.game.add_collisionable(mario)
        self.game.add_movable(mario)
        self.game.add_mario(mario)
        self._game_map.add_obj(mario)

    def create_money(self, top_left: CoordLike, width: int, height: int) -> None:
        money = ConsoleMoney(top_left, width, height)
        self.moneys.append(money)
        self.game.add_map_movable(money)
        self.game.add_movable(money)
        self.game.add_collisionable(money)
        self._game_map.add_obj(money)

    def create_ship(self, top_left: CoordLike, width: int, height: int) -> None:
        ship = ConsoleShip(top_left, width, height)
        self.ships.append(ship)
        self.game.add_map_movable(ship)
        self.game.add_static_obj(ship)
        self._game_map.add_obj(ship)

    @property
    def game_map(self) -> ConsoleGameMap:
        return self._game_map

    @property
    def mario(self) -> Optional[ConsoleMario]:
        return self._mario