"""The controller that moves objects and resolves their collisions."""

from __future__ import annotations

from typing import List, Optional, Sequence, TypeVar

from .geometry import Collisionable, MapMovable, Movable, Rect
from .objects import Mario

_T = TypeVar("_T")


def _remove_all(container: List[_T], obj: _T) -> None:
    container[:] = [item for item in container if item is not obj]


class Game:
    """Holds the objects of a level and steps the game's physics."""

    def __init__(self) -> None:
        self._map_movable_objs: List[MapMovable] = []
        self._static_objs: List[Rect] = []
        self._collisionable_objs: List[Collisionable] = []
        self._movable_objs: List[Movable] = []
        self.mario: Optional[Mario] = None
        self._is_finished = False
        self._is_level_end = False

    @property
    def map_movable_objs(self) -> Sequence[MapMovable]:
        return tuple(self._map_movable_objs)

    @property
    def static_objs(self) -> Sequence[Rect]:
        return tuple(self._static_objs)

    @property
    def collisionable_objs(self) -> Sequence[Collisionable]:
        return tuple(self._collisionable_objs)

    @property
    def movable_objs(self) -> Sequence[Movable]:
        return tuple(self._movable_objs)

    def add_collisionable(self, obj: Collisionable) -> None:
        self._collisionable_objs.append(obj)

    def add_map_movable(self, obj) -> None:
        self._map_movable_objs.append(obj)

    def add_mario(self, obj: Mario) -> None:
        self.mario = obj

    def add_movable(self, obj: Movable) -> None:
        self._movable_objs.append(obj)

    def add_static_obj(self, obj: Rect) -> None:
        self._static_objs.append(obj)

    def _first_static_hit(self, obj: Collisionable) -> Optional[Rect]:
        return next(
            (static for static in self._static_objs if obj.has_collision(static)),
            None,
        )

    def check_horizontally_static_collisions(self) -> None:
        for obj in self._collisionable_objs:
            hit = self._first_static_hit(obj)
            if hit is not None:
                obj.process_horizontal_static_collision(hit)

    def check_mario_collision(self) -> None:
        """Let every object touching the player react to it.

        Objects that die are dropped by moving the last object into their
        place, so that object is checked next.
        """
        mario = self.mario
        if mario is None:
            return
        objs = self._collisionable_objs
        i = 0
        while i < len(objs):
            obj = objs[i]
            if obj.has_collision(mario):
                obj.process_mario_collision(mario)
                if not mario.is_active:
                    break
                if not obj.is_active:
                    objs[i] = objs[-1]
                    objs.pop()
                    continue
            i += 1

    def check_static_collisions(self, obj: Collisionable) -> bool:
        return self._first_static_hit(obj) is not None

    def check_vertically_static_collisions(self) -> None:
        # The last static object of a level is its finish.
        if (
            self.mario is not None
            and self._static_objs
            and self.mario.has_collision(self._static_objs[-1])
        ):
            self._is_level_end = True

        for obj in self._collisionable_objs:
            hit = self._first_static_hit(obj)
            if hit is not None:
                obj.process_vertical_static_collision(hit)

    def finish(self) -> None:
        self._is_finished = True

    @property
    def is_finished(self) -> bool:
        return self._is_finished

    @property
    def is_level_end(self) -> bool:
        return self._is_level_end

    def move_map_left(self) -> None:
        for obj in self._map_movable_objs:
            obj.move_map_left()

    def move_map_right(self) -> None:
        for obj in self._map_movable_objs:
            obj.move_map_right()

    def move_objs_horizontally(self) -> None:
        for obj in self._movable_objs:
            obj.move_horizontally()

    def move_objs_vertically(self) -> None:
        for obj in self._movable_objs:
            obj.move_vertically()

    def remove_collisionable(self, obj: Collisionable) -> None:
        _remove_all(self._collisionable_objs, obj)

    def remove_map_movable(self, obj) -> None:
        _remove_all(self._map_movable_objs, obj)

    def remove_mario(self) -> None:
        self.mario = None

    def remove_movable(self, obj: Movable) -> None:
        _remove_all(self._movable_objs, obj)

    def remove_objs(self) -> None:
        self._collisionable_objs.clear()
        self._map_movable_objs.clear()
        self._movable_objs.clear()
        self._static_objs.clear()
        self.remove_mario()

    def remove_static_obj(self, obj: Rect) -> None:
        _remove_all(self._static_objs, obj)

    def start_level(self) -> None:
        self._is_level_end = False