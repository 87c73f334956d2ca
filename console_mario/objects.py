"""Game objects: blocks, enemies, coins and the player."""

from __future__ import annotations

from typing import Protocol

from .geometry import (
    Collisionable,
    Coord,
    CoordLike,
    MapMovable,
    Movable,
    Rect,
    Speed,
)


class MoneyFactory(Protocol):
    """Anything that can place a new coin on the map."""

    def create_money(self, top_left: Coord, width: int, height: int) -> None: ...


class Box(MapMovable):
    """A plain brick block."""


class Ship(MapMovable):
    """A solid platform."""


class Enemy(MapMovable, Movable, Collisionable):
    """A walker that turns round at walls and at platform edges."""

    def __init__(self, top_left: CoordLike, width: int, height: int) -> None:
        super().__init__(top_left, width, height, 0.0, 0.2)

    @property
    def speed(self) -> Speed:
        return Speed(self.vspeed, self.hspeed)

    def process_horizontal_static_collision(self, obj: Rect) -> None:
        self.hspeed = -self.hspeed
        self.move_horizontally()

    def process_mario_collision(self, mario: Collisionable) -> None:
        v = mario.speed.v
        if v > 0 and v != self.V_ACCELERATION:
            self.kill()
        else:
            mario.kill()

    def process_vertical_static_collision(self, obj: Rect) -> None:
        # Turn round rather than walk off the edge of the platform.
        self.top_left.x += self.hspeed
        if not self.has_collision(obj):
            self.process_horizontal_static_collision(obj)
        else:
            self.top_left.x -= self.hspeed

        if self.vspeed > 0:
            self.top_left.y -= self.vspeed
            self.vspeed = 0.0


class FullBox(Box, Collisionable):
    """A question block that releases a coin when hit from below."""

    def __init__(
        self,
        top_left: CoordLike,
        width: int,
        height: int,
        ui_factory: MoneyFactory,
    ) -> None:
        super().__init__(top_left, width, height)
        self.ui_factory = ui_factory

    @property
    def speed(self) -> Speed:
        return Speed(0.0, 0.0)

    def process_horizontal_static_collision(self, obj: Rect) -> None:
        """A block never moves, so sideways contact changes nothing."""

    def process_mario_collision(self, mario: Collisionable) -> None:
        if mario.speed.v < 0:
            self.kill()
            self.ui_factory.create_money(
                Coord(self.top_left.x, self.top_left.y - 3), 3, 2
            )

    def process_vertical_static_collision(self, obj: Rect) -> None:
        """A block never moves, so vertical contact changes nothing."""


class Mario(Movable, Collisionable):
    """The player."""

    def __init__(self, top_left: CoordLike, width: int, height: int) -> None:
        super().__init__(top_left, width, height, 0.0, 0.0)

    @property
    def speed(self) -> Speed:
        return Speed(self.vspeed, self.hspeed)

    def move_map_left(self) -> None:
        self.move_horizontal_offset(MapMovable.MAP_STEP)

    def move_map_right(self) -> None:
        self.move_horizontal_offset(-MapMovable.MAP_STEP)

    def process_horizontal_static_collision(self, obj: Rect) -> None:
        self.hspeed = -self.hspeed
        self.move_horizontally()

    def process_mario_collision(self, mario: Collisionable) -> None:
        """The player does not react to touching itself."""

    def process_vertical_static_collision(self, obj: Rect) -> None:
        # Landing on a platform or bumping the head both undo the last step.
        if self.vspeed != 0:
            self.top_left.y -= self.vspeed
        self.vspeed = 0.0


class Money(MapMovable, Movable, Collisionable):
    """A coin that drifts sideways and may fall off platforms."""

    def __init__(self, top_left: CoordLike, width: int, height: int) -> None:
        super().__init__(top_left, width, height, 0.0, 0.2)

    @property
    def speed(self) -> Speed:
        return Speed(self.vspeed, self.hspeed)

    def process_horizontal_static_collision(self, obj: Rect) -> None:
        self.hspeed = -self.hspeed
        self.move_horizontally()

    def process_mario_collision(self, mario: Collisionable) -> None:
        self.kill()

    def process_vertical_static_collision(self, obj: Rect) -> None:
        if self.vspeed > 0:
            self.top_left.y -= self.vspeed
            self.vspeed = 0.0