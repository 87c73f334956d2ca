"""Basic geometry and physics of the objects that live on the game map."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Sequence, Union


@dataclass
class Coord:
    """A point on the map; ``y`` grows downwards."""

    x: float
    y: float


@dataclass(frozen=True)
class Speed:
    """Vertical and horizontal speed of an object."""

    v: float
    h: float


CoordLike = Union[Coord, Sequence[float]]


def _as_coord(value: CoordLike) -> Coord:
    if isinstance(value, Coord):
        return Coord(float(value.x), float(value.y))
    x, y = value
    return Coord(float(x), float(y))


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Rect:
    """An axis-aligned rectangle with a floating top-left corner."""

    def __init__(self, top_left: CoordLike, width: int, height: int) -> None:
        self.top_left = _as_coord(top_left)
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(top_left={self.top_left!r}, "
            f"width={self.width}, height={self.height})"
        )

    @property
    def left(self) -> int:
        return _round_half_away(self.top_left.x)

    @property
    def right(self) -> int:
        return _round_half_away(self.top_left.x + self.width)

    @property
    def top(self) -> int:
        return _round_half_away(self.top_left.y)

    @property
    def bottom(self) -> int:
        return _round_half_away(self.top_left.y + self.height)

    @property
    def x(self) -> float:
        return self.top_left.x

    @property
    def y(self) -> float:
        return self.top_left.y


class Movable(Rect):
    """A rectangle that moves by its own speed and falls under gravity."""

    JUMP_SPEED: ClassVar[float] = -1.0
    MAX_V_SPEED: ClassVar[float] = 0.98
    V_ACCELERATION: ClassVar[float] = 0.05

    def __init__(
        self,
        top_left: CoordLike,
        width: int,
        height: int,
        vspeed: float = 0.0,
        hspeed: float = 0.0,
    ) -> None:
        super().__init__(top_left, width, height)
        self.vspeed = vspeed
        self.hspeed = hspeed

    def jump(self) -> None:
        """Start a jump, but only while not already moving vertically."""
        if self.vspeed == 0:
            self.vspeed = self.JUMP_SPEED

    def move_horizontal_offset(self, offset: float) -> None:
        self.top_left.x += offset

    def move_vertical_offset(self, offset: float) -> None:
        self.top_left.y += offset

    def move_horizontally(self) -> None:
        self.top_left.x += self.hspeed

    def move_vertically(self) -> None:
        if self.vspeed < self.MAX_V_SPEED:
            self.vspeed += self.V_ACCELERATION
        self.top_left.y += self.vspeed


class MapMovable(Rect):
    """A rectangle that shifts when the map scrolls."""

    MAP_STEP: ClassVar[int] = 1

    def move_map_left(self) -> None:
        self.top_left.x -= self.MAP_STEP

    def move_map_right(self) -> None:
        self.top_left.x += self.MAP_STEP


class Collisionable(Rect, ABC):
    """A rectangle that reacts to collisions and can be killed."""

    is_active: bool = True

    def has_collision(self, other: Rect) -> bool:
        """Whether this object's rectangle overlaps ``other`` (touching is not)."""
        return (
            self.right > other.left
            and self.left < other.right
            and self.bottom > other.top
            and self.top < other.bottom
        )

    def kill(self) -> None:
        self.is_active = False

    @property
    @abstractmethod
    def speed(self) -> Speed:
        """Current speed of the object."""

    @abstractmethod
    def process_horizontal_static_collision(self, obj: Rect) -> None:
        """React to running into a static object sideways."""

    @abstractmethod
    def process_mario_collision(self, mario: Collisionable) -> None:
        """React to touching the player."""

    @abstractmethod
    def process_vertical_static_collision(self, obj: Rect) -> None:
        """React to landing on or bumping into a static object."""