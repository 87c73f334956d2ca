"""Game levels: the layouts of objects and the order they are played in."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Tuple

from .console_ui import UIFactory

# (object kind, top-left corner, width, height)
_Placement = Tuple[str, Tuple[int, int], int, int]

_FIRST_LEVEL: Tuple[_Placement, ...] = (
    ("mario", (39, 10), 3, 3),
    ("ship", (20, 25), 40, 2),
    ("full_box", (30, 15), 5, 3),
    ("full_box", (50, 15), 5, 3),
    ("ship", (60, 20), 40, 7),
    ("box", (60, 10), 10, 3),
    ("full_box", (70, 10), 5, 3),
    ("box", (75, 10), 5, 3),
    ("full_box", (80, 10), 5, 3),
    ("box", (85, 10), 10, 3),
    ("ship", (100, 25), 20, 2),
    ("ship", (120, 20), 10, 7),
    ("ship", (150, 25), 40, 2),
    ("ship", (210, 20), 15, 7),
    ("enemy", (20, 5), 3, 2),
    ("enemy", (25, 5), 3, 2),
    ("enemy", (70, 15), 3, 2),
    ("enemy", (80, 5), 3, 2),
    ("enemy", (125, 5), 3, 2),
    ("enemy", (160, 5), 3, 2),
)

_SECOND_LEVEL: Tuple[_Placement, ...] = (
    ("mario", (16, 19), 3, 3),
    ("ship", (0, 15), 20, 1),
    ("ship", (20, 10), 40, 1),
    ("ship", (55, 0), 5, 10),
    ("full_box", (22, 2), 3, 2),
    ("full_box", (32, 2), 3, 2),
    ("full_box", (42, 2), 3, 2),
    ("box", (25, 2), 7, 2),
    ("box", (35, 2), 7, 2),
    ("ship", (15, 25), 50, 2),
    ("ship", (28, 20), 10, 7),
    ("ship", (72, 20), 3, 2),
    ("ship", (42, 16), 18, 2),
    ("ship", (60, 7), 18, 2),
    ("ship", (74, 4), 7, 5),
    ("money", (61, 0), 3, 2),
    ("ship", (82, 17), 20, 15),
    ("ship", (102, 17), 5, 1),
    ("ship", (107, 13), 3, 5),
    ("ship", (107, 13), 25, 1),
    ("ship", (132, 13), 3, 8),
    ("ship", (126, 18), 2, 9),
    ("ship", (120, 14), 2, 8),
    ("ship", (107, 21), 13, 1),
    ("full_box", (110, 16), 3, 2),
    ("full_box", (117, 16), 3, 2),
    ("ship", (91, 12), 9, 1),
    ("ship", (100, 10), 1, 3),
    ("ship", (100, 8), 40, 2),
    ("box", (100, 0), 1, 3),
    ("box", (133, 1), 1, 1),
    ("box", (100, 2), 5, 2),
    ("box", (108, 2), 5, 2),
    ("box", (115, 2), 5, 2),
    ("box", (122, 2), 5, 2),
    ("box", (129, 2), 5, 2),
    ("full_box", (105, 2), 3, 2),
    ("full_box", (113, 2), 3, 2),
    ("full_box", (120, 2), 3, 2),
    ("full_box", (127, 2), 3, 2),
    ("money", (101, 0), 3, 2),
    ("money", (125, 0), 3, 2),
    ("ship", (140, 4), 15, 2),
    ("ship", (140, 4), 3, 17),
    ("ship", (160, 0), 3, 21),
    ("ship", (148, 9), 12, 2),
    ("ship", (140, 14), 15, 2),
    ("ship", (147, 19), 13, 2),
    ("ship", (92, 25), 80, 2),
    ("ship", (180, 20), 3, 2),
    ("ship", (168, 15), 3, 2),
    ("ship", (177, 7), 3, 2),
    ("ship", (188, 5), 3, 26),
    ("ship", (190, 5), 11, 26),
    ("enemy", (21, 6), 3, 2),
    ("enemy", (39, 18), 3, 2),
    ("enemy", (67, 0), 3, 2),
    ("enemy", (100, 6), 3, 2),
    ("enemy", (137, 6), 3, 2),
    ("enemy", (148, 6), 3, 2),
    ("enemy", (148, 11), 3, 2),
    ("enemy", (144, 16), 3, 2),
    ("enemy", (164, 15), 3, 2),
)


class GameLevel(ABC):
    """A level: fills the factory with its objects and knows what comes next.

    The last static object a level places is its finish line.
    """

    def __init__(self, ui_factory: UIFactory) -> None:
        self.ui_factory = ui_factory
        self.next: Optional[GameLevel] = None
        self.init_data()

    def restart(self) -> None:
        """Drop every object and place the level's objects anew."""
        self.clear_data()
        self.init_data()

    def is_final(self) -> bool:
        return False

    @abstractmethod
    def get_next(self) -> Optional[GameLevel]:
        """The level that follows this one, or None after the last."""

    def clear_data(self) -> None:
        self.ui_factory.clear_data()

    @abstractmethod
    def init_data(self) -> None:
        """Place the level's objects through the factory."""

    def _build(self, layout: Iterable[_Placement]) -> None:
        for kind, top_left, width, height in layout:
            create = getattr(self.ui_factory, f"create_{kind}")
            create(top_left, width, height)


class FirstLevel(GameLevel):
    """The opening level."""

    def get_next(self) -> GameLevel:
        if self.next is None:
            self.clear_data()
            self.next = SecondLevel(self.ui_factory)
        return self.next

    def init_data(self) -> None:
        self._build(_FIRST_LEVEL)


class SecondLevel(GameLevel):
    """The last level."""

    def is_final(self) -> bool:
        return True

    def get_next(self) -> Optional[GameLevel]:
        return self.next

    def init_data(self) -> None:
        self._build(_SECOND_LEVEL)