"""Shared constants and enumerations for the word search solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple


class Direction(str, Enum):
    """The eight reading directions, declared in search priority order."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"
    DOWN = "DOWN"
    UP = "UP"
    LEFT_DOWN = "LEFT_DOWN"
    RIGHT_DOWN = "RIGHT_DOWN"
    LEFT_UP = "LEFT_UP"
    RIGHT_UP = "RIGHT_UP"

    @property
    def is_leftwards(self) -> bool:
        return self in _LEFTWARDS

    @property
    def is_rightwards(self) -> bool:
        return self in _RIGHTWARDS

    @property
    def is_downwards(self) -> bool:
        return self in _DOWNWARDS

    @property
    def is_upwards(self) -> bool:
        return self in _UPWARDS

    @property
    def is_horizontally_static(self) -> bool:
        return not self.is_leftwards and not self.is_rightwards

    @property
    def is_vertically_static(self) -> bool:
        return not self.is_upwards and not self.is_downwards

    @property
    def horizontal_step(self) -> int:
        if self.is_leftwards:
            return -1
        if self.is_rightwards:
            return 1
        return 0

    @property
    def vertical_step(self) -> int:
        if self.is_upwards:
            return -1
        if self.is_downwards:
            return 1
        return 0

    @property
    def step(self) -> Tuple[int, int]:
        """Return ``(row_delta, col_delta)`` for one move in this direction."""

        return self.vertical_step, self.horizontal_step

    @property
    def arrow(self) -> str:
        return _ARROWS[self]


_LEFTWARDS: FrozenSet[Direction] = frozenset(
    {Direction.LEFT, Direction.LEFT_DOWN, Direction.LEFT_UP}
)
_RIGHTWARDS: FrozenSet[Direction] = frozenset(
    {Direction.RIGHT, Direction.RIGHT_DOWN, Direction.RIGHT_UP}
)
_DOWNWARDS: FrozenSet[Direction] = frozenset(
    {Direction.DOWN, Direction.LEFT_DOWN, Direction.RIGHT_DOWN}
)
_UPWARDS: FrozenSet[Direction] = frozenset(
    {Direction.UP, Direction.LEFT_UP, Direction.RIGHT_UP}
)

_ARROWS = {
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
    Direction.DOWN: "↓",
    Direction.UP: "↑",
    Direction.LEFT_DOWN: "↙",
    Direction.RIGHT_DOWN: "↘",
    Direction.LEFT_UP: "↖",
    Direction.RIGHT_UP: "↗",
}

# Search priority; ties between placements are broken by this order.
DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols


# ANSI 256-color codes used when highlighting found words.
PLAIN_CODE = 0
PALETTE_CODES: Tuple[int, ...] = (10, 9, 45, 13, 14, 48, 94, 93, 202)
