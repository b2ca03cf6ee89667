"""Data models shared by the search engine and its callers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class Position:
    """A ``(row, col)`` coordinate; may be negative while stepping."""

    row: int
    col: int

    def moved(self, direction: Direction, times: int = 1) -> "Position":
        dr, dc = direction.step
        return Position(self.row + dr * times, self.col + dc * times)

    def as_tuple(self) -> Tuple[int, int]:
        return self.row, self.col


# Reserved "not found" coordinate. Grid coordinates are never negative.
UNDEFINED_POSITION = Position(-1, -1)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of searching one word."""

    word: str
    position: Optional[Position]
    direction: Optional[Direction]
    comparisons: int

    @property
    def found(self) -> bool:
        return self.position is not None

    @property
    def found_at(self) -> Position:
        """Return the match position, or :data:`UNDEFINED_POSITION` when missing."""

        return self.position if self.position is not None else UNDEFINED_POSITION

    @property
    def cells(self) -> List[Tuple[int, int]]:
        if self.position is None or self.direction is None:
            return []
        return [self.position.moved(self.direction, i).as_tuple() for i in range(len(self.word))]
