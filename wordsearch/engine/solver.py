"""Multi-directional word search over a character grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..core.constants import DIRECTIONS, Direction
from ..core.models import Position, SearchResult
from ..utils.logger import get_logger
from .grid import PuzzleGrid
from .pruning import candidate_ranges

LOGGER = get_logger(__name__)


@dataclass
class SolverConfig:
    """Configuration values driving the search."""

    optimize: bool = False


class WordSearchSolver:
    """Finds the first placement of a word in priority order.

    Directions are tried in :data:`DIRECTIONS` order and start cells in
    row-major order, so the first match found is also the tie-break winner.
    Every character compared against an in-bounds cell counts as one
    comparison, whether it matches or not.
    """

    def __init__(self, grid: PuzzleGrid, config: Optional[SolverConfig] = None) -> None:
        self.grid = grid
        self.config = config or SolverConfig()

    @property
    def optimization(self) -> bool:
        return self.config.optimize

    @optimization.setter
    def optimization(self, value: bool) -> None:
        self.config.optimize = value

    def optimize(self) -> None:
        """Enable start-cell pruning for subsequent searches."""

        self.config.optimize = True

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def search(self, word: str) -> SearchResult:
        comparisons = 0
        for direction in DIRECTIONS:
            position, spent = self._search_at_direction(word, direction)
            comparisons += spent
            if position is not None:
                LOGGER.debug(
                    "Found %r at (%s,%s) going %s after %s comparisons",
                    word,
                    position.row,
                    position.col,
                    direction.value,
                    comparisons,
                )
                return SearchResult(word, position, direction, comparisons)

        LOGGER.debug("%r not found after %s comparisons", word, comparisons)
        return SearchResult(word, None, None, comparisons)

    def search_all(self, words: Iterable[str]) -> List[SearchResult]:
        results = [self.search(word) for word in words]
        LOGGER.info(
            "Searched %s words (optimize=%s): %s found, %s comparisons",
            len(results),
            self.config.optimize,
            sum(1 for result in results if result.found),
            sum(result.comparisons for result in results),
        )
        return results

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------
    def _search_at_direction(self, word: str, direction: Direction) -> Tuple[Optional[Position], int]:
        rows, cols = candidate_ranges(self.grid.bounds, len(word), direction, self.config.optimize)
        comparisons = 0
        for row in rows:
            for col in cols:
                matched, spent = self._match_at(word, row, col, direction)
                comparisons += spent
                if matched:
                    return Position(row, col), comparisons
        LOGGER.debug(
            "%s: %r missed over %sx%s candidates (%s comparisons)",
            direction.value,
            word,
            len(rows),
            len(cols),
            comparisons,
        )
        return None, comparisons

    def _match_at(self, word: str, row: int, col: int, direction: Direction) -> Tuple[bool, int]:
        """Compare ``word`` against the grid from ``(row, col)``.

        Returns whether it matched and how many comparisons were spent.
        Stepping off the grid fails the match without counting.
        """

        dr, dc = direction.step
        comparisons = 0
        r, c = row, col
        for letter in word:
            if not self.grid.has_indices(r, c):
                return False, comparisons
            comparisons += 1
            # Empty cells hold None and never equal a letter.
            if self.grid.get(r, c) != letter:
                return False, comparisons
            r += dr
            c += dc
        return True, comparisons
