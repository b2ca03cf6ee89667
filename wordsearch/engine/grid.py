"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.constants import Bounds, Direction
from ..core.exceptions import CellValueError, GridIndexError, RaggedGridError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class PuzzleGrid:
    """Fixed-size rectangular table of optional single characters.

    Cells start empty (``None``). Coordinates are checked against the bounds on
    every access; negative indices are rejected rather than wrapped.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")
        self.bounds = Bounds(rows=rows, cols=cols)
        self.cells: List[List[Optional[str]]] = [[None for _ in range(cols)] for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[str]]]) -> "PuzzleGrid":
        """Build a grid from a rectangular table of characters."""

        width = len(rows[0]) if rows else 0
        for index, row in enumerate(rows):
            if len(row) != width:
                raise RaggedGridError(
                    f"Row {index} has {len(row)} cells; expected {width}"
                )
        grid = cls(len(rows), width)
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                grid.set(r, c, value)
        LOGGER.debug("Built %sx%s grid", grid.rows, grid.cols)
        return grid

    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def has_indices(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def set(self, row: int, col: int, value: Optional[str]) -> None:
        self._check_indices(row, col)
        if value is not None and (not isinstance(value, str) or len(value) != 1):
            raise CellValueError(f"Cell value must be a single character, got {value!r}")
        self.cells[row][col] = value

    def get(self, row: int, col: int) -> Optional[str]:
        self._check_indices(row, col)
        return self.cells[row][col]

    def _check_indices(self, row: int, col: int) -> None:
        if not self.has_indices(row, col):
            raise GridIndexError(
                f"Cell {(row, col)} outside {self.rows}x{self.cols} grid"
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def read(self, row: int, col: int, direction: Direction, length: int) -> str:
        """Return up to ``length`` characters starting at ``(row, col)``.

        Reading stops at the grid edge or at the first empty cell.
        """

        dr, dc = direction.step
        letters: List[str] = []
        r, c = row, col
        while len(letters) < length and self.has_indices(r, c):
            value = self.cells[r][c]
            if value is None:
                break
            letters.append(value)
            r += dr
            c += dc
        return "".join(letters)

    def to_rows(self) -> List[List[Optional[str]]]:
        return [list(row) for row in self.cells]

    def __repr__(self) -> str:
        return f"PuzzleGrid(rows={self.rows}, cols={self.cols})"
