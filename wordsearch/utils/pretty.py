"""Pretty-print helpers for solved word search grids."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.constants import PALETTE_CODES, PLAIN_CODE
from ..core.models import SearchResult
from ..engine.grid import PuzzleGrid


@dataclass(frozen=True)
class Color:
    """ANSI 256-color foreground code; ``0`` means no coloring."""

    code: int

    def wrap(self, text: str) -> str:
        if self.is_plain:
            return text
        return f"\x1b[1;38;5;{self.code}m{text}\x1b[0m"

    @property
    def is_plain(self) -> bool:
        return self.code == PLAIN_CODE


PLAIN = Color(PLAIN_CODE)
GREEN, RED, BLUE, MAGENTA, CYAN, LIME, BROWN, PURPLE, ORANGE = (Color(code) for code in PALETTE_CODES)
COLORS: Sequence[Color] = (GREEN, RED, BLUE, MAGENTA, CYAN, LIME, BROWN, PURPLE, ORANGE)


def random_color(rng: Optional[random.Random] = None) -> Color:
    return (rng or random).choice(COLORS)


class HighlightedGrid:
    """A read-only grid paired with a per-cell color overlay."""

    def __init__(self, grid: PuzzleGrid) -> None:
        self.grid = grid
        self.colors: List[List[Color]] = [[PLAIN for _ in range(grid.cols)] for _ in range(grid.rows)]

    def colorize(self, result: SearchResult, color: Color) -> None:
        """Paint the span covered by a found word. Missing words are ignored."""

        for row, col in result.cells:
            self.colors[row][col] = color

    def color_at(self, row: int, col: int) -> Color:
        return self.colors[row][col]

    def render(self, use_color: bool = True) -> str:
        lines = []
        for r in range(self.grid.rows):
            rendered = []
            for c in range(self.grid.cols):
                value = self.grid.get(r, c)
                if value is None:
                    rendered.append(" ")
                elif use_color:
                    rendered.append(self.colors[r][c].wrap(value))
                else:
                    rendered.append(value)
            lines.append(" ".join(rendered))
        return "\n".join(lines)


def format_result_line(result: SearchResult, color: Color = PLAIN) -> str:
    suffix = "" if result.found else " (not found)"
    return f"{color.wrap(result.word)} - {result.comparisons} comparisons{suffix}"


def print_summary(
    highlighted: HighlightedGrid,
    results: Sequence[SearchResult],
    colors: Sequence[Color],
    elapsed: float,
    *,
    use_color: bool = True,
    stream=None,
) -> None:
    """Print the highlighted solution, per-word comparisons and totals.

    ``elapsed`` is the wall-clock search time in seconds.
    """

    stream = stream or sys.stdout
    print("SOLUTION", file=stream)
    print(highlighted.render(use_color=use_color), file=stream)
    print(file=stream)

    print("SUMMARY", file=stream)
    for result, color in zip(results, colors):
        print(format_result_line(result, color if use_color else PLAIN), file=stream)

    total = sum(result.comparisons for result in results)
    print(f"Total comparisons : {total} comparisons", file=stream)
    print(f"Execution time    : {elapsed * 1e3:.0f} ms", file=stream)
    print(f"                  : {elapsed:.3f} s", file=stream)
