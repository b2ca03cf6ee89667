"""Candidate start-cell ranges for the search engine.

With pruning disabled every cell of the grid is a candidate start. With
pruning enabled, a start is kept only if a word of the requested length could
fit between it and the grid edge it travels towards. Pruning never changes
which placement is found, only how many candidates are scanned.
"""

from __future__ import annotations

from typing import Tuple

from ..core.constants import Bounds, Direction


def axis_range(size: int, inc: int, towards_start: bool, towards_end: bool) -> range:
    """Narrow ``range(size)`` for a word spanning ``inc`` extra cells.

    Moving towards index 0 needs ``inc`` cells of room before the start;
    moving towards ``size`` needs ``inc`` cells after it. An empty range means
    no start on this axis can fit the word.
    """

    start = inc if towards_start else 0
    end = size - inc if towards_end else size
    return range(start, max(start, end))


def candidate_ranges(
    bounds: Bounds,
    length: int,
    direction: Direction,
    optimize: bool,
) -> Tuple[range, range]:
    """Return ``(row_range, col_range)`` of start cells to scan."""

    if not optimize:
        return range(bounds.rows), range(bounds.cols)

    inc = max(length - 1, 0)
    if direction.is_vertically_static:
        rows = range(bounds.rows)
    else:
        rows = axis_range(bounds.rows, inc, direction.is_upwards, direction.is_downwards)
    if direction.is_horizontally_static:
        cols = range(bounds.cols)
    else:
        cols = axis_range(bounds.cols, inc, direction.is_leftwards, direction.is_rightwards)
    return rows, cols
