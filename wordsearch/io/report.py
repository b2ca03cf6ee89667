"""Tabular reporting of search results as pandas DataFrames."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd

from ..core.models import SearchResult
from ..engine.grid import PuzzleGrid
from ..engine.solver import SolverConfig, WordSearchSolver
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

RESULT_COLUMNS = ("word", "found", "row", "col", "direction", "comparisons")


def results_frame(results: Iterable[SearchResult]) -> pd.DataFrame:
    """One row per searched word; coordinates are ``<NA>`` when not found."""

    records = []
    for result in results:
        records.append(
            {
                "word": result.word,
                "found": result.found,
                "row": result.position.row if result.position else None,
                "col": result.position.col if result.position else None,
                "direction": result.direction.value if result.direction else None,
                "comparisons": result.comparisons,
            }
        )
    frame = pd.DataFrame.from_records(records, columns=list(RESULT_COLUMNS))
    return frame.astype(
        {"found": "bool", "row": "Int64", "col": "Int64", "comparisons": "int64"}
    )


def write_report(frame: pd.DataFrame, path: Path | str) -> Path:
    """Write a report as CSV or JSON depending on the file suffix."""

    destination = Path(path)
    suffix = destination.suffix.lower()
    if suffix == ".csv":
        frame.to_csv(destination, index=False)
    elif suffix == ".json":
        frame.to_json(destination, orient="records", indent=2)
    else:
        raise ValueError(f"Unsupported report format: {destination.suffix or '<none>'}")
    LOGGER.info("Wrote %s rows to %s", len(frame), destination)
    return destination


def compare_modes(grid: PuzzleGrid, words: Sequence[str]) -> pd.DataFrame:
    """Search every word with and without pruning and tabulate the difference."""

    plain = WordSearchSolver(grid, SolverConfig(optimize=False)).search_all(words)
    pruned = WordSearchSolver(grid, SolverConfig(optimize=True)).search_all(words)

    frame = pd.DataFrame(
        {
            "word": list(words),
            "plain_comparisons": [result.comparisons for result in plain],
            "optimized_comparisons": [result.comparisons for result in pruned],
            "agree": [
                (a.position, a.direction) == (b.position, b.direction)
                for a, b in zip(plain, pruned)
            ],
        }
    )
    frame["saved"] = frame["plain_comparisons"] - frame["optimized_comparisons"]
    disagreements = int((~frame["agree"].astype(bool)).sum())
    if disagreements:
        LOGGER.warning("Pruned search disagreed with full search on %s words", disagreements)
    return frame
