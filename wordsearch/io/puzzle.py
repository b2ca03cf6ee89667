"""Parsing of textual puzzle descriptions.

A puzzle file holds two blocks separated by a blank line::

    C A T
    X X X
    X X X

    CAT
    AXX

The first block is the grid, one row per line with single-character cells
separated by spaces. The second block lists the words to search, one per line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..core.exceptions import PuzzleParseError, RaggedGridError
from ..engine.grid import PuzzleGrid
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

BLOCK_SEPARATOR_RE = re.compile(r"\n[ \t]*\n\s*")
CELL_SEPARATOR = " "


@dataclass
class Puzzle:
    grid: PuzzleGrid
    words: List[str]


def parse_puzzle(text: str) -> Puzzle:
    """Split puzzle text into its grid and word list."""

    normalized = text.replace("\r\n", "\n").replace("\r", "\n").strip("\n")
    blocks = BLOCK_SEPARATOR_RE.split(normalized, maxsplit=1)
    if len(blocks) != 2:
        raise PuzzleParseError("Expected a grid block and a word block separated by a blank line")
    grid_block, word_block = blocks
    return Puzzle(grid=parse_grid(grid_block), words=parse_words(word_block))


def parse_grid(block: str) -> PuzzleGrid:
    rows: List[List[str]] = []
    for line_no, line in enumerate(block.split("\n"), start=1):
        cells = line.rstrip().split(CELL_SEPARATOR)
        for col, cell in enumerate(cells):
            if len(cell) != 1:
                raise PuzzleParseError(
                    f"Grid line {line_no}, cell {col}: expected one character, got {cell!r}"
                )
        rows.append(cells)

    try:
        grid = PuzzleGrid.from_rows(rows)
    except RaggedGridError as exc:
        raise PuzzleParseError(f"Grid is not rectangular: {exc}") from exc
    LOGGER.debug("Parsed %sx%s grid", grid.rows, grid.cols)
    return grid


def parse_words(block: str) -> List[str]:
    """Read words one entry per line. Blank lines are skipped."""

    words: List[str] = []
    for line in block.split("\n"):
        line = line.strip()
        if not line:
            continue
        words.append(line)
    return words


def load_puzzle(path: Path | str) -> Puzzle:
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise PuzzleParseError(f"Missing puzzle file: {source}") from exc
    except UnicodeDecodeError as exc:
        raise PuzzleParseError(f"Puzzle file is not valid UTF-8: {source}") from exc
    except OSError as exc:
        raise PuzzleParseError(f"Cannot read puzzle file {source}: {exc.strerror or exc}") from exc
    puzzle = parse_puzzle(text)
    LOGGER.info(
        "Loaded %s: %sx%s grid, %s words",
        source,
        puzzle.grid.rows,
        puzzle.grid.cols,
        len(puzzle.words),
    )
    return puzzle
