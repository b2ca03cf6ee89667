"""Eight-direction word search solver.

This package exposes the public API surface via:

- ``wordsearch.engine.grid.PuzzleGrid``: the bounds-checked character grid.
- ``wordsearch.engine.solver.WordSearchSolver``: finds each word and counts comparisons.
- ``wordsearch.io.puzzle`` helpers: parse puzzle text into a grid and word list.
"""

from .core.constants import DIRECTIONS, Direction
from .core.models import UNDEFINED_POSITION, Position, SearchResult
from .engine.grid import PuzzleGrid
from .engine.solver import SolverConfig, WordSearchSolver
from .io.puzzle import Puzzle, load_puzzle, parse_puzzle

__all__ = [
    "DIRECTIONS",
    "Direction",
    "Position",
    "SearchResult",
    "UNDEFINED_POSITION",
    "PuzzleGrid",
    "SolverConfig",
    "WordSearchSolver",
    "Puzzle",
    "load_puzzle",
    "parse_puzzle",
]

__version__ = "0.1.0"
