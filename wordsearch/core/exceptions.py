"""Custom exception hierarchy for the word search solver."""


class WordSearchError(Exception):
    """Base exception for solver failures."""


class GridIndexError(WordSearchError, IndexError):
    """Raised when a raw grid accessor receives out-of-range coordinates."""


class CellValueError(WordSearchError, ValueError):
    """Raised when a grid cell is assigned something other than one character."""


class RaggedGridError(WordSearchError, ValueError):
    """Raised when grid rows do not share the same column count."""


class PuzzleParseError(WordSearchError):
    """Raised when the puzzle text cannot be parsed."""
