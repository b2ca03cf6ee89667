import unittest

from wordsearch.core.constants import Direction
from wordsearch.core.exceptions import CellValueError, GridIndexError, RaggedGridError, WordSearchError
from wordsearch.engine.grid import PuzzleGrid


def grid_of(*lines: str) -> PuzzleGrid:
    return PuzzleGrid.from_rows([list(line) for line in lines])


class GridConstructionTests(unittest.TestCase):
    def test_new_grid_cells_start_empty(self) -> None:
        grid = PuzzleGrid(2, 3)
        self.assertEqual((grid.rows, grid.cols), (2, 3))
        for r in range(2):
            for c in range(3):
                self.assertIsNone(grid.get(r, c))

    def test_negative_dimensions_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PuzzleGrid(-1, 3)

    def test_from_rows_copies_cells(self) -> None:
        grid = grid_of("ABC", "DEF")
        self.assertEqual(grid.get(1, 2), "F")
        self.assertEqual(grid.to_rows(), [["A", "B", "C"], ["D", "E", "F"]])

    def test_from_rows_rejects_ragged_input(self) -> None:
        with self.assertRaises(RaggedGridError):
            PuzzleGrid.from_rows([["A", "B"], ["C"]])

    def test_from_rows_accepts_empty_table(self) -> None:
        grid = PuzzleGrid.from_rows([])
        self.assertEqual((grid.rows, grid.cols), (0, 0))
        self.assertFalse(grid.has_indices(0, 0))


class GridAccessTests(unittest.TestCase):
    def test_set_then_get(self) -> None:
        grid = PuzzleGrid(2, 2)
        grid.set(1, 0, "Q")
        self.assertEqual(grid.get(1, 0), "Q")
        grid.set(1, 0, None)
        self.assertIsNone(grid.get(1, 0))

    def test_set_rejects_multi_character_values(self) -> None:
        grid = PuzzleGrid(1, 1)
        with self.assertRaises(CellValueError):
            grid.set(0, 0, "AB")
        with self.assertRaises(CellValueError):
            grid.set(0, 0, "")

    def test_has_indices_treats_negative_as_absent(self) -> None:
        grid = PuzzleGrid(3, 4)
        self.assertTrue(grid.has_indices(0, 0))
        self.assertTrue(grid.has_indices(2, 3))
        self.assertFalse(grid.has_indices(-1, 0))
        self.assertFalse(grid.has_indices(0, -1))
        self.assertFalse(grid.has_indices(3, 0))
        self.assertFalse(grid.has_indices(0, 4))

    def test_out_of_range_access_raises_instead_of_wrapping(self) -> None:
        grid = grid_of("AB", "CD")
        with self.assertRaises(GridIndexError):
            grid.get(-1, 0)
        with self.assertRaises(GridIndexError):
            grid.get(0, 2)
        with self.assertRaises(GridIndexError):
            grid.set(2, 0, "X")

    def test_index_error_is_catchable_both_ways(self) -> None:
        grid = PuzzleGrid(1, 1)
        with self.assertRaises(IndexError):
            grid.get(5, 5)
        with self.assertRaises(WordSearchError):
            grid.get(5, 5)


class GridReadTests(unittest.TestCase):
    def test_read_follows_direction(self) -> None:
        grid = grid_of("ABC", "DEF", "GHI")
        self.assertEqual(grid.read(0, 0, Direction.RIGHT_DOWN, 3), "AEI")
        self.assertEqual(grid.read(2, 0, Direction.RIGHT_UP, 3), "GEC")
        self.assertEqual(grid.read(1, 2, Direction.LEFT, 3), "FED")

    def test_read_stops_at_edge(self) -> None:
        grid = grid_of("ABC", "DEF", "GHI")
        self.assertEqual(grid.read(0, 2, Direction.RIGHT, 3), "C")
        self.assertEqual(grid.read(0, 0, Direction.UP, 3), "A")

    def test_read_stops_at_empty_cell(self) -> None:
        grid = PuzzleGrid(1, 3)
        grid.set(0, 0, "A")
        grid.set(0, 2, "B")
        self.assertEqual(grid.read(0, 0, Direction.RIGHT, 3), "A")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
