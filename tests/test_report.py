import tempfile
import unittest
from pathlib import Path

import pandas as pd

from wordsearch.engine.grid import PuzzleGrid
from wordsearch.engine.solver import WordSearchSolver
from wordsearch.io.report import RESULT_COLUMNS, compare_modes, results_frame, write_report


def cat_grid() -> PuzzleGrid:
    return PuzzleGrid.from_rows([list("CAT"), list("XXX"), list("XXX")])


class ResultsFrameTests(unittest.TestCase):
    def test_one_row_per_word(self) -> None:
        results = WordSearchSolver(cat_grid()).search_all(["CAT", "DOG"])
        frame = results_frame(results)
        self.assertEqual(list(frame.columns), list(RESULT_COLUMNS))
        self.assertEqual(frame["word"].tolist(), ["CAT", "DOG"])
        self.assertEqual(frame["found"].tolist(), [True, False])
        self.assertEqual(frame.loc[0, "row"], 0)
        self.assertEqual(frame.loc[0, "direction"], "RIGHT")
        self.assertTrue(pd.isna(frame.loc[1, "row"]))
        self.assertTrue(pd.isna(frame.loc[1, "direction"]))
        self.assertEqual(int(frame["comparisons"].sum()), 84)

    def test_empty_results(self) -> None:
        frame = results_frame([])
        self.assertEqual(len(frame), 0)
        self.assertEqual(list(frame.columns), list(RESULT_COLUMNS))


class WriteReportTests(unittest.TestCase):
    def test_csv_round_trip(self) -> None:
        frame = results_frame(WordSearchSolver(cat_grid()).search_all(["CAT", "DOG"]))
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_report(frame, Path(tmpdir) / "report.csv")
            loaded = pd.read_csv(path)
            self.assertEqual(loaded["word"].tolist(), ["CAT", "DOG"])
            self.assertEqual(loaded["comparisons"].tolist(), [12, 72])

    def test_json_output(self) -> None:
        frame = results_frame(WordSearchSolver(cat_grid()).search_all(["CAT"]))
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_report(frame, Path(tmpdir) / "report.json")
            self.assertIn('"word":"CAT"', path.read_text(encoding="utf-8").replace(" ", ""))

    def test_unknown_suffix_rejected(self) -> None:
        frame = results_frame([])
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(ValueError):
                write_report(frame, Path(tmpdir) / "report.xlsx")


class CompareModesTests(unittest.TestCase):
    def test_pruning_saves_comparisons_and_agrees(self) -> None:
        frame = compare_modes(cat_grid(), ["CAT", "DOG"])
        self.assertEqual(frame["plain_comparisons"].tolist(), [12, 72])
        self.assertEqual(frame["optimized_comparisons"].tolist(), [6, 16])
        self.assertEqual(frame["saved"].tolist(), [6, 56])
        self.assertTrue(frame["agree"].all())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
