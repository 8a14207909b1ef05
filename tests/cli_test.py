# -*- coding: utf-8 -*-
"""Test cases for rendering, text parsing and the command line."""
import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from sudoku_engine import (
    count_clues,
    empty_grid,
    format_grid,
    grid_to_string,
    main,
    parse_grid,
)

PUZZLE = "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"


class TestFormatGrid(unittest.TestCase):
    def test_layout(self):
        text = format_grid(parse_grid(PUZZLE))
        lines = text.splitlines()
        self.assertEqual(len(lines), 13)
        self.assertEqual(lines[0], "+-------+-------+-------+")
        self.assertEqual(lines[1], "| 5 3 . | . 7 . | . . . |")
        self.assertEqual(lines[4], "+-------+-------+-------+")
        self.assertEqual(lines[-1], "+-------+-------+-------+")

    def test_rendering_reads_back(self):
        grid = parse_grid(PUZZLE)
        self.assertEqual(parse_grid(format_grid(grid)), grid)


class TestParseGrid(unittest.TestCase):
    def test_zero_and_dot_are_empty(self):
        grid = parse_grid(PUZZLE.replace(".", "0"))
        self.assertEqual(grid, parse_grid(PUZZLE))
        self.assertEqual(grid_to_string(grid), PUZZLE)

    def test_blank_grid(self):
        self.assertEqual(parse_grid("." * 81), empty_grid())

    def test_wrong_length(self):
        with self.assertRaises(ValueError):
            parse_grid("123")

    def test_bad_character(self):
        with self.assertRaises(ValueError):
            parse_grid("x" + PUZZLE[1:])


class TestMain(unittest.TestCase):
    def run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_generate_and_solve(self):
        code, out = self.run_main(["easy", "--seed", "3", "--solve"])
        self.assertEqual(code, 0)
        self.assertIn("Generated easy puzzle", out)
        self.assertIn("Solution:", out)
        self.assertEqual(out.count("+-------+-------+-------+"), 8)

    def test_same_seed_same_output(self):
        self.assertEqual(self.run_main(["easy", "--seed", "8"]),
                         self.run_main(["EASY", "--seed", "8"]))

    def test_solve_given_puzzle(self):
        code, out = self.run_main(["--puzzle", PUZZLE])
        self.assertEqual(code, 0)
        self.assertIn("| 5 3 4 | 6 7 8 | 9 1 2 |", out)

    def test_unsolvable_puzzle(self):
        code, out = self.run_main(["--puzzle", "55" + "." * 79])
        self.assertEqual(code, 1)
        self.assertIn("No solution found.", out)

    def test_malformed_puzzle(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            self.run_main(["--puzzle", "12345"])
        self.assertEqual(ctx.exception.code, 2)

    def test_clue_count_reported(self):
        code, out = self.run_main(["medium", "--seed", "1"])
        self.assertEqual(code, 0)
        clues = count_clues(parse_grid(out.split(":", 1)[1]))
        self.assertIn(f"({clues} clues)", out)


if __name__ == "__main__":
    unittest.main()
