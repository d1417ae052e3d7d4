#!/usr/bin/env python3
"""Tests for tetris_board.py: grid helpers."""

import unittest

from tetris_board import (new_grid, new_preview, in_bounds, set_cells,
                          clear_cells, fits, row_full, shift_down, sweep,
                          has_cells, freeze)
from tetris_piece import COLS, ROWS


class TestGrid(unittest.TestCase):

    def test_dimensions(self):
        board = new_grid()
        self.assertEqual(len(board), ROWS)
        self.assertTrue(all(len(row) == COLS for row in board))
        self.assertFalse(has_cells(board))
        preview = new_preview()
        self.assertEqual((len(preview), len(preview[0])), (4, 4))

    def test_rows_are_independent(self):
        board = new_grid()
        board[0][0] = "I"
        self.assertIsNone(board[1][0])

    def test_bounds(self):
        self.assertTrue(in_bounds(0, 0))
        self.assertTrue(in_bounds(COLS - 1, ROWS - 1))
        self.assertFalse(in_bounds(-1, 0))
        self.assertFalse(in_bounds(COLS, 0))
        self.assertFalse(in_bounds(0, ROWS))

    def test_set_and_clear(self):
        board = new_grid()
        set_cells(board, [(0, 0), (9, 19), (10, 0)], "T")
        self.assertEqual(board[0][0], "T")
        self.assertEqual(board[19][9], "T")
        clear_cells(board, [(0, 0)])
        self.assertIsNone(board[0][0])

    def test_fits(self):
        board = new_grid()
        board[5][5] = "O"
        self.assertTrue(fits(board, [(0, 0), (4, 5)]))
        self.assertFalse(fits(board, [(5, 5)]))
        self.assertFalse(fits(board, [(0, ROWS)]))
        self.assertFalse(fits(board, [(-1, 3)]))


class TestRows(unittest.TestCase):

    def test_row_full(self):
        board = new_grid()
        board[19] = ["Z"] * COLS
        self.assertTrue(row_full(board, 19))
        board[19][3] = None
        self.assertFalse(row_full(board, 19))

    def test_shift_down(self):
        board = new_grid()
        board[0][1] = "S"
        board[18][2] = "L"
        board[19] = ["Z"] * COLS
        shift_down(board, 19)
        self.assertEqual(board[19][2], "L")
        self.assertEqual(board[1][1], "S")
        self.assertEqual(board[0], [None] * COLS)
        self.assertFalse(row_full(board, 19))

    def test_sweep_caps_at_four(self):
        board = new_grid()
        for y in range(15, 20):
            board[y] = ["J"] * COLS
        self.assertEqual(sweep(board), 4)
        self.assertTrue(row_full(board, 19))
        self.assertFalse(has_cells(board[:19]))


class TestFreeze(unittest.TestCase):

    def test_unallocated(self):
        grid = freeze(None, 2, 3)
        self.assertEqual(grid, ((None, None, None), (None, None, None)))

    def test_copy(self):
        board = new_grid()
        grid = freeze(board, ROWS, COLS)
        board[0][0] = "I"
        self.assertIsNone(grid[0][0])


if __name__ == "__main__":
    unittest.main()
