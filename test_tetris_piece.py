#!/usr/bin/env python3
"""Tests for tetris_piece.py: the static piece catalog."""

import unittest

from tetris_piece import (PIECES, SHAPES, ROTATIONS, ActivePiece, shape,
                          rotation_count, kick_offsets, mask_cells)


class TestCatalog(unittest.TestCase):

    def test_seven_kinds(self):
        self.assertEqual(PIECES, ("I", "L", "O", "T", "S", "Z", "J"))
        self.assertEqual(set(SHAPES), set(PIECES))
        self.assertEqual(set(ROTATIONS), set(PIECES))

    def test_rotation_counts(self):
        self.assertEqual(rotation_count("O"), 1)
        for kind in "ISZ":
            self.assertEqual(rotation_count(kind), 2)
        for kind in "LTJ":
            self.assertEqual(rotation_count(kind), 4)

    def test_used_masks_have_four_cells(self):
        for kind in PIECES:
            for rotation in range(rotation_count(kind)):
                with self.subTest(kind=kind, rotation=rotation):
                    mask = shape(kind, rotation)
                    self.assertEqual(len(mask), 4)
                    self.assertTrue(all(len(row) == 4 for row in mask))
                    self.assertEqual(sum(map(sum, mask)), 4)

    def test_unused_slots_are_empty(self):
        for kind in PIECES:
            for rotation in range(rotation_count(kind), 4):
                with self.subTest(kind=kind, rotation=rotation):
                    self.assertEqual(sum(map(sum, shape(kind, rotation))), 0)

    def test_rotations_are_distinct(self):
        for kind in PIECES:
            masks = [str(shape(kind, r)) for r in range(rotation_count(kind))]
            self.assertEqual(len(set(masks)), len(masks), kind)


class TestKicks(unittest.TestCase):

    def test_i_gets_seven_offsets(self):
        offsets = kick_offsets("I")
        self.assertEqual(len(offsets), 7)
        self.assertIn((2, 0), offsets)
        self.assertIn((-2, 0), offsets)

    def test_others_get_first_five(self):
        for kind in "LOTSZJ":
            self.assertEqual(kick_offsets(kind),
                             [(0, 0), (1, 0), (-1, 0), (0, 1), (0, -1)])


class TestCells(unittest.TestCase):

    def test_i_mask_cells(self):
        """The I bar sits on the second row of its template."""
        self.assertEqual(mask_cells("I", 0, 3, 0), [(3, 1), (4, 1), (5, 1), (6, 1)])

    def test_active_piece_caches_cells(self):
        piece = ActivePiece.at("O", 0, 2, 7)
        self.assertEqual((piece.kind, piece.rotation, piece.x, piece.y), ("O", 0, 2, 7))
        self.assertEqual(sorted(piece.cells), [(3, 7), (3, 8), (4, 7), (4, 8)])


if __name__ == "__main__":
    unittest.main()
