"""
Tests for the piece catalog and shape transforms.
"""

import unittest

import numpy as np

from blokus_engine.exceptions import InvalidOrientationError, UnknownPieceError
from blokus_engine.pieces import (
    PIECE_CATALOG, Piece, catalog_ids, flip_piece, get_orientations, get_piece,
    get_unique_orientations, normalize_offsets, orient_piece, rotate_piece
)


class TestPieceCatalog(unittest.TestCase):
    """Test the fixed catalog of 21 pieces."""

    def test_catalog_has_21_pieces(self):
        self.assertEqual(len(PIECE_CATALOG), 21)
        self.assertEqual(len(set(catalog_ids())), 21)

    def test_total_squares(self):
        """Standard Blokus sets hold 89 squares per player."""
        self.assertEqual(sum(piece.size for piece in PIECE_CATALOG), 89)

    def test_size_distribution(self):
        sizes = [piece.size for piece in PIECE_CATALOG]
        self.assertEqual(sizes.count(1), 1)
        self.assertEqual(sizes.count(2), 1)
        self.assertEqual(sizes.count(3), 2)
        self.assertEqual(sizes.count(4), 5)
        self.assertEqual(sizes.count(5), 12)

    def test_shapes_are_distinct_under_rotation_and_flip(self):
        """No two catalog pieces share any orientation."""
        seen = {}
        for piece in PIECE_CATALOG:
            for _, oriented in get_unique_orientations(piece):
                self.assertNotIn(oriented.cells, seen,
                                 f"{piece.id} duplicates {seen.get(oriented.cells)}")
            for _, oriented in get_unique_orientations(piece):
                seen[oriented.cells] = piece.id

    def test_offsets_are_normalized(self):
        for piece in PIECE_CATALOG:
            self.assertEqual(min(r for r, _ in piece.cells), 0, piece.id)
            self.assertEqual(min(c for _, c in piece.cells), 0, piece.id)
            self.assertTrue(all(r >= 0 and c >= 0 for r, c in piece.cells), piece.id)

    def test_get_piece(self):
        piece = get_piece("V3")
        self.assertEqual(piece.name, "V-Tromino")
        self.assertEqual(piece.cells, ((0, 0), (1, 0), (1, 1)))
        self.assertIs(get_piece("V3"), piece)

    def test_get_unknown_piece_raises(self):
        with self.assertRaises(UnknownPieceError):
            get_piece("Q9")
        with self.assertRaises(LookupError):
            get_piece(None)

    def test_invalid_piece_definitions(self):
        with self.assertRaises(ValueError):
            Piece("bad", "Offset", ((1, 1),))
        with self.assertRaises(ValueError):
            Piece("gap", "Gap", ((0, 0), (0, 2)))
        with self.assertRaises(ValueError):
            Piece("dup", "Duplicate", ((0, 0), (0, 0)))
        with self.assertRaises(ValueError):
            Piece("none", "Empty", ())


class TestShapeTransforms(unittest.TestCase):
    """Test rotate, flip and orientation enumeration."""

    def test_normalize_offsets(self):
        self.assertEqual(normalize_offsets([(2, 3), (1, 4)]), ((0, 1), (1, 0)))
        self.assertEqual(normalize_offsets([]), ())

    def test_rotate_domino(self):
        rotated = rotate_piece(get_piece("I2"))
        self.assertEqual(rotated.cells, ((0, 0), (1, 0)))

    def test_rotate_v_tromino(self):
        rotated = rotate_piece(get_piece("V3"))
        self.assertEqual(rotated.cells, ((0, 0), (0, 1), (1, 0)))

    def test_flip_v_tromino(self):
        flipped = flip_piece(get_piece("V3"))
        self.assertEqual(flipped.cells, ((0, 1), (1, 0), (1, 1)))

    def test_transforms_keep_identity(self):
        piece = get_piece("F")
        for transformed in (rotate_piece(piece), flip_piece(piece)):
            self.assertEqual(transformed.id, piece.id)
            self.assertEqual(transformed.name, piece.name)
            self.assertEqual(transformed.size, piece.size)

    def test_four_rotations_are_identity(self):
        for piece in PIECE_CATALOG:
            result = piece
            for _ in range(4):
                result = rotate_piece(result)
            self.assertEqual(result, piece, piece.id)

    def test_double_flip_is_identity(self):
        for piece in PIECE_CATALOG:
            self.assertEqual(flip_piece(flip_piece(piece)), piece, piece.id)

    def test_transforms_do_not_mutate(self):
        piece = get_piece("L4")
        before = piece.cells
        rotate_piece(piece)
        flip_piece(piece)
        self.assertEqual(piece.cells, before)

    def test_orientation_area_consistency(self):
        for piece in PIECE_CATALOG:
            for oriented in get_orientations(piece):
                self.assertEqual(oriented.size, piece.size, piece.id)

    def test_orient_piece_matches_composition(self):
        piece = get_piece("N")
        self.assertEqual(orient_piece(piece, 0), piece)
        self.assertEqual(orient_piece(piece, 2), rotate_piece(rotate_piece(piece)))
        self.assertEqual(orient_piece(piece, 4), flip_piece(piece))
        self.assertEqual(orient_piece(piece, 7),
                         rotate_piece(rotate_piece(rotate_piece(flip_piece(piece)))))
        self.assertEqual(get_orientations(piece),
                         [orient_piece(piece, index) for index in range(8)])

    def test_orient_piece_rejects_bad_index(self):
        piece = get_piece("I1")
        for bad in (-1, 8, True, "0"):
            with self.assertRaises(InvalidOrientationError):
                orient_piece(piece, bad)
        with self.assertRaises(ValueError):
            orient_piece(piece, 99)

    def test_orient_piece_accepts_numpy_integers(self):
        piece = get_piece("N")
        self.assertEqual(orient_piece(piece, np.int64(6)), orient_piece(piece, 6))
        with self.assertRaises(InvalidOrientationError):
            orient_piece(piece, 1.0)

    def test_unique_orientation_counts(self):
        counts = {piece.id: len(get_unique_orientations(piece)) for piece in PIECE_CATALOG}
        self.assertEqual(counts["I1"], 1)
        self.assertEqual(counts["I2"], 2)
        self.assertEqual(counts["O4"], 1)
        self.assertEqual(counts["X"], 1)
        self.assertEqual(counts["T4"], 4)
        self.assertEqual(counts["F"], 8)
        self.assertEqual(sum(counts.values()), 91)

    def test_unique_orientations_keep_lowest_index(self):
        indexes = [index for index, _ in get_unique_orientations(get_piece("I2"))]
        self.assertEqual(indexes, [0, 1])


if __name__ == '__main__':
    unittest.main()
