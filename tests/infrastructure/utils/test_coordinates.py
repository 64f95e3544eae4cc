from unittest import TestCase
import unittest

import numpy as np

from src.keytensor.domain._errors import RankMismatchError, TensorBoundsError
from src.keytensor.infrastructure.utils import coordinates, normalize_coords, product


class TestCoordinates(TestCase):

    def test_normalize_accepts_numpy_integers(self):
        coords = normalize_coords((np.int64(1), 2), (2, 3))
        self.assertEqual(coords, (1, 2))
        self.assertIs(type(coords[0]), int)

    def test_normalize_rejects_negative(self):
        with self.assertRaises(TensorBoundsError):
            normalize_coords((-1,), (3,))

    def test_normalize_rejects_wrong_rank(self):
        with self.assertRaises(RankMismatchError):
            normalize_coords((0, 0), (3,))

    def test_normalize_rejects_non_integers(self):
        with self.assertRaises(TypeError):
            normalize_coords((1.0,), (3,))

    def test_coordinates_row_major(self):
        self.assertEqual(list(coordinates((2, 2))), [(0, 0), (0, 1), (1, 0), (1, 1)])

    def test_coordinates_rank_zero_and_empty(self):
        self.assertEqual(list(coordinates(())), [()])
        self.assertEqual(list(coordinates((3, 0))), [])

    def test_product(self):
        self.assertEqual(product(()), 1)
        self.assertEqual(product((2, 3, 4)), 24)


if __name__ == "__main__":
    unittest.main()
