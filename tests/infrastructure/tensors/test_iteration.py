from unittest import TestCase
import unittest

import numpy as np

from src.keytensor.domain._element_kind import ElementKind
from src.keytensor.domain._errors import TensorBoundsError
from src.keytensor.infrastructure.tensor import DenseTensor, ReferenceTensor, TensorSequence


class TestTensorIteration(TestCase):

    def setUp(self):
        self.t = DenseTensor((3, 2), ElementKind.INT32)
        self.t.set_values(np.arange(6, dtype=np.int32).reshape(3, 2))

    def test_yields_one_sub_tensor_per_position(self):
        subs = list(self.t.iterate())
        self.assertEqual(len(subs), 3)
        for i, sub in enumerate(subs):
            self.assertIsInstance(sub, ReferenceTensor)
            self.assertEqual(sub.shape, (2,))
            self.assertEqual(sub.get_values().tolist(), [2 * i, 2 * i + 1])

    def test_sub_tensors_alias_the_source(self):
        sub = self.t.iterate()[1]
        sub.set_cell(-1, 0)
        self.assertEqual(self.t.get_cell(1, 0), -1)

    def test_sequence_is_restartable(self):
        seq = self.t.iterate()
        self.assertIsInstance(seq, TensorSequence)
        first = [s.get_values().tolist() for s in seq]
        second = [s.get_values().tolist() for s in seq]
        self.assertEqual(first, second)

    def test_python_iteration_matches_iterate(self):
        self.assertEqual(
            [s.get_cell(0) for s in self.t],
            [s.get_cell(0) for s in self.t.iterate()],
        )

    def test_random_access(self):
        seq = self.t.iterate()
        self.assertEqual(seq[-1].get_cell(1), 5)
        self.assertEqual([s.get_cell(0) for s in seq[0:2]], [0, 2])
        with self.assertRaises(TensorBoundsError):
            seq[3]

    def test_rank_zero_yields_itself_once(self):
        t = DenseTensor((), ElementKind.INT32, fill=4)
        items = list(t.iterate())
        self.assertEqual(len(items), 1)
        self.assertIs(items[0], t)

    def test_rank_one_yields_rank_zero_views(self):
        t = DenseTensor((3,), ElementKind.INT32)
        t.set_values([7, 8, 9])
        cells = [s.get_cell() for s in t]
        self.assertEqual(cells, [7, 8, 9])

    def test_empty_leading_dimension(self):
        self.assertEqual(list(DenseTensor((0, 4)).iterate()), [])

    def test_nested_iteration(self):
        t = DenseTensor((2, 2, 2), ElementKind.INT32)
        t.set_values(np.arange(8, dtype=np.int32).reshape(2, 2, 2))
        flat = [cell.get_cell() for plane in t for row in plane for cell in row]
        self.assertEqual(flat, list(range(8)))


if __name__ == "__main__":
    unittest.main()
