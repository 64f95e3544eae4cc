from unittest import TestCase
import random
import unittest

from src.keytensor.domain._errors import TensorBoundsError
from src.keytensor.domain._slice import ISlice
from src.keytensor.infrastructure.slice import (
    IdentitySlice,
    MappedSlice,
    composite_slice,
    range_slice,
    single_slice,
)


class _SliceContract:
    """Checks shared by every slice variant; subclasses provide `indices`."""

    indices: list[int]

    def make(self, indices):
        raise NotImplementedError

    def setUp(self):
        self.slice = self.make(self.indices)

    def test_size(self):
        self.assertEqual(self.slice.size, len(self.indices))
        self.assertEqual(len(self.slice), len(self.indices))

    def test_value_at(self):
        i = random.randrange(len(self.indices))
        self.assertEqual(self.slice.value_at(i), self.indices[i])

    def test_value_at_too_low(self):
        with self.assertRaises(TensorBoundsError):
            self.slice.value_at(-1)

    def test_value_at_too_high(self):
        with self.assertRaises(TensorBoundsError):
            self.slice.value_at(len(self.indices))

    def test_indices_returns_a_copy(self):
        got = self.slice.indices()
        self.assertEqual(got, self.indices)
        got[0] = 999
        self.assertEqual(self.slice.indices(), self.indices)

    def test_max_index(self):
        self.assertEqual(self.slice.max_index, max(self.indices))

    def test_iterate_is_restartable(self):
        seq = self.slice.iterate()
        self.assertEqual(list(seq), self.indices)
        self.assertEqual(list(seq), self.indices)
        self.assertEqual(list(self.slice), self.indices)

    def test_satisfies_protocol(self):
        self.assertIsInstance(self.slice, ISlice)


class TestMappedSlice(_SliceContract, TestCase):
    indices = [4, 3, 4, 8, 0]

    def make(self, indices):
        return MappedSlice(indices)

    def test_documented_example(self):
        s = MappedSlice([4, 3, 4, 8, 0])
        self.assertEqual(s.size, 5)
        self.assertEqual(s.max_index, 8)
        self.assertEqual(s.value_at(3), 8)
        self.assertEqual(s.indices(), [4, 3, 4, 8, 0])

    def test_source_array_is_copied(self):
        src = [1, 2, 3]
        s = MappedSlice(src)
        src[0] = 7
        self.assertEqual(s.value_at(0), 1)

    def test_negative_values_rejected(self):
        with self.assertRaises(ValueError):
            MappedSlice([0, -1])

    def test_empty_slice(self):
        s = MappedSlice([])
        self.assertEqual(s.size, 0)
        self.assertEqual(s.max_index, -1)
        self.assertEqual(s.indices(), [])


class TestIdentitySlice(_SliceContract, TestCase):
    indices = list(range(6))

    def make(self, indices):
        return IdentitySlice(len(indices))

    def test_negative_size_rejected(self):
        with self.assertRaises(ValueError):
            IdentitySlice(-1)

    def test_equals_equivalent_mapping(self):
        self.assertEqual(IdentitySlice(3), MappedSlice([0, 1, 2]))
        self.assertEqual(hash(IdentitySlice(3)), hash(MappedSlice([0, 1, 2])))


class TestSliceHelpers(TestCase):

    def test_range_slice(self):
        self.assertIsInstance(range_slice(0, 4), IdentitySlice)
        self.assertEqual(range_slice(1, 7, 2).indices(), [1, 3, 5])

    def test_single_slice(self):
        s = single_slice(5)
        self.assertEqual(s.size, 1)
        self.assertEqual(s.max_index, 5)

    def test_composite_slice(self):
        s = composite_slice(MappedSlice([3, 1]), IdentitySlice(2))
        self.assertEqual(s.indices(), [3, 1, 0, 1])

    def test_compose(self):
        outer = MappedSlice([10, 20, 30])
        inner = MappedSlice([2, 2, 0])
        self.assertEqual(outer.compose(inner).indices(), [30, 30, 10])

    def test_compose_out_of_range(self):
        with self.assertRaises(TensorBoundsError):
            MappedSlice([1, 2]).compose(MappedSlice([2]))


if __name__ == "__main__":
    unittest.main()
