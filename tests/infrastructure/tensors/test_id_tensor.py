from unittest import TestCase
import unittest

import numpy as np

from src.keytensor.domain._element_kind import ElementKind
from src.keytensor.domain._errors import (
    DuplicateIdentifierError,
    IdentifierNotFoundError,
    RankMismatchError,
    ShapeMismatchError,
    TensorBoundsError,
)
from src.keytensor.domain._tensor import IIdTensor
from src.keytensor.infrastructure.slice import IdentitySlice, Index, MappedSlice
from src.keytensor.infrastructure.tensor import DenseTensor, IdTensor


class TestIdTensorConstruction(TestCase):

    def test_rank_mismatch(self):
        with self.assertRaises(RankMismatchError):
            IdTensor(DenseTensor((2, 2)), [["a", "b"]])

    def test_length_mismatch(self):
        with self.assertRaises(ShapeMismatchError):
            IdTensor(DenseTensor((3,)), [["a", "b"]])

    def test_duplicate_within_dimension(self):
        with self.assertRaises(DuplicateIdentifierError) as ctx:
            IdTensor(DenseTensor((3,)), [["a", "b", "a"]])
        self.assertEqual(ctx.exception.dimension, 0)

    def test_same_id_across_dimensions_is_allowed(self):
        t = IdTensor(DenseTensor((2, 2)), [["a", "b"], ["b", "a"]])
        self.assertEqual(t.positions_of("a", "a"), (0, 1))

    def test_satisfies_protocol(self):
        self.assertIsInstance(IdTensor(DenseTensor((1,)), [["x"]]), IIdTensor)


class TestIdTensorAccess(TestCase):

    def setUp(self):
        self.t = IdTensor(DenseTensor((3,), ElementKind.INT32), [["a", "b", "c"]])

    def test_id_and_position_address_the_same_cell(self):
        self.t.set_cell(5, 1)
        self.assertEqual(self.t.get_cell_by_id("b"), self.t.get_cell(1))
        self.t.set_cell_by_id(8, "c")
        self.assertEqual(self.t.get_cell(2), 8)
        self.assertEqual(self.t.get_value_by_id("c"), 8)
        self.t.set_value_by_id(9, "a")
        self.assertEqual(self.t.get_value(0), 9)

    def test_unknown_identifier(self):
        with self.assertRaises(IdentifierNotFoundError) as ctx:
            self.t.get_cell_by_id("z")
        self.assertEqual(ctx.exception.identifier, "z")
        self.assertEqual(ctx.exception.dimension, 0)

    def test_unhashable_identifier_is_not_found(self):
        with self.assertRaises(IdentifierNotFoundError):
            self.t.get_cell_by_id(["a"])

    def test_wrong_number_of_ids(self):
        with self.assertRaises(RankMismatchError):
            self.t.get_cell_by_id("a", "b")

    def test_id_tables(self):
        self.assertEqual(self.t.ids, (("a", "b", "c"),))
        self.assertEqual(self.t.get_ids(0), ("a", "b", "c"))
        self.assertEqual(self.t.index_of(0, "c"), 2)
        with self.assertRaises(TensorBoundsError):
            self.t.get_ids(1)
        with self.assertRaises(TensorBoundsError):
            self.t.index_of(1, "a")

    def test_shares_storage_with_underlying_tensor(self):
        self.t.tensor.set_cell(4, 0)
        self.assertEqual(self.t.get_cell_by_id("a"), 4)
        self.t.set_values([1, 2, 3])
        self.assertEqual(self.t.tensor.get_values().tolist(), [1, 2, 3])
        self.assertEqual(self.t.shape, (3,))
        self.assertIs(self.t.element_kind, ElementKind.INT32)


class TestIdTensorTwoDimensional(TestCase):

    def setUp(self):
        dense = DenseTensor((2, 3), ElementKind.INT64)
        dense.set_values(np.arange(6).reshape(2, 3))
        self.t = IdTensor(dense, [["r0", "r1"], ["x", "y", "z"]])

    def test_by_id_matches_positional(self):
        for i, row in enumerate(self.t.get_ids(0)):
            for j, col in enumerate(self.t.get_ids(1)):
                self.assertEqual(self.t.get_cell_by_id(row, col), self.t.get_cell(i, j))

    def test_reference_view_projects_ids(self):
        view = self.t.get_reference_tensor(Index([MappedSlice([1]), MappedSlice([2, 0])]))
        self.assertIsInstance(view, IdTensor)
        self.assertEqual(view.ids, (("r1",), ("z", "x")))
        self.assertEqual(view.get_cell_by_id("r1", "x"), 3)
        view.set_cell_by_id(-1, "r1", "z")
        self.assertEqual(self.t.get_cell_by_id("r1", "z"), -1)

    def test_reduced_view_drops_ids(self):
        view = self.t.get_reference_tensor(Index.fixing(self.t.shape, 0, 0))
        self.assertEqual(view.ids, (("x", "y", "z"),))
        self.assertEqual(view.get_cell_by_id("y"), 1)

    def test_repeating_view_is_positional(self):
        index = Index([IdentitySlice(2), MappedSlice([0, 0, 2])])
        self.assertTrue(index.is_valid_for(self.t))
        view = self.t.get_reference_tensor(index)
        self.assertNotIsInstance(view, IdTensor)
        self.assertEqual(view.shape, (2, 3))
        self.assertEqual(view.get_values().tolist(), [[0, 0, 2], [3, 3, 5]])
        view.set_cell(-4, 1, 1)
        self.assertEqual(self.t.get_cell_by_id("r1", "x"), -4)
        self.assertEqual(view.get_cell(1, 0), -4)

    def test_repeating_view_on_underlying_tensor(self):
        view = self.t.tensor.get_reference_tensor(Index([IdentitySlice(2), MappedSlice([0, 0])]))
        self.assertEqual(view.get_values().tolist(), [[0, 0], [3, 3]])

    def test_iteration_yields_id_tensors(self):
        rows = list(self.t.iterate())
        self.assertEqual(len(rows), 2)
        for row in rows:
            self.assertIsInstance(row, IdTensor)
            self.assertEqual(row.ids, (("x", "y", "z"),))
        self.assertEqual(rows[1].get_cell_by_id("z"), 5)


if __name__ == "__main__":
    unittest.main()
