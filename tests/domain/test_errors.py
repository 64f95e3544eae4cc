from unittest import TestCase
import unittest

from src.keytensor.domain._errors import (
    DuplicateIdentifierError,
    ElementKindError,
    IdentifierNotFoundError,
    RankMismatchError,
    ShapeMismatchError,
    TensorBoundsError,
    TensorError,
    UnsupportedMutationError,
    check_rank,
)


class TestErrorTaxonomy(TestCase):

    def test_all_errors_share_base(self):
        for cls in (
            DuplicateIdentifierError,
            ElementKindError,
            IdentifierNotFoundError,
            RankMismatchError,
            ShapeMismatchError,
            TensorBoundsError,
            UnsupportedMutationError,
        ):
            self.assertTrue(issubclass(cls, TensorError), cls)

    def test_builtin_compatibility(self):
        self.assertTrue(issubclass(TensorBoundsError, IndexError))
        self.assertTrue(issubclass(ShapeMismatchError, ValueError))
        self.assertTrue(issubclass(RankMismatchError, ShapeMismatchError))
        self.assertTrue(issubclass(IdentifierNotFoundError, KeyError))
        self.assertTrue(issubclass(ElementKindError, TypeError))

    def test_bounds_error_attributes_and_message(self):
        err = TensorBoundsError(5, 3, dimension=1)
        self.assertEqual(err.index, 5)
        self.assertEqual(err.size, 3)
        self.assertEqual(err.dimension, 1)
        self.assertIn("dimension 1", str(err))
        self.assertIn("[0, 3)", str(err))

    def test_identifier_not_found_message_is_readable(self):
        err = IdentifierNotFoundError("z", 0)
        self.assertEqual(err.identifier, "z")
        self.assertEqual(err.dimension, 0)
        self.assertEqual(str(err), "Identifier 'z' not found in dimension 0")

    def test_rank_mismatch_attributes(self):
        err = RankMismatchError(2, 3)
        self.assertEqual(err.expected, 2)
        self.assertEqual(err.actual, 3)

    def test_check_rank(self):
        check_rank((1, 2), 2)
        with self.assertRaises(RankMismatchError):
            check_rank((1,), 2)

    def test_unsupported_mutation_message(self):
        err = UnsupportedMutationError("set_cell", "a read-only tensor")
        self.assertIn("set_cell", str(err))
        self.assertEqual(err.op, "set_cell")


if __name__ == "__main__":
    unittest.main()
