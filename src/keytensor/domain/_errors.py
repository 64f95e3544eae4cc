"""
Tensor access and composition exceptions for KeyTensor.

This module defines the error taxonomy raised by tensors, views, identifier
layers and concurrency shells. Every error is raised synchronously at the
point of failure and is never retried or translated by wrapping layers.

Each concrete error also derives from the closest built-in exception
(`IndexError`, `ValueError`, `KeyError`, `TypeError`) so callers that only
know the standard library hierarchy can still catch them.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class TensorError(RuntimeError):
    """
    Base class for all KeyTensor errors.
    """


class TensorBoundsError(TensorError, IndexError):
    """
    Raised when a coordinate, slice position or identifier position lies
    outside its valid range.

    Attributes
    ----------
    index : int
        The offending position.
    size : int
        The exclusive upper bound of the valid range.
    dimension : Optional[int]
        The dimension the position was checked against, if any.
    """

    def __init__(self, index: Any, size: int, dimension: Optional[int] = None) -> None:
        """
        Initialize the TensorBoundsError.

        Parameters
        ----------
        index : Any
            The out-of-range position.
        size : int
            The size of the range `[0, size)` that was violated.
        dimension : Optional[int], optional
            The dimension being addressed, or None for one-dimensional
            structures such as slices.
        """
        where = "" if dimension is None else f" for dimension {dimension}"
        super().__init__(f"Index {index!r} out of bounds{where}: valid range is [0, {size})")
        self.index = index
        self.size = size
        self.dimension = dimension


class ShapeMismatchError(TensorError, ValueError):
    """
    Raised when a shape, an index or an array is incompatible with the
    tensor it is applied to.
    """

    def __init__(self, message: str, expected: Any = None, actual: Any = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class RankMismatchError(ShapeMismatchError):
    """
    Raised when the number of coordinates or identifiers supplied does not
    equal the tensor's rank.
    """

    def __init__(self, expected: int, actual: int, what: str = "coordinates") -> None:
        """
        Initialize the RankMismatchError.

        Parameters
        ----------
        expected : int
            The tensor rank.
        actual : int
            The number of coordinates/identifiers received.
        what : str, optional
            Noun used in the message. Defaults to "coordinates".
        """
        super().__init__(
            f"Expected {expected} {what} for a rank-{expected} tensor, got {actual}",
            expected=expected,
            actual=actual,
        )


class IdentifierNotFoundError(TensorError, KeyError):
    """
    Raised when an identifier is absent from a dimension's id table.

    Attributes
    ----------
    identifier : Any
        The identifier that could not be resolved.
    dimension : int
        The dimension whose id table was searched.
    """

    def __init__(self, identifier: Any, dimension: int) -> None:
        super().__init__(identifier, dimension)
        self.identifier = identifier
        self.dimension = dimension

    def __str__(self) -> str:
        return f"Identifier {self.identifier!r} not found in dimension {self.dimension}"


class DuplicateIdentifierError(TensorError, ValueError):
    """
    Raised when an identifier appears more than once within one dimension.

    Identifiers repeated across different dimensions are permitted.
    """

    def __init__(self, identifier: Any, dimension: int) -> None:
        super().__init__(
            f"Identifier {identifier!r} is repeated in dimension {dimension}; "
            "identifiers must be unique within a dimension"
        )
        self.identifier = identifier
        self.dimension = dimension


class UnsupportedMutationError(TensorError):
    """
    Raised when a write or structural change is attempted on a fixed-size or
    read-only composition.
    """

    def __init__(self, op: str, target: str) -> None:
        """
        Initialize the UnsupportedMutationError.

        Parameters
        ----------
        op : str
            The attempted operation (e.g., "set_cell").
        target : str
            Description of the tensor that rejected it.
        """
        super().__init__(f"{op} is not supported on {target}")
        self.op = op
        self.target = target


class ElementKindError(TensorError, TypeError):
    """
    Raised when a value cannot be stored in a tensor of a given element kind.
    """

    def __init__(self, value: Any, kind: Any, reason: str = "") -> None:
        suffix = f": {reason}" if reason else ""
        super().__init__(f"Cannot store {value!r} in a {kind} tensor{suffix}")
        self.value = value
        self.kind = kind


def check_rank(coords: Sequence[Any], rank: int, what: str = "coordinates") -> None:
    """
    Raise `RankMismatchError` unless `len(coords) == rank`.
    """
    if len(coords) != rank:
        raise RankMismatchError(rank, len(coords), what)
