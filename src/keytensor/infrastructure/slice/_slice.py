"""
Concrete slice implementations.

A slice maps each position of a view dimension to a reference index in the
corresponding source dimension. Two canonical variants are provided:

- `IdentitySlice`: ``value_at(i) == i``; passes a dimension through unchanged.
- `MappedSlice`: an explicit mapping that may repeat or omit reference
  indices, enabling reordering, broadcasting by repetition and reduction.

Helper constructors (`range_slice`, `single_slice`, `composite_slice`) build
the common mappings.
"""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Sequence

from ...domain._errors import TensorBoundsError
from ...domain._slice import ISlice


class BaseSlice(ABC, ISlice):
    """
    Shared behaviour for slices.

    Subclasses provide `size`, `max_index` and `_value_at`; bounds checking,
    iteration, equality and composition are implemented here.
    """

    @property
    @abstractmethod
    def size(self) -> int: ...

    @property
    @abstractmethod
    def max_index(self) -> int: ...

    @abstractmethod
    def _value_at(self, position: int) -> int: ...

    def value_at(self, position: int) -> int:
        """
        Return the reference index mapped to `position`.

        Raises
        ------
        TensorBoundsError
            If `position` is not in `[0, size)`.
        """
        i = operator.index(position)
        if i < 0 or i >= self.size:
            raise TensorBoundsError(i, self.size)
        return self._value_at(i)

    def indices(self) -> list[int]:
        return list(self.iterate())

    def iterate(self) -> Sequence[int]:
        """
        Return an immutable sequence of the mapped reference indices.

        Each traversal of the returned sequence starts from the beginning.
        """
        return tuple(self._value_at(i) for i in range(self.size))

    def compose(self, inner: ISlice) -> "MappedSlice":
        """
        Return the slice that applies `inner` first and then this slice.

        ``result.value_at(i) == self.value_at(inner.value_at(i))``.

        Raises
        ------
        TensorBoundsError
            If `inner` maps outside this slice.
        """
        if inner.max_index >= self.size:
            raise TensorBoundsError(inner.max_index, self.size)
        return MappedSlice([self._value_at(i) for i in inner.iterate()])

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[int]:
        return iter(self.iterate())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseSlice):
            return NotImplemented
        return tuple(self.iterate()) == tuple(other.iterate())

    def __hash__(self) -> int:
        return hash(tuple(self.iterate()))


class IdentitySlice(BaseSlice):
    """
    Slice passing a dimension of `size` through unchanged.
    """

    __slots__ = ("_size",)

    def __init__(self, size: int) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"Slice size must be non-negative, got {size}")
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    @property
    def max_index(self) -> int:
        return self._size - 1

    def _value_at(self, position: int) -> int:
        return position

    def iterate(self) -> Sequence[int]:
        return range(self._size)

    def __repr__(self) -> str:
        return f"IdentitySlice({self._size})"


class MappedSlice(BaseSlice):
    """
    Slice backed by an explicit array of reference indices.

    Parameters
    ----------
    indices : Iterable[int]
        Reference indices in view order. Values must be non-negative and may
        repeat.

    Notes
    -----
    The mapping is copied at construction; later changes to the caller's
    array do not affect the slice.
    """

    __slots__ = ("_indices", "_max")

    def __init__(self, indices: Iterable[int]) -> None:
        values = tuple(operator.index(i) for i in indices)
        for i in values:
            if i < 0:
                raise ValueError(f"Slice indices must be non-negative, got {i}")
        self._indices = values
        self._max = max(values) if values else -1

    @property
    def size(self) -> int:
        return len(self._indices)

    @property
    def max_index(self) -> int:
        return self._max

    def _value_at(self, position: int) -> int:
        return self._indices[position]

    def iterate(self) -> Sequence[int]:
        return self._indices

    def __repr__(self) -> str:
        return f"MappedSlice({list(self._indices)})"


def range_slice(start: int, stop: int, step: int = 1) -> BaseSlice:
    """
    Return a slice over ``range(start, stop, step)``.

    ``range_slice(0, n)`` is an `IdentitySlice`.
    """
    if start == 0 and step == 1:
        return IdentitySlice(max(stop, 0))
    return MappedSlice(range(start, stop, step))


def single_slice(index: int) -> MappedSlice:
    """
    Return a size-1 slice selecting `index`.
    """
    return MappedSlice((index,))


def composite_slice(*slices: ISlice) -> MappedSlice:
    """
    Concatenate several slices into one, in order.
    """
    values: list[int] = []
    for s in slices:
        values.extend(s.iterate())
    return MappedSlice(values)
