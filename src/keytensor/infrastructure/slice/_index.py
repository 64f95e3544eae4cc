"""
Index: per-dimension slice aggregate for composed views.

An `Index` holds one slice per dimension of the *source* tensor it is
applied to. The view (target) shape is the sequence of slice sizes, except
for dimensions marked as *reduced*: a reduced dimension must have a size-1
slice, is absent from the target shape, and always translates to that
slice's single reference index.

Without reduced dimensions target rank equals source rank and translation is
exactly ``source[d] = slices[d].value_at(target[d])``.
"""

from __future__ import annotations

import operator
from typing import Any, Iterable, Mapping, Sequence, Union

from typing_extensions import Self

from ...domain._slice import IIndex, ISlice
from ..utils._coordinates import normalize_coords
from ._slice import IdentitySlice, MappedSlice

Selection = Union[int, Sequence[int], ISlice, None]


class Index(IIndex):
    """
    Aggregate of per-dimension slices.

    Parameters
    ----------
    slices : Sequence[ISlice]
        One slice per source dimension.
    reduced : Iterable[int], optional
        Source dimensions to drop from the target shape. Each must carry a
        size-1 slice.

    Raises
    ------
    ValueError
        If a reduced dimension is out of range or its slice is not size 1.
    """

    __slots__ = ("_slices", "_reduced", "_kept", "_shape")

    def __init__(self, slices: Sequence[ISlice], reduced: Iterable[int] = ()) -> None:
        self._slices = tuple(slices)
        reduced = frozenset(operator.index(d) for d in reduced)
        for d in reduced:
            if d < 0 or d >= len(self._slices):
                raise ValueError(
                    f"Reduced dimension {d} out of range for an index of rank {len(self._slices)}"
                )
            if self._slices[d].size != 1:
                raise ValueError(
                    f"Only size-1 slices can be reduced; dimension {d} has size {self._slices[d].size}"
                )
        self._reduced = reduced
        self._kept = tuple(d for d in range(len(self._slices)) if d not in reduced)
        self._shape = tuple(self._slices[d].size for d in self._kept)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def identity(cls, shape: Sequence[int]) -> Self:
        """
        Return the index that maps a tensor of `shape` onto itself.
        """
        return cls([IdentitySlice(s) for s in shape])

    @classmethod
    def fixing(cls, shape: Sequence[int], dimension: int, position: int) -> Self:
        """
        Return the index selecting `position` along `dimension` and dropping
        that dimension from the view.
        """
        slices: list[ISlice] = [IdentitySlice(s) for s in shape]
        slices[dimension] = MappedSlice((position,))
        return cls(slices, reduced=(dimension,))

    @classmethod
    def select(cls, shape: Sequence[int], selections: Mapping[int, Selection]) -> Self:
        """
        Build an index from per-dimension selections.

        Parameters
        ----------
        shape : Sequence[int]
            Shape of the source tensor.
        selections : Mapping[int, Selection]
            Keys are source dimensions. Values are:

            - an int: fix that position and reduce the dimension;
            - a sequence of ints: an explicit mapping;
            - an `ISlice`: used as is;
            - None: identity (same as leaving the dimension out).

        Examples
        --------
        >>> Index.select((3, 4), {0: 1, 1: [3, 2]}).shape
        (2,)
        """
        slices: list[ISlice] = []
        reduced: list[int] = []
        for d, size in enumerate(shape):
            sel = selections.get(d)
            if sel is None:
                slices.append(IdentitySlice(size))
            elif isinstance(sel, ISlice):
                slices.append(sel)
            elif isinstance(sel, Sequence):
                slices.append(MappedSlice(sel))
            else:
                slices.append(MappedSlice((operator.index(sel),)))
                reduced.append(d)
        for d in selections:
            if d < 0 or d >= len(shape):
                raise ValueError(f"Selection for dimension {d} out of range for rank {len(shape)}")
        return cls(slices, reduced=reduced)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def rank(self) -> int:
        return len(self._shape)

    @property
    def source_rank(self) -> int:
        return len(self._slices)

    @property
    def slices(self) -> tuple[ISlice, ...]:
        return self._slices

    @property
    def reduced(self) -> frozenset[int]:
        return self._reduced

    # ------------------------------------------------------------------
    # Validation and translation
    # ------------------------------------------------------------------
    def is_valid_for(self, tensor: Any) -> bool:
        """
        Return True iff this index can be applied to `tensor`.

        The source rank must equal the tensor's rank and, for every dimension
        d, ``slices[d].max_index < tensor.shape[d]``.
        """
        shape = tuple(tensor.shape)
        if len(shape) != len(self._slices):
            return False
        return all(s.max_index < size for s, size in zip(self._slices, shape))

    def translate(self, *coords: int) -> tuple[int, ...]:
        """
        Translate target coordinates into source coordinates.

        Raises
        ------
        RankMismatchError
            If `len(coords)` differs from the target rank.
        TensorBoundsError
            If a coordinate lies outside the target shape.
        """
        coords = normalize_coords(coords, self._shape)
        source = [0] * len(self._slices)
        for d in self._reduced:
            source[d] = self._slices[d].value_at(0)
        for d, c in zip(self._kept, coords):
            source[d] = self._slices[d].value_at(c)
        return tuple(source)

    def source_indices(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(s.iterate()) for s in self._slices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Index):
            return NotImplemented
        return self._slices == other._slices and self._reduced == other._reduced

    def __hash__(self) -> int:
        return hash((self._slices, self._reduced))

    def __repr__(self) -> str:
        reduced = f", reduced={sorted(self._reduced)}" if self._reduced else ""
        return f"Index({list(self._slices)}{reduced})"
