"""
Slice and index interface definitions.

A slice maps the positions of one view dimension onto reference indices of a
source dimension. An index aggregates one slice per source dimension and
translates view coordinates into source coordinates. Both are described here
as structural protocols so tensors can type against them without importing
the concrete implementations.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ISlice(Protocol):
    """
    Per-dimension mapping from view positions to source reference indices.

    The mapping need not be injective or surjective: values may repeat
    (broadcasting by repetition) and source indices may be omitted.
    """

    @property
    def size(self) -> int:
        """
        Number of positions in the slice.
        """
        ...

    @property
    def max_index(self) -> int:
        """
        Largest reference index in the mapping, or -1 for an empty slice.

        Cached at construction so view composition can fail fast.
        """
        ...

    def value_at(self, position: int) -> int:
        """
        Return the reference index mapped to `position`.

        Raises
        ------
        TensorBoundsError
            If `position` is not in `[0, size)`.
        """
        ...

    def indices(self) -> list[int]:
        """
        Return a fresh list of every mapped reference index, in order.
        """
        ...

    def iterate(self) -> Iterable[int]:
        """
        Return a restartable iterable over the mapped reference indices.
        """
        ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[int]: ...


@runtime_checkable
class IIndex(Protocol):
    """
    Aggregate of per-dimension slices describing a composed view.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Shape of the view (target) produced by this index.
        """
        ...

    @property
    def source_rank(self) -> int:
        """
        Rank of the tensors this index can be applied to.
        """
        ...

    @property
    def slices(self) -> tuple[ISlice, ...]:
        """
        One slice per source dimension.
        """
        ...

    def is_valid_for(self, tensor: "object") -> bool:
        """
        Return True iff every slice's `max_index` is below the matching
        dimension size of `tensor`.
        """
        ...

    def translate(self, *coords: int) -> tuple[int, ...]:
        """
        Translate view coordinates into source coordinates.
        """
        ...

    def source_indices(self) -> Sequence[Sequence[int]]:
        """
        Return, per source dimension, the reference indices in view order.
        """
        ...
