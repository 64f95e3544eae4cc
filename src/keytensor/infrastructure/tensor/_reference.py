"""
Reference tensor: a zero-copy view composed from a source tensor and an
`Index`.

A `ReferenceTensor` stores no cell data. Every access is translated through
the index and forwarded to the source tensor, so:

- writes through the view are immediately visible on the source and vice
  versa (full aliasing);
- views nest: a reference tensor can be the source of another index, and
  translation chains through every level;
- any layer between the view and the data (concurrency shells, read-only
  shells, identifier tables) keeps applying, because the view only talks to
  its source through the public tensor contract.

The view holds a plain (non-owning in spirit) reference to its source. The
source must stay valid for as long as the view is used; nothing beyond the
construction-time index check enforces this.
"""

from __future__ import annotations

import logging
from typing import Any

from ...domain._element_kind import ElementKind
from ...domain._errors import ShapeMismatchError
from ...domain._slice import IIndex
from ...domain._tensor import ITensor
from ..utils._coordinates import coordinates
from ._base import AbstractTensor
from ._storage import empty_value_array, from_storage_value, to_storage_array

logger = logging.getLogger(__name__)


class ReferenceTensor(AbstractTensor):
    """
    View of `source` through `index`.

    Parameters
    ----------
    source : ITensor
        Tensor the view reads from and writes to.
    index : IIndex
        Mapping from view coordinates to source coordinates.

    Raises
    ------
    ShapeMismatchError
        If `index` is not valid for `source`. Raised before any cell access.

    Notes
    -----
    - Shape is `index.shape`; element kind is the source's.
    - Bulk transfer walks the view cell by cell through the source. When the
      index repeats a source cell, the last write to it wins.
    """

    __slots__ = ("_source", "_index")

    def __init__(self, source: ITensor, index: IIndex) -> None:
        if not index.is_valid_for(source):
            raise ShapeMismatchError(
                f"Index with source maxima {[s.max_index for s in index.slices]} "
                f"is not valid for a tensor of shape {tuple(source.shape)}",
                expected=tuple(s.max_index + 1 for s in index.slices),
                actual=tuple(source.shape),
            )
        self._source = source
        self._index = index
        logger.debug(
            "Composed view of shape %s over %s", index.shape, type(source).__name__
        )

    @property
    def source(self) -> ITensor:
        return self._source

    @property
    def index(self) -> IIndex:
        return self._index

    @property
    def shape(self) -> tuple[int, ...]:
        return self._index.shape

    @property
    def element_kind(self) -> ElementKind:
        return self._source.element_kind

    def get_cell(self, *coords: int) -> Any:
        return self._source.get_cell(*self._index.translate(*coords))

    def set_cell(self, value: Any, *coords: int) -> None:
        self._source.set_cell(value, *self._index.translate(*coords))

    def get_values(self):
        """
        Gather every view cell into a new array of shape `shape`.
        """
        flat = empty_value_array((self.numel(),), self.element_kind)
        for offset, coord in enumerate(coordinates(self.shape)):
            flat[offset] = self.get_cell(*coord)
        return flat.reshape(self.shape)

    def set_values(self, values: Any) -> None:
        """
        Scatter an array of shape `shape` into the source.

        The whole array is validated against the shape and element kind
        before the first write.
        """
        kind = self.element_kind
        staged = to_storage_array(values, kind, self.shape)
        for coord in coordinates(self.shape):
            self.set_cell(from_storage_value(staged[coord], kind), *coord)
