"""
Dense tensor implementation (NumPy backend).

`DenseTensor` owns a flat, homogeneous NumPy buffer whose dtype is selected
by the tensor's `ElementKind`. One generic class covers every rank and every
element kind; there is no per-rank or per-kind specialization.

Design notes
------------
- The backing buffer is one-dimensional. Cell offsets are computed from
  row-major strides fixed at construction, so rank-0 tensors (one cell,
  offset 0) need no special casing.
- Values are validated and converted by the storage helpers in
  `_storage.py` on every write; reads return native Python values.
- The buffer is never exposed: `get_values` returns a reshaped copy and
  `set_values` copies its input.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np

from ...domain._element_kind import ElementKind
from ..utils._coordinates import normalize_coords, product
from ._base import AbstractTensor
from ._storage import (
    allocate,
    from_storage_value,
    to_storage_array,
    to_storage_value,
    to_value_array,
)

logger = logging.getLogger(__name__)


class DenseTensor(AbstractTensor):
    """
    Tensor owning a contiguous homogeneous backing store.

    Parameters
    ----------
    shape : Sequence[int]
        Per-dimension sizes. An empty sequence creates a rank-0 tensor.
    kind : ElementKind or str, optional
        Element kind. Defaults to FLOAT64.
    fill : Any, optional
        Initial value of every cell. Defaults to the kind's default value
        (0, 0.0, False, "\\x00" or None).

    Raises
    ------
    ValueError
        If a dimension is negative or `kind` is unknown.
    ElementKindError
        If `fill` is not valid for `kind`.

    Notes
    -----
    Dense tensors are not thread-safe. Wrap them with
    `ConcurrentTensorShell` before sharing them between threads.
    """

    __slots__ = ("_shape", "_kind", "_strides", "_data")

    def __init__(
        self,
        shape: Sequence[int],
        kind: "ElementKind | str" = ElementKind.FLOAT64,
        fill: Any = None,
    ) -> None:
        self._shape = tuple(int(s) for s in shape)
        if any(s < 0 for s in self._shape):
            raise ValueError(f"Tensor dimensions must be non-negative, got {self._shape}")
        self._kind = ElementKind.parse(kind)
        self._strides = self.__compute_strides(self._shape)
        self._data = allocate((product(self._shape),), self._kind, fill)
        logger.debug("Allocated dense %s tensor of shape %s", self._kind, self._shape)

    @staticmethod
    def __compute_strides(shape: tuple[int, ...]) -> tuple[int, ...]:
        strides = [1] * len(shape)
        for d in range(len(shape) - 2, -1, -1):
            strides[d] = strides[d + 1] * shape[d + 1]
        return tuple(strides)

    def _offset(self, coords: Sequence[int]) -> int:
        c = normalize_coords(coords, self._shape)
        return sum(i * s for i, s in zip(c, self._strides))

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def element_kind(self) -> ElementKind:
        return self._kind

    def get_cell(self, *coords: int) -> Any:
        return from_storage_value(self._data[self._offset(coords)], self._kind)

    def set_cell(self, value: Any, *coords: int) -> None:
        offset = self._offset(coords)
        self._data[offset] = to_storage_value(value, self._kind)

    def get_values(self) -> np.ndarray:
        """
        Return a copy of every cell value as an ndarray of shape `shape`.

        Returns
        -------
        np.ndarray
            Independent array; CHAR tensors return a `<U1` array.
        """
        return to_value_array(self._data.reshape(self._shape), self._kind)

    def set_values(self, values: Any) -> None:
        """
        Overwrite every cell from an array-like of shape `shape`.

        The input is fully validated before any cell changes.

        Raises
        ------
        ShapeMismatchError
            If the shape of `values` differs from `shape`.
        ElementKindError
            If a value is invalid for the element kind.
        """
        self._data[...] = to_storage_array(values, self._kind, self._shape).reshape(-1)

    def fill(self, value: Any) -> None:
        """
        Set every cell to `value`.
        """
        self._data.fill(to_storage_value(value, self._kind))

    def debug_storage_repr(self) -> str:
        return (
            f"DenseTensor storage: dtype={self._data.dtype}, "
            f"cells={self._data.size}, shape={self._shape}"
        )
