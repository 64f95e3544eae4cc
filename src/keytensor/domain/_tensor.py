"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects using
structural typing. Dense tensors, reference views, identifier layers and
concurrency shells all satisfy `ITensor`, so callers can compose them freely
without knowing which concrete layer they hold.

Notes
-----
- Shapes are fixed for the lifetime of a tensor. Only cell values mutate.
- Coordinates are passed as varargs: ``t.get_cell(1, 2)`` and
  ``t.set_cell(value, 1, 2)``. A rank-0 tensor is addressed with no
  coordinates at all.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, Sequence, runtime_checkable

from ._element_kind import ElementKind
from ._slice import IIndex
from .types._numpy import NDArrayLike


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` is a fixed-rank, fixed-shape, homogeneously typed container
    addressed by integer coordinates.

    Notes
    -----
    - Coordinate count must equal `rank` (`RankMismatchError` otherwise).
    - Each coordinate must lie in `[0, shape[d])` (`TensorBoundsError`
      otherwise).
    - Bulk transfer never aliases internal storage in either direction.
    """

    # ---------------------------------------------------------------------
    # Structure
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            Per-dimension sizes. Empty for a rank-0 tensor.
        """
        ...

    @property
    def rank(self) -> int:
        """
        Return the number of dimensions (0 for a scalar tensor).
        """
        ...

    @property
    def element_kind(self) -> ElementKind:
        """
        Return the element kind fixed at construction.
        """
        ...

    def numel(self) -> int:
        """
        Return the total number of cells (product of `shape`, 1 for rank 0).
        """
        ...

    # ---------------------------------------------------------------------
    # Cell access
    # ---------------------------------------------------------------------
    def get_cell(self, *coords: int) -> Any:
        """
        Return the value stored at `coords`.

        Raises
        ------
        RankMismatchError
            If `len(coords) != rank`.
        TensorBoundsError
            If any coordinate is out of range.
        """
        ...

    def set_cell(self, value: Any, *coords: int) -> None:
        """
        Store `value` at `coords`.

        Raises
        ------
        RankMismatchError
            If `len(coords) != rank`.
        TensorBoundsError
            If any coordinate is out of range.
        ElementKindError
            If `value` cannot be represented by the tensor's element kind.
        """
        ...

    def get_value(self, *coords: int) -> Any:
        """
        Generic-value analogue of `get_cell`.
        """
        ...

    def set_value(self, value: Any, *coords: int) -> None:
        """
        Generic-value analogue of `set_cell`.
        """
        ...

    # ---------------------------------------------------------------------
    # Bulk transfer
    # ---------------------------------------------------------------------
    def get_values(self) -> NDArrayLike:
        """
        Return an independent array holding every cell value.

        Returns
        -------
        NDArrayLike
            Array of shape `shape`. Mutating it never affects the tensor.
        """
        ...

    def set_values(self, values: Any) -> None:
        """
        Overwrite every cell from an array-like of shape `shape`.

        Raises
        ------
        ShapeMismatchError
            If the array's shape differs from `shape`.
        ElementKindError
            If the values cannot be represented by the element kind.
        """
        ...

    # ---------------------------------------------------------------------
    # Composition and iteration
    # ---------------------------------------------------------------------
    def get_reference_tensor(self, index: IIndex) -> "ITensor":
        """
        Return a zero-copy view of this tensor through `index`.

        Raises
        ------
        ShapeMismatchError
            If `index.is_valid_for(self)` is False.
        """
        ...

    def iterate(self) -> Sequence["ITensor"]:
        """
        Return a lazy, restartable sequence of sub-tensors along dimension 0.

        For a rank-0 tensor the sequence holds the tensor itself exactly once.
        """
        ...

    def __iter__(self) -> Iterator["ITensor"]: ...


@runtime_checkable
class IIdTensor(ITensor, Protocol):
    """
    Tensor addressable by per-dimension identifiers.

    Notes
    -----
    - One ordered identifier list per dimension, `len(ids[d]) == shape[d]`.
    - Identifiers are unique within a dimension; the same identifier may
      appear in different dimensions.
    - Identifier tables are immutable once built.
    """

    @property
    def ids(self) -> tuple[tuple[Any, ...], ...]:
        """
        Return the identifier lists, one tuple per dimension.
        """
        ...

    def index_of(self, dimension: int, identifier: Any) -> int:
        """
        Return the position of `identifier` within `dimension`.

        Raises
        ------
        IdentifierNotFoundError
            If the identifier is not in that dimension's table.
        """
        ...

    def get_cell_by_id(self, *ids: Any) -> Any: ...

    def set_cell_by_id(self, value: Any, *ids: Any) -> None: ...

    def get_value_by_id(self, *ids: Any) -> Any: ...

    def set_value_by_id(self, value: Any, *ids: Any) -> None: ...
