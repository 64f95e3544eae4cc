"""
Identifier-addressed tensor layer.

`IdTensor` adds one ordered identifier list per dimension on top of any
tensor (dense, reference view, shell). Cells can then be addressed by
identifiers instead of positions:

    t = IdTensor(DenseTensor((2, 3)), [["x", "y"], ["a", "b", "c"]])
    t.set_cell_by_id(1.5, "y", "c")      # same cell as t.set_cell(1.5, 1, 2)

Design notes
------------
- The id -> position table of each dimension is built once, at
  construction, and never changes. To change identifiers, build a new
  IdTensor over the same tensor.
- Identifiers must be hashable and unique within their dimension. The same
  identifier may appear in different dimensions.
- Positional access is forwarded to the underlying tensor unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Sequence

from ...domain._element_kind import ElementKind
from ...domain._errors import (
    DuplicateIdentifierError,
    IdentifierNotFoundError,
    RankMismatchError,
    ShapeMismatchError,
    TensorBoundsError,
    check_rank,
)
from ...domain._slice import IIndex
from ...domain._tensor import IIdTensor, ITensor
from ._base import AbstractTensor

logger = logging.getLogger(__name__)


class IdTensor(AbstractTensor, IIdTensor):
    """
    Tensor addressable by per-dimension identifiers.

    Parameters
    ----------
    tensor : ITensor
        The underlying tensor. Its shape and element kind are shared.
    ids : Sequence[Sequence[Hashable]]
        One identifier list per dimension; `len(ids[d])` must equal
        `tensor.shape[d]`.

    Raises
    ------
    RankMismatchError
        If the number of identifier lists differs from the tensor's rank.
    ShapeMismatchError
        If an identifier list's length differs from its dimension's size.
    DuplicateIdentifierError
        If an identifier repeats within one dimension.
    """

    __slots__ = ("_tensor", "_ids", "_tables")

    def __init__(self, tensor: ITensor, ids: Sequence[Sequence[Hashable]]) -> None:
        shape = tuple(tensor.shape)
        ids = tuple(tuple(dim_ids) for dim_ids in ids)
        if len(ids) != len(shape):
            raise RankMismatchError(len(shape), len(ids), "identifier lists")

        tables: list[dict[Hashable, int]] = []
        for d, (dim_ids, size) in enumerate(zip(ids, shape)):
            if len(dim_ids) != size:
                raise ShapeMismatchError(
                    f"Dimension {d} has size {size} but {len(dim_ids)} identifiers",
                    expected=size,
                    actual=len(dim_ids),
                )
            table: dict[Hashable, int] = {}
            for position, identifier in enumerate(dim_ids):
                if identifier in table:
                    raise DuplicateIdentifierError(identifier, d)
                table[identifier] = position
            tables.append(table)

        self._tensor = tensor
        self._ids = ids
        self._tables = tuple(tables)
        logger.debug("Built id tables for tensor of shape %s", shape)

    # ------------------------------------------------------------------
    # Identifier tables
    # ------------------------------------------------------------------
    @property
    def tensor(self) -> ITensor:
        """
        The underlying, positionally addressed tensor.
        """
        return self._tensor

    @property
    def ids(self) -> tuple[tuple[Hashable, ...], ...]:
        return self._ids

    def get_ids(self, dimension: int) -> tuple[Hashable, ...]:
        """
        Return the identifiers of `dimension`, in position order.

        Raises
        ------
        TensorBoundsError
            If `dimension` is not in `[0, rank)`.
        """
        if dimension < 0 or dimension >= len(self._ids):
            raise TensorBoundsError(dimension, len(self._ids))
        return self._ids[dimension]

    def index_of(self, dimension: int, identifier: Hashable) -> int:
        """
        Return the position of `identifier` within `dimension`.

        Raises
        ------
        TensorBoundsError
            If `dimension` is not in `[0, rank)`.
        IdentifierNotFoundError
            If `identifier` is not in that dimension's table.
        """
        if dimension < 0 or dimension >= len(self._tables):
            raise TensorBoundsError(dimension, len(self._tables))
        try:
            return self._tables[dimension][identifier]
        except (KeyError, TypeError):
            raise IdentifierNotFoundError(identifier, dimension) from None

    def positions_of(self, *ids: Hashable) -> tuple[int, ...]:
        """
        Resolve one identifier per dimension into a coordinate tuple.

        Raises
        ------
        RankMismatchError
            If `len(ids) != rank`.
        IdentifierNotFoundError
            If any identifier is unknown in its dimension.
        """
        check_rank(ids, len(self._tables), "identifiers")
        return tuple(self.index_of(d, i) for d, i in enumerate(ids))

    # ------------------------------------------------------------------
    # Identifier-based access
    # ------------------------------------------------------------------
    def get_cell_by_id(self, *ids: Hashable) -> Any:
        return self._tensor.get_cell(*self.positions_of(*ids))

    def set_cell_by_id(self, value: Any, *ids: Hashable) -> None:
        self._tensor.set_cell(value, *self.positions_of(*ids))

    def get_value_by_id(self, *ids: Hashable) -> Any:
        return self._tensor.get_value(*self.positions_of(*ids))

    def set_value_by_id(self, value: Any, *ids: Hashable) -> None:
        self._tensor.set_value(value, *self.positions_of(*ids))

    # ------------------------------------------------------------------
    # Positional access (forwarded)
    # ------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        return self._tensor.shape

    @property
    def element_kind(self) -> ElementKind:
        return self._tensor.element_kind

    def get_cell(self, *coords: int) -> Any:
        return self._tensor.get_cell(*coords)

    def set_cell(self, value: Any, *coords: int) -> None:
        self._tensor.set_cell(value, *coords)

    def get_values(self):
        return self._tensor.get_values()

    def set_values(self, values: Any) -> None:
        self._tensor.set_values(values)

    def get_reference_tensor(self, index: IIndex) -> ITensor:
        """
        Return a view through `index`.

        The view's identifiers are this tensor's identifiers projected
        through the index slices; reduced dimensions drop their identifiers.
        When the index repeats a position within a dimension, the projected
        identifiers would repeat too, so the view is returned without an
        identifier layer and is addressed by position only.

        Raises
        ------
        ShapeMismatchError
            If `index` is not valid for this tensor.
        """
        view = self._tensor.get_reference_tensor(index)
        reduced = getattr(index, "reduced", frozenset())
        projected = [
            [self._ids[d][i] for i in s.iterate()]
            for d, s in enumerate(index.slices)
            if d not in reduced
        ]
        if any(len(set(dim_ids)) != len(dim_ids) for dim_ids in projected):
            return view
        return IdTensor(view, projected)

    def __repr__(self) -> str:
        return f"IdTensor(shape={self.shape}, kind={self.element_kind}, ids={self._ids!r})"
