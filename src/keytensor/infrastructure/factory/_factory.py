"""
Tensor construction and composition entry points.

Collaborators never allocate backing storage themselves; they obtain tensors
through the functions below, which preserve every tensor invariant:

- `create_dense` / `tensor_from_values` / `create_id_tensor`: allocation;
- `compose_view`: zero-copy views through an `Index`;
- `with_ids`, `with_concurrency`, `read_only`: decorating layers;
- `copy_tensor`: an independent dense copy.

Identifier tensors keep their identifier layer on top when decorated: the
concurrency or read-only shell is slid underneath the identifier tables, so
identifier-based access is guarded like positional access.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Optional, Sequence, Union

import numpy as np

from ...domain._element_kind import ElementKind
from ...domain._errors import ShapeMismatchError
from ...domain._lock_policy import ILockPolicy
from ...domain._slice import IIndex
from ...domain._tensor import ITensor
from ..concurrent import ConcurrentTensorShell
from ..config import get_config
from ..tensor import DenseTensor, IdTensor, ReadOnlyTensorShell

logger = logging.getLogger(__name__)

KindLike = Union[ElementKind, str, None]


def _resolve_kind(kind: Any) -> ElementKind:
    if kind is None:
        return get_config().default_element_kind
    return ElementKind.parse(kind)


def create_dense(shape: Sequence[int], kind: KindLike = None, fill: Any = None) -> DenseTensor:
    """
    Allocate a dense tensor.

    Parameters
    ----------
    shape : Sequence[int]
        Per-dimension sizes; ``()`` creates a rank-0 tensor.
    kind : ElementKind or str, optional
        Element kind. Defaults to the configured default kind.
    fill : Any, optional
        Initial value of every cell. Defaults to the kind's default value.

    Returns
    -------
    DenseTensor
        A new tensor owning its storage.
    """
    return DenseTensor(shape, _resolve_kind(kind), fill)


def infer_element_kind(values: Any) -> ElementKind:
    """
    Infer the element kind that best fits an array-like.

    Booleans map to BOOL, integers to INT64 (or the array's own integer
    width), floats to FLOAT64 (FLOAT32 for float32 arrays), single-character
    strings to CHAR, and anything else to OBJECT.
    """
    arr = values if isinstance(values, np.ndarray) else np.asarray(values)
    k = arr.dtype.kind
    if k == "b":
        return ElementKind.BOOL
    if k == "i":
        return {1: ElementKind.INT8, 2: ElementKind.INT16, 4: ElementKind.INT32}.get(
            arr.dtype.itemsize, ElementKind.INT64
        )
    if k == "f":
        return ElementKind.FLOAT32 if arr.dtype.itemsize == 4 else ElementKind.FLOAT64
    if k == "U" and arr.dtype.itemsize == 4:
        return ElementKind.CHAR
    return ElementKind.OBJECT


def tensor_from_values(values: Any, kind: KindLike = None) -> DenseTensor:
    """
    Build a dense tensor from literal data.

    Parameters
    ----------
    values : array-like
        Nested sequences or an ndarray. Its shape becomes the tensor shape.
    kind : ElementKind or str, optional
        Element kind. Inferred from `values` when omitted.

    Raises
    ------
    ShapeMismatchError
        If `values` is ragged.
    ElementKindError
        If `values` cannot be stored in `kind`.
    """
    resolved = None if kind is None else ElementKind.parse(kind)
    try:
        if resolved is None:
            resolved = infer_element_kind(values)
        if resolved is ElementKind.OBJECT and not isinstance(values, np.ndarray):
            arr = np.asarray(values, dtype=object)
        else:
            arr = np.asarray(values)
    except ValueError as e:
        raise ShapeMismatchError(f"Values are not a rectangular array: {e}") from e
    tensor = DenseTensor(arr.shape, resolved)
    tensor.set_values(arr)
    return tensor


def create_id_tensor(
    ids: Sequence[Sequence[Hashable]], kind: KindLike = None, fill: Any = None
) -> IdTensor:
    """
    Allocate a dense tensor shaped by `ids` and wrap it with those ids.

    Raises
    ------
    DuplicateIdentifierError
        If an identifier repeats within a dimension.
    """
    shape = tuple(len(dim_ids) for dim_ids in ids)
    return IdTensor(create_dense(shape, kind, fill), ids)


def with_ids(tensor: ITensor, ids: Sequence[Sequence[Hashable]]) -> IdTensor:
    """
    Add identifier tables to an existing tensor.
    """
    return IdTensor(tensor, ids)


def compose_view(tensor: ITensor, index: IIndex) -> ITensor:
    """
    Return a zero-copy view of `tensor` through `index`.

    Raises
    ------
    ShapeMismatchError
        If `index` is not valid for `tensor`.
    """
    return tensor.get_reference_tensor(index)


def with_concurrency(tensor: ITensor, lock_policy: Optional[ILockPolicy] = None) -> ITensor:
    """
    Wrap `tensor` in a `ConcurrentTensorShell`.

    Parameters
    ----------
    tensor : ITensor
        Tensor to guard. Identifier tensors stay identifier tensors.
    lock_policy : ILockPolicy, optional
        Lock supplier; defaults to one built from the active configuration.
    """
    if isinstance(tensor, IdTensor):
        return IdTensor(ConcurrentTensorShell(tensor.tensor, lock_policy), tensor.ids)
    return ConcurrentTensorShell(tensor, lock_policy)


def read_only(tensor: ITensor) -> ITensor:
    """
    Wrap `tensor` so that every write raises `UnsupportedMutationError`.
    """
    if isinstance(tensor, IdTensor):
        return IdTensor(ReadOnlyTensorShell(tensor.tensor), tensor.ids)
    return ReadOnlyTensorShell(tensor)


def copy_tensor(tensor: ITensor) -> ITensor:
    """
    Return a dense copy of `tensor` (with the same ids for identifier
    tensors). The copy shares no storage with the original.
    """
    dense = DenseTensor(tensor.shape, tensor.element_kind)
    dense.set_values(tensor.get_values())
    logger.debug("Copied %r into a new dense tensor", tensor)
    if isinstance(tensor, IdTensor):
        return IdTensor(dense, tensor.ids)
    return dense
