"""
Element-kind storage mapping (NumPy backend).

This module binds each `ElementKind` to a homogeneous NumPy dtype and
implements value coercion in both directions:

- *to storage*: validate a caller-supplied value (or array) and convert it
  to the representation held in the backing ndarray;
- *from storage*: convert a stored element back into a native Python value.

Design notes
------------
- CHAR cells are stored as `uint32` code points. For bulk transfer the same
  buffer is reinterpreted as `<U1`, which has an identical 4-byte layout.
- OBJECT cells are stored in an `object` ndarray; bulk transfer copies the
  references, not the referenced objects.
- Every array returned or accepted here is a fresh copy.
"""

from __future__ import annotations

import numbers
from typing import Any, Sequence

import numpy as np

from ...domain._element_kind import ElementKind
from ...domain._errors import ElementKindError, ShapeMismatchError

_STORAGE_DTYPES: dict[ElementKind, np.dtype] = {
    ElementKind.INT8: np.dtype(np.int8),
    ElementKind.INT16: np.dtype(np.int16),
    ElementKind.INT32: np.dtype(np.int32),
    ElementKind.INT64: np.dtype(np.int64),
    ElementKind.FLOAT32: np.dtype(np.float32),
    ElementKind.FLOAT64: np.dtype(np.float64),
    ElementKind.BOOL: np.dtype(np.bool_),
    ElementKind.CHAR: np.dtype(np.uint32),
    ElementKind.OBJECT: np.dtype(object),
}

_CHAR_VALUE_DTYPE = np.dtype("U1")

_DEFAULTS: dict[ElementKind, Any] = {
    ElementKind.INT8: 0,
    ElementKind.INT16: 0,
    ElementKind.INT32: 0,
    ElementKind.INT64: 0,
    ElementKind.FLOAT32: 0.0,
    ElementKind.FLOAT64: 0.0,
    ElementKind.BOOL: False,
    ElementKind.CHAR: "\x00",
    ElementKind.OBJECT: None,
}


def storage_dtype(kind: ElementKind) -> np.dtype:
    """
    Return the dtype of the backing ndarray for `kind`.
    """
    return _STORAGE_DTYPES[kind]


def value_dtype(kind: ElementKind) -> np.dtype:
    """
    Return the dtype of arrays exchanged through bulk transfer for `kind`.
    """
    if kind is ElementKind.CHAR:
        return _CHAR_VALUE_DTYPE
    return _STORAGE_DTYPES[kind]


def default_value(kind: ElementKind) -> Any:
    return _DEFAULTS[kind]


def to_storage_value(value: Any, kind: ElementKind) -> Any:
    """
    Validate `value` for `kind` and return its storage representation.

    Parameters
    ----------
    value : Any
        Caller-supplied cell value.
    kind : ElementKind
        Target element kind.

    Returns
    -------
    Any
        A Python scalar (or object) assignable into the backing ndarray.

    Raises
    ------
    ElementKindError
        If the value has the wrong type, is out of range for an integer
        kind, or is not a single character for CHAR.
    """
    if kind.is_integer:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
            raise ElementKindError(value, kind, "expected an integer")
        info = np.iinfo(_STORAGE_DTYPES[kind])
        v = int(value)
        if v < info.min or v > info.max:
            raise ElementKindError(value, kind, f"outside [{info.min}, {info.max}]")
        return v

    if kind.is_float:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
            raise ElementKindError(value, kind, "expected a real number")
        try:
            v = float(value)
        except OverflowError:
            raise ElementKindError(value, kind, "outside the float range") from None
        limit = float(np.finfo(_STORAGE_DTYPES[kind]).max)
        if np.isfinite(v) and abs(v) > limit:
            raise ElementKindError(value, kind, f"outside [{-limit}, {limit}]")
        return v

    if kind is ElementKind.BOOL:
        if not isinstance(value, (bool, np.bool_)):
            raise ElementKindError(value, kind, "expected a bool")
        return bool(value)

    if kind is ElementKind.CHAR:
        if not isinstance(value, str) or len(value) != 1:
            raise ElementKindError(value, kind, "expected a single character")
        return ord(value)

    return value


def from_storage_value(stored: Any, kind: ElementKind) -> Any:
    """
    Convert an element read from the backing ndarray to a native value.
    """
    if kind.is_integer:
        return int(stored)
    if kind.is_float:
        return float(stored)
    if kind is ElementKind.BOOL:
        return bool(stored)
    if kind is ElementKind.CHAR:
        return chr(int(stored))
    return stored


def allocate(shape: Sequence[int], kind: ElementKind, fill: Any = None) -> np.ndarray:
    """
    Allocate a backing ndarray of `shape` filled with `fill` (or the kind's
    default value).

    Raises
    ------
    ElementKindError
        If `fill` is not valid for `kind`.
    ValueError
        If `shape` contains a negative size.
    """
    shape = tuple(int(s) for s in shape)
    if any(s < 0 for s in shape):
        raise ValueError(f"Tensor dimensions must be non-negative, got {shape}")
    stored = to_storage_value(default_value(kind) if fill is None else fill, kind)
    if kind is ElementKind.OBJECT:
        arr = np.empty(shape, dtype=object)
        arr.fill(stored)
        return arr
    return np.full(shape, stored, dtype=_STORAGE_DTYPES[kind])


def to_storage_array(values: Any, kind: ElementKind, shape: Sequence[int]) -> np.ndarray:
    """
    Validate an array-like for `kind` and `shape`; return a fresh storage
    ndarray.

    Raises
    ------
    ShapeMismatchError
        If the array's shape differs from `shape`.
    ElementKindError
        If any value cannot be represented by `kind`.
    """
    shape = tuple(shape)
    if kind is ElementKind.OBJECT:
        arr = values if isinstance(values, np.ndarray) else np.asarray(values, dtype=object)
    else:
        try:
            arr = np.asarray(values)
        except ValueError as e:
            raise ShapeMismatchError(f"Values are not a rectangular array: {e}") from e
    if arr.shape != shape:
        raise ShapeMismatchError(
            f"Expected values of shape {shape}, got {arr.shape}",
            expected=shape,
            actual=arr.shape,
        )

    target = _STORAGE_DTYPES[kind]
    k = arr.dtype.kind

    if kind is ElementKind.OBJECT:
        out = np.empty(shape, dtype=object)
        out[...] = arr
        return out

    if kind.is_integer and k in "iu":
        if arr.size:
            info = np.iinfo(target)
            lo, hi = int(arr.min()), int(arr.max())
            if lo < info.min or hi > info.max:
                raise ElementKindError(lo if lo < info.min else hi, kind,
                                       f"outside [{info.min}, {info.max}]")
        return arr.astype(target, copy=True)

    if kind.is_float and k in "iuf":
        if arr.size and k == "f" and arr.dtype.itemsize > target.itemsize:
            limit = np.finfo(target).max
            finite = arr[np.isfinite(arr)]
            if finite.size and np.abs(finite).max() > limit:
                raise ElementKindError(float(np.abs(finite).max()), kind,
                                       f"outside [{-limit}, {limit}]")
        return arr.astype(target, copy=True)

    if kind is ElementKind.BOOL and k == "b":
        return arr.astype(target, copy=True)

    if kind is ElementKind.CHAR and k == "U":
        if arr.size and int(np.char.str_len(arr).max()) > 1:
            raise ElementKindError(values, kind, "expected single characters")
        return np.ascontiguousarray(arr.astype(_CHAR_VALUE_DTYPE)).view(target).copy()

    if k != "O":
        raise ElementKindError(f"<array of {arr.dtype}>", kind)

    out = np.empty(shape, dtype=target)
    for coord in np.ndindex(*shape):
        out[coord] = to_storage_value(arr[coord], kind)
    return out


def to_value_array(storage: np.ndarray, kind: ElementKind) -> np.ndarray:
    """
    Return an independent bulk-transfer copy of a backing ndarray.
    """
    out = storage.copy()
    if kind is ElementKind.CHAR:
        return out.view(_CHAR_VALUE_DTYPE)
    return out


def empty_value_array(shape: Sequence[int], kind: ElementKind) -> np.ndarray:
    """
    Allocate a bulk-transfer array for gathering values cell by cell.
    """
    if kind is ElementKind.CHAR:
        return np.zeros(tuple(shape), dtype=_CHAR_VALUE_DTYPE)
    if kind is ElementKind.OBJECT:
        return np.empty(tuple(shape), dtype=object)
    return np.zeros(tuple(shape), dtype=_STORAGE_DTYPES[kind])
