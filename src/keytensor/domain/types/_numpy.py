"""
Domain-level structural typing for NumPy-like n-dimensional arrays.

This module defines :class:`NDArrayLike`, a backend-agnostic Protocol for the
array objects exchanged by bulk tensor transfer (`get_values` /
`set_values`), without introducing a dependency on NumPy in the domain layer.

Typical implementers include ``numpy.ndarray`` and nested Python sequences
converted by the infrastructure layer.
"""

from __future__ import annotations
from typing import Protocol, Tuple, Any, Iterable, overload, runtime_checkable


@runtime_checkable
class NDArrayLike(Protocol):
    """
    Structural typing interface for objects that behave like NumPy ndarrays.

    Notes
    -----
    Only the subset of the ndarray API needed for bulk value transfer is
    modelled here.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """
        Shape of the array as a tuple of dimension sizes.
        """
        ...

    @property
    def ndim(self) -> int:
        """
        Number of dimensions of the array.
        """
        ...

    @property
    def size(self) -> int:
        """
        Total number of elements in the array.
        """
        ...

    @property
    def dtype(self) -> Any:
        """
        Backend-defined dtype object (e.g., ``numpy.dtype``).
        """
        ...

    def reshape(self, *shape: int) -> NDArrayLike: ...

    def copy(self) -> NDArrayLike:
        """
        Return a deep copy of the array data.
        """
        ...

    def tolist(self) -> list[Any]:
        """
        Convert the array to nested Python lists (a scalar for 0-d arrays).
        """
        ...

    def __array__(self, dtype: Any = ...) -> Any: ...

    @overload
    def __getitem__(self, key: int) -> Any: ...

    @overload
    def __getitem__(self, key: slice | Tuple[Any, ...]) -> NDArrayLike: ...

    def __getitem__(self, key: Any) -> Any: ...

    def __setitem__(self, key: Any, value: Any) -> None: ...

    def __iter__(self) -> Iterable[Any]: ...
