"""
Per-dimension slices and the `Index` that aggregates them into views.
"""

from ._index import Index
from ._slice import (
    BaseSlice,
    IdentitySlice,
    MappedSlice,
    composite_slice,
    range_slice,
    single_slice,
)

__all__ = [
    BaseSlice.__name__,
    IdentitySlice.__name__,
    Index.__name__,
    MappedSlice.__name__,
    composite_slice.__name__,
    range_slice.__name__,
    single_slice.__name__,
]
