"""
Coordinate validation and traversal helpers.

These helpers are shared by every tensor layer that resolves coordinates
itself (dense storage, reference views, identifier layers). Shells that only
delegate never call them; validation happens once, in the layer that owns
the addressing.
"""

from __future__ import annotations

import operator
from typing import Any, Iterator, Sequence

import numpy as np

from ...domain._errors import TensorBoundsError, check_rank


def normalize_coords(coords: Sequence[Any], shape: Sequence[int]) -> tuple[int, ...]:
    """
    Validate a coordinate tuple against a shape.

    Parameters
    ----------
    coords : Sequence[Any]
        Candidate coordinates. Each entry must support `__index__`.
    shape : Sequence[int]
        The shape being addressed.

    Returns
    -------
    tuple[int, ...]
        The coordinates as plain Python ints.

    Raises
    ------
    RankMismatchError
        If `len(coords) != len(shape)`.
    TensorBoundsError
        If any coordinate lies outside `[0, shape[d])`.
    TypeError
        If a coordinate is not an integer.

    Notes
    -----
    Negative coordinates are rejected rather than wrapped.
    """
    check_rank(coords, len(shape))
    out = []
    for d, (c, size) in enumerate(zip(coords, shape)):
        i = operator.index(c)
        if i < 0 or i >= size:
            raise TensorBoundsError(i, size, dimension=d)
        out.append(i)
    return tuple(out)


def coordinates(shape: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """
    Yield every coordinate tuple of `shape` in row-major order.

    A rank-0 shape yields the empty tuple once; a shape containing a zero
    dimension yields nothing.
    """
    for coord in np.ndindex(*shape):
        yield tuple(int(c) for c in coord)


def product(shape: Sequence[int]) -> int:
    n = 1
    for s in shape:
        n *= int(s)
    return n
