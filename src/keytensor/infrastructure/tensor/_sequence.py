"""
Lazy sub-tensor sequence.

`TensorSequence` is what `Tensor.iterate()` returns: a finite, restartable,
random-access sequence of the sub-tensors along dimension 0. Sub-tensors are
built on demand through the owning tensor's `get_reference_tensor`, so every
layer (identifier tables, concurrency shells, read-only shells) shapes the
views it hands out.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any, Iterator

from ...domain._errors import TensorBoundsError
from ...domain._tensor import ITensor


class TensorSequence(Sequence):
    """
    Sequence of the rank-(R-1) views of a rank-R tensor along dimension 0.

    Parameters
    ----------
    tensor : ITensor
        The tensor being iterated.

    Notes
    -----
    - For a rank-0 tensor the sequence has length 1 and its only element is
      the tensor itself.
    - Negative positions count from the end, as for any Python sequence.
    """

    __slots__ = ("_tensor",)

    def __init__(self, tensor: ITensor) -> None:
        self._tensor = tensor

    def __len__(self) -> int:
        shape = self._tensor.shape
        return shape[0] if shape else 1

    def __getitem__(self, position: Any) -> Any:
        if isinstance(position, slice):
            return [self[i] for i in range(*position.indices(len(self)))]
        i = operator.index(position)
        n = len(self)
        if i < 0:
            i += n
        if i < 0 or i >= n:
            raise TensorBoundsError(position, n, dimension=0)
        if not self._tensor.shape:
            return self._tensor
        return self._sub_tensor(i)

    def __iter__(self) -> Iterator[ITensor]:
        for i in range(len(self)):
            yield self[i]

    def _sub_tensor(self, position: int) -> ITensor:
        from ..slice._index import Index

        return self._tensor.get_reference_tensor(
            Index.fixing(self._tensor.shape, 0, position)
        )

    def __repr__(self) -> str:
        return f"TensorSequence(len={len(self)}, tensor={self._tensor!r})"
