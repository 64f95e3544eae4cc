"""
View composition and iteration mixin.

To avoid circular imports, the reference-view and sequence classes are
imported lazily inside the methods that build them.
"""

from __future__ import annotations

from typing import Iterator

from ....domain._slice import IIndex
from ....domain._tensor import ITensor


class TensorCompositionMixin(ITensor):
    """
    `get_reference_tensor`, `iterate` and `__iter__` for every tensor layer.

    Layers that need to decorate the views they hand out (for example
    identifier tensors, which project their ids through the index) override
    `get_reference_tensor`; `iterate` picks the override up automatically.
    """

    def get_reference_tensor(self, index: IIndex) -> ITensor:
        """
        Return a zero-copy view of this tensor through `index`.

        Writes through the view land in this tensor immediately and vice
        versa. The view holds a plain reference to this tensor and must not
        outlive it.

        Raises
        ------
        ShapeMismatchError
            If `index` is not valid for this tensor.
        """
        from .._reference import ReferenceTensor

        return ReferenceTensor(self, index)

    def iterate(self):
        """
        Return the sub-tensors along dimension 0 as a lazy, restartable
        sequence (see `TensorSequence`).
        """
        from .._sequence import TensorSequence

        return TensorSequence(self)

    def __iter__(self) -> Iterator[ITensor]:
        return iter(self.iterate())
