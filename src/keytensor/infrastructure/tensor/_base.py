"""
Abstract base shared by every concrete tensor layer.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from ...domain._element_kind import ElementKind
from ...domain.types._numpy import NDArrayLike
from .mixins import TensorCompositionMixin, TensorValueAccessMixin


class AbstractTensor(TensorValueAccessMixin, TensorCompositionMixin):
    """
    Base class for dense tensors, reference views, identifier layers and
    shells.

    Subclasses implement the six primitives below; everything else in the
    tensor contract comes from the mixins.
    """

    @property
    @abstractmethod
    def shape(self) -> tuple[int, ...]: ...

    @property
    @abstractmethod
    def element_kind(self) -> ElementKind: ...

    @abstractmethod
    def get_cell(self, *coords: int) -> Any: ...

    @abstractmethod
    def set_cell(self, value: Any, *coords: int) -> None: ...

    @abstractmethod
    def get_values(self) -> NDArrayLike: ...

    @abstractmethod
    def set_values(self, values: Any) -> None: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape}, kind={self.element_kind})"
