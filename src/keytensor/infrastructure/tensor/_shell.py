"""
Delegating tensor shell.

`TensorShell` wraps another tensor and forwards the whole tensor contract to
it. Decorators (concurrency, read-only access) subclass it and override only
the accessors they intercept.
"""

from __future__ import annotations

from typing import Any

from ...domain._element_kind import ElementKind
from ...domain._tensor import ITensor
from ._base import AbstractTensor


class TensorShell(AbstractTensor):
    """
    Tensor that forwards every accessor to a wrapped tensor.

    Parameters
    ----------
    tensor : ITensor
        The wrapped tensor. Discarding the shell never affects it.

    Notes
    -----
    Views obtained from a shell (`get_reference_tensor`, `iterate`) use the
    shell itself as their source, so whatever the shell intercepts also
    applies to every view of it.
    """

    __slots__ = ("_tensor",)

    def __init__(self, tensor: ITensor) -> None:
        self._tensor = tensor

    @property
    def wrapped(self) -> ITensor:
        return self._tensor

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

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._tensor!r})"
