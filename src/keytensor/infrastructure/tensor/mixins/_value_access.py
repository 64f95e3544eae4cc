"""
Generic value access mixin.

This mixin derives the convenience accessors of the tensor contract from the
four primitives every concrete tensor layer implements (`shape`, `get_cell`,
`set_cell` and `element_kind`):

- `rank` and `numel()`,
- the generic-value accessors `get_value` / `set_value`,
- subscription (``t[i, j]`` and ``t[i, j] = v``).

Notes
-----
Subscription only accepts full integer coordinates. NumPy-style slicing is
deliberately not offered; views are composed explicitly through `Index`.
"""

from __future__ import annotations

from typing import Any

from ....domain._tensor import ITensor


class TensorValueAccessMixin(ITensor):
    """
    Accessors derived from `get_cell` / `set_cell`.
    """

    @property
    def rank(self) -> int:
        return len(self.shape)

    def numel(self) -> int:
        n = 1
        for s in self.shape:
            n *= s
        return n

    def get_value(self, *coords: int) -> Any:
        """
        Return the value at `coords` as a plain Python object.

        Equivalent to `get_cell`; kept as the entry point used by
        collaborators that handle every element kind uniformly.
        """
        return self.get_cell(*coords)

    def set_value(self, value: Any, *coords: int) -> None:
        """
        Store `value` at `coords`; equivalent to `set_cell`.
        """
        self.set_cell(value, *coords)

    @staticmethod
    def _key_to_coords(key: Any) -> tuple:
        if isinstance(key, tuple):
            return key
        return (key,)

    def __getitem__(self, key: Any) -> Any:
        return self.get_cell(*self._key_to_coords(key))

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set_cell(value, *self._key_to_coords(key))
