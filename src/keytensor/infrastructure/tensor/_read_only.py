"""
Read-only tensor shell.
"""

from __future__ import annotations

from typing import Any

from ...domain._errors import UnsupportedMutationError
from ._shell import TensorShell


class ReadOnlyTensorShell(TensorShell):
    """
    Shell rejecting every write with `UnsupportedMutationError`.

    Reads are forwarded unchanged. Views of a read-only shell are read-only
    as well, since their writes are routed back through the shell. The
    wrapped tensor itself stays writable through any other reference.
    """

    __slots__ = ()

    def set_cell(self, value: Any, *coords: int) -> None:
        raise UnsupportedMutationError("set_cell", "a read-only tensor")

    def set_values(self, values: Any) -> None:
        raise UnsupportedMutationError("set_values", "a read-only tensor")
