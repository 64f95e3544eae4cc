"""
Concurrent tensor shell.

`ConcurrentTensorShell` decorates any tensor with a pluggable lock policy.
Every accessor acquires the policy's lock for the duration of that single
call and releases it on every exit path, including when the wrapped tensor
raises. Errors pass through untouched.

Lock scopes
-----------
- `get_cell` / `set_cell`: cell read / write lock for the given coordinates.
- `get_values` / `set_values`: tensor-wide read / write lock, so a bulk
  transfer is never observed half-applied by other shell accessors.

Views and identifier layers built on the shell call back into it, so they
inherit its locking. A reference to the wrapped tensor that bypasses the
shell is outside this guarantee.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ...domain._lock_policy import ILockPolicy
from ...domain._tensor import ITensor
from ..config import get_config
from ..tensor._shell import TensorShell
from ._policies import create_lock_policy

logger = logging.getLogger(__name__)


class ConcurrentTensorShell(TensorShell):
    """
    Thread-safe wrapper around a tensor.

    Parameters
    ----------
    tensor : ITensor
        The wrapped tensor. It shares its shape and element kind with the
        shell; the shell holds no data of its own.
    lock_policy : ILockPolicy, optional
        Lock supplier. Defaults to a fresh policy built from the active
        `TensorConfig`.

    Raises
    ------
    TypeError
        If `lock_policy` does not implement `ILockPolicy`.
    """

    __slots__ = ("_locks",)

    def __init__(self, tensor: ITensor, lock_policy: Optional[ILockPolicy] = None) -> None:
        super().__init__(tensor)
        if lock_policy is None:
            cfg = get_config()
            lock_policy = create_lock_policy(cfg.lock_policy, cfg.lock_stripes)
        if not isinstance(lock_policy, ILockPolicy):
            raise TypeError(f"lock_policy must implement ILockPolicy, got {type(lock_policy)!r}")
        self._locks = lock_policy
        logger.debug("Wrapped %r with %r", tensor, lock_policy)

    @property
    def lock_policy(self) -> ILockPolicy:
        return self._locks

    def get_cell(self, *coords: int) -> Any:
        with self._locks.cell_read_lock(coords):
            return self._tensor.get_cell(*coords)

    def set_cell(self, value: Any, *coords: int) -> None:
        with self._locks.cell_write_lock(coords):
            self._tensor.set_cell(value, *coords)

    def get_values(self):
        with self._locks.tensor_read_lock():
            return self._tensor.get_values()

    def set_values(self, values: Any) -> None:
        with self._locks.tensor_write_lock():
            self._tensor.set_values(values)
