"""
Lock policies for `ConcurrentTensorShell`.

Each policy implements `ILockPolicy` and trades contention against overhead
differently:

- `MutexLockPolicy`: one reentrant mutex serializes every accessor.
- `ReadWriteLockPolicy`: one readers/writer lock; reads share, writes are
  exclusive.
- `StripedLockPolicy`: a tensor-wide gate plus a fixed pool of striped cell
  mutexes. Cell accessors hold the gate shared and one stripe exclusively,
  so cells on different stripes proceed concurrently. Bulk accessors hold
  the gate exclusively, which keeps them atomic with respect to every cell
  accessor.

A policy instance belongs to one shell. Sharing a non-reentrant policy
between nested shells (a shell wrapping a view of another shell using the
same policy) deadlocks.
"""

from __future__ import annotations

import threading
from contextlib import AbstractContextManager, contextmanager
from typing import Iterator, Sequence

from ...domain._lock_policy import ILockPolicy
from ._rwlock import ReadWriteLock


class MutexLockPolicy(ILockPolicy):
    """
    Coarsest policy: every lock is the same `threading.RLock`.
    """

    __slots__ = ("_lock",)

    def __init__(self) -> None:
        self._lock = threading.RLock()

    def cell_read_lock(self, coords: Sequence[int]) -> AbstractContextManager:
        return self._lock

    def cell_write_lock(self, coords: Sequence[int]) -> AbstractContextManager:
        return self._lock

    def tensor_read_lock(self) -> AbstractContextManager:
        return self._lock

    def tensor_write_lock(self) -> AbstractContextManager:
        return self._lock

    def __repr__(self) -> str:
        return "MutexLockPolicy()"


class ReadWriteLockPolicy(ILockPolicy):
    """
    One readers/writer lock shared by cell and bulk accessors.
    """

    __slots__ = ("_rw",)

    def __init__(self) -> None:
        self._rw = ReadWriteLock()

    def cell_read_lock(self, coords: Sequence[int]) -> AbstractContextManager:
        return self._rw.read_lock()

    def cell_write_lock(self, coords: Sequence[int]) -> AbstractContextManager:
        return self._rw.write_lock()

    def tensor_read_lock(self) -> AbstractContextManager:
        return self._rw.read_lock()

    def tensor_write_lock(self) -> AbstractContextManager:
        return self._rw.write_lock()

    def __repr__(self) -> str:
        return "ReadWriteLockPolicy()"


class StripedLockPolicy(ILockPolicy):
    """
    Tensor-wide gate plus striped cell mutexes.

    Parameters
    ----------
    stripes : int, optional
        Number of cell mutexes. Coordinates are mapped onto stripes by hash.
        Defaults to 16.

    Raises
    ------
    ValueError
        If `stripes` is less than 1.
    """

    __slots__ = ("_gate", "_stripes")

    def __init__(self, stripes: int = 16) -> None:
        if stripes < 1:
            raise ValueError(f"stripes must be >= 1, got {stripes}")
        self._gate = ReadWriteLock()
        self._stripes = tuple(threading.Lock() for _ in range(stripes))

    @property
    def stripes(self) -> int:
        return len(self._stripes)

    def stripe_of(self, coords: Sequence[int]) -> int:
        return hash(tuple(coords)) % len(self._stripes)

    @contextmanager
    def _cell_lock(self, coords: Sequence[int]) -> Iterator[None]:
        stripe = self._stripes[self.stripe_of(coords)]
        with self._gate.read_lock():
            with stripe:
                yield

    def cell_read_lock(self, coords: Sequence[int]) -> AbstractContextManager:
        return self._cell_lock(coords)

    def cell_write_lock(self, coords: Sequence[int]) -> AbstractContextManager:
        return self._cell_lock(coords)

    def tensor_read_lock(self) -> AbstractContextManager:
        return self._gate.write_lock()

    def tensor_write_lock(self) -> AbstractContextManager:
        return self._gate.write_lock()

    def __repr__(self) -> str:
        return f"StripedLockPolicy(stripes={len(self._stripes)})"


def create_lock_policy(name: str, stripes: int = 16) -> ILockPolicy:
    """
    Build a lock policy by name.

    Parameters
    ----------
    name : str
        One of "mutex", "read_write" or "striped".
    stripes : int, optional
        Stripe count for "striped". Ignored otherwise.

    Raises
    ------
    ValueError
        If `name` is not a known policy.
    """
    if name == "mutex":
        return MutexLockPolicy()
    if name == "read_write":
        return ReadWriteLockPolicy()
    if name == "striped":
        return StripedLockPolicy(stripes)
    raise ValueError(f"Unknown lock policy {name!r}. Expected 'mutex', 'read_write' or 'striped'")
