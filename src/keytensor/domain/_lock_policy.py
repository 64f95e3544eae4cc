"""
Lock policy contract for concurrent tensor access.

A lock policy supplies the locks a concurrent tensor shell acquires around
every accessor. The granularity (one global lock, a readers/writer lock,
striped per-cell locks, ...) is a property of the policy object, not of the
shell class, so contention trade-offs are chosen by configuration.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class ILockPolicy(Protocol):
    """
    Supplier of cell-scoped and tensor-scoped locks.

    Every method returns a context manager; the shell enters it for the
    duration of exactly one accessor call and exits it on every exit path.

    Contract
    --------
    - A tensor-scoped write lock excludes every other cell and tensor lock.
    - A tensor-scoped read lock excludes every cell and tensor write lock.
    - Cell locks for the same coordinates exclude each other whenever at
      least one of them is a write lock.
    - Acquisition blocks indefinitely.
    """

    def cell_read_lock(self, coords: Sequence[int]) -> AbstractContextManager: ...

    def cell_write_lock(self, coords: Sequence[int]) -> AbstractContextManager: ...

    def tensor_read_lock(self) -> AbstractContextManager: ...

    def tensor_write_lock(self) -> AbstractContextManager: ...
