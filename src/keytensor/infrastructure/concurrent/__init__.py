"""
Thread-safe tensor access.

This package provides `ConcurrentTensorShell` and the lock policies it can
be configured with. `create_lock_policy` builds a policy by name, which is
how the shell picks its default from the active configuration.
"""

from ._policies import (
    MutexLockPolicy,
    ReadWriteLockPolicy,
    StripedLockPolicy,
    create_lock_policy,
)
from ._rwlock import ReadWriteLock
from ._shell import ConcurrentTensorShell

__all__ = [
    ConcurrentTensorShell.__name__,
    MutexLockPolicy.__name__,
    ReadWriteLock.__name__,
    ReadWriteLockPolicy.__name__,
    StripedLockPolicy.__name__,
    create_lock_policy.__name__,
]
