"""
KeyTensor: typed multi-dimensional containers with zero-copy views,
identifier-based addressing and pluggable concurrent access.
"""

import logging

from .domain._element_kind import ElementKind
from .domain._errors import (
    DuplicateIdentifierError,
    ElementKindError,
    IdentifierNotFoundError,
    RankMismatchError,
    ShapeMismatchError,
    TensorBoundsError,
    TensorError,
    UnsupportedMutationError,
)
from .domain._lock_policy import ILockPolicy
from .domain._slice import IIndex, ISlice
from .domain._tensor import IIdTensor, ITensor
from .infrastructure.concurrent import (
    ConcurrentTensorShell,
    MutexLockPolicy,
    ReadWriteLock,
    ReadWriteLockPolicy,
    StripedLockPolicy,
    create_lock_policy,
)
from .infrastructure.config import TensorConfig, get_config, set_config
from .infrastructure.factory import (
    compose_view,
    copy_tensor,
    create_dense,
    create_id_tensor,
    infer_element_kind,
    read_only,
    tensor_from_values,
    with_concurrency,
    with_ids,
)
from .infrastructure.slice import (
    IdentitySlice,
    Index,
    MappedSlice,
    composite_slice,
    range_slice,
    single_slice,
)
from .infrastructure.tensor import (
    DenseTensor,
    IdTensor,
    ReadOnlyTensorShell,
    ReferenceTensor,
    TensorSequence,
    TensorShell,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConcurrentTensorShell",
    "DenseTensor",
    "DuplicateIdentifierError",
    "ElementKind",
    "ElementKindError",
    "IIdTensor",
    "IIndex",
    "ILockPolicy",
    "ISlice",
    "ITensor",
    "IdTensor",
    "IdentifierNotFoundError",
    "IdentitySlice",
    "Index",
    "MappedSlice",
    "MutexLockPolicy",
    "RankMismatchError",
    "ReadOnlyTensorShell",
    "ReadWriteLock",
    "ReadWriteLockPolicy",
    "ReferenceTensor",
    "ShapeMismatchError",
    "StripedLockPolicy",
    "TensorBoundsError",
    "TensorConfig",
    "TensorError",
    "TensorSequence",
    "TensorShell",
    "UnsupportedMutationError",
    "compose_view",
    "composite_slice",
    "copy_tensor",
    "create_dense",
    "create_id_tensor",
    "create_lock_policy",
    "get_config",
    "infer_element_kind",
    "range_slice",
    "read_only",
    "set_config",
    "single_slice",
    "tensor_from_values",
    "with_concurrency",
    "with_ids",
]
