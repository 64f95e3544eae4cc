"""
Tensor implementations.

This package groups the dense backing store, reference views, the
sub-tensor sequence returned by iteration, identifier layers and the
delegating shells used as decorators.
"""

from ._base import AbstractTensor
from ._dense import DenseTensor
from ._id_tensor import IdTensor
from ._read_only import ReadOnlyTensorShell
from ._reference import ReferenceTensor
from ._sequence import TensorSequence
from ._shell import TensorShell

__all__ = [
    AbstractTensor.__name__,
    DenseTensor.__name__,
    IdTensor.__name__,
    ReadOnlyTensorShell.__name__,
    ReferenceTensor.__name__,
    TensorSequence.__name__,
    TensorShell.__name__,
]
