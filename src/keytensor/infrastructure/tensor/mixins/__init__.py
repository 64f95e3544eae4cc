"""
Mixins deriving the convenience parts of the tensor contract.
"""

from ._composition import TensorCompositionMixin
from ._value_access import TensorValueAccessMixin

__all__ = [
    TensorCompositionMixin.__name__,
    TensorValueAccessMixin.__name__,
]
