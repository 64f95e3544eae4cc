"""
Construction and decoration entry points for tensors.

Design notes
------------
- Allocation, view composition and decoration all go through these
  functions, so identifier layers stay on top of any shell they receive.
"""

from ._factory import (
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

__all__ = [
    compose_view.__name__,
    copy_tensor.__name__,
    create_dense.__name__,
    create_id_tensor.__name__,
    infer_element_kind.__name__,
    read_only.__name__,
    tensor_from_values.__name__,
    with_concurrency.__name__,
    with_ids.__name__,
]
