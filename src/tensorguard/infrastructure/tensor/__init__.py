"""
NumPy-backed tensor wrapper and the guard/format machinery built around it.

- ``Tensor``: immutable wrapper around a NumPy ndarray
- ``result`` / ``broadcast_result`` / ``shape_result``: the result mapper
- ``reformat`` / ``clip_*``: reformatter and clipping engine
- ``select`` / ``saturate``: pure array-level primitives
"""

from ._tensor import Tensor
from ._clipping import select, saturate
from ._formats import native_dtype, format_of_dtype
from ._reformat import (
    reformat,
    reformat_like,
    clip_based_on,
    clip_reformat,
    clip_reformat_like,
)
from ._result_mapper import result, broadcast_result, shape_result

__all__ = [
    Tensor.__name__,
    select.__name__,
    saturate.__name__,
    native_dtype.__name__,
    format_of_dtype.__name__,
    reformat.__name__,
    reformat_like.__name__,
    clip_based_on.__name__,
    clip_reformat.__name__,
    clip_reformat_like.__name__,
    result.__name__,
    broadcast_result.__name__,
    shape_result.__name__,
]
