"""
Scalar and flat-list extraction.

`to_number` and `to_flat_list` are the raw extractors. The public conversions
(`to_float`, `to_int`, `to_floats`, `to_ints`) clip-reformat first, so an
out-of-range value saturates deterministically instead of exhibiting
backend-defined overflow, and run through the result mapper.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, List

from ...domain._errors import IncompatibleShape
from ...domain._format import Format, Number
from ...domain._result import Result
from ..tensor._reformat import clip_reformat
from ..tensor._result_mapper import result, shape_result
from ..tensor._tensor import Tensor


def to_number(x: Any) -> Number:
    """
    Extract a native Python scalar.

    Parameters
    ----------
    x : Any
        A finite native scalar (returned unchanged) or a tensor holding
        exactly one element (rank-0, or every dimension of size one).

    Returns
    -------
    Number
        The scalar as a native ``int``, ``float`` or ``bool``.

    Raises
    ------
    IncompatibleShape
        If `x` is neither a finite scalar nor a single-element tensor. Public
        callers reach this only through the result mapper.
    """
    if isinstance(x, Real) and math.isfinite(x):
        return x
    if isinstance(x, Tensor) and x.size == 1:
        return x.data.reshape(()).item()
    raise IncompatibleShape(f"cannot extract a scalar from {x!r}")


def to_flat_list(x: Tensor) -> List[Number]:
    """
    Flatten `x` row-major into a new list of native Python numbers.

    The list is a copy owned by the caller.
    """
    return x.data.reshape(-1).tolist()


def to_float(x: Tensor) -> Result[float]:
    return shape_result(lambda: to_number(clip_reformat(x, Format.FLOAT32)))


def to_int(x: Tensor) -> Result[int]:
    """
    Convert a single-element tensor to an ``int``.

    Float values truncate toward zero and saturate at the int32 extrema.

    Returns
    -------
    Result[int]
        The value, or ``Err(IncompatibleShape())`` for a tensor with more
        than one element.
    """
    return shape_result(lambda: to_number(clip_reformat(x, Format.INT32)))


def to_floats(x: Tensor) -> Result[List[float]]:
    return result(lambda: to_flat_list(clip_reformat(x, Format.FLOAT32)))


def to_ints(x: Tensor) -> Result[List[int]]:
    return result(lambda: to_flat_list(clip_reformat(x, Format.INT32)))
