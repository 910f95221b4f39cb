"""
Unary elementwise math.

Format policy per operation:

- `absolute_value`, `negate`, `sign`, `round` keep the input format.
- `ceiling` and `floor` compute in a floating intermediate and reformat back
  to the input format.
- `exp` is clip-reformatted to the input format, so overflow saturates.
- `square_root` and `ln` compute in a floating intermediate; a negative input
  produces NaN, which the result mapper turns into ``Err(InvalidData())``.
  On success the value is clip-reformatted to the input format.

The floating intermediate is the input itself for ``FLOAT32`` tensors and
float64 for ``INT32``/``BOOL`` tensors, which holds every int32 value
exactly.
"""

from __future__ import annotations

from functools import partial

import numpy as np

from ...domain._format import Format
from ...domain._result import Result
from ..tensor._reformat import clip_reformat_like, reformat_like
from ..tensor._result_mapper import result
from ..tensor._tensor import Tensor


def _floating(x: Tensor) -> np.ndarray:
    if x.format is Format.FLOAT32:
        return x.data
    return x.data.astype(np.float64)


def absolute_value(x: Tensor) -> Result[Tensor]:
    return result(lambda: reformat_like(np.absolute(_signed(x)), x))


def negate(x: Tensor) -> Result[Tensor]:
    """
    Elementwise ``-x``.

    ``INT32`` negation is computed in int64 and saturated, so negating the
    int32 minimum gives the int32 maximum. Negating a ``BOOL`` tensor is
    ``Err(InvalidData())``.
    """
    return result(lambda: reformat_like(np.negative(_signed(x)), x))


def sign(x: Tensor) -> Result[Tensor]:
    return result(lambda: reformat_like(np.sign(_signed(x)), x))


def round(x: Tensor) -> Result[Tensor]:
    """Round half to even, in `x`'s format."""
    return result(lambda: reformat_like(np.round(x.data), x))


def ceiling(x: Tensor) -> Result[Tensor]:
    return result(lambda: reformat_like(np.ceil(_floating(x)), x))


def floor(x: Tensor) -> Result[Tensor]:
    return result(lambda: reformat_like(np.floor(_floating(x)), x))


def exp(x: Tensor) -> Result[Tensor]:
    """
    Elementwise natural exponential, clip-reformatted to `x`'s format.

    ``exp(100)`` on a ``FLOAT32`` tensor gives the float32 maximum rather than
    ``inf``; on an ``INT32`` tensor it gives the int32 maximum.
    """
    return result(lambda: clip_reformat_like(np.exp(_floating(x)), x))


def square_root(x: Tensor) -> Result[Tensor]:
    """
    Elementwise square root.

    Parameters
    ----------
    x : Tensor
        Input tensor.

    Returns
    -------
    Result[Tensor]
        The square root in `x`'s format (truncated for ``INT32``), or
        ``Err(InvalidData())`` when any element is negative.
    """
    return result(lambda: np.sqrt(_floating(x))).map(
        partial(clip_reformat_like, other=x)
    )


def ln(x: Tensor) -> Result[Tensor]:
    """
    Elementwise natural logarithm.

    ``ln(0)`` is ``-inf`` and saturates to the format minimum; a negative
    element gives ``Err(InvalidData())``.
    """
    return result(lambda: np.log(_floating(x))).map(
        partial(clip_reformat_like, other=x)
    )


def _signed(x: Tensor) -> np.ndarray:
    if x.format is Format.INT32:
        return x.data.astype(np.int64)
    return x.data
