"""
Reductions over an explicit list of axes.

Each reduction takes the axes to collapse as an ordered sequence of indices
(negative indices count from the end; an empty sequence reduces nothing).
Invalid or duplicate axes give ``Err(IncompatibleShape())``.

`sum` and `product` accumulate in a wide type (int64 / float64) and are then
clip-reformatted to the input format, since accumulation can overflow it.
The other reductions are reformatted to the input format without clipping.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ...domain._format import Format
from ...domain._result import Result
from ..tensor._reformat import clip_reformat_like, reformat_like
from ..tensor._result_mapper import shape_result
from ..tensor._tensor import Tensor


def _single_axis(axes: Sequence[int]) -> int:
    axes = tuple(axes)
    if len(axes) != 1:
        raise ValueError(f"expected exactly one axis, got {axes!r}")
    return axes[0]


def all(x: Tensor, axes: Sequence[int]) -> Result[Tensor]:
    """
    Test whether every element along `axes` is non-zero.

    Parameters
    ----------
    x : Tensor
        Input tensor.
    axes : Sequence[int]
        Axes to reduce.

    Returns
    -------
    Result[Tensor]
        ``1``/``0`` (or True/False for ``BOOL``) in `x`'s format, or
        ``Err(IncompatibleShape())``.
    """
    return shape_result(
        lambda: reformat_like(np.all(x.data.astype(bool), axis=tuple(axes)), x)
    )


def any(x: Tensor, axes: Sequence[int]) -> Result[Tensor]:
    return shape_result(
        lambda: reformat_like(np.any(x.data.astype(bool), axis=tuple(axes)), x)
    )


def arg_max(x: Tensor, axes: Sequence[int]) -> Result[Tensor]:
    """
    Index of the maximum along a single axis, in `x`'s format.

    Ties resolve to the first occurrence. `axes` must hold exactly one axis;
    anything else gives ``Err(IncompatibleShape())``.
    """
    return shape_result(
        lambda: reformat_like(np.argmax(x.data, axis=_single_axis(axes)), x)
    )


def arg_min(x: Tensor, axes: Sequence[int]) -> Result[Tensor]:
    return shape_result(
        lambda: reformat_like(np.argmin(x.data, axis=_single_axis(axes)), x)
    )


def max_over(x: Tensor, axes: Sequence[int]) -> Result[Tensor]:
    return shape_result(
        lambda: reformat_like(np.max(x.data, axis=tuple(axes)), x)
    )


def min_over(x: Tensor, axes: Sequence[int]) -> Result[Tensor]:
    return shape_result(
        lambda: reformat_like(np.min(x.data, axis=tuple(axes)), x)
    )


def sum(x: Tensor, axes: Sequence[int]) -> Result[Tensor]:
    """
    Sum along `axes`, saturated into `x`'s format.

    Integer input accumulates in int64 and float input in float64, so the
    saturation step sees the exact (or best available) total.
    """
    dtype = np.float64 if x.format is Format.FLOAT32 else np.int64
    return shape_result(
        lambda: clip_reformat_like(
            np.sum(x.data, axis=tuple(axes), dtype=dtype), x
        )
    )


def product(x: Tensor, axes: Sequence[int]) -> Result[Tensor]:
    """
    Product along `axes`, saturated into `x`'s format.

    Accumulates in float64 for every format: an int64 accumulator could
    itself wrap, while every product that fits int32 is exact in float64.
    """
    return shape_result(
        lambda: clip_reformat_like(
            np.prod(x.data, axis=tuple(axes), dtype=np.float64), x
        )
    )


def mean(x: Tensor, axes: Sequence[int]) -> Result[Tensor]:
    """Arithmetic mean along `axes`; ``INT32`` results truncate toward zero."""
    return shape_result(
        lambda: reformat_like(np.mean(x.data, axis=tuple(axes)), x)
    )
