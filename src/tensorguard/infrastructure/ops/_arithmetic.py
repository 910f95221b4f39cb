"""
Elementwise arithmetic with broadcasting.

Format policy
-------------
- The natural output format of a binary operation is ``FLOAT32`` when either
  operand is ``FLOAT32`` and ``INT32`` otherwise. ``BOOL`` operands take part
  as integers.
- Integer operands are evaluated in a widened accumulator (``int64``; float64
  for `power`) and narrowed back to ``INT32`` with saturation, so integer
  results never wrap around.
- Float results are left unclipped: a ``FLOAT32`` overflow stays ``±inf``.
- `divide` is the exception. Its result is clip-reformatted to the left
  operand's format, because a quotient can leave the operand's range or
  carry a fractional part the operand format cannot hold. Division of two
  integer operands is floored; any other quotient truncates on the cast.
- An integer zero divisor in `modulo` has no defined result and is reported
  as ``Err(InvalidData())``, the same as the float path.

Every operation is broadcast-guarded: incompatible shapes give
``Err(CannotBroadcast())`` and a NaN anywhere in the raw result gives
``Err(InvalidData())``.
"""

from __future__ import annotations

from functools import partial
from typing import Callable

import numpy as np

from ...domain._format import Format
from ...domain._result import Result
from ..tensor._reformat import clip_reformat_like, reformat
from ..tensor._result_mapper import broadcast_result
from ..tensor._tensor import Tensor

BinaryKernel = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _natural_format(a: Tensor, b: Tensor) -> Format:
    if Format.FLOAT32 in (a.format, b.format):
        return Format.FLOAT32
    return Format.INT32


def _widen(x: Tensor, float_accumulator: bool = False) -> np.ndarray:
    if x.format is Format.FLOAT32:
        return x.data
    return x.data.astype(np.float64 if float_accumulator else np.int64)


def _floored_modulo(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    out = np.mod(a, b)
    if out.dtype.kind == "i" and np.any(b == 0):
        # NaN marks the undefined elements for the result mapper
        return np.where(b == 0, np.nan, out)
    return out


def _floored_divide(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    # float64 holds every int32 quotient closely enough to floor exactly
    return np.floor(np.true_divide(a, b))


def _arithmetic(
    kernel: BinaryKernel, a: Tensor, b: Tensor, float_accumulator: bool = False
) -> Result[Tensor]:
    format = _natural_format(a, b)
    return broadcast_result(
        lambda: kernel(
            _widen(a, float_accumulator), _widen(b, float_accumulator)
        )
    ).map(partial(reformat, format=format))


def add(a: Tensor, b: Tensor) -> Result[Tensor]:
    """
    Elementwise ``a + b``.

    Parameters
    ----------
    a : Tensor
        Left operand.
    b : Tensor
        Right operand, broadcastable against `a`.

    Returns
    -------
    Result[Tensor]
        Sum in the natural output format, or ``Err(CannotBroadcast())``.
    """
    return _arithmetic(np.add, a, b)


def subtract(a: Tensor, b: Tensor) -> Result[Tensor]:
    return _arithmetic(np.subtract, a, b)


def multiply(a: Tensor, b: Tensor) -> Result[Tensor]:
    return _arithmetic(np.multiply, a, b)


def divide(a: Tensor, b: Tensor) -> Result[Tensor]:
    """
    Elementwise true division, clip-reformatted to `a`'s format.

    When both operands are ``INT32`` or ``BOOL`` the quotient is floored
    (``-7 / 2`` gives ``-4``). With a ``FLOAT32`` right operand an ``INT32``
    left operand receives the quotient truncated toward zero. Either way the
    value is saturated, so ``2147483647 / 0.5`` gives ``2147483647`` and
    ``7 / 0`` gives the int32 maximum. ``0 / 0`` is NaN and therefore
    ``Err(InvalidData())``.

    Returns
    -------
    Result[Tensor]
        Quotient in `a`'s format, ``Err(CannotBroadcast())`` or
        ``Err(InvalidData())``.
    """
    if _natural_format(a, b) is Format.INT32:
        kernel = _floored_divide
    else:
        kernel = np.true_divide
    return broadcast_result(
        lambda: kernel(_widen(a, True), _widen(b, True))
    ).map(partial(clip_reformat_like, other=a))


def modulo(a: Tensor, b: Tensor) -> Result[Tensor]:
    """
    Elementwise floored modulo; the result takes the sign of the divisor.

    A zero divisor gives ``Err(InvalidData())`` for every format.
    """
    return _arithmetic(_floored_modulo, a, b)


def power(a: Tensor, b: Tensor) -> Result[Tensor]:
    """
    Elementwise ``a ** b``.

    Integer powers are evaluated in float64, so negative exponents are
    allowed (``2 ** -1`` truncates to ``0``) and large results saturate at
    the int32 extrema. A negative float base with a fractional exponent is
    NaN and gives ``Err(InvalidData())``.
    """
    return _arithmetic(np.power, a, b, float_accumulator=True)


def max(a: Tensor, b: Tensor) -> Result[Tensor]:
    return _arithmetic(np.maximum, a, b)


def min(a: Tensor, b: Tensor) -> Result[Tensor]:
    return _arithmetic(np.minimum, a, b)
