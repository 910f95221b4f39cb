"""
Elementwise comparison and boolean logic.

Every binary operation here is broadcast-guarded (``CannotBroadcast`` on a
shape mismatch) and reformats its boolean outcome to the format of the left
operand. The output format is inherited, not forced to ``BOOL``: comparing
two ``FLOAT32`` tensors yields a ``FLOAT32`` tensor of ``1.0`` / ``0.0``.

Logical operations cast their operands to boolean first, so any non-zero
value counts as True.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from ...domain._result import Result
from ..tensor._reformat import reformat_like
from ..tensor._result_mapper import broadcast_result, result
from ..tensor._tensor import Tensor

BinaryKernel = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _compare(kernel: BinaryKernel, a: Tensor, b: Tensor) -> Result[Tensor]:
    return broadcast_result(lambda: reformat_like(kernel(a.data, b.data), a))


def _logic(kernel: BinaryKernel, a: Tensor, b: Tensor) -> Result[Tensor]:
    return broadcast_result(
        lambda: reformat_like(kernel(a.data.astype(bool), b.data.astype(bool)), a)
    )


# ----------------------------
# Comparisons
# ----------------------------
def equal(a: Tensor, b: Tensor) -> Result[Tensor]:
    """
    Elementwise ``a == b``.

    Parameters
    ----------
    a : Tensor
        Left operand; its format is the output format.
    b : Tensor
        Right operand, broadcastable against `a`.

    Returns
    -------
    Result[Tensor]
        ``1`` where equal and ``0`` elsewhere, in `a`'s format, or
        ``Err(CannotBroadcast())``.
    """
    return _compare(np.equal, a, b)


def not_equal(a: Tensor, b: Tensor) -> Result[Tensor]:
    return _compare(np.not_equal, a, b)


def greater(a: Tensor, b: Tensor) -> Result[Tensor]:
    return _compare(np.greater, a, b)


def greater_or_equal(a: Tensor, b: Tensor) -> Result[Tensor]:
    return _compare(np.greater_equal, a, b)


def less(a: Tensor, b: Tensor) -> Result[Tensor]:
    return _compare(np.less, a, b)


def less_or_equal(a: Tensor, b: Tensor) -> Result[Tensor]:
    return _compare(np.less_equal, a, b)


# ----------------------------
# Boolean logic
# ----------------------------
def logical_and(a: Tensor, b: Tensor) -> Result[Tensor]:
    return _logic(np.logical_and, a, b)


def logical_or(a: Tensor, b: Tensor) -> Result[Tensor]:
    return _logic(np.logical_or, a, b)


def logical_xor(a: Tensor, b: Tensor) -> Result[Tensor]:
    return _logic(np.logical_xor, a, b)


def logical_not(x: Tensor) -> Result[Tensor]:
    """Elementwise negation of `x`'s truthiness, in `x`'s format."""
    return result(lambda: reformat_like(np.logical_not(x.data.astype(bool)), x))
