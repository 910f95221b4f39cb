"""
Result mapper: the single crossing point between the NumPy backend and
tensorguard's typed results.

The backend signals failure by raising (shape mismatches, bad axes,
unsupported dtype combinations) and is silent about NaN. `result` turns both
behaviors into explicit values:

1. the checked operation runs under ``np.errstate(all="ignore")`` so
   floating-point events never surface as warnings or exceptions;
2. any exception raised during execution becomes ``Err(error_type())``;
3. the produced value is scanned element by element with the self-inequality
   test (``x != x``); any NaN turns the outcome into ``Err(InvalidData())``.

The scan is never skipped. Its cost is proportional to the element count of
the result.

Everything downstream of this module may assume it only sees classified
outcomes.
"""

import warnings
from typing import Any, Callable, Type, TypeVar

import numpy as np

from ...domain._errors import (
    CannotBroadcast,
    IncompatibleShape,
    InvalidData,
    TensorFailure,
)
from ...domain._result import Err, Ok, Result
from .._config import debug_enabled
from ._tensor import Tensor

T = TypeVar("T")

CheckedOperation = Callable[[], T]
"""A deferred, zero-argument computation evaluated inside the mapper."""


def _contains_nan(value: Any) -> bool:
    """
    Return True if any element of `value` is NaN.

    Parameters
    ----------
    value : Any
        A `Tensor`, NumPy array/scalar, Python scalar or flat sequence.

    Returns
    -------
    bool
        Whether any element is not equal to itself.
    """
    arr = value.data if isinstance(value, Tensor) else np.asarray(value)
    if arr.dtype == object:
        return any(x != x for x in arr.reshape(-1).tolist())
    return not bool(np.all(arr == arr))


def _report(message: str) -> None:
    if debug_enabled():
        warnings.warn(message, RuntimeWarning, stacklevel=4)


def result(
    op: CheckedOperation[T], error_type: Type[TensorFailure] = InvalidData
) -> Result[T]:
    """
    Execute a checked operation and classify its outcome.

    Parameters
    ----------
    op : CheckedOperation[T]
        Zero-argument callable wrapping one or more backend calls.
    error_type : Type[TensorFailure], optional
        Failure kind reported when `op` raises. Defaults to `InvalidData`.

    Returns
    -------
    Result[T]
        ``Ok(value)`` when `op` succeeded and its value holds no NaN,
        ``Err(error_type())`` when `op` raised, and ``Err(InvalidData())``
        when the value holds a NaN.

    Notes
    -----
    With ``TENSORGUARD_DEBUG`` set, recovered faults and NaN rejections are
    reported as ``RuntimeWarning``.
    """
    try:
        with np.errstate(all="ignore"):
            value = op()
    except Exception as e:
        _report(
            f"{error_type.__name__}: recovered {type(e).__name__} "
            f"from backend: {e}"
        )
        return Err(error_type())

    if _contains_nan(value):
        _report("InvalidData: result contains NaN")
        return Err(InvalidData())

    return Ok(value)


def broadcast_result(op: CheckedOperation[T]) -> Result[T]:
    """`result` specialization reporting faults as `CannotBroadcast`."""
    return result(op, CannotBroadcast)


def shape_result(op: CheckedOperation[T]) -> Result[T]:
    """`result` specialization reporting faults as `IncompatibleShape`."""
    return result(op, IncompatibleShape)
