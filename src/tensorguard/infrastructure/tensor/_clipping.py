"""
Array-level saturation primitives.

These helpers operate on raw NumPy arrays and never on `Tensor` objects, so
the tensor wrapper itself can use them to normalize backend output. The
tensor-facing clipping API (`clip_based_on`, `clip_reformat`, ...) is built
on top of them in `_reformat`.

Both functions are pure: they allocate new arrays and leave their inputs
untouched.
"""

from typing import Any

import numpy as np

from ...domain._format import Format, extrema_of
from ._formats import native_dtype


def select(mask: np.ndarray, if_true: Any, if_false: Any) -> np.ndarray:
    """
    Pick elements from `if_true` where `mask` holds and from `if_false`
    elsewhere.

    Parameters
    ----------
    mask : np.ndarray
        Boolean mask, broadcastable against both branches.
    if_true : Any
        Array or scalar used where `mask` is True.
    if_false : Any
        Array or scalar used where `mask` is False.

    Returns
    -------
    np.ndarray
        Newly allocated array. Neither branch is written to.
    """
    return np.where(mask, if_true, if_false)


def saturate(values: np.ndarray, format: Format) -> np.ndarray:
    """
    Cast `values` into `format`, replacing out-of-range elements with the
    nearest extremum of that format.

    The below-min and above-max masks are computed on the *source* values,
    before the cast: NumPy leaves float-to-integer casts of out-of-range
    values undefined, so masking afterwards would be too late.

    Parameters
    ----------
    values : np.ndarray
        Source array of any boolean, integer or floating dtype.
    format : Format
        Target format.

    Returns
    -------
    np.ndarray
        Array of the target format's native dtype with every element inside
        the format's extrema. ``±inf`` saturate to the extrema as well.

    Notes
    -----
    - Boolean targets have no extrema; the values are cast directly.
    - Boolean sources always fit a numeric format and are cast directly.
    - NaN elements compare False against both bounds and are passed through.
      Callers are expected to have rejected NaN beforehand.
    """
    values = np.asarray(values)
    dtype = native_dtype(format)
    extrema = extrema_of(format)

    if extrema is None or values.dtype.kind == "b":
        return values.astype(dtype)

    # float32 cannot hold the int32 bounds exactly; compare in float64
    if values.dtype.kind == "f" and values.dtype.itemsize < 8:
        values = values.astype(np.float64)

    with np.errstate(invalid="ignore"):
        below = values < extrema.min
        above = values > extrema.max

    out = select(below, extrema.min, select(above, extrema.max, values))
    return np.asarray(out).astype(dtype)
