"""
Reformatter and clipping engine.

The functions in this module align a tensor (or a raw backend result) to a
target format:

- `reformat` / `reformat_like` cast without clipping float targets. They are
  used where only format alignment is needed (comparisons, reductions,
  natural output formats of arithmetic).
- `clip_based_on`, `clip_reformat` and `clip_reformat_like` additionally
  saturate every element into the target format's extrema, so out-of-range
  results are bounded and reproducible instead of backend-defined.

Integer targets always saturate, even through `reformat`: NumPy's
float-to-integer cast of an out-of-range value is undefined behavior and
would otherwise leak platform-dependent garbage.

Every function accepts either a `Tensor` or a raw NumPy value so guarded
computations can keep a wide intermediate (e.g. float64) until the final
narrowing step.
"""

from typing import Any, Union

import numpy as np

from ...domain._format import Format
from ._clipping import saturate
from ._formats import native_dtype
from ._tensor import Tensor

TensorLike = Union[Tensor, np.ndarray, Any]


def values_of(x: TensorLike) -> np.ndarray:
    """Return the backend array behind `x` (no copy for tensors)."""
    if isinstance(x, Tensor):
        return x.data
    return np.asarray(x)


def reformat(x: TensorLike, format: Format) -> Tensor:
    """
    Cast `x` to `format`; identity when the format already matches.

    Parameters
    ----------
    x : TensorLike
        Tensor or raw backend value.
    format : Format
        Target format.

    Returns
    -------
    Tensor
        `x` itself when it is a tensor of `format`, otherwise a new tensor.

    Notes
    -----
    - ``FLOAT32`` targets use a plain cast; float overflow becomes ``±inf``.
    - ``INT32`` targets saturate (see module notes).
    - ``BOOL`` targets map non-zero to True.
    """
    if isinstance(x, Tensor) and x.format is format:
        return x

    values = values_of(x)
    if format is Format.INT32:
        return Tensor(saturate(values, format))
    with np.errstate(over="ignore"):
        return Tensor(values.astype(native_dtype(format)))


def reformat_like(x: TensorLike, other: Tensor) -> Tensor:
    return reformat(x, other.format)


def clip_based_on(x: Tensor) -> Tensor:
    """
    Saturate a tensor into the extrema of its own format.

    Elements below the format minimum become the minimum, elements above the
    maximum become the maximum, in-range elements are untouched. ``BOOL``
    tensors are returned unchanged.

    Parameters
    ----------
    x : Tensor
        Input tensor.

    Returns
    -------
    Tensor
        Newly built tensor; `x` is never modified.
    """
    if not x.format.is_numeric:
        return x
    return Tensor(saturate(x.data, x.format))


def clip_reformat(x: TensorLike, format: Format) -> Tensor:
    """
    Cast `x` to `format` (if different) and clip into its extrema.

    Used by explicit conversions and by operations whose result can leave
    the representable range of the operand format (division, sums,
    products, exponentials).

    Parameters
    ----------
    x : TensorLike
        Tensor or raw backend value.
    format : Format
        Target format.

    Returns
    -------
    Tensor
        Tensor of `format` with every element within its extrema.
    """
    if isinstance(x, Tensor) and x.format is format:
        return clip_based_on(x)
    return Tensor(saturate(values_of(x), format))


def clip_reformat_like(x: TensorLike, other: Tensor) -> Tensor:
    """
    Clip-reformat `x` to the format of `other`.

    When the formats already match the value is still clipped, which bounds
    overflow introduced by the computation that produced `x`.
    """
    return clip_reformat(x, other.format)
