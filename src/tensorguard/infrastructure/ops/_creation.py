"""
Tensor construction and reflection.

`tensor` is the only way user data enters tensorguard. It copies the input,
validates it, infers or applies the element format and saturates every value
into that format's extrema, all inside the result mapper so malformed input
comes back as ``Err(InvalidData())`` rather than an exception.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

import numpy as np

from ...domain._format import Format, Number, parse_format
from ...domain._result import Result
from ..tensor._formats import format_of_dtype
from ..tensor._reformat import clip_reformat
from ..tensor._result_mapper import result
from ..tensor._tensor import Tensor
from ._shape import reshape


def _as_array(data: Any) -> np.ndarray:
    raw = np.asarray(data)
    if raw.dtype == object:
        # e.g. Python ints beyond the int64 range
        raw = np.asarray(data, dtype=np.float64)
    return raw


def _build(data: Any, format: Optional[Union[Format, str]]) -> Tensor:
    raw = _as_array(data)

    if raw.ndim > 1:
        raise ValueError("expected a scalar or a flat sequence of numbers")
    if raw.ndim == 1 and raw.size == 0:
        raise ValueError("cannot build a tensor from an empty sequence")

    inferred = format_of_dtype(raw.dtype)
    if raw.dtype.kind == "f" and bool(np.isnan(raw).any()):
        raise ValueError("tensor data contains NaN")

    target = inferred if format is None else parse_format(format)
    return clip_reformat(raw, target)


def tensor(
    data: Union[Number, Sequence[Number]],
    format: Optional[Union[Format, str]] = None,
    shape: Optional[Sequence[int]] = None,
) -> Result[Tensor]:
    """
    Build a tensor from a scalar or a flat sequence of numbers.

    Parameters
    ----------
    data : Union[Number, Sequence[Number]]
        A scalar (producing a rank-0 tensor) or a non-empty flat sequence
        (producing a rank-1 tensor of length ``len(data)``).
    format : Optional[Union[Format, str]], optional
        Element format. When omitted it is inferred from the data: booleans
        give ``BOOL``, integers ``INT32``, anything else ``FLOAT32``.
    shape : Optional[Sequence[int]], optional
        Target shape. When given, the rank-1 tensor is reshaped to it.

    Returns
    -------
    Result[Tensor]
        ``Ok(tensor)`` on success. ``Err(InvalidData())`` for empty, nested,
        ragged, non-numeric or NaN-containing input.
        ``Err(IncompatibleShape())`` when `shape` does not hold exactly
        ``len(data)`` elements.

    Notes
    -----
    Values outside the format's representable range (including ``±inf``)
    saturate to the nearest extremum.
    """
    built = result(lambda: _build(data, format))
    if shape is None:
        return built
    return built.then(lambda t: reshape(t, shape))


def size(x: Tensor) -> int:
    return x.size


def shape(x: Tensor) -> tuple[int, ...]:
    return x.shape


def format_of(x: Tensor) -> Format:
    return x.format
