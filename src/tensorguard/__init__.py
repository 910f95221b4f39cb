"""
tensorguard: a total, format-bounded, NaN-free tensor layer over NumPy.

Every operation returns ``Ok(value)`` or ``Err(failure)`` where the failure is
one of ``InvalidData``, ``CannotBroadcast`` or ``IncompatibleShape``.

    >>> import tensorguard as tg
    >>> x = tg.tensor([1, 2, 3], tg.Format.INT32).unwrap()
    >>> tg.divide(x, tg.tensor(0.5).unwrap()).map(tg.to_flat_list)
    Ok(value=[2, 4, 6])
"""

from .domain import (
    TensorFailure,
    InvalidData,
    CannotBroadcast,
    IncompatibleShape,
    Format,
    Extrema,
    FORMAT_EXTREMA,
    extrema_of,
    format_to_native,
    parse_format,
    Ok,
    Err,
    Result,
    ITensor,
)
from .infrastructure.tensor import (
    Tensor,
    select,
    reformat,
    reformat_like,
    clip_based_on,
    clip_reformat,
    clip_reformat_like,
    result,
    broadcast_result,
    shape_result,
)
from .infrastructure.ops import *  # noqa: F401,F403
from .infrastructure.ops import __all__ as _ops_all

__version__ = "0.1.0"

__all__ = [
    "TensorFailure",
    "InvalidData",
    "CannotBroadcast",
    "IncompatibleShape",
    "Format",
    "Extrema",
    "FORMAT_EXTREMA",
    "extrema_of",
    "format_to_native",
    "parse_format",
    "Ok",
    "Err",
    "Result",
    "ITensor",
    "Tensor",
    "select",
    "reformat",
    "reformat_like",
    "clip_based_on",
    "clip_reformat",
    "clip_reformat_like",
    "result",
    "broadcast_result",
    "shape_result",
    *_ops_all,
]
