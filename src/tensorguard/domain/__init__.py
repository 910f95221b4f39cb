"""
Backend-agnostic domain model: formats, failure kinds, results and the tensor
protocol.
"""

from ._errors import TensorFailure, InvalidData, CannotBroadcast, IncompatibleShape
from ._format import (
    Format,
    Extrema,
    FORMAT_EXTREMA,
    extrema_of,
    format_to_native,
    parse_format,
)
from ._result import Ok, Err, Result
from ._tensor import ITensor

__all__ = [
    TensorFailure.__name__,
    InvalidData.__name__,
    CannotBroadcast.__name__,
    IncompatibleShape.__name__,
    Format.__name__,
    Extrema.__name__,
    "FORMAT_EXTREMA",
    extrema_of.__name__,
    format_to_native.__name__,
    parse_format.__name__,
    Ok.__name__,
    Err.__name__,
    "Result",
    ITensor.__name__,
]
