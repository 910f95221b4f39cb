"""
Public tensor operations.

Every operation that touches the backend returns a ``Result``; see the
individual modules for the per-category format and failure policy:

- ``_creation``: construction and reflection
- ``_shape``: reshape, broadcast, squeeze, concat
- ``_logical``: comparisons and boolean logic
- ``_arithmetic``: elementwise arithmetic
- ``_basic_math``: unary math
- ``_reduction``: reductions over axis lists
- ``_conversion``: scalar and list extraction
- ``_display``: element formatting for printers
"""

from ._creation import tensor, size, shape, format_of
from ._shape import reshape, broadcast, squeeze, concat
from ._logical import (
    equal,
    not_equal,
    greater,
    greater_or_equal,
    less,
    less_or_equal,
    logical_and,
    logical_or,
    logical_xor,
    logical_not,
)
from ._arithmetic import (
    add,
    subtract,
    multiply,
    divide,
    modulo,
    power,
    max,
    min,
)
from ._basic_math import (
    absolute_value,
    negate,
    sign,
    ceiling,
    floor,
    round,
    exp,
    square_root,
    ln,
)
from ._reduction import (
    all,
    any,
    arg_max,
    arg_min,
    max_over,
    min_over,
    sum,
    product,
    mean,
)
from ._conversion import (
    to_number,
    to_flat_list,
    to_float,
    to_int,
    to_floats,
    to_ints,
)
from ._display import prepare_to_string, columns

__all__ = [
    "tensor",
    "size",
    "shape",
    "format_of",
    "reshape",
    "broadcast",
    "squeeze",
    "concat",
    "equal",
    "not_equal",
    "greater",
    "greater_or_equal",
    "less",
    "less_or_equal",
    "logical_and",
    "logical_or",
    "logical_xor",
    "logical_not",
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulo",
    "power",
    "max",
    "min",
    "absolute_value",
    "negate",
    "sign",
    "ceiling",
    "floor",
    "round",
    "exp",
    "square_root",
    "ln",
    "all",
    "any",
    "arg_max",
    "arg_min",
    "max_over",
    "min_over",
    "sum",
    "product",
    "mean",
    "to_number",
    "to_flat_list",
    "to_float",
    "to_int",
    "to_floats",
    "to_ints",
    "prepare_to_string",
    "columns",
]
