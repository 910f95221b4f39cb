"""
Mapping between domain formats and NumPy dtypes.

The domain layer knows formats only by name. This module is the single place
where a `Format` is tied to a concrete NumPy dtype, and where an arbitrary
backend dtype is classified into the closed set of supported formats.
"""

from typing import Dict

import numpy as np

from ...domain._format import Format

NATIVE_DTYPES: Dict[Format, np.dtype] = {
    Format.INT32: np.dtype(np.int32),
    Format.FLOAT32: np.dtype(np.float32),
    Format.BOOL: np.dtype(np.bool_),
}


def native_dtype(format: Format) -> np.dtype:
    return NATIVE_DTYPES[format]


def format_of_dtype(dtype: np.dtype) -> Format:
    """
    Classify a NumPy dtype into a supported format.

    Parameters
    ----------
    dtype : np.dtype
        Any NumPy dtype.

    Returns
    -------
    Format
        ``BOOL`` for the bool kind, ``INT32`` for signed/unsigned integer
        kinds and ``FLOAT32`` for floating kinds.

    Raises
    ------
    TypeError
        If the dtype is not boolean, integer or floating (e.g. complex,
        string or object arrays).
    """
    kind = np.dtype(dtype).kind
    if kind == "b":
        return Format.BOOL
    if kind in ("i", "u"):
        return Format.INT32
    if kind == "f":
        return Format.FLOAT32
    raise TypeError(f"Unsupported tensor dtype: {dtype!r}")
