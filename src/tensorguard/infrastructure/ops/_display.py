"""
Element formatting for tensor pretty-printers.

`prepare_to_string` turns every element of a tensor into a short string with
trimmed precision. The caller-side renderer lays them out in columns using
the returned maximum width and `columns()`.
"""

from __future__ import annotations

import math
import os
import sys
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Tuple

from ...domain._format import Format
from ..tensor._tensor import Tensor

PRECISION = 3
EXPONENTIAL_THRESHOLD = 1e21
"""Magnitudes from here on are rendered in exponential notation."""

_QUANTUM = Decimal(1).scaleb(-PRECISION)


def _to_fixed(value: float) -> str:
    """
    Render `value` with `PRECISION` fractional digits.

    Rounding is half away from zero on the exact binary value. Non-finite
    values and magnitudes at or above `EXPONENTIAL_THRESHOLD` fall back to
    the shortest round-trip representation (``1e+21``, ``inf``).
    """
    value = float(value)
    if not math.isfinite(value) or abs(value) >= EXPONENTIAL_THRESHOLD:
        return repr(value)
    if value == 0:
        value = 0.0  # drop the sign of -0.0
    return str(Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_UP))


def format_element(value: float, format: Format) -> str:
    """
    Format one element for display.

    Parameters
    ----------
    value : float
        Element value.
    format : Format
        Format of the tensor the element belongs to.

    Returns
    -------
    str
        ``"3"`` for an ``INT32`` three, ``"3.0"`` for a ``FLOAT32`` three,
        ``"0.125"`` for one eighth. Exponential strings are left untouched.
    """
    text = _to_fixed(value)
    if "e" in text:
        return text

    text = text.rstrip("0")
    if format.is_integer:
        text = text.rstrip(".")
    elif text.endswith("."):
        text = f"{text}0"
    return text


def prepare_to_string(x: Tensor) -> Tuple[List[str], int]:
    """
    Format every element of `x` for display.

    Parameters
    ----------
    x : Tensor
        Tensor to render.

    Returns
    -------
    Tuple[List[str], int]
        The formatted elements in row-major order, and the length of the
        longest one (``0`` for an empty tensor).
    """
    items = [format_element(v, x.format) for v in x.data.reshape(-1).tolist()]
    width = max((len(item) for item in items), default=0)
    return items, width


def columns() -> int:
    """
    Return the character width of the terminal attached to stdout.

    Returns
    -------
    int
        The terminal width, or ``0`` when stdout is not an interactive
        terminal or its size cannot be queried.
    """
    stream = sys.stdout
    if stream is None or not stream.isatty():
        return 0
    try:
        return os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return 0
