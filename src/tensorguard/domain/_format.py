"""
Tensor element formats and their representable ranges.

This module defines:

- `Format`: the closed enumeration of scalar element representations a
  tensor may hold
- `Extrema`: a (min, max) pair of representable values
- `FORMAT_EXTREMA`: the static per-format extrema table consulted by the
  clipping engine

The domain layer stays backend-agnostic: nothing here imports NumPy. The
mapping between a `Format` and a concrete backend dtype lives in the
infrastructure layer.
"""

from enum import Enum
from typing import Dict, NamedTuple, Optional, Union

Number = Union[int, float, bool]
"""Native Python scalar accepted by and returned from tensor operations."""


class Format(Enum):
    """
    Enumeration of supported tensor element formats.

    Attributes
    ----------
    INT32 : Format
        32-bit signed integer.
    FLOAT32 : Format
        IEEE-754 single precision float.
    BOOL : Format
        Boolean. Carries no extrema and is exempt from clipping.
    """

    INT32 = "int32"
    FLOAT32 = "float32"
    BOOL = "bool"

    @property
    def native(self) -> str:
        """Lowercase backend-facing name of the format (e.g. ``"int32"``)."""
        return self.value

    @property
    def is_numeric(self) -> bool:
        return self is not Format.BOOL

    @property
    def is_integer(self) -> bool:
        return self is Format.INT32

    def __str__(self) -> str:
        return self.value


class Extrema(NamedTuple):
    """Minimum and maximum value representable in a format."""

    min: Number
    max: Number


FORMAT_EXTREMA: Dict[Format, Extrema] = {
    Format.INT32: Extrema(min=-2_147_483_648, max=2_147_483_647),
    Format.FLOAT32: Extrema(
        min=-3.4028234663852886e38,
        max=3.4028234663852886e38,
    ),
}
"""Static extrema table. Non-numeric formats are intentionally absent."""


def extrema_of(format: Format) -> Optional[Extrema]:
    """
    Look up the representable range of a format.

    Parameters
    ----------
    format : Format
        Element format.

    Returns
    -------
    Optional[Extrema]
        The (min, max) pair, or None when clipping does not apply
        (``Format.BOOL``).
    """
    return FORMAT_EXTREMA.get(format)


def format_to_native(format: Format) -> str:
    return format.native


def parse_format(name: Union[str, Format]) -> Format:
    """
    Resolve a format from its name.

    Parameters
    ----------
    name : Union[str, Format]
        Either a `Format` (returned unchanged) or a case-insensitive name such
        as ``"int32"`` or ``"FLOAT32"``.

    Returns
    -------
    Format
        The matching format.

    Raises
    ------
    ValueError
        If the name does not denote a supported format.
    """
    if isinstance(name, Format):
        return name
    try:
        return Format(str(name).lower())
    except ValueError:
        raise ValueError(
            f"Invalid format {name!r}. Expected one of "
            f"{[f.value for f in Format]}"
        ) from None
