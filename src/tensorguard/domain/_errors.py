"""
Typed failure kinds for tensorguard operations.

This module defines the closed set of failures a tensorguard operation may
report. Failures are ordinary exception classes so they can carry a message
and be raised on demand (see :meth:`Err.unwrap`), but the public operations
never raise them: they are returned as values inside an ``Err`` result.

The taxonomy is intentionally small:

- :class:`InvalidData` for NaN-producing computations, math-domain
  violations and malformed construction input.
- :class:`CannotBroadcast` for operands whose shapes cannot be combined
  elementwise.
- :class:`IncompatibleShape` for reshape, broadcast, squeeze, concatenation,
  reduction-axis and scalar-extraction targets that do not fit the source.
"""

from typing import Optional


class TensorFailure(RuntimeError):
    """
    Base class for every failure kind reported by tensorguard.

    Failures compare equal when they are of the same kind, regardless of the
    message they carry. This makes ``Err(InvalidData()) == Err(InvalidData())``
    hold, which is what callers pattern-matching on results expect.

    Attributes
    ----------
    default_message : str
        Message used when no explicit message is supplied.
    """

    default_message = "tensor operation failed."

    def __init__(self, message: Optional[str] = None) -> None:
        """
        Initialize the failure.

        Parameters
        ----------
        message : Optional[str]
            Human-readable detail. Defaults to the class' ``default_message``.
        """
        super().__init__(message or self.default_message)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class InvalidData(TensorFailure):
    """
    Raised (or returned) when an operation produced NaN, violated a math
    domain (e.g. square root of a negative number), or received malformed or
    empty construction input.
    """

    default_message = "tensor data is invalid or produced NaN."


class CannotBroadcast(TensorFailure):
    """Operand shapes are incompatible for elementwise combination."""

    default_message = "operand shapes cannot be broadcast together."


class IncompatibleShape(TensorFailure):
    """
    The requested target shape, axis list or scalar extraction does not fit
    the source tensor's element count or rank.
    """

    default_message = "target shape is incompatible with the tensor."
