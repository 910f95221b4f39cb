"""
Success/failure tagged union used by every public tensorguard operation.

A :data:`Result` is either :class:`Ok`, carrying a success value, or
:class:`Err`, carrying one of the failure kinds from
:mod:`tensorguard.domain._errors`. Both variants expose the same small
combinator surface so call sites can chain work without branching:

    tensor([1, 2, 3]).then(lambda t: reshape(t, [3, 1])).map(size)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from ._errors import TensorFailure

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """
    Success variant of :data:`Result`.

    Attributes
    ----------
    value : T
        The successfully computed value.
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False

    def map(self, f: Callable[[T], U]) -> "Ok[U]":
        """
        Apply `f` to the success value and wrap the outcome in ``Ok``.

        Parameters
        ----------
        f : Callable[[T], U]
            Transformation of the success value. It is expected to be total.

        Returns
        -------
        Ok[U]
            The transformed success value.
        """
        return Ok(f(self.value))

    def then(self, f: Callable[[T], "Result[U]"]) -> "Result[U]":
        """
        Chain a further fallible computation on the success value.

        Parameters
        ----------
        f : Callable[[T], Result[U]]
            Computation returning its own ``Result``.

        Returns
        -------
        Result[U]
            Whatever `f` returns.
        """
        return f(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """
    Failure variant of :data:`Result`.

    ``map`` and ``then`` short-circuit and return the failure unchanged.

    Attributes
    ----------
    error : TensorFailure
        The failure kind (``InvalidData``, ``CannotBroadcast`` or
        ``IncompatibleShape``).
    """

    error: TensorFailure

    def is_ok(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True

    def map(self, f: Callable) -> "Err":
        return self

    def then(self, f: Callable) -> "Err":
        return self

    def unwrap(self):
        """
        Raise the carried failure.

        Raises
        ------
        TensorFailure
            Always.
        """
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err]
