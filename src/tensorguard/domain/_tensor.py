"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects using
structural typing. The interface captures the minimal, backend-agnostic
surface the operation wrappers and callers rely on: shape, element format,
element count and host interop.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ._format import Format


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` is an immutable handle to a multi-dimensional numeric array
    whose storage is owned by a backend. Every operation yields a new tensor;
    implementations must not expose a way to mutate the wrapped storage.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            Size of each dimension. ``()`` denotes a rank-0 tensor.
        """
        ...

    @property
    def format(self) -> Format:
        """
        Return the element format of the tensor.

        Returns
        -------
        Format
            One of the supported element formats.
        """
        ...

    @property
    def size(self) -> int:
        """Total number of elements (product of `shape`)."""
        ...

    def to_numpy(self) -> Any:
        """
        Return a writable, caller-owned copy of the tensor's data.

        Returns
        -------
        Any
            Backend-native array (``numpy.ndarray`` for the NumPy backend).
        """
        ...
