"""
Concrete Tensor implementation (NumPy backend).

This module provides `Tensor`, an owned wrapper around a NumPy ndarray that
satisfies the domain-level `ITensor` protocol. The wrapper is the only
tensor type the operation wrappers accept and produce.

Design notes
------------
- The wrapped array is always one of the native dtypes of the supported
  formats (``int32``, ``float32``, ``bool``). Backend output of any other
  dtype is normalized on the way in: integer kinds narrow to ``int32`` with
  saturation, floating kinds cast to ``float32``.
- The wrapped array is marked read-only. Operations that need a mutable
  buffer must copy (`to_numpy`). This is what makes tensors immutable values
  from a caller's point of view.
- Helper behavior lives in free functions (see `tensorguard.infrastructure.ops`)
  rather than being attached to the backend array type.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ...domain._format import Format
from ...domain._tensor import ITensor
from ._clipping import saturate
from ._formats import format_of_dtype, native_dtype


def _normalize(arr: np.ndarray, format: Format) -> np.ndarray:
    if format is Format.INT32:
        return saturate(arr, format)
    with np.errstate(over="ignore"):
        return arr.astype(native_dtype(format))


class Tensor(ITensor):
    """
    Immutable tensor backed by a NumPy ndarray.

    Parameters
    ----------
    data : Any
        Array-like backend value. It is always copied, so later writes to
        the caller's array never reach the tensor. Construction from user
        data should go
        through `tensorguard.tensor`, which copies and validates.

    Raises
    ------
    TypeError
        If the data's dtype cannot be classified into a supported format.

    Notes
    -----
    `__slots__` is used to prevent dynamic attribute creation.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Any) -> None:
        arr = np.array(data, copy=True)
        format = format_of_dtype(arr.dtype)
        if arr.dtype != native_dtype(format):
            arr = _normalize(arr, format)

        view = arr.view()
        view.flags.writeable = False
        self._data = view

    @property
    def data(self) -> np.ndarray:
        """
        Return a read-only view of the underlying storage.

        Returns
        -------
        np.ndarray
            Read-only array of the tensor's native dtype.
        """
        return self._data

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self._data.shape)

    @property
    def format(self) -> Format:
        return format_of_dtype(self._data.dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def size(self) -> int:
        return int(self._data.size)

    @property
    def ndim(self) -> int:
        return int(self._data.ndim)

    def to_numpy(self) -> np.ndarray:
        """
        Return a writable copy of the tensor's data.

        Returns
        -------
        np.ndarray
            Caller-owned array; mutating it does not affect the tensor.
        """
        return np.array(self._data, copy=True)

    def __repr__(self) -> str:
        return f"Tensor(shape={self.shape}, format={self.format.native})"
