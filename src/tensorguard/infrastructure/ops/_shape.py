"""
Shape and joining operations.

All of these run through the result mapper with ``IncompatibleShape`` as the
failure kind: none of them may silently truncate or pad, so any target the
backend rejects surfaces as a typed failure.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ...domain._result import Result
from ..tensor._result_mapper import shape_result
from ..tensor._tensor import Tensor


def reshape(x: Tensor, shape: Sequence[int]) -> Result[Tensor]:
    """
    Reshape `x` to `shape` (row-major).

    Parameters
    ----------
    x : Tensor
        Input tensor.
    shape : Sequence[int]
        Target shape. A single ``-1`` entry is inferred from the element
        count.

    Returns
    -------
    Result[Tensor]
        The reshaped tensor, or ``Err(IncompatibleShape())`` when the element
        counts differ.
    """
    return shape_result(lambda: Tensor(x.data.reshape(tuple(shape))))


def broadcast(x: Tensor, shape: Sequence[int]) -> Result[Tensor]:
    """
    Broadcast `x` to `shape` under standard broadcasting rules.

    Returns
    -------
    Result[Tensor]
        The broadcast tensor, or ``Err(IncompatibleShape())`` when `x`
        cannot be expanded to `shape`.
    """
    return shape_result(lambda: Tensor(np.broadcast_to(x.data, tuple(shape))))


def squeeze(x: Tensor, axes: Sequence[int]) -> Result[Tensor]:
    """
    Remove size-one dimensions.

    Parameters
    ----------
    x : Tensor
        Input tensor.
    axes : Sequence[int]
        Axes to remove. An empty sequence removes every size-one axis.

    Returns
    -------
    Result[Tensor]
        The squeezed tensor, or ``Err(IncompatibleShape())`` when a listed
        axis is out of range or not of size one.
    """
    axis = tuple(axes) or None
    return shape_result(lambda: Tensor(np.squeeze(x.data, axis=axis)))


def concat(xs: Sequence[Tensor], axis: int) -> Result[Tensor]:
    """
    Join tensors along an existing axis.

    Parameters
    ----------
    xs : Sequence[Tensor]
        Tensors to join. Must be non-empty, of equal rank, and agree on every
        dimension except `axis`.
    axis : int
        Axis to join along (negative values count from the end).

    Returns
    -------
    Result[Tensor]
        The joined tensor, or ``Err(IncompatibleShape())``.

    Notes
    -----
    Mixed formats follow NumPy promotion and are then normalized into a
    supported format (e.g. ``int32`` with ``float32`` gives ``float32``).
    """
    return shape_result(
        lambda: Tensor(np.concatenate([x.data for x in xs], axis=axis))
    )
