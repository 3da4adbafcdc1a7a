"""Fixed-size dense complex matrices.

A block matrix is a plain 2-D ``torch.Tensor`` of shape (2, 2) or (4, 4)
with complex entries, indexed ``m[row, col]``.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import numpy as np
import torch

from qfuse.core.device import Device, resolve_torch_device
from qfuse.errors import DimensionMismatchError

SINGLE_DIM = 2
JOINT_DIM = 4
DEFAULT_DTYPE = torch.complex128

DeviceLike = Union[Device, torch.device, str, None]


def _resolve_dtype(dtype: Optional[torch.dtype], dev: DeviceLike = None) -> torch.dtype:
    if dtype is None:
        if isinstance(dev, Device):
            return dev.complex_dtype
        return DEFAULT_DTYPE
    if not dtype.is_complex:
        raise ValueError(f"dtype must be a complex dtype, got {dtype}")
    return dtype


def zeros(
    dim: int,
    dtype: Optional[torch.dtype] = None,
    device: DeviceLike = None,
) -> torch.Tensor:
    """Return a zero-initialized (dim, dim) complex matrix."""
    return torch.zeros(
        (dim, dim),
        dtype=_resolve_dtype(dtype, device),
        device=resolve_torch_device(device),
    )


def identity(
    dim: int,
    dtype: Optional[torch.dtype] = None,
    device: DeviceLike = None,
) -> torch.Tensor:
    """Return the (dim, dim) complex identity matrix."""
    return torch.eye(
        dim,
        dtype=_resolve_dtype(dtype, device),
        device=resolve_torch_device(device),
    )


def as_matrix(
    data: Any,
    dtype: Optional[torch.dtype] = None,
    device: DeviceLike = None,
    index: Optional[int] = None,
) -> torch.Tensor:
    """
    Coerce ``data`` into a square complex matrix.

    Parameters
    ----------
    data:
        A torch tensor, numpy array, or nested sequence of numbers.
    dtype:
        Target complex dtype. Defaults to complex128.
    device:
        Target device. Tensors already on a device stay there when None.
    index:
        Operation index used in error messages.

    Returns
    -------
    torch.Tensor
        A 2-D complex tensor detached from autograd. May share memory
        with a tensor ``data`` when no conversion is needed; callers must
        not write into it.

    Raises
    ------
    DimensionMismatchError
        If the result is not a square 2-D matrix.
    """
    target_dtype = _resolve_dtype(dtype, device)

    if isinstance(data, torch.Tensor):
        target_device = data.device if device is None else resolve_torch_device(device)
        # Composition is numeric only; autograd history is not carried.
        matrix = data.detach().to(dtype=target_dtype, device=target_device)
    else:
        array = np.array(data, dtype=np.complex128, order="C")
        matrix = torch.from_numpy(array).to(
            dtype=target_dtype, device=resolve_torch_device(device)
        )

    if matrix.dim() != 2 or matrix.shape[0] != matrix.shape[1]:
        raise DimensionMismatchError(
            expected=(matrix.shape[0],) * 2 if matrix.dim() >= 1 else (),
            actual=tuple(matrix.shape),
            index=index,
        )
    return matrix


def check_matrix(
    matrix: torch.Tensor,
    dim: int,
    index: Optional[int] = None,
) -> None:
    """Raise DimensionMismatchError unless ``matrix`` has shape (dim, dim)."""
    if tuple(matrix.shape) != (dim, dim):
        raise DimensionMismatchError(
            expected=(dim, dim), actual=tuple(matrix.shape), index=index
        )


__all__ = [
    "SINGLE_DIM",
    "JOINT_DIM",
    "DEFAULT_DTYPE",
    "zeros",
    "identity",
    "as_matrix",
    "check_matrix",
]
