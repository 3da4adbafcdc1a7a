"""Matrix product into a preallocated destination."""

from __future__ import annotations

import torch

from .matrix import JOINT_DIM, check_matrix


def _shares_storage(a: torch.Tensor, b: torch.Tensor) -> bool:
    return a.untyped_storage().data_ptr() == b.untyped_storage().data_ptr()


def matmul_into(dst: torch.Tensor, lhs: torch.Tensor, rhs: torch.Tensor) -> torch.Tensor:
    """
    Compute ``dst = lhs @ rhs`` in place and return ``dst``.

    The previous contents of ``dst`` are never read. ``dst`` must already
    have shape (4, 4) and must not share storage with either operand.

    Raises
    ------
    DimensionMismatchError
        If any argument is not 4x4.
    ValueError
        If ``dst`` aliases ``lhs`` or ``rhs``.
    """
    check_matrix(dst, JOINT_DIM)
    check_matrix(lhs, JOINT_DIM)
    check_matrix(rhs, JOINT_DIM)
    if _shares_storage(dst, lhs) or _shares_storage(dst, rhs):
        raise ValueError("matmul_into destination must not alias an operand.")

    torch.matmul(lhs, rhs, out=dst)
    return dst


__all__ = ["matmul_into"]
