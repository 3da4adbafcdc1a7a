"""Lift single-position matrices into the joint two-position space.

Position labels follow tensor-product order: the outer factor is the most
significant bit of the joint basis index |outer inner>.

    embed_on_outer(M) == kron(M, I)
    embed_on_inner(M) == kron(I, M)

Both come in an allocating form and an ``_into`` form that overwrites a
caller-supplied 4x4 buffer; the two forms produce identical values.
"""

from __future__ import annotations

from typing import Optional

import torch

from .matrix import JOINT_DIM, SINGLE_DIM, check_matrix, zeros


def embed_on_outer_into(out: torch.Tensor, matrix: torch.Tensor) -> torch.Tensor:
    """
    Write ``kron(matrix, I)`` into ``out`` and return ``out``.

    ``out[2*i + k, 2*j + k] = matrix[i, j]`` for k in {0, 1}; every other
    entry is zero. All 16 entries of ``out`` are overwritten.
    """
    check_matrix(matrix, SINGLE_DIM)
    check_matrix(out, JOINT_DIM)
    out.zero_()
    out[0::2, 0::2] = matrix
    out[1::2, 1::2] = matrix
    return out


def embed_on_inner_into(out: torch.Tensor, matrix: torch.Tensor) -> torch.Tensor:
    """
    Write ``kron(I, matrix)`` into ``out`` and return ``out``.

    ``out[2*k + i, 2*k + j] = matrix[i, j]`` for k in {0, 1}; every other
    entry is zero.
    """
    check_matrix(matrix, SINGLE_DIM)
    check_matrix(out, JOINT_DIM)
    out.zero_()
    out[0:2, 0:2] = matrix
    out[2:4, 2:4] = matrix
    return out


def embed_on_outer(matrix: torch.Tensor) -> torch.Tensor:
    """Return a new 4x4 matrix equal to ``kron(matrix, I)``."""
    out = zeros(JOINT_DIM, dtype=matrix.dtype, device=matrix.device)
    return embed_on_outer_into(out, matrix)


def embed_on_inner(matrix: torch.Tensor) -> torch.Tensor:
    """Return a new 4x4 matrix equal to ``kron(I, matrix)``."""
    out = zeros(JOINT_DIM, dtype=matrix.dtype, device=matrix.device)
    return embed_on_inner_into(out, matrix)


def _swap_middle_rows(matrix: torch.Tensor) -> None:
    matrix[[1, 2]] = matrix[[2, 1]]


def change_basis(matrix: torch.Tensor, index: Optional[int] = None) -> torch.Tensor:
    """
    Re-express a two-position matrix defined on positions [1, 0] in the
    canonical [0, 1] order.

    The result equals ``SWAP @ matrix @ SWAP``; it is built by transposing,
    exchanging rows 1 and 2, transposing back and exchanging rows 1 and 2
    again. Applying it twice returns the input exactly. The input is not
    modified.

    Parameters
    ----------
    matrix:
        A (4, 4) complex matrix.
    index:
        Operation index used in error messages.

    Returns
    -------
    torch.Tensor
        A new contiguous (4, 4) matrix.
    """
    check_matrix(matrix, JOINT_DIM, index=index)
    reordered = matrix.transpose(0, 1).clone()
    _swap_middle_rows(reordered)
    reordered = reordered.transpose(0, 1).clone()
    _swap_middle_rows(reordered)
    return reordered


__all__ = [
    "embed_on_outer",
    "embed_on_inner",
    "embed_on_outer_into",
    "embed_on_inner_into",
    "change_basis",
]
