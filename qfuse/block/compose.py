"""Fold a block of one- and two-position operations into one 4x4 matrix."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import torch

from qfuse.diagnostics.debug_mode import check_block_result
from qfuse.linalg.embed import (
    change_basis,
    embed_on_inner,
    embed_on_inner_into,
    embed_on_outer,
    embed_on_outer_into,
)
from qfuse.linalg.matrix import JOINT_DIM, DeviceLike, identity, zeros
from qfuse.linalg.product import matmul_into
from qfuse.logging import get_logger

from .types import Operation, validate_block

logger = get_logger(__name__)


def _infer_device(op_list: Sequence[Any]) -> torch.device:
    for item in op_list:
        if isinstance(item, Operation):
            matrix = item.matrix
        elif isinstance(item, (tuple, list)) and item:
            matrix = item[0]
        else:
            continue
        if isinstance(matrix, torch.Tensor):
            return matrix.device
    return torch.device("cpu")


def _seed(
    op: Operation,
    little_endian: bool,
    dtype: Optional[torch.dtype],
    dev: DeviceLike,
) -> torch.Tensor:
    """Normalize the first operation into a freshly allocated 4x4 matrix."""
    qubits = op.qubits
    if qubits == ():
        return identity(JOINT_DIM, dtype=dtype, device=dev)
    if qubits == (0, 1):
        return op.matrix.clone()
    if qubits == (1, 0):
        return change_basis(op.matrix)

    on_outer = (qubits == (0,)) != little_endian
    return embed_on_outer(op.matrix) if on_outer else embed_on_inner(op.matrix)


def blocks_to_matrix(
    op_list: Sequence[Any],
    dtype: Optional[torch.dtype] = None,
    device: DeviceLike = None,
    little_endian: bool = False,
) -> torch.Tensor:
    """
    Return the 4x4 matrix equal to applying every operation of a block in
    order.

    Each operation is a ``(matrix, qubits)`` pair (or an ``Operation``)
    where ``qubits`` is one of [], [0], [1], [0, 1], [1, 0]. Later
    operations act after earlier ones, so the result is
    ``U_n @ ... @ U_2 @ U_1`` with every ``U_i`` widened to the joint
    two-position space:

    * ``[0]``: ``kron(M, I)`` (``kron(I, M)`` when ``little_endian``)
    * ``[1]``: ``kron(I, M)`` (``kron(M, I)`` when ``little_endian``)
    * ``[0, 1]``: ``M`` unchanged
    * ``[1, 0]``: ``change_basis(M)``
    * ``[]``: identity (the operation is skipped)

    By default position 0 is the most significant bit of the joint basis
    index; ``little_endian=True`` makes it the least significant one.

    The composition is numeric: input tensors are detached, so the result
    never requires grad.

    Parameters
    ----------
    op_list:
        Non-empty ordered sequence of operations.
    dtype:
        Complex dtype of the result. Defaults to complex128.
    device:
        Device for the computation. Defaults to the device of the first
        tensor operand, or CPU.
    little_endian:
        Select the little-endian position convention.

    Returns
    -------
    torch.Tensor
        A new (4, 4) complex tensor that shares no memory with the inputs.

    Raises
    ------
    EmptyBlockError
        If ``op_list`` is empty.
    MalformedSubsetError
        If a position subset is not one of the five valid forms.
    DimensionMismatchError
        If a matrix shape disagrees with its subset.
    """
    dev = _infer_device(op_list) if device is None else device
    ops = validate_block(op_list, dtype=dtype, device=dev)

    accumulator = _seed(ops[0], little_endian, dtype, dev)
    primary = zeros(JOINT_DIM, dtype=accumulator.dtype, device=accumulator.device)
    secondary = zeros(JOINT_DIM, dtype=accumulator.dtype, device=accumulator.device)

    skipped = 0
    for op in ops[1:]:
        qubits = op.qubits
        if qubits == ():
            skipped += 1
            continue

        if qubits == (0, 1):
            lhs = op.matrix
        elif qubits == (1, 0):
            lhs = change_basis(op.matrix)
        elif (qubits == (0,)) != little_endian:
            lhs = embed_on_outer_into(secondary, op.matrix)
        else:
            lhs = embed_on_inner_into(secondary, op.matrix)

        matmul_into(primary, lhs, accumulator)
        primary, accumulator = accumulator, primary

    logger.debug(
        "Composed block of %d operations (%d identity) into a %dx%d matrix",
        len(ops),
        skipped,
        JOINT_DIM,
        JOINT_DIM,
    )

    check_block_result(accumulator, len(ops))

    return accumulator


__all__ = ["blocks_to_matrix"]
