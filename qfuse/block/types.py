"""Operations and blocks consumed by the block composer."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

import torch

from qfuse.errors import EmptyBlockError, MalformedSubsetError
from qfuse.linalg.matrix import (
    JOINT_DIM,
    SINGLE_DIM,
    DeviceLike,
    as_matrix,
    check_matrix,
)

PositionSubset = Tuple[int, ...]

VALID_SUBSETS: Tuple[PositionSubset, ...] = ((), (0,), (1,), (0, 1), (1, 0))


def normalize_subset(qubits: Any, index: Optional[int] = None) -> PositionSubset:
    """
    Convert ``qubits`` into one of the five valid local position subsets.

    Labels must be integer-like (Python or numpy integers); floats and bools
    are rejected rather than truncated.

    Raises
    ------
    MalformedSubsetError
        If ``qubits`` is not a sequence of integers forming (), (0,), (1,),
        (0, 1) or (1, 0).
    """
    if isinstance(qubits, (str, bytes)):
        raise MalformedSubsetError(qubits, index)
    try:
        labels = list(qubits)
    except TypeError:
        raise MalformedSubsetError(qubits, index) from None

    subset: List[int] = []
    for label in labels:
        if isinstance(label, bool):
            raise MalformedSubsetError(qubits, index)
        try:
            subset.append(operator.index(label))
        except TypeError:
            raise MalformedSubsetError(qubits, index) from None

    result = tuple(subset)
    if result not in VALID_SUBSETS:
        raise MalformedSubsetError(qubits, index)
    return result


def expected_dim(subset: PositionSubset) -> Optional[int]:
    """Matrix dimension required by ``subset``; None when it is empty."""
    if len(subset) == 1:
        return SINGLE_DIM
    if len(subset) == 2:
        return JOINT_DIM
    return None


@dataclass(frozen=True)
class Operation:
    """
    A gate matrix together with the local positions it acts on.

    Attributes
    ----------
    matrix:
        (2, 2) complex tensor for one position, (4, 4) for two. Ignored
        when ``qubits`` is empty.
    qubits:
        One of (), (0,), (1,), (0, 1), (1, 0).
    """

    matrix: Optional[torch.Tensor]
    qubits: PositionSubset

    @classmethod
    def from_pair(
        cls,
        pair: Tuple[Any, Sequence[int]],
        index: Optional[int] = None,
        dtype: Optional[torch.dtype] = None,
        device: DeviceLike = None,
    ) -> "Operation":
        """Build a validated Operation from a ``(matrix, qubits)`` pair."""
        data, qubits = pair
        subset = normalize_subset(qubits, index)
        dim = expected_dim(subset)
        if dim is None:
            return cls(matrix=None, qubits=subset)

        matrix = as_matrix(data, dtype=dtype, device=device, index=index)
        check_matrix(matrix, dim, index=index)
        return cls(matrix=matrix, qubits=subset)


def validate_block(
    op_list: Sequence[Any],
    dtype: Optional[torch.dtype] = None,
    device: DeviceLike = None,
) -> List[Operation]:
    """
    Validate a whole block before any composition work.

    Parameters
    ----------
    op_list:
        Ordered ``Operation`` objects or ``(matrix, qubits)`` pairs.
    dtype, device:
        Target complex dtype and device for the coerced matrices.

    Returns
    -------
    list of Operation
        Operations whose matrices are complex tensors of the right shape,
        detached from autograd.

    Raises
    ------
    EmptyBlockError
        If ``op_list`` is empty.
    MalformedSubsetError, DimensionMismatchError
        On the first invalid operation.
    """
    if len(op_list) == 0:
        raise EmptyBlockError()

    ops: List[Operation] = []
    for index, item in enumerate(op_list):
        if isinstance(item, Operation):
            item = (item.matrix, item.qubits)
        ops.append(Operation.from_pair(item, index=index, dtype=dtype, device=device))
    return ops


__all__ = [
    "PositionSubset",
    "VALID_SUBSETS",
    "normalize_subset",
    "expected_dim",
    "Operation",
    "validate_block",
]
