"""numpy boundary for the block composer.

Host code hands over ``(array, qubits)`` pairs of numpy arrays and gets a
(4, 4) ``complex128`` ndarray back. Shape and type problems are rejected
here so the composer only ever sees well-formed matrices.
"""

from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np
import torch

from qfuse.block import Operation, blocks_to_matrix, expected_dim, normalize_subset
from qfuse.errors import DimensionMismatchError, EmptyBlockError


def decode_operation(pair: Any, index: int) -> Operation:
    """
    Decode one ``(array_like, qubits)`` pair into an Operation on CPU.

    Raises
    ------
    TypeError
        If ``pair`` is not a 2-item tuple/list or the array is not numeric.
    DimensionMismatchError
        If the array is not 2-D or its shape disagrees with ``qubits``.
    MalformedSubsetError
        If ``qubits`` is not a valid position subset.
    """
    if not isinstance(pair, (tuple, list)) or len(pair) != 2:
        raise TypeError(
            f"Operation {index} must be a (matrix, qubits) pair, got {type(pair).__name__}."
        )
    data, qubits = pair
    subset = normalize_subset(qubits, index)
    dim = expected_dim(subset)
    if dim is None:
        return Operation(matrix=None, qubits=subset)

    array = np.asarray(data)
    if array.dtype.kind not in "biufc":
        raise TypeError(
            f"Operation {index} matrix must be numeric, got dtype {array.dtype}."
        )
    if array.ndim != 2 or array.shape != (dim, dim):
        raise DimensionMismatchError(expected=(dim, dim), actual=array.shape, index=index)

    # Always copy: host buffers may be read-only or mutated after the call.
    matrix = torch.from_numpy(np.array(array, dtype=np.complex128, order="C"))
    return Operation(matrix=matrix, qubits=subset)


def blocks_to_matrix_numpy(
    op_list: Sequence[Any],
    little_endian: bool = False,
) -> np.ndarray:
    """
    Compose a block given as numpy arrays and return a numpy matrix.

    Parameters
    ----------
    op_list:
        Ordered ``(array_like, qubits)`` pairs.
    little_endian:
        Passed through to ``blocks_to_matrix``.

    Returns
    -------
    np.ndarray
        C-contiguous (4, 4) array of dtype complex128.
    """
    if len(op_list) == 0:
        raise EmptyBlockError()

    ops: List[Operation] = [decode_operation(pair, i) for i, pair in enumerate(op_list)]
    result = blocks_to_matrix(
        ops,
        dtype=torch.complex128,
        device=torch.device("cpu"),
        little_endian=little_endian,
    )
    return np.ascontiguousarray(result.numpy(), dtype=np.complex128)


__all__ = ["decode_operation", "blocks_to_matrix_numpy"]
