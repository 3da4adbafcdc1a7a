"""Collapse runs of gates on at most two qubits into single unitaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import torch

from qfuse.block import blocks_to_matrix
from qfuse.circuit import QuantumCircuit, gate_matrix
from qfuse.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TwoQubitBlock:
    """
    A run of consecutive circuit operations confined to one or two qubits.

    Attributes
    ----------
    qubits:
        Circuit qubits touched by the run, in order of first appearance.
        ``qubits[0]`` is local position 0 when the block is composed.
    op_indices:
        Indices into ``circuit.ops`` of the operations in the run.
    """

    qubits: Tuple[int, ...]
    op_indices: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.op_indices)


def collect_two_qubit_blocks(circuit: QuantumCircuit) -> List[TwoQubitBlock]:
    """
    Split ``circuit.ops`` into maximal runs touching at most two qubits.

    A run is closed as soon as the next operation would bring a third qubit
    into it. Every operation belongs to exactly one block and blocks are
    returned in circuit order.
    """
    blocks: List[TwoQubitBlock] = []
    qubits: List[int] = []
    indices: List[int] = []

    for index, op in enumerate(circuit.ops):
        new = [q for q in op.qubits if q not in qubits]
        if indices and len(qubits) + len(new) > 2:
            blocks.append(TwoQubitBlock(tuple(qubits), tuple(indices)))
            qubits, indices = [], []
            new = list(op.qubits)
        qubits.extend(new)
        indices.append(index)

    if indices:
        blocks.append(TwoQubitBlock(tuple(qubits), tuple(indices)))
    return blocks


def block_operations(
    circuit: QuantumCircuit,
    block: TwoQubitBlock,
    dtype: torch.dtype | None = None,
) -> List[Tuple[torch.Tensor, List[int]]]:
    """
    Translate a block into the ``(matrix, local_positions)`` pairs consumed
    by ``blocks_to_matrix``.
    """
    local = {q: pos for pos, q in enumerate(block.qubits)}
    ops = circuit.ops
    pairs: List[Tuple[torch.Tensor, List[int]]] = []
    for index in block.op_indices:
        op = ops[index]
        pairs.append((gate_matrix(op, dtype=dtype), [local[q] for q in op.qubits]))
    return pairs


def block_to_matrix(
    circuit: QuantumCircuit,
    block: TwoQubitBlock,
    dtype: torch.dtype | None = None,
) -> torch.Tensor:
    """
    Compose a block into one matrix.

    Returns a 4x4 matrix in the basis |qubits[0] qubits[1]>. A block that
    touches a single qubit still yields a 4x4 matrix, with the identity on
    local position 1.
    """
    return blocks_to_matrix(block_operations(circuit, block, dtype=dtype), dtype=dtype)


def consolidate_blocks(
    circuit: QuantumCircuit,
    min_block_size: int = 2,
) -> QuantumCircuit:
    """
    Return a new circuit where each two-qubit block with at least
    ``min_block_size`` operations is replaced by one "UNITARY" op.

    One-qubit blocks and smaller blocks are copied unchanged. The input
    circuit is not modified.
    """
    if min_block_size < 1:
        raise ValueError(f"min_block_size must be >= 1, got {min_block_size}.")

    out = QuantumCircuit(circuit.n_qubits)
    ops = circuit.ops
    merged = 0

    for block in collect_two_qubit_blocks(circuit):
        if len(block.qubits) == 2 and len(block) >= min_block_size:
            out.add_unitary(block_to_matrix(circuit, block), block.qubits)
            merged += 1
            continue
        for index in block.op_indices:
            out.append(ops[index])

    logger.info(
        "Consolidated %d gates into %d ops (%d blocks merged)",
        len(circuit),
        len(out),
        merged,
    )
    return out


__all__ = [
    "TwoQubitBlock",
    "collect_two_qubit_blocks",
    "block_operations",
    "block_to_matrix",
    "consolidate_blocks",
]
