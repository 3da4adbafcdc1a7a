"""Circuit IR: an ordered list of gate applications."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import torch

from qfuse.gates import standard as stdgates
from qfuse.linalg.matrix import as_matrix, check_matrix


@dataclass(frozen=True)
class GateOp:
    """
    A single gate application in a circuit.

    Attributes
    ----------
    name:
        Gate name, e.g. "H", "CNOT", "RZ", or "UNITARY" for an explicit
        matrix.
    qubits:
        Target qubit indices (0-based). The first listed qubit is the most
        significant bit of a two-qubit gate's basis.
    params:
        Rotation angles for parametric gates, otherwise None.
    matrix:
        Explicit gate matrix for "UNITARY" ops, otherwise None.
    """

    name: str
    qubits: Tuple[int, ...]
    params: Optional[Tuple[float, ...]] = None
    matrix: Optional[torch.Tensor] = field(default=None, compare=False)


_FIXED_1Q: Dict[str, Callable[..., torch.Tensor]] = {
    "I": stdgates.I,
    "X": stdgates.X,
    "Y": stdgates.Y,
    "Z": stdgates.Z,
    "H": stdgates.H,
    "S": stdgates.S,
    "T": stdgates.T,
}
_ROTATIONS: Dict[str, Callable[..., torch.Tensor]] = {
    "RX": stdgates.RX,
    "RY": stdgates.RY,
    "RZ": stdgates.RZ,
}
_FIXED_2Q: Dict[str, Callable[..., torch.Tensor]] = {
    "CNOT": stdgates.CNOT,
    "CX": stdgates.CNOT,
    "CZ": stdgates.CZ,
    "SWAP": stdgates.SWAP,
}


class QuantumCircuit:
    """
    An ordered list of one- and two-qubit gate applications on n_qubits.
    """

    def __init__(self, n_qubits: int) -> None:
        if n_qubits <= 0:
            raise ValueError("QuantumCircuit requires n_qubits >= 1.")

        self._n_qubits = int(n_qubits)
        self._ops: List[GateOp] = []

    @property
    def n_qubits(self) -> int:
        """Number of qubits in this circuit."""
        return self._n_qubits

    @property
    def ops(self) -> Tuple[GateOp, ...]:
        """Read-only tuple of all gate operations."""
        return tuple(self._ops)

    def _check_qubits(self, qubits: Sequence[int]) -> Tuple[int, ...]:
        q_tuple = tuple(int(q) for q in qubits)
        if not q_tuple:
            raise ValueError("GateOp must act on at least one qubit.")
        if len(q_tuple) > 2:
            raise ValueError(
                f"Only one- and two-qubit gates are supported, got qubits {q_tuple}."
            )
        if len(set(q_tuple)) != len(q_tuple):
            raise ValueError(f"Gate qubits must be distinct, got {q_tuple}.")
        for q in q_tuple:
            if q < 0 or q >= self._n_qubits:
                raise ValueError(
                    f"Qubit index {q} is out of range for this circuit "
                    f"(n_qubits={self._n_qubits})."
                )
        return q_tuple

    def add_gate(
        self,
        name: str,
        qubits: Sequence[int],
        params: Optional[Sequence[float]] = None,
    ) -> None:
        """
        Append a named gate.

        Parameters
        ----------
        name:
            One of I, X, Y, Z, H, S, T, RX, RY, RZ, CNOT (alias CX), CZ, SWAP.
        qubits:
            Target qubit indices. For CNOT the first one is the control.
        params:
            Rotation angle for RX, RY and RZ.
        """
        q_tuple = self._check_qubits(qubits)
        p_tuple = None if params is None else tuple(float(p) for p in params)
        op = GateOp(name=name, qubits=q_tuple, params=p_tuple)
        # Resolve once so unknown names fail at insertion time.
        gate_matrix(op)
        self._ops.append(op)

    def add_unitary(
        self,
        matrix: Any,
        qubits: Sequence[int],
        name: str = "UNITARY",
    ) -> None:
        """Append an explicit 2x2 or 4x4 matrix acting on ``qubits``."""
        q_tuple = self._check_qubits(qubits)
        mat = as_matrix(matrix).clone()
        check_matrix(mat, 2 ** len(q_tuple))
        self._ops.append(GateOp(name=name, qubits=q_tuple, matrix=mat))

    def append(self, op: GateOp) -> None:
        """Append an existing GateOp after checking its qubits."""
        self._check_qubits(op.qubits)
        self._ops.append(op)

    def copy(self) -> "QuantumCircuit":
        """Return a copy of this circuit; GateOps are immutable and shared."""
        new = QuantumCircuit(self._n_qubits)
        new._ops.extend(self._ops)
        return new

    def __len__(self) -> int:
        return len(self._ops)

    def gate_counts(self) -> Dict[str, int]:
        """Map gate names to their number of occurrences."""
        counts: Dict[str, int] = {}
        for op in self._ops:
            counts[op.name] = counts.get(op.name, 0) + 1
        return counts


def gate_matrix(
    op: GateOp,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Resolve a GateOp to its 2x2 or 4x4 matrix.

    Raises
    ------
    ValueError
        If the name is unknown, the arity is wrong, or a rotation lacks
        exactly one parameter.
    """
    if op.matrix is not None:
        return as_matrix(op.matrix, dtype=dtype, device=device)

    n = op.name.upper()
    arity = len(op.qubits)

    if n in _FIXED_1Q and arity == 1:
        return _FIXED_1Q[n](dtype=dtype, device=device)
    if n in _ROTATIONS and arity == 1:
        if not op.params or len(op.params) != 1:
            raise ValueError(f"Gate {n} requires exactly one parameter.")
        return _ROTATIONS[n](op.params[0], dtype=dtype, device=device)
    if n in _FIXED_2Q and arity == 2:
        return _FIXED_2Q[n](dtype=dtype, device=device)

    raise ValueError(
        f"Unsupported gate {op.name!r} on {arity} qubit(s). "
        "Supported: I, X, Y, Z, H, S, T, RX, RY, RZ (1 qubit); "
        "CNOT, CX, CZ, SWAP (2 qubits)."
    )
