"""Tests for the circuit IR."""

from __future__ import annotations

import pytest
import torch

from qfuse.circuit import GateOp, QuantumCircuit, gate_matrix
from qfuse.errors import DimensionMismatchError
from qfuse.gates import CNOT, RZ, SWAP, H


def test_add_gate_records_ops() -> None:
    """Gates are stored in order with normalized qubits and params."""
    circuit = QuantumCircuit(n_qubits=2)
    circuit.add_gate("H", [0])
    circuit.add_gate("RZ", [1], params=[0.5])
    circuit.add_gate("CNOT", (0, 1))

    assert len(circuit) == 3
    assert circuit.ops[0] == GateOp(name="H", qubits=(0,))
    assert circuit.ops[1].params == (0.5,)
    assert circuit.gate_counts() == {"H": 1, "RZ": 1, "CNOT": 1}


@pytest.mark.parametrize(
    "name, qubits, params",
    [
        ("H", [2], None),
        ("H", [], None),
        ("CNOT", [0, 0], None),
        ("CCX", [0, 1, 2], None),
        ("FOO", [0], None),
        ("CNOT", [0], None),
        ("RX", [0], None),
        ("RX", [0], [0.1, 0.2]),
    ],
)
def test_add_gate_rejects_invalid(name, qubits, params) -> None:
    """Bad qubits, arities, names and parameters raise ValueError."""
    circuit = QuantumCircuit(n_qubits=3 if name == "CCX" else 2)
    with pytest.raises(ValueError):
        circuit.add_gate(name, qubits, params=params)


def test_zero_qubit_circuit_rejected() -> None:
    """A circuit needs at least one qubit."""
    with pytest.raises(ValueError):
        QuantumCircuit(0)


def test_add_unitary_copies_matrix() -> None:
    """Explicit matrices are copied and shape-checked."""
    circuit = QuantumCircuit(n_qubits=2)
    m = SWAP()
    circuit.add_unitary(m, [1, 0])
    m[0, 0] = 5.0

    op = circuit.ops[0]
    assert op.name == "UNITARY"
    assert op.qubits == (1, 0)
    assert torch.equal(op.matrix, SWAP())

    with pytest.raises(DimensionMismatchError):
        circuit.add_unitary(H(), [0, 1])


def test_gate_matrix_resolution() -> None:
    """Named gates resolve to their matrices, explicit ones to themselves."""
    assert torch.equal(gate_matrix(GateOp("cx", (0, 1))), CNOT())
    assert torch.allclose(gate_matrix(GateOp("RZ", (0,), (0.25,))), RZ(0.25))
    explicit = GateOp("UNITARY", (0, 1), matrix=SWAP())
    assert torch.equal(gate_matrix(explicit), SWAP())


def test_copy_is_independent() -> None:
    """Appending to a copy leaves the original untouched."""
    circuit = QuantumCircuit(n_qubits=1)
    circuit.add_gate("X", [0])
    clone = circuit.copy()
    clone.append(GateOp("Z", (0,)))
    assert len(circuit) == 1
    assert len(clone) == 2
