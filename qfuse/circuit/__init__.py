"""Circuit IR."""

from .core import GateOp, QuantumCircuit, gate_matrix

__all__ = ["GateOp", "QuantumCircuit", "gate_matrix"]
