"""Standard gate matrices used to build blocks.

Two-qubit gates are written in the basis |q_first q_second>, the first
listed qubit being the most significant bit, which matches position 0 of
the block composer's default convention.
"""

from __future__ import annotations

import cmath
import math
from typing import Optional, Sequence

import torch

from qfuse.linalg.matrix import DEFAULT_DTYPE


def _gate(
    rows: Sequence[Sequence[complex]],
    dtype: Optional[torch.dtype],
    device: Optional[torch.device],
) -> torch.Tensor:
    return torch.tensor(
        rows,
        dtype=DEFAULT_DTYPE if dtype is None else dtype,
        device=torch.device("cpu") if device is None else device,
    )


def I(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Single-qubit identity."""
    return _gate([[1.0, 0.0], [0.0, 1.0]], dtype, device)


def X(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-X (bit flip)."""
    return _gate([[0.0, 1.0], [1.0, 0.0]], dtype, device)


def Y(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-Y."""
    return _gate([[0.0, -1.0j], [1.0j, 0.0]], dtype, device)


def Z(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-Z (phase flip)."""
    return _gate([[1.0, 0.0], [0.0, -1.0]], dtype, device)


def H(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Hadamard."""
    s = 1.0 / math.sqrt(2.0)
    return _gate([[s, s], [s, -s]], dtype, device)


def S(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Phase gate, sqrt(Z)."""
    return _gate([[1.0, 0.0], [0.0, 1.0j]], dtype, device)


def T(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """pi/8 gate, sqrt(S)."""
    return _gate([[1.0, 0.0], [0.0, cmath.exp(1.0j * math.pi / 4.0)]], dtype, device)


def CNOT(
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
    control_first: bool = True,
) -> torch.Tensor:
    """
    Controlled-NOT.

    Args:
        dtype: Complex dtype. Defaults to torch.complex128.
        device: PyTorch device. Defaults to CPU.
        control_first: If True the first qubit controls the second,
            otherwise the second qubit controls the first.

    Returns:
        A (4, 4) complex tensor.
    """
    if control_first:
        # |10> <-> |11>
        rows = [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
            [0.0, 0.0, 1.0, 0.0],
        ]
    else:
        # |01> <-> |11>
        rows = [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
        ]
    return _gate(rows, dtype, device)


def CZ(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Controlled-Z; symmetric in its two qubits."""
    return _gate(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, -1.0],
        ],
        dtype,
        device,
    )


def SWAP(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Exchange the states of two qubits."""
    return _gate(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype,
        device,
    )


def RX(
    theta: float,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Rotation about X: RX(theta) = exp(-i theta X / 2).

        [[cos(theta/2), -i sin(theta/2)],
         [-i sin(theta/2), cos(theta/2)]]
    """
    c = math.cos(float(theta) / 2.0)
    s = math.sin(float(theta) / 2.0)
    return _gate([[c, -1.0j * s], [-1.0j * s, c]], dtype, device)


def RY(
    theta: float,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Rotation about Y: RY(theta) = exp(-i theta Y / 2).

        [[cos(theta/2), -sin(theta/2)],
         [sin(theta/2), cos(theta/2)]]
    """
    c = math.cos(float(theta) / 2.0)
    s = math.sin(float(theta) / 2.0)
    return _gate([[c, -s], [s, c]], dtype, device)


def RZ(
    theta: float,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """Rotation about Z: RZ(theta) = diag(exp(-i theta/2), exp(i theta/2))."""
    half = float(theta) / 2.0
    return _gate([[cmath.exp(-1.0j * half), 0.0], [0.0, cmath.exp(1.0j * half)]], dtype, device)
