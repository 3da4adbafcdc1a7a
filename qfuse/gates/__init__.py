"""Standard gate matrices."""

from .standard import (
    CNOT,
    CZ,
    RX,
    RY,
    RZ,
    SWAP,
    H,
    I,
    S,
    T,
    X,
    Y,
    Z,
)

__all__ = [
    "I",
    "X",
    "Y",
    "Z",
    "H",
    "S",
    "T",
    "CNOT",
    "CZ",
    "SWAP",
    "RX",
    "RY",
    "RZ",
]
