"""qfuse - collapse two-qubit gate blocks into dense 4x4 matrices with PyTorch."""

__version__ = "0.1.0"

from .block import (
    VALID_SUBSETS,
    Operation,
    blocks_to_matrix,
    normalize_subset,
    validate_block,
)
from .circuit import GateOp, QuantumCircuit, gate_matrix
from .core import Device, default_device, device
from .diagnostics import (
    check_block_result,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .errors import (
    BlockError,
    DimensionMismatchError,
    EmptyBlockError,
    MalformedSubsetError,
)
from .gates import CNOT, CZ, RX, RY, RZ, SWAP, H, I, S, T, X, Y, Z
from .io import blocks_to_matrix_numpy
from .linalg import (
    change_basis,
    embed_on_inner,
    embed_on_inner_into,
    embed_on_outer,
    embed_on_outer_into,
    matmul_into,
)
from .logging import configure_logging, get_logger, set_log_level
from .transpile import (
    TwoQubitBlock,
    block_to_matrix,
    collect_two_qubit_blocks,
    consolidate_blocks,
)

__all__ = [
    "__version__",
    # Block composition
    "blocks_to_matrix",
    "blocks_to_matrix_numpy",
    "Operation",
    "VALID_SUBSETS",
    "normalize_subset",
    "validate_block",
    # Kernel helpers
    "embed_on_outer",
    "embed_on_inner",
    "embed_on_outer_into",
    "embed_on_inner_into",
    "change_basis",
    "matmul_into",
    # Errors
    "BlockError",
    "MalformedSubsetError",
    "DimensionMismatchError",
    "EmptyBlockError",
    # Devices and diagnostics
    "Device",
    "device",
    "default_device",
    "is_debug_enabled",
    "check_block_result",
    "set_debug_enabled",
    "debug_context",
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Gates
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
    # Circuits
    "GateOp",
    "QuantumCircuit",
    "gate_matrix",
    "TwoQubitBlock",
    "collect_two_qubit_blocks",
    "block_to_matrix",
    "consolidate_blocks",
]
