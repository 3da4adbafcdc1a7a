"""Circuit passes built on the block composer."""

from .consolidate import (
    TwoQubitBlock,
    block_operations,
    block_to_matrix,
    collect_two_qubit_blocks,
    consolidate_blocks,
)

__all__ = [
    "TwoQubitBlock",
    "collect_two_qubit_blocks",
    "block_operations",
    "block_to_matrix",
    "consolidate_blocks",
]
