"""Two-position block composition."""

from .compose import blocks_to_matrix
from .types import (
    VALID_SUBSETS,
    Operation,
    PositionSubset,
    expected_dim,
    normalize_subset,
    validate_block,
)

__all__ = [
    "blocks_to_matrix",
    "Operation",
    "PositionSubset",
    "VALID_SUBSETS",
    "normalize_subset",
    "expected_dim",
    "validate_block",
]
