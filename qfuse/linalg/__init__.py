"""Fixed-size complex matrix helpers for two-position blocks."""

from .embed import (
    change_basis,
    embed_on_inner,
    embed_on_inner_into,
    embed_on_outer,
    embed_on_outer_into,
)
from .matrix import (
    DEFAULT_DTYPE,
    JOINT_DIM,
    SINGLE_DIM,
    as_matrix,
    check_matrix,
    identity,
    zeros,
)
from .product import matmul_into

__all__ = [
    "SINGLE_DIM",
    "JOINT_DIM",
    "DEFAULT_DTYPE",
    "zeros",
    "identity",
    "as_matrix",
    "check_matrix",
    "embed_on_outer",
    "embed_on_inner",
    "embed_on_outer_into",
    "embed_on_inner_into",
    "change_basis",
    "matmul_into",
]
