"""Host array adapters."""

from .numpy_bridge import blocks_to_matrix_numpy, decode_operation

__all__ = ["decode_operation", "blocks_to_matrix_numpy"]
