"""Debug-mode checks for qfuse."""

from .debug_mode import (
    check_block_result,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "check_block_result",
]
