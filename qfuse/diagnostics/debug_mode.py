"""Debug checks on composed block matrices.

Debug mode starts from the ``QFUSE_DEBUG`` environment variable. While it is
on, every matrix returned by the block composer is scanned for NaN or inf
entries before it reaches the caller.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

import torch

from qfuse.logging import get_logger

logger = get_logger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() in _TRUE_VALUES


# A context variable so that debug_context scopes stay local to a thread
# or task.
_check_results: ContextVar[bool] = ContextVar(
    "qfuse_check_results", default=_flag_from_env("QFUSE_DEBUG")
)


def is_debug_enabled() -> bool:
    """Return whether composed block matrices are being checked."""
    return _check_results.get()


def set_debug_enabled(enabled: bool) -> None:
    """Turn result checking on or off for the current context."""
    _check_results.set(bool(enabled))


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Check (or skip checking) composed block matrices inside a ``with`` block.

    Example
    -------
    >>> with debug_context(True):
    ...     matrix = blocks_to_matrix(ops)
    """
    token = _check_results.set(bool(enabled))
    try:
        yield
    finally:
        _check_results.reset(token)


def check_block_result(matrix: torch.Tensor, n_ops: int) -> None:
    """
    Reject a composed block matrix with non-finite entries.

    Does nothing unless debug mode is on.

    Parameters
    ----------
    matrix:
        The composed (4, 4) matrix.
    n_ops:
        Number of operations folded into ``matrix``; used in the message.

    Raises
    ------
    ValueError
        If any entry of ``matrix`` is NaN or infinite.
    """
    if not _check_results.get():
        return
    bad = int((~torch.isfinite(matrix)).sum())
    if bad:
        logger.debug("Block of %d operations produced %d non-finite entries", n_ops, bad)
        raise ValueError(
            f"Composed block matrix contains non-finite entries "
            f"({bad} of {matrix.numel()}, block of {n_ops} operations)."
        )


__all__ = [
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "check_block_result",
]
