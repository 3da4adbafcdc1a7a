"""Exceptions raised when a block of operations cannot be composed."""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple


def _where(index: Optional[int]) -> str:
    return "" if index is None else f" (operation {index})"


class BlockError(ValueError):
    """Base class for malformed block input."""


class MalformedSubsetError(BlockError):
    """
    A position subset is not one of (), (0,), (1,), (0, 1) or (1, 0).

    Attributes
    ----------
    subset:
        The offending subset as supplied by the caller.
    index:
        Position of the operation in the block, if known.
    """

    def __init__(self, subset: Any, index: Optional[int] = None) -> None:
        self.subset = subset
        self.index = index
        super().__init__(
            f"Invalid local position subset {subset!r}{_where(index)}. "
            "Expected one of [], [0], [1], [0, 1], [1, 0]."
        )


class DimensionMismatchError(BlockError):
    """
    A matrix shape disagrees with the positions it acts on.

    Attributes
    ----------
    expected:
        Expected shape, e.g. (2, 2) or (4, 4).
    actual:
        Shape that was supplied.
    index:
        Position of the operation in the block, if known.
    """

    def __init__(
        self,
        expected: Tuple[int, ...],
        actual: Sequence[int],
        index: Optional[int] = None,
    ) -> None:
        self.expected = tuple(expected)
        self.actual = tuple(actual)
        self.index = index
        super().__init__(
            f"Matrix has shape {self.actual}{_where(index)}, "
            f"expected {self.expected}."
        )


class EmptyBlockError(BlockError):
    """A block with no operations was passed to the composer."""

    def __init__(self) -> None:
        super().__init__("Cannot compose an empty block: at least one operation is required.")


__all__ = [
    "BlockError",
    "MalformedSubsetError",
    "DimensionMismatchError",
    "EmptyBlockError",
]
