"""Small language convenience helpers."""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def yes_no(value: bool) -> str:
    """Convert a bool to "Yes" or "No"."""
    return "Yes" if value else "No"


def last(items: Sequence[T]) -> T:
    """Return the final element of a list or tuple.

    Raises:
        IndexError: If the sequence is empty.
    """
    return items[-1]
