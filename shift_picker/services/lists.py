"""Small helpers for editing selection lists without mutating them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def remove_at(index: int, items: Iterable[T]) -> list[T] | None:
    """Return a copy of *items* without the element at *index*.

    Returns ``None`` if there is no element at *index*. Negative indexes
    count from the end, as with ``list.pop``.
    """
    remaining = list(items)
    try:
        remaining.pop(index)
    except IndexError:
        return None
    return remaining
