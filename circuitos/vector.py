"""Positional helpers for mutable sequences."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def _check_index(items: Sequence[Any], index: int) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"index {index} out of range for sequence of length {len(items)}")


def relocate(items: MutableSequence[T], old_pos: int, new_pos: int) -> None:
    """Move the element at ``old_pos`` so that it ends up at ``new_pos``.

    Elements between the two positions shift by one place to close the gap.
    """
    _check_index(items, old_pos)
    _check_index(items, new_pos)
    if old_pos == new_pos:
        return
    element = items.pop(old_pos)
    items.insert(new_pos, element)


def swap(items: MutableSequence[T], pos_a: int, pos_b: int) -> None:
    """Exchange the elements at two positions."""
    _check_index(items, pos_a)
    _check_index(items, pos_b)
    items[pos_a], items[pos_b] = items[pos_b], items[pos_a]


def index_of(items: Sequence[T], element: T) -> int:
    """Return the index of the first element equal to ``element``, or -1."""
    for index, item in enumerate(items):
        if item == element:
            return index
    return -1