"""Binary search in a sorted part of a sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class SearchBoundsError(ValueError):
    """Raised when the search borders do not describe a part of the sequence."""


def binary_search(key: Any, array: Sequence[Any], left: int, right: int) -> int:
    """Return the index of ``key`` in ``array[left:right + 1]``, or -1.

    That part of ``array`` must be sorted in increasing order.
    """
    size = len(array)
    if left < 0 or left >= size:
        raise SearchBoundsError("Left search border is out of range")
    if right < 0 or right >= size:
        raise SearchBoundsError("Right search border is out of range")
    if right < left:
        raise SearchBoundsError("Left border > right border")

    while left <= right:
        middle = (left + right) // 2
        value = array[middle]
        if value == key:
            return middle
        if value > key:
            right = middle - 1
        else:
            left = middle + 1
    return -1