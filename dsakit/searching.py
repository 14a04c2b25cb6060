"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if key < values[mid]:
            high = mid - 1
        elif key > values[mid]:
            low = mid + 1
        else:
            return mid
    return None


def linear_search(values: Sequence[Any], value: Any) -> int | None:
    """Return the first index holding ``value``, or None if absent."""
    for index, item in enumerate(values):
        if item == value:
            return index
    return None