"""Classic sorting algorithms, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def count_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting how often each occurs."""
    items = list(values)
    if not items:
        return []
    if any(value < 0 for value in items):
        raise ValueError("count_sort only accepts non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for position in range(1, len(items)):
        key = items[position]
        hole = position
        while hole > 0 and items[hole - 1] > key:
            items[hole] = items[hole - 1]
            hole -= 1
        items[hole] = key
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order elements."""
    items = list(values)
    for settled in range(1, len(items)):
        for left in range(len(items) - settled):
            if items[left] > items[left + 1]:
                items[left], items[left + 1] = items[left + 1], items[left]
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for current in range(low, high):
        if items[current] < pivot:
            boundary += 1
            items[boundary], items[current] = items[current], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quicksort(values: Iterable[Any]) -> list[Any]:
    """Sort with quicksort, using the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with gapped insertion sorts, halving the gap each round."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for position in range(gap, len(items)):
            key = items[position]
            hole = position
            while hole >= gap and items[hole - gap] > key:
                items[hole] = items[hole - gap]
                hole -= gap
            items[hole] = key
        gap //= 2
    return items