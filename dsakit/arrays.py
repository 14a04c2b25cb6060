"""Assorted array and matrix routines."""

from __future__ import annotations

from bisect import bisect_right, insort
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from typing import Any


def _rectangular(matrix: Iterable[Iterable[Any]]) -> list[list[Any]]:
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all matrix rows must have the same length")
    return rows


def find_least_greater(values: Iterable[int]) -> list[int]:
    """For each element, the least strictly greater element to its right, else -1."""
    seen: list[int] = []
    result: list[int] = []
    for value in reversed(list(values)):
        position = bisect_right(seen, value)
        result.append(seen[position] if position < len(seen) else -1)
        if position == 0 or seen[position - 1] != value:
            insort(seen, value)
    result.reverse()
    return result


def find_mid_sum(first: Sequence[int], second: Sequence[int]) -> int:
    """Sum of the two middle elements of two equal-length arrays taken together."""
    if len(first) != len(second):
        raise ValueError("both arrays must have the same length")
    if not first:
        raise ValueError("arrays must not be empty")
    merged = sorted([*first, *second])
    n = len(first)
    return abs(merged[n - 1] + merged[n])


def all_pairs(
    first: Iterable[int], second: Iterable[int], target: int
) -> list[tuple[int, int]]:
    """Pairs (a, b) with a from ``first`` and b from ``second`` summing to ``target``."""
    left = sorted(first)
    right = sorted(second)
    pairs: list[tuple[int, int]] = []
    low, high = 0, len(right) - 1
    while low < len(left) and high >= 0:
        total = left[low] + right[high]
        if total == target:
            pairs.append((left[low], right[high]))
            low += 1
            high -= 1
        elif total < target:
            low += 1
        else:
            high -= 1
    return pairs


def rearrange(values: Iterable[Any]) -> list[Any]:
    """Alternate elements from the back and the front: last, first, second last, ..."""
    items = list(values)
    half = len(items) // 2
    result: list[Any] = []
    for front, back in zip(items[:half], reversed(items)):
        result.extend((back, front))
    if len(items) % 2:
        result.append(items[half])
    return result


def _wave(rows: list[list[Any]]) -> Iterator[Any]:
    for index, column in enumerate(zip(*rows)):
        yield from (column if index % 2 == 0 else reversed(column))


def wave_order(matrix: Iterable[Iterable[Any]]) -> list[Any]:
    """Elements column by column, alternately top-to-bottom and bottom-to-top."""
    return list(_wave(_rectangular(matrix)))


def average(values: Iterable[float]) -> float:
    """Arithmetic mean of the values."""
    items = list(values)
    if not items:
        raise ValueError("cannot average an empty sequence")
    return sum(items) / len(items)


def repeating_elements(values: Sequence[int]) -> list[int]:
    """Values occurring more than once, in ascending order; values must lie in [0, n)."""
    n = len(values)
    if any(not 0 <= value < n for value in values):
        raise ValueError("every value must lie between 0 and len(values) - 1")
    return sorted(value for value, count in Counter(values).items() if count >= 2)


def fibonacci(count: int) -> list[int]:
    """The first ``count`` Fibonacci numbers, starting from 0."""
    if count < 0:
        raise ValueError("count must not be negative")
    numbers: list[int] = []
    current, following = 0, 1
    for _ in range(count):
        numbers.append(current)
        current, following = following, current + following
    return numbers


def min_max(values: Iterable[Any]) -> tuple[Any, Any]:
    """The smallest and largest element as a pair."""
    items = list(values)
    if not items:
        raise ValueError("min_max of an empty sequence")
    return min(items), max(items)


def array_sum(values: Iterable[float]) -> float:
    """Sum of all elements."""
    return sum(values)


def transpose(matrix: Iterable[Iterable[Any]]) -> list[list[Any]]:
    """The transpose of a rectangular matrix."""
    return [list(column) for column in zip(*_rectangular(matrix))]


def format_matrix(matrix: Iterable[Iterable[Any]]) -> str:
    """Render a matrix one row per line, each element followed by a space."""
    return "".join(
        "".join(f"{value} " for value in row) + "\n" for row in _rectangular(matrix)
    )