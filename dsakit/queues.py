"""Bounded queues: a fixed-slot array queue and a circular queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 20


class QueueFullError(Exception):
    """Raised when adding to a queue that has no room left."""


class QueueEmptyError(Exception):
    """Raised when reading from an empty queue."""


class ArrayQueue:
    """Queue over a fixed number of slots that are never reused.

    At most ``capacity`` values can ever be pushed, however many are popped.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []
        self._front = 0

    def push(self, value: Any) -> None:
        """Append a value at the back."""
        if len(self._items) >= self._capacity:
            raise QueueFullError("Queue Overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the front value."""
        value = self.peek()
        self._front += 1
        return value

    def peek(self) -> Any:
        """The front value, left in place."""
        if self.is_empty():
            raise QueueEmptyError("No elements in Queue")
        return self._items[self._front]

    def is_empty(self) -> bool:
        return self._front >= len(self._items)

    def __len__(self) -> int:
        return len(self._items) - self._front


class CircularQueue:
    """Queue over a ring of ``size`` slots that are reused as values leave."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._count = 0

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        if self._count == len(self._slots):
            raise QueueFullError("Queue is Full")
        self._slots[(self._front + self._count) % len(self._slots)] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._count:
            raise QueueEmptyError("Queue is Empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._count -= 1
        return value

    def is_empty(self) -> bool:
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        size = len(self._slots)
        for offset in range(self._count):
            yield self._slots[(self._front + offset) % size]