"""A singly linked list and merging of sorted lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One link of a singly linked list."""

    value: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list whose head is the first element."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._size = 0
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def add(self, value: Any) -> None:
        """Insert a value at the front of the list."""
        self._head = Node(value, self._head)
        self._size += 1

    def remove_last(self) -> Any:
        """Remove and return the last value; IndexError if the list is empty."""
        if self._head is None:
            raise IndexError("remove from empty linked list")
        if self._head.next is None:
            value = self._head.value
            self._head = None
        else:
            current = self._head
            while current.next.next is not None:
                current = current.next
            value = current.next.value
            current.next = None
        self._size -= 1
        return value

    def get(self, index: int) -> Any:
        """Value at a zero-based position; IndexError if there is none."""
        for position, value in enumerate(self):
            if position == index:
                return value
        raise IndexError("linked list index out of range")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> LinkedList:
    """Merge two ascending sequences into a new ascending linked list.

    On equal values the element from ``second`` comes first.
    """
    left = iter(first)
    right = iter(second)
    merged: list[Any] = []
    sentinel = object()
    a = next(left, sentinel)
    b = next(right, sentinel)
    while a is not sentinel and b is not sentinel:
        if a < b:
            merged.append(a)
            a = next(left, sentinel)
        else:
            merged.append(b)
            b = next(right, sentinel)
    if a is not sentinel:
        merged.append(a)
        merged.extend(left)
    if b is not sentinel:
        merged.append(b)
        merged.extend(right)
    return LinkedList(merged)