"""Stack routines: bracket balancing, stack comparison and a linked stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

_PAIRS = {"(": ")", "{": "}", "[": "]"}
_CLOSERS = set(_PAIRS.values())


def are_pair(opening: str, closing: str) -> bool:
    """True if the two characters open and close the same kind of bracket."""
    return _PAIRS.get(opening) == closing


def is_balanced(expression: str) -> bool:
    """True if every bracket in the expression is matched and properly nested."""
    pending: list[str] = []
    for char in expression:
        if char in _PAIRS:
            pending.append(char)
        elif char in _CLOSERS:
            if not pending or not are_pair(pending[-1], char):
                return False
            pending.pop()
    return not pending


def is_same_stack(first: Iterable[Any], second: Iterable[Any]) -> bool:
    """True if two stacks hold equal elements in the same order."""
    return list(first) == list(second)


class StackEmptyError(Exception):
    """Raised when reading from an empty stack."""


@dataclass
class _Link:
    value: Any
    below: _Link | None


class LinkedStack:
    """Stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Link | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        self._top = _Link(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        value = self._top.value
        self._top = self._top.below
        self._size -= 1
        return value

    def peek(self) -> Any:
        """The top value, left in place."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Values from the top down."""
        link = self._top
        while link is not None:
            yield link.value
            link = link.below