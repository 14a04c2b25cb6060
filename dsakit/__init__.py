"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "linked_list",
    "patterns",
    "primes",
    "queues",
    "searching",
    "sorting",
    "stacks",
    "strings",
]