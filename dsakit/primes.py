"""Prime sieve with a small command-line front end, plus a variadic sum."""

from __future__ import annotations

import argparse
import sys
from math import isqrt
from pathlib import Path

MAX_LIMIT = 2_000_000_000
FILE_NAME = "prime_numbers.txt"


def sum_values(*args: float) -> float:
    """Sum of any number of arguments."""
    return sum(args)


def sieve(limit: int) -> list[bool]:
    """Flags for 0..limit, True where the index is prime."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    if limit + 1 > MAX_LIMIT:
        raise ValueError("primes are only computed up to 2 billion")
    flags = bytearray([1]) * (limit + 1)
    flags[: min(2, limit + 1)] = bytes(min(2, limit + 1))
    for number in range(2, isqrt(limit) + 1):
        if flags[number]:
            start = number * number
            flags[start::number] = bytes(len(range(start, limit + 1, number)))
    return [bool(flag) for flag in flags]


def primes_up_to(limit: int) -> list[int]:
    """All primes not greater than ``limit``."""
    return [number for number, prime in enumerate(sieve(limit)) if prime]


def _write(path: str | Path, primes: list[int]) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{prime}\n" for prime in primes)
        handle.write(f"\n\n Total prime number: {len(primes)}")


def write_primes(path: str | Path, limit: int) -> int:
    """Write the primes up to ``limit`` one per line, then a total; return the count."""
    primes = primes_up_to(limit)
    _write(path, primes)
    return len(primes)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="primes", description="Find the prime numbers up to a limit."
    )
    parser.add_argument("limit", type=int, help="largest number to examine")
    parser.add_argument(
        "--mode",
        choices=("count", "print", "write"),
        default="count",
        help="count the primes, print them, or write them to a file",
    )
    parser.add_argument("--output", default=FILE_NAME, help="file for --mode write")
    args = parser.parse_args(argv)

    try:
        primes = primes_up_to(args.limit)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.mode == "write":
        try:
            _write(args.output, primes)
        except OSError as exc:
            print(f"error: cannot write {args.output}: {exc}", file=sys.stderr)
            return 1
    elif args.mode == "print":
        print("".join(f"{prime}\t" for prime in primes))
    print(f"Total prime numbers are {len(primes)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())