"""Text patterns of numbers and letters."""

from __future__ import annotations


def floyd_triangle(rows: int) -> str:
    """Floyd's triangle: row i holds the next i integers, each right-aligned in 3 columns.

    The output opens with an empty line for the zeroth row.
    """
    lines: list[str] = []
    counter = 1
    for row in range(rows + 1):
        numbers = range(counter, counter + row)
        counter += row
        lines.append("".join(f"{n:>3}" for n in numbers) + "\n")
    return "".join(lines)


def _counting_row(length: int) -> str:
    return "".join(f"{col} " for col in range(1, length + 1)) + "\n"


def inverted_right_angle(n: int) -> str:
    """Rows counting 1..row, starting with n entries and shrinking to one."""
    return "".join(_counting_row(row) for row in range(n, 0, -1))


def right_angle_letters(n: int) -> str:
    """Rows of letters A, B, ... growing from one entry to n."""
    return "".join(
        "".join(f"{chr(col + 64)} " for col in range(1, row + 1)) + "\n"
        for row in range(1, n + 1)
    )


def right_angle_numbers(n: int) -> str:
    """Rows counting 1..row, growing from one entry to n."""
    return "".join(_counting_row(row) for row in range(1, n + 1))