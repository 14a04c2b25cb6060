"""String and number routines: palindromes, reversal, paths, permutations."""

from __future__ import annotations


def reverse_number(number: int) -> int:
    """The number with its decimal digits reversed, keeping its sign."""
    sign = -1 if number < 0 else 1
    return sign * int(str(abs(number))[::-1])


def is_number_palindrome(number: int) -> bool:
    """True if the number reads the same with its digits reversed."""
    return reverse_number(number) == number


def is_palindrome(text: str) -> bool:
    """True if the text reads the same backwards."""
    return text == text[::-1]


def string_length(text: str) -> int:
    """Number of characters before the first NUL character, if any."""
    return len(text.split("\0", 1)[0])


def reverse_string(text: str) -> str:
    """The text with its characters in reverse order."""
    return text[::-1]


def simplify_path(path: str) -> str:
    """Canonical form of a Unix-style absolute path."""
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts:
                parts.pop()
        else:
            parts.append(part)
    return "/" + "/".join(parts)


def permutations(text: str) -> list[str]:
    """Every arrangement of the characters, in swap-and-backtrack order.

    Repeated characters yield repeated arrangements.
    """
    chars = list(text)
    last = len(chars) - 1
    result: list[str] = []

    def permute(start: int) -> None:
        if start == last:
            result.append("".join(chars))
            return
        for index in range(start, len(chars)):
            chars[start], chars[index] = chars[index], chars[start]
            permute(start + 1)
            chars[start], chars[index] = chars[index], chars[start]

    if chars:
        permute(0)
    return result