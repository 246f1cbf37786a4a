"""Bounded comparison and search over strings and byte strings."""

from __future__ import annotations

from collections.abc import Sequence


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError("limit must not be negative")


def _codes(text: str | bytes | bytearray) -> Sequence[int]:
    """Character codes of *text*, as unsigned values."""
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError(f"expected str or bytes, got {type(text).__name__}")


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Index of the first *needle* lying wholly within the first *limit* characters.

    An empty needle is found at index 0. None is returned when there is no match.
    """
    _check_limit(limit)
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return index if index >= 0 else None


def strncmp(
    first: str | bytes, second: str | bytes, limit: int
) -> int:
    """Compare at most *limit* characters, stopping at the end or a NUL.

    Returns 0 when equal, otherwise the difference between the first two
    differing character codes. The end of a string compares as NUL.
    """
    _check_limit(limit)
    left = _codes(first)
    right = _codes(second)
    for position in range(limit):
        a = left[position] if position < len(left) else 0
        b = right[position] if position < len(right) else 0
        if a != b or a == 0:
            return a - b
    return 0


def memcmp(first: bytes, second: bytes, limit: int) -> int:
    """Compare the first *limit* bytes of two byte strings.

    Returns 0 when equal, otherwise the difference between the first two
    differing bytes, taken as unsigned values. NUL bytes are compared like
    any other byte.
    """
    _check_limit(limit)
    left = bytes(memoryview(first))
    right = bytes(memoryview(second))
    if len(left) < limit or len(right) < limit:
        raise ValueError("both operands must hold at least 'limit' bytes")
    for a, b in zip(left[:limit], right[:limit]):
        if a != b:
            return a - b
    return 0