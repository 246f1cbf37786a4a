"""Small text helpers: number parsing and formatting, splitting, trimming, searching."""

from __future__ import annotations

from collections.abc import Callable

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value


def _single_char(char: str, name: str = "char") -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"{name} must be a single character, got {char!r}")
    return char


def atoi(text: str) -> int:
    """Parse the leading integer of *text*.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around like a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(value * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    if not isinstance(number, int) or isinstance(number, bool):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return str(number)


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    _single_char(sep, "sep")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in *chars* from both ends of *text*."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start past the end of the text gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strchr(text: str, char: str) -> int | None:
    """Index of the first *char* in *text*, or None.

    Searching for "\\0" finds the end of the text, so its length is returned.
    """
    _single_char(char)
    if char == "\0" and "\0" not in text:
        return len(text)
    index = text.find(char)
    return index if index >= 0 else None


def strrchr(text: str, char: str) -> int | None:
    """Index of the last *char* in *text*, or None.

    Searching for "\\0" finds the end of the text, so its length is returned.
    """
    _single_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))