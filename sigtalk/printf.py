"""A small printf supporting the c, s, d, i, u, x, X, p and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_UINT32 = 1 << 32
_UINT64 = 1 << 64


def _as_int32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value >= _UINT32 // 2 else value


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) % 256)


def _as_pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value
    else:
        address = id(value)
    return "0x" + format(address % _UINT64, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_as_int32(int(value)))
    if spec == "u":
        return str(int(value) % _UINT32)
    if spec == "x":
        return format(int(value) % _UINT32, "x")
    if spec == "X":
        return format(int(value) % _UINT32, "X")
    return _as_pointer(value)


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        yield _convert(spec, values)


def format_printf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions filled in from *args*.

    Unknown conversions print nothing and consume no argument; surplus
    arguments are ignored.
    """
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to *stream* (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    target.flush()
    return len(text)