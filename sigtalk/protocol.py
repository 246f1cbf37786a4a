"""Wire format for messages sent one bit per signal.

Each byte travels as eight signals, least significant bit first: SIGUSR1
carries a 1 and SIGUSR2 carries a 0. A message ends with a NUL byte.
"""

from __future__ import annotations

import signal
from collections.abc import Iterator
from enum import IntEnum

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[0;33m"
WHITE = "\033[0;97m"
BLUE = "\033[0;36m"
END = "\033[0m"
BACK = "\033[45m"

BITS_PER_BYTE = 8


class Bit(IntEnum):
    """A transmitted bit; its value is the signal number that carries it."""

    ONE = int(signal.SIGUSR1)
    ZERO = int(signal.SIGUSR2)


def encode_byte(byte: int) -> tuple[Bit, ...]:
    """Return the eight bits of *byte*, least significant first."""
    if not isinstance(byte, int) or isinstance(byte, bool):
        raise TypeError(f"expected an int, got {type(byte).__name__}")
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return tuple(
        Bit.ONE if (byte >> position) & 1 else Bit.ZERO
        for position in range(BITS_PER_BYTE)
    )


def _message_bits(data: bytes) -> Iterator[Bit]:
    for byte in data:
        yield from encode_byte(byte)
    yield from encode_byte(0)


def encode_message(text: str | bytes) -> Iterator[Bit]:
    """Yield the bits of *text* followed by the terminating NUL byte.

    Text is encoded as UTF-8. A NUL inside the text would end the message
    early, so it is rejected.
    """
    if isinstance(text, str):
        data = text.encode("utf-8", "surrogateescape")
    else:
        data = bytes(text)
    if 0 in data:
        raise ValueError("message must not contain a NUL byte")
    return _message_bits(data)


class BitDecoder:
    """Reassembles bytes from a stream of bits."""

    def __init__(self) -> None:
        self._count = 0
        self._value = 0

    def feed(self, bit: Bit | int) -> int | None:
        """Take one bit; return the byte it completes, or None."""
        if Bit(bit) is Bit.ONE:
            self._value |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self.reset()
        return byte

    def reset(self) -> None:
        """Drop any partly received byte."""
        self._count = 0
        self._value = 0