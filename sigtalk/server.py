"""Command that prints messages received one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable, Sequence
from typing import BinaryIO

from sigtalk.protocol import END, GREEN, RED, WHITE, Bit, BitDecoder

_ART = (
    (GREEN, "██╗   ██╗██╗██╗   ██╗ █████╗     ███╗   ███╗██╗   ██╗██████╗  ██████╗██╗ █████╗", ""),
    (GREEN, "██║   ██║██║██║   ██║██╔══██╗    ████╗ ████║██║   ██║██╔══██╗██╔════╝██║██╔══██║", " "),
    (WHITE, "██║   ██║██║██║   ██║███████║    ██╔████╔██║██║   ██║██████╔╝██║     ██║███████║", " "),
    (WHITE, "╚██╗ ██╔╝██║╚██╗ ██╔╝██╔══██║    ██║╚██╔╝██║██║   ██║██╔══██╗██║     ██║██╔══██║", ""),
    (GREEN, " ╚████╔╝ ██║ ╚████╔╝ ██║  ██║    ██║ ╚═╝ ██║╚██████╔╝██║  ██║╚██████╗██║██║  ██║", ""),
    (GREEN, "  ╚═══╝  ╚═╝  ╚═══╝  ╚═╝  ╚═╝    ╚═╝     ╚═╝ ╚═════╝ ╚═╝  ╚═╝ ╚═════╝╚═╝╚═╝  ╚═╝", ""),
)
_RULE = "⊱ ──────────────────────────────── {.⋅ ✯ ⋅.} ───────────────────────────────── ⊰"


def render_banner(pid: int) -> str:
    """Return the start-up banner showing the server's *pid*."""
    lines = [
        f"\t{color}{art}\t\t\t{END}{tail}\n" for color, art, tail in _ART
    ]
    lines[0] = "\n" + lines[0]
    lines.append(f"{RED}\n\t\t     PID: {pid}{END}\n")
    lines.append(f"\t{_RULE}\t\t\t\n\n")
    return "".join(lines)


class MessageReceiver:
    """Turns incoming bit signals into bytes written to an output stream.

    When a message's closing NUL arrives, a newline is written and the
    sender is sent SIGUSR1 as an acknowledgement.
    """

    def __init__(
        self,
        output: BinaryIO | None = None,
        ack: Callable[[int, int], None] | None = None,
    ) -> None:
        self._output = output
        self._ack = ack
        self._decoder = BitDecoder()

    def _stream(self) -> BinaryIO:
        return sys.stdout.buffer if self._output is None else self._output

    def handle(self, signum: int, sender_pid: int) -> int | None:
        """Process one signal from *sender_pid*; return the byte it completes."""
        byte = self._decoder.feed(Bit(signum))
        if byte is None:
            return None
        stream = self._stream()
        if byte == 0:
            stream.write(b"\n")
            stream.flush()
            acknowledge = os.kill if self._ack is None else self._ack
            acknowledge(sender_pid, int(signal.SIGUSR1))
        stream.write(bytes([byte]))
        stream.flush()
        return byte


def serve(receiver: MessageReceiver) -> None:
    """Wait for bit signals forever and pass each one to *receiver*."""
    wanted = {signal.SIGUSR1, signal.SIGUSR2}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, wanted)
    try:
        while True:
            info = signal.sigwaitinfo(wanted)
            receiver.handle(info.si_signo, info.si_pid)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the banner and receive messages until interrupted."""
    sys.stdout.write(render_banner(os.getpid()))
    sys.stdout.flush()
    try:
        serve(MessageReceiver())
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())