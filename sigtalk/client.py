"""Command that sends a text message to a server process, one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Callable, Sequence
from types import FrameType

from sigtalk.printf import printf
from sigtalk.protocol import END, GREEN, RED, encode_message
from sigtalk.textops import atoi

SEND_DELAY = 40e-6


def send_message(
    pid: int,
    text: str | bytes,
    delay: float = SEND_DELAY,
    kill: Callable[[int, int], None] | None = None,
) -> int:
    """Send *text* and a closing NUL to process *pid*.

    Every bit is one signal, followed by a pause of *delay* seconds.
    Returns the number of signals sent.
    """
    send = os.kill if kill is None else kill
    sent = 0
    for bit in encode_message(text):
        send(pid, int(bit))
        time.sleep(delay)
        sent += 1
    return sent


def _on_acknowledged(signum: int, frame: FrameType | None) -> None:
    if signum == signal.SIGUSR1:
        printf("%sThe message has been received successfully.%s\n", GREEN, END)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the client with the arguments <PID> <text>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("%sFormat error: <PID> <text>%s\n", RED, END)
        return 0
    pid = atoi(args[0])
    signal.signal(signal.SIGUSR1, _on_acknowledged)
    send_message(pid, args[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())