# sigtalk

sigtalk sends text from one process to another using only two POSIX
signals. Each byte is sent as eight signals, least significant bit first.
`SIGUSR1` carries a 1 bit and `SIGUSR2` carries a 0 bit. A zero byte follows
the last character to end the message. Text is encoded as UTF-8.

When the server receives the closing zero byte, it does three things in order:

1. It writes a newline.
2. It sends `SIGUSR1` back to the sender.
3. It writes the byte itself.

When the client receives that `SIGUSR1`, it prints
`The message has been received successfully.`

## Requirements

The package needs Python 3.10 or later and has no third-party dependencies.
The server waits for signals with `signal.sigwaitinfo`, so it runs on Linux.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal:

```
sigtalk-server
```

It prints a banner showing its process id. It then writes every byte it
receives to standard output. It keeps running until you interrupt it.

Send it text from another terminal:

```
sigtalk-client <PID> "hello there"
```

The client takes exactly two arguments: the server's PID and the text.

- With any other number of arguments, it prints `Format error: <PID> <text>`
  and exits.
- The PID is read the way `atoi` reads numbers: leading digits with an
  optional sign.
- The client pauses 40 microseconds after each signal.
- Text that contains a zero byte is rejected.

## Library use

### `sigtalk.protocol`

This module holds the wire format:

- `Bit` is an `IntEnum`. `Bit.ONE` is `SIGUSR1` and `Bit.ZERO` is `SIGUSR2`.
- `encode_byte(byte)` returns the eight bits of a byte, least significant
  first.
- `encode_message(text)` yields the bits of a `str` or `bytes` message,
  followed by the closing zero byte.
- `BitDecoder.feed(bit)` returns the completed byte on every eighth bit, and
  `None` otherwise. `BitDecoder.reset()` drops a partly received byte.

```python
from sigtalk.protocol import BitDecoder, encode_message

decoder = BitDecoder()
received = [b for bit in encode_message("hi") if (b := decoder.feed(bit)) is not None]
# received == [104, 105, 0]
```

### `sigtalk.client`

`send_message(pid, text, delay, kill)` sends a message and returns the number
of signals sent. `kill` is the function that delivers each signal and defaults
to `os.kill`. `delay` is the pause after each signal, in seconds.

### `sigtalk.server`

- `render_banner(pid)` returns the start-up banner.
- `MessageReceiver(output, ack)` turns signals back into bytes.
  - `output` is a binary stream and defaults to standard output.
  - `ack` is the function used to acknowledge the sender and defaults to
    `os.kill`.
- `MessageReceiver.handle(signum, sender_pid)` processes one signal.
- `serve(receiver)` blocks `SIGUSR1` and `SIGUSR2`, waits for them in a loop
  with `sigwaitinfo`, and passes each one to the receiver.

### Helpers

- `sigtalk.printf` has `format_printf` and `printf`. They handle the
  conversions `%c %s %d %i %u %x %X %p %%`.
- `sigtalk.textops` has `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strchr`, `strrchr` and `strmapi`.
- `sigtalk.compare` has the bounded comparisons `strnstr`, `strncmp` and
  `memcmp`.

## What it does not do

There is no flow control or retransmission. Bits are sent at a fixed pace, so
a signal lost under load corrupts the message. The server keeps one decoder
for all senders, so messages from several clients sent at the same time get
mixed together.