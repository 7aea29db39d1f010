"""Buffered writer of values separated by spaces, with a shared instance."""

import math
from decimal import Decimal

_SPACE = 0x20
_NEWLINE = 0x0A


def _format_float(value):
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class Output:
    """Collects bytes and hands them to ``stream`` in blocks.

    With ``auto_flush`` every :meth:`write` is passed on at once.
    """

    DEFAULT_BUFFER_SIZE = 4096

    def __init__(self, stream, auto_flush=False):
        self._stream = stream
        self._auto_flush = auto_flush
        self._buf = bytearray()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.flush()

    def flush(self):
        """Pass buffered bytes to the stream and flush it."""
        if self._buf:
            self._stream.write(bytes(self._buf))
            self._buf.clear()
            self._stream.flush()

    def maybe_flush(self):
        """Flush only when auto flush is on."""
        if self._auto_flush:
            self.flush()

    def put(self, byte):
        """Append one byte, flushing when the buffer is full."""
        self._buf.append(byte)
        if len(self._buf) >= self.DEFAULT_BUFFER_SIZE:
            self.flush()

    def write(self, data):
        """Append bytes and return how many were taken."""
        view = memoryview(bytes(data))
        while view:
            room = self.DEFAULT_BUFFER_SIZE - len(self._buf)
            self._buf += view[:room]
            view = view[room:]
            if len(self._buf) >= self.DEFAULT_BUFFER_SIZE:
                self.flush()
        if self._auto_flush:
            self.flush()
        return len(data)

    def print(self, value):
        """Write a value; lists and tuples are written space separated."""
        if isinstance(value, str):
            self.write(value.encode())
        elif isinstance(value, (bytes, bytearray)):
            self.write(value)
        elif isinstance(value, int):
            self.write(f"{value:d}".encode())
        elif isinstance(value, float):
            self.write(_format_float(value).encode())
        elif isinstance(value, (list, tuple)):
            self.print_iter(value)
        else:
            raise TypeError(f"cannot write {type(value).__name__}")

    def print_per_line(self, items):
        """Write every item followed by a line break."""
        for item in items:
            self.print(item)
            self.put(_NEWLINE)

    def print_iter(self, items):
        """Write the items separated by single spaces."""
        for position, item in enumerate(items):
            if position:
                self.put(_SPACE)
            self.print(item)


_current = None


def set_output(output):
    """Make ``output`` the shared instance and return the previous one."""
    global _current
    previous, _current = _current, output
    return previous


def output():
    """Return the shared instance."""
    if _current is None:
        raise RuntimeError("no output has been set")
    return _current


def out(*args):
    """Write the values to the shared output separated by spaces."""
    if not args:
        raise TypeError("out() needs at least one value")
    target = output()
    for position, value in enumerate(args):
        if position:
            target.put(_SPACE)
        target.print(value)


def out_line(*args):
    """Write the values like :func:`out`, then a line break."""
    if args:
        out(*args)
    output().put(_NEWLINE)