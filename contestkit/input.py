"""Buffered reader of whitespace-separated tokens from a byte stream."""

import io

# Bytes that count as whitespace when each byte is taken as a Latin-1 character.
_WHITESPACE = frozenset(b"\t\n\v\f\r \x85\xa0")


class InputExhausted(EOFError):
    """Raised when a value is requested after the input has ended."""


class Input:
    """Reads bytes, tokens, numbers and lines from a stream through a buffer.

    ``stream`` is a binary file object; ``bytes`` and ``str`` are accepted too.
    """

    DEFAULT_BUFFER_SIZE = 4096

    def __init__(self, stream, buffer_size=DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        if isinstance(stream, str):
            stream = stream.encode()
        if isinstance(stream, (bytes, bytearray, memoryview)):
            stream = io.BytesIO(bytes(stream))
        self._stream = stream
        self._buffer_size = buffer_size
        self._buf = b""
        self._at = 0

    def _refill(self):
        if self._at == len(self._buf):
            chunk = self._stream.read(self._buffer_size) or b""
            if isinstance(chunk, str):
                chunk = chunk.encode()
            self._buf = chunk
            self._at = 0
        return self._at < len(self._buf)

    def get(self):
        """Return the next byte and move past it, or None at the end."""
        if not self._refill():
            return None
        byte = self._buf[self._at]
        self._at += 1
        return byte

    def peek(self):
        """Return the next byte without consuming it, or None at the end."""
        if not self._refill():
            return None
        return self._buf[self._at]

    def skip_whitespace(self):
        """Consume whitespace up to the next other byte or the end."""
        while (byte := self.peek()) is not None and byte in _WHITESPACE:
            self._at += 1

    def next_token(self):
        """Return the next run of non-whitespace bytes, or None at the end."""
        self.skip_whitespace()
        token = bytearray()
        while (byte := self.get()) is not None and byte not in _WHITESPACE:
            token.append(byte)
        return bytes(token) if token else None

    def is_exhausted(self):
        """Tell whether no bytes are left."""
        return self.peek() is None

    def _read_token(self):
        token = self.next_token()
        if token is None:
            raise InputExhausted("Input exhausted")
        return token

    def _read_char(self):
        self.skip_whitespace()
        byte = self.get()
        if byte is None:
            raise InputExhausted("Input exhausted")
        return chr(byte)

    def read(self, kind=int):
        """Read one value of ``kind``.

        ``kind`` is ``int``, ``float``, ``str``, ``bytes``, ``chr`` for one
        non-whitespace character, a tuple of kinds for a tuple of values,
        ``[kind]`` for a count followed by that many values, or any callable
        taking the token text.
        """
        if isinstance(kind, tuple):
            return tuple(self.read(part) for part in kind)
        if isinstance(kind, list):
            if len(kind) != 1:
                raise TypeError("a list kind holds exactly one element kind")
            return self.read_vec(kind[0], self.read(int))
        if kind is chr:
            return self._read_char()
        if kind is bytes:
            return self._read_token()
        if kind is str:
            return self._read_token().decode()
        return kind(self._read_token().decode())

    def read_vec(self, kind, size):
        """Read ``size`` values of ``kind`` into a list."""
        return [self.read(kind) for _ in range(size)]

    def read_line(self):
        """Read up to the next line break, which is consumed but not returned."""
        line = bytearray()
        while (byte := self.get()) is not None:
            if byte == 0x0A:
                break
            if byte == 0x0D:
                if self.peek() == 0x0A:
                    self._at += 1
                break
            line.append(byte)
        return line.decode("latin-1")

    def iterate(self, kind=int):
        """Yield values of ``kind`` until only whitespace is left."""
        while True:
            self.skip_whitespace()
            if self.peek() is None:
                return
            yield self.read(kind)