# filename: bitstream.py

"""
Sequential bit-level reader and writer over binary file objects.

Bits are read and written most-significant-bit first. The reader signals
exhaustion with -1 instead of raising, which is what the codec loops test for.
"""

from .config import CHUNK_SIZE


class BitInputStream:
    def __init__(self, fileobj, owns_file=False):
        self._file = fileobj
        self._owns_file = owns_file
        # reset() rewinds to wherever the caller had the file positioned
        self._start = fileobj.tell()
        self._chunk = b""
        self._pos = 0
        self._buffer = 0
        self._bit_count = 0
        self.bits_read = 0

    @classmethod
    def open(cls, path):
        return cls(open(path, "rb"), owns_file=True)

    def read_bits(self, n):
        """Return the next n bits as an int, or -1 if fewer than n remain."""
        while self._bit_count < n:
            if self._pos >= len(self._chunk):
                self._chunk = self._file.read(CHUNK_SIZE)
                self._pos = 0
                if not self._chunk:
                    return -1
            self._buffer = (self._buffer << 8) | self._chunk[self._pos]
            self._pos += 1
            self._bit_count += 8

        self._bit_count -= n
        value = self._buffer >> self._bit_count
        self._buffer &= (1 << self._bit_count) - 1
        self.bits_read += n
        return value

    def reset(self):
        self._file.seek(self._start)
        self._chunk = b""
        self._pos = 0
        self._buffer = 0
        self._bit_count = 0
        self.bits_read = 0

    def close(self):
        if self._owns_file:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class BitOutputStream:
    def __init__(self, fileobj, owns_file=False):
        self._file = fileobj
        self._owns_file = owns_file
        self._pending = bytearray()
        self._buffer = 0
        self._bit_count = 0
        self.bits_written = 0
        self.closed = False

    @classmethod
    def open(cls, path):
        return cls(open(path, "wb"), owns_file=True)

    def write_bits(self, n, value):
        """Write the low n bits of value."""
        if self.closed:
            raise ValueError("write to closed BitOutputStream")
        self._buffer = (self._buffer << n) | (value & ((1 << n) - 1))
        self._bit_count += n
        while self._bit_count >= 8:
            self._bit_count -= 8
            self._pending.append((self._buffer >> self._bit_count) & 0xFF)
        self._buffer &= (1 << self._bit_count) - 1
        self.bits_written += n

        if len(self._pending) >= CHUNK_SIZE:
            self._drain()

    def _drain(self):
        if self._pending:
            self._file.write(bytes(self._pending))
            self._pending.clear()

    def close(self):
        """Pad the last partial byte with zero bits and flush everything."""
        if self.closed:
            return
        self.closed = True
        if self._bit_count:
            self._pending.append((self._buffer << (8 - self._bit_count)) & 0xFF)
            self._buffer = 0
            self._bit_count = 0
        self._drain()
        self._file.flush()
        if self._owns_file:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
