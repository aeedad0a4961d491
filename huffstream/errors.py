# filename: errors.py


class HuffError(Exception):
    """Base class for every failure raised by the codec."""


class BadMagicError(HuffError):
    def __init__(self, value):
        self.value = value
        if value == -1:
            message = "illegal header: stream shorter than the magic number"
        else:
            message = f"illegal header starts with {value:#010x}"
        super().__init__(message)


class MalformedHeaderError(HuffError):
    """The tree header ended early or does not describe a valid tree."""


class TruncatedStreamError(HuffError):
    """The body ended before the end-of-stream code was read."""
