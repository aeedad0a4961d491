# filename: stream_codec.py

from .config import BITS_PER_WORD, PSEUDO_EOF
from .errors import TruncatedStreamError


def encode_body(codes, bit_in, bit_out):
    """
    Write the code of every symbol left in bit_in, then the PSEUDO_EOF code.

    Returns the number of input symbols encoded.
    """
    # (length, value) pairs so each code is a single write_bits call
    packed = {symbol: (len(code), int(code, 2)) for symbol, code in codes.items()}
    symbols = 0
    while True:
        value = bit_in.read_bits(BITS_PER_WORD)
        if value == -1:
            break
        length, bits = packed[value]
        bit_out.write_bits(length, bits)
        symbols += 1

    length, bits = packed[PSEUDO_EOF]
    bit_out.write_bits(length, bits)
    return symbols


def decode_body(root, bit_in, bit_out):
    """
    Walk the tree bit by bit, emitting a byte at each leaf until PSEUDO_EOF.

    Returns the number of bytes written.
    """
    symbols = 0
    current = root
    while True:
        bit = bit_in.read_bits(1)
        if bit == -1:
            raise TruncatedStreamError(
                f"bad input, no PSEUDO_EOF after {symbols} decoded symbols"
            )
        current = current.left if bit == 0 else current.right

        if current.is_leaf:
            if current.symbol == PSEUDO_EOF:
                return symbols
            bit_out.write_bits(BITS_PER_WORD, current.symbol)
            symbols += 1
            current = root
