# filename: huffman_service.py

import io
import logging
from dataclasses import dataclass

from .bitstream import BitInputStream, BitOutputStream
from .config import BITS_PER_INT, DEBUG_HIGH, DEBUG_LOW, HUFF_TREE
from .errors import BadMagicError
from .header_codec import read_header, write_header
from .huffman_core import HuffmanLogic
from .stream_codec import decode_body, encode_body

logger = logging.getLogger(__name__)


@dataclass
class CodecStats:
    bits_read: int = 0
    bits_written: int = 0
    header_bits: int = 0
    body_bits: int = 0
    symbols: int = 0


class HuffmanService:
    def __init__(self, debug=0):
        self.logic = HuffmanLogic()
        self.debug = debug
        self.last_stats = None

    def compress(self, data):
        out = io.BytesIO()
        self.compress_stream(BitInputStream(io.BytesIO(data)), BitOutputStream(out))
        return out.getvalue()

    def decompress(self, data):
        out = io.BytesIO()
        self.decompress_stream(BitInputStream(io.BytesIO(data)), BitOutputStream(out))
        return out.getvalue()

    def compress_stream(self, bit_in, bit_out):
        """
        Two passes over bit_in: count symbols, then rewind and encode them.

        bit_out is closed whether or not compression succeeds.
        """
        stats = CodecStats()
        try:
            freqs = self.logic.count_frequencies(bit_in)
            root = self.logic.build_tree(freqs)
            codes = self.logic.generate_codes(root)
            if self.debug >= DEBUG_HIGH:
                self._dump_model(freqs, codes)

            bit_out.write_bits(BITS_PER_INT, HUFF_TREE)
            write_header(root, bit_out)
            stats.header_bits = bit_out.bits_written - BITS_PER_INT

            bit_in.reset()
            stats.symbols = encode_body(codes, bit_in, bit_out)
            stats.bits_read = bit_in.bits_read
            stats.bits_written = bit_out.bits_written
            stats.body_bits = stats.bits_written - BITS_PER_INT - stats.header_bits
        finally:
            bit_out.close()

        self._report("compressed", stats)
        return stats

    def decompress_stream(self, bit_in, bit_out):
        stats = CodecStats()
        try:
            magic = bit_in.read_bits(BITS_PER_INT)
            if magic != HUFF_TREE:
                raise BadMagicError(magic)

            root = read_header(bit_in)
            stats.header_bits = bit_in.bits_read - BITS_PER_INT

            stats.symbols = decode_body(root, bit_in, bit_out)
            stats.bits_read = bit_in.bits_read
            stats.bits_written = bit_out.bits_written
            stats.body_bits = stats.bits_read - BITS_PER_INT - stats.header_bits
        finally:
            bit_out.close()

        self._report("decompressed", stats)
        return stats

    def _report(self, action, stats):
        self.last_stats = stats
        if self.debug >= DEBUG_LOW:
            logger.info(
                "%s %d symbols: %d bits read, %d bits written (header %d, body %d)",
                action, stats.symbols, stats.bits_read, stats.bits_written,
                stats.header_bits, stats.body_bits,
            )

    def _dump_model(self, freqs, codes):
        for symbol, weight in enumerate(freqs):
            if weight:
                logger.debug("count %3d: %d", symbol, weight)
        for symbol in sorted(codes):
            logger.debug("code %3d: %s", symbol, codes[symbol])
