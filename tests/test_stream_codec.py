import io
import os
import sys
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
	sys.path.insert(0, ROOT)

from huffstream.bitstream import BitInputStream, BitOutputStream
from huffstream.config import PSEUDO_EOF
from huffstream.errors import TruncatedStreamError
from huffstream.huffman_core import HuffmanNode
from huffstream.stream_codec import decode_body, encode_body


def _tree():
	# codes: 'a' -> 0, 'b' -> 10, EOF -> 11
	return HuffmanNode(
		None, 0,
		HuffmanNode(ord("a"), 0),
		HuffmanNode(None, 0, HuffmanNode(ord("b"), 0), HuffmanNode(PSEUDO_EOF, 0)),
	)


CODES = {ord("a"): "0", ord("b"): "10", PSEUDO_EOF: "11"}


def _encode(data):
	buf = io.BytesIO()
	bit_out = BitOutputStream(buf)
	count = encode_body(CODES, BitInputStream(io.BytesIO(data)), bit_out)
	bits = bit_out.bits_written
	bit_out.close()
	return buf.getvalue(), bits, count


def _decode(data):
	buf = io.BytesIO()
	bit_out = BitOutputStream(buf)
	count = decode_body(_tree(), BitInputStream(io.BytesIO(data)), bit_out)
	bit_out.close()
	return buf.getvalue(), count


def test_encode_writes_codes_then_terminator():
	data, bits, count = _encode(b"aba")
	# 0 10 0 11 -> 010011 padded to 01001100
	assert bits == 6
	assert count == 3
	assert data == bytes([0b01001100])


def test_encode_empty_writes_only_terminator():
	data, bits, count = _encode(b"")
	assert (data, bits, count) == (bytes([0b11000000]), 2, 0)


def test_decode_stops_at_terminator():
	# trailing bits after the terminator are padding and are ignored
	out, count = _decode(bytes([0b01001101, 0xFF]))
	assert out == b"aba"
	assert count == 3


def test_decode_without_terminator_is_truncated():
	# ten 'a' codes and nothing else
	with pytest.raises(TruncatedStreamError):
		_decode(bytes([0x00, 0x00]))


def test_decode_stopping_mid_code_is_truncated():
	with pytest.raises(TruncatedStreamError):
		_decode(bytes([0b10101010]))


def test_encode_then_decode():
	data, _, _ = _encode(b"abbaab" * 30)
	out, _ = _decode(data)
	assert out == b"abbaab" * 30
