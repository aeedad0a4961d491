import io
import os
import sys
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
	sys.path.insert(0, ROOT)

from huffstream.bitstream import BitInputStream, BitOutputStream
from huffstream.errors import MalformedHeaderError
from huffstream.header_codec import header_size, read_header, write_header
from huffstream.huffman_core import HuffmanLogic, HuffmanNode


def _serialize(root):
	buf = io.BytesIO()
	bit_out = BitOutputStream(buf)
	write_header(root, bit_out)
	bits = bit_out.bits_written
	bit_out.close()
	return buf.getvalue(), bits


def _bits(*chunks):
	"""Pack (width, value) pairs into bytes."""
	buf = io.BytesIO()
	bit_out = BitOutputStream(buf)
	for width, value in chunks:
		bit_out.write_bits(width, value)
	bit_out.close()
	return buf.getvalue()


def _shape(node):
	if node.is_leaf:
		return node.symbol
	return (_shape(node.left), _shape(node.right))


def test_small_tree_layout():
	root = HuffmanNode(None, 3, HuffmanNode(65, 2), HuffmanNode(256, 1))
	data, bits = _serialize(root)
	# 0 | 1 001000001 | 1 100000000
	assert bits == 21
	assert data == _bits((1, 0), (1, 1), (9, 65), (1, 1), (9, 256))


def test_header_roundtrip_preserves_shape():
	logic = HuffmanLogic()
	freqs = [0] * 257
	for i, b in enumerate(b"header roundtrip"):
		freqs[b] += i
	freqs[256] = 1
	root = logic.build_tree(freqs)

	data, bits = _serialize(root)
	assert bits == header_size(root) == 256 + 257 * 10
	rebuilt = read_header(BitInputStream(io.BytesIO(data)))
	assert _shape(rebuilt) == _shape(root)
	assert logic.generate_codes(rebuilt) == logic.generate_codes(root)


def test_rebuilt_nodes_have_zero_weight():
	data = _bits((1, 0), (1, 1), (9, 7), (1, 1), (9, 256))
	root = read_header(BitInputStream(io.BytesIO(data)))
	assert root.weight == 0
	assert root.left.symbol == 7 and root.left.weight == 0
	assert root.right.symbol == 256


def test_empty_stream_is_malformed():
	with pytest.raises(MalformedHeaderError):
		read_header(BitInputStream(io.BytesIO(b"")))


def test_missing_symbol_bits_is_malformed():
	# internal node, then a leaf flag followed by only 6 bits
	with pytest.raises(MalformedHeaderError):
		read_header(BitInputStream(io.BytesIO(bytes([0b01000000]))))


def test_symbol_out_of_range_is_malformed():
	data = _bits((1, 0), (1, 1), (9, 300), (1, 1), (9, 256))
	with pytest.raises(MalformedHeaderError):
		read_header(BitInputStream(io.BytesIO(data)))


def test_single_leaf_is_malformed():
	data = _bits((1, 1), (9, 256))
	with pytest.raises(MalformedHeaderError):
		read_header(BitInputStream(io.BytesIO(data)))


def test_runaway_nesting_is_malformed():
	# a long run of internal-node flags must not exhaust the interpreter stack
	with pytest.raises(MalformedHeaderError):
		read_header(BitInputStream(io.BytesIO(b"\x00" * 4096)))
