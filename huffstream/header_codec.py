# filename: header_codec.py

"""
Preorder serialization of the Huffman tree used as the compressed header.

An internal node is a single 0 bit followed by its left and right subtrees.
A leaf is a single 1 bit followed by its symbol in BITS_PER_SYMBOL bits.
"""

from .config import ALPH_SIZE, BITS_PER_SYMBOL, PSEUDO_EOF
from .errors import MalformedHeaderError
from .huffman_core import HuffmanNode

# deepest leaf a tree over ALPH_SIZE + 1 leaves can have
MAX_DEPTH = ALPH_SIZE


def write_header(root, bit_out):
    if root.is_leaf:
        bit_out.write_bits(1, 1)
        bit_out.write_bits(BITS_PER_SYMBOL, root.symbol)
        return
    bit_out.write_bits(1, 0)
    write_header(root.left, bit_out)
    write_header(root.right, bit_out)


def header_size(root):
    """Number of bits write_header produces for this tree."""
    if root.is_leaf:
        return 1 + BITS_PER_SYMBOL
    return 1 + header_size(root.left) + header_size(root.right)


def read_header(bit_in):
    root = _read_node(bit_in, 0)
    if root.is_leaf:
        raise MalformedHeaderError("tree header holds a single leaf")
    return root


def _read_node(bit_in, depth):
    if depth > MAX_DEPTH:
        raise MalformedHeaderError(f"tree header nests deeper than {MAX_DEPTH} levels")

    bit = bit_in.read_bits(1)
    if bit == -1:
        raise MalformedHeaderError("stream ended inside the tree header")
    if bit == 0:
        left = _read_node(bit_in, depth + 1)
        right = _read_node(bit_in, depth + 1)
        return HuffmanNode(None, 0, left, right)

    value = bit_in.read_bits(BITS_PER_SYMBOL)
    if value == -1:
        raise MalformedHeaderError("stream ended inside a leaf symbol")
    if value > PSEUDO_EOF:
        raise MalformedHeaderError(f"leaf symbol {value} is outside the alphabet")
    return HuffmanNode(value, 0)
