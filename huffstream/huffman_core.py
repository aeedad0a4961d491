# filename: huffman_core.py

import heapq
import itertools
import logging

from .config import ALPH_SIZE, BITS_PER_WORD, PSEUDO_EOF

logger = logging.getLogger(__name__)


class HuffmanNode:
    def __init__(self, symbol, weight, left=None, right=None):
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode(symbol={self.symbol}, weight={self.weight})"
        return f"HuffmanNode(weight={self.weight})"


def count_leaves(node):
    if node.is_leaf:
        return 1
    return count_leaves(node.left) + count_leaves(node.right)


class HuffmanLogic:
    def count_frequencies(self, bit_in):
        """
        Count every 8-bit symbol in bit_in until it is exhausted.

        The returned list always has ALPH_SIZE + 1 entries; the PSEUDO_EOF
        entry is 1 so the terminator always gets a leaf. The stream is left
        at its end; callers rewind it before a second pass.
        """
        freqs = [0] * (ALPH_SIZE + 1)
        while True:
            value = bit_in.read_bits(BITS_PER_WORD)
            if value == -1:
                break
            freqs[value] += 1
        freqs[PSEUDO_EOF] = 1
        return freqs

    def build_tree(self, freqs):
        # sequence numbers break weight ties first-in-first-out, so identical
        # tables always merge in the same order
        order = itertools.count()
        priority_queue = [
            (weight, next(order), HuffmanNode(symbol, weight))
            for symbol, weight in enumerate(freqs)
        ]
        heapq.heapify(priority_queue)

        while len(priority_queue) > 1:
            _, _, left = heapq.heappop(priority_queue)
            _, _, right = heapq.heappop(priority_queue)
            merged = HuffmanNode(None, left.weight + right.weight, left, right)
            heapq.heappush(priority_queue, (merged.weight, next(order), merged))

        root = priority_queue[0][2]
        logger.debug("built tree over %d symbols, root weight %d", len(freqs), root.weight)
        return root

    def generate_codes(self, node, current_code="", codes=None):
        if codes is None:
            codes = {}
        if node.is_leaf:
            codes[node.symbol] = current_code
            return codes
        self.generate_codes(node.left, current_code + "0", codes)
        self.generate_codes(node.right, current_code + "1", codes)
        return codes
