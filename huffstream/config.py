# filename: config.py

import logging
import os

BITS_PER_WORD = 8
BITS_PER_INT = 32
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE

# symbol field in the tree header, wide enough for PSEUDO_EOF
BITS_PER_SYMBOL = BITS_PER_WORD + 1

HUFF_NUMBER = 0xface8200
HUFF_TREE = HUFF_NUMBER | 1

DEBUG_LOW = 1
DEBUG_HIGH = 4

# bytes pulled from the underlying file per read
CHUNK_SIZE = 64 * 1024

DEBUG_ENV_VAR = "HUFFSTREAM_DEBUG"


def default_debug_level():
    """Debug level from the environment, 0 when unset or not a number."""
    raw = os.environ.get(DEBUG_ENV_VAR, "")
    try:
        return max(0, int(raw))
    except ValueError:
        return 0


def logging_level(debug):
    if debug >= DEBUG_HIGH:
        return logging.DEBUG
    if debug >= DEBUG_LOW:
        return logging.INFO
    return logging.WARNING


def configure_logging(debug=0):
    logging.basicConfig(
        level=logging_level(debug),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
