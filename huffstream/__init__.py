from .bitstream import BitInputStream, BitOutputStream
from .errors import BadMagicError, HuffError, MalformedHeaderError, TruncatedStreamError
from .huffman_core import HuffmanLogic, HuffmanNode
from .huffman_service import CodecStats, HuffmanService

__version__ = "1.0.0"

__all__ = [
    "BadMagicError",
    "BitInputStream",
    "BitOutputStream",
    "CodecStats",
    "HuffError",
    "HuffmanLogic",
    "HuffmanNode",
    "HuffmanService",
    "MalformedHeaderError",
    "TruncatedStreamError",
]
