"""
Command line front end.

Usage:
    huffstream compress INPUT OUTPUT [-d LEVEL]
    huffstream decompress INPUT OUTPUT [-d LEVEL]
"""

import argparse
import os
import sys

from .bitstream import BitInputStream, BitOutputStream
from .config import configure_logging, default_debug_level
from .errors import HuffError
from .huffman_service import HuffmanService


def build_parser():
    parser = argparse.ArgumentParser(
        prog="huffstream",
        description="Huffman compression with a self-describing tree header",
    )
    parser.add_argument(
        "mode",
        choices=["compress", "decompress"],
        help="direction of the transformation",
    )
    parser.add_argument("input", help="file to read")
    parser.add_argument("output", help="file to write")
    parser.add_argument(
        "-d", "--debug",
        type=int,
        default=None,
        help="debug level: 1 logs a summary, 4 also dumps counts and codes "
             "(default: $HUFFSTREAM_DEBUG or 0)",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    debug = args.debug if args.debug is not None else default_debug_level()
    configure_logging(debug)

    if not os.path.isfile(args.input):
        print(f"huffstream: no such file: {args.input}", file=sys.stderr)
        return 2

    service = HuffmanService(debug=debug)
    action = service.compress_stream if args.mode == "compress" else service.decompress_stream
    try:
        with BitInputStream.open(args.input) as bit_in:
            action(bit_in, BitOutputStream.open(args.output))
    except HuffError as e:
        print(f"huffstream: {args.mode} failed: {e}", file=sys.stderr)
        return 1

    size_in = os.path.getsize(args.input)
    size_out = os.path.getsize(args.output)
    print(f"{args.mode}ed '{args.input}' ({size_in} bytes) -> '{args.output}' ({size_out} bytes)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
