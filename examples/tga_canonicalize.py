"""Re-encode a TGA image as canonical uncompressed 24-bit RGB."""
from __future__ import annotations

import argparse

from tgacodec.cli import canonicalize


def main():
    parser = argparse.ArgumentParser(description="Canonicalize a 24-bit RGB TGA file")
    parser.add_argument("input", help="Input .tga path (type 2 or 10)")
    parser.add_argument("output", help="Output .tga path")
    parser.add_argument("--chunk-size", type=int, default=64 * 1024, help="Writer buffer size in bytes")
    args = parser.parse_args()

    canonicalize(args.input, args.output, chunk_size=args.chunk_size)


if __name__ == "__main__":
    main()
