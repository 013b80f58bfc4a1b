"""Convert a 24-bit RGB TGA image to PNG."""
from __future__ import annotations

import argparse

from tgacodec.cli import export


def main():
    parser = argparse.ArgumentParser(description="Convert a 24-bit RGB TGA file to PNG")
    parser.add_argument("input", help="Input .tga path")
    parser.add_argument("output", help="Output image path (.png, .bmp, ...)")
    args = parser.parse_args()

    export(args.input, args.output)


if __name__ == "__main__":
    main()
