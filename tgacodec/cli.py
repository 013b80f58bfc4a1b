"""Command-line entrypoints for tgacodec."""
from __future__ import annotations

import argparse
import sys

from .constants import DEFAULT_CHUNK_SIZE
from .decoder import decode_stream
from .utils import save_image_rgb
from .version import get_version_string
from .writer import write_image


def _load(path: str):
    with open(path, "rb") as f:
        return decode_stream(f)


def info(path: str) -> None:
    image = _load(path)
    header = image.header
    print(f"File: {path}")
    print(f"Type: {type(image).__name__} (data_type_code={header.data_type_code})")
    print(f"Size: {image.width}x{image.height}, bits_per_pixel={header.bits_per_pixel}")
    print(f"Origin: ({header.x_origin}, {header.y_origin}), descriptor=0x{header.image_descriptor:02x}")
    print(
        f"Colour map: type={header.color_map_type}, length={header.color_map_length}, "
        f"depth={header.color_map_depth}"
    )
    print(f"Pixels: {image.image_data_length()}")
    print(f"Identification: {len(image.identification)} bytes")
    print(f"Extended identification: {len(image.extended_identification)} bytes")


def canonicalize(input_path: str, output_path: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
    image = _load(input_path)
    with open(output_path, "wb") as f:
        n = write_image(image, f, chunk_size=chunk_size)
    print(f"Wrote {input_path} -> {output_path}. Bytes={n}, Size={image.width}x{image.height}")


def export(input_path: str, output_path: str) -> None:
    image = _load(input_path)
    save_image_rgb(image, output_path)
    print(f"Exported {input_path} -> {output_path}. Size={image.width}x{image.height}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="24-bit RGB TGA decoder / canonical re-encoder")
    parser.add_argument("--version", action="version", version=get_version_string())
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_info = sub.add_parser("info", help="Print header and buffer summary")
    p_info.add_argument("input")

    p_canon = sub.add_parser("canonicalize", help="Re-encode as uncompressed TGA with footer")
    p_canon.add_argument("input")
    p_canon.add_argument("output")
    p_canon.add_argument("--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE)

    p_export = sub.add_parser("export", help="Export to PNG (or any imageio format)")
    p_export.add_argument("input")
    p_export.add_argument("output")

    args = parser.parse_args(argv)

    try:
        if args.cmd == "info":
            info(args.input)
        elif args.cmd == "canonicalize":
            canonicalize(args.input, args.output, chunk_size=args.chunk_size)
        elif args.cmd == "export":
            export(args.input, args.output)
        else:
            parser.error("Unknown command")
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
