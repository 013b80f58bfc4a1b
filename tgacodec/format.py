"""Binary layout helpers for the 18-byte TGA header and 26-byte footer."""

from __future__ import annotations

import struct
from dataclasses import dataclass, replace

from .constants import (
    FOOTER_LENGTH,
    FOOTER_SIGNATURE,
    HEADER_LENGTH,
    HEADER_STRUCT,
)
from .errors import CorruptHeader, IncompleteHeader


@dataclass(frozen=True)
class Header:
    """The fixed TGA header. Two-byte fields are little-endian on the wire."""

    id_length: int
    color_map_type: int
    data_type_code: int
    color_map_origin: int
    color_map_length: int
    color_map_depth: int
    x_origin: int
    y_origin: int
    width: int
    height: int
    bits_per_pixel: int
    image_descriptor: int

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def color_map_size_bytes(self) -> int:
        # depth is 16, 24 or 32 in practice, so // 8 is exact
        return self.color_map_length * (self.color_map_depth // 8)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def image_size_bytes(self) -> int:
        return self.width * self.height * self.bytes_per_pixel

    def pack(self) -> bytes:
        return struct.pack(
            HEADER_STRUCT,
            self.id_length,
            self.color_map_type,
            self.data_type_code,
            self.color_map_origin,
            self.color_map_length,
            self.color_map_depth,
            self.x_origin,
            self.y_origin,
            self.width,
            self.height,
            self.bits_per_pixel,
            self.image_descriptor,
        )

    def with_type_code(self, data_type_code: int) -> "Header":
        return replace(self, data_type_code=data_type_code)


def parse_header(buf) -> Header:
    """Parse the first 18 bytes of ``buf``. No type or depth validation."""
    if len(buf) < HEADER_LENGTH:
        raise IncompleteHeader(len(buf), HEADER_LENGTH)
    fields = struct.unpack_from(HEADER_STRUCT, buf, 0)
    return Header(*fields)


def read_header(source) -> Header:
    """Read and parse the header from a byte source (see ``sources``)."""
    try:
        raw = source.read(HEADER_LENGTH)
    except OSError as exc:
        raise CorruptHeader(exc) from exc
    return parse_header(raw)


def split_footer(trailing: bytes) -> tuple[bytes, bool]:
    """Strip the footer signature off the trailing region if it ends with it."""
    if len(trailing) >= FOOTER_LENGTH and trailing[-FOOTER_LENGTH:] == FOOTER_SIGNATURE:
        return trailing[:-FOOTER_LENGTH], True
    return trailing, False
