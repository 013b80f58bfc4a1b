"""Decoded image model: RawImage, the TgaImage variants and lazy pixel views."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

import numpy as np

from .constants import BYTES_PER_PIXEL, TYPE_RLE_RGB, TYPE_UNCOMPRESSED_RGB
from .format import Header

Pixel = bytes  # one opaque 3-byte unit, stored order (usually B, G, R)


@dataclass(frozen=True)
class RawImage:
    """Header plus the four decoded buffers. Buffers are never mutated."""

    header: Header
    identification: bytes
    colour_map: bytes
    pixel_data: bytes
    extended_identification: bytes

    def __post_init__(self):
        h = self.header
        if len(self.identification) != h.id_length:
            raise ValueError(
                f"identification is {len(self.identification)} bytes, header declares {h.id_length}"
            )
        if len(self.colour_map) != h.color_map_size_bytes:
            raise ValueError(
                f"colour map is {len(self.colour_map)} bytes, header declares {h.color_map_size_bytes}"
            )
        need = h.width * h.height * BYTES_PER_PIXEL
        if len(self.pixel_data) != need:
            raise ValueError(f"pixel data is {len(self.pixel_data)} bytes, expected {need}")

    @property
    def width(self) -> int:
        return self.header.width

    @property
    def height(self) -> int:
        return self.header.height

    def image_data_length(self) -> int:
        return len(self.pixel_data) // BYTES_PER_PIXEL

    def image_data_length_bytes(self) -> int:
        return len(self.pixel_data)

    def pixels(self) -> "PixelSequence":
        return PixelSequence(self.pixel_data)

    def scanlines(self) -> "ScanlineSequence":
        return ScanlineSequence(self.pixel_data, self.width, self.height)

    def as_array(self) -> np.ndarray:
        """Read-only (H, W, 3) uint8 view of ``pixel_data`` in storage order."""
        arr = np.frombuffer(self.pixel_data, dtype=np.uint8)
        return arr.reshape(self.height, self.width, BYTES_PER_PIXEL)


class PixelSequence:
    """Restartable traversal of a pixel buffer in 3-byte strides."""

    def __init__(self, pixel_data: bytes):
        self._data = pixel_data

    def __len__(self) -> int:
        return len(self._data) // BYTES_PER_PIXEL

    def __iter__(self) -> Iterator[Pixel]:
        data = self._data
        for i in range(0, len(data), BYTES_PER_PIXEL):
            yield data[i : i + BYTES_PER_PIXEL]


class ScanlineSequence:
    """Rows of ``width`` pixels, in storage order (bottom row first by convention)."""

    def __init__(self, pixel_data: bytes, width: int, height: int):
        self._data = pixel_data
        self._width = width
        self._height = height

    def __len__(self) -> int:
        return self._height

    def __iter__(self) -> Iterator[List[Pixel]]:
        stride = self._width * BYTES_PER_PIXEL
        for row in range(self._height):
            start = row * stride
            yield list(PixelSequence(self._data[start : start + stride]))


@dataclass(frozen=True)
class TgaImage:
    """A decoded 24-bit RGB image. Subclasses tag the on-disk encoding."""

    raw: RawImage

    DATA_TYPE_CODE = 0

    @classmethod
    def from_buffer(cls, buf) -> "TgaImage":
        from .decoder import decode_buffer

        return decode_buffer(buf)

    @classmethod
    def from_stream(cls, fp) -> "TgaImage":
        from .decoder import decode_stream

        return decode_stream(fp)

    @property
    def header(self) -> Header:
        return self.raw.header

    @property
    def width(self) -> int:
        return self.raw.header.width

    @property
    def height(self) -> int:
        return self.raw.header.height

    @property
    def bits_per_pixel(self) -> int:
        return self.raw.header.bits_per_pixel

    @property
    def color_map_type(self) -> int:
        return self.raw.header.color_map_type

    @property
    def data_type_code(self) -> int:
        return self.raw.header.data_type_code

    @property
    def identification(self) -> bytes:
        return self.raw.identification

    @property
    def colour_map(self) -> bytes:
        return self.raw.colour_map

    @property
    def pixel_data(self) -> bytes:
        return self.raw.pixel_data

    @property
    def extended_identification(self) -> bytes:
        return self.raw.extended_identification

    def image_data_length(self) -> int:
        return self.raw.image_data_length()

    def image_data_length_bytes(self) -> int:
        return self.raw.image_data_length_bytes()

    def pixels(self) -> PixelSequence:
        return self.raw.pixels()

    def scanlines(self) -> ScanlineSequence:
        return self.raw.scanlines()

    def as_array(self) -> np.ndarray:
        return self.raw.as_array()


@dataclass(frozen=True)
class UncompressedRgb(TgaImage):
    DATA_TYPE_CODE = TYPE_UNCOMPRESSED_RGB


@dataclass(frozen=True)
class RunLengthEncodedRgb(TgaImage):
    DATA_TYPE_CODE = TYPE_RLE_RGB


IMAGE_TYPES = {cls.DATA_TYPE_CODE: cls for cls in (UncompressedRgb, RunLengthEncodedRgb)}
