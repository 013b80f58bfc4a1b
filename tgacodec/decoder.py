"""Decoders for 24-bit RGB TGA images (type 2 uncompressed, type 10 RLE)."""

from __future__ import annotations

import warnings

from .constants import (
    SUPPORTED_BITS_PER_PIXEL,
    TYPE_RLE_RGB,
    TYPE_UNCOMPRESSED_RGB,
)
from .errors import (
    CorruptColourMap,
    CorruptExtendedIdentification,
    CorruptIdString,
    CorruptImageData,
    IncompleteColourMap,
    IncompleteIdString,
    IncompleteImageData,
    UnsupportedFormat,
)
from .format import Header, read_header, split_footer
from .image import RawImage, RunLengthEncodedRgb, TgaImage, UncompressedRgb
from .rle import expand_packets, scan_packets
from .sources import BufferSource, StreamSource, as_source


def _read_field(source, size: int, incomplete, corrupt) -> bytes:
    try:
        data = source.read(size)
    except OSError as exc:
        raise corrupt(exc) from exc
    if len(data) != size:
        raise incomplete(len(data), size)
    return data


def _check_supported(header: Header, data_type_code: int) -> None:
    if header.data_type_code != data_type_code:
        raise UnsupportedFormat(header.data_type_code)
    if header.bits_per_pixel != SUPPORTED_BITS_PER_PIXEL:
        raise UnsupportedFormat(header.data_type_code, header.bits_per_pixel)
    if header.color_map_type != 0:
        warnings.warn(
            f"true-colour image declares a colour map ({header.color_map_length} entries); "
            "it is kept but not applied"
        )
    if header.color_map_depth % 8:
        warnings.warn(
            f"colour map depth {header.color_map_depth} is not a multiple of 8"
        )


def _read_prefix(source, header: Header) -> tuple[bytes, bytes]:
    identification = _read_field(
        source, header.id_length, IncompleteIdString, CorruptIdString
    )
    colour_map = _read_field(
        source, header.color_map_size_bytes, IncompleteColourMap, CorruptColourMap
    )
    return identification, colour_map


def _read_trailer(source) -> bytes:
    try:
        trailing = source.read_rest()
    except OSError as exc:
        raise CorruptExtendedIdentification(exc) from exc
    extended, _ = split_footer(trailing)
    return extended


def decode_uncompressed(source, header: Header) -> UncompressedRgb:
    """Decode a type-2 image whose header has already been read from ``source``."""
    _check_supported(header, TYPE_UNCOMPRESSED_RGB)
    identification, colour_map = _read_prefix(source, header)
    pixel_data = _read_field(
        source, header.image_size_bytes, IncompleteImageData, CorruptImageData
    )
    raw = RawImage(
        header=header,
        identification=identification,
        colour_map=colour_map,
        pixel_data=pixel_data,
        extended_identification=_read_trailer(source),
    )
    return UncompressedRgb(raw)


def decode_run_length(source, header: Header) -> RunLengthEncodedRgb:
    """Decode a type-10 image whose header has already been read from ``source``."""
    _check_supported(header, TYPE_RLE_RGB)
    identification, colour_map = _read_prefix(source, header)
    need = header.image_size_bytes
    span = scan_packets(source, need)
    pixel_data = expand_packets(span, need)
    raw = RawImage(
        header=header,
        identification=identification,
        colour_map=colour_map,
        pixel_data=pixel_data,
        extended_identification=_read_trailer(source),
    )
    return RunLengthEncodedRgb(raw)


DECODERS = {
    TYPE_UNCOMPRESSED_RGB: decode_uncompressed,
    TYPE_RLE_RGB: decode_run_length,
}


def decode_image(source) -> TgaImage:
    """
    Decode a TGA image from a bytes-like object or a binary stream.

    Returns ``UncompressedRgb`` or ``RunLengthEncodedRgb`` depending on the
    header's type code. Raises a ``TgaError`` subclass on any failure.
    """
    src = as_source(source)
    header = read_header(src)
    decoder = DECODERS.get(header.data_type_code)
    if decoder is None:
        raise UnsupportedFormat(header.data_type_code)
    return decoder(src, header)


def decode_buffer(buf) -> TgaImage:
    return decode_image(BufferSource(buf))


def decode_stream(fp, chunk_size: int | None = None) -> TgaImage:
    return decode_image(StreamSource(fp, chunk_size=chunk_size))
