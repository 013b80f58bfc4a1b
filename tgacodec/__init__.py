"""Decoder and canonical re-encoder for 24-bit RGB Truevision TGA images."""
from .constants import (
    FOOTER_SIGNATURE,
    HEADER_LENGTH,
    TYPE_RLE_RGB,
    TYPE_UNCOMPRESSED_RGB,
)
from .errors import (
    CorruptColourMap,
    CorruptData,
    CorruptExtendedIdentification,
    CorruptHeader,
    CorruptIdString,
    CorruptImageData,
    IncompleteColourMap,
    IncompleteData,
    IncompleteHeader,
    IncompleteIdString,
    IncompleteImageData,
    PacketOverrun,
    TgaError,
    UnsupportedFormat,
)
from .format import Header, parse_header
from .image import (
    PixelSequence,
    RawImage,
    RunLengthEncodedRgb,
    ScanlineSequence,
    TgaImage,
    UncompressedRgb,
)
from .decoder import decode_buffer, decode_image, decode_stream
from .writer import ImageWriter, encode_image, write_image
from .version import __version__, get_version_string

__all__ = [
    "FOOTER_SIGNATURE",
    "HEADER_LENGTH",
    "TYPE_RLE_RGB",
    "TYPE_UNCOMPRESSED_RGB",
    "CorruptColourMap",
    "CorruptData",
    "CorruptExtendedIdentification",
    "CorruptHeader",
    "CorruptIdString",
    "CorruptImageData",
    "IncompleteColourMap",
    "IncompleteData",
    "IncompleteHeader",
    "IncompleteIdString",
    "IncompleteImageData",
    "PacketOverrun",
    "TgaError",
    "UnsupportedFormat",
    "Header",
    "parse_header",
    "PixelSequence",
    "RawImage",
    "RunLengthEncodedRgb",
    "ScanlineSequence",
    "TgaImage",
    "UncompressedRgb",
    "decode_buffer",
    "decode_image",
    "decode_stream",
    "ImageWriter",
    "encode_image",
    "write_image",
    "get_version_string",
    "__version__",
]
