"""Exception hierarchy for TGA decoding.

Every error aborts the decode call; no partial image is returned. ``Incomplete*``
errors mean the byte source ran out before a declared-size field was read,
``Corrupt*`` errors mean the read itself failed (``cause`` holds the original
exception).
"""
from __future__ import annotations

from .constants import HEADER_LENGTH


class TgaError(ValueError):
    """Base class: the input is not a decodable 24-bit RGB TGA image."""


class IncompleteData(TgaError):
    field = "data"

    def __init__(self, have: int, need: int):
        super().__init__(f"{type(self).__name__}(have={have}, need={need})")
        self.have = have
        self.need = need


class CorruptData(TgaError):
    field = "data"

    def __init__(self, cause: BaseException):
        super().__init__(f"{type(self).__name__}: {cause}")
        self.cause = cause


class IncompleteHeader(IncompleteData):
    field = "header"

    def __init__(self, have: int, need: int = HEADER_LENGTH):
        super().__init__(have, need)


class IncompleteIdString(IncompleteData):
    field = "identification"


class IncompleteColourMap(IncompleteData):
    field = "colour map"


class IncompleteImageData(IncompleteData):
    field = "image data"


class CorruptHeader(CorruptData):
    field = "header"


class CorruptIdString(CorruptData):
    field = "identification"


class CorruptColourMap(CorruptData):
    field = "colour map"


class CorruptImageData(CorruptData):
    field = "image data"


class CorruptExtendedIdentification(CorruptData):
    field = "extended identification"


class UnsupportedFormat(TgaError):
    def __init__(self, data_type_code: int, bits_per_pixel: int | None = None):
        if bits_per_pixel is None:
            msg = f"UnsupportedFormat(data_type_code={data_type_code})"
        else:
            msg = (
                f"UnsupportedFormat(data_type_code={data_type_code}, "
                f"bits_per_pixel={bits_per_pixel})"
            )
        super().__init__(msg)
        self.data_type_code = data_type_code
        self.bits_per_pixel = bits_per_pixel


class PacketOverrun(ValueError):
    """An RLE packet would expand past the header-declared image size."""

    def __init__(self, offset: int, produced: int, need: int):
        super().__init__(
            f"packet at offset {offset} expands to {produced} bytes, "
            f"image declares {need}"
        )
        self.offset = offset
        self.produced = produced
        self.need = need
