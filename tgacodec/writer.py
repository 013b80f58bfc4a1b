"""Incremental canonical re-encoder for decoded TGA images."""

from __future__ import annotations

from .constants import DEFAULT_CHUNK_SIZE, FOOTER_SIGNATURE, TYPE_UNCOMPRESSED_RGB


class ImageWriter:
    """
    Serialize a decoded image as an uncompressed type-2 file, piece by piece.

    Output order is header, identification, colour map, pixel data, extended
    identification, footer signature. The footer is always appended. Pixel data is
    always written uncompressed, so the header is written back with type code 2.
    """

    def __init__(self, image):
        raw = getattr(image, "raw", image)
        header = raw.header.with_type_code(TYPE_UNCOMPRESSED_RGB)
        self._buffers = (
            header.pack(),
            raw.identification,
            raw.colour_map,
            raw.pixel_data,
            raw.extended_identification,
            FOOTER_SIGNATURE,
        )
        self._index = 0
        self._offset = 0

    @property
    def total_length(self) -> int:
        return sum(len(b) for b in self._buffers)

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._buffers)

    def readinto(self, dest) -> int:
        """Fill ``dest`` from the current position; returns bytes written, 0 at end."""
        out = memoryview(dest).cast("B")
        capacity = len(out)
        written = 0
        while written < capacity and self._index < len(self._buffers):
            current = self._buffers[self._index]
            n = min(len(current) - self._offset, capacity - written)
            out[written : written + n] = current[self._offset : self._offset + n]
            written += n
            self._offset += n
            if self._offset >= len(current):
                self._index += 1
                self._offset = 0
        return written

    def read(self, size: int = -1) -> bytes:
        if size is None or size < 0:
            size = self.total_length
        buf = bytearray(size)
        n = self.readinto(buf)
        return bytes(buf[:n])


def encode_image(image) -> bytes:
    """Return the complete canonical encoding of ``image``."""
    return ImageWriter(image).read()


def write_image(image, fp, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Stream the canonical encoding of ``image`` into binary file ``fp``."""
    writer = ImageWriter(image)
    buf = bytearray(chunk_size)
    view = memoryview(buf)
    total = 0
    while True:
        n = writer.readinto(view)
        if n == 0:
            break
        fp.write(view[:n])
        total += n
    return total
