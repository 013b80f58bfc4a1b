"""Byte-source adapters: whole-buffer and incremental stream access.

Both expose ``read(n)``, which returns at most ``n`` bytes (fewer only when the
source is exhausted) and lets ``OSError`` propagate on a read fault, plus
``read_rest()`` for the trailing region. Decoders only talk to this interface,
so both access modes yield identical results.
"""
from __future__ import annotations


class BufferSource:
    """Source over an addressable bytes-like object already read to completion."""

    def __init__(self, data):
        self._view = memoryview(data).cast("B")
        self._pos = 0

    @property
    def offset(self) -> int:
        return self._pos

    def read(self, n: int) -> bytes:
        end = min(self._pos + n, len(self._view))
        chunk = self._view[self._pos : end].tobytes()
        self._pos = end
        return chunk

    def read_rest(self) -> bytes:
        return self.read(len(self._view) - self._pos)


class StreamSource:
    """Source over a binary file-like object read in bounded chunks.

    ``fp.read`` may return short reads; ``b""`` marks end of stream.
    """

    def __init__(self, fp, chunk_size: int | None = None):
        self._fp = fp
        self._chunk_size = chunk_size
        self._pos = 0

    @property
    def offset(self) -> int:
        return self._pos

    def read(self, n: int) -> bytes:
        parts = []
        got = 0
        while got < n:
            want = n - got
            if self._chunk_size is not None:
                want = min(want, self._chunk_size)
            chunk = self._fp.read(want)
            if not chunk:
                break
            parts.append(chunk)
            got += len(chunk)
        self._pos += got
        return b"".join(parts)

    def read_rest(self) -> bytes:
        parts = []
        while True:
            chunk = self._fp.read(self._chunk_size or -1)
            if not chunk:
                break
            parts.append(chunk)
            self._pos += len(chunk)
        return b"".join(parts)


def as_source(obj):
    """Wrap ``obj`` in the matching source adapter."""
    if isinstance(obj, (BufferSource, StreamSource)):
        return obj
    if hasattr(obj, "read"):
        return StreamSource(obj)
    try:
        return BufferSource(obj)
    except TypeError as exc:
        raise TypeError(
            f"expected a bytes-like object or binary stream, got {type(obj).__name__}"
        ) from exc
