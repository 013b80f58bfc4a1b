"""Run-length packet handling for type-10 TGA image data.

A packet starts with one header byte ``P``. The low seven bits hold ``count - 1``
(so counts run 1..128). With the high bit set the packet is a run: one pixel
follows and is repeated ``count`` times. With it clear the packet is raw:
``count`` literal pixels follow.

Decoding is two passes. ``scan_packets`` walks whole packets off a byte source
until the declared size is reached exactly and returns the consumed packet bytes;
``expand_packets`` then expands that span into an exactly-sized buffer.
"""
from __future__ import annotations

from .constants import BYTES_PER_PIXEL, RLE_COUNT_MASK, RLE_MAX_COUNT, RLE_PACKET_FLAG
from .errors import CorruptImageData, IncompleteImageData, PacketOverrun


def packet_count(p: int) -> int:
    return (p & RLE_COUNT_MASK) + 1


def scan_packets(source, need: int) -> bytes:
    """Pass 1: consume whole packets until they expand to exactly ``need`` bytes.

    Raises ``IncompleteImageData(found, need)`` if the source runs out first
    (a truncated packet counts as running out) and ``CorruptImageData`` on a
    read fault or when a packet would expand past ``need``.
    """
    span = bytearray()
    produced = 0
    while produced < need:
        offset = len(span)
        try:
            head = source.read(1)
        except OSError as exc:
            raise CorruptImageData(exc) from exc
        if not head:
            raise IncompleteImageData(produced, need)

        p = head[0]
        count = packet_count(p)
        body_len = BYTES_PER_PIXEL if p & RLE_PACKET_FLAG else BYTES_PER_PIXEL * count
        try:
            body = source.read(body_len)
        except OSError as exc:
            raise CorruptImageData(exc) from exc
        if len(body) != body_len:
            raise IncompleteImageData(produced, need)

        produced += BYTES_PER_PIXEL * count
        if produced > need:
            overrun = PacketOverrun(offset, produced, need)
            raise CorruptImageData(overrun) from overrun
        span += head
        span += body
    return bytes(span)


def expand_packets(span: bytes, need: int) -> bytes:
    """Pass 2: expand a span already validated by ``scan_packets``."""
    out = bytearray(need)
    pos = 0
    i = 0
    end = len(span)
    while i < end:
        p = span[i]
        size = BYTES_PER_PIXEL * packet_count(p)
        if pos + size > need:
            raise RuntimeError(f"packet at offset {i} overruns output buffer")
        if p & RLE_PACKET_FLAG:
            pixel = span[i + 1 : i + 1 + BYTES_PER_PIXEL]
            if len(pixel) != BYTES_PER_PIXEL:
                raise RuntimeError(f"run packet at offset {i} is truncated")
            out[pos : pos + size] = pixel * (size // BYTES_PER_PIXEL)
            i += 1 + BYTES_PER_PIXEL
        else:
            literal = span[i + 1 : i + 1 + size]
            if len(literal) != size:
                raise RuntimeError(f"raw packet at offset {i} is truncated")
            out[pos : pos + size] = literal
            i += 1 + size
        pos += size
    if pos != need:
        raise RuntimeError(f"packets expanded to {pos} bytes, expected {need}")
    return bytes(out)


def encode_packets(pixel_data: bytes) -> bytes:
    """Pack 3-byte pixels into run/raw packets (runs of two or more become runs)."""
    if len(pixel_data) % BYTES_PER_PIXEL:
        raise ValueError("pixel data length must be a multiple of 3")
    pixels = [
        bytes(pixel_data[i : i + BYTES_PER_PIXEL])
        for i in range(0, len(pixel_data), BYTES_PER_PIXEL)
    ]
    out = bytearray()
    literal: list[bytes] = []

    def flush_literal():
        if literal:
            out.append(len(literal) - 1)
            out.extend(b"".join(literal))
            literal.clear()

    i = 0
    n = len(pixels)
    while i < n:
        run = 1
        while i + run < n and run < RLE_MAX_COUNT and pixels[i + run] == pixels[i]:
            run += 1
        if run >= 2:
            flush_literal()
            out.append(RLE_PACKET_FLAG | (run - 1))
            out.extend(pixels[i])
            i += run
        else:
            literal.append(pixels[i])
            i += 1
            if len(literal) == RLE_MAX_COUNT:
                flush_literal()
    flush_literal()
    return bytes(out)
