from __future__ import annotations

import pytest

from tgacodec import (
    CorruptImageData,
    IncompleteImageData,
    PacketOverrun,
    decode_buffer,
)
from tgacodec.rle import encode_packets, expand_packets, packet_count, scan_packets
from tgacodec.sources import BufferSource

from tga_builders import blocky_pixels, build_tga, make_header, random_pixels

A = b"\x01\x02\x03"
B = b"\x0a\x0b\x0c"
C = b"\xff\xfe\xfd"


def rle_file(width, height, packets: bytes, trailing: bytes = b"") -> bytes:
    return make_header(width, height, data_type_code=10) + packets + trailing


def test_packet_count_adds_one():
    assert packet_count(0x00) == 1
    assert packet_count(0x7F) == 128
    assert packet_count(0x80) == 1
    assert packet_count(0xFF) == 128


def test_run_packet_expands():
    image = decode_buffer(rle_file(4, 1, b"\x83" + A))
    assert image.pixel_data == A * 4


def test_raw_packet_copies_literals():
    image = decode_buffer(rle_file(3, 1, b"\x02" + A + B + C))
    assert image.pixel_data == A + B + C


def test_packets_span_rows():
    # one run covers the last pixel of row 0 and both pixels of row 1
    image = decode_buffer(rle_file(2, 2, b"\x00" + A + b"\x82" + B))
    assert list(image.scanlines()) == [[A, B], [B, B]]


def test_max_run_of_128():
    image = decode_buffer(rle_file(128, 1, b"\xff" + C))
    assert image.pixel_data == C * 128


def test_rle_and_uncompressed_give_identical_pixel_data():
    pixels = blocky_pixels(31, 9, seed=5)
    raw = decode_buffer(build_tga(31, 9, pixels=pixels))
    rle = decode_buffer(build_tga(31, 9, pixels=pixels, rle=True))
    assert raw.pixel_data == rle.pixel_data
    assert raw.pixel_data == pixels


def test_trailing_bytes_after_packets():
    data = build_tga(5, 5, pixels=blocky_pixels(5, 5), rle=True, trailing=b"more", footer=True)
    image = decode_buffer(data)
    assert image.extended_identification == b"more"


def test_source_exhausted_reports_found():
    with pytest.raises(IncompleteImageData) as excinfo:
        decode_buffer(rle_file(2, 1, b"\x80" + A))
    assert (excinfo.value.have, excinfo.value.need) == (3, 6)


def test_truncated_packet_is_incomplete():
    with pytest.raises(IncompleteImageData) as excinfo:
        decode_buffer(rle_file(2, 1, b"\x01" + A))
    assert (excinfo.value.have, excinfo.value.need) == (0, 6)


@pytest.mark.parametrize("packets", [b"\x81" + A, b"\x01" + A + B])
def test_packet_overrun_is_explicit_failure(packets):
    with pytest.raises(CorruptImageData) as excinfo:
        decode_buffer(rle_file(1, 1, packets))
    overrun = excinfo.value.cause
    assert isinstance(overrun, PacketOverrun)
    assert (overrun.offset, overrun.produced, overrun.need) == (0, 6, 3)


def test_overrun_after_valid_packets():
    with pytest.raises(CorruptImageData) as excinfo:
        decode_buffer(rle_file(3, 1, b"\x80" + A + b"\x82" + B))
    assert excinfo.value.cause.offset == 4


def test_scan_packets_stops_at_declared_size():
    src = BufferSource(b"\x81" + A + b"\x00" + B + b"tail")
    span = scan_packets(src, 9)
    assert span == b"\x81" + A + b"\x00" + B
    assert src.read_rest() == b"tail"


def test_scan_packets_zero_need_consumes_nothing():
    src = BufferSource(b"\x81" + A)
    assert scan_packets(src, 0) == b""
    assert src.offset == 0


def test_expand_packets_rejects_inconsistent_span():
    with pytest.raises(RuntimeError):
        expand_packets(b"\x81" + A, 3)
    with pytest.raises(RuntimeError):
        expand_packets(b"\x80" + A, 6)
    with pytest.raises(RuntimeError):
        expand_packets(b"\x01" + A, 6)


def test_encode_packets_prefers_runs():
    assert encode_packets(A * 3 + B) == b"\x82" + A + b"\x00" + B
    assert encode_packets(A + B + C) == b"\x02" + A + B + C
    assert encode_packets(b"") == b""


def test_encode_packets_splits_long_runs_and_literals():
    packed = encode_packets(A * 300)
    assert packed == b"\xff" + A + b"\xff" + A + b"\xab" + A
    noisy = random_pixels(200, 1, seed=9)
    assert expand_packets(encode_packets(noisy), len(noisy)) == noisy


def test_encode_packets_rejects_partial_pixel():
    with pytest.raises(ValueError):
        encode_packets(b"\x00\x01")
