from __future__ import annotations

import dataclasses
import itertools

import numpy as np
import pytest

from tgacodec import RawImage, decode_buffer
from tgacodec.format import parse_header
from tgacodec.utils import to_rgb_array

from tga_builders import blocky_pixels, build_tga, make_header, random_pixels


@pytest.fixture
def image():
    return decode_buffer(build_tga(5, 3, pixels=random_pixels(5, 3, seed=11)))


def test_pixel_count_matches_header(image):
    assert image.image_data_length() == image.width * image.height
    assert image.image_data_length_bytes() == image.width * image.height * 3
    assert len(image.pixels()) == image.image_data_length()
    assert sum(1 for _ in image.pixels()) == 15


def test_pixels_follow_storage_order(image):
    data = image.pixel_data
    assert list(image.pixels()) == [data[i : i + 3] for i in range(0, len(data), 3)]


def test_pixel_sequence_is_restartable(image):
    seq = image.pixels()
    assert list(seq) == list(seq)
    assert list(image.pixels()) == list(seq)


def test_scanlines_concatenate_to_pixels(image):
    rows = list(image.scanlines())
    assert len(rows) == image.height == len(image.scanlines())
    assert all(len(row) == image.width for row in rows)
    assert list(itertools.chain.from_iterable(rows)) == list(image.pixels())


def test_scanlines_are_owned_copies(image):
    rows = list(image.scanlines())
    rows[0].clear()
    assert len(next(iter(image.scanlines()))) == image.width


def test_zero_width_scanlines():
    image = decode_buffer(build_tga(0, 2, pixels=b""))
    assert list(image.scanlines()) == [[], []]
    assert len(image.pixels()) == 0


def test_image_is_immutable(image):
    with pytest.raises(dataclasses.FrozenInstanceError):
        image.raw.pixel_data = b""
    with pytest.raises(dataclasses.FrozenInstanceError):
        image.raw = None
    assert isinstance(image.pixel_data, bytes)


def test_copies_share_buffers(image):
    clone = dataclasses.replace(image)
    assert clone == image
    assert clone.pixel_data is image.pixel_data


def test_as_array_is_read_only_view(image):
    arr = image.as_array()
    assert arr.shape == (3, 5, 3)
    assert arr.dtype == np.uint8
    assert not arr.flags.writeable
    assert arr.tobytes() == image.pixel_data


def test_raw_image_checks_buffer_lengths():
    header = parse_header(make_header(2, 1, id_length=1))
    RawImage(header, b"x", b"", b"\x00" * 6, b"")
    with pytest.raises(ValueError):
        RawImage(header, b"", b"", b"\x00" * 6, b"")
    with pytest.raises(ValueError):
        RawImage(header, b"x", b"\x00", b"\x00" * 6, b"")
    with pytest.raises(ValueError):
        RawImage(header, b"x", b"", b"\x00" * 5, b"")


def test_structural_equality_depends_on_variant():
    pixels = blocky_pixels(4, 4)
    raw = decode_buffer(build_tga(4, 4, pixels=pixels))
    rle = decode_buffer(build_tga(4, 4, pixels=pixels, rle=True))
    assert raw != rle
    assert raw.pixel_data == rle.pixel_data


def test_to_rgb_array_flips_bottom_up_and_swaps_channels():
    # stored rows: bottom row first, pixels are B, G, R
    bottom = b"\x01\x02\x03" + b"\x04\x05\x06"
    top = b"\x07\x08\x09" + b"\x0a\x0b\x0c"
    image = decode_buffer(build_tga(2, 2, pixels=bottom + top))
    rgb = to_rgb_array(image)
    assert rgb.shape == (2, 2, 3)
    assert rgb[0, 0].tolist() == [9, 8, 7]
    assert rgb[1, 1].tolist() == [6, 5, 4]
    assert rgb.flags.writeable


def test_to_rgb_array_respects_top_to_bottom_bit():
    pixels = b"\x01\x02\x03" + b"\x04\x05\x06"
    image = decode_buffer(build_tga(1, 2, pixels=pixels, image_descriptor=0x20))
    assert to_rgb_array(image)[0, 0].tolist() == [3, 2, 1]
