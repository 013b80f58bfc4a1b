"""Array and export helpers built on numpy and imageio."""
from __future__ import annotations

import numpy as np
import imageio.v2 as imageio

from .constants import DESCRIPTOR_RIGHT_TO_LEFT, DESCRIPTOR_TOP_TO_BOTTOM


def to_rgb_array(image) -> np.ndarray:
    """
    Return a (H, W, 3) uint8 RGB copy of ``image`` in display order.

    Stored pixels are B, G, R and rows run bottom-to-top unless the descriptor's
    top-to-bottom bit is set.
    """
    arr = image.as_array()[..., ::-1]
    descriptor = image.header.image_descriptor
    if not descriptor & DESCRIPTOR_TOP_TO_BOTTOM:
        arr = arr[::-1]
    if descriptor & DESCRIPTOR_RIGHT_TO_LEFT:
        arr = arr[:, ::-1]
    return arr.copy()


def save_image_rgb(image, path: str) -> None:
    """Save ``image`` through imageio; the format follows the path's extension."""
    if image.width == 0 or image.height == 0:
        raise ValueError(f"Cannot export empty image: {image.width}x{image.height}")
    imageio.imwrite(path, to_rgb_array(image))
