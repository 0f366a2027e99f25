"""Utility functions for color math, pixel buffers and output sizing.

AIDEV-NOTE: This module contains helper functions shared by the band
extractor, the renderer and the processor. Nothing here knows about bands.
"""

import math

import numpy as np
from PIL import Image


def color_distance(
    color1: "tuple[float, float, float]",
    color2: "tuple[float, float, float]",
) -> float:
    """Euclidean distance between two RGB colors."""
    r = color1[0] - color2[0]
    g = color1[1] - color2[1]
    b = color1[2] - color2[2]
    return math.sqrt(r * r + g * g + b * b)


def round_channel(value: float) -> int:
    """Round a channel average to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))


def rgb_to_hex(color: "tuple[float, float, float]") -> str:
    """Encode an RGB triple as a #rrggbb string."""
    return "#" + "".join(f"{round_channel(c):02x}" for c in color)


def image_to_pixel_buffer(
    image: Image.Image,
) -> "tuple[np.ndarray, int, int, int]":
    """Flatten a PIL image into a row-major pixel buffer.

    Args:
        image: PIL image in RGB or RGBA mode (other modes converted to RGBA)

    Returns:
        Tuple of (flat uint8 buffer, width, height, channels)
    """
    if image.mode not in ("RGB", "RGBA"):
        image = image.convert("RGBA")

    width, height = image.size
    channels = len(image.getbands())
    buffer = np.asarray(image, dtype=np.uint8).reshape(-1)
    return buffer, width, height, channels


def preview_size(
    image_width: int, image_height: int, max_width: int
) -> "tuple[int, int]":
    """Size of the on-screen preview: never upscaled, capped to max_width."""
    scale = min(1.0, max_width / image_width)
    return (
        max(1, int(image_width * scale)),
        max(1, int(image_height * scale)),
    )


def output_size(
    image_width: int, image_height: int, output_width: int
) -> "tuple[int, int]":
    """Size of the exported render, keeping the source aspect ratio."""
    scale = output_width / image_width
    # Truncated, as a canvas sized to a fractional height would be
    return output_width, max(1, int(image_height * scale))


def bands_to_image(buffer: np.ndarray) -> Image.Image:
    """Wrap a rendered (height, width, 3) buffer as a PIL RGB image."""
    return Image.fromarray(np.ascontiguousarray(buffer, dtype=np.uint8))
