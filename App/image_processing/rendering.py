"""Rendering of color bands into an output pixel buffer.

AIDEV-NOTE: The renderer only knows the bands' own row units. Band heights
are rescaled so their sum fills the requested target height; the source
image size never enters the calculation.
"""

from typing import TYPE_CHECKING

import numpy as np

from models import InvalidInputError

if TYPE_CHECKING:
    from models import ColorBand


def band_layout(
    bands: "list[ColorBand]", target_height: int
) -> "list[tuple[float, float]]":
    """Scaled vertical placement of each band.

    Args:
        bands: Bands ordered top to bottom
        target_height: Output height in pixels

    Returns:
        List of (top, height) pairs in fractional output pixels

    Raises:
        InvalidInputError: If bands is empty or has zero total height
    """
    if not bands:
        raise InvalidInputError("Cannot render an empty band list")

    total_height = sum(band.height for band in bands)
    if total_height <= 0:
        raise InvalidInputError("Bands have zero total height")

    scale = target_height / total_height

    layout = []
    current_y = 0.0
    for band in bands:
        scaled_height = band.height * scale
        layout.append((current_y, scaled_height))
        current_y += scaled_height

    return layout


def render_bands(
    bands: "list[ColorBand]",
    target_width: int,
    target_height: int,
) -> np.ndarray:
    """Paint bands as full-width solid rectangles.

    Args:
        bands: Bands ordered top to bottom
        target_width: Output width in pixels
        target_height: Output height in pixels

    Returns:
        uint8 array of shape (target_height, target_width, 3)

    Raises:
        InvalidInputError: On empty bands, zero total height or bad size
    """
    if target_width <= 0 or target_height <= 0:
        raise InvalidInputError(
            f"Target size must be positive, got {target_width}x{target_height}"
        )

    layout = band_layout(bands, target_height)
    output = np.zeros((target_height, target_width, 3), dtype=np.uint8)

    last = len(bands) - 1
    for index, (band, (top, height)) in enumerate(zip(bands, layout)):
        # Snap edges to whole rows; the last band always reaches the bottom
        row_start = min(target_height, int(round(top)))
        if index == last:
            row_end = target_height
        else:
            row_end = min(target_height, int(round(top + height)))

        if row_end > row_start:
            output[row_start:row_end, :] = band.color

    return output
