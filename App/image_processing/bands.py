"""Band extraction: collapse image rows into solid color bands.

AIDEV-NOTE: Rows are averaged once into a row color table, then scanned
top to bottom. A row joins the current band while it stays within
color_threshold of the band's running average. Bands are also capped at a
third of the image height, but min_band_height always wins over both
triggers, so a large minimum can still produce a band taller than the cap.
"""

import numpy as np

from models import ColorBand, InvalidInputError

from .utils import color_distance, round_channel


def compute_row_colors(
    pixels,
    width: int,
    height: int,
    channels: int | None = None,
) -> np.ndarray:
    """Average RGB of every image row.

    Args:
        pixels: Flat row-major pixel buffer (RGB or RGBA)
        width: Image width in pixels
        height: Image height in pixels
        channels: Values per pixel (3 or 4), inferred from buffer size if None

    Returns:
        Float array of shape (height, 3)

    Raises:
        InvalidInputError: If the dimensions or buffer size are invalid
    """
    if width < 0 or height < 0:
        raise InvalidInputError(
            f"Image dimensions must be non-negative, got {width}x{height}"
        )

    data = np.asarray(pixels)
    if data.ndim != 1:
        data = data.reshape(-1)

    if height == 0:
        if data.size != 0:
            raise InvalidInputError(
                f"Pixel buffer has {data.size} values for an image with no rows"
            )
        return np.zeros((0, 3), dtype=np.float64)

    if width == 0:
        raise InvalidInputError("Image width must be positive")

    pixel_count = width * height
    if channels is None:
        if data.size % pixel_count != 0:
            raise InvalidInputError(
                f"Pixel buffer length {data.size} is not a multiple of "
                f"{width}x{height} pixels"
            )
        channels = data.size // pixel_count

    if channels not in (3, 4):
        raise InvalidInputError(
            f"Pixel buffer must have 3 or 4 channels, got {channels}"
        )

    expected = pixel_count * channels
    if data.size != expected:
        raise InvalidInputError(
            f"Pixel buffer length {data.size} does not match "
            f"{width}x{height}x{channels} = {expected}"
        )

    rows = data.reshape(height, width, channels)[:, :, :3].astype(np.float64)
    return rows.sum(axis=1) / width


def extract_bands(
    pixels,
    width: int,
    height: int,
    color_threshold: float = 25.0,
    min_band_height: int = 2,
    channels: int | None = None,
) -> "list[ColorBand]":
    """Segment an image into horizontal color bands.

    Args:
        pixels: Flat row-major pixel buffer (RGB or RGBA, alpha ignored)
        width: Image width in pixels
        height: Image height in pixels
        color_threshold: Max RGB distance from the band average (>= 0)
        min_band_height: Rows a band needs before it may close (>= 1)
        channels: Values per pixel, inferred from buffer size if None

    Returns:
        Bands ordered top to bottom, covering every row exactly once

    Raises:
        InvalidInputError: On bad dimensions, buffer size or parameters
    """
    if color_threshold < 0:
        raise InvalidInputError(
            f"color_threshold must be non-negative, got {color_threshold}"
        )
    if min_band_height < 1:
        raise InvalidInputError(
            f"min_band_height must be at least 1, got {min_band_height}"
        )

    row_colors = compute_row_colors(pixels, width, height, channels).tolist()
    if not row_colors:
        return []

    max_band_rows = height / 3
    bands = []

    band_start = 0
    # Running channel sums over rows [band_start, y)
    sum_r, sum_g, sum_b = row_colors[0]

    for y in range(1, height):
        row = row_colors[y]
        count = y - band_start
        band_avg = (sum_r / count, sum_g / count, sum_b / count)

        too_different = color_distance(row, band_avg) > color_threshold
        if (too_different or count > max_band_rows) and count >= min_band_height:
            bands.append(_make_band(band_avg, band_start, count))
            band_start = y
            sum_r, sum_g, sum_b = row
        else:
            sum_r += row[0]
            sum_g += row[1]
            sum_b += row[2]

    # Trailing band is always emitted, whatever its height
    count = height - band_start
    bands.append(
        _make_band((sum_r / count, sum_g / count, sum_b / count), band_start, count)
    )

    return bands


def _make_band(
    average: "tuple[float, float, float]", start_y: int, height: int
) -> ColorBand:
    color = tuple(min(255, max(0, round_channel(c))) for c in average)
    return ColorBand(color=color, height=height, start_y=start_y)
