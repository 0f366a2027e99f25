"""Data models and constants for the Color Band Art generator."""

from dataclasses import dataclass
from pathlib import Path

# AIDEV-NOTE: Ranges mirror the UI sliders - keep in sync with ui/band_panel.py
THRESHOLD_RANGE = (5, 100)
MIN_BAND_HEIGHT_RANGE = (1, 20)  # rows
OUTPUT_WIDTH_MIN = 400  # px
OUTPUT_WIDTH_MAX = 3840  # px, raised to the image width for larger images
OUTPUT_WIDTH_STEP = 100  # px
PREVIEW_MAX_WIDTH = 800  # px

DEFAULT_EXPORT_NAME = "color-bands.png"

# Configuration file path
CONFIG_FILE = Path.home() / ".colorbands_config.json"


class InvalidInputError(ValueError):
    """Raised when band extraction or rendering receives malformed input."""


@dataclass(frozen=True)
class ColorBand:
    """A run of consecutive image rows collapsed into one solid color.

    AIDEV-NOTE: height and start_y are in source-image rows, not output
    pixels. The renderer rescales them to whatever target it is given.
    """

    color: "tuple[int, int, int]"  # RGB (0-255)
    height: int  # rows
    start_y: int  # first row of the band

    @property
    def end_y(self) -> int:
        """Row just past the bottom of the band."""
        return self.start_y + self.height

    @property
    def hex(self) -> str:
        from image_processing.utils import rgb_to_hex

        return rgb_to_hex(self.color)


@dataclass
class BandConfig:
    """User-adjustable band extraction and export settings."""

    # Maximum RGB distance from the band average before a new band starts
    color_threshold: float = 25.0

    # Rows a band must reach before it is allowed to close
    min_band_height: int = 2

    # Width of the exported image in pixels (height keeps aspect ratio)
    output_width: int = 1920

    # Preview renders are capped to this width
    preview_max_width: int = PREVIEW_MAX_WIDTH


@dataclass
class BandResult:
    """Result of the band processing pipeline."""

    # Extracted bands, top to bottom
    bands: "list[ColorBand]"

    # Preview render, shape (height, width, 3) uint8
    preview: object = None

    # Original image dimensions (pixels)
    original_width: int = 0
    original_height: int = 0

    @property
    def band_count(self) -> int:
        return len(self.bands)
