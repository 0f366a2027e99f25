"""Image processing pipeline for photo-to-band-art conversion.

AIDEV-NOTE: This package handles the complete pipeline from photograph
to horizontal color bands. Organized into modular components:
- processor: Main BandProcessor orchestrator
- bands: Row averaging and band segmentation
- rendering: Painting bands into an output pixel buffer
- utils: Color math, pixel buffers and output sizing
"""

from .bands import compute_row_colors, extract_bands
from .processor import BandProcessor
from .rendering import band_layout, render_bands

__all__ = [
    "BandProcessor",
    "band_layout",
    "compute_row_colors",
    "extract_bands",
    "render_bands",
]
