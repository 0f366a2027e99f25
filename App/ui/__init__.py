"""UI components for the Color Band Art generator.

This package contains the PyQt6 window and panels that drive the band
extraction pipeline.
"""

from ui.band_panel import BandPanel, ProcessingThread
from ui.main_window import BandArtWindow

__all__ = [
    "BandArtWindow",
    "BandPanel",
    "ProcessingThread",
]
