"""Main band processor orchestrating the complete pipeline.

AIDEV-NOTE: This module handles the pipeline from photograph to band art:
load, extract bands, render a preview and export at full resolution. The
extraction and rendering steps are pure functions; this class only wires
them to PIL images and the user's BandConfig.
"""

from pathlib import Path

from PIL import Image

from models import DEFAULT_EXPORT_NAME, BandConfig, BandResult, ColorBand

from .bands import extract_bands
from .rendering import render_bands
from .utils import bands_to_image, image_to_pixel_buffer, output_size, preview_size


class BandProcessor:
    """Turns images into color bands and renders them back out."""

    def __init__(self, config: BandConfig | None = None):
        self.config = config or BandConfig()

    def load_image(self, file_path: str | Path) -> Image.Image:
        """Load and validate an image file.

        Args:
            file_path: Path to image file (PNG, JPG, etc.)

        Returns:
            PIL Image in RGBA mode

        Raises:
            ValueError: If file cannot be loaded or is invalid
        """
        try:
            image = Image.open(file_path)
            # Decode now; the image is later read from worker and UI threads
            image.load()
            # AIDEV-NOTE: Always convert to RGBA for consistent processing
            if image.mode != "RGBA":
                image = image.convert("RGBA")
            return image
        except Exception as e:
            raise ValueError(f"Failed to load image: {e}") from e

    def extract_bands(
        self,
        image: Image.Image,
        color_threshold: float | None = None,
        min_band_height: int | None = None,
    ) -> "list[ColorBand]":
        """Extract bands from a loaded image.

        Args:
            image: PIL image (RGB or RGBA)
            color_threshold: Overrides the config threshold if given
            min_band_height: Overrides the config minimum if given

        Returns:
            Bands ordered top to bottom
        """
        if color_threshold is None:
            color_threshold = self.config.color_threshold
        if min_band_height is None:
            min_band_height = self.config.min_band_height

        pixels, width, height, channels = image_to_pixel_buffer(image)
        return extract_bands(
            pixels, width, height, color_threshold, min_band_height, channels
        )

    def render_preview(self, bands: "list[ColorBand]", image: Image.Image):
        """Render bands at preview size (image size capped to max width)."""
        width, height = preview_size(
            image.width, image.height, self.config.preview_max_width
        )
        return render_bands(bands, width, height)

    def render_output(self, bands: "list[ColorBand]", image: Image.Image):
        """Render bands at the configured export width."""
        width, height = output_size(
            image.width, image.height, self.config.output_width
        )
        return render_bands(bands, width, height)

    def export(
        self,
        bands: "list[ColorBand]",
        image: Image.Image,
        file_path: str | Path = DEFAULT_EXPORT_NAME,
    ) -> Path:
        """Render bands at export size and save them as a PNG.

        Returns:
            Path the image was written to
        """
        file_path = Path(file_path)
        buffer = self.render_output(bands, image)
        bands_to_image(buffer).save(file_path, format="PNG")
        print(
            f"Saved {buffer.shape[1]}x{buffer.shape[0]} band image "
            f"to {file_path}"
        )
        return file_path

    def process(self, file_path: str | Path) -> BandResult:
        """Execute the complete band pipeline on an image file.

        Args:
            file_path: Path to input image

        Returns:
            BandResult with bands and a preview render
        """
        print("Starting band processing pipeline...")

        print("Loading image...")
        image = self.load_image(file_path)
        orig_width, orig_height = image.size
        print(f"Loaded image with size: {orig_width}x{orig_height} pixels.")

        return self.process_image(image)

    def process_image(self, image: Image.Image) -> BandResult:
        """Run extraction and preview rendering on an already loaded image."""
        print(
            f"Extracting bands (threshold={self.config.color_threshold}, "
            f"min height={self.config.min_band_height})..."
        )
        bands = self.extract_bands(image)
        print(f"Extracted {len(bands)} bands.")

        preview = self.render_preview(bands, image) if bands else None

        return BandResult(
            bands=bands,
            preview=preview,
            original_width=image.width,
            original_height=image.height,
        )
