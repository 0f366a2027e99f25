import numpy as np
import pytest
from PIL import Image

from image_processing import BandProcessor
from models import BandConfig, BandResult

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def test_process_extracts_bands_and_preview(striped_image_path):
    processor = BandProcessor(BandConfig(color_threshold=25, min_band_height=2))

    result = processor.process(striped_image_path)

    assert isinstance(result, BandResult)
    assert (result.original_width, result.original_height) == (10, 60)
    # Height cap (60 / 3) splits each stripe once
    assert [(b.color, b.start_y, b.height) for b in result.bands] == [
        (RED, 0, 21),
        (RED, 21, 9),
        (BLUE, 30, 21),
        (BLUE, 51, 9),
    ]
    assert result.band_count == 4
    assert result.preview.shape == (60, 10, 3)
    assert np.all(result.preview[:30] == RED)
    assert np.all(result.preview[30:] == BLUE)


def test_load_image_converts_to_rgba(striped_image_path):
    image = BandProcessor().load_image(striped_image_path)

    assert image.mode == "RGBA"


def test_load_image_wraps_errors(tmp_path):
    bogus = tmp_path / "not_an_image.png"
    bogus.write_text("hello")

    with pytest.raises(ValueError, match="Failed to load image"):
        BandProcessor().load_image(bogus)


def test_extract_bands_overrides_config():
    image = Image.new("RGB", (4, 6), RED)
    image.paste(BLUE, (0, 3, 4, 6))
    processor = BandProcessor(BandConfig(min_band_height=1))

    bands = processor.extract_bands(image, min_band_height=10)

    assert len(bands) == 1


def test_preview_is_capped_to_max_width():
    image = Image.new("RGB", (1600, 90), (20, 40, 60))
    processor = BandProcessor(BandConfig(preview_max_width=800))

    bands = processor.extract_bands(image)
    preview = processor.render_preview(bands, image)

    assert preview.shape == (45, 800, 3)


def test_export_writes_png_at_output_width(striped_image_path, tmp_path):
    processor = BandProcessor(BandConfig(output_width=100))
    image = processor.load_image(striped_image_path)
    bands = processor.extract_bands(image)

    saved = processor.export(bands, image, tmp_path / "out.png")

    with Image.open(saved) as exported:
        assert exported.format == "PNG"
        assert exported.size == (100, 600)
        assert exported.convert("RGB").getpixel((50, 0)) == RED
        assert exported.convert("RGB").getpixel((50, 599)) == BLUE


def test_load_image_decodes_rgba_file_eagerly(tmp_path):
    path = tmp_path / "rgba.png"
    Image.new("RGBA", (5, 4), (10, 20, 30, 255)).save(path)

    image = BandProcessor().load_image(path)

    assert image.mode == "RGBA"
    # Pixel data is in memory and the source file handle is released
    assert getattr(image, "fp", None) is None
    path.unlink()
    assert image.getpixel((4, 3)) == (10, 20, 30, 255)
