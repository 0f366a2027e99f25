import json

from PIL import Image

from config_manager import ConfigManager
from image_processing import BandProcessor
from models import (
    MIN_BAND_HEIGHT_RANGE,
    OUTPUT_WIDTH_MIN,
    THRESHOLD_RANGE,
    BandConfig,
)


def test_missing_file_gives_defaults(tmp_path):
    manager = ConfigManager(tmp_path / "missing.json")

    assert manager.load() == BandConfig()


def test_save_then_load(tmp_path):
    manager = ConfigManager(tmp_path / "config.json")
    config = BandConfig(color_threshold=42.0, min_band_height=7, output_width=2400)

    success, error = manager.save(config)

    assert success is True
    assert error is None
    assert manager.load() == config


def test_partial_file_falls_back_per_key(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"min_band_height": 5}))

    config = ConfigManager(path).load()

    assert config.min_band_height == 5
    assert config.color_threshold == BandConfig().color_threshold


def test_corrupt_file_gives_defaults(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    config = ConfigManager(path).load()

    assert config == BandConfig()
    assert "Could not load config file" in capsys.readouterr().out


def test_save_reports_failure(tmp_path):
    manager = ConfigManager(tmp_path / "no_such_dir" / "config.json")

    success, error = manager.save(BandConfig())

    assert success is False
    assert error


def test_out_of_range_values_are_clamped_to_slider_ranges(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"min_band_height": 0, "color_threshold": -4, "output_width": 10})
    )

    config = ConfigManager(path).load()

    assert config.min_band_height == MIN_BAND_HEIGHT_RANGE[0]
    assert config.color_threshold == float(THRESHOLD_RANGE[0])
    assert config.output_width == OUTPUT_WIDTH_MIN


def test_clamped_config_can_extract_bands(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"min_band_height": 0, "color_threshold": -4}))
    image = Image.new("RGB", (4, 6), (255, 0, 0))

    result = BandProcessor(ConfigManager(path).load()).process_image(image)

    assert sum(band.height for band in result.bands) == 6


def test_too_large_values_are_clamped(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"min_band_height": 500, "color_threshold": 1000}))

    config = ConfigManager(path).load()

    assert config.min_band_height == MIN_BAND_HEIGHT_RANGE[1]
    assert config.color_threshold == float(THRESHOLD_RANGE[1])
