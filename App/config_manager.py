"""Configuration persistence manager for the Color Band Art application.

This module handles loading and saving of band settings to/from JSON files.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Tuple

from models import (
    CONFIG_FILE,
    MIN_BAND_HEIGHT_RANGE,
    OUTPUT_WIDTH_MIN,
    THRESHOLD_RANGE,
    BandConfig,
)


def _clamp(value, low, high):
    return min(high, max(low, value))


class ConfigManager:
    """Handles loading and saving of band settings."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.colorbands_config.json)
        """
        self.config_path = Path(config_path)

    def load(self) -> BandConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            BandConfig with loaded or default values
        """
        config = BandConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                    # Update config with loaded values (fallback to defaults),
                    # clamped to the ranges the UI sliders can show
                    config.color_threshold = float(
                        _clamp(
                            float(data.get("color_threshold", config.color_threshold)),
                            *THRESHOLD_RANGE,
                        )
                    )
                    config.min_band_height = _clamp(
                        int(data.get("min_band_height", config.min_band_height)),
                        *MIN_BAND_HEIGHT_RANGE,
                    )
                    config.output_width = max(
                        OUTPUT_WIDTH_MIN,
                        int(data.get("output_width", config.output_width)),
                    )
                    config.preview_max_width = max(
                        1,
                        int(data.get("preview_max_width", config.preview_max_width)),
                    )
                print(f"✓ Loaded configuration from {self.config_path}")
        except Exception as e:
            print(f"Warning: Could not load config file: {e}")
            config = BandConfig()

        return config

    def save(self, config: BandConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: BandConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w") as f:
                json.dump(asdict(config), f, indent=2)
            return True, None
        except Exception as e:
            return False, str(e)
