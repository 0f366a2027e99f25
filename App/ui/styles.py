"""Centralized styling constants for the Color Band Art UI.

This module consolidates colors, fonts, and sizes used throughout the application
to ensure consistency and easier maintenance.
"""

from PyQt6.QtGui import QFont


class ThemeColors:
    """Application theme colors."""

    BACKGROUND_PANEL = "#2a2a2a"
    BORDER_DEFAULT = "gray"
    HINT_TEXT = "#888888"
    ERROR_TEXT = "red"


class Fonts:
    """Standard application fonts."""

    SECTION_TITLE = QFont("Arial", 12, QFont.Weight.Bold)
    HINT = QFont("Arial", 9)


class Sizes:
    """Standard widget sizes and constraints."""

    # Image previews (original and band render side by side)
    PREVIEW_MIN_SIZE = (200, 150)
    PREVIEW_MAX_SIZE = (400, 400)

    WINDOW_MIN_SIZE = (900, 700)
    BUTTON_MIN_WIDTH = 100
    LABEL_MIN_WIDTH = 50


COLORS = ThemeColors
FONTS = Fonts
SIZES = Sizes


def panel_stylesheet() -> str:
    """Generate standard panel stylesheet with border and background.

    Returns:
        CSS stylesheet string for panel styling
    """
    return (
        f"border: 1px solid {ThemeColors.BORDER_DEFAULT}; "
        f"background-color: {ThemeColors.BACKGROUND_PANEL};"
    )


def hint_stylesheet() -> str:
    return f"color: {ThemeColors.HINT_TEXT};"
