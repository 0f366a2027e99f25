"""Widget factory for creating common UI patterns with reduced boilerplate.

This module provides factory functions to eliminate repetitive widget creation
code throughout the UI components.
"""

from typing import Optional, Tuple

import numpy as np
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage, QPixmap
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QSlider, QWidget


class WidgetFactory:
    """Factory class for creating commonly used widget patterns."""

    @staticmethod
    def create_slider_with_label(
        range_min: int,
        range_max: int,
        value: int,
        label_width: int = 40,
        label_format: str = "{}",
        step: int = 1,
        tooltip: str = "",
    ) -> Tuple[QSlider, QLabel]:
        """Create a slider with an auto-updating value label.

        The label automatically updates when the slider value changes.

        Args:
            range_min: Minimum slider value
            range_max: Maximum slider value
            value: Initial value
            label_width: Minimum width for label
            label_format: Format string for label (use {} for value placeholder)
            step: Single and page step increment
            tooltip: Tooltip text

        Returns:
            Tuple of (slider, label)
        """
        slider = QSlider(Qt.Orientation.Horizontal)
        slider.setRange(range_min, range_max)
        slider.setSingleStep(step)
        slider.setPageStep(step)
        slider.setValue(value)
        if tooltip:
            slider.setToolTip(tooltip)

        label = QLabel(label_format.format(value))
        label.setMinimumWidth(label_width)

        # Auto-connect slider to label
        slider.valueChanged.connect(lambda v: label.setText(label_format.format(v)))

        return slider, label

    @staticmethod
    def create_labeled_row(
        label_text: str,
        *widgets: QWidget,
    ) -> QHBoxLayout:
        """Create a horizontal layout with a label followed by widgets.

        Args:
            label_text: Text for the label
            widgets: Widgets to place after label

        Returns:
            QHBoxLayout with label and widgets
        """
        layout = QHBoxLayout()
        layout.addWidget(QLabel(label_text))
        for widget in widgets:
            layout.addWidget(widget)
        return layout


def array_to_pixmap(buffer: np.ndarray, max_size: Optional[Tuple[int, int]] = None) -> QPixmap:
    """Convert a (height, width, 3) uint8 buffer into a QPixmap.

    Args:
        buffer: Rendered RGB pixel buffer
        max_size: Optional (width, height) to scale down into, keeping aspect

    Returns:
        QPixmap copy of the buffer
    """
    data = np.ascontiguousarray(buffer, dtype=np.uint8)
    height, width = data.shape[:2]
    raw = data.tobytes()
    image = QImage(raw, width, height, width * 3, QImage.Format.Format_RGB888)
    # QImage borrows raw; copy before it goes out of scope
    pixmap = QPixmap.fromImage(image.copy())

    if max_size is not None:
        pixmap = pixmap.scaled(
            max_size[0],
            max_size[1],
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
    return pixmap
