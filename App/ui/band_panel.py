"""Image import, band controls and export panel."""

from __future__ import annotations

from pathlib import Path

from PIL import Image
from PyQt6.QtCore import Qt, QThread, pyqtSignal
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import (
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from image_processing import BandProcessor
from models import (
    DEFAULT_EXPORT_NAME,
    MIN_BAND_HEIGHT_RANGE,
    OUTPUT_WIDTH_MAX,
    OUTPUT_WIDTH_MIN,
    OUTPUT_WIDTH_STEP,
    THRESHOLD_RANGE,
    BandConfig,
    BandResult,
)
from ui.styles import FONTS, SIZES, hint_stylesheet, panel_stylesheet
from ui.widgets import WidgetFactory, array_to_pixmap


class ProcessingThread(QThread):
    """Background thread for band extraction to avoid blocking UI."""

    bands_ready = pyqtSignal(object)  # BandResult
    error = pyqtSignal(str)  # Error message

    def __init__(self, image: Image.Image, config: BandConfig):
        super().__init__()
        self.image = image
        # Snapshot so slider moves during a run don't race the worker
        self.config = BandConfig(**vars(config))

    def run(self):
        """Execute band extraction in background."""
        try:
            processor = BandProcessor(self.config)
            result = processor.process_image(self.image)
            self.bands_ready.emit(result)
        except Exception as e:
            self.error.emit(str(e))


class BandPanel(QWidget):
    """Panel for loading an image, tuning bands and exporting the result."""

    bands_updated = pyqtSignal(object)  # BandResult
    reset_requested = pyqtSignal()

    def __init__(self, config: BandConfig, parent: QWidget | None = None):
        super().__init__(parent)
        self.config = config
        self.processor = BandProcessor(self.config)
        self.image: Image.Image | None = None
        self.result: BandResult | None = None
        self.processing_thread: ProcessingThread | None = None
        self._busy = False
        self._rerun_pending = False

        self._setup_ui()
        self._connect_signals()
        self._set_image_controls_enabled(False)

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        # --- Image Selection Section ---
        self._create_file_selection(layout)

        # --- Original and Band Previews ---
        self._create_preview_area(layout)

        # --- Band Controls ---
        self._create_band_controls(layout)

        # --- Export ---
        self._create_export_controls(layout)

        # --- Progress and Status ---
        self._create_status_area(layout)

        self.setLayout(layout)

    def _create_file_selection(self, parent_layout: QVBoxLayout):
        """Create file selection controls."""
        file_layout = QHBoxLayout()

        self.file_path_label = QLabel("No image selected")
        self.file_path_label.setWordWrap(True)
        file_layout.addWidget(self.file_path_label, stretch=1)

        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.setToolTip("Select an image file (PNG, JPG, etc.)")
        self.browse_btn.setMinimumWidth(SIZES.BUTTON_MIN_WIDTH)
        file_layout.addWidget(self.browse_btn)

        self.reset_btn = QPushButton("Upload New Image")
        self.reset_btn.setMinimumWidth(SIZES.BUTTON_MIN_WIDTH)
        file_layout.addWidget(self.reset_btn)

        parent_layout.addLayout(file_layout)

    def _create_preview_label(self, placeholder: str) -> QLabel:
        label = QLabel()
        label.setMinimumSize(*SIZES.PREVIEW_MIN_SIZE)
        label.setMaximumSize(*SIZES.PREVIEW_MAX_SIZE)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setStyleSheet(panel_stylesheet())
        label.setText(placeholder)
        return label

    def _create_preview_area(self, parent_layout: QVBoxLayout):
        """Create side-by-side original and band previews."""
        previews = QHBoxLayout()

        original_col = QVBoxLayout()
        original_title = QLabel("Original Image")
        original_title.setFont(FONTS.SECTION_TITLE)
        original_col.addWidget(original_title)
        self.original_label = self._create_preview_label(
            "Image preview will appear here"
        )
        original_col.addWidget(self.original_label)
        previews.addLayout(original_col)

        bands_col = QVBoxLayout()
        self.bands_title = QLabel("Color Bands")
        self.bands_title.setFont(FONTS.SECTION_TITLE)
        bands_col.addWidget(self.bands_title)
        self.bands_label = self._create_preview_label(
            "Color bands will appear here"
        )
        bands_col.addWidget(self.bands_label)
        previews.addLayout(bands_col)

        parent_layout.addLayout(previews)

    def _create_band_controls(self, parent_layout: QVBoxLayout):
        """Create threshold and minimum band height sliders."""
        group = QGroupBox("Band Settings")
        group_layout = QVBoxLayout()

        self.threshold_slider, threshold_label = (
            WidgetFactory.create_slider_with_label(
                THRESHOLD_RANGE[0],
                THRESHOLD_RANGE[1],
                int(self.config.color_threshold),
                label_width=SIZES.LABEL_MIN_WIDTH,
                tooltip="Maximum color difference within a band",
            )
        )
        group_layout.addLayout(
            WidgetFactory.create_labeled_row(
                "Color Sensitivity:", self.threshold_slider, threshold_label
            )
        )
        group_layout.addWidget(
            self._create_hint("Lower = more bands, Higher = fewer bands")
        )

        self.min_height_slider, min_height_label = (
            WidgetFactory.create_slider_with_label(
                MIN_BAND_HEIGHT_RANGE[0],
                MIN_BAND_HEIGHT_RANGE[1],
                self.config.min_band_height,
                label_width=SIZES.LABEL_MIN_WIDTH,
                label_format="{}px",
            )
        )
        group_layout.addLayout(
            WidgetFactory.create_labeled_row(
                "Minimum Band Height:", self.min_height_slider, min_height_label
            )
        )
        group_layout.addWidget(
            self._create_hint("Minimum height for each color band")
        )

        group.setLayout(group_layout)
        parent_layout.addWidget(group)

    def _create_export_controls(self, parent_layout: QVBoxLayout):
        """Create output resolution slider and download button."""
        group = QGroupBox("Download")
        group_layout = QVBoxLayout()

        self.output_width_slider, output_width_label = (
            WidgetFactory.create_slider_with_label(
                OUTPUT_WIDTH_MIN,
                OUTPUT_WIDTH_MAX,
                self.config.output_width,
                label_width=SIZES.LABEL_MIN_WIDTH,
                label_format="{}px",
                step=OUTPUT_WIDTH_STEP,
            )
        )
        group_layout.addLayout(
            WidgetFactory.create_labeled_row(
                "Output Resolution:", self.output_width_slider, output_width_label
            )
        )
        self.output_hint = self._create_hint("Width of downloaded image")
        group_layout.addWidget(self.output_hint)

        self.download_btn = QPushButton("Download Color Bands")
        self.download_btn.setEnabled(False)
        group_layout.addWidget(self.download_btn)

        group.setLayout(group_layout)
        parent_layout.addWidget(group)

    def _create_status_area(self, parent_layout: QVBoxLayout):
        """Create progress bar and status label."""
        self.progress_bar = QProgressBar()
        # Indeterminate: extraction reports no progress
        self.progress_bar.setRange(0, 0)
        self.progress_bar.setVisible(False)
        parent_layout.addWidget(self.progress_bar)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        parent_layout.addWidget(self.status_label)

    def _create_hint(self, text: str) -> QLabel:
        hint = QLabel(text)
        hint.setFont(FONTS.HINT)
        hint.setStyleSheet(hint_stylesheet())
        return hint

    def _connect_signals(self):
        """Connect UI signals to handlers."""
        self.browse_btn.clicked.connect(self.browse_for_image)
        self.reset_btn.clicked.connect(self.reset)
        self.download_btn.clicked.connect(self.download_bands)

        self.threshold_slider.valueChanged.connect(self._on_threshold_changed)
        self.min_height_slider.valueChanged.connect(self._on_min_height_changed)
        self.output_width_slider.valueChanged.connect(
            lambda v: setattr(self.config, "output_width", v)
        )

    # === Event Handlers ===

    def browse_for_image(self):
        """Handle browse button click."""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Select Image",
            "",
            "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp);;All Files (*)",
        )
        if file_path:
            self.load_image(file_path)

    def _on_threshold_changed(self, value: int):
        self.config.color_threshold = float(value)
        self._start_processing()

    def _on_min_height_changed(self, value: int):
        self.config.min_band_height = value
        self._start_processing()

    def download_bands(self):
        """Render at output resolution and save to a user-chosen file."""
        if not self.result or not self.result.bands or self.image is None:
            return

        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save Color Bands",
            DEFAULT_EXPORT_NAME,
            "PNG Image (*.png)",
        )
        if not file_path:
            return

        try:
            saved = self.processor.export(self.result.bands, self.image, file_path)
            self.status_label.setText(f"Saved {Path(saved).name}")
        except (OSError, ValueError) as e:
            self.status_label.setText(f"Error saving image: {e}")

    def _on_processing_finished(self, result: BandResult):
        """Handle completed band extraction."""
        self._busy = False

        if self._rerun_pending:
            # Settings changed mid-run; this result is already stale
            self._rerun_pending = False
            self._start_processing()
            return

        self.progress_bar.setVisible(False)
        if self.image is None:
            return  # panel was reset while the worker ran
        self.result = result

        self.bands_title.setText(f"Color Bands ({result.band_count} bands)")
        if result.preview is not None:
            self.bands_label.setPixmap(
                array_to_pixmap(result.preview, SIZES.PREVIEW_MAX_SIZE)
            )
        self.download_btn.setEnabled(result.band_count > 0)
        self.status_label.setText(f"Generated {result.band_count} bands")

        self.bands_updated.emit(result)

    def _on_processing_error(self, error_msg: str):
        """Handle processing error, keeping the previous result."""
        self._busy = False

        if self._rerun_pending:
            # Newer settings may succeed where this run failed
            self._rerun_pending = False
            self._start_processing()
            return

        self.progress_bar.setVisible(False)

        pretty_msg = error_msg.replace("\n", " ").strip()
        self.status_label.setText(f"Error: {pretty_msg}")

    # === Processing ===

    def _start_processing(self):
        """Run extraction for the current image and settings in background."""
        if self.image is None:
            return

        if self._busy:
            self._rerun_pending = True
            return

        # Previous worker has emitted its result; let run() return first
        if self.processing_thread is not None:
            self.processing_thread.wait()

        self._busy = True
        self.progress_bar.setVisible(True)
        self.status_label.setText("Processing...")

        self.processing_thread = ProcessingThread(self.image, self.config)
        self.processing_thread.bands_ready.connect(self._on_processing_finished)
        self.processing_thread.error.connect(self._on_processing_error)
        self.processing_thread.start()

    def _set_image_controls_enabled(self, enabled: bool):
        self.threshold_slider.setEnabled(enabled)
        self.min_height_slider.setEnabled(enabled)
        self.output_width_slider.setEnabled(enabled)
        self.reset_btn.setEnabled(enabled)

    # === Public Methods ===

    def load_image(self, file_path: str):
        """Load an image, show it and start band extraction."""
        try:
            image = self.processor.load_image(file_path)
        except ValueError as e:
            self.status_label.setText(str(e))
            return

        self.image = image
        self.result = None
        self.file_path_label.setText(f"Selected: {Path(file_path).name}")

        pixmap = QPixmap(file_path)
        if not pixmap.isNull():
            self.original_label.setPixmap(
                pixmap.scaled(
                    *SIZES.PREVIEW_MAX_SIZE,
                    Qt.AspectRatioMode.KeepAspectRatio,
                    Qt.TransformationMode.SmoothTransformation,
                )
            )

        # Output width range grows to cover large source images
        self.output_width_slider.setMaximum(max(image.width, OUTPUT_WIDTH_MAX))
        # Keep the saved export width, clamped to what the slider allows
        self.output_width_slider.setValue(self.config.output_width)
        self.config.output_width = self.output_width_slider.value()
        self.output_hint.setText(
            f"Width of downloaded image (original: {image.width}px)"
        )

        self._set_image_controls_enabled(True)
        self._start_processing()

    def reset(self):
        """Clear the current image so a new one can be loaded."""
        self.image = None
        self.result = None
        self._rerun_pending = False
        self.file_path_label.setText("No image selected")
        self.original_label.clear()
        self.original_label.setText("Image preview will appear here")
        self.bands_label.clear()
        self.bands_label.setText("Color bands will appear here")
        self.bands_title.setText("Color Bands")
        self.download_btn.setEnabled(False)
        self.status_label.setText("")
        self._set_image_controls_enabled(False)
        self.reset_requested.emit()
