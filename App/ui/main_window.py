"""Main application window for the Color Band Art generator."""

from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import QMainWindow, QMessageBox

from config_manager import ConfigManager
from models import BandResult
from ui.band_panel import BandPanel
from ui.styles import SIZES

IDLE_STATUS = "All images are processed locally. No data is uploaded or stored."


class BandArtWindow(QMainWindow):
    """Main application window."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Color Band Art Generator")
        self.setMinimumSize(*SIZES.WINDOW_MIN_SIZE)

        # Application state
        self.config_manager = ConfigManager()
        self.config = self.config_manager.load()

        self.band_panel: BandPanel

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Initialize the user interface."""
        self._create_menu_bar()

        self.band_panel = BandPanel(self.config)
        self.setCentralWidget(self.band_panel)

        self.statusBar().showMessage(IDLE_STATUS)

    def _create_menu_bar(self):
        """Create the File menu."""
        menubar = self.menuBar()

        if menubar is None:
            return

        file_menu = menubar.addMenu("&File")

        open_action = QAction("&Open Image...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(lambda: self.band_panel.browse_for_image())
        file_menu.addAction(open_action)

        save_action = QAction("&Download Color Bands...", self)
        save_action.setShortcut("Ctrl+S")
        save_action.triggered.connect(lambda: self.band_panel.download_bands())
        file_menu.addAction(save_action)

        file_menu.addSeparator()

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

    def _connect_signals(self):
        """Connect panel signals to window handlers."""
        self.band_panel.bands_updated.connect(self._on_bands_updated)
        self.band_panel.reset_requested.connect(self._on_panel_reset)

    def _on_bands_updated(self, result: BandResult):
        self.statusBar().showMessage(
            f"{result.band_count} bands from "
            f"{result.original_width}x{result.original_height} image"
        )

    def _on_panel_reset(self):
        self.statusBar().showMessage(IDLE_STATUS)

    def closeEvent(self, event: QCloseEvent):
        """Persist band settings on exit."""
        thread = self.band_panel.processing_thread
        if thread is not None:
            thread.wait()

        success, error = self.config_manager.save(self.config)
        if not success:
            QMessageBox.warning(
                self, "Settings", f"Could not save settings: {error}"
            )
        event.accept()
