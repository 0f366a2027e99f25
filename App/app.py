"""Color Band Art Generator - Main entry point."""

import sys

from PyQt6.QtWidgets import QApplication

from ui.main_window import BandArtWindow


def main():
    """Launch the Color Band Art application."""
    app = QApplication(sys.argv)

    app.setApplicationDisplayName("Color Band Art Generator")
    app.setApplicationName("ColorBandArt")

    window = BandArtWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
