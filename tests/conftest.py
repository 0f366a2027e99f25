import os

import pytest
from PIL import Image


@pytest.fixture
def striped_image_path(tmp_path):
    """10x60 PNG: 30 red rows over 30 blue rows."""
    image = Image.new("RGB", (10, 60), (255, 0, 0))
    image.paste((0, 0, 255), (0, 30, 10, 60))
    path = tmp_path / "stripes.png"
    image.save(path)
    return path


@pytest.fixture(scope="session")
def qapp():
    """Shared QApplication on the offscreen platform."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    widgets = pytest.importorskip("PyQt6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app
