"""Shared fixtures for ZoomPanViewer tests.

Provides framing configs, sample images and viewer widget fixtures.
Qt runs on the offscreen platform so no display is required.
"""
import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add parent directory to path to import ZoomPanViewer module
sys.path.insert(0, str(Path(__file__).parent.parent))

from ZoomPanViewer.core.config import ViewerConfig


# ── Framing ─────────────────────────────────────────────────────────────

@pytest.fixture
def centered_config():
    """Default zoom range and start zoom, without the vertical start nudge"""
    return ViewerConfig(start_offset_y=0)


@pytest.fixture
def roomy_config():
    """Zoom range wide enough that pinch zoom is not clamped"""
    return ViewerConfig(max_scale=4.0, start_offset_y=0)


def make_qimage(width=1000, height=500):
    from PySide6.QtGui import QImage
    from PySide6.QtCore import Qt

    img = QImage(width, height, QImage.Format_RGB888)
    img.fill(Qt.white)
    return img


# ── Widgets ─────────────────────────────────────────────────────────────

@pytest.fixture
def viewport(qtbot):
    from ZoomPanViewer.ui.widgets import ViewportFrame

    vp = ViewportFrame()
    qtbot.addWidget(vp)
    vp.resize(800, 600)
    return vp


@pytest.fixture
def image_widget(viewport):
    from ZoomPanViewer.ui.widgets import ZoomImageWidget

    return ZoomImageWidget(viewport)


@pytest.fixture
def loaded_image(image_widget):
    image_widget.set_image(make_qimage())
    return image_widget


@pytest.fixture
def qimage_factory():
    """Callable building a blank RGB QImage of the given size"""
    return make_qimage
