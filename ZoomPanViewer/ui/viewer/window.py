"""Main viewer window.

This module provides the ViewerWindow class, which hosts the clipping
viewport with its image element, the zoom in / zoom out / reset buttons
and a status bar showing the zoom level.

Features:
- Wheel, drag, touch pan and pinch zoom (via ViewerTransformController)
- Zoom in / zoom out / reset buttons and keyboard shortcuts
- Open an image from the File menu or by dropping it on the window
- Status bar showing zoom percentage and image size
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QPushButton,
    QStatusBar,
    QLabel,
    QFileDialog,
    QMessageBox,
)

from ...core.config import ViewerConfig
from ...core.image_io import load_qimage, is_image_file
from ..widgets import ViewportFrame, ZoomImageWidget
from ..dialogs import HelpDialog
from .controller import ViewerTransformController
from .menu_builder import create_menus
from .status_updater import StatusUpdater

logger = logging.getLogger(__name__)


class ViewerWindow(QMainWindow):
    """Application window for viewing one large image.

    Mouse Controls:
        - Mouse wheel: Zoom in/out (x1.12 per notch, anchored at the cursor)
        - Left-drag: Pan

    Touch Controls:
        - One finger: Pan
        - Two-finger pinch: Zoom around the pinch center

    Keyboard Shortcuts:
        - Ctrl+O: Open image
        - Ctrl+W: Close image
        - + / -: Zoom in / out (x1.2, anchored at the view center)
        - 0 / f: Reset view

    Attributes:
        controller: ViewerTransformController driving the image transform
        image_path: Resolved path of the displayed image, or None
    """

    def __init__(self, config: Optional[ViewerConfig] = None, image_path: Optional[Union[str, Path]] = None):
        super().__init__()
        self.setWindowTitle("ZoomPanViewer")
        self.resize(1000, 700)

        self.config = config or ViewerConfig()
        self.image_path: Optional[str] = None

        central = QWidget(self)
        self.setCentralWidget(central)
        v_layout = QVBoxLayout(central)

        self.viewport = ViewportFrame()
        self.image_widget = ZoomImageWidget(self.viewport)
        v_layout.addWidget(self.viewport, 1)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.zoom_in_button = QPushButton("Zoom in")
        self.zoom_out_button = QPushButton("Zoom out")
        self.reset_button = QPushButton("Reset")
        for button in (self.zoom_in_button, self.zoom_out_button, self.reset_button):
            button_row.addWidget(button)
        v_layout.addLayout(button_row)

        self.status = QStatusBar()
        self.setStatusBar(self.status)
        self.status_image = QLabel()
        self.status_scale = QLabel()
        self.status.addPermanentWidget(self.status_image, 3)
        self.status.addPermanentWidget(self.status_scale, 1)

        self.help_dialog = HelpDialog(self)

        self.controller = ViewerTransformController(
            self.viewport,
            self.image_widget,
            zoom_in_button=self.zoom_in_button,
            zoom_out_button=self.zoom_out_button,
            reset_button=self.reset_button,
            config=self.config,
            parent=self,
        )
        self.status_updater = StatusUpdater(self)
        self.controller.transform_changed.connect(
            lambda scale, tx, ty: self.status_updater.update_scale_status(scale)
        )

        create_menus(self)
        self.setAcceptDrops(True)

        self.status_updater.update_scale_status(self.controller.transform.scale)
        self.status_updater.update_image_status()

        if image_path is not None:
            self.open_image(image_path)

    def open_files(self):
        """Open file dialog to load an image file."""
        path, _ = QFileDialog.getOpenFileName(
            self, "Open image", "", "Images (*.png *.jpg *.jpeg *.tif *.tiff *.bmp *.gif *.webp *.npy)"
        )
        if path:
            self.open_image(path)

    def open_image(self, path: Union[str, Path]) -> bool:
        """Load an image into the viewer and frame it.

        Returns:
            True on success. On failure a warning is shown and the current
            image is kept.
        """
        try:
            qimg = load_qimage(path)
        except (OSError, RuntimeError, ValueError) as e:
            logger.warning("Failed to load image %s: %s", path, e)
            self._show_load_error(path, str(e))
            return False

        self.image_path = str(Path(path).resolve())
        self.image_widget.set_image(qimg)
        self.controller.fit_to_viewport()
        self.status_updater.update_image_status()
        logger.info("Loaded image %s (%d x %d)", self.image_path, qimg.width(), qimg.height())
        return True

    def close_image(self):
        """Remove the displayed image."""
        if self.image_path is None:
            return
        logger.info("Closed image %s", self.image_path)
        self.image_widget.clear()
        self.image_path = None
        self.controller.clear()
        self.status_updater.update_image_status()

    def _show_load_error(self, path: Union[str, Path], error_msg: str):
        details = f"File: {Path(path).name}"
        if error_msg:
            details += f"\n\nError: {error_msg}"
        QMessageBox.warning(self, "Image load error", details)

    # Event handlers
    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        files = [u.toLocalFile() for u in e.mimeData().urls()]
        image_files = [f for f in files if is_image_file(f)]
        if image_files:
            self.open_image(image_files[0])

    def closeEvent(self, event):
        """Close the help dialog along with the window."""
        if self.help_dialog and self.help_dialog.isVisible():
            self.help_dialog.close()
        event.accept()
