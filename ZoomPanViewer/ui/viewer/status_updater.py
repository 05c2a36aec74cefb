"""Status bar update logic for ViewerWindow.

Shows the current zoom level, the image's intrinsic size and the file name
in the window title.
"""

from pathlib import Path


class StatusUpdater:
    """Formats viewer state into the status bar widgets and title.

    Args:
        viewer: ViewerWindow instance
    """

    def __init__(self, viewer):
        self.viewer = viewer

    def update_scale_status(self, scale: float):
        if not self.viewer.image_widget.is_loaded():
            self.viewer.status_scale.setText("")
            return
        self.viewer.status_scale.setText(f"Zoom: {scale * 100:.0f}%")

    def update_image_status(self):
        """Refresh the image size label and the title bar."""
        w, h = self.viewer.image_widget.natural_size()
        path = self.viewer.image_path
        if path is None or not w or not h:
            self.viewer.setWindowTitle("ZoomPanViewer")
            self.viewer.status_image.setText("No image")
            return
        self.viewer.setWindowTitle(f"{Path(path).name} - ZoomPanViewer")
        self.viewer.status_image.setText(f"{w} x {h} px")
