"""Help dialog showing mouse, touch and keyboard controls."""

from PySide6.QtWidgets import QDialog, QTextEdit, QVBoxLayout


class HelpDialog(QDialog):
    """Read-only list of the viewer's controls."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Help / Controls")
        self.resize(480, 400)

        text = QTextEdit(self)
        text.setReadOnly(True)

        content = (
            "ZoomPanViewer help\n"
            "================================\n\n"
            "[Mouse]\n"
            "  Wheel            : Zoom in / out at the cursor\n"
            "  Left-drag        : Pan (keeps tracking outside the view)\n\n"
            "[Touch]\n"
            "  One finger       : Pan\n"
            "  Two-finger pinch : Zoom around the pinch center\n\n"
            "[Keyboard]\n"
            "  Ctrl+O           : Open image\n"
            "  Ctrl+W           : Close image\n"
            "  + / -            : Zoom in / out at the view center\n"
            "  0 / f            : Reset view\n"
            "  F1               : This help\n\n"
            "Resizing the window resets the view.\n"
        )
        text.setPlainText(content)

        layout = QVBoxLayout(self)
        layout.addWidget(text)
