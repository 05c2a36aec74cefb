"""Clipping container the image is viewed through."""

from PySide6.QtWidgets import QFrame, QSizePolicy
from PySide6.QtCore import Qt


class ViewportFrame(QFrame):
    """Fixed clipping viewport that accepts mouse and touch input.

    Children (the image element) are clipped to the frame's rectangle.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("zoomViewport")
        self.setAttribute(Qt.WA_AcceptTouchEvents, True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMinimumSize(200, 150)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setStyleSheet("#zoomViewport { background-color: #1e1e1e; }")
