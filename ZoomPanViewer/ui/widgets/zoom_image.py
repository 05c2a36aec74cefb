"""Image element drawn at the viewer's render transform."""

from typing import Optional, Tuple
from PySide6.QtWidgets import QWidget
from PySide6.QtGui import QImage, QPixmap, QPainter
from PySide6.QtCore import Qt, QRect, Signal


class ZoomImageWidget(QWidget):
    """Child widget of the viewport that displays one image.

    The widget is positioned at (translate_x, translate_y) inside its parent
    and sized to the image's intrinsic size times the scale, so the parent
    viewport clips whatever lies outside its bounds. Mouse events pass
    through to the viewport underneath.

    Signals:
        loaded: Emitted each time a non-empty image has been set
    """

    loaded = Signal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setAttribute(Qt.WA_TransparentForMouseEvents, True)
        self._pixmap: Optional[QPixmap] = None
        self._scale = 1.0
        self._translate_x = 0.0
        self._translate_y = 0.0

    def set_image(self, qimage: QImage):
        """Replace the displayed image and emit ``loaded``.

        A null image clears the widget instead.
        """
        if qimage is None or qimage.isNull():
            self.clear()
            return
        self._pixmap = QPixmap.fromImage(qimage)
        self._update_geometry()
        self.loaded.emit()

    def clear(self):
        """Drop the current image; the intrinsic size becomes 0x0."""
        self._pixmap = None
        self._update_geometry()

    def is_loaded(self) -> bool:
        return self._pixmap is not None

    def natural_size(self) -> Tuple[int, int]:
        """Intrinsic (width, height) of the image, (0, 0) before load."""
        if self._pixmap is None:
            return (0, 0)
        return (self._pixmap.width(), self._pixmap.height())

    def set_render_transform(self, scale: float, translate_x: float, translate_y: float):
        """Place the image at the given scale and translation."""
        self._scale = scale
        self._translate_x = translate_x
        self._translate_y = translate_y
        self._update_geometry()

    def render_transform(self) -> Tuple[float, float, float]:
        return (self._scale, self._translate_x, self._translate_y)

    def _update_geometry(self):
        w, h = self.natural_size()
        if not w or not h:
            self.setGeometry(QRect(0, 0, 0, 0))
            self.update()
            return
        self.setGeometry(
            QRect(
                round(self._translate_x),
                round(self._translate_y),
                max(1, round(w * self._scale)),
                max(1, round(h * self._scale)),
            )
        )
        self.update()

    def paintEvent(self, event):
        if self._pixmap is None:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.SmoothPixmapTransform)
        painter.drawPixmap(self.rect(), self._pixmap)
        painter.end()
