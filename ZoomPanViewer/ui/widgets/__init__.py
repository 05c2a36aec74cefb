"""Viewer widgets: the clipping viewport and the image element."""

from .viewport import ViewportFrame
from .zoom_image import ZoomImageWidget

__all__ = ["ViewportFrame", "ZoomImageWidget"]
