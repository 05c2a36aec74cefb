"""UI components package."""

from .viewer import ViewerWindow, ViewerTransformController
from .widgets import ViewportFrame, ZoomImageWidget
from .dialogs import HelpDialog

__all__ = [
    "ViewerWindow",
    "ViewerTransformController",
    "ViewportFrame",
    "ZoomImageWidget",
    "HelpDialog",
]
