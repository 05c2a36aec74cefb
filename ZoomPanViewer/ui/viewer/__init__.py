"""Viewer package with modular components.

This package provides the main ViewerWindow split into logical components:
- window.py: Main ViewerWindow hosting the viewport, image and buttons
- controller.py: Zoom/pan transform controller and input handling
- menu_builder.py: Menu and keyboard shortcut setup
- status_updater.py: Status bar update logic
"""

from .window import ViewerWindow
from .controller import ViewerTransformController

__all__ = ["ViewerWindow", "ViewerTransformController"]
