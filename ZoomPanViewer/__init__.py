"""ZoomPanViewer - A zoom-and-pan viewer for a single large image.

This package provides a Qt-based viewer that frames one image inside a
fixed clipping viewport and lets the user explore it with:

Input:
    - Mouse wheel zoom anchored at the cursor
    - Mouse drag pan, tracked even outside the viewport while held
    - One-finger touch pan and two-finger pinch zoom
    - Zoom in / zoom out / reset buttons and keyboard shortcuts

Framing:
    - Contain-fit times a configurable start zoom, centered with pixel offsets
    - Scale always kept inside [min_scale, max_scale]
    - Pan clamped so the image never leaves the viewport; images smaller
      than the viewport stay centered
    - Re-fit on viewport resize

Package Structure:
    - core/: UI-independent code (config, transform math, gesture state
      machine, image I/O)
    - ui/: UI components (window, transform controller, widgets, dialogs)

Quick Start:
    from ZoomPanViewer import main
    main(["schematic.png"])

Dependencies:
    - PySide6: Qt for Python
    - numpy: Array operations
    - opencv-python: Image decoding
"""

from .app import main
from .core import ViewerConfig, ConfigError, load_config, ViewTransform
from .ui import ViewerWindow, ViewerTransformController, ViewportFrame, ZoomImageWidget

__version__ = "0.1.0"
__all__ = [
    "main",
    "ViewerConfig",
    "ConfigError",
    "load_config",
    "ViewTransform",
    "ViewerWindow",
    "ViewerTransformController",
    "ViewportFrame",
    "ZoomImageWidget",
]
