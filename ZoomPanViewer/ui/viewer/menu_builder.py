"""Menu and keyboard shortcut configuration for ViewerWindow.

This module handles the creation of all menus and window-level
keyboard shortcuts for the viewer window.
"""

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtCore import Qt


def _window_action(viewer, text, shortcuts, slot):
    action = QAction(text, viewer)
    action.setShortcuts([QKeySequence(s) for s in shortcuts])
    action.setShortcutContext(Qt.WindowShortcut)
    action.triggered.connect(slot)
    viewer.addAction(action)
    return action


def create_menus(viewer):
    """Create all menus and keyboard shortcuts for the viewer.

    Args:
        viewer: ViewerWindow instance
    """
    menubar = viewer.menuBar()
    controller = viewer.controller

    # File menu
    file_menu = menubar.addMenu("&File")
    viewer.open_action = _window_action(viewer, "Open image...", ["Ctrl+O"], lambda: viewer.open_files())
    viewer.close_image_action = _window_action(viewer, "Close image", ["Ctrl+W"], lambda: viewer.close_image())
    file_menu.addAction(viewer.open_action)
    file_menu.addAction(viewer.close_image_action)
    file_menu.addSeparator()
    file_menu.addAction(QAction("Quit", viewer, shortcut="Ctrl+Q", triggered=viewer.close))

    # View menu: same operations as the on-screen buttons
    viewer.zoom_in_action = _window_action(viewer, "Zoom in", ["+", "="], lambda: controller.zoom_in())
    viewer.zoom_out_action = _window_action(viewer, "Zoom out", ["-"], lambda: controller.zoom_out())
    viewer.reset_action = _window_action(viewer, "Reset view", ["0", "f"], lambda: controller.reset())

    view_menu = menubar.addMenu("&View")
    view_menu.addAction(viewer.zoom_in_action)
    view_menu.addAction(viewer.zoom_out_action)
    view_menu.addSeparator()
    view_menu.addAction(viewer.reset_action)

    # Help menu
    help_menu = menubar.addMenu("&Help")
    help_menu.addAction(QAction("Controls", viewer, shortcut="F1", triggered=viewer.help_dialog.show))
