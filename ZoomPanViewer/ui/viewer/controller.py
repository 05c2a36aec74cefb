"""Zoom and pan control for a single image inside a viewport.

This module wires the UI-independent transform math and gesture state
machine to Qt input:
- Mouse wheel zoom anchored at the cursor
- Mouse drag pan, tracked application-wide while the button is held
- One-finger touch pan and two-finger pinch zoom
- Zoom in / zoom out / reset buttons
- Re-fit on viewport resize

Every zoom goes through :meth:`ViewerTransformController.zoom_at_point` and
every mutation is followed by pan clamping before the transform is applied
to the image element.
"""

import logging
from typing import List, Optional, Tuple

from PySide6.QtCore import QObject, QEvent, QPoint, Qt, Signal
from PySide6.QtGui import QEventPoint, QInputDevice
from PySide6.QtWidgets import QAbstractButton, QApplication, QWidget

from ...core import gestures
from ...core import transform as transform_math
from ...core.config import ViewerConfig
from ...core.transform import ViewTransform

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

_TOUCH_EVENTS = (QEvent.TouchBegin, QEvent.TouchUpdate, QEvent.TouchEnd, QEvent.TouchCancel)
_PRESS_EVENTS = (QEvent.MouseButtonPress, QEvent.MouseButtonDblClick)


class _GlobalMouseTracker(QObject):
    """Application-wide filter forwarding mouse moves/releases during a drag."""

    def __init__(self, controller: "ViewerTransformController"):
        super().__init__(controller)
        self.controller = controller

    def eventFilter(self, obj, event):
        etype = event.type()
        if etype == QEvent.MouseMove:
            pos = event.globalPosition()
            self.controller.mouse_drag_to(pos.x(), pos.y())
        elif etype == QEvent.MouseButtonRelease and event.button() == Qt.LeftButton:
            self.controller.end_mouse_drag()
        return False


class ViewerTransformController(QObject):
    """Owns the image's scale/translate and reconciles it with user input.

    The viewport and image handles are injected. When either is missing the
    controller stays inactive: no filters are installed, no buttons are
    wired and every operation returns without effect.

    Args:
        viewport: Clipping container widget
        image: Image element (``ZoomImageWidget`` compatible: ``natural_size()``,
            ``is_loaded()``, ``loaded`` signal, ``set_render_transform()``)
        zoom_in_button: Optional button zooming in at the viewport center
        zoom_out_button: Optional button zooming out at the viewport center
        reset_button: Optional button re-running the initial fit
        config: Zoom range and framing; defaults to the module constants

    Signals:
        transform_changed(scale, translate_x, translate_y): Emitted after
            every applied transform
    """

    transform_changed = Signal(float, float, float)

    def __init__(
        self,
        viewport: Optional[QWidget] = None,
        image: Optional[QWidget] = None,
        zoom_in_button: Optional[QAbstractButton] = None,
        zoom_out_button: Optional[QAbstractButton] = None,
        reset_button: Optional[QAbstractButton] = None,
        config: Optional[ViewerConfig] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent if parent is not None else viewport)
        self.config = (config or ViewerConfig()).validate()
        self.viewport = viewport
        self.image = image
        self.transform = ViewTransform()
        self.session = gestures.IDLE
        self._mouse_tracker = None

        self.enabled = viewport is not None and image is not None
        if not self.enabled:
            logger.debug("Viewport or image element missing; zoom/pan controller is inactive")
            return

        viewport.setAttribute(Qt.WA_AcceptTouchEvents, True)
        viewport.installEventFilter(self)
        viewport.setCursor(Qt.OpenHandCursor)

        if zoom_in_button is not None:
            zoom_in_button.clicked.connect(lambda checked=False: self.zoom_in())
        if zoom_out_button is not None:
            zoom_out_button.clicked.connect(lambda checked=False: self.zoom_out())
        if reset_button is not None:
            reset_button.clicked.connect(lambda checked=False: self.reset())

        # Intrinsic size is only known once the image has loaded
        if image.is_loaded():
            self.fit_to_viewport()
        else:
            logger.debug("Image not loaded yet; deferring initial fit")
            image.loaded.connect(self._on_first_load)

    def _on_first_load(self):
        self.image.loaded.disconnect(self._on_first_load)
        self.fit_to_viewport()

    # ------------------------
    # Geometry
    # ------------------------

    def viewport_origin(self) -> Point:
        """Global position of the viewport's top-left corner, queried per call."""
        top_left = self.viewport.mapToGlobal(QPoint(0, 0))
        return (float(top_left.x()), float(top_left.y()))

    def viewport_size(self) -> Tuple[float, float]:
        return (float(self.viewport.width()), float(self.viewport.height()))

    def viewport_center(self) -> Point:
        w, h = self.viewport_size()
        return (w / 2, h / 2)

    def client_to_viewport(self, client_x: float, client_y: float) -> Point:
        """Convert a global (screen) position to viewport-local coordinates."""
        ox, oy = self.viewport_origin()
        return (client_x - ox, client_y - oy)

    # ------------------------
    # Transform primitives
    # ------------------------

    def zoom_at_point(self, requested_scale: float, point: Point):
        """Zoom to ``requested_scale`` keeping viewport point ``point`` fixed."""
        if not self.enabled:
            return
        self._commit(
            transform_math.zoom_at_point(
                self.transform, requested_scale, point, self.config.min_scale, self.config.max_scale
            )
        )

    def pan_by(self, dx: float, dy: float):
        if not self.enabled:
            return
        self._commit(self.transform.translated(dx, dy))

    def clamp_pan(self):
        """Re-clamp the current translation against the current sizes."""
        if not self.enabled:
            return
        self._commit(self.transform)

    def fit_to_viewport(self):
        """Contain-fit times the start zoom, centered with the start offsets.

        Does nothing until both the image and the viewport have a size.
        """
        if not self.enabled:
            return
        fitted = transform_math.fit_to_viewport(self.viewport_size(), self.image.natural_size(), self.config)
        if fitted is None:
            logger.debug("Fit skipped: image or viewport has no size yet")
            return
        self.transform = fitted
        self._apply_transform()

    def _commit(self, transform: ViewTransform):
        self.transform = transform_math.clamp_pan(transform, self.viewport_size(), self.image.natural_size())
        self._apply_transform()

    def _apply_transform(self):
        t = self.transform
        self.image.set_render_transform(t.scale, t.translate_x, t.translate_y)
        self.transform_changed.emit(t.scale, t.translate_x, t.translate_y)

    # ------------------------
    # Buttons
    # ------------------------

    def zoom_in(self):
        if not self.enabled:
            return
        self.zoom_at_point(self.transform.scale * self.config.button_zoom_step, self.viewport_center())

    def zoom_out(self):
        if not self.enabled:
            return
        self.zoom_at_point(self.transform.scale / self.config.button_zoom_step, self.viewport_center())

    def reset(self):
        self.fit_to_viewport()

    def clear(self):
        """Drop the framing of a removed image back to the identity transform."""
        if not self.enabled:
            return
        if self._mouse_tracker is not None:
            self.end_mouse_drag()
        self.session = gestures.IDLE
        self.transform = ViewTransform()
        self._apply_transform()

    # ------------------------
    # Wheel and mouse
    # ------------------------

    def handle_wheel(self, client_x: float, client_y: float, delta: float):
        """Zoom one wheel step at the cursor; positive delta zooms in."""
        if not self.enabled:
            return
        point = self.client_to_viewport(client_x, client_y)
        factor = transform_math.wheel_zoom_factor(delta, self.config.wheel_zoom_step)
        self.zoom_at_point(self.transform.scale * factor, point)

    def begin_mouse_drag(self, client_x: float, client_y: float):
        if not self.enabled:
            return
        self.session = gestures.start_drag((client_x, client_y))
        self.viewport.setCursor(Qt.ClosedHandCursor)
        if self._mouse_tracker is None:
            self._mouse_tracker = _GlobalMouseTracker(self)
            QApplication.instance().installEventFilter(self._mouse_tracker)

    def mouse_drag_to(self, client_x: float, client_y: float):
        if self._mouse_tracker is None or not self.session.is_dragging:
            return
        self.session, dx, dy = gestures.drag_to(self.session, (client_x, client_y))
        self.pan_by(dx, dy)

    def end_mouse_drag(self):
        if self._mouse_tracker is None:
            return
        self.session = gestures.end_drag(self.session)
        self.viewport.setCursor(Qt.OpenHandCursor)
        QApplication.instance().removeEventFilter(self._mouse_tracker)
        self._mouse_tracker.deleteLater()
        self._mouse_tracker = None

    @property
    def is_mouse_dragging(self) -> bool:
        return self._mouse_tracker is not None and self.session.is_dragging

    # ------------------------
    # Touch
    # ------------------------

    def touch_started(self, points: List[Point]):
        """A contact touched down; ``points`` are all active contacts."""
        if not self.enabled:
            return
        self.session = gestures.touch_start(self.session, points, self.transform.scale, self.viewport_origin())

    def touch_moved(self, points: List[Point]):
        if not self.enabled:
            return
        kind = gestures.touch_move_kind(self.session, points)
        if kind is gestures.GestureMode.PINCHING:
            # Anchor stays where the pinch began to avoid drift
            self.zoom_at_point(gestures.pinch_scale(self.session, points[0], points[1]), self.session.center)
        elif kind is gestures.GestureMode.DRAGGING:
            self.session, dx, dy = gestures.drag_to(self.session, points[0])
            self.pan_by(dx, dy)

    def touch_ended(self, points: List[Point]):
        """Contacts lifted; ``points`` are the contacts still down."""
        if not self.enabled:
            return
        self.session = gestures.touch_end(self.session, points)

    def _dispatch_touch(self, event) -> bool:
        """Route a touchscreen event to the gesture handlers.

        Returns False for touchpad contacts, whose positions are not screen
        positions; Qt then synthesizes mouse and wheel input for them.
        """
        device = event.device()
        if device is None or device.type() != QInputDevice.DeviceType.TouchScreen:
            return False
        etype = event.type()
        event_points = event.points()
        active = [
            (p.globalPosition().x(), p.globalPosition().y())
            for p in event_points
            if p.state() != QEventPoint.State.Released
        ]
        if etype == QEvent.TouchCancel:
            self.touch_ended([])
        elif etype == QEvent.TouchEnd:
            self.touch_ended(active)
        elif any(p.state() == QEventPoint.State.Pressed for p in event_points):
            self.touch_started(active)
        elif any(p.state() == QEventPoint.State.Released for p in event_points):
            self.touch_ended(active)
        else:
            self.touch_moved(active)
        return True

    # ------------------------
    # Event routing
    # ------------------------

    def eventFilter(self, obj, event):
        if obj is not self.viewport:
            return super().eventFilter(obj, event)

        etype = event.type()
        if etype == QEvent.Wheel:
            pos = event.globalPosition()
            self.handle_wheel(pos.x(), pos.y(), event.angleDelta().y())
            event.accept()
            return True
        if etype in _PRESS_EVENTS and event.button() == Qt.LeftButton:
            pos = event.globalPosition()
            self.begin_mouse_drag(pos.x(), pos.y())
            return True
        if etype in _TOUCH_EVENTS and self._dispatch_touch(event):
            event.accept()
            return True
        if etype == QEvent.Resize:
            self.fit_to_viewport()
        return super().eventFilter(obj, event)
