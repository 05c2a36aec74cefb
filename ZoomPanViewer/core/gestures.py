"""Drag/pinch gesture state machine.

A viewer is in exactly one of three modes:

- IDLE: no pointer or touch interaction in progress
- DRAGGING: one mouse button or one touch contact is panning the image
- PINCHING: two touch contacts are zooming the image

Transitions are pure functions taking the current :class:`GestureSession`
and returning the next one, so they can be tested without a UI event loop.
Touch points are given in client (screen) coordinates.

    IDLE ──1 contact / press──▶ DRAGGING ──2 contacts──▶ PINCHING
      ▲                            │  ▲                      │
      └──────0 contacts / release──┘  └──────1 contact───────┘
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

Point = Tuple[float, float]


class GestureMode(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    PINCHING = "pinching"


@dataclass(frozen=True)
class GestureSession:
    """State of the current drag or pinch interaction.

    Attributes:
        mode: Current mode
        last_x, last_y: Last recorded client position (DRAGGING)
        start_distance: Inter-contact distance when the pinch began (PINCHING)
        start_scale: Viewer scale when the pinch began (PINCHING)
        center: Pinch anchor in viewport-local coordinates, fixed for the
            whole gesture (PINCHING)
    """

    mode: GestureMode = GestureMode.IDLE
    last_x: float = 0.0
    last_y: float = 0.0
    start_distance: float = 0.0
    start_scale: float = 1.0
    center: Point = (0.0, 0.0)

    @property
    def is_dragging(self) -> bool:
        return self.mode is GestureMode.DRAGGING

    @property
    def is_pinching(self) -> bool:
        return self.mode is GestureMode.PINCHING


IDLE = GestureSession()


def distance(p0: Point, p1: Point) -> float:
    return math.hypot(p1[0] - p0[0], p1[1] - p0[1])


def midpoint(p0: Point, p1: Point) -> Point:
    return ((p0[0] + p1[0]) / 2, (p0[1] + p1[1]) / 2)


def start_drag(point: Point) -> GestureSession:
    """Begin a drag session at a client position."""
    return GestureSession(mode=GestureMode.DRAGGING, last_x=point[0], last_y=point[1])


def drag_to(session: GestureSession, point: Point) -> Tuple[GestureSession, float, float]:
    """Advance a drag session to a new client position.

    Returns:
        (next_session, dx, dy). The delta is (0, 0) and the session is
        returned unchanged when no drag is active.
    """
    if not session.is_dragging:
        return session, 0.0, 0.0
    dx = point[0] - session.last_x
    dy = point[1] - session.last_y
    return start_drag(point), dx, dy


def end_drag(session: GestureSession) -> GestureSession:
    """End a mouse drag; other modes are left as they are."""
    return IDLE if session.is_dragging else session


def start_pinch(p0: Point, p1: Point, scale: float, viewport_origin: Point) -> GestureSession:
    """Begin a pinch session.

    Args:
        p0, p1: The two contacts in client coordinates
        scale: Viewer scale at the start of the pinch
        viewport_origin: Client position of the viewport's top-left corner
    """
    cx, cy = midpoint(p0, p1)
    return GestureSession(
        mode=GestureMode.PINCHING,
        start_distance=distance(p0, p1),
        start_scale=scale,
        center=(cx - viewport_origin[0], cy - viewport_origin[1]),
    )


def pinch_scale(session: GestureSession, p0: Point, p1: Point) -> float:
    """Requested scale for the current contact positions of a pinch.

    A degenerate pinch that started with both contacts on the same spot
    yields ``start_scale`` (no scale change).
    """
    if session.start_distance <= 0:
        return session.start_scale
    return session.start_scale * (distance(p0, p1) / session.start_distance)


def touch_start(
    session: GestureSession, points: Sequence[Point], scale: float, viewport_origin: Point
) -> GestureSession:
    """Transition for a new contact touching down.

    Args:
        session: Current session
        points: All active contacts after the touch-down
        scale: Current viewer scale
        viewport_origin: Client position of the viewport's top-left corner
    """
    if len(points) == 1:
        return start_drag(points[0])
    if len(points) == 2:
        return start_pinch(points[0], points[1], scale, viewport_origin)
    return session


def touch_end(session: GestureSession, points: Sequence[Point]) -> GestureSession:
    """Transition for contacts lifting.

    Args:
        session: Current session
        points: Contacts still active after the lift
    """
    if not points:
        return IDLE
    if len(points) == 1:
        # Reseed at the remaining contact so the next move does not jump
        return start_drag(points[0])
    return session


def touch_move_kind(session: GestureSession, points: Sequence[Point]) -> Optional[GestureMode]:
    """Which action a touch move performs: PINCHING, DRAGGING or None."""
    if session.is_pinching and len(points) == 2:
        return GestureMode.PINCHING
    if session.is_dragging and len(points) == 1:
        return GestureMode.DRAGGING
    return None
