"""Tests for the drag/pinch gesture state machine."""

import math

import pytest

from ZoomPanViewer.core import gestures
from ZoomPanViewer.core.gestures import GestureMode, GestureSession

ORIGIN = (100.0, 50.0)


def test_idle_by_default():
    assert gestures.IDLE.mode is GestureMode.IDLE
    assert not gestures.IDLE.is_dragging
    assert not gestures.IDLE.is_pinching


def test_drag_reports_delta_since_last_position():
    s = gestures.start_drag((10.0, 20.0))
    s, dx, dy = gestures.drag_to(s, (15.0, 12.0))
    assert (dx, dy) == (5.0, -8.0)
    s, dx, dy = gestures.drag_to(s, (15.0, 12.0))
    assert (dx, dy) == (0.0, 0.0)
    assert (s.last_x, s.last_y) == (15.0, 12.0)


def test_drag_to_without_session_is_noop():
    s, dx, dy = gestures.drag_to(gestures.IDLE, (50.0, 50.0))
    assert s is gestures.IDLE
    assert (dx, dy) == (0.0, 0.0)


def test_end_drag_only_ends_drags():
    assert gestures.end_drag(gestures.start_drag((1.0, 1.0))) is gestures.IDLE
    pinch = gestures.start_pinch((0.0, 0.0), (10.0, 0.0), 1.0, ORIGIN)
    assert gestures.end_drag(pinch) == pinch


def test_one_contact_starts_drag_and_cancels_pinch():
    pinch = gestures.start_pinch((0.0, 0.0), (10.0, 0.0), 1.0, ORIGIN)
    s = gestures.touch_start(pinch, [(30.0, 40.0)], 1.0, ORIGIN)
    assert s.is_dragging
    assert not s.is_pinching
    assert (s.last_x, s.last_y) == (30.0, 40.0)


def test_second_contact_starts_pinch_and_cancels_drag():
    drag = gestures.start_drag((150.0, 150.0))
    s = gestures.touch_start(drag, [(150.0, 150.0), (250.0, 150.0)], 0.8, ORIGIN)
    assert s.is_pinching
    assert not s.is_dragging
    assert s.start_distance == pytest.approx(100.0)
    assert s.start_scale == 0.8
    # Midpoint (200, 150) in viewport coordinates
    assert s.center == pytest.approx((100.0, 100.0))


def test_three_contacts_leave_session_unchanged():
    pinch = gestures.start_pinch((0.0, 0.0), (10.0, 0.0), 1.0, ORIGIN)
    assert gestures.touch_start(pinch, [(0.0, 0.0), (10.0, 0.0), (5.0, 5.0)], 1.0, ORIGIN) == pinch


def test_pinch_scale_follows_distance_ratio():
    s = gestures.start_pinch((0.0, 0.0), (100.0, 0.0), 0.5, ORIGIN)
    assert gestures.pinch_scale(s, (0.0, 0.0), (200.0, 0.0)) == pytest.approx(1.0)
    assert gestures.pinch_scale(s, (0.0, 0.0), (0.0, 50.0)) == pytest.approx(0.25)


def test_pinch_from_zero_distance_keeps_start_scale():
    s = gestures.start_pinch((40.0, 40.0), (40.0, 40.0), 0.7, ORIGIN)
    assert s.start_distance == 0.0
    scale = gestures.pinch_scale(s, (0.0, 0.0), (300.0, 400.0))
    assert scale == 0.7
    assert math.isfinite(scale)


def test_pinch_anchor_is_fixed_for_the_gesture():
    s = gestures.start_pinch((100.0, 100.0), (200.0, 100.0), 1.0, ORIGIN)
    center = s.center
    # Moving the contacts does not re-sample the anchor
    gestures.pinch_scale(s, (0.0, 0.0), (500.0, 500.0))
    assert s.center == center


def test_touch_end_to_zero_contacts_goes_idle():
    for session in (
        gestures.start_drag((1.0, 1.0)),
        gestures.start_pinch((0.0, 0.0), (10.0, 0.0), 1.0, ORIGIN),
        gestures.IDLE,
    ):
        assert gestures.touch_end(session, []) is gestures.IDLE


def test_lifting_one_pinch_finger_reseeds_drag():
    pinch = gestures.start_pinch((0.0, 0.0), (100.0, 0.0), 1.0, ORIGIN)
    s = gestures.touch_end(pinch, [(120.0, 30.0)])
    assert s.is_dragging
    assert (s.last_x, s.last_y) == (120.0, 30.0)
    # The next move is relative to the remaining finger, not an old position
    _, dx, dy = gestures.drag_to(s, (125.0, 30.0))
    assert (dx, dy) == (5.0, 0.0)


@pytest.mark.parametrize(
    "session,points,expected",
    [
        (gestures.start_pinch((0.0, 0.0), (1.0, 0.0), 1.0, ORIGIN), [(0.0, 0.0), (2.0, 0.0)], GestureMode.PINCHING),
        (gestures.start_pinch((0.0, 0.0), (1.0, 0.0), 1.0, ORIGIN), [(0.0, 0.0)], None),
        (gestures.start_drag((0.0, 0.0)), [(1.0, 1.0)], GestureMode.DRAGGING),
        (gestures.start_drag((0.0, 0.0)), [(1.0, 1.0), (2.0, 2.0)], None),
        (GestureSession(), [(1.0, 1.0)], None),
    ],
)
def test_touch_move_kind(session, points, expected):
    assert gestures.touch_move_kind(session, points) is expected
