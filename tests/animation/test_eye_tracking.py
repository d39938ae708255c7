"""Tests for the eye tracking engine."""

import pytest

from spookyeyes.animation.eye_tracking import EyeTrackingEngine
from spookyeyes.core.config_loader import EyeConfig
from spookyeyes.core.geometry import FaceLandmarks, Point, Rect


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


def _landmarks_with_nose_at(x, y):
    points = [Point(0.0, 0.0)] * 68
    for i in range(27, 36):
        points[i] = Point(x, y)
    return FaceLandmarks(tuple(points))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(clock):
    eng = EyeTrackingEngine(EyeConfig(), clock=clock)
    eng.set_canvas_size(800, 600)
    eng.set_image_size(400, 300)
    return eng


def test_no_eyes_before_image_ready(clock):
    eng = EyeTrackingEngine(clock=clock)
    eng.set_canvas_size(800, 600)
    assert not eng.is_ready
    assert eng.eyes == {}
    eng.advance()
    eng.retarget()
    assert eng.eyes == {}


def test_no_eyes_with_empty_canvas(clock):
    eng = EyeTrackingEngine(clock=clock)
    eng.set_image_size(400, 300)
    assert not eng.is_ready
    assert eng.eyes == {}
    assert eng.eye_sockets() == {}


def test_two_eyes_after_image_ready(engine):
    assert set(engine.eyes) == {"left", "right"}
    left = engine.eyes["left"]
    assert (left.x, left.y, left.radius) == (70.0, 30.0, 60.0)


def test_report_face_uses_nose_centroid(engine, clock):
    points = [Point(0.0, 0.0)] * 68
    points[27] = Point(100.0, 200.0)
    points[28] = Point(300.0, 400.0)
    landmarks = FaceLandmarks(tuple(points), nose_indices=(27, 28))
    nose = engine.report_face(Rect(0, 0, 10, 10), landmarks, {"happy": 0.9})
    assert nose == Point(200.0, 300.0)
    assert engine.tracked_point == Point(200.0, 300.0)
    assert engine.tracking.last_observed == clock.now


def test_retarget_applies_tracking(engine):
    engine.report_face(None, _landmarks_with_nose_at(0.0, 0.0))
    engine.retarget()
    target = engine.targets["left"]
    assert target.x == pytest.approx(170.0)
    assert target.y == pytest.approx(-70.0)


def test_advance_steps_toward_target(engine):
    engine.report_face(None, _landmarks_with_nose_at(0.0, 300.0))
    engine.retarget()
    start_x = engine.eyes["left"].x
    engine.advance()
    assert engine.eyes["left"].x == pytest.approx(start_x + 1.0)


def test_resize_snaps_to_rest_and_discards_motion(engine):
    engine.report_face(None, _landmarks_with_nose_at(0.0, 0.0))
    engine.retarget()
    for _ in range(20):
        engine.advance()
    engine.set_canvas_size(1600, 1200)
    left = engine.eyes["left"]
    # scale 4: socket center (800 - 660, 600 - 540)
    assert (left.x, left.y, left.radius) == (140.0, 60.0, 120.0)
    assert engine.targets["left"].x == 140.0


def test_image_ready_snaps_to_rest(engine):
    engine.report_face(None, _landmarks_with_nose_at(0.0, 0.0))
    engine.retarget()
    engine.advance()
    engine.set_image_size(400, 300)
    assert (engine.eyes["left"].x, engine.eyes["left"].y) == (70.0, 30.0)


def test_pupil_color_calm_before_observation(engine):
    assert engine.pupil_color() == engine.config.calm_color


def test_pupil_color_alert_then_calm(engine, clock):
    engine.report_face(None, _landmarks_with_nose_at(10.0, 10.0))
    assert engine.pupil_color() == engine.config.alert_color
    clock.now += engine.config.alert_window + 0.001
    assert engine.pupil_color() == engine.config.calm_color


def test_eye_sockets(engine):
    sockets = engine.eye_sockets()
    center, radius = sockets["left"]
    assert center == Point(70.0, 30.0)
    assert radius == 160.0
