"""Tests for landmark → detection conversion (no model required)."""

from types import SimpleNamespace

import pytest

from spookyeyes.core.geometry import Point, Rect, centroid
from spookyeyes.tracking.face_detector import FaceDetector, detection_from_landmarks


def _lm(x, y):
    return SimpleNamespace(x=x, y=y)


def test_detection_from_landmarks_scales_to_pixels():
    det = detection_from_landmarks([_lm(0.25, 0.5), _lm(0.75, 1.0)], 640, 480,
                                   nose_indices=(0, 1))
    assert det.landmarks.points == (Point(160.0, 240.0), Point(480.0, 480.0))
    assert det.bounds == Rect(160.0, 240.0, 320.0, 240.0)
    assert centroid(det.landmarks.get_nose()) == Point(320.0, 360.0)


def test_blendshapes_become_expressions():
    shapes = [SimpleNamespace(category_name="jawOpen", score=0.7)]
    det = detection_from_landmarks([_lm(0.5, 0.5)], 100, 100, blendshapes=shapes,
                                   nose_indices=(0,))
    assert det.expressions == {"jawOpen": 0.7}


def test_scaled_maps_into_display_space():
    det = detection_from_landmarks([_lm(0.5, 0.5), _lm(1.0, 1.0)], 200, 100,
                                   nose_indices=(0,))
    scaled = det.scaled(2.0, 3.0)
    assert scaled.landmarks.points[0] == Point(200.0, 150.0)
    assert scaled.bounds == Rect(200.0, 150.0, 200.0, 150.0)
    assert scaled.landmarks.nose_indices == (0,)


def test_missing_model_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FaceDetector(tmp_path / "face_landmarker.task")
