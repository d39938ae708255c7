"""Tests for the detection pump, with fake camera and detector."""

import numpy as np

from spookyeyes.core.events import EventBus, EventType
from spookyeyes.core.geometry import Point
from spookyeyes.tracking.detection_worker import DetectionWorker
from spookyeyes.tracking.face_detector import detection_from_landmarks


class FakeLandmark:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class FakeCamera:
    def __init__(self, frames):
        self._frames = list(frames)

    def read(self):
        if not self._frames:
            return False, None
        return True, self._frames.pop(0)


class FakeDetector:
    def detect(self, frame):
        h, w = frame.shape[:2]
        return [detection_from_landmarks([FakeLandmark(0.5, 0.25)], w, h,
                                         nose_indices=(0,))]


def _bus_log(bus):
    log = []
    bus.subscribe(EventType.FRAME_CAPTURED, lambda **kw: log.append(("frame", kw["frame"])))
    bus.subscribe(EventType.FACE_DETECTED, lambda **kw: log.append(("face", kw["detection"])))
    return log


def test_poll_publishes_frame_and_scaled_detection(qapp):
    frame = np.zeros((100, 200, 3), dtype=np.uint8)
    bus = EventBus()
    log = _bus_log(bus)
    worker = DetectionWorker(FakeCamera([frame]), FakeDetector(), bus, lambda: (400, 300))

    assert worker.poll() == 1
    assert log[0][0] == "frame"
    kind, detection = log[1]
    assert kind == "face"
    # (100, 25) in frame pixels → x2, x3 into display pixels
    assert detection.landmarks.points[0] == Point(200.0, 75.0)


def test_poll_without_frame_publishes_nothing(qapp):
    bus = EventBus()
    log = _bus_log(bus)
    worker = DetectionWorker(FakeCamera([]), FakeDetector(), bus, lambda: (400, 300))
    assert worker.poll() == 0
    assert log == []


def test_poll_without_detector_only_publishes_frame(qapp):
    frame = np.zeros((10, 10, 3), dtype=np.uint8)
    bus = EventBus()
    log = _bus_log(bus)
    worker = DetectionWorker(FakeCamera([frame]), None, bus, lambda: (10, 10))
    assert worker.poll() == 0
    assert [kind for kind, _ in log] == ["frame"]
