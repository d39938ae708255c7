"""Tests for the camera preview widget (offscreen Qt)."""

import numpy as np

from spookyeyes.core.geometry import FaceLandmarks, Point, Rect
from spookyeyes.tracking.face_detector import FaceDetection


def _view(qapp):
    from spookyeyes.ui.video_view import VideoView
    view = VideoView()
    view.resize(320, 240)
    return view


def _detection(x, y, w, h):
    return FaceDetection(bounds=Rect(x, y, w, h),
                         landmarks=FaceLandmarks((Point(x + w / 2, y + h / 2),)))


def test_frame_to_qimage_swaps_channels(qapp):
    from spookyeyes.ui.video_view import frame_to_qimage
    frame = np.zeros((4, 6, 3), dtype=np.uint8)
    frame[:, :] = (255, 0, 0)  # BGR blue
    image = frame_to_qimage(frame)
    assert (image.width(), image.height()) == (6, 4)
    assert image.pixelColor(0, 0).name() == "#0000ff"


def test_detection_box_is_drawn_over_preview(qapp):
    view = _view(qapp)
    view.show_detection(_detection(40.0, 30.0, 100.0, 80.0))

    out = view.grab().toImage()

    assert out.pixelColor(40, 70).name() == "#00ff00"
    assert out.pixelColor(90, 30).name() == "#00ff00"
    assert out.pixelColor(90, 70).name() != "#00ff00"


def test_new_frame_clears_detections(qapp):
    view = _view(qapp)
    view.show_detection(_detection(40.0, 30.0, 100.0, 80.0))
    assert len(view.detections) == 1

    view.show_frame(np.zeros((240, 320, 3), dtype=np.uint8))

    assert view.detections == []
    assert view.grab().toImage().pixelColor(40, 70).name() == "#000000"
