"""Periodic camera → face detection → event bus pump."""

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer

from spookyeyes.constants import DETECTION_INTERVAL_MS
from spookyeyes.core.events import EventBus, EventType
from spookyeyes.tracking.camera import Camera
from spookyeyes.tracking.face_detector import FaceDetector

logger = logging.getLogger(__name__)


class DetectionWorker(QObject):
    """Polls the camera on a timer and publishes frames and detections.

    Each detection is scaled from frame pixels to the current display size
    before ``FACE_DETECTED`` is published, so subscribers work in the same
    space as the widget showing the video.

    Parameters
    ----------
    camera : Camera
        An opened camera.
    detector : FaceDetector, optional
        Without a detector only ``FRAME_CAPTURED`` is published.
    event_bus : EventBus
        Destination for ``FRAME_CAPTURED`` and ``FACE_DETECTED``.
    display_size : callable
        Returns the (width, height) detections should be scaled into.
    """

    def __init__(self, camera: Camera, detector: Optional[FaceDetector],
                 event_bus: EventBus, display_size: Callable[[], tuple[int, int]],
                 interval_ms: int = DETECTION_INTERVAL_MS,
                 parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._camera = camera
        self._detector = detector
        self._event_bus = event_bus
        self._display_size = display_size
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.poll)

    def start(self) -> None:
        self._timer.start()
        logger.info("Detection running every %d ms", self._timer.interval())

    def stop(self) -> None:
        self._timer.stop()

    def poll(self) -> int:
        """Process one camera frame. Returns the number of faces published."""
        ok, frame = self._camera.read()
        if not ok:
            logger.debug("No camera frame")
            return 0
        self._event_bus.publish(EventType.FRAME_CAPTURED, frame=frame)
        if self._detector is None:
            return 0

        frame_h, frame_w = frame.shape[:2]
        disp_w, disp_h = self._display_size()
        sx = disp_w / frame_w
        sy = disp_h / frame_h

        detections = self._detector.detect(frame)
        for detection in detections:
            self._event_bus.publish(EventType.FACE_DETECTED,
                                    detection=detection.scaled(sx, sy))
        return len(detections)
