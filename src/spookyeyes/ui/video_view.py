"""Live camera preview; the widget the eye canvas sizes itself against."""

from typing import Optional

import cv2
import numpy as np
from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPen, QPixmap
from PySide6.QtWidgets import QLabel, QSizePolicy, QWidget

from spookyeyes.tracking.face_detector import FaceDetection

DETECTION_BOX_COLOR = QColor(0, 255, 0)


def frame_to_qimage(frame: np.ndarray) -> QImage:
    """Convert a BGR frame to an RGB QImage that owns its pixels."""
    rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
    h, w, ch = rgb.shape
    return QImage(rgb.data, w, h, ch * w, QImage.Format.Format_RGB888).copy()


class VideoView(QLabel):
    """Shows the most recent camera frame scaled to the widget.

    Face boxes from the current frame are drawn on top; a new frame
    clears them.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("videoView")
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setMinimumSize(320, 240)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setStyleSheet("background-color: #0a0b0e;")
        self._frame: Optional[QImage] = None
        self.detections: list[FaceDetection] = []

    def show_frame(self, frame: np.ndarray, **kw) -> None:
        self._frame = frame_to_qimage(frame)
        self.detections = []
        self._refresh()

    def show_detection(self, detection: FaceDetection, **kw) -> None:
        """Add a face box, in display coordinates, to the current frame."""
        self.detections.append(detection)
        self.update()

    def display_size(self) -> tuple[int, int]:
        size = self.contentsRect().size()
        return size.width(), size.height()

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._refresh()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        if not self.detections:
            return
        origin = self.contentsRect().topLeft()
        painter = QPainter(self)
        try:
            painter.setPen(QPen(DETECTION_BOX_COLOR, 2))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            for detection in self.detections:
                b = detection.bounds
                painter.drawRect(QRectF(origin.x() + b.x, origin.y() + b.y, b.width, b.height))
        finally:
            painter.end()

    def _refresh(self) -> None:
        if self._frame is None:
            return
        pix = QPixmap.fromImage(self._frame).scaled(
            self.contentsRect().size(),
            Qt.AspectRatioMode.IgnoreAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self.setPixmap(pix)
