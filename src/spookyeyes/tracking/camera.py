"""Webcam capture via OpenCV VideoCapture."""

import logging
from typing import Optional

import cv2
import numpy as np

from spookyeyes.constants import CAMERA_HEIGHT, CAMERA_INDEX, CAMERA_WIDTH

logger = logging.getLogger(__name__)


class Camera:
    """Opens a webcam, reads BGR frames and releases it on stop()."""

    def __init__(self, index: int = CAMERA_INDEX, width: int = CAMERA_WIDTH,
                 height: int = CAMERA_HEIGHT) -> None:
        self.index = int(index)
        self.width = int(width)
        self.height = int(height)
        self.cap: Optional[cv2.VideoCapture] = None

    def start(self) -> bool:
        cap = cv2.VideoCapture(self.index)
        if not cap.isOpened():
            logger.error("Could not open camera %d", self.index)
            cap.release()
            return False
        # Resolution is a hint; drivers may pick the nearest supported mode
        cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)
        self.cap = cap
        logger.info("Camera %d opened", self.index)
        return True

    def read(self) -> tuple[bool, Optional[np.ndarray]]:
        if self.cap is None:
            return False, None
        ok, frame = self.cap.read()
        if not ok:
            return False, None
        return True, frame

    def stop(self) -> None:
        if self.cap is not None:
            try:
                self.cap.release()
            finally:
                self.cap = None

    @property
    def is_open(self) -> bool:
        return self.cap is not None and self.cap.isOpened()
