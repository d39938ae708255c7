"""Face landmark detection with MediaPipe's FaceLandmarker task."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

import cv2
import numpy as np

from spookyeyes.constants import DEFAULT_MODEL_PATH
from spookyeyes.core.geometry import FaceLandmarks, Point, Rect, bounding_rect

logger = logging.getLogger(__name__)

# Nose bridge, tip and nostril landmarks in the 478-point face mesh
NOSE_MESH_INDICES = (6, 197, 195, 5, 4, 1, 19, 94, 2, 98, 327)


@dataclass(frozen=True)
class FaceDetection:
    """One detected face: box, landmarks and expression scores."""
    bounds: Rect
    landmarks: FaceLandmarks
    expressions: dict[str, float] = field(default_factory=dict)

    def scaled(self, sx: float, sy: float) -> FaceDetection:
        """Map the detection from frame pixels into another pixel space."""
        b = self.bounds
        points = tuple(Point(p.x * sx, p.y * sy) for p in self.landmarks.points)
        return FaceDetection(
            bounds=Rect(b.x * sx, b.y * sy, b.width * sx, b.height * sy),
            landmarks=FaceLandmarks(points, self.landmarks.nose_indices),
            expressions=dict(self.expressions),
        )


def detection_from_landmarks(normalized: Sequence, frame_width: int, frame_height: int,
                             blendshapes: Optional[Sequence] = None,
                             nose_indices: Sequence[int] = NOSE_MESH_INDICES) -> FaceDetection:
    """Build a FaceDetection from normalized landmarks (objects with ``.x``/``.y``).

    ``blendshapes`` are MediaPipe categories (``.category_name``, ``.score``)
    and become the expression scores.
    """
    coords = np.array([(lm.x, lm.y) for lm in normalized], dtype=np.float64)
    coords *= (frame_width, frame_height)
    points = tuple(Point(float(x), float(y)) for x, y in coords)
    expressions = {c.category_name: float(c.score) for c in (blendshapes or [])}
    return FaceDetection(
        bounds=bounding_rect(points),
        landmarks=FaceLandmarks(points, tuple(nose_indices)),
        expressions=expressions,
    )


class FaceDetector:
    """Runs MediaPipe FaceLandmarker on BGR frames.

    Parameters
    ----------
    model_path : Path, optional
        ``face_landmarker.task`` model bundle.
    max_faces : int
        Upper bound on faces reported per frame.
    """

    def __init__(self, model_path: Optional[Path] = None, max_faces: int = 1,
                 min_detection_confidence: float = 0.5) -> None:
        self.model_path = Path(model_path or DEFAULT_MODEL_PATH)
        if not self.model_path.is_file():
            raise FileNotFoundError(f"Face landmarker model not found: {self.model_path}")

        import mediapipe as mp
        from mediapipe.tasks.python import BaseOptions
        from mediapipe.tasks.python import vision

        self._mp = mp
        options = vision.FaceLandmarkerOptions(
            base_options=BaseOptions(model_asset_path=str(self.model_path)),
            running_mode=vision.RunningMode.IMAGE,
            num_faces=max_faces,
            min_face_detection_confidence=min_detection_confidence,
            output_face_blendshapes=True,
        )
        self._landmarker = vision.FaceLandmarker.create_from_options(options)
        logger.info("Face landmarker loaded from %s", self.model_path)

    def detect(self, frame: np.ndarray) -> list[FaceDetection]:
        """Detect faces in a BGR frame; coordinates are frame pixels."""
        h, w = frame.shape[:2]
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        image = self._mp.Image(image_format=self._mp.ImageFormat.SRGB, data=rgb)
        result = self._landmarker.detect(image)

        blendshapes = result.face_blendshapes or []
        detections = []
        for i, landmarks in enumerate(result.face_landmarks):
            shapes = blendshapes[i] if i < len(blendshapes) else None
            detections.append(detection_from_landmarks(landmarks, w, h, shapes))
        return detections

    def close(self) -> None:
        if self._landmarker is not None:
            self._landmarker.close()
            self._landmarker = None
