"""Point/rect value types and the 2D math the eye engine needs."""

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

# Nose landmarks in the 68-point face layout (bridge + nostrils)
NOSE_68_INDICES = tuple(range(27, 36))


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class EyeOffset:
    """Fixed per-eye offset from the image center, in image design pixels."""
    x_offset: float
    y_offset: float


@dataclass
class EyeLocation:
    """A pupil's position and radius in canvas pixels."""
    x: float
    y: float
    radius: float

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)

    def copy(self) -> "EyeLocation":
        return EyeLocation(self.x, self.y, self.radius)


@dataclass(frozen=True)
class FaceLandmarks:
    """A detected landmark set and the indices that make up its nose."""
    points: tuple[Point, ...]
    nose_indices: tuple[int, ...] = NOSE_68_INDICES

    def get_nose(self) -> list[Point]:
        return [self.points[i] for i in self.nose_indices if i < len(self.points)]


def centroid(points: Sequence[Point]) -> Point:
    """Return the arithmetic mean of *points*."""
    if not points:
        raise ValueError("centroid of an empty point set")
    arr = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    cx, cy = arr.mean(axis=0)
    return Point(float(cx), float(cy))


def get_distance(p1: Point, p2: Point) -> float:
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def bounding_rect(points: Sequence[Point]) -> Rect:
    if not points:
        raise ValueError("bounding rect of an empty point set")
    arr = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    x0, y0 = arr.min(axis=0)
    x1, y1 = arr.max(axis=0)
    return Rect(float(x0), float(y0), float(x1 - x0), float(y1 - y0))


def letterbox_scale(canvas_w: float, canvas_h: float,
                    image_w: float, image_h: float) -> float:
    """Uniform scale that fits the image inside the canvas.

    Aspect ratios are height / width. A relatively taller image is limited
    by the canvas height; otherwise (including equal ratios) by the width.
    """
    image_ratio = image_h / image_w
    canvas_ratio = canvas_h / canvas_w
    if image_ratio > canvas_ratio:
        return canvas_h / image_h
    return canvas_w / image_w


def letterbox_rect(canvas_w: float, canvas_h: float,
                   image_w: float, image_h: float) -> Rect:
    """Centered destination rectangle for the letterboxed image."""
    scale = letterbox_scale(canvas_w, canvas_h, image_w, image_h)
    w = image_w * scale
    h = image_h * scale
    return Rect((canvas_w - w) / 2.0, (canvas_h - h) / 2.0, w, h)
