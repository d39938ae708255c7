"""Pupil target geometry: where each pupil should be for the current frame."""

from typing import Optional

from spookyeyes.core.geometry import EyeLocation, EyeOffset, Point, letterbox_scale


def eye_socket(canvas_size: tuple[float, float], image_size: tuple[float, float],
               offset: EyeOffset, eye_radius: float) -> tuple[Point, float]:
    """Return the scaled socket center and radius for one eye."""
    canvas_w, canvas_h = canvas_size
    image_w, image_h = image_size
    scale = letterbox_scale(canvas_w, canvas_h, image_w, image_h)
    center = Point(canvas_w / 2.0 + offset.x_offset * scale,
                   canvas_h / 2.0 + offset.y_offset * scale)
    return center, eye_radius * scale


def compute_target(canvas_size: tuple[float, float], image_size: tuple[float, float],
                   offset: EyeOffset, tracked_point: Optional[Point],
                   include_tracking: bool, pupil_radius: float,
                   eye_radius: float) -> EyeLocation:
    """Compute the pupil target for one eye.

    Without tracking (or with no tracked point) the pupil rests on the
    socket center. Otherwise the tracked point's displacement from the
    canvas center, normalized by the canvas size, is scaled into the
    socket's free travel ``2 * (socket radius - pupil radius)``. X is
    mirrored because the camera image is. The result is not clamped to
    the socket.
    """
    canvas_w, canvas_h = canvas_size
    scale = letterbox_scale(canvas_w, canvas_h, *image_size)
    pupil_r = pupil_radius * scale
    socket_center, socket_r = eye_socket(canvas_size, image_size, offset, eye_radius)

    x, y = socket_center.x, socket_center.y
    if include_tracking and tracked_point is not None:
        eye_size = 2.0 * (socket_r - pupil_r)
        dx = (tracked_point.x - canvas_w / 2.0) / canvas_w * eye_size
        dy = (tracked_point.y - canvas_h / 2.0) / canvas_h * eye_size
        x -= dx
        y += dy

    return EyeLocation(x, y, pupil_r)
