"""Eye tracking engine: nose reports in, pupil positions and colors out."""

import logging
import time
from typing import Any, Callable, Optional

from spookyeyes.animation.eye_motion import EyeMotion
from spookyeyes.animation.eye_target import compute_target, eye_socket
from spookyeyes.core.config_loader import EyeConfig
from spookyeyes.core.geometry import EyeLocation, FaceLandmarks, Point, Rect, centroid
from spookyeyes.core.state import TrackingState

logger = logging.getLogger(__name__)


class EyeTrackingEngine:
    """Owns the per-eye pupil state and steers it toward the tracked nose.

    Eyes exist only once both the decorative image size and a non-empty
    canvas size are known. Any change to either snaps the pupils to their
    rest (non-tracking) targets.

    Parameters
    ----------
    config : EyeConfig, optional
        Eye offsets, radii, colors and timing. Defaults to ``EyeConfig()``.
    clock : callable, optional
        Monotonic time source in seconds. Defaults to ``time.monotonic``.
    """

    def __init__(self, config: Optional[EyeConfig] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.config = config or EyeConfig()
        self._clock = clock
        self.tracking = TrackingState(self.config.alert_window)
        self.motion = EyeMotion(self.config.speed)

        self.canvas_size: tuple[int, int] = (0, 0)
        self.image_size: Optional[tuple[int, int]] = None

        self.eyes: dict[str, EyeLocation] = {}
        self.targets: dict[str, EyeLocation] = {}

    @property
    def is_ready(self) -> bool:
        w, h = self.canvas_size
        return self.image_size is not None and w > 0 and h > 0

    # ── Geometry inputs ──

    def set_canvas_size(self, width: int, height: int) -> None:
        self.canvas_size = (int(width), int(height))
        self.reinitialize()

    def set_image_size(self, width: int, height: int) -> None:
        logger.info("Decorative image ready: %dx%d", width, height)
        self.image_size = (int(width), int(height))
        self.reinitialize()

    def reinitialize(self) -> None:
        """Snap both eyes to their rest targets, discarding in-flight motion."""
        if not self.is_ready:
            return
        for name in self.config.offsets:
            rest = self._target_for(name, include_tracking=False)
            self.eyes[name] = rest.copy()
            self.targets[name] = rest
        logger.debug("Eyes reinitialized for canvas %dx%d", *self.canvas_size)

    # ── Face reporting ──

    def report_face(self, bounds: Optional[Rect], landmarks: FaceLandmarks,
                    expressions: Optional[dict[str, Any]] = None) -> Point:
        """Record the nose centroid of one detected face.

        ``bounds`` and ``expressions`` are accepted for future behaviors
        and currently ignored.
        """
        nose = centroid(landmarks.get_nose())
        self.tracking.report_observation(nose, self._clock())
        return nose

    @property
    def tracked_point(self) -> Optional[Point]:
        return self.tracking.tracked_point

    # ── Per-frame update ──

    def advance(self) -> None:
        """Move each eye one step toward its current target."""
        for name, position in self.eyes.items():
            self.motion.step(position, self.targets[name])

    def retarget(self) -> None:
        """Recompute tracking targets for the next frame."""
        if not self.is_ready:
            return
        for name in self.config.offsets:
            self.targets[name] = self._target_for(name, include_tracking=True)

    def pupil_color(self, now: Optional[float] = None) -> str:
        if now is None:
            now = self._clock()
        if self.tracking.is_alert(now):
            return self.config.alert_color
        return self.config.calm_color

    def eye_sockets(self) -> dict[str, tuple[Point, float]]:
        """Scaled socket centers and radii, for debug drawing."""
        if not self.is_ready:
            return {}
        return {
            name: eye_socket(self.canvas_size, self.image_size, offset,
                             self.config.eye_radius)
            for name, offset in self.config.offsets.items()
        }

    def _target_for(self, name: str, include_tracking: bool) -> EyeLocation:
        return compute_target(
            self.canvas_size,
            self.image_size,
            self.config.offsets[name],
            self.tracking.tracked_point,
            include_tracking,
            self.config.pupil_radius,
            self.config.eye_radius,
        )
