"""Constant-speed pupil motion toward a target."""

import math

from spookyeyes.constants import EYE_SPEED
from spookyeyes.core.geometry import EyeLocation


class EyeMotion:
    """Moves a pupil a fixed distance per frame along the line to its target.

    The step ignores elapsed time, so speed follows the frame rate. At the
    target, ``atan2(0, 0) == 0`` pushes the pupil one step along +X; the
    next frame pulls it back, which gives the resting eyes their jitter.
    Radius is never interpolated.
    """

    def __init__(self, speed: float = EYE_SPEED):
        self.speed = speed

    def step(self, position: EyeLocation, target: EyeLocation) -> None:
        angle = math.atan2(target.y - position.y, target.x - position.x)
        position.x += math.cos(angle) * self.speed
        position.y += math.sin(angle) * self.speed
