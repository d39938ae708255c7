"""Tracking recency state: the last observed nose point and when it was seen."""

from typing import Optional

from spookyeyes.constants import ALERT_WINDOW
from spookyeyes.core.geometry import Point


class TrackingState:
    """Latest tracked point plus the time it was observed.

    The point and its timestamp are replaced together in a single
    assignment, so a reader never sees one without the other.
    """

    def __init__(self, alert_window: float = ALERT_WINDOW):
        self.alert_window = alert_window
        self._observation: Optional[tuple[Point, float]] = None

    @property
    def tracked_point(self) -> Optional[Point]:
        obs = self._observation
        return obs[0] if obs is not None else None

    @property
    def last_observed(self) -> Optional[float]:
        obs = self._observation
        return obs[1] if obs is not None else None

    def report_observation(self, point: Point, now: float) -> None:
        self._observation = (point, now)

    def is_alert(self, now: float) -> bool:
        """True while less than ``alert_window`` has passed since the last observation."""
        last = self.last_observed
        if last is None:
            return False
        return now - last < self.alert_window
