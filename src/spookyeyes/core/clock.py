"""Frame clock: wall time between consecutive rendered frames."""

import time
from typing import Callable, Optional


class FrameClock:
    """Measures the time between ticks on a monotonic source.

    The value is reported as-is. Pupil motion is a fixed step per frame,
    so a long stall only shows up as one large elapsed value.
    """

    def __init__(self, source: Callable[[], float] = time.monotonic):
        self._source = source
        self._last: Optional[float] = None

    def reset(self) -> None:
        self._last = self._source()

    def tick(self) -> float:
        """Return seconds since the previous tick or reset (0.0 the first time)."""
        now = self._source()
        elapsed = 0.0 if self._last is None else now - self._last
        self._last = now
        return elapsed
