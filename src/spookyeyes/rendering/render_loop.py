"""Frame loop driven by the Qt event loop."""

import logging
from typing import Callable, Optional

from PySide6.QtCore import QTimer

from spookyeyes.constants import FRAME_INTERVAL_MS
from spookyeyes.core.clock import FrameClock

logger = logging.getLogger(__name__)


class RenderLoop:
    """Calls ``on_frame(elapsed)`` once per display refresh, forever.

    Only one callback is ever pending: the next frame is scheduled after
    the current one has finished drawing. There is no stop; the loop lives
    as long as the Qt event loop.

    Parameters
    ----------
    on_frame : callable
        Frame callback, given the seconds elapsed since the previous frame.
    schedule : callable, optional
        ``schedule(callback)`` runs the callback later. Defaults to a
        ``QTimer.singleShot`` at ``interval_ms``.
    clock : FrameClock, optional
        Elapsed-time source.
    """

    def __init__(self, on_frame: Callable[[float], None],
                 schedule: Optional[Callable[[Callable[[], None]], None]] = None,
                 clock: Optional[FrameClock] = None,
                 interval_ms: int = FRAME_INTERVAL_MS):
        self._on_frame = on_frame
        self._interval_ms = interval_ms
        self._schedule = schedule or self._schedule_single_shot
        self._clock = clock or FrameClock()
        self._started = False
        self.frame_count = 0

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        if self._started:
            raise RuntimeError("RenderLoop.start() called twice")
        self._started = True
        self._clock.reset()
        logger.info("Render loop started (%d ms interval)", self._interval_ms)
        self._schedule(self._tick)

    def _tick(self) -> None:
        # Elapsed time is reported but pupil motion is a fixed step per frame
        elapsed = self._clock.tick()
        self._on_frame(elapsed)
        self.frame_count += 1
        self._schedule(self._tick)

    def _schedule_single_shot(self, callback: Callable[[], None]) -> None:
        QTimer.singleShot(self._interval_ms, callback)
