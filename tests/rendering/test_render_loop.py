"""Tests for the frame loop."""

import pytest

from spookyeyes.rendering.render_loop import RenderLoop


class FakeScheduler:
    def __init__(self):
        self.pending = []

    def __call__(self, callback):
        self.pending.append(callback)

    def run_next(self):
        callback = self.pending.pop(0)
        callback()


def test_start_schedules_one_frame():
    frames = []
    sched = FakeScheduler()
    loop = RenderLoop(frames.append, schedule=sched)
    loop.start()
    assert loop.started
    assert len(sched.pending) == 1
    assert frames == []


def test_each_frame_schedules_exactly_one_next():
    frames = []
    sched = FakeScheduler()
    loop = RenderLoop(frames.append, schedule=sched)
    loop.start()
    for _ in range(5):
        sched.run_next()
        assert len(sched.pending) == 1
    assert len(frames) == 5
    assert loop.frame_count == 5
    assert all(dt >= 0.0 for dt in frames)


def test_next_frame_scheduled_after_callback_returns():
    sched = FakeScheduler()
    seen = []
    loop = RenderLoop(lambda dt: seen.append(len(sched.pending)), schedule=sched)
    loop.start()
    sched.run_next()
    # Nothing was pending while the frame callback ran
    assert seen == [0]


def test_second_start_raises():
    loop = RenderLoop(lambda dt: None, schedule=FakeScheduler())
    loop.start()
    with pytest.raises(RuntimeError):
        loop.start()


def test_frames_receive_clock_elapsed():
    from spookyeyes.core.clock import FrameClock

    class Ticks:
        def __init__(self):
            self.now = 0.0

        def __call__(self):
            return self.now

    source = Ticks()
    frames = []
    sched = FakeScheduler()
    loop = RenderLoop(frames.append, schedule=sched, clock=FrameClock(source))
    loop.start()
    source.now = 0.016
    sched.run_next()
    source.now = 0.5
    sched.run_next()
    assert frames == [pytest.approx(0.016), pytest.approx(0.484)]
