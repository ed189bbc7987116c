from __future__ import annotations

from typing import Callable, Dict, List

from passview.app.interval_timer import IntervalTimer


class FakeScheduler:
    """Collects ``after`` requests so tests can fire them by hand."""

    def __init__(self) -> None:
        self.pending: Dict[str, Callable[[], None]] = {}
        self.delays: List[int] = []
        self.cancelled: List[str] = []
        self._seq = 0

    def after(self, delay_ms: int, callback: Callable[[], None]) -> str:
        self._seq += 1
        token = f"after#{self._seq}"
        self.pending[token] = callback
        self.delays.append(delay_ms)
        return token

    def after_cancel(self, token: str) -> None:
        self.cancelled.append(token)
        self.pending.pop(token, None)

    def fire_all(self) -> None:
        due, self.pending = self.pending, {}
        for callback in due.values():
            callback()


def test_timer_ticks_on_interval_until_stopped() -> None:
    sched = FakeScheduler()
    ticks = []
    timer = IntervalTimer(sched.after, sched.after_cancel, 1000, lambda: ticks.append(1))

    timer.start()
    assert timer.running
    for _ in range(3):
        sched.fire_all()
    assert len(ticks) == 3
    assert set(sched.delays) == {1000}

    timer.stop()
    assert not timer.running
    assert sched.pending == {}
    sched.fire_all()
    assert len(ticks) == 3


def test_start_is_idempotent() -> None:
    sched = FakeScheduler()
    timer = IntervalTimer(sched.after, sched.after_cancel, 1000, lambda: None)
    timer.start()
    timer.start()
    assert len(sched.pending) == 1


def test_stopped_timer_ignores_a_late_fire() -> None:
    sched = FakeScheduler()
    ticks = []
    timer = IntervalTimer(sched.after, lambda token: None, 500, lambda: ticks.append(1))
    timer.start()
    timer.stop()
    sched.fire_all()
    assert ticks == []
    assert sched.pending == {}


def test_callback_errors_do_not_stop_the_timer() -> None:
    sched = FakeScheduler()
    calls = []

    def flaky() -> None:
        calls.append(1)
        raise RuntimeError("boom")

    timer = IntervalTimer(sched.after, sched.after_cancel, 1000, flaky)
    timer.start()
    sched.fire_all()
    sched.fire_all()
    assert len(calls) == 2
    assert timer.running


def test_interval_is_clamped_to_one_ms() -> None:
    sched = FakeScheduler()
    timer = IntervalTimer(sched.after, sched.after_cancel, 0, lambda: None)
    timer.start()
    assert sched.delays == [1]
