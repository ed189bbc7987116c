"""Recurring timer driven by a UI scheduler.

The app passes Tk ``after`` and ``after_cancel`` callables into this class so
the tick loop stays on the UI thread and can be stopped when the screen goes
away. Tests pass fake schedulers and fire tokens by hand.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional


ScheduleFn = Callable[[int, Callable[[], None]], str]
CancelFn = Callable[[str], None]


class IntervalTimer:
    """Call ``callback`` every ``interval_ms`` until ``stop`` is called."""

    def __init__(
        self,
        schedule: ScheduleFn,
        cancel: CancelFn,
        interval_ms: int,
        callback: Callable[[], None],
    ) -> None:
        """Store scheduler hooks and the tick callback.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
            interval_ms: Delay between ticks in milliseconds.
            callback: Work to run on every tick.
        """
        self._schedule = schedule
        self._cancel = cancel
        self.interval_ms = max(1, int(interval_ms))
        self._callback = callback
        self._token: Optional[str] = None
        self._running = False
        self._log = logging.getLogger(__name__)

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Arm the timer; calling it on a running timer does nothing."""
        if self._running:
            return
        self._running = True
        self._arm()

    def stop(self) -> None:
        """Cancel the pending tick and prevent further ticks."""
        self._running = False
        token, self._token = self._token, None
        if token is None:
            return
        try:
            self._cancel(token)
        except Exception:
            self._log.debug("Cancelling tick token %s failed", token, exc_info=True)

    # ------------------------------------------------------------------
    def _arm(self) -> None:
        self._token = self._schedule(self.interval_ms, self._fire)

    def _fire(self) -> None:
        self._token = None
        if not self._running:
            return
        self._arm()
        try:
            self._callback()
        except Exception:
            self._log.exception("Timer callback failed")


__all__ = ["IntervalTimer"]
