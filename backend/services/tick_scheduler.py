"""
Periodic tick timer built on the `schedule` library.

A private schedule.Scheduler is used so several timers (or tests) never
share the module-level default scheduler.
"""

import logging
import time
from typing import Callable, Optional

import schedule


logger = logging.getLogger(__name__)

# Upper bound for a single sleep in run(), so stop() is noticed promptly.
MAX_IDLE_SLEEP_SECONDS = 0.05


class TickScheduler:
    """
    Calls `callback` every `interval_ms` milliseconds while started.

    reconfigure() replaces the job, so the new period applies from the
    next tick onwards; a tick that already fired is never re-timed.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        interval_ms: int,
        scheduler: Optional[schedule.Scheduler] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}.")
        self.callback = callback
        self.interval_ms = interval_ms
        self.scheduler = scheduler or schedule.Scheduler()
        self._sleep = sleep
        self._job: Optional[schedule.Job] = None

    @property
    def running(self) -> bool:
        return self._job is not None

    def _register(self) -> None:
        self._job = self.scheduler.every(self.interval_ms / 1000).seconds.do(self.callback)

    def start(self) -> None:
        if self.running:
            return
        self._register()
        logger.debug("Tick timer started at %sms", self.interval_ms)

    def stop(self) -> None:
        """Cancel the timer. Safe to call when already stopped."""
        if self._job is None:
            return
        self.scheduler.cancel_job(self._job)
        self._job = None
        logger.debug("Tick timer stopped")

    def reconfigure(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}.")
        if interval_ms == self.interval_ms:
            return
        logger.info("Tick interval %sms -> %sms", self.interval_ms, interval_ms)
        self.interval_ms = interval_ms
        if self.running:
            self.scheduler.cancel_job(self._job)
            self._register()

    def run_pending(self) -> None:
        self.scheduler.run_pending()

    def run(self, should_continue: Callable[[], bool] = lambda: True) -> None:
        """Block, firing ticks until stopped or `should_continue` returns False."""
        while self.running and should_continue():
            self.scheduler.run_pending()
            idle = self.scheduler.idle_seconds
            if idle is None:
                break
            self._sleep(min(max(idle, 0.0), MAX_IDLE_SLEEP_SECONDS))
