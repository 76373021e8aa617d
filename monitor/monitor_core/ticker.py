"""
Ticker — fixed-rate periodic action on a single background thread.

Schedule: first call immediately, then every `interval` seconds measured
from the previous deadline (fixed-rate). Calls are serialized on the one
thread, so a slow action never overlaps the next. If an action overruns one
or more slots, the next call runs late, once, older slots are dropped, and
the schedule re-anchors on that call, so there is never a catch-up burst.
"""

import threading
import time

from .config import log


class Ticker:

    def __init__(self, interval, action, name="ticker"):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = float(interval)
        self._action = action
        self._name = name
        self._stop_event = threading.Event()
        self._thread = None
        self.ticks = 0
        self.skipped = 0

    @property
    def is_running(self):
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()
        log.info("Ticker started (interval=%.1fs)", self._interval)

    def stop(self, timeout=None):
        """Stop scheduling. Waits for an in-flight action up to `timeout`."""
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)
        log.info("Ticker stopped after %d ticks", self.ticks)

    def _run(self):
        deadline = time.monotonic()
        while not self._stop_event.is_set():
            self.ticks += 1
            try:
                self._action()
            except Exception as e:
                log.error("Tick action error: %s", e, exc_info=True)

            deadline += self._interval
            now = time.monotonic()
            if now > deadline:
                # Run once, late, for the most recent slot; drop the older ones.
                missed = int((now - deadline) // self._interval)
                if missed:
                    self.skipped += missed
                    log.warning("Tick overran the interval, dropping %d slot(s)", missed)
                deadline = now
            self._stop_event.wait(max(0.0, deadline - time.monotonic()))
