"""
MonitorApp — the main Tkinter application.

Threads:
  Tk main thread  → owns the Dashboard, drains outcomes via root.after()
  Ticker thread   → blocking fetch + parse, puts outcomes on a queue

The ticker thread never touches Tkinter directly.
"""

import queue
import tkinter as tk
from datetime import datetime

from .constants import (
    MONITOR_VERSION, ESP32_IP_ADDRESS, REFRESH_INTERVAL_SEC, UI_POLL_MS,
    CONNECT_ERROR_REASON,
)
from .config import log, safe_print
from .dashboard import Dashboard
from .fetcher import Fetcher
from .presenter import Presenter
from .state import FetchFailure
from .ticker import Ticker


class MonitorApp:
    """
    Owns the Tk main loop. Schedules:
      Ticker._run()       — fetch + parse, outcome → queue   (every REFRESH_INTERVAL_SEC)
      _drain_outcomes()   — queue → Presenter → Dashboard   (every UI_POLL_MS)
    """

    def __init__(self, address=ESP32_IP_ADDRESS, interval=REFRESH_INTERVAL_SEC, fetcher=None):
        self._address = address
        self._interval = interval
        self._fetcher = fetcher or Fetcher(address)
        self._outcomes = queue.Queue()
        self._ticker = Ticker(interval, self._do_tick, name="esp32-poll")
        self._root = None
        self._presenter = None

    @property
    def state(self):
        return self._presenter.state if self._presenter else None

    def run(self):
        """Build the window and block on Tk mainloop. Call from main thread."""
        self._root = tk.Tk()
        dashboard = Dashboard(self._root, self._interval)
        self._presenter = Presenter(dashboard)
        self._root.protocol("WM_DELETE_WINDOW", self.stop)

        self._ticker.start()
        self._root.after(UI_POLL_MS, self._poll_outcomes)

        log.info("v%s started (target=%s, interval=%ds)",
                 MONITOR_VERSION, self._fetcher.url, self._interval)
        safe_print("Monitoring " + self._fetcher.url + "\n")

        try:
            self._root.mainloop()
        finally:
            self._ticker.stop(timeout=0)
            log.info("MonitorApp shut down.")

    def stop(self):
        try:
            self._root.destroy()
        except tk.TclError:
            pass

    # ─── Ticker thread ───────────────────────────────────────

    def _do_tick(self):
        """Exactly one outcome per tick, even if the fetch path blows up."""
        try:
            outcome = self._fetcher.poll_once()
        except Exception as e:
            log.error("Tick failed unexpectedly: %s", e, exc_info=True)
            outcome = FetchFailure(reason=CONNECT_ERROR_REASON.format(error=e), timestamp=datetime.now())
        self._outcomes.put(outcome)

    # ─── Outcome draining (Tk main thread, every UI_POLL_MS) ──

    def _poll_outcomes(self):
        try:
            self._drain_outcomes()
        except Exception as e:
            log.error("_poll_outcomes error: %s", e, exc_info=True)
        try:
            self._root.after(UI_POLL_MS, self._poll_outcomes)
        except tk.TclError:
            pass

    def _drain_outcomes(self):
        """Present every queued outcome in tick-completion order."""
        while True:
            try:
                outcome = self._outcomes.get_nowait()
            except queue.Empty:
                break
            self._presenter.present(outcome)
