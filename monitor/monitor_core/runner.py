"""
Entry point.
"""

from .constants import MONITOR_VERSION, ESP32_IP_ADDRESS, REFRESH_INTERVAL_SEC
from .config import log, safe_print, LOG_FILE
from .app import MonitorApp


def main():
    """Start the monitor. Returns when the window is closed."""
    safe_print("ESP32 Fire Alarm Monitor v" + MONITOR_VERSION)
    safe_print()
    log.info("Logging to %s", LOG_FILE)

    app = MonitorApp(ESP32_IP_ADDRESS, REFRESH_INTERVAL_SEC)
    try:
        app.run()
    except KeyboardInterrupt:
        safe_print("\nMonitor stopped by user.")
        log.info("Monitor stopped by user (Ctrl+C)")
