"""
Paths, logging setup, safe_print.
"""

import os
import sys
import logging
from pathlib import Path


# ─── Paths ───────────────────────────────────────────────────────
# Log lives next to the exe when frozen, otherwise in the user's state dir.
_FOLDER_NAME = "ESP32Monitor"

if getattr(sys, "frozen", False):
    BASE_DIR = Path(sys.executable).parent
elif sys.platform == "win32":
    BASE_DIR = Path(os.environ.get("LOCALAPPDATA", Path.home())) / _FOLDER_NAME
else:
    BASE_DIR = Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state")) / "esp32-monitor"

BASE_DIR.mkdir(parents=True, exist_ok=True)

LOG_FILE = BASE_DIR / "monitor.log"
LOG_MAX_BYTES = 1_000_000


# ─── Safe print (no crash when --noconsole) ──────────────────────

def safe_print(*args, **kwargs):
    try:
        print(*args, **kwargs)
    except Exception:
        pass


# ─── Logging ─────────────────────────────────────────────────────

try:
    if LOG_FILE.exists() and LOG_FILE.stat().st_size > LOG_MAX_BYTES:
        LOG_FILE.write_text("")
except OSError:
    pass

logging.basicConfig(
    filename=str(LOG_FILE),
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    encoding="utf-8",
)
log = logging.getLogger("monitor")

console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.INFO)
console_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
log.addHandler(console_handler)
