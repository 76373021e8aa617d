"""
Tick outcomes, history log, and display state.

SensorReading / FetchFailure are produced on the ticker thread and handed to
the Tk main thread through a queue. MonitorState (history + current display)
is only mutated by the Presenter on the Tk main thread; HistoryLog appends
are still lock-guarded so the log stays ordered if that ever changes.
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from .constants import (
    LOADING_TEXT, TEMPERATURE_LABEL, HUMIDITY_LABEL, GAS_LABEL, STATUS_LABEL,
    STATUS_COLORS,
)


class StatusCategory(str, Enum):
    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag):
        """Map a span tag ("normal", "status-warning", ...) to a category."""
        name = (tag or "").strip().lower()
        if name.startswith("status-"):
            name = name[len("status-"):]
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class SensorReading:
    temperature: Optional[str]
    humidity: Optional[str]
    gas_level: Optional[str]
    status_category: StatusCategory
    status_text: str
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class FetchFailure:
    reason: str
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[SensorReading, FetchFailure]


@dataclass(frozen=True)
class HistoryRow:
    """The five table cells shown for one tick."""
    time: str
    temperature: str
    humidity: str
    gas_level: str
    status: str

    def values(self):
        return (self.time, self.temperature, self.humidity, self.gas_level, self.status)


@dataclass(frozen=True)
class DisplayState:
    """Current-value label texts plus the status color."""
    temperature: str
    humidity: str
    gas_level: str
    status: str
    status_color: str

    @classmethod
    def loading(cls):
        return cls(
            temperature=f"{TEMPERATURE_LABEL}: {LOADING_TEXT}",
            humidity=f"{HUMIDITY_LABEL}: {LOADING_TEXT}",
            gas_level=f"{GAS_LABEL}: {LOADING_TEXT}",
            status=f"{STATUS_LABEL}: {LOADING_TEXT}",
            status_color=STATUS_COLORS[StatusCategory.UNKNOWN.value],
        )


class HistoryLog:
    """Append-only, chronologically ordered sequence of tick outcomes."""

    def __init__(self):
        self._entries = []
        self._lock = threading.Lock()

    def append(self, outcome: Outcome) -> int:
        """Append one outcome. Returns the new length."""
        with self._lock:
            self._entries.append(outcome)
            return len(self._entries)

    def entries(self):
        """Snapshot of all outcomes, oldest first."""
        with self._lock:
            return tuple(self._entries)

    @property
    def last(self) -> Optional[Outcome]:
        with self._lock:
            return self._entries[-1] if self._entries else None

    def __len__(self):
        with self._lock:
            return len(self._entries)


@dataclass
class MonitorState:
    # ── History ───────────────────────────────────────────────
    history: HistoryLog = field(default_factory=HistoryLog)

    # ── Current display (overwritten wholesale every tick) ────
    display: DisplayState = field(default_factory=DisplayState.loading)

    # ── Last tick ─────────────────────────────────────────────
    last_tick_ok: Optional[bool] = None
    readings_count: int = 0
    failures_count: int = 0

    def record(self, outcome: Outcome, display: DisplayState) -> int:
        """Store one tick's outcome and the display derived from it."""
        length = self.history.append(outcome)
        self.display = display
        self.last_tick_ok = outcome.ok
        if outcome.ok:
            self.readings_count += 1
        else:
            self.failures_count += 1
        return length
