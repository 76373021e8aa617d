"""
Presenter — tick outcome → display state + one history row → view.

Runs EXCLUSIVELY on the Tkinter main thread (MonitorApp drains the outcome
queue via root.after()). The view is anything with show_current() and
append_row(); in the app it is the Dashboard window.
"""

from .config import log
from .constants import (
    PLACEHOLDER, TIME_FORMAT, ERROR_LABEL_TEXT, ERROR_CELL_TEXT, ERROR_COLOR,
    TEMPERATURE_LABEL, HUMIDITY_LABEL, GAS_LABEL, STATUS_LABEL,
    TEMPERATURE_UNIT, HUMIDITY_UNIT, GAS_SCALE,
)
from .extractor import status_color
from .state import DisplayState, HistoryRow, MonitorState, SensorReading


def _value(value):
    return PLACEHOLDER if value is None else value


def build_display(outcome):
    """The four label texts and status color for one outcome."""
    if isinstance(outcome, SensorReading):
        return DisplayState(
            temperature=f"{TEMPERATURE_LABEL}: {_value(outcome.temperature)} {TEMPERATURE_UNIT}",
            humidity=f"{HUMIDITY_LABEL}: {_value(outcome.humidity)} {HUMIDITY_UNIT}",
            gas_level=f"{GAS_LABEL}: {_value(outcome.gas_level)} {GAS_SCALE}",
            status=f"{STATUS_LABEL}: {outcome.status_text}",
            status_color=status_color(outcome.status_category),
        )
    return DisplayState(
        temperature=f"{TEMPERATURE_LABEL}: {ERROR_LABEL_TEXT}",
        humidity=f"{HUMIDITY_LABEL}: {ERROR_LABEL_TEXT}",
        gas_level=f"{GAS_LABEL}: {ERROR_LABEL_TEXT}",
        status=f"{STATUS_LABEL}: {outcome.reason}",
        status_color=ERROR_COLOR,
    )


def build_row(outcome):
    """The history table cells for one outcome."""
    time_text = outcome.timestamp.strftime(TIME_FORMAT)
    if isinstance(outcome, SensorReading):
        return HistoryRow(
            time=time_text,
            temperature=_value(outcome.temperature),
            humidity=_value(outcome.humidity),
            gas_level=_value(outcome.gas_level),
            status=outcome.status_text,
        )
    return HistoryRow(
        time=time_text,
        temperature=ERROR_CELL_TEXT,
        humidity=ERROR_CELL_TEXT,
        gas_level=ERROR_CELL_TEXT,
        status=f"{ERROR_CELL_TEXT}: {outcome.reason}",
    )


class Presenter:
    """
    present(outcome):
      1. derive DisplayState and HistoryRow
      2. record both in MonitorState (exactly one history entry)
      3. push them to the view (labels overwritten, row appended + scrolled)
    """

    def __init__(self, view, state=None):
        self._view = view
        self.state = state or MonitorState()

    def present(self, outcome):
        display = build_display(outcome)
        row = build_row(outcome)
        count = self.state.record(outcome, display)

        try:
            self._view.show_current(display)
            self._view.append_row(row)
        except Exception as e:
            log.error("View update failed (row %d): %s", count, e, exc_info=True)

        return row
