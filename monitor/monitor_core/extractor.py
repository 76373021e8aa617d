"""
Status page parsing — ESP32 HTML body → SensorReading.

The ESP32 sketch renders a fixed page:
    <b>Температура:</b> 23.5 ... <b>Влажност:</b> 41 ...
    <b>Газ/Дим (MQ-2):</b> 120 ...
    <span class='status-normal'>Нормално</span>

Each field is matched on its own; a missing marker only blanks that field.
Everything that depends on the exact markup lives in this module.
"""

import re
from datetime import datetime

from .config import log
from .constants import STATUS_COLORS, NO_STATUS_TEXT
from .state import SensorReading, StatusCategory


TEMPERATURE_RE = re.compile(r"<b>Температура:</b>\s*([\d.]+)")
HUMIDITY_RE = re.compile(r"<b>Влажност:</b>\s*([\d.]+)")
GAS_RE = re.compile(r"<b>Газ/Дим \(MQ-2\):</b>\s*(\d+)")
STATUS_RE = re.compile(
    r"<span class=['\"]status-(normal|warning|critical)['\"]>(.*?)</span>",
    re.DOTALL,
)


def _first_group(pattern, body):
    match = pattern.search(body)
    return match.group(1) if match else None


def extract_status(body):
    """Return (category, text) from the first status span, or UNKNOWN."""
    match = STATUS_RE.search(body)
    if not match:
        return StatusCategory.UNKNOWN, NO_STATUS_TEXT
    return StatusCategory(match.group(1)), match.group(2).strip()


def extract_reading(body, timestamp=None):
    """
    Parse one status page. Never raises for string input.
    Fields whose marker is missing come back as None.
    """
    body = body or ""
    temperature = _first_group(TEMPERATURE_RE, body)
    humidity = _first_group(HUMIDITY_RE, body)
    gas_level = _first_group(GAS_RE, body)
    category, status_text = extract_status(body)

    missing = [
        name for name, value in (
            ("temperature", temperature),
            ("humidity", humidity),
            ("gas", gas_level),
        ) if value is None
    ]
    if category is StatusCategory.UNKNOWN:
        missing.append("status")
    if missing:
        log.debug("Status page missing markers: %s", ", ".join(missing))

    return SensorReading(
        temperature=temperature,
        humidity=humidity,
        gas_level=gas_level,
        status_category=category,
        status_text=status_text,
        timestamp=timestamp or datetime.now(),
    )


def status_color(category):
    """Category → display color. Total: anything unrecognised is 'unknown'."""
    if not isinstance(category, StatusCategory):
        category = StatusCategory.from_tag(category)
    return STATUS_COLORS[category.value]
