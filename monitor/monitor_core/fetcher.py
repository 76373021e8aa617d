"""
ESP32 status page fetch — one blocking GET per tick.

Called from the ticker thread, never from the Tk main thread.
No retries: a failure is reported immediately and the next tick tries again.
"""

from datetime import datetime

import requests

from .config import log
from .constants import (
    ESP32_IP_ADDRESS, CONNECT_TIMEOUT_SEC, READ_TIMEOUT_SEC,
    HTTP_ERROR_REASON, CONNECT_ERROR_REASON,
)
from .extractor import extract_reading
from .state import FetchFailure
from . import http_client


class FetchError(Exception):
    """Non-2xx response or transport failure. str(e) is the user-facing reason."""

    def __init__(self, reason, status_code=None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


def build_url(address=ESP32_IP_ADDRESS):
    return f"http://{address}"


def fetch_page(url, session=None):
    """GET the status page. Returns the body text, raises FetchError."""
    session = session or http_client.http
    try:
        resp = session.get(url, timeout=(CONNECT_TIMEOUT_SEC, READ_TIMEOUT_SEC))
    except requests.RequestException as e:
        raise FetchError(CONNECT_ERROR_REASON.format(error=e)) from e

    if not 200 <= resp.status_code < 300:
        raise FetchError(HTTP_ERROR_REASON.format(code=resp.status_code), resp.status_code)

    # The sketch does not always send a charset; requests would fall back to latin-1.
    content_type = resp.headers.get("Content-Type", "")
    if "charset" not in content_type.lower():
        resp.encoding = "utf-8"

    return resp.text


class Fetcher:
    """Bound to one URL; poll_once() yields a SensorReading or FetchFailure."""

    def __init__(self, address=ESP32_IP_ADDRESS, session=None):
        self.url = build_url(address)
        self._session = session

    def poll_once(self):
        try:
            body = fetch_page(self.url, self._session)
        except FetchError as e:
            log.warning("Fetch failed: %s", e.reason)
            return FetchFailure(reason=e.reason, timestamp=datetime.now())

        reading = extract_reading(body)
        log.info(
            "Reading OK | temp=%s | hum=%s | gas=%s | status=%s",
            reading.temperature, reading.humidity, reading.gas_level,
            reading.status_category.value,
        )
        return reading
