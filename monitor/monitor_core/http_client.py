"""
HTTP session with connection pooling and retries switched off.

The ESP32 is polled again on the next tick anyway, so a failed GET is
reported straight away instead of being retried inside the adapter.
"""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .constants import MONITOR_VERSION

_retry_strategy = Retry(
    total=3,
    connect=0,
    read=0,
    status=0,
    redirect=3,
    raise_on_status=False,
)


def create_session():
    """Create a new requests.Session with a small pool and no retries."""
    session = requests.Session()
    adapter = HTTPAdapter(
        pool_connections=1,
        pool_maxsize=2,
        max_retries=_retry_strategy,
    )
    session.mount("http://", adapter)
    session.headers["User-Agent"] = f"esp32-monitor/{MONITOR_VERSION}"
    return session


# Global shared session
http = create_session()
