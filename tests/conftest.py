from __future__ import annotations

from datetime import datetime

import pytest


FULL_PAGE = """<!DOCTYPE html><html><head><meta charset='UTF-8'>
<title>ESP32 Пожароизвестяване</title></head><body>
<h1>Състояние на сензорите</h1>
<p><b>Температура:</b> 23.5 &deg;C</p>
<p><b>Влажност:</b> 41 %</p>
<p><b>Газ/Дим (MQ-2):</b> 120 / 4095</p>
<p>Състояние: <span class='status-normal'>Нормално</span></p>
</body></html>"""


@pytest.fixture()
def full_page() -> str:
    return FULL_PAGE


@pytest.fixture()
def fixed_time() -> datetime:
    return datetime(2024, 5, 17, 14, 3, 9)
