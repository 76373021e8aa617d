from __future__ import annotations

import pytest

from monitor_core.extractor import extract_reading, extract_status, status_color
from monitor_core.state import StatusCategory


def test_example_page_extracts_all_fields(full_page, fixed_time) -> None:
    reading = extract_reading(full_page, fixed_time)

    assert reading.temperature == "23.5"
    assert reading.humidity == "41"
    assert reading.gas_level == "120"
    assert reading.status_category is StatusCategory.NORMAL
    assert reading.status_text == "Нормално"
    assert reading.timestamp == fixed_time
    assert status_color(reading.status_category) == "#007c00"


@pytest.mark.parametrize(
    "tag, category",
    [
        ("normal", StatusCategory.NORMAL),
        ("warning", StatusCategory.WARNING),
        ("critical", StatusCategory.CRITICAL),
    ],
)
def test_status_category_follows_span_tag(full_page, tag, category) -> None:
    body = full_page.replace("status-normal", f"status-{tag}")

    assert extract_reading(body).status_category is category


def test_missing_status_span_is_unknown(full_page) -> None:
    body = full_page.replace("<span class='status-normal'>Нормално</span>", "")

    reading = extract_reading(body)

    assert reading.status_category is StatusCategory.UNKNOWN
    assert reading.status_text == "Няма данни."
    assert status_color(reading.status_category) == "#000000"
    assert reading.temperature == "23.5"
    assert reading.humidity == "41"
    assert reading.gas_level == "120"


def test_missing_temperature_does_not_affect_other_fields(full_page) -> None:
    body = full_page.replace("<b>Температура:</b> 23.5", "")

    reading = extract_reading(body)

    assert reading.temperature is None
    assert reading.humidity == "41"
    assert reading.gas_level == "120"
    assert reading.status_category is StatusCategory.NORMAL


def test_unrecognised_status_class_is_unknown() -> None:
    body = "<span class='status-panic'>???</span>"

    assert extract_status(body) == (StatusCategory.UNKNOWN, "Няма данни.")


def test_double_quoted_status_class() -> None:
    body = '<span class="status-critical">Пожар!</span>'

    assert extract_status(body) == (StatusCategory.CRITICAL, "Пожар!")


def test_first_match_wins() -> None:
    body = "<b>Влажност:</b> 40.2 ... <b>Влажност:</b> 99"

    assert extract_reading(body).humidity == "40.2"


def test_gas_level_is_integer_only() -> None:
    body = "<b>Газ/Дим (MQ-2):</b> 512.7"

    assert extract_reading(body).gas_level == "512"


@pytest.mark.parametrize("body", ["", None, "<html>garbage</html>", "<b>Температура:</b> --"])
def test_garbage_never_raises(body) -> None:
    reading = extract_reading(body)

    assert reading.temperature is None
    assert reading.status_category is StatusCategory.UNKNOWN


def test_color_mapping_is_total_and_deterministic() -> None:
    expected = {
        StatusCategory.NORMAL: "#007c00",
        StatusCategory.WARNING: "#b28c00",
        StatusCategory.CRITICAL: "#b20000",
        StatusCategory.UNKNOWN: "#000000",
    }
    for category in StatusCategory:
        assert status_color(category) == expected[category]
        assert status_color(category) == status_color(category)


def test_color_mapping_accepts_raw_tags() -> None:
    assert status_color("status-warning") == "#b28c00"
    assert status_color("bogus") == "#000000"
    assert status_color(None) == "#000000"


def test_status_span_spanning_lines() -> None:
    body = "<p>Състояние: <span class='status-critical'>\nПОЖАР!\n</span></p>"

    assert extract_status(body) == (StatusCategory.CRITICAL, "ПОЖАР!")
    assert status_color(extract_reading(body).status_category) == "#b20000"
