from __future__ import annotations

import tkinter as tk
from datetime import datetime, timedelta

import pytest

from monitor_core.dashboard import Dashboard
from monitor_core.presenter import Presenter, build_row
from monitor_core.state import FetchFailure, SensorReading, StatusCategory


@pytest.fixture()
def root():
    try:
        root = tk.Tk()
    except tk.TclError as e:
        pytest.skip(f"no display: {e}")
    yield root
    try:
        root.destroy()
    except tk.TclError:
        pass


@pytest.fixture()
def dashboard(root) -> Dashboard:
    dash = Dashboard(root, 5)
    root.update()
    return dash


def _reading(i: int) -> SensorReading:
    return SensorReading(
        f"{20 + i}.0", "41", "120", StatusCategory.NORMAL, "Нормално",
        datetime(2024, 5, 17, 12, 0, 0) + timedelta(seconds=5 * i),
    )


def test_initial_labels_show_loading(dashboard) -> None:
    assert dashboard._labels["temperature"].cget("text") == "Температура: Зареждане..."
    assert dashboard._labels["status"].cget("text") == "Състояние: Зареждане..."
    assert dashboard._table.get_children() == ()


def test_present_overwrites_labels_and_status_color(dashboard) -> None:
    presenter = Presenter(dashboard)

    presenter.present(_reading(3))

    assert dashboard._labels["temperature"].cget("text") == "Температура: 23.0 °C"
    assert dashboard._labels["humidity"].cget("text") == "Влажност: 41 %"
    assert dashboard._labels["gas_level"].cget("text") == "Газ/Дим (MQ-2): 120 / 4095"
    assert dashboard._labels["status"].cget("text") == "Състояние: Нормално"
    assert str(dashboard._labels["status"].cget("fg")) == "#007c00"

    presenter.present(FetchFailure("Грешка при HTTP заявка: 500"))

    assert dashboard._labels["temperature"].cget("text") == "Температура: Грешка!"
    assert dashboard._labels["status"].cget("text") == "Състояние: Грешка при HTTP заявка: 500"
    assert str(dashboard._labels["status"].cget("fg")) == "#b20000"


def test_rows_appended_in_order_and_latest_visible(root, dashboard) -> None:
    presenter = Presenter(dashboard)
    count = 40

    for i in range(count):
        presenter.present(_reading(i))
    root.update_idletasks()

    table = dashboard._table
    children = table.get_children()
    assert len(children) == count
    assert table.item(children[0], "values")[0] == "12:00:00"
    assert str(table.item(children[-1], "values")[1]) == f"{20 + count - 1}.0"
    assert table.bbox(children[-1])
    assert not table.bbox(children[0])


def test_updates_after_window_closed_are_ignored(root, dashboard) -> None:
    state_display = Presenter(dashboard).state.display
    root.destroy()

    dashboard.show_current(state_display)
    dashboard.append_row(build_row(_reading(0)))
