"""End-to-end wiring of the desktop board with the bundled seed."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from pathlib import Path

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for app tests", exc_type=ImportError)
pytest.importorskip("pytestqt", reason="pytest-qt is required for app tests", exc_type=ImportError)

from tripboard.app import TripBoardApp, build_api
from tripboard.config import SAMPLE_SEED_PATH
from tripboard.gui.main_window import MainWindow
from tripboard.gui.views.point_widgets import PointCardWidget, PointFormWidget
from tripboard.infrastructure.memory_api import InMemoryTripApi
from tripboard.io.seed import load_seed
from tripboard.settings.manager import SettingsManager

NOW = datetime(2026, 6, 1, tzinfo=timezone.utc)


@pytest.fixture
def settings(tmp_path: Path) -> SettingsManager:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()
    return manager


@pytest.fixture
def trip_app(qtbot, settings):
    seed = load_seed(SAMPLE_SEED_PATH)
    window = MainWindow()
    qtbot.addWidget(window)
    api = InMemoryTripApi(seed.points, seed.reference, latency_ms=0)
    app = TripBoardApp(window, api, settings, clock=lambda: NOW)
    asyncio.run(app.start())
    return app


def _rows(trip_app):
    return trip_app.window.board.trip_list.views()


def test_start_renders_seed_points(trip_app):
    rows = _rows(trip_app)

    assert [row.__class__ for row in rows] == [PointCardWidget] * 4
    assert trip_app.board.presenter_ids == {"pt-1", "pt-2", "pt-3", "pt-4"}
    assert trip_app.window.new_point_button.isEnabled()
    assert trip_app.window.board.loading_label.isHidden()


def test_filter_bar_reflects_seed(trip_app):
    buttons = trip_app.window.filter_bar.buttons

    assert [button.isEnabled() for button in buttons.values()] == [True, True, False, True]


def test_new_point_button_opens_single_form(trip_app):
    window = trip_app.window

    window.new_point_button.click()

    form = _rows(trip_app)[0]
    assert isinstance(form, PointFormWidget)
    assert not window.new_point_button.isEnabled()

    form.delete_button.click()

    assert window.new_point_button.isEnabled()
    assert all(isinstance(row, PointCardWidget) for row in _rows(trip_app))


def test_favorite_toggle_round_trip(trip_app):
    card = _rows(trip_app)[0]
    presenter = trip_app.board.presenter_for("pt-1")

    async def _toggle():
        card.favorite_button.click()
        await asyncio.gather(*presenter._pending)

    asyncio.run(_toggle())

    assert trip_app.points_model.get("pt-1").is_favorite is True
    assert _rows(trip_app)[0].favorite_button.isChecked()


def test_build_api_uses_settings(settings):
    settings.set("api.latency_ms", 0)

    api = build_api(settings)

    points = asyncio.run(api.get_points())
    assert len(points) == 4
