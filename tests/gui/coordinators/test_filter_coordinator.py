from __future__ import annotations

import asyncio
from unittest.mock import Mock

from board_fakes import NOW, FakeFilterSurface, build_point
from tripboard.domain.models import FilterType, UpdateType
from tripboard.gui.coordinators.filter_coordinator import FilterCoordinator
from tripboard.infrastructure.memory_api import InMemoryTripApi
from tripboard.models.filter_model import FilterModel
from tripboard.models.points_model import PointsModel


def _make(*points):
    points_model = PointsModel(InMemoryTripApi(points, latency_ms=0))
    filter_model = FilterModel()
    surface = FakeFilterSurface()
    coordinator = FilterCoordinator(surface, filter_model, points_model, clock=lambda: NOW)
    return coordinator, surface, filter_model, points_model


def test_init_renders_active_filter():
    coordinator, surface, *_ = _make()

    coordinator.init()

    current, available = surface.renders[-1]
    assert current is FilterType.EVERYTHING
    assert set(available) == set(FilterType)
    assert surface.on_change == coordinator.handle_filter_type_change


def test_filters_without_points_are_disabled():
    coordinator, surface, _, points_model = _make(
        build_point("future", start_hours=5),
        build_point("past", start_hours=-5),
    )
    asyncio.run(points_model.init())

    _, available = surface.renders[-1]
    assert available == {
        FilterType.EVERYTHING: True,
        FilterType.FUTURE: True,
        FilterType.PRESENT: False,
        FilterType.PAST: True,
    }


def test_selecting_a_new_filter_sets_major():
    coordinator, surface, filter_model, _ = _make()
    observer = Mock()
    filter_model.add_observer(observer)

    surface_callback_count = len(surface.renders)
    coordinator.handle_filter_type_change(FilterType.PAST)

    observer.assert_called_once_with(UpdateType.MAJOR, FilterType.PAST)
    assert surface.renders[-1][0] is FilterType.PAST
    assert len(surface.renders) == surface_callback_count + 1


def test_reselecting_active_filter_is_noop():
    coordinator, _, filter_model, _ = _make()
    observer = Mock()
    filter_model.add_observer(observer)

    coordinator.handle_filter_type_change(FilterType.EVERYTHING)

    observer.assert_not_called()


def test_rerenders_after_point_changes():
    coordinator, surface, _, points_model = _make(build_point("a", start_hours=5))
    asyncio.run(points_model.init())
    assert surface.renders[-1][1][FilterType.FUTURE] is True

    asyncio.run(points_model.delete_point(UpdateType.MINOR, points_model.get("a")))

    assert surface.renders[-1][1][FilterType.FUTURE] is False
