"""Coordinator for the filter bar above the board."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable

from ...core.filters import count_by_filter
from ...domain.models import FilterType, UpdateType
from ...models.filter_model import FilterModel
from ...models.points_model import PointsModel
from ..views.interfaces import FilterSurface


class FilterCoordinator:
    """Keeps the filter bar in sync with the points and the active filter.

    A filter that would show no points is rendered disabled.
    """

    def __init__(
        self,
        surface: FilterSurface,
        filter_model: FilterModel,
        points_model: PointsModel,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._surface = surface
        self._filter_model = filter_model
        self._points_model = points_model
        self._clock = clock

        self._points_model.add_observer(self._handle_model_event)
        self._filter_model.add_observer(self._handle_model_event)

    def init(self) -> None:
        self._render()

    def availability(self) -> dict[FilterType, bool]:
        counts = count_by_filter(self._points_model.points, self._clock())
        return {filter_type: counts[filter_type] > 0 for filter_type in FilterType}

    def handle_filter_type_change(self, filter_type: FilterType) -> None:
        if self._filter_model.filter == filter_type:
            return
        self._filter_model.set_filter(UpdateType.MAJOR, filter_type)

    def _handle_model_event(self, _update_type: UpdateType, _data: Any = None) -> None:
        self._render()

    def _render(self) -> None:
        self._surface.show_filters(
            self._filter_model.filter,
            self.availability(),
            self.handle_filter_type_change,
        )


__all__ = ["FilterCoordinator"]
