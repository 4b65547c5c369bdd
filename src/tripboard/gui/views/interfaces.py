"""Contracts between presenters and the widgets that render them.

Presenters and coordinators only talk to these protocols, so the board logic
runs without Qt and tests can drive it with lightweight fakes.  The Qt
implementations live next to this module.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from ...domain.models import FilterType, Point, ReferenceData, SortType
from ..viewmodels.signal import Signal


@runtime_checkable
class PointCardView(Protocol):
    """Collapsed row.

    Signals: ``edit_requested()``, ``favorite_toggled()``.
    """

    edit_requested: Signal
    favorite_toggled: Signal

    def shake(self, callback: Optional[Callable[[], None]] = None) -> None:
        ...


@runtime_checkable
class PointFormView(Protocol):
    """Expanded edit form, also used for creating points.

    Signals: ``submitted(point)``, ``delete_requested(point)``,
    ``rollup_requested()``, ``cancel_requested()``.
    """

    submitted: Signal
    delete_requested: Signal
    rollup_requested: Signal
    cancel_requested: Signal

    def set_form_state(
        self,
        *,
        is_disabled: bool = False,
        is_saving: bool = False,
        is_deleting: bool = False,
    ) -> None:
        ...

    def reset(self, point: Point) -> None:
        ...

    def shake(self, callback: Optional[Callable[[], None]] = None) -> None:
        ...


class PointViewFactory(Protocol):
    def create_card(self, point: Point, reference: ReferenceData) -> PointCardView:
        ...

    def create_form(
        self,
        point: Point,
        reference: ReferenceData,
        *,
        is_new: bool = False,
    ) -> PointFormView:
        ...


class PointListContainer(Protocol):
    """Ordered holder for row views.

    ``remove`` also accepts views that are not currently mounted.
    """

    def append(self, view: Any) -> None:
        ...

    def prepend(self, view: Any) -> None:
        ...

    def replace(self, new_view: Any, old_view: Any) -> None:
        ...

    def remove(self, view: Any) -> None:
        ...


class BoardSurface(Protocol):
    """Board-level chrome around the point list.

    Every ``remove_*`` call must be safe when nothing is shown.
    """

    @property
    def list_container(self) -> PointListContainer:
        ...

    def show_loading(self) -> None:
        ...

    def remove_loading(self) -> None:
        ...

    def show_sort(self, current: SortType, on_change: Callable[[SortType], None]) -> None:
        ...

    def remove_sort(self) -> None:
        ...

    def show_empty(self, filter_type: FilterType) -> None:
        ...

    def remove_empty(self) -> None:
        ...

    def show_list(self) -> None:
        ...


class FilterSurface(Protocol):
    def show_filters(
        self,
        current: FilterType,
        available: dict[FilterType, bool],
        on_change: Callable[[FilterType], None],
    ) -> None:
        ...


__all__ = [
    "BoardSurface",
    "FilterSurface",
    "PointCardView",
    "PointFormView",
    "PointListContainer",
    "PointViewFactory",
]
