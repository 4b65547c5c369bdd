"""Coordinator that keeps the trip board in step with its data sources.

The board listens to three models (points, filter, reference data) through a
single notification handler and routes every user mutation through
:meth:`BoardCoordinator.handle_view_action`.  The view is never patched with
the result of a mutation directly: a successful mutation makes the points
model notify, and the notification handler reconciles the board.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Protocol

from ...core.filters import filter_points
from ...core.sorting import sort_points
from ...domain.models import (
    DEFAULT_SORT_TYPE,
    FilterType,
    Point,
    ReferenceData,
    SortType,
    UpdateType,
    UserAction,
)
from ...errors import MutationError, PointNotFoundError, PresenterNotFoundError
from ...models.filter_model import FilterModel
from ...models.points_model import PointsModel
from ...models.reference_model import ReferenceModel
from ..presenters.new_point_presenter import NewPointPresenter
from ..presenters.point_presenter import PointPresenter
from ..views.interfaces import BoardSurface, PointViewFactory

_LOGGER = logging.getLogger(__name__)

# Failures that roll a single row back.  Contract violations raised while the
# model notifies are not among them and propagate.
_REJECTIONS = (MutationError, PointNotFoundError)


class Gate(Protocol):
    def block(self) -> None:
        ...

    def unblock(self) -> None:
        ...


class BoardCoordinator:
    """Owns the board's derived state and its live row presenters."""

    def __init__(
        self,
        surface: BoardSurface,
        points_model: PointsModel,
        filter_model: FilterModel,
        reference_model: ReferenceModel,
        view_factory: PointViewFactory,
        busy_gate: Gate,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._surface = surface
        self._points_model = points_model
        self._filter_model = filter_model
        self._reference_model = reference_model
        self._view_factory = view_factory
        self._busy_gate = busy_gate
        self._clock = clock

        self._point_presenters: dict[str, PointPresenter] = {}
        self._new_point_presenter: Optional[NewPointPresenter] = None
        self._reference = ReferenceData()

        self._current_sort_type = DEFAULT_SORT_TYPE
        self._filter_type = filter_model.filter
        self._is_loading = True

        self._points_model.add_observer(self.handle_model_event)
        self._reference_model.add_observer(self.handle_model_event)
        self._filter_model.add_observer(self.handle_model_event)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    @property
    def points(self) -> list[Point]:
        """The points to show: filtered by the active filter, then sorted."""

        self._filter_type = self._filter_model.filter
        filtered = filter_points(self._points_model.points, self._filter_type, self._clock())
        return sort_points(filtered, self._current_sort_type)

    @property
    def current_sort_type(self) -> SortType:
        return self._current_sort_type

    @property
    def filter_type(self) -> FilterType:
        return self._filter_type

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def reference(self) -> ReferenceData:
        return self._reference

    @property
    def presenter_ids(self) -> set[str]:
        return set(self._point_presenters)

    def presenter_for(self, point_id: str) -> PointPresenter:
        try:
            return self._point_presenters[point_id]
        except KeyError:
            raise PresenterNotFoundError(
                f"No presenter is rendered for point {point_id!r}"
            ) from None

    @property
    def new_point_presenter(self) -> Optional[NewPointPresenter]:
        return self._new_point_presenter

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------
    def init(self) -> None:
        self._new_point_presenter = NewPointPresenter(
            container=self._surface.list_container,
            view_factory=self._view_factory,
            reference=self._reference,
            on_data_change=self.handle_view_action,
            clock=self._clock,
        )
        self._render_board()

    def create_point(self) -> None:
        self._current_sort_type = DEFAULT_SORT_TYPE
        self._filter_model.set_filter(UpdateType.MAJOR, FilterType.EVERYTHING)
        self._new_point_presenter.init()

    # ------------------------------------------------------------------
    # Model notifications
    # ------------------------------------------------------------------
    def handle_model_event(self, update_type: UpdateType, data: Any = None) -> None:
        self._busy_gate.block()
        try:
            _LOGGER.debug("Board notification %s", update_type.name)
            if update_type is UpdateType.PATCH:
                self.presenter_for(data.id).init(data)
            elif update_type is UpdateType.MINOR:
                self._clear_board()
                self._render_board()
            elif update_type is UpdateType.MAJOR:
                self._clear_board(reset_sort_type=True)
                self._render_board()
            elif update_type is UpdateType.INIT:
                self._is_loading = False
                self._surface.remove_loading()
            elif update_type is UpdateType.LOAD:
                self._reference = data
                if self._new_point_presenter is not None:
                    self._new_point_presenter.set_reference(data)
        finally:
            self._busy_gate.unblock()

    # ------------------------------------------------------------------
    # User mutations
    # ------------------------------------------------------------------
    async def handle_view_action(
        self,
        action: UserAction,
        update_type: UpdateType,
        update: Point,
    ) -> None:
        if action is UserAction.UPDATE:
            self.presenter_for(update.id).set_saving()
            try:
                await self._points_model.update_point(update_type, update)
            except _REJECTIONS:
                self._abort_row(update.id)
        elif action is UserAction.ADD:
            self._new_point_presenter.set_saving()
            try:
                await self._points_model.add_point(update_type, update)
            except _REJECTIONS:
                self._new_point_presenter.set_aborting()
        elif action is UserAction.DELETE:
            self.presenter_for(update.id).set_deleting()
            try:
                await self._points_model.delete_point(update_type, update)
            except _REJECTIONS:
                self._abort_row(update.id)

    def _abort_row(self, point_id: str) -> None:
        # The board may have been rebuilt while the request was in flight.
        presenter = self._point_presenters.get(point_id)
        if presenter is not None:
            presenter.set_aborting()

    # ------------------------------------------------------------------
    # View callbacks
    # ------------------------------------------------------------------
    def handle_mode_change(self) -> None:
        self._new_point_presenter.destroy()
        for presenter in self._point_presenters.values():
            presenter.reset_view()

    def handle_sort_type_change(self, sort_type: SortType) -> None:
        if self._current_sort_type == sort_type:
            return

        self._current_sort_type = sort_type
        self._clear_board()
        self._render_board()

    # ------------------------------------------------------------------
    # Board lifecycle
    # ------------------------------------------------------------------
    def _clear_board(self, *, reset_sort_type: bool = False) -> None:
        for presenter in self._point_presenters.values():
            presenter.destroy()
        self._point_presenters.clear()
        if self._new_point_presenter is not None:
            self._new_point_presenter.destroy()

        self._surface.remove_sort()
        self._surface.remove_loading()
        self._surface.remove_empty()

        if reset_sort_type:
            self._current_sort_type = DEFAULT_SORT_TYPE

    def _render_board(self) -> None:
        if self._is_loading:
            self._surface.show_loading()
            return

        self._surface.show_sort(self._current_sort_type, self.handle_sort_type_change)

        points = self.points
        if not points:
            self._surface.show_empty(self._filter_type)
            return

        self._surface.show_list()
        for point in points:
            self._render_point(point)

    def _render_point(self, point: Point) -> None:
        presenter = PointPresenter(
            container=self._surface.list_container,
            view_factory=self._view_factory,
            reference=self._reference,
            on_data_change=self.handle_view_action,
            on_mode_change=self.handle_mode_change,
        )
        presenter.init(point)
        self._point_presenters[point.id] = presenter


__all__ = ["BoardCoordinator", "Gate"]
