"""Presenter for a single row of the board."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional

from ...domain.models import Mode, Point, ReferenceData, UpdateType, UserAction
from ..viewmodels.signal import ObservableProperty
from ..views.interfaces import (
    PointCardView,
    PointFormView,
    PointListContainer,
    PointViewFactory,
)
from .base import BasePointPresenter, DataChangeHandler


class PointPresenter(BasePointPresenter):
    """Owns the card and the edit form of one point.

    Only one of the two views is mounted in the list container at a time;
    ``mode`` tells which.
    """

    def __init__(
        self,
        container: PointListContainer,
        view_factory: PointViewFactory,
        reference: ReferenceData,
        on_data_change: DataChangeHandler,
        on_mode_change: Callable[[], None],
    ) -> None:
        super().__init__(on_data_change)
        self._container = container
        self._factory = view_factory
        self._reference = reference
        self._on_mode_change = on_mode_change

        self._point: Optional[Point] = None
        self._card: Optional[PointCardView] = None
        self._form: Optional[PointFormView] = None
        self.mode = ObservableProperty(Mode.DEFAULT)

    @property
    def point(self) -> Optional[Point]:
        return self._point

    def init(self, point: Point) -> None:
        """Render *point*, replacing whatever view is currently mounted."""

        self._point = point
        prev_card = self._card
        prev_form = self._form

        self._card = self._factory.create_card(point, self._reference)
        self._card.edit_requested.connect(self._handle_edit_click)
        self._card.favorite_toggled.connect(self._handle_favorite_click)

        self._form = self._factory.create_form(point, self._reference)
        self._form.submitted.connect(self._handle_form_submit)
        self._form.delete_requested.connect(self._handle_delete_click)
        self._form.rollup_requested.connect(self._handle_rollup_click)
        self._form.cancel_requested.connect(self._handle_cancel)

        if prev_card is None or prev_form is None:
            self._container.append(self._card)
            return

        if self.mode.value is Mode.DEFAULT:
            self._container.replace(self._card, prev_card)
        else:
            self._container.replace(self._card, prev_form)
            self.mode.value = Mode.DEFAULT
        self._container.remove(prev_card)
        self._container.remove(prev_form)

    def destroy(self) -> None:
        if self._card is None:
            return
        self._container.remove(self._card)
        self._container.remove(self._form)
        self._card = None
        self._form = None

    def reset_view(self) -> None:
        if self.mode.value is not Mode.DEFAULT and self._form is not None:
            self._form.reset(self._point)
            self._replace_form_to_card()

    def set_saving(self) -> None:
        if self.mode.value is Mode.EDITING:
            self._form.set_form_state(is_disabled=True, is_saving=True)

    def set_deleting(self) -> None:
        if self.mode.value is Mode.EDITING:
            self._form.set_form_state(is_disabled=True, is_deleting=True)

    def set_aborting(self) -> None:
        if self.mode.value is Mode.DEFAULT:
            self._card.shake()
            return

        form = self._form
        form.shake(lambda: form.set_form_state())

    # ------------------------------------------------------------------
    # View switching
    # ------------------------------------------------------------------
    def _replace_card_to_form(self) -> None:
        self._container.replace(self._form, self._card)
        # Other rows collapse before this one is marked as editing.
        self._on_mode_change()
        self.mode.value = Mode.EDITING

    def _replace_form_to_card(self) -> None:
        self._container.replace(self._card, self._form)
        self.mode.value = Mode.DEFAULT

    # ------------------------------------------------------------------
    # View callbacks
    # ------------------------------------------------------------------
    def _handle_edit_click(self) -> None:
        self._replace_card_to_form()

    def _handle_favorite_click(self) -> None:
        self._dispatch(
            UserAction.UPDATE,
            UpdateType.PATCH,
            replace(self._point, is_favorite=not self._point.is_favorite),
        )

    def _handle_form_submit(self, point: Point) -> None:
        self._dispatch(UserAction.UPDATE, UpdateType.MINOR, point)

    def _handle_delete_click(self, point: Point) -> None:
        self._dispatch(UserAction.DELETE, UpdateType.MINOR, point)

    def _handle_rollup_click(self) -> None:
        self.reset_view()

    def _handle_cancel(self) -> None:
        self.reset_view()


__all__ = ["PointPresenter"]
