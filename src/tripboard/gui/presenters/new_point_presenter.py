"""Presenter for the "new event" form."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from ...domain.models import Point, ReferenceData, UpdateType, UserAction, blank_point
from ..viewmodels.signal import ObservableProperty
from ..views.interfaces import PointFormView, PointListContainer, PointViewFactory
from .base import BasePointPresenter, DataChangeHandler


class NewPointPresenter(BasePointPresenter):
    """Shows at most one creation form at the top of the list.

    ``is_open`` changes every time the form is opened or closed, whether it
    was cancelled, saved or torn down with the board.
    """

    def __init__(
        self,
        container: PointListContainer,
        view_factory: PointViewFactory,
        reference: ReferenceData,
        on_data_change: DataChangeHandler,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        super().__init__(on_data_change)
        self._container = container
        self._factory = view_factory
        self._reference = reference
        self._clock = clock
        self._form: Optional[PointFormView] = None
        self.is_open = ObservableProperty(False)

    def set_reference(self, reference: ReferenceData) -> None:
        """Use *reference* for forms opened from now on."""

        self._reference = reference

    def init(self) -> None:
        if self._form is not None:
            return

        self._form = self._factory.create_form(
            blank_point(self._clock()), self._reference, is_new=True
        )
        self._form.submitted.connect(self._handle_form_submit)
        self._form.delete_requested.connect(self._handle_cancel)
        self._form.rollup_requested.connect(self._handle_cancel)
        self._form.cancel_requested.connect(self._handle_cancel)
        self._container.prepend(self._form)
        self.is_open.value = True

    def destroy(self) -> None:
        if self._form is None:
            return

        self._container.remove(self._form)
        self._form = None
        self.is_open.value = False

    def set_saving(self) -> None:
        if self._form is not None:
            self._form.set_form_state(is_disabled=True, is_saving=True)

    def set_aborting(self) -> None:
        form = self._form
        if form is None:
            return
        form.shake(lambda: form.set_form_state())

    def _handle_form_submit(self, point: Point) -> None:
        self._dispatch(UserAction.ADD, UpdateType.MINOR, point)

    def _handle_cancel(self, *_args) -> None:
        self.destroy()


__all__ = ["NewPointPresenter"]
