"""Active filter selection."""

from __future__ import annotations

from ..domain.models import DEFAULT_FILTER_TYPE, FilterType, UpdateType
from .observable import Observable


class FilterModel(Observable):
    def __init__(self) -> None:
        super().__init__()
        self._filter = DEFAULT_FILTER_TYPE

    @property
    def filter(self) -> FilterType:
        return self._filter

    def set_filter(self, update_type: UpdateType, filter_type: FilterType) -> None:
        """Replace the active filter and notify, even when it is unchanged."""

        self._filter = filter_type
        self._notify(update_type, filter_type)


__all__ = ["FilterModel"]
