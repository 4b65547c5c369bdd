"""Authoritative collection of trip points."""

from __future__ import annotations

import logging
from typing import Optional

from ..application.interfaces import ITripApi
from ..domain.models import Point, UpdateType
from ..errors import (
    ApiError,
    PointAddError,
    PointDeleteError,
    PointNotFoundError,
    PointUpdateError,
)
from .observable import Observable

_LOGGER = logging.getLogger(__name__)


class PointsModel(Observable):
    """Holds the point collection and persists mutations through the API.

    The collection only changes after the API confirms a mutation, and each
    confirmed change is announced with the caller's update type.  A failed
    call leaves the collection untouched and raises a ``MutationError``.
    """

    def __init__(self, api: ITripApi) -> None:
        super().__init__()
        self._api = api
        self._points: list[Point] = []

    @property
    def points(self) -> list[Point]:
        """Return a snapshot of the current collection."""

        return list(self._points)

    def get(self, point_id: str) -> Optional[Point]:
        for point in self._points:
            if point.id == point_id:
                return point
        return None

    async def init(self) -> None:
        try:
            self._points = list(await self._api.get_points())
        except ApiError as exc:
            _LOGGER.warning("Failed to load points, starting empty: %s", exc)
            self._points = []
        _LOGGER.info("Loaded %d points", len(self._points))
        self._notify(UpdateType.INIT)

    async def update_point(self, update_type: UpdateType, update: Point) -> None:
        index = self._index_of(update.id)
        if index == -1:
            raise PointNotFoundError(f"Can't update unexisting point {update.id!r}")

        try:
            updated = await self._api.update_point(update)
        except ApiError as exc:
            _LOGGER.warning("Update of point %s failed: %s", update.id, exc)
            raise PointUpdateError(f"Can't update point {update.id!r}") from exc

        # The collection may have shifted while the request was in flight.
        index = self._index_of(update.id)
        if index == -1:
            raise PointNotFoundError(f"Point {update.id!r} vanished during update")
        self._points = [*self._points[:index], updated, *self._points[index + 1:]]
        self._notify(update_type, updated)

    async def add_point(self, update_type: UpdateType, update: Point) -> None:
        try:
            new_point = await self._api.add_point(update)
        except ApiError as exc:
            _LOGGER.warning("Adding point failed: %s", exc)
            raise PointAddError("Can't add point") from exc

        self._points = [new_point, *self._points]
        self._notify(update_type, new_point)

    async def delete_point(self, update_type: UpdateType, update: Point) -> None:
        if self._index_of(update.id) == -1:
            raise PointNotFoundError(f"Can't delete unexisting point {update.id!r}")

        try:
            await self._api.delete_point(update)
        except ApiError as exc:
            _LOGGER.warning("Deleting point %s failed: %s", update.id, exc)
            raise PointDeleteError(f"Can't delete point {update.id!r}") from exc

        self._points = [point for point in self._points if point.id != update.id]
        self._notify(update_type)

    def _index_of(self, point_id: Optional[str]) -> int:
        for index, point in enumerate(self._points):
            if point.id == point_id:
                return index
        return -1


__all__ = ["PointsModel"]
