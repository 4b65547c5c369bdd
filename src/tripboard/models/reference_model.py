"""Destinations and offer catalog shared by every point."""

from __future__ import annotations

import logging

from ..application.interfaces import ITripApi
from ..domain.models import Destination, OfferGroup, ReferenceData, UpdateType
from ..errors import ApiError
from .observable import Observable

_LOGGER = logging.getLogger(__name__)


class ReferenceModel(Observable):
    """Loads the lookup tables once and announces them with ``LOAD``."""

    def __init__(self, api: ITripApi) -> None:
        super().__init__()
        self._api = api
        self._data = ReferenceData()

    @property
    def data(self) -> ReferenceData:
        return self._data

    @property
    def destinations(self) -> tuple[Destination, ...]:
        return self._data.destinations

    @property
    def offers(self) -> tuple[OfferGroup, ...]:
        return self._data.offers

    async def init(self) -> None:
        try:
            destinations = await self._api.get_destinations()
            offers = await self._api.get_offers()
        except ApiError as exc:
            _LOGGER.warning("Failed to load reference data: %s", exc)
            self._data = ReferenceData()
        else:
            self._data = ReferenceData(
                destinations=tuple(destinations),
                offers=tuple(offers),
            )
        self._notify(UpdateType.LOAD, self._data)


__all__ = ["ReferenceModel"]
