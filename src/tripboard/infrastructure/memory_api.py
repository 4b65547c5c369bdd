"""In-memory trip API with simulated latency and failures."""

from __future__ import annotations

import asyncio
import logging
import random
import uuid
from dataclasses import replace
from typing import Iterable, List, Optional

from ..application.interfaces import ITripApi
from ..config import API_FAILURE_RATE, API_LATENCY_MS
from ..domain.models import Destination, OfferGroup, Point, ReferenceData
from ..errors import ApiError

_LOGGER = logging.getLogger(__name__)


class InMemoryTripApi(ITripApi):
    """Stores points in a dict and answers after ``latency_ms``.

    ``failure_rate`` is the probability that a mutation is rejected;
    :meth:`fail_next` forces the next mutation to fail regardless.
    """

    def __init__(
        self,
        points: Iterable[Point] = (),
        reference: Optional[ReferenceData] = None,
        *,
        latency_ms: int = API_LATENCY_MS,
        failure_rate: float = API_FAILURE_RATE,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._points: dict[str, Point] = {}
        for point in points:
            if point.id is None:
                raise ValueError("Seed points must carry an id")
            self._points[point.id] = point
        self._reference = reference or ReferenceData()
        self._latency = max(0, latency_ms) / 1000.0
        self._failure_rate = failure_rate
        self._rng = rng or random.Random()
        self._forced_failures = 0

    def fail_next(self, count: int = 1) -> None:
        self._forced_failures += count

    async def get_points(self) -> List[Point]:
        await self._delay()
        return list(self._points.values())

    async def get_destinations(self) -> List[Destination]:
        await self._delay()
        return list(self._reference.destinations)

    async def get_offers(self) -> List[OfferGroup]:
        await self._delay()
        return list(self._reference.offers)

    async def update_point(self, point: Point) -> Point:
        await self._delay()
        self._maybe_fail("update", point)
        if point.id not in self._points:
            raise ApiError(f"Unknown point {point.id!r}")
        self._points[point.id] = point
        return point

    async def add_point(self, point: Point) -> Point:
        await self._delay()
        self._maybe_fail("add", point)
        stored = replace(point, id=uuid.uuid4().hex)
        self._points[stored.id] = stored
        return stored

    async def delete_point(self, point: Point) -> None:
        await self._delay()
        self._maybe_fail("delete", point)
        if self._points.pop(point.id, None) is None:
            raise ApiError(f"Unknown point {point.id!r}")

    async def _delay(self) -> None:
        if self._latency:
            await asyncio.sleep(self._latency)

    def _maybe_fail(self, operation: str, point: Point) -> None:
        if self._forced_failures:
            self._forced_failures -= 1
        elif not (self._failure_rate and self._rng.random() < self._failure_rate):
            return
        _LOGGER.debug("Rejecting %s of point %s", operation, point.id)
        raise ApiError(f"Simulated {operation} failure for point {point.id!r}")


__all__ = ["InMemoryTripApi"]
