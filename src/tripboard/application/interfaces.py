from abc import ABC, abstractmethod
from typing import List

from tripboard.domain.models import Destination, OfferGroup, Point


class ITripApi(ABC):
    """Remote persistence consumed by the data models.

    Implementations raise :class:`tripboard.errors.ApiError` on failure.
    """

    @abstractmethod
    async def get_points(self) -> List[Point]:
        ...

    @abstractmethod
    async def get_destinations(self) -> List[Destination]:
        ...

    @abstractmethod
    async def get_offers(self) -> List[OfferGroup]:
        ...

    @abstractmethod
    async def update_point(self, point: Point) -> Point:
        """Persist *point* and return the stored version."""

    @abstractmethod
    async def add_point(self, point: Point) -> Point:
        """Persist a new point and return it with its assigned id."""

    @abstractmethod
    async def delete_point(self, point: Point) -> None:
        ...
