"""Domain entities and enumerations for the trip board."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class UpdateType(Enum):
    """Blast radius of a change notification."""

    PATCH = "PATCH"
    MINOR = "MINOR"
    MAJOR = "MAJOR"
    INIT = "INIT"
    LOAD = "LOAD"


class UserAction(Enum):
    UPDATE = "UPDATE"
    ADD = "ADD"
    DELETE = "DELETE"


class SortType(Enum):
    DATE_FROM = "date_from"
    PRICE = "price"


class FilterType(Enum):
    EVERYTHING = "everything"
    FUTURE = "future"
    PRESENT = "present"
    PAST = "past"


class Mode(Enum):
    """Row presenter display mode."""

    DEFAULT = "DEFAULT"
    EDITING = "EDITING"


class PointType(Enum):
    TAXI = "taxi"
    BUS = "bus"
    TRAIN = "train"
    SHIP = "ship"
    DRIVE = "drive"
    FLIGHT = "flight"
    CHECK_IN = "check-in"
    SIGHTSEEING = "sightseeing"
    RESTAURANT = "restaurant"


DEFAULT_SORT_TYPE = SortType.DATE_FROM
DEFAULT_FILTER_TYPE = FilterType.EVERYTHING
DEFAULT_POINT_TYPE = PointType.FLIGHT


@dataclass(frozen=True)
class Picture:
    src: str = ""
    description: str = ""


@dataclass(frozen=True)
class Destination:
    id: str
    name: str
    description: str = ""
    pictures: tuple[Picture, ...] = ()


@dataclass(frozen=True)
class Offer:
    id: str
    title: str
    price: int = 0


@dataclass(frozen=True)
class OfferGroup:
    """Offers available for a single point type."""

    type: PointType
    offers: tuple[Offer, ...] = ()


@dataclass(frozen=True)
class ReferenceData:
    """Lookup tables referenced by points; replaced wholesale on LOAD."""

    destinations: tuple[Destination, ...] = ()
    offers: tuple[OfferGroup, ...] = ()

    def destination_by_id(self, destination_id: Optional[str]) -> Optional[Destination]:
        for destination in self.destinations:
            if destination.id == destination_id:
                return destination
        return None

    def offers_for_type(self, point_type: PointType) -> tuple[Offer, ...]:
        for group in self.offers:
            if group.type == point_type:
                return group.offers
        return ()


@dataclass(frozen=True)
class Point:
    """A single schedulable trip event.

    ``id`` is ``None`` only for points that have not been persisted yet.
    """

    id: Optional[str]
    type: PointType
    base_price: int
    date_from: datetime
    date_to: datetime
    destination: Optional[str] = None
    offers: tuple[str, ...] = field(default_factory=tuple)
    is_favorite: bool = False

    @property
    def duration(self):
        return self.date_to - self.date_from


def blank_point(now: Optional[datetime] = None) -> Point:
    """Return the template used by the creation form."""

    moment = now or datetime.now(timezone.utc)
    return Point(
        id=None,
        type=DEFAULT_POINT_TYPE,
        base_price=0,
        date_from=moment,
        date_to=moment,
    )


__all__ = [
    "DEFAULT_FILTER_TYPE",
    "DEFAULT_POINT_TYPE",
    "DEFAULT_SORT_TYPE",
    "Destination",
    "FilterType",
    "Mode",
    "Offer",
    "OfferGroup",
    "Picture",
    "Point",
    "PointType",
    "ReferenceData",
    "SortType",
    "UpdateType",
    "UserAction",
    "blank_point",
]
