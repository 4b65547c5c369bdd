"""Pure filter predicates over points."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from ..domain.models import FilterType, Point

PointPredicate = Callable[[Point, datetime], bool]


def _is_future(point: Point, now: datetime) -> bool:
    return point.date_from > now


def _is_present(point: Point, now: datetime) -> bool:
    return point.date_from <= now <= point.date_to


def _is_past(point: Point, now: datetime) -> bool:
    return point.date_to < now


FILTER_PREDICATES: dict[FilterType, PointPredicate] = {
    FilterType.EVERYTHING: lambda point, now: True,
    FilterType.FUTURE: _is_future,
    FilterType.PRESENT: _is_present,
    FilterType.PAST: _is_past,
}

EMPTY_LIST_MESSAGES: dict[FilterType, str] = {
    FilterType.EVERYTHING: "Click New Event to create your first point",
    FilterType.FUTURE: "There are no future events now",
    FilterType.PRESENT: "There are no present events now",
    FilterType.PAST: "There are no past events now",
}


def filter_points(
    points: Iterable[Point],
    filter_type: FilterType,
    now: Optional[datetime] = None,
) -> list[Point]:
    """Return a new list with the points matching *filter_type*.

    Input order is preserved; *points* is never modified.
    """

    moment = now or datetime.now(timezone.utc)
    predicate = FILTER_PREDICATES[filter_type]
    return [point for point in points if predicate(point, moment)]


def count_by_filter(
    points: Iterable[Point],
    now: Optional[datetime] = None,
) -> dict[FilterType, int]:
    """Return how many points each filter would show."""

    moment = now or datetime.now(timezone.utc)
    snapshot = list(points)
    return {
        filter_type: sum(1 for point in snapshot if predicate(point, moment))
        for filter_type, predicate in FILTER_PREDICATES.items()
    }


def empty_list_message(filter_type: FilterType) -> str:
    return EMPTY_LIST_MESSAGES[filter_type]


__all__ = [
    "EMPTY_LIST_MESSAGES",
    "FILTER_PREDICATES",
    "count_by_filter",
    "empty_list_message",
    "filter_points",
]
