"""Sort orders for the board.

``sorted`` is stable, so points with equal keys keep their input order and
re-rendering the same collection never reshuffles ties.
"""

from __future__ import annotations

from typing import Iterable

from ..domain.models import Point, SortType


def sort_date_up(points: Iterable[Point]) -> list[Point]:
    return sorted(points, key=lambda point: point.date_from)


def sort_price_down(points: Iterable[Point]) -> list[Point]:
    # Negated key instead of reverse=True so ties stay in input order.
    return sorted(points, key=lambda point: -point.base_price)


SORTERS = {
    SortType.DATE_FROM: sort_date_up,
    SortType.PRICE: sort_price_down,
}


def sort_points(points: Iterable[Point], sort_type: object) -> list[Point]:
    """Return *points* ordered by *sort_type*; unknown sorts keep input order."""

    sorter = SORTERS.get(sort_type)  # type: ignore[call-overload]
    if sorter is None:
        return list(points)
    return sorter(points)


__all__ = ["SORTERS", "sort_date_up", "sort_points", "sort_price_down"]
