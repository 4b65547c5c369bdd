"""Filtering and sorting of points are pure and stable."""

from __future__ import annotations

from datetime import timedelta

import pytest

from board_fakes import NOW, build_point
from tripboard.core.filters import (
    EMPTY_LIST_MESSAGES,
    count_by_filter,
    empty_list_message,
    filter_points,
)
from tripboard.core.sorting import sort_date_up, sort_points, sort_price_down
from tripboard.domain.models import FilterType, SortType


@pytest.fixture
def timeline():
    past = build_point("past", start_hours=-48)
    present = build_point("present", start_hours=-1, duration_hours=3)
    future = build_point("future", start_hours=48)
    return [future, past, present]


class TestFilterPoints:
    def test_everything_keeps_input_order(self, timeline):
        assert filter_points(timeline, FilterType.EVERYTHING, NOW) == timeline

    @pytest.mark.parametrize(
        ("filter_type", "expected"),
        [
            (FilterType.FUTURE, ["future"]),
            (FilterType.PRESENT, ["present"]),
            (FilterType.PAST, ["past"]),
        ],
    )
    def test_predicates(self, timeline, filter_type, expected):
        assert [p.id for p in filter_points(timeline, filter_type, NOW)] == expected

    def test_point_starting_now_is_present_not_future(self):
        point = build_point("edge", start_hours=0)

        assert filter_points([point], FilterType.FUTURE, NOW) == []
        assert filter_points([point], FilterType.PRESENT, NOW) == [point]

    def test_input_is_not_modified(self, timeline):
        before = list(timeline)

        filter_points(timeline, FilterType.PAST, NOW)

        assert timeline == before

    def test_count_by_filter(self, timeline):
        counts = count_by_filter(timeline, NOW)

        assert counts == {
            FilterType.EVERYTHING: 3,
            FilterType.FUTURE: 1,
            FilterType.PRESENT: 1,
            FilterType.PAST: 1,
        }

    def test_every_filter_has_an_empty_message(self):
        assert set(EMPTY_LIST_MESSAGES) == set(FilterType)
        assert "first point" in empty_list_message(FilterType.EVERYTHING)


class TestSortPoints:
    def test_price_sort_orders_by_cost_descending(self):
        t1 = build_point("t1", start_hours=1, price=50)
        t2 = build_point("t2", start_hours=2, price=10)
        t3 = build_point("t3", start_hours=3, price=30)

        ordered = sort_points([t1, t2, t3], SortType.PRICE)

        assert [p.id for p in ordered] == ["t1", "t3", "t2"]

    def test_date_sort_is_ascending(self):
        late = build_point("late", start_hours=10)
        early = build_point("early", start_hours=1)

        assert [p.id for p in sort_date_up([late, early])] == ["early", "late"]

    def test_price_ties_keep_input_order(self):
        points = [build_point(f"p{i}", start_hours=i, price=70) for i in range(4)]
        shuffled = [points[2], points[0], points[3], points[1]]

        assert sort_price_down(shuffled) == shuffled

    def test_date_ties_keep_input_order(self):
        a = build_point("a")
        b = build_point("b")

        assert sort_date_up([b, a]) == [b, a]

    def test_unknown_sort_keeps_input_order(self):
        points = [build_point("b", price=1), build_point("a", price=9)]

        assert sort_points(points, "offers") == points

    def test_sorting_returns_a_new_list(self):
        points = [build_point("b", start_hours=5), build_point("a", start_hours=1)]

        result = sort_points(points, SortType.DATE_FROM)

        assert result is not points
        assert [p.id for p in points] == ["b", "a"]


def test_duration_property():
    point = build_point(duration_hours=5)
    assert point.duration == timedelta(hours=5)
