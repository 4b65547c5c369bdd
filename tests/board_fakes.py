"""Qt-free stand-ins for the board's views and busy gate."""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from tripboard.domain.models import (
    Destination,
    FilterType,
    Offer,
    OfferGroup,
    Point,
    PointType,
    ReferenceData,
    UpdateType,
)
from tripboard.gui.coordinators.board_coordinator import BoardCoordinator
from tripboard.gui.viewmodels.signal import Signal
from tripboard.infrastructure.memory_api import InMemoryTripApi
from tripboard.models.filter_model import FilterModel
from tripboard.models.points_model import PointsModel
from tripboard.models.reference_model import ReferenceModel

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)

REFERENCE = ReferenceData(
    destinations=(
        Destination(id="dst-1", name="Amsterdam", description="Canals"),
        Destination(id="dst-2", name="Geneva", description="Lake"),
    ),
    offers=(
        OfferGroup(
            type=PointType.TAXI,
            offers=(
                Offer(id="off-1", title="Business class", price=120),
                Offer(id="off-2", title="Radio", price=60),
            ),
        ),
        OfferGroup(type=PointType.FLIGHT, offers=(Offer(id="off-3", title="Luggage", price=50),)),
    ),
)


def build_point(
    point_id="p1",
    *,
    start_hours=24,
    duration_hours=2,
    price=100,
    point_type=PointType.TAXI,
    destination="dst-1",
    offers=(),
    is_favorite=False,
) -> Point:
    """Point starting ``start_hours`` after :data:`NOW` (negative for the past)."""

    date_from = NOW + timedelta(hours=start_hours)
    return Point(
        id=point_id,
        type=point_type,
        base_price=price,
        date_from=date_from,
        date_to=date_from + timedelta(hours=duration_hours),
        destination=destination,
        offers=tuple(offers),
        is_favorite=is_favorite,
    )


class FakeCard:
    def __init__(self, point, reference):
        self.point = point
        self.reference = reference
        self.edit_requested = Signal()
        self.favorite_toggled = Signal()
        self.shakes = 0

    def shake(self, callback=None):
        self.shakes += 1
        if callback is not None:
            callback()


class FakeForm:
    def __init__(self, point, reference, is_new=False):
        self.point = point
        self.reference = reference
        self.is_new = is_new
        self.submitted = Signal()
        self.delete_requested = Signal()
        self.rollup_requested = Signal()
        self.cancel_requested = Signal()
        self.states = []
        self.resets = []
        self.shakes = 0

    @property
    def state(self):
        return self.states[-1] if self.states else None

    def set_form_state(self, *, is_disabled=False, is_saving=False, is_deleting=False):
        self.states.append(
            {"is_disabled": is_disabled, "is_saving": is_saving, "is_deleting": is_deleting}
        )

    def reset(self, point):
        self.resets.append(point)

    def shake(self, callback=None):
        self.shakes += 1
        if callback is not None:
            callback()


class FakeViewFactory:
    def __init__(self):
        self.cards = []
        self.forms = []

    def create_card(self, point, reference):
        card = FakeCard(point, reference)
        self.cards.append(card)
        return card

    def create_form(self, point, reference, *, is_new=False):
        form = FakeForm(point, reference, is_new=is_new)
        self.forms.append(form)
        return form


class FakeContainer:
    def __init__(self):
        self.views = []

    def append(self, view):
        self.views.append(view)

    def prepend(self, view):
        self.views.insert(0, view)

    def replace(self, new_view, old_view):
        index = self.views.index(old_view)
        self.views[index] = new_view

    def remove(self, view):
        if view in self.views:
            self.views.remove(view)


class FakeSurface:
    def __init__(self):
        self.list_container = FakeContainer()
        self.loading = False
        self.sort = None
        self.sort_callback = None
        self.empty = None
        self.list_shown = False
        self.calls = []

    def show_loading(self):
        self.calls.append("show_loading")
        self.loading = True

    def remove_loading(self):
        self.loading = False

    def show_sort(self, current, on_change):
        self.calls.append("show_sort")
        self.sort = current
        self.sort_callback = on_change

    def remove_sort(self):
        self.sort = None
        self.sort_callback = None

    def show_empty(self, filter_type):
        self.calls.append("show_empty")
        self.empty = filter_type

    def remove_empty(self):
        self.empty = None

    def show_list(self):
        self.calls.append("show_list")
        self.list_shown = True


class FakeGate:
    def __init__(self):
        self.blocks = 0
        self.unblocks = 0

    @property
    def depth(self):
        return self.blocks - self.unblocks

    def block(self):
        self.blocks += 1

    def unblock(self):
        self.unblocks += 1


class FakeFilterSurface:
    def __init__(self):
        self.renders = []
        self.on_change = None

    def show_filters(self, current, available, on_change):
        self.renders.append((current, dict(available)))
        self.on_change = on_change


def build_board(points=(), *, reference=None, now=None, api=None):
    """Wire a coordinator to real models over an instant in-memory API."""

    api = api or InMemoryTripApi(points, reference or REFERENCE, latency_ms=0)
    points_model = PointsModel(api)
    filter_model = FilterModel()
    reference_model = ReferenceModel(api)
    surface = FakeSurface()
    factory = FakeViewFactory()
    gate = FakeGate()
    clock_now = now or NOW
    board = BoardCoordinator(
        surface=surface,
        points_model=points_model,
        filter_model=filter_model,
        reference_model=reference_model,
        view_factory=factory,
        busy_gate=gate,
        clock=lambda: clock_now,
    )

    async def _load():
        board.init()
        await reference_model.init()
        await points_model.init()
        filter_model.set_filter(UpdateType.MAJOR, FilterType.EVERYTHING)

    env = SimpleNamespace(
        api=api,
        board=board,
        points_model=points_model,
        filter_model=filter_model,
        reference_model=reference_model,
        surface=surface,
        factory=factory,
        gate=gate,
    )
    env.load = lambda: asyncio.run(_load())
    return env


def visible_ids(env):
    """Ids of the row views currently mounted, in display order."""

    ids = []
    for view in env.surface.list_container.views:
        if isinstance(view, FakeForm) and view.is_new:
            ids.append(None)
        else:
            ids.append(view.point.id)
    return ids
