"""Desktop application bootstrap."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from PySide6 import QtAsyncio
from PySide6.QtWidgets import QApplication

from .application.interfaces import ITripApi
from .config import SAMPLE_SEED_PATH
from .domain.models import FilterType, UpdateType
from .gui.busy_gate import BusyGate
from .gui.coordinators.board_coordinator import BoardCoordinator
from .gui.coordinators.filter_coordinator import FilterCoordinator
from .gui.main_window import MainWindow
from .gui.views.point_widgets import QtPointViewFactory
from .infrastructure.memory_api import InMemoryTripApi
from .io.seed import load_seed
from .models.filter_model import FilterModel
from .models.points_model import PointsModel
from .models.reference_model import ReferenceModel
from .settings.manager import SettingsManager
from .utils.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


class TripBoardApp:
    """Wires the models, coordinators and widgets of one board window."""

    def __init__(
        self,
        window: MainWindow,
        api: ITripApi,
        settings: SettingsManager,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self.window = window
        self.points_model = PointsModel(api)
        self.filter_model = FilterModel()
        self.reference_model = ReferenceModel(api)

        self.busy_gate = BusyGate(
            window.centralWidget(),
            lower_limit_ms=settings.get("busy_gate.lower_limit_ms"),
            upper_limit_ms=settings.get("busy_gate.upper_limit_ms"),
            parent=window,
        )
        self.board = BoardCoordinator(
            surface=window.board,
            points_model=self.points_model,
            filter_model=self.filter_model,
            reference_model=self.reference_model,
            view_factory=QtPointViewFactory(settings.get("ui.shake_duration_ms")),
            busy_gate=self.busy_gate,
            clock=clock,
        )
        self.filters = FilterCoordinator(
            surface=window.filter_bar,
            filter_model=self.filter_model,
            points_model=self.points_model,
            clock=clock,
        )
        window.new_point_button.clicked.connect(self._handle_new_point_button_click)

    async def start(self) -> None:
        """Show the loading board, then load reference data before points."""

        self.board.init()
        self.board.new_point_presenter.is_open.changed.connect(self._handle_new_point_form_toggle)
        self.filters.init()
        await self.reference_model.init()
        await self.points_model.init()
        # INIT only lifts the loading state; the first full render is a MAJOR.
        self.filter_model.set_filter(UpdateType.MAJOR, FilterType.EVERYTHING)
        self.window.new_point_button.setEnabled(True)
        LOGGER.info("Board ready with %d points", len(self.points_model.points))

    def _handle_new_point_button_click(self) -> None:
        self.board.create_point()

    def _handle_new_point_form_toggle(self, is_open: bool, _was_open: bool) -> None:
        self.window.new_point_button.setEnabled(not is_open)


def build_api(settings: SettingsManager, seed_path: Optional[Path] = None) -> InMemoryTripApi:
    path = seed_path or settings.get("seed_path") or SAMPLE_SEED_PATH
    seed = load_seed(Path(path))
    return InMemoryTripApi(
        seed.points,
        seed.reference,
        latency_ms=settings.get("api.latency_ms"),
        failure_rate=settings.get("api.failure_rate"),
    )


def run(seed_path: Optional[Path] = None, settings_path: Optional[Path] = None) -> int:
    """Launch the desktop board and block until the window closes."""

    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)  # noqa: F841 - must outlive the loop

    settings = SettingsManager(settings_path)
    settings.load()
    api = build_api(settings, seed_path)

    window = MainWindow()
    trip_app = TripBoardApp(window, api, settings)
    window.show()
    LOGGER.info("Starting TripBoard with settings at %s", settings.path)
    QtAsyncio.run(trip_app.start(), keep_running=True, quit_qapp=True)
    return 0


__all__ = ["TripBoardApp", "build_api", "run"]
