"""Shared plumbing for point presenters."""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Callable

from ...domain.models import Point, UpdateType, UserAction

DataChangeHandler = Callable[[UserAction, UpdateType, Point], Any]

_logger = logging.getLogger(__name__)


class BasePointPresenter:
    """Forwards user actions to the board's data-change handler.

    The handler may be a coroutine function; its coroutine is scheduled on the
    running event loop and tracked until it finishes.
    """

    def __init__(self, on_data_change: DataChangeHandler) -> None:
        self._on_data_change = on_data_change
        self._pending: set[asyncio.Task] = set()

    def _dispatch(self, action: UserAction, update_type: UpdateType, point: Point) -> None:
        result = self._on_data_change(action, update_type, point)
        if not inspect.isawaitable(result):
            return
        task = asyncio.get_running_loop().create_task(result)
        self._pending.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if not task.cancelled() and task.exception() is not None:
            _logger.error("Data change handler failed", exc_info=task.exception())
