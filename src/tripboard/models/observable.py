"""Observer base shared by the data models."""

from __future__ import annotations

from typing import Any, Callable

from ..domain.models import UpdateType
from ..gui.viewmodels.signal import Signal

Observer = Callable[[UpdateType, Any], None]


class Observable:
    """Notifies ``observer(update_type, payload)`` on every change.

    Observer errors propagate to the caller of :meth:`_notify`.
    """

    def __init__(self) -> None:
        self._changed = Signal(swallow_errors=False)

    def add_observer(self, observer: Observer) -> None:
        self._changed.connect(observer)

    def _notify(self, update_type: UpdateType, payload: Any = None) -> None:
        self._changed.emit(update_type, payload)


__all__ = ["Observable", "Observer"]
