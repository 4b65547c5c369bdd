"""Pure Python signal system with no Qt dependency.

Provides ``Signal`` for observer-pattern callbacks and ``ObservableProperty``
for data-binding between presenters and views.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

_logger = logging.getLogger(__name__)


class Signal:
    """Observer list that does not depend on Qt.

    Thread-safe: all handler mutations and emissions are protected by a lock.
    By default exceptions raised by individual handlers are caught and logged
    so that one failing view handler does not prevent subsequent handlers from
    executing.  Model notifications are created with ``swallow_errors=False``:
    a handler that detects a broken invariant must be able to abort the
    notification loudly.
    """

    def __init__(self, *, swallow_errors: bool = True) -> None:
        self._handlers: list[Callable] = []
        self._lock = threading.Lock()
        self._swallow_errors = swallow_errors

    def connect(self, handler: Callable) -> None:
        with self._lock:
            if handler not in self._handlers:
                self._handlers.append(handler)

    def emit(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            handlers = list(self._handlers)
        for handler in handlers:
            if not self._swallow_errors:
                handler(*args, **kwargs)
                continue
            try:
                handler(*args, **kwargs)
            except Exception as exc:
                _logger.error("Signal handler %r failed: %s", handler, exc)


class ObservableProperty:
    """Value holder that emits ``changed(new_value, old_value)`` whenever
    the value is set to a different object.
    """

    def __init__(self, initial_value: Any = None) -> None:
        self._value = initial_value
        self.changed = Signal()

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._value != new_value:
            old_value = self._value
            self._value = new_value
            self.changed.emit(new_value, old_value)
