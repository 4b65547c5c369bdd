"""Global interaction freeze bracketing the board's reactions."""

from __future__ import annotations

import logging
import time
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal
from PySide6.QtWidgets import QWidget

from ..config import BUSY_GATE_LOWER_LIMIT_MS, BUSY_GATE_UPPER_LIMIT_MS

_LOGGER = logging.getLogger(__name__)


class BusyGate(QObject):
    """Freeze user interaction while the board reacts to a change.

    ``block()`` arms two single-shot timers.  If the reaction is still running
    after ``lower_limit_ms`` the gate freezes (disabling ``target`` when one is
    given).  Once frozen it stays frozen until ``upper_limit_ms`` after the
    block started, so the freeze never flickers.  The release timer fires at
    ``upper_limit_ms`` whether or not ``unblock()`` was reached, which keeps a
    hung reaction from locking the UI forever.  The reaction itself is never
    cancelled.

    Nested ``block()`` calls are counted and only the outermost pair drives the
    timers; ``unblock()`` with nothing blocked does nothing.
    """

    frozenChanged = Signal(bool)

    def __init__(
        self,
        target: Optional[QWidget] = None,
        *,
        lower_limit_ms: int = BUSY_GATE_LOWER_LIMIT_MS,
        upper_limit_ms: int = BUSY_GATE_UPPER_LIMIT_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        if lower_limit_ms < 0 or upper_limit_ms < lower_limit_ms:
            raise ValueError(
                f"invalid busy gate limits: lower={lower_limit_ms} upper={upper_limit_ms}"
            )
        self._target = target
        self._lower_limit_ms = lower_limit_ms
        self._upper_limit_ms = upper_limit_ms
        self._depth = 0
        self._started_at = 0.0
        self._frozen = False

        self._freeze_timer = QTimer(self)
        self._freeze_timer.setSingleShot(True)
        self._freeze_timer.timeout.connect(self._freeze)

        self._release_timer = QTimer(self)
        self._release_timer.setSingleShot(True)
        self._release_timer.timeout.connect(self._release)

    @property
    def is_blocked(self) -> bool:
        return self._depth > 0

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def block(self) -> None:
        self._depth += 1
        if self._depth > 1:
            return
        self._started_at = time.monotonic()
        if not self._frozen:
            self._freeze_timer.start(self._lower_limit_ms)
        # A block during a held freeze extends it from now.
        self._release_timer.start(self._upper_limit_ms)

    def unblock(self) -> None:
        if self._depth == 0:
            return
        self._depth -= 1
        if self._depth > 0:
            return

        elapsed_ms = (time.monotonic() - self._started_at) * 1000
        if not self._frozen and elapsed_ms < self._lower_limit_ms:
            self._freeze_timer.stop()
            self._release_timer.stop()
            return
        # Frozen: hold until the release timer fires at the upper limit.

    def _freeze(self) -> None:
        if self._frozen:
            return
        _LOGGER.debug("Busy gate frozen")
        self._frozen = True
        if self._target is not None:
            self._target.setEnabled(False)
        self.frozenChanged.emit(True)

    def _release(self) -> None:
        self._freeze_timer.stop()
        if self._depth:
            _LOGGER.warning("Busy gate released after %d ms without unblock()", self._upper_limit_ms)
        self._depth = 0
        if not self._frozen:
            return
        self._frozen = False
        if self._target is not None:
            self._target.setEnabled(True)
        self.frozenChanged.emit(False)


__all__ = ["BusyGate"]
