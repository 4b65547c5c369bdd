"""Tests for the pure Python Signal and ObservableProperty classes."""

import pytest

from tripboard.domain.models import Mode
from tripboard.gui.viewmodels.signal import ObservableProperty, Signal


class TestSignal:
    def test_connect_and_emit(self):
        sig = Signal()
        received = []
        sig.connect(lambda v: received.append(v))

        sig.emit(42)

        assert received == [42]

    def test_handlers_run_in_connection_order(self):
        sig = Signal()
        calls = []
        sig.connect(lambda: calls.append("first"))
        sig.connect(lambda: calls.append("second"))

        sig.emit()

        assert calls == ["first", "second"]

    def test_duplicate_connect_ignored(self):
        sig = Signal()
        calls = []
        handler = lambda: calls.append(True)
        sig.connect(handler)
        sig.connect(handler)

        sig.emit()

        assert calls == [True]

    def test_handler_exception_does_not_break_others(self):
        sig = Signal()
        received = []

        def bad_handler(v):
            raise RuntimeError("boom")

        sig.connect(bad_handler)
        sig.connect(lambda v: received.append(v))

        sig.emit(1)

        assert received == [1]

    def test_strict_signal_propagates_handler_errors(self):
        sig = Signal(swallow_errors=False)
        received = []

        def bad_handler(v):
            raise LookupError("missing row")

        sig.connect(bad_handler)
        sig.connect(lambda v: received.append(v))

        with pytest.raises(LookupError):
            sig.emit(1)
        assert received == []


class TestObservableProperty:
    def test_default_none(self):
        prop = ObservableProperty()
        assert prop.value is None

    def test_changed_emits_new_and_old_value(self):
        prop = ObservableProperty(Mode.DEFAULT)
        changes = []
        prop.changed.connect(lambda new, old: changes.append((new, old)))

        prop.value = Mode.EDITING

        assert changes == [(Mode.EDITING, Mode.DEFAULT)]

    def test_no_emit_when_same_value(self):
        prop = ObservableProperty(False)
        changes = []
        prop.changed.connect(lambda new, old: changes.append((new, old)))

        prop.value = False

        assert changes == []

    def test_toggle_sequence(self):
        prop = ObservableProperty(False)
        changes = []
        prop.changed.connect(lambda new, old: changes.append(new))

        prop.value = True
        prop.value = True
        prop.value = False

        assert changes == [True, False]
