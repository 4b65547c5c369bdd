"""Filter selector shown in the window header."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtWidgets import QButtonGroup, QHBoxLayout, QRadioButton, QWidget

from ...domain.models import FilterType


class FilterBar(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("filterBar")
        self._on_change: Optional[Callable[[FilterType], None]] = None
        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self.buttons: dict[FilterType, QRadioButton] = {}

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        for filter_type in FilterType:
            button = QRadioButton(filter_type.value.capitalize(), self)
            button.toggled.connect(
                lambda checked, value=filter_type: self._handle_toggled(value, checked)
            )
            self._group.addButton(button)
            self.buttons[filter_type] = button
            layout.addWidget(button)

    def show_filters(
        self,
        current: FilterType,
        available: dict[FilterType, bool],
        on_change: Callable[[FilterType], None],
    ) -> None:
        self._on_change = None
        for filter_type, button in self.buttons.items():
            # The active filter stays clickable even when it is empty.
            button.setEnabled(available.get(filter_type, False) or filter_type == current)
        self.buttons[current].setChecked(True)
        self._on_change = on_change

    def _handle_toggled(self, filter_type: FilterType, checked: bool) -> None:
        if checked and self._on_change is not None:
            self._on_change(filter_type)


__all__ = ["FilterBar"]
