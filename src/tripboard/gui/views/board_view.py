"""Qt board surface: sort bar, loading and empty states, point list."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QRadioButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from ...core.filters import empty_list_message
from ...domain.models import FilterType, SortType

_SORT_LABELS: dict[SortType, str] = {
    SortType.DATE_FROM: "Day",
    SortType.PRICE: "Price",
}


class PointListWidget(QWidget):
    """Vertical stack of row widgets with a trailing stretch."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("tripList")
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(8)
        self._layout.addStretch(1)

    def views(self) -> list[QWidget]:
        """Return the mounted row widgets in display order."""

        widgets = []
        for index in range(self._layout.count()):
            widget = self._layout.itemAt(index).widget()
            if widget is not None:
                widgets.append(widget)
        return widgets

    def append(self, view: QWidget) -> None:
        self._layout.insertWidget(self._layout.count() - 1, view)
        view.show()

    def prepend(self, view: QWidget) -> None:
        self._layout.insertWidget(0, view)
        view.show()
        view.setFocus()

    def replace(self, new_view: QWidget, old_view: QWidget) -> None:
        index = self._layout.indexOf(old_view)
        if index == -1:
            raise ValueError("view to replace is not mounted")
        self._layout.removeWidget(old_view)
        old_view.hide()
        self._layout.insertWidget(index, new_view)
        new_view.show()
        new_view.setFocus()

    def remove(self, view: QWidget) -> None:
        self._layout.removeWidget(view)
        view.hide()
        view.setParent(None)
        view.deleteLater()


class SortBar(QWidget):
    """Radio buttons selecting the board's sort order."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("sortBar")
        self._on_change: Optional[Callable[[SortType], None]] = None
        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self.buttons: dict[SortType, QRadioButton] = {}

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        for sort_type, label in _SORT_LABELS.items():
            button = QRadioButton(label, self)
            button.toggled.connect(
                lambda checked, value=sort_type: self._handle_toggled(value, checked)
            )
            self._group.addButton(button)
            self.buttons[sort_type] = button
            layout.addWidget(button)
        layout.addStretch(1)

    def bind(self, current: SortType, on_change: Callable[[SortType], None]) -> None:
        self._on_change = None
        self.buttons[current].setChecked(True)
        self._on_change = on_change

    def unbind(self) -> None:
        self._on_change = None

    def _handle_toggled(self, sort_type: SortType, checked: bool) -> None:
        if checked and self._on_change is not None:
            self._on_change(sort_type)


class BoardWidget(QWidget):
    """Implements the board surface contract with plain Qt widgets."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("board")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.loading_label = QLabel("Loading...", self)
        self.loading_label.setObjectName("loadingLabel")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.loading_label)

        self.sort_bar = SortBar(self)
        layout.addWidget(self.sort_bar)

        self.empty_label = QLabel(self)
        self.empty_label.setObjectName("emptyLabel")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.empty_label)

        self.trip_list = PointListWidget()
        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setWidget(self.trip_list)
        layout.addWidget(self.scroll_area, 1)

        for widget in (self.loading_label, self.sort_bar, self.empty_label, self.scroll_area):
            widget.setVisible(False)

    @property
    def list_container(self) -> PointListWidget:
        return self.trip_list

    def show_loading(self) -> None:
        self.loading_label.setVisible(True)

    def remove_loading(self) -> None:
        self.loading_label.setVisible(False)

    def show_sort(self, current: SortType, on_change: Callable[[SortType], None]) -> None:
        self.sort_bar.bind(current, on_change)
        self.sort_bar.setVisible(True)
        # The creation form can be mounted on an otherwise empty board.
        self.scroll_area.setVisible(True)

    def remove_sort(self) -> None:
        self.sort_bar.unbind()
        self.sort_bar.setVisible(False)

    def show_empty(self, filter_type: FilterType) -> None:
        self.empty_label.setText(empty_list_message(filter_type))
        self.empty_label.setVisible(True)

    def remove_empty(self) -> None:
        self.empty_label.setVisible(False)

    def show_list(self) -> None:
        self.scroll_area.setVisible(True)


__all__ = ["BoardWidget", "PointListWidget", "SortBar"]
