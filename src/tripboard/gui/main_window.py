"""Main window hosting the filter header and the trip board."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..config import WINDOW_DEFAULT_SIZE
from .views.board_view import BoardWidget
from .views.filter_bar import FilterBar


class MainWindow(QMainWindow):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("TripBoard")
        self.resize(*WINDOW_DEFAULT_SIZE)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        header = QWidget(central)
        header.setObjectName("header")
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(16, 12, 16, 12)
        self.title_label = QLabel("Trip", header)
        header_layout.addWidget(self.title_label)
        header_layout.addStretch(1)
        self.filter_bar = FilterBar(header)
        header_layout.addWidget(self.filter_bar)
        self.new_point_button = QPushButton("New event", header)
        self.new_point_button.setObjectName("newPointButton")
        self.new_point_button.setEnabled(False)
        header_layout.addWidget(self.new_point_button)
        layout.addWidget(header)

        self.board = BoardWidget(central)
        layout.addWidget(self.board, 1)

        self.setCentralWidget(central)


__all__ = ["MainWindow"]
