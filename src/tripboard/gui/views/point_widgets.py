"""Qt widgets for a single point: the collapsed card and the edit form."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Optional

from PySide6.QtCore import QDateTime, Qt, QTimer
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDateTimeEdit,
    QFormLayout,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QSpinBox,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from ...config import SHAKE_DURATION_MS
from ...domain.models import Point, PointType, ReferenceData
from ..viewmodels.signal import Signal

_ABORT_STYLE = "QFrame#pointCard, QFrame#pointForm { border: 2px solid #d9534f; }"
_DATE_FORMAT = "dd/MM/yy HH:mm"


def _to_qdatetime(value: datetime) -> QDateTime:
    return QDateTime.fromSecsSinceEpoch(int(value.timestamp()))


def _from_qdatetime(value: QDateTime) -> datetime:
    return datetime.fromtimestamp(value.toSecsSinceEpoch(), tz=timezone.utc)


def format_duration(point: Point) -> str:
    minutes = int(point.duration.total_seconds() // 60)
    days, rest = divmod(minutes, 24 * 60)
    hours, minutes = divmod(rest, 60)
    if days:
        return f"{days:02d}D {hours:02d}H {minutes:02d}M"
    if hours:
        return f"{hours:02d}H {minutes:02d}M"
    return f"{minutes:02d}M"


class _ShakeMixin:
    """Flash an error border for ``SHAKE_DURATION_MS`` then run *callback*."""

    _shake_duration_ms = SHAKE_DURATION_MS

    def shake(self, callback: Optional[Callable[[], None]] = None) -> None:
        self.setStyleSheet(_ABORT_STYLE)

        def _finish() -> None:
            self.setStyleSheet("")
            if callback is not None:
                callback()

        QTimer.singleShot(self._shake_duration_ms, self, _finish)


class PointCardWidget(_ShakeMixin, QFrame):
    """Collapsed row: date, type, destination, times, price and offers."""

    def __init__(
        self,
        point: Point,
        reference: ReferenceData,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("pointCard")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.edit_requested = Signal()
        self.favorite_toggled = Signal()

        destination = reference.destination_by_id(point.destination)
        offers = [
            offer for offer in reference.offers_for_type(point.type)
            if offer.id in point.offers
        ]

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(12)

        self.date_label = QLabel(point.date_from.strftime("%b %d").upper(), self)
        layout.addWidget(self.date_label)

        title = point.type.value.capitalize()
        if destination is not None:
            title = f"{title} {destination.name}"
        self.title_label = QLabel(title, self)
        self.title_label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        layout.addWidget(self.title_label)

        self.schedule_label = QLabel(
            f"{point.date_from:%H:%M} – {point.date_to:%H:%M} ({format_duration(point)})",
            self,
        )
        layout.addWidget(self.schedule_label)

        self.price_label = QLabel(f"€ {point.base_price}", self)
        layout.addWidget(self.price_label)

        self.offers_label = QLabel(
            ", ".join(f"{offer.title} +€{offer.price}" for offer in offers), self
        )
        layout.addWidget(self.offers_label)

        self.favorite_button = QToolButton(self)
        self.favorite_button.setObjectName("favoriteButton")
        self.favorite_button.setCheckable(True)
        self.favorite_button.setChecked(point.is_favorite)
        self.favorite_button.setText("★" if point.is_favorite else "☆")
        self.favorite_button.clicked.connect(lambda _checked=False: self.favorite_toggled.emit())
        layout.addWidget(self.favorite_button)

        self.rollup_button = QToolButton(self)
        self.rollup_button.setObjectName("rollupButton")
        self.rollup_button.setText("▾")
        self.rollup_button.clicked.connect(lambda _checked=False: self.edit_requested.emit())
        layout.addWidget(self.rollup_button)


class PointFormWidget(_ShakeMixin, QFrame):
    """Edit form for an existing point or a point being created."""

    def __init__(
        self,
        point: Point,
        reference: ReferenceData,
        *,
        is_new: bool = False,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("pointForm")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self.submitted = Signal()
        self.delete_requested = Signal()
        self.rollup_requested = Signal()
        self.cancel_requested = Signal()

        self._point = point
        self._reference = reference
        self._is_new = is_new
        self._disabled = False
        self._offer_boxes: dict[str, QCheckBox] = {}

        outer = QVBoxLayout(self)
        outer.setContentsMargins(12, 8, 12, 8)
        form = QFormLayout()
        outer.addLayout(form)

        self.type_combo = QComboBox(self)
        for point_type in PointType:
            self.type_combo.addItem(point_type.value.capitalize(), point_type.value)
        form.addRow("Type", self.type_combo)

        self.destination_combo = QComboBox(self)
        self.destination_combo.addItem("", "")
        for destination in reference.destinations:
            self.destination_combo.addItem(destination.name, destination.id)
        form.addRow("Destination", self.destination_combo)

        self.date_from_edit = QDateTimeEdit(self)
        self.date_from_edit.setDisplayFormat(_DATE_FORMAT)
        self.date_from_edit.setCalendarPopup(True)
        self.date_to_edit = QDateTimeEdit(self)
        self.date_to_edit.setDisplayFormat(_DATE_FORMAT)
        self.date_to_edit.setCalendarPopup(True)
        form.addRow("From", self.date_from_edit)
        form.addRow("To", self.date_to_edit)

        self.price_spin = QSpinBox(self)
        self.price_spin.setRange(0, 1_000_000)
        self.price_spin.setPrefix("€ ")
        form.addRow("Price", self.price_spin)

        self.offers_box = QWidget(self)
        self._offers_layout = QVBoxLayout(self.offers_box)
        self._offers_layout.setContentsMargins(0, 0, 0, 0)
        form.addRow("Offers", self.offers_box)

        self.destination_info = QLabel(self)
        self.destination_info.setWordWrap(True)
        outer.addWidget(self.destination_info)

        buttons = QHBoxLayout()
        self.save_button = QPushButton("Save", self)
        self.save_button.setObjectName("saveButton")
        self.save_button.clicked.connect(self._handle_save)
        buttons.addWidget(self.save_button)

        self.delete_button = QPushButton("Cancel" if is_new else "Delete", self)
        self.delete_button.setObjectName("deleteButton")
        self.delete_button.clicked.connect(self._handle_delete)
        buttons.addWidget(self.delete_button)

        self.rollup_button = QToolButton(self)
        self.rollup_button.setObjectName("rollupButton")
        self.rollup_button.setText("▴")
        self.rollup_button.setVisible(not is_new)
        self.rollup_button.clicked.connect(lambda _checked=False: self.rollup_requested.emit())
        buttons.addWidget(self.rollup_button)
        buttons.addStretch(1)
        outer.addLayout(buttons)

        self.type_combo.currentIndexChanged.connect(self._rebuild_offers)
        self.destination_combo.currentIndexChanged.connect(self._update_destination_info)
        self.date_from_edit.dateTimeChanged.connect(self._validate)
        self.date_to_edit.dateTimeChanged.connect(self._validate)
        self.reset(point)

    # ------------------------------------------------------------------
    # View contract
    # ------------------------------------------------------------------
    def reset(self, point: Point) -> None:
        """Restore every input from *point*."""

        self._point = point
        self.type_combo.setCurrentIndex(self.type_combo.findData(point.type.value))
        index = self.destination_combo.findData(point.destination or "")
        self.destination_combo.setCurrentIndex(max(index, 0))
        self.date_from_edit.setDateTime(_to_qdatetime(point.date_from))
        self.date_to_edit.setDateTime(_to_qdatetime(point.date_to))
        self.price_spin.setValue(point.base_price)
        self._rebuild_offers()
        self._update_destination_info()
        self.set_form_state()

    def set_form_state(
        self,
        *,
        is_disabled: bool = False,
        is_saving: bool = False,
        is_deleting: bool = False,
    ) -> None:
        for widget in (
            self.type_combo,
            self.destination_combo,
            self.date_from_edit,
            self.date_to_edit,
            self.price_spin,
            self.offers_box,
            self.delete_button,
            self.rollup_button,
        ):
            widget.setEnabled(not is_disabled)
        self.save_button.setText("Saving..." if is_saving else "Save")
        if self._is_new:
            self.delete_button.setText("Cancel")
        else:
            self.delete_button.setText("Deleting..." if is_deleting else "Delete")
        self._disabled = is_disabled
        self._validate()

    def current_point(self) -> Point:
        """Return the point described by the inputs."""

        return replace(
            self._point,
            type=PointType(self.type_combo.currentData()),
            destination=self.destination_combo.currentData() or None,
            date_from=_from_qdatetime(self.date_from_edit.dateTime()),
            date_to=_from_qdatetime(self.date_to_edit.dateTime()),
            base_price=self.price_spin.value(),
            offers=tuple(
                offer_id for offer_id, box in self._offer_boxes.items() if box.isChecked()
            ),
        )

    def is_valid(self) -> bool:
        return (
            bool(self.destination_combo.currentData())
            and self.date_to_edit.dateTime() >= self.date_from_edit.dateTime()
        )

    # ------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------
    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802 - Qt API
        if event.key() == Qt.Key.Key_Escape:
            event.accept()
            self.cancel_requested.emit()
            return
        super().keyPressEvent(event)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _rebuild_offers(self, *_args) -> None:
        selected = set(self._point.offers)
        for box in self._offer_boxes.values():
            self._offers_layout.removeWidget(box)
            box.deleteLater()
        self._offer_boxes = {}
        point_type = PointType(self.type_combo.currentData())
        for offer in self._reference.offers_for_type(point_type):
            box = QCheckBox(f"{offer.title} +€{offer.price}", self.offers_box)
            box.setChecked(offer.id in selected)
            self._offers_layout.addWidget(box)
            self._offer_boxes[offer.id] = box

    def _update_destination_info(self, *_args) -> None:
        destination = self._reference.destination_by_id(self.destination_combo.currentData())
        self.destination_info.setText(destination.description if destination else "")
        self._validate()

    def _validate(self, *_args) -> None:
        self.save_button.setEnabled(not self._disabled and self.is_valid())

    def _handle_save(self) -> None:
        if self.is_valid():
            self.submitted.emit(self.current_point())

    def _handle_delete(self) -> None:
        self.delete_requested.emit(self._point)


class QtPointViewFactory:
    """Builds the Qt widgets used by the point presenters."""

    def __init__(self, shake_duration_ms: int = SHAKE_DURATION_MS) -> None:
        self._shake_duration_ms = shake_duration_ms

    def create_card(self, point: Point, reference: ReferenceData) -> PointCardWidget:
        card = PointCardWidget(point, reference)
        card._shake_duration_ms = self._shake_duration_ms
        return card

    def create_form(
        self,
        point: Point,
        reference: ReferenceData,
        *,
        is_new: bool = False,
    ) -> PointFormWidget:
        form = PointFormWidget(point, reference, is_new=is_new)
        form._shake_duration_ms = self._shake_duration_ms
        return form


__all__ = [
    "PointCardWidget",
    "PointFormWidget",
    "QtPointViewFactory",
    "format_duration",
]
