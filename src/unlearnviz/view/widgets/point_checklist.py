"""Checklist mirroring the selection state, one row per stored point."""
from __future__ import annotations

from typing import Container, Sequence, TYPE_CHECKING

from PySide6.QtWidgets import QWidget, QVBoxLayout, QCheckBox, QLabel, QScrollArea
from PySide6.QtCore import Qt, Signal

if TYPE_CHECKING:
    from unlearnviz.model.points import DataPoint


class PointChecklist(QWidget):
    """Widget listing every point with a checkbox."""

    # Signal emitted with the store index when the user flips a checkbox
    toggled = Signal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.checkboxes: list[QCheckBox] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        header = QLabel("<b>Selected Data Points:</b>")
        layout.addWidget(header)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        self._content = QWidget()
        self._rows = QVBoxLayout(self._content)
        self._rows.addStretch()
        scroll.setWidget(self._content)
        layout.addWidget(scroll)

    def set_points(
        self,
        points: Sequence[DataPoint],
        names: Sequence[str],
        selected: Container[int],
    ) -> None:
        """
        Rebuild all rows. Indices are positional, so rows are never reused.

        Args:
            points: Points in store order.
            names: Display name of each point ('Point 0', ...), from the chart projection.
            selected: Store indices to show checked.
        """
        if len(names) != len(points):
            raise ValueError(f"Got {len(names)} names for {len(points)} points.")

        for checkbox in self.checkboxes:
            self._rows.removeWidget(checkbox)
            checkbox.deleteLater()
        self.checkboxes = []

        for index, (point, name) in enumerate(zip(points, names)):
            checkbox = QCheckBox(point.display_text(name))
            checkbox.setChecked(index in selected)
            # clicked only fires on user interaction, not on setChecked()
            checkbox.clicked.connect(lambda _checked=False, i=index: self.toggled.emit(i))
            self._rows.insertWidget(index, checkbox)
            self.checkboxes.append(checkbox)

    def sync_selection(self, selected: Container[int]) -> None:
        """Update check marks without rebuilding the rows."""
        for index, checkbox in enumerate(self.checkboxes):
            checkbox.blockSignals(True)
            checkbox.setChecked(index in selected)
            checkbox.blockSignals(False)

    def texts(self) -> list[str]:
        return [cb.text() for cb in self.checkboxes]
