"""
Data Visualization Widget
=========================
The self-contained widget: buttons, chart, checklist and accuracy readout.

Why is this file needed?
------------------------
1. Layout: It arranges the controls around the scatter chart.
2. Routing: It turns button clicks, checkbox flips and chart clicks into Store
   mutations, and re-renders every derived view after each one.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, TYPE_CHECKING

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel, QSplitter

from unlearnviz.app.store import Store
from unlearnviz.model.metrics import format_accuracy
from unlearnviz.model.state import ViewState
from unlearnviz.view.widgets.point_checklist import PointChecklist
from unlearnviz.view.widgets.scatter_plot import ScatterPlot

if TYPE_CHECKING:
    from unlearnviz.model.points import DataPoint
    from unlearnviz.model.projection import ChartProjection

logger = logging.getLogger(__name__)


class DataVisualizationWidget(QWidget):
    """
    Works with zero configuration. Optionally seeded with `initial_points`
    and a random `seed`; emits `state_changed` after every mutation.
    """

    state_changed = Signal()

    def __init__(
        self,
        initial_points: Optional[Iterable[DataPoint]] = None,
        seed: Optional[int] = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.store = Store(initial_points=initial_points, seed=seed, parent=self)

        self._build_ui()

        self.store.points_changed.connect(self._on_points_changed)
        self.store.selection_changed.connect(self._on_selection_changed)
        self.store.state_changed.connect(self.state_changed)

        self.refresh()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        title = QLabel("<h2>Data Visualization</h2>")
        layout.addWidget(title)

        # --- Actions ---
        buttons = QHBoxLayout()
        self.btn_add = QPushButton("Add Data Point")
        self.btn_add.clicked.connect(self.store.add_point)
        buttons.addWidget(self.btn_add)

        self.btn_forget = QPushButton("Forget Selected Data Points")
        self.btn_forget.clicked.connect(self.store.forget_selected)
        buttons.addWidget(self.btn_forget)
        buttons.addStretch()
        layout.addLayout(buttons)

        # --- Chart (left) + checklist (right) ---
        splitter = QSplitter(Qt.Horizontal)
        layout.addWidget(splitter, 1)

        chart_area = QWidget()
        chart_layout = QVBoxLayout(chart_area)
        chart_layout.setContentsMargins(0, 0, 0, 0)

        self.chart = ScatterPlot()
        self.chart.point_clicked.connect(self.store.toggle)
        chart_layout.addWidget(self.chart)

        self.lbl_empty = QLabel("No data points yet. Click \"Add Data Point\" to start.")
        self.lbl_empty.setAlignment(Qt.AlignCenter)
        self.lbl_empty.setStyleSheet("color: gray;")
        chart_layout.addWidget(self.lbl_empty)

        splitter.addWidget(chart_area)

        self.checklist = PointChecklist()
        self.checklist.toggled.connect(self.store.toggle)
        splitter.addWidget(self.checklist)
        splitter.setSizes([700, 300])

        # --- Accuracy ---
        self.lbl_accuracy = QLabel()
        layout.addWidget(self.lbl_accuracy)

    # --- PROPERTIES ---

    @property
    def view_state(self) -> ViewState:
        return self.store.state.view_state

    @property
    def accuracy_text(self) -> str:
        return self.lbl_accuracy.text()

    # --- RENDERING ---

    def refresh(self) -> None:
        """Re-render every derived view from the current state."""
        self._on_points_changed()
        self._on_selection_changed()

    def _on_points_changed(self, *_args) -> None:
        state = self.store.state
        populated = state.view_state is ViewState.POPULATED

        self.chart.setVisible(populated)
        self.lbl_empty.setVisible(not populated)

        projection = state.projection()
        self.checklist.set_points(state.store.points, projection.labels, state.selection)
        self.lbl_accuracy.setText(f"Accuracy: {format_accuracy(state.accuracy())}")
        self._render_chart(projection)

    def _on_selection_changed(self, *_args) -> None:
        state = self.store.state
        self.btn_forget.setEnabled(state.can_forget)
        self.checklist.sync_selection(state.selection)
        self._render_chart()

    def _render_chart(self, projection: Optional[ChartProjection] = None) -> None:
        state = self.store.state
        if state.view_state is ViewState.EMPTY:
            return
        if projection is None:
            projection = state.projection()
        self.chart.set_projection(projection, state.selection)
