"""
Main Application Window
=======================
The top-level container hosting a single DataVisualizationWidget.
"""
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QStatusBar

from unlearnviz.config import VISIBLE_APP_NAME
from unlearnviz.model.metrics import format_accuracy
from unlearnviz.view.data_visualization import DataVisualizationWidget


class MainWindow(QMainWindow):
    def __init__(self, seed: Optional[int] = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 750)

        self.visualization = DataVisualizationWidget(seed=seed, parent=self)
        self.setCentralWidget(self.visualization)

        self.setStatusBar(QStatusBar(self))
        self.visualization.state_changed.connect(self.update_status)
        self.update_status()

    def update_status(self) -> None:
        """Point / selection counts in the status bar."""
        state = self.visualization.store.state
        self.statusBar().showMessage(
            f"{len(state.store)} point(s), {len(state.selection)} selected, "
            f"accuracy {format_accuracy(state.accuracy())}"
        )
