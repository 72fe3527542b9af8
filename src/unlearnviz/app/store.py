from __future__ import annotations

import logging
from typing import Iterable, Optional

from PySide6.QtCore import QObject, Signal

from unlearnviz.model.points import DataPoint
from unlearnviz.model.state import VisualizationState

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Qt wrapper around VisualizationState. Every mutation goes through here so
    the widgets can re-render on the signals below.
    """
    points_changed = Signal(object)
    selection_changed = Signal(object)
    state_changed = Signal()

    def __init__(
        self,
        initial_points: Optional[Iterable[DataPoint]] = None,
        seed: Optional[int] = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.state = VisualizationState.create(initial_points=initial_points, seed=seed)

    def add_point(self) -> DataPoint:
        point = self.state.add_point()
        self.points_changed.emit(self.state.store)
        self.state_changed.emit()
        return point

    def toggle(self, index: int) -> bool:
        selected = self.state.toggle(index)
        self.selection_changed.emit(self.state.selection)
        self.state_changed.emit()
        return selected

    def forget_selected(self) -> list[DataPoint]:
        if not self.state.can_forget:
            logger.debug("Forget requested with an empty selection; ignoring.")
            return []
        removed = self.state.forget_selected()
        self.points_changed.emit(self.state.store)
        self.selection_changed.emit(self.state.selection)
        self.state_changed.emit()
        return removed
