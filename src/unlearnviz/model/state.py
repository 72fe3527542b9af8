"""
Visualization State (Data Model)
================================
This module defines the central data structure for the running widget.

Why is this file needed?
------------------------
1. State Management: It holds the Point Store and the Selection Set, the only
   two pieces of source-of-truth state, in one place.
2. Decoupling: Views read from this object; user actions write to it through
   the methods below. Everything else (chart series, accuracy) is derived.

Classes:
    ViewState: Empty/Populated presentation state.
    VisualizationState: The main container class.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

import numpy as np

from unlearnviz.model.metrics import accuracy
from unlearnviz.model.points import DataPoint, PointStore
from unlearnviz.model.projection import ChartProjection, project
from unlearnviz.model.selection import SelectionSet

logger = logging.getLogger(__name__)


class ViewState(Enum):
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass
class VisualizationState:
    """
    Owns the points and the selection. Pass this instance to the widgets;
    there is no global copy.
    """
    store: PointStore = field(default_factory=PointStore)
    selection: SelectionSet = field(default_factory=SelectionSet)
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    @classmethod
    def create(
        cls,
        initial_points: Optional[Iterable[DataPoint]] = None,
        seed: Optional[int] = None,
    ) -> VisualizationState:
        state = cls(
            store=PointStore(initial_points),
            rng=np.random.default_rng(seed),
        )
        logger.debug(f"State created with {len(state.store)} point(s), seed={seed}.")
        return state

    # --- Derived views ---

    @property
    def view_state(self) -> ViewState:
        return ViewState.EMPTY if self.store.is_empty() else ViewState.POPULATED

    @property
    def can_forget(self) -> bool:
        return not self.selection.is_empty()

    def projection(self) -> ChartProjection:
        return project(self.store.points)

    def accuracy(self) -> Optional[float]:
        return accuracy(self.store.points)

    # --- Mutations ---

    def add_point(self) -> DataPoint:
        """Append one random point labeled by the classifier rule."""
        return self.store.add(self.rng)

    def toggle(self, index: int) -> bool:
        """
        Flip the selection of the point at `index`.

        Raises:
            ValueError: If `index` is not a position in the current store.
        """
        if not 0 <= index < len(self.store):
            raise ValueError(f"Point index {index} out of range (store has {len(self.store)} points).")
        return self.selection.toggle(index)

    def forget_selected(self) -> list[DataPoint]:
        """
        Remove every selected point and clear the selection.

        Indices shift after a removal, so the selection is always emptied
        rather than reconciled.
        """
        removed = self.store.remove_where(self.selection)
        self.selection.clear()
        logger.info(f"Forgot {len(removed)} point(s); {len(self.store)} remaining.")
        return removed
