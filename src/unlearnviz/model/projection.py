"""
Chart Projection
================
Pure transform from the point store into the two plotted series.

The projection is rebuilt from scratch on every change; it never patches a
previous projection.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, TYPE_CHECKING

import numpy as np

from unlearnviz.model.classifier import Label
from unlearnviz.model.points import DataPoint, points_xy

if TYPE_CHECKING:
    import numpy.typing as npt


def _empty_xy() -> npt.NDArray[np.float64]:
    return np.empty((0, 2), dtype=np.float64)


def _empty_idx() -> npt.NDArray[np.int64]:
    return np.empty(0, dtype=np.int64)


@dataclass
class ChartProjection:
    """
    Two series partitioned by the *stored* label.

    Attributes:
        positive: (k, 2) coordinates of POSITIVE points, in store order.
        negative: (m, 2) coordinates of NEGATIVE points, in store order.
        positive_indices: Store position of each row of `positive`.
        negative_indices: Store position of each row of `negative`.
        labels: 'Point {i}' for every point in the store.
    """
    positive: npt.NDArray[np.float64] = field(default_factory=_empty_xy)
    negative: npt.NDArray[np.float64] = field(default_factory=_empty_xy)
    positive_indices: npt.NDArray[np.int64] = field(default_factory=_empty_idx)
    negative_indices: npt.NDArray[np.int64] = field(default_factory=_empty_idx)
    labels: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.labels)

    def series(self, label: Label) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.int64]]:
        """Coordinates and store indices of one series."""
        if label is Label.POSITIVE:
            return self.positive, self.positive_indices
        return self.negative, self.negative_indices


def project(points: Sequence[DataPoint]) -> ChartProjection:
    labels = [f"Point {i}" for i in range(len(points))]
    if not points:
        return ChartProjection(labels=labels)

    xy = points_xy(points)
    is_positive = np.array([p.label is Label.POSITIVE for p in points], dtype=bool)
    indices = np.arange(len(points), dtype=np.int64)

    return ChartProjection(
        positive=xy[is_positive],
        negative=xy[~is_positive],
        positive_indices=indices[is_positive],
        negative_indices=indices[~is_positive],
        labels=labels,
    )
