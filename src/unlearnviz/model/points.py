"""
Point Store
===========
Ordered, in-memory collection of labeled 2D points.

Indices into the store are positional: removing a point renumbers every point
after it. Nothing outside this module should keep an index across a removal.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, TYPE_CHECKING

import numpy as np

from unlearnviz.config import COORD_MIN, COORD_MAX
from unlearnviz.model.classifier import Label, classify

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float
    label: Label

    def __post_init__(self) -> None:
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Point coordinates must be finite, got ({self.x}, {self.y}).")
        # Accept the plain strings "Positive"/"Negative" as well
        if not isinstance(self.label, Label):
            object.__setattr__(self, "label", Label(self.label))

    @classmethod
    def labeled(cls, x: float, y: float) -> DataPoint:
        """Create a point whose label is given by the classifier rule."""
        return cls(float(x), float(y), classify(x, y))

    def display_text(self, name: str) -> str:
        """Checklist text after the point's name, e.g. 'Point 0 (1.00, -2.50) - Positive'."""
        return f"{name} ({self.x:.2f}, {self.y:.2f}) - {self.label}"


def points_xy(points: Sequence[DataPoint]) -> npt.NDArray[np.float64]:
    """Coordinates of `points` as an (N, 2) array; (0, 2) when empty."""
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def random_point(rng: np.random.Generator) -> DataPoint:
    """Draw x and y independently from U[COORD_MIN, COORD_MAX) and label them."""
    x, y = rng.uniform(COORD_MIN, COORD_MAX, size=2)
    return DataPoint.labeled(x, y)


class PointStore:
    """Ordered sequence of DataPoint. Supports len(), iteration and indexing."""

    def __init__(self, points: Iterable[DataPoint] | None = None) -> None:
        self._points: list[DataPoint] = list(points) if points is not None else []

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[DataPoint]:
        return iter(self._points)

    def __getitem__(self, index: int) -> DataPoint:
        return self._points[index]

    def __repr__(self) -> str:
        return f"PointStore({self._points!r})"

    @property
    def points(self) -> tuple[DataPoint, ...]:
        """Immutable snapshot of the current sequence."""
        return tuple(self._points)

    def is_empty(self) -> bool:
        return not self._points

    def add(self, rng: np.random.Generator) -> DataPoint:
        """Generate a random labeled point and append it."""
        point = random_point(rng)
        self.add_point(point)
        return point

    def add_point(self, point: DataPoint) -> None:
        self._points.append(point)
        logger.debug(f"Added point #{len(self._points) - 1}: ({point.x:.3f}, {point.y:.3f}) {point.label}")

    def remove_where(self, indices: Iterable[int]) -> list[DataPoint]:
        """
        Drop every point whose position is in `indices`.

        The new sequence is built first and swapped in afterwards, so no
        partially-filtered state is ever visible.

        Returns:
            The removed points, in their original order.
        """
        doomed = set(indices)
        kept: list[DataPoint] = []
        removed: list[DataPoint] = []
        for i, point in enumerate(self._points):
            (removed if i in doomed else kept).append(point)
        self._points = kept
        logger.debug(f"Removed {len(removed)} point(s), {len(kept)} remaining.")
        return removed

    def xy(self) -> npt.NDArray[np.float64]:
        """Coordinates as an (N, 2) array."""
        return points_xy(self._points)
