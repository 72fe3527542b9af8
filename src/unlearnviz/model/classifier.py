"""
Linear Classifier Rule
======================
The fixed decision rule ``x + y > 0`` used both to label freshly generated
points and to score stored points.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class Label(str, Enum):
    """Class of a data point. The value is the user-visible name."""
    POSITIVE = "Positive"
    NEGATIVE = "Negative"

    def __str__(self) -> str:
        return self.value


def classify(x: float, y: float) -> Label:
    """
    Label a single point. Strict comparison: points on the boundary
    (x + y == 0) are NEGATIVE.
    """
    return Label.POSITIVE if x + y > 0 else Label.NEGATIVE


def classify_many(xy: npt.ArrayLike) -> npt.NDArray[np.bool_]:
    """
    Vectorised version of :func:`classify`.

    Args:
        xy: Array of shape (N, 2) with x in column 0 and y in column 1.

    Returns:
        Boolean mask of shape (N,), True where the rule predicts POSITIVE.
    """
    arr = np.asarray(xy, dtype=np.float64).reshape(-1, 2)
    return arr.sum(axis=1) > 0
