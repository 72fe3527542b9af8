"""Classification accuracy of the stored labels against the classifier rule."""
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from unlearnviz.model.classifier import Label, classify_many
from unlearnviz.model.points import DataPoint, points_xy

NOT_AVAILABLE = "N/A"


def accuracy(points: Sequence[DataPoint]) -> Optional[float]:
    """
    Percentage (0-100) of points whose stored label agrees with the rule.

    Returns None for an empty sequence: accuracy is undefined there, and the
    caller decides how to show it (see :func:`format_accuracy`).
    """
    total = len(points)
    if total == 0:
        return None

    xy = points_xy(points)
    stored_positive = np.array([p.label is Label.POSITIVE for p in points], dtype=bool)
    correct = int(np.count_nonzero(classify_many(xy) == stored_positive))
    return 100.0 * correct / total


def format_accuracy(value: Optional[float]) -> str:
    """'100.00%' for a number, 'N/A' for None."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.2f}%"
