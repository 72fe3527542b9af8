import math

import numpy as np
import pytest

from unlearnviz.model.classifier import Label
from unlearnviz.model.metrics import accuracy, format_accuracy
from unlearnviz.model.points import DataPoint, PointStore


def test_empty_store_accuracy_is_undefined():
    assert accuracy([]) is None
    assert format_accuracy(accuracy([])) == "N/A"


def test_scenario_accuracy(three_points):
    assert accuracy(three_points) == 100.0


@pytest.mark.parametrize("seed", range(10))
def test_generated_points_are_always_fully_accurate(seed):
    rng = np.random.default_rng(seed)
    store = PointStore()
    for _ in range(25):
        store.add(rng)
        assert accuracy(store.points) == 100.0


def test_relabeled_point_lowers_accuracy(three_points):
    points = three_points + [DataPoint(4.0, 4.0, Label.NEGATIVE)]

    assert accuracy(points) == 75.0


def test_all_wrong():
    points = [DataPoint(1.0, 1.0, Label.NEGATIVE), DataPoint(-1.0, -1.0, Label.POSITIVE)]

    assert accuracy(points) == 0.0


def test_boundary_point_stored_negative_is_correct():
    assert accuracy([DataPoint(1.0, -1.0, Label.NEGATIVE)]) == 100.0


@pytest.mark.parametrize("value, text", [
    (100.0, "100.00%"),
    (0.0, "0.00%"),
    (200 / 3, "66.67%"),
    (None, "N/A"),
])
def test_format_accuracy(value, text):
    assert format_accuracy(value) == text


def test_never_nan():
    value = accuracy([])
    assert value is None or not math.isnan(value)
