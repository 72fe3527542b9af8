import dataclasses

import numpy as np
import pytest

from unlearnviz.config import COORD_MIN, COORD_MAX
from unlearnviz.model.classifier import Label, classify
from unlearnviz.model.points import DataPoint, PointStore, points_xy, random_point


class TestDataPoint:
    def test_is_immutable(self):
        point = DataPoint(1.0, 2.0, Label.POSITIVE)

        with pytest.raises(dataclasses.FrozenInstanceError):
            point.x = 3.0

    def test_labeled_uses_classifier_rule(self):
        assert DataPoint.labeled(1.0, 1.0).label is Label.POSITIVE
        assert DataPoint.labeled(-1.0, 1.0).label is Label.NEGATIVE

    def test_accepts_label_name(self):
        assert DataPoint(0.0, 1.0, "Positive").label is Label.POSITIVE

    def test_rejects_unknown_label(self):
        with pytest.raises(ValueError):
            DataPoint(0.0, 1.0, "Maybe")

    @pytest.mark.parametrize("x, y", [(float("nan"), 0.0), (0.0, float("inf"))])
    def test_rejects_non_finite_coordinates(self, x, y):
        with pytest.raises(ValueError):
            DataPoint(x, y, Label.NEGATIVE)

    def test_display_text(self):
        point = DataPoint(1.0, -2.456, Label.NEGATIVE)

        assert point.display_text("Point 3") == "Point 3 (1.00, -2.46) - Negative"


def test_random_point_in_range_and_labeled_by_rule():
    rng = np.random.default_rng(0)

    for _ in range(500):
        point = random_point(rng)
        assert COORD_MIN <= point.x < COORD_MAX
        assert COORD_MIN <= point.y < COORD_MAX
        assert point.label is classify(point.x, point.y)


class TestPointStore:
    def setup_method(self):
        self.store = PointStore()

    def test_starts_empty(self):
        assert len(self.store) == 0
        assert self.store.is_empty()
        assert self.store.xy().shape == (0, 2)

    def test_add_appends_to_the_end(self):
        rng = np.random.default_rng(1)
        first = self.store.add(rng)
        second = self.store.add(rng)

        assert list(self.store) == [first, second]
        assert self.store[1] == second

    def test_add_is_reproducible_with_same_seed(self):
        other = PointStore()
        rng_a, rng_b = np.random.default_rng(3), np.random.default_rng(3)
        for _ in range(5):
            self.store.add(rng_a)
            other.add(rng_b)

        assert self.store.points == other.points

    def test_remove_where(self, three_points):
        store = PointStore(three_points)

        removed = store.remove_where({1})

        assert removed == [three_points[1]]
        assert store.points == (three_points[0], three_points[2])

    def test_remove_where_renumbers_following_points(self, three_points):
        store = PointStore(three_points)
        store.remove_where([0])

        assert store[0] == three_points[1]
        assert store[1] == three_points[2]

    def test_remove_where_ignores_out_of_range_indices(self, three_points):
        store = PointStore(three_points)

        assert store.remove_where({5, 10}) == []
        assert len(store) == 3

    def test_remove_all(self, three_points):
        store = PointStore(three_points)
        store.remove_where(range(3))

        assert store.is_empty()

    def test_xy(self, three_points):
        store = PointStore(three_points)

        np.testing.assert_array_equal(store.xy(), [[1, 1], [-3, -3], [2, -1]])

    def test_points_snapshot_is_detached(self, three_points):
        store = PointStore(three_points)
        snapshot = store.points
        store.remove_where({0})

        assert len(snapshot) == 3


def test_points_xy_matches_store_xy(three_points):
    np.testing.assert_array_equal(points_xy(three_points), PointStore(three_points).xy())
    assert points_xy([]).shape == (0, 2)
