import numpy as np
import pytest

from unlearnviz.model.classifier import Label, classify, classify_many


@pytest.mark.parametrize("x, y, expected", [
    (1.0, 1.0, Label.POSITIVE),
    (-3.0, -3.0, Label.NEGATIVE),
    (2.0, -1.0, Label.POSITIVE),
    (-2.0, 1.0, Label.NEGATIVE),
    (1e-9, 0.0, Label.POSITIVE),
])
def test_classify(x, y, expected):
    assert classify(x, y) is expected


@pytest.mark.parametrize("x, y", [(0.0, 0.0), (2.5, -2.5), (-4.0, 4.0)])
def test_boundary_is_negative(x, y):
    assert classify(x, y) is Label.NEGATIVE


def test_classify_many_matches_scalar_rule():
    rng = np.random.default_rng(7)
    xy = rng.uniform(-5, 5, size=(200, 2))
    xy[0] = (1.5, -1.5)

    mask = classify_many(xy)

    assert mask.shape == (200,)
    assert not mask[0]
    assert list(mask) == [classify(x, y) is Label.POSITIVE for x, y in xy]


def test_classify_many_empty():
    assert classify_many(np.empty((0, 2))).shape == (0,)


def test_label_text():
    assert str(Label.POSITIVE) == "Positive"
    assert f"{Label.NEGATIVE}" == "Negative"
    assert Label("Positive") is Label.POSITIVE
