import os

# Qt must not try to open a display during tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from unlearnviz.model import DataPoint, Label


@pytest.fixture
def three_points():
    return [
        DataPoint(1.0, 1.0, Label.POSITIVE),
        DataPoint(-3.0, -3.0, Label.NEGATIVE),
        DataPoint(2.0, -1.0, Label.POSITIVE),
    ]
