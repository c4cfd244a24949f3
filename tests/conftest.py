"""Shared fixtures for the bezierlab test suite."""

import matplotlib

# Headless rendering for every test that touches matplotlib.
matplotlib.use("Agg")

import pytest

from bezierlab.geom import BezierCurve
from bezierlab.render.surface import StyleStack


class RecordingSurface(StyleStack):
    """Drawing surface that records each primitive with the style in effect."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, args, self.style, self.offset))

    def line(self, x1, y1, x2, y2):
        self._record("line", x1, y1, x2, y2)

    def circle(self, x, y, r):
        self._record("circle", x, y, r)

    def rect(self, x, y, w, h):
        self._record("rect", x, y, w, h)

    def text(self, s, x, y, align="left"):
        self._record("text", s, x, y, align)

    def polyline(self, points):
        self._record("polyline", list(points))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def quadratic():
    return BezierCurve([(70, 250), (20, 110), (220, 60)])


@pytest.fixture
def cubic():
    return BezierCurve([(110, 150), (25, 190), (210, 210), (210, 30)])


@pytest.fixture
def surface():
    return RecordingSurface()
