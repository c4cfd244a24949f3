import math

import pytest

from bezierlab import render_chapter
from bezierlab.chapters import CHAPTERS, aligning, circles_cubic, get_chapter
from bezierlab.errors import ConfigurationError
from bezierlab.geom import BezierCurve, Vec2


def test_chapter_registry():
    assert set(CHAPTERS) == {"aligning", "circles_cubic"}
    assert get_chapter("aligning") is aligning.draw
    with pytest.raises(ConfigurationError):
        get_chapter("nope")


def test_aligning_draws_both_frames(surface, quadratic):
    aligned = aligning.draw(surface, 550, 275, quadratic)
    assert aligned.points[0] == Vec2(0.0, 0.0)
    length = math.hypot(150, 190)
    labels = [c[1][0] for c in surface.named("text")]
    assert "(0,0)" in labels
    assert f"({int(length)},0)" in labels
    # aligned curve is drawn in the translated right-hand frame
    last_polyline = surface.named("polyline")[-1]
    assert last_polyline[3] == (275 + 10, 137.5)
    # source curve untouched
    assert quadratic.points[0] == Vec2(70, 250)


def test_aligning_defaults_to_quadratic(surface):
    aligned = aligning.draw(surface, 400, 200)
    assert aligned.order == 2


def test_quarter_circle():
    curve = circles_cubic.quarter_circle(100)
    k = circles_cubic.KAPPA * 100
    assert curve.points == (Vec2(100, 0), Vec2(100, k), Vec2(k, 100), Vec2(0, 100))
    mid = curve.evaluate(0.5)
    assert mid.length() == pytest.approx(100, rel=1e-3)


def test_circles_cubic_reflects_all_quadrants(surface):
    curve = circles_cubic.draw(surface, 400, 300)
    k = circles_cubic.KAPPA * 100
    assert curve.points == (Vec2(-100, 0), Vec2(-100, -k), Vec2(-k, -100), Vec2(0, -100))
    strokes = [c[2].stroke for c in surface.named("polyline") if len(c[1][0]) > 4]
    assert strokes == ["#333", "#CC00CC40", "#0000CC40", "#00000040"]


def test_render_chapter_writes_file(tmp_path):
    out = render_chapter("aligning", tmp_path / "aligning.svg", 400, 200,
                         curve=BezierCurve.default_cubic())
    assert out.exists()
    assert "<svg" in out.read_text()


def test_render_unknown_chapter(tmp_path):
    with pytest.raises(ConfigurationError):
        render_chapter("missing", tmp_path / "x.png")
