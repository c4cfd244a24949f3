import itertools
import math

import pytest

from bezierlab.geom import BezierCurve, Vec2, canonical_curve, canonical_transform


def _pairwise(points):
    return [a.distance_to(b) for a, b in itertools.combinations(points, 2)]


def test_quadratic_scenario(quadratic):
    aligned = canonical_curve(quadratic)
    first, middle, last = aligned.points
    assert first == Vec2(0.0, 0.0)
    assert last.y == pytest.approx(0.0, abs=1e-9)
    assert last.x == pytest.approx(math.hypot(220 - 70, 60 - 250))
    src = quadratic.points
    assert middle.distance_to(first) == pytest.approx(src[1].distance_to(src[0]))
    assert middle.distance_to(last) == pytest.approx(src[1].distance_to(src[2]))


def test_transform_is_rigid(cubic):
    aligned = canonical_curve(cubic)
    assert aligned.points[0] == Vec2(0.0, 0.0)
    assert aligned.points[-1].y == pytest.approx(0.0, abs=1e-9)
    assert aligned.points[-1].x > 0
    assert _pairwise(aligned.points) == pytest.approx(_pairwise(cubic.points))
    # shape is untouched: curve points keep their distance to the start
    for t in (0.2, 0.5, 0.8):
        d_src = cubic.evaluate(t).distance_to(cubic.points[0])
        d_new = aligned.evaluate(t).distance_to(aligned.points[0])
        assert d_new == pytest.approx(d_src)


def test_result_is_an_independent_snapshot(quadratic):
    aligned = canonical_curve(quadratic)
    snapshot = aligned.points
    quadratic.set_point(1, (0, 0))
    assert aligned.points == snapshot
    assert aligned is not quadratic


def test_last_point_behind_first_rotates_half_turn():
    curve = BezierCurve([(10, 0), (5, 5), (0, 0)])
    aligned = canonical_curve(curve)
    assert aligned.points[-1].almost_equals(Vec2(10.0, 0.0))
    assert aligned.points[1].almost_equals(Vec2(5.0, -5.0))


def test_coincident_endpoints_only_translate():
    curve = BezierCurve([(5, 5), (10, 0), (5, 5)])
    aligned = canonical_curve(curve)
    assert aligned.points == (Vec2(0, 0), Vec2(5, -5), Vec2(0, 0))


def test_canonical_transform_maps_endpoints(cubic):
    xf = canonical_transform(cubic)
    first, last = cubic.points[0], cubic.points[-1]
    assert xf.apply(first).almost_equals(Vec2(0.0, 0.0))
    assert xf.apply(last).almost_equals(Vec2(first.distance_to(last), 0.0))
