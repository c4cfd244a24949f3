import math

import pytest

from bezierlab.geom.vector import Mat3, Transform2D, Vec2


def test_vec2_arithmetic():
    a = Vec2(1.0, 2.0)
    b = Vec2(3.0, -1.0)
    assert a + b == Vec2(4.0, 1.0)
    assert a - b == Vec2(-2.0, 3.0)
    assert a * 2 == Vec2(2.0, 4.0)
    assert a / 2 == Vec2(0.5, 1.0)
    assert pytest.approx(a.length()) == math.hypot(1.0, 2.0)
    assert pytest.approx(a.distance_to(b)) == math.hypot(2.0, 3.0)


def test_vec2_is_immutable_and_unpacks():
    p = Vec2(3.0, 4.0)
    with pytest.raises(AttributeError):
        p.x = 1.0
    x, y = p
    assert (x, y) == (3.0, 4.0)
    assert Vec2.of((3, 4)) == p
    assert Vec2.of(p) is p


def test_lerp_is_affine_and_unclamped():
    a = Vec2(0.0, 0.0)
    b = Vec2(10.0, 4.0)
    assert a.lerp(b, 0.0) == a
    assert b == a.lerp(b, 1.0)
    assert a.lerp(b, 0.5) == Vec2(5.0, 2.0)
    assert a.lerp(b, 2.0) == Vec2(20.0, 8.0)
    assert a.lerp(b, -1.0) == Vec2(-10.0, -4.0)


def test_angle_and_normalized():
    v = Vec2(0.0, 2.0)
    assert pytest.approx(v.angle()) == math.pi / 2
    assert v.normalized() == Vec2(0.0, 1.0)
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).normalized()


def test_transform2d_translation_then_rotation():
    p = Vec2(1.0, 0.0)
    t = Transform2D.translation(2.0, 3.0)
    r = Transform2D.rotation(math.pi / 2)
    combined = t.combine(r)
    result = combined.apply(p)
    # Rotate (1,0) by 90deg -> (0,1); then translate -> (2,4)
    assert result.almost_equals(Vec2(2.0, 4.0))


def test_transform2d_accepts_tuples():
    assert Transform2D.translation(1.0, -1.0).apply((5, 5)) == Vec2(6.0, 4.0)


def test_projective_matrix_divides_by_w():
    m = Mat3(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 2.0)
    assert m.transform_point(Vec2(4.0, 6.0)) == Vec2(2.0, 3.0)
    with pytest.raises(ValueError):
        Mat3(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0).transform_point(Vec2(1.0, 1.0))
