"""Approximating a circle with cubic curves, one quadrant at a time."""

from __future__ import annotations

from ..geom.bezier import BezierCurve
from ..geom.vector import Vec2
from ..render.renderer import CurveRenderer
from ..render.surface import CENTER, LEFT, RIGHT, DrawingSurface

# Control arm length, as a fraction of the radius, for a quarter circle.
KAPPA = 0.55228


def quarter_circle(r: float) -> BezierCurve:
    """Cubic approximating the arc from ``(r, 0)`` to ``(0, r)``."""
    k = KAPPA * r
    return BezierCurve([(r, 0), (r, k), (k, r), (0, r)])


def _flip_y(p: Vec2) -> Vec2:
    return Vec2(p.x, -p.y)


def _flip_xy(p: Vec2) -> Vec2:
    return Vec2(-p.x, -p.y)


def draw(surface: DrawingSurface, width: float, height: float) -> BezierCurve:
    """Draw the quadrant curve and its three reflections about the axes.

    The curve is reflected in place between draws; the returned curve is in
    its final (third) reflected position.
    """
    r = int(width / 4)
    k = KAPPA * r
    curve = quarter_circle(r)
    ren = CurveRenderer(surface, curve)

    surface.reset_transform()
    surface.translate(width / 2, height / 2)

    surface.set_stroke("lightgrey")
    surface.line(0, -height, 0, height)
    surface.line(-width, 0, width, 0)

    surface.set_stroke("black")
    surface.line(-r, 0, r, 0)
    surface.line(0, -r, 0, r)

    surface.set_fill("black")
    surface.text(f"r = {r}", r / 2, 15, CENTER)

    surface.set_stroke("red")
    surface.set_fill("red")
    ren.draw_skeleton("red")
    for p in curve.points:
        surface.circle(p.x, p.y, 2)
        surface.text(f"({p.x:g},{p.y:g})", p.x + 5, p.y + 15)
    ren.draw_curve()

    curve.transform_points(_flip_y)
    ren.draw_curve("#CC00CC40")

    surface.set_stroke("#CC00CC")
    surface.set_fill("#CC00CC")
    surface.line(r, 0, r, -k)
    surface.circle(r, -k, 2)
    surface.text("reflected", r + 7, -k + 3, LEFT)

    surface.set_stroke("#CC00CC40")
    surface.line(0, -r, k, -r)

    curve.transform_points(_flip_xy)
    ren.draw_curve("#0000CC40")

    surface.set_stroke("#0000CC")
    surface.set_fill("#0000CC")
    surface.line(0, r, -k, r)
    surface.circle(-k, r, 2)
    surface.text("reflected", -k - 5, r + 3, RIGHT)

    surface.set_stroke("#0000CC40")
    surface.line(-r, 0, -r, k)

    curve.transform_points(_flip_y)
    ren.draw_curve("#00000040")
    return curve
