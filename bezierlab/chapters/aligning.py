"""Aligning a curve: the same shape drawn in world space and in its own frame."""

from __future__ import annotations

from typing import Optional

from ..geom.bezier import BezierCurve
from ..geom.canonical import canonical_curve
from ..render.renderer import CurveRenderer
from ..render.surface import CENTER, DrawingSurface


def draw(surface: DrawingSurface, width: float, height: float,
         curve: Optional[BezierCurve] = None) -> BezierCurve:
    """Draw ``curve`` on the left half and its canonical image on the right.

    Returns the canonical curve that was drawn.
    """
    curve = curve or BezierCurve.default_quadratic()
    surface.reset_transform()

    source = CurveRenderer(surface, curve)
    source.draw_skeleton()
    source.draw_curve()
    source.draw_points()

    surface.translate(width / 2, 0)
    surface.set_stroke("black")
    surface.line(0, 0, 0, height)

    aligned = canonical_curve(curve)
    end = aligned.points[-1]

    surface.translate(10, height / 2)
    surface.set_stroke("grey")
    surface.line(0, -height, 0, height)
    surface.line(-10, 0, width, 0)
    CurveRenderer(surface, aligned).draw_curve()

    surface.set_fill("black")
    surface.text("(0,0)", 5, 15)
    surface.text(f"({int(end.x)},0)", end.x, 15, CENTER)
    return aligned
