"""Draw curves and their construction aids onto a drawing surface."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from .. import settings
from ..errors import ConfigurationError
from ..geom.bezier import BezierCurve
from ..geom.vector import Vec2
from .surface import DrawingSurface, saved_style

log = logging.getLogger("bezierlab.render")


class CurveRenderer:
    """Pairs a curve with a surface and issues the draw calls for it.

    The renderer only reads geometry from the curve; it never edits control
    points.
    """

    def __init__(self, surface: DrawingSurface, curve: BezierCurve) -> None:
        if surface is None:
            raise ConfigurationError("CurveRenderer requires a drawing surface")
        if curve is None:
            raise ConfigurationError("CurveRenderer requires a curve")
        self.surface = surface
        self.curve = curve

    def draw_curve(self, color: str = settings.CURVE_COLOR, steps: Optional[int] = None) -> None:
        s = self.surface
        with saved_style(s):
            s.set_line_width(1)
            s.set_stroke(color)
            s.no_fill()
            s.polyline(self.curve.lut(steps))

    def draw_points(self, labels: bool = True) -> None:
        s = self.surface
        colors = settings.POINT_COLORS
        with saved_style(s):
            s.set_line_width(2)
            s.set_stroke(settings.POINT_OUTLINE)
            for i, p in enumerate(self.curve.points):
                s.set_fill(colors[i % len(colors)])
                s.circle(p.x, p.y, settings.POINT_RADIUS)
                if labels:
                    s.set_fill(settings.LABEL_COLOR)
                    x, y = int(p.x), int(p.y)
                    s.text(f"({x},{y})", x + 10, y + 10)

    def draw_skeleton(self, color: str = settings.SKELETON_COLOR) -> None:
        """Draw the control polygon."""
        s = self.surface
        with saved_style(s):
            s.no_fill()
            s.set_stroke(color)
            s.polyline(self.curve.points)

    def draw_struts(
        self, t: Union[float, Sequence[Vec2]], color: str = settings.STRUT_COLOR
    ) -> Sequence[Vec2]:
        """Draw the interpolation levels of the de Casteljau construction.

        ``t`` is either a parameter value or a strut point list previously
        returned by :meth:`BezierCurve.strut_points`. Only the intermediate
        levels are drawn: neither the control polygon (level 0) nor the final
        single curve point gets marked. Returns the strut points used.
        """
        pts = list(t) if isinstance(t, (list, tuple)) else self.curve.strut_points(t)
        n = len(self.curve)
        expected = n * (n + 1) // 2
        if len(pts) != expected:
            raise ConfigurationError(
                f"Strut list has {len(pts)} points, a {n}-point curve needs {expected}"
            )
        s = self.surface
        with saved_style(s):
            s.no_fill()
            s.set_stroke(color)
            start = n
            size = n - 1
            while size > 1:
                level = pts[start:start + size]
                s.polyline(level)
                for p in level:
                    s.circle(p.x, p.y, settings.POINT_RADIUS)
                start += size
                size -= 1
        return pts

    def draw_bounding_box(self, color: Optional[str] = None) -> None:
        box = self.curve.bbox()
        log.debug("bounding box x=[%g, %g] y=[%g, %g]", box.x.min, box.x.max, box.y.min, box.y.max)
        s = self.surface
        with saved_style(s):
            s.no_fill()
            s.set_stroke(color or settings.BBOX_COLOR)
            s.rect(box.x.min, box.y.min, box.width, box.height)


__all__ = ["CurveRenderer"]
