"""Express a curve in a frame fixed to its own endpoints."""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from .bezier import BezierCurve
from .vector import Transform2D, Vec2

log = logging.getLogger("bezierlab.geom")


def _frame(pts: Sequence[Vec2]) -> Tuple[Transform2D, Transform2D]:
    m = pts[0]
    a = (pts[-1] - m).angle()
    log.debug("canonical frame: anchor=(%g, %g) angle=%.6f rad", m.x, m.y, a)
    return Transform2D.translation(-m.x, -m.y), Transform2D.rotation(-a)


def canonical_transform(curve: BezierCurve) -> Transform2D:
    """Rigid transform taking ``curve`` into its canonical frame.

    The first control point goes to the origin and the last one onto the
    positive x-axis. A curve whose endpoints coincide is only translated.
    """
    shift, turn = _frame(curve.points)
    return turn.combine(shift)


def canonical_curve(curve: BezierCurve) -> BezierCurve:
    """Return a new curve holding the canonical-frame image of ``curve``.

    The result shares nothing with the source; later edits to either curve do
    not affect the other.
    """
    pts = curve.points
    shift, turn = _frame(pts)
    # translate first so the anchor lands on exactly (0, 0)
    return BezierCurve(turn.apply(shift.apply(p)) for p in pts)


__all__ = ["canonical_transform", "canonical_curve"]
