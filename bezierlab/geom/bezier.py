"""Bezier curves of any degree, evaluated with de Casteljau's construction.

A :class:`BezierCurve` owns its control polygon. Queries work on a
snapshot taken under the curve's lock, and edits go through the mutators
below which hold the same lock, so a query never sees a half-applied edit.
The parameter ``t`` is never clamped: values outside [0,1] extrapolate the
curve along the same affine construction.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from math import comb
from threading import RLock
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .. import settings
from ..errors import ConfigurationError
from .bounds import BBox, bounding_box
from .curve import Curve
from .vector import Transform2D, Vec2, VecLike

log = logging.getLogger("bezierlab.geom")


@dataclass(frozen=True)
class Projection:
    """Closest point on a curve to some query position."""

    point: Vec2
    t: float
    distance: float


def strut_levels(points: Sequence[Vec2], t: float) -> List[List[Vec2]]:
    """Return every level of the de Casteljau construction at ``t``.

    Level 0 is ``points`` itself; each following level blends neighbouring
    points of the previous one and is one point shorter, ending in the single
    point on the curve.
    """
    level = list(points)
    levels = [level]
    while len(level) > 1:
        level = [a.lerp(b, t) for a, b in zip(level, level[1:])]
        levels.append(level)
    return levels


def de_casteljau(points: Sequence[Vec2], t: float) -> Vec2:
    """Evaluate the Bezier curve with control polygon ``points`` at ``t``."""
    n = len(points)
    tmp = list(points)
    for r in range(1, n):
        for i in range(n - r):
            tmp[i] = tmp[i].lerp(tmp[i + 1], t)
    return tmp[0]


def _power_coefficients(values: Sequence[float]) -> np.ndarray:
    # Bernstein -> monomial basis, lowest order first.
    n = len(values) - 1
    coeffs = np.zeros(n + 1)
    for j in range(n + 1):
        s = sum((-1) ** (j - i) * comb(j, i) * values[i] for i in range(j + 1))
        coeffs[j] = comb(n, j) * s
    return coeffs


def _stationary_parameters(values: Sequence[float]) -> List[float]:
    coeffs = _power_coefficients(values)
    deriv = np.polynomial.polynomial.polyder(coeffs)
    roots = np.polynomial.polynomial.polyroots(deriv) if len(deriv) > 1 else []
    return [float(r.real) for r in np.atleast_1d(roots) if abs(r.imag) < 1e-9 and 0.0 < r.real < 1.0]


def _lut_steps(steps: Optional[int]) -> int:
    if steps is None:
        return settings.LUT_STEPS
    if isinstance(steps, bool) or int(steps) != steps or steps < 1:
        raise ConfigurationError(f"LUT steps must be a positive whole number, got {steps!r}")
    return int(steps)


def _first_within(points: Sequence[Vec2], q: Vec2, d: Optional[float]) -> Optional[int]:
    d = settings.NEAR_DISTANCE if d is None else d
    for i, p in enumerate(points):
        if p.distance_to(q) <= d:
            return i
    return None


class BezierCurve(Curve):
    """A Bezier curve defined by two or more control points."""

    def __init__(self, points: Iterable[VecLike]) -> None:
        self._points = self._validated(points)
        self._lock = RLock()

    @staticmethod
    def _validated(points: Iterable[VecLike]) -> List[Vec2]:
        pts = [Vec2.of(p) for p in points]
        if len(pts) < 2:
            raise ConfigurationError(
                f"A Bezier curve needs at least 2 control points, got {len(pts)}"
            )
        return pts

    # --- construction -----------------------------------------------------
    @classmethod
    def from_coords(cls, *coords: float) -> "BezierCurve":
        """Build a curve from a flat ``x0, y0, x1, y1, ...`` argument list."""
        if len(coords) % 2:
            raise ConfigurationError("Coordinates must come in x, y pairs")
        return cls(zip(coords[0::2], coords[1::2]))

    @classmethod
    def default_quadratic(cls) -> "BezierCurve":
        return cls(settings.DEFAULT_QUADRATIC)

    @classmethod
    def default_cubic(cls) -> "BezierCurve":
        return cls(settings.DEFAULT_CUBIC)

    # --- control polygon --------------------------------------------------
    @property
    def points(self) -> Tuple[Vec2, ...]:
        """Snapshot of the control points."""
        with self._lock:
            return tuple(self._points)

    @property
    def order(self) -> int:
        """Degree of the curve (2 for quadratic, 3 for cubic)."""
        with self._lock:
            return len(self._points) - 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)

    def __iter__(self) -> Iterator[Vec2]:
        return iter(self.points)

    def __repr__(self) -> str:
        coords = ", ".join(f"({p.x:g}, {p.y:g})" for p in self.points)
        return f"BezierCurve([{coords}])"

    def set_point(self, index: int, point: VecLike) -> None:
        with self._lock:
            self._points[index] = Vec2.of(point)

    def move_point(self, index: int, dx: float, dy: float) -> Vec2:
        """Offset one control point and return its new position."""
        with self._lock:
            moved = self._points[index] + Vec2(dx, dy)
            self._points[index] = moved
            return moved

    def transform_points(self, fn: Union[Transform2D, Callable[[Vec2], VecLike]]) -> None:
        """Replace every control point ``p`` with ``fn(p)``."""
        apply = fn.apply if isinstance(fn, Transform2D) else fn
        with self._lock:
            self._points = [Vec2.of(apply(p)) for p in self._points]

    @contextmanager
    def editing(self) -> Iterator[List[Vec2]]:
        """Hold the curve lock and expose the control point list for editing.

        The list may be modified freely inside the block; it is validated
        when the block exits.
        """
        with self._lock:
            working = list(self._points)
            yield working
            self._points = self._validated(working)

    # --- evaluation -------------------------------------------------------
    def evaluate(self, t: float) -> Vec2:
        return de_casteljau(self.points, t)

    def strut_levels(self, t: float) -> List[List[Vec2]]:
        return strut_levels(self.points, t)

    def strut_points(self, t: float) -> List[Vec2]:
        """Flattened construction hierarchy at ``t``, level by level.

        For ``n`` control points this holds ``n (n + 1) / 2`` points; the last
        one is the curve point at ``t``.
        """
        return [p for level in self.strut_levels(t) for p in level]

    def split(self, t: float) -> Tuple["BezierCurve", "BezierCurve"]:
        """Subdivide the curve into two at parameter ``t``."""
        levels = self.strut_levels(t)
        left = [level[0] for level in levels]
        right = [level[-1] for level in reversed(levels)]
        return BezierCurve(left), BezierCurve(right)

    def derivative(self, t: float) -> Vec2:
        pts = self.points
        n = len(pts) - 1
        hodograph = [(pts[i + 1] - pts[i]) * n for i in range(n)]
        return de_casteljau(hodograph, t)

    # --- sampling and bounds ----------------------------------------------
    def lut(self, steps: Optional[int] = None) -> List[Vec2]:
        """Sample the curve at ``steps + 1`` evenly spaced parameters over [0,1]."""
        steps = _lut_steps(steps)
        pts = self.points
        log.debug("building LUT: degree=%d steps=%d", len(pts) - 1, steps)
        return [de_casteljau(pts, float(t)) for t in np.linspace(0.0, 1.0, steps + 1)]

    def bbox(self, steps: Optional[int] = None) -> BBox:
        """Bounding box of the LUT polyline."""
        return bounding_box(self.lut(steps))

    def hull_bbox(self) -> BBox:
        """Bounding box of the control polygon; always encloses the curve."""
        return bounding_box(self.points)

    def extrema(self) -> List[float]:
        """Parameters in (0,1) where either coordinate has a stationary point."""
        pts = self.points
        ts = _stationary_parameters([p.x for p in pts]) + _stationary_parameters([p.y for p in pts])
        merged: List[float] = []
        for t in sorted(ts):
            # x and y may turn at the same t
            if not merged or t - merged[-1] > settings.EPSILON:
                merged.append(t)
        return merged

    def exact_bbox(self) -> BBox:
        """Bounding box from the endpoints and the axis extrema."""
        pts = self.points
        candidates = [pts[0], pts[-1]] + [de_casteljau(pts, t) for t in self.extrema()]
        return bounding_box(candidates)

    # --- queries ------------------------------------------------------------
    def index_near(self, x: float, y: float, d: Optional[float] = None) -> Optional[int]:
        """Index of the first control point within ``d`` of ``(x, y)``.

        Points are scanned in order and the first hit wins, even when a later
        point is closer.
        """
        return _first_within(self.points, Vec2(x, y), d)

    def point_near(self, x: float, y: float, d: Optional[float] = None) -> Optional[Vec2]:
        """Like :meth:`index_near` but returns the control point itself, or ``None``."""
        pts = self.points
        i = _first_within(pts, Vec2(x, y), d)
        return None if i is None else pts[i]

    def project(self, x: float, y: float, steps: Optional[int] = None) -> Projection:
        """Closest point on the curve to ``(x, y)``.

        A coarse LUT scan picks the nearest sample, then the neighbourhood of
        that sample is resampled with a shrinking window.
        """
        steps = _lut_steps(steps)
        q = Vec2(x, y)
        pts = self.points
        lut = self.lut(steps)
        i = min(range(len(lut)), key=lambda k: lut[k].distance_to(q))
        t = i / steps
        span = 1.0 / steps
        refine = settings.PROJECT_REFINE_STEPS
        for _ in range(settings.PROJECT_MAX_ITER):
            lo = max(0.0, t - span)
            hi = min(1.0, t + span)
            t = min(
                (float(c) for c in np.linspace(lo, hi, refine + 1)),
                key=lambda c: de_casteljau(pts, c).distance_to(q),
            )
            span = (hi - lo) / refine
        point = de_casteljau(pts, t)
        return Projection(point, t, point.distance_to(q))


__all__ = ["BezierCurve", "Projection", "de_casteljau", "strut_levels"]
