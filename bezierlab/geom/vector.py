"""2D points, vectors and affine transforms for the curve engine.

``Vec2`` doubles as the point type: curves store their control points as
immutable ``Vec2`` values and every derived structure (strut points, lookup
tables, projections) is expressed in the same type.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, hypot, isclose, sin
from typing import Iterator, Sequence, Tuple, Union

from .. import settings

VecLike = Union["Vec2", Tuple[float, float], Sequence[float]]


@dataclass(frozen=True)
class Vec2:
    """A lightweight immutable 2D vector."""

    x: float
    y: float

    @staticmethod
    def of(value: VecLike) -> "Vec2":
        """Coerce ``value`` (a ``Vec2`` or an ``(x, y)`` pair) to ``Vec2``."""
        if isinstance(value, Vec2):
            return value
        x, y = value
        return Vec2(float(x), float(y))

    # --- basic arithmetic -------------------------------------------------
    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> "Vec2":
        return Vec2(self.x / scalar, self.y / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # --- vector operations -------------------------------------------------
    def length(self) -> float:
        return hypot(self.x, self.y)

    def angle(self) -> float:
        """Direction of the vector in radians, ``atan2(y, x)``."""
        return atan2(self.y, self.x)

    def normalized(self, eps: float = settings.EPSILON) -> "Vec2":
        l = self.length()
        if l < eps:
            raise ValueError("Cannot normalise near zero-length vector")
        return self / l

    def lerp(self, other: "Vec2", t: float) -> "Vec2":
        """Affine blend ``(1 - t) * self + t * other``; ``t`` is not clamped."""
        mt = 1.0 - t
        return Vec2(mt * self.x + t * other.x, mt * self.y + t * other.y)

    def distance_to(self, other: "Vec2") -> float:
        return (self - other).length()

    def almost_equals(self, other: "Vec2", eps: float = settings.EPSILON) -> bool:
        return isclose(self.x, other.x, abs_tol=eps) and isclose(self.y, other.y, abs_tol=eps)


@dataclass(frozen=True)
class Mat3:
    """A 3x3 matrix storing row-major affine transforms."""

    m00: float
    m01: float
    m02: float
    m10: float
    m11: float
    m12: float
    m20: float = 0.0
    m21: float = 0.0
    m22: float = 1.0

    def __matmul__(self, other: "Mat3") -> "Mat3":
        def dot_row_col(row: Sequence[float], col: Sequence[float]) -> float:
            return sum(a * b for a, b in zip(row, col))

        rows = (
            (self.m00, self.m01, self.m02),
            (self.m10, self.m11, self.m12),
            (self.m20, self.m21, self.m22),
        )
        cols = (
            (other.m00, other.m10, other.m20),
            (other.m01, other.m11, other.m21),
            (other.m02, other.m12, other.m22),
        )
        return Mat3(*(dot_row_col(r, c) for r in rows for c in cols))

    def transform_point(self, p: Vec2) -> Vec2:
        x = self.m00 * p.x + self.m01 * p.y + self.m02
        y = self.m10 * p.x + self.m11 * p.y + self.m12
        w = self.m20 * p.x + self.m21 * p.y + self.m22
        if abs(w) < settings.EPSILON:
            raise ValueError("Degenerate affine transform with w≈0")
        if w == 1.0:
            return Vec2(x, y)
        return Vec2(x / w, y / w)


class Transform2D:
    """Rigid transforms built from translations and rotations.

    ``a.combine(b)`` applies ``b`` first, then ``a``.
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: Mat3) -> None:
        self._matrix = matrix

    def apply(self, p: VecLike) -> Vec2:
        return self._matrix.transform_point(Vec2.of(p))

    def combine(self, other: "Transform2D") -> "Transform2D":
        return Transform2D(self._matrix @ other._matrix)

    # --- factories --------------------------------------------------------
    @staticmethod
    def translation(dx: float, dy: float) -> "Transform2D":
        return Transform2D(Mat3(1.0, 0.0, dx, 0.0, 1.0, dy))

    @staticmethod
    def rotation(theta: float) -> "Transform2D":
        c = cos(theta)
        s = sin(theta)
        return Transform2D(Mat3(c, -s, 0.0, s, c, 0.0))


__all__ = ["Vec2", "VecLike", "Mat3", "Transform2D"]
