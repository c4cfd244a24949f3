"""Axis-aligned bounding boxes over point sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from ..errors import InvalidInputError
from .vector import Vec2, VecLike


@dataclass(frozen=True)
class Range:
    """A closed interval ``[min, max]`` on one axis."""

    min: float
    max: float

    @property
    def size(self) -> float:
        return self.max - self.min

    @property
    def mid(self) -> float:
        return (self.min + self.max) / 2.0

    def contains(self, value: float, eps: float = 0.0) -> bool:
        return self.min - eps <= value <= self.max + eps


@dataclass(frozen=True)
class BBox:
    x: Range
    y: Range

    @property
    def width(self) -> float:
        return self.x.size

    @property
    def height(self) -> float:
        return self.y.size

    @property
    def center(self) -> Vec2:
        return Vec2(self.x.mid, self.y.mid)

    def contains_point(self, point: VecLike, eps: float = 0.0) -> bool:
        px, py = point
        return self.x.contains(px, eps) and self.y.contains(py, eps)

    def contains_box(self, other: "BBox", eps: float = 0.0) -> bool:
        return (
            self.x.min - eps <= other.x.min
            and other.x.max <= self.x.max + eps
            and self.y.min - eps <= other.y.min
            and other.y.max <= self.y.max + eps
        )

    def union(self, other: "BBox") -> "BBox":
        return BBox(
            Range(min(self.x.min, other.x.min), max(self.x.max, other.x.max)),
            Range(min(self.y.min, other.y.min), max(self.y.max, other.y.max)),
        )


def bounding_box(points: Iterable[VecLike]) -> BBox:
    """Return the per-axis extent of ``points``.

    A single point yields a degenerate box. Raises :class:`InvalidInputError`
    for an empty sequence.
    """
    coords = np.asarray([tuple(p) for p in points], dtype=float)
    if coords.size == 0:
        raise InvalidInputError("bounding_box requires at least one point")
    mn = coords.min(axis=0)
    mx = coords.max(axis=0)
    return BBox(Range(float(mn[0]), float(mx[0])), Range(float(mn[1]), float(mx[1])))


__all__ = ["Range", "BBox", "bounding_box"]
