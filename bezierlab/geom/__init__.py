"""Curve geometry for bezierlab."""

from .bezier import BezierCurve, Projection, de_casteljau, strut_levels
from .bounds import BBox, Range, bounding_box
from .canonical import canonical_curve, canonical_transform
from .curve import Curve
from .vector import Mat3, Transform2D, Vec2, VecLike

__all__ = [
    "BezierCurve",
    "Projection",
    "de_casteljau",
    "strut_levels",
    "BBox",
    "Range",
    "bounding_box",
    "canonical_curve",
    "canonical_transform",
    "Curve",
    "Mat3",
    "Transform2D",
    "Vec2",
    "VecLike",
]
