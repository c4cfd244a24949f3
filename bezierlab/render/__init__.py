"""Rendering of curves onto drawing surfaces."""

from .mpl_surface import MatplotlibSurface
from .renderer import CurveRenderer
from .surface import CENTER, LEFT, RIGHT, DrawingSurface, Style, StyleStack, saved_style

__all__ = [
    "CurveRenderer",
    "DrawingSurface",
    "MatplotlibSurface",
    "Style",
    "StyleStack",
    "saved_style",
    "LEFT",
    "CENTER",
    "RIGHT",
]
