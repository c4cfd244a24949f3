"""Top-level helpers for bezierlab."""

__all__ = [
    "BezierCurve",
    "Projection",
    "Vec2",
    "BBox",
    "Range",
    "bounding_box",
    "canonical_curve",
    "ConfigurationError",
    "InvalidInputError",
    "render_chapter",
]

from .errors import ConfigurationError, InvalidInputError
from .geom import BBox, BezierCurve, Projection, Range, Vec2, bounding_box, canonical_curve


def render_chapter(name, path, width=None, height=None, dpi=100, **kwargs):
    """Render a chapter figure to ``path`` with the matplotlib surface."""
    from . import settings
    from .chapters import get_chapter
    from .render.mpl_surface import MatplotlibSurface

    draw = get_chapter(name)
    width = settings.CANVAS_WIDTH if width is None else width
    height = settings.CANVAS_HEIGHT if height is None else height
    surface = MatplotlibSurface(width, height, dpi=dpi)
    try:
        draw(surface, width, height, **kwargs)
        return surface.save(path)
    finally:
        surface.close()
