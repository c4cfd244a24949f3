"""Drawing surface interface consumed by the curve renderer."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Protocol, Sequence, Tuple

from ..geom.vector import VecLike

LEFT = "left"
CENTER = "center"
RIGHT = "right"


@dataclass(frozen=True)
class Style:
    stroke: Optional[str] = "black"
    fill: Optional[str] = None
    line_width: float = 1.0


class DrawingSurface(Protocol):
    """Canvas-like drawing primitives with a style stack and a translation."""

    def save_style(self) -> None: ...
    def restore_style(self) -> None: ...
    def set_stroke(self, color: Optional[str]) -> None: ...
    def set_fill(self, color: Optional[str]) -> None: ...
    def no_fill(self) -> None: ...
    def set_line_width(self, width: float) -> None: ...
    def translate(self, dx: float, dy: float) -> None: ...
    def reset_transform(self) -> None: ...
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...
    def circle(self, x: float, y: float, r: float) -> None: ...
    def rect(self, x: float, y: float, w: float, h: float) -> None: ...
    def text(self, s: str, x: float, y: float, align: str = LEFT) -> None: ...
    def polyline(self, points: Sequence[VecLike]) -> None: ...


class StyleStack:
    """Style bookkeeping shared by concrete surfaces.

    Holds the current style, a stack of saved styles and the accumulated
    translation applied to every coordinate.
    """

    def __init__(self) -> None:
        self.style = Style()
        self._saved: List[Tuple[Style, Tuple[float, float]]] = []
        self.offset: Tuple[float, float] = (0.0, 0.0)

    def save_style(self) -> None:
        self._saved.append((self.style, self.offset))

    def restore_style(self) -> None:
        if not self._saved:
            raise RuntimeError("restore_style called without matching save_style")
        self.style, self.offset = self._saved.pop()

    def set_stroke(self, color: Optional[str]) -> None:
        self.style = replace(self.style, stroke=color)

    def set_fill(self, color: Optional[str]) -> None:
        self.style = replace(self.style, fill=color)

    def no_fill(self) -> None:
        self.set_fill(None)

    def set_line_width(self, width: float) -> None:
        self.style = replace(self.style, line_width=float(width))

    def translate(self, dx: float, dy: float) -> None:
        ox, oy = self.offset
        self.offset = (ox + dx, oy + dy)

    def reset_transform(self) -> None:
        self.offset = (0.0, 0.0)

    def to_canvas(self, x: float, y: float) -> Tuple[float, float]:
        ox, oy = self.offset
        return (x + ox, y + oy)


@contextmanager
def saved_style(surface: DrawingSurface) -> Iterator[DrawingSurface]:
    """Run a block of draw calls and restore the surface style afterwards."""
    surface.save_style()
    try:
        yield surface
    finally:
        surface.restore_style()


__all__ = [
    "LEFT",
    "CENTER",
    "RIGHT",
    "Style",
    "DrawingSurface",
    "StyleStack",
    "saved_style",
]
