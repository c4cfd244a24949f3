"""Drawing surface backed by a matplotlib ``Axes``.

Coordinates are canvas coordinates: the origin is the top-left corner and
y grows downwards, matching the pointer positions fed to curve queries.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Circle, Rectangle

from .surface import LEFT, StyleStack
from ..geom.vector import VecLike

log = logging.getLogger("bezierlab.render")

_HALIGN = {"left": "left", "center": "center", "right": "right"}


class MatplotlibSurface(StyleStack):
    def __init__(self, width: float, height: float, ax=None, dpi: int = 100) -> None:
        super().__init__()
        if ax is None:
            fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
            ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
        self.ax = ax
        self.fig = ax.figure
        self.width = float(width)
        self.height = float(height)
        self._setup_axes()

    def _setup_axes(self) -> None:
        ax = self.ax
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        ax.set_aspect("equal")
        ax.axis("off")

    def clear(self) -> None:
        self.ax.cla()
        self._setup_axes()
        self.reset_transform()

    # --- primitives -------------------------------------------------------
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.polyline([(x1, y1), (x2, y2)])

    def polyline(self, points: Sequence[VecLike]) -> None:
        coords = np.asarray([self.to_canvas(*p) for p in points], dtype=float)
        if len(coords) == 0:
            return
        st = self.style
        if st.fill is not None:
            self.ax.fill(coords[:, 0], coords[:, 1], color=st.fill, linewidth=0)
        if st.stroke is not None:
            self.ax.plot(coords[:, 0], coords[:, 1], color=st.stroke, linewidth=st.line_width)

    def circle(self, x: float, y: float, r: float) -> None:
        st = self.style
        patch = Circle(
            self.to_canvas(x, y),
            r,
            facecolor=st.fill or "none",
            edgecolor=st.stroke or "none",
            linewidth=st.line_width,
        )
        self.ax.add_patch(patch)

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        st = self.style
        patch = Rectangle(
            self.to_canvas(x, y),
            w,
            h,
            facecolor=st.fill or "none",
            edgecolor=st.stroke or "none",
            linewidth=st.line_width,
        )
        self.ax.add_patch(patch)

    def text(self, s: str, x: float, y: float, align: str = LEFT) -> None:
        cx, cy = self.to_canvas(x, y)
        self.ax.text(
            cx,
            cy,
            s,
            color=self.style.fill or "black",
            ha=_HALIGN.get(align, "left"),
            va="baseline",
            fontsize=8,
        )

    # --- output -------------------------------------------------------------
    def save(self, path: Union[str, Path], dpi: Optional[int] = None) -> Path:
        path = Path(path)
        self.fig.savefig(path, dpi=dpi)
        log.info("Saved %s", path)
        return path

    def close(self) -> None:
        plt.close(self.fig)


__all__ = ["MatplotlibSurface"]
