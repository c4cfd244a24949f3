#!/usr/bin/env python3
"""Command-line tool to render a curve chapter figure to an image file."""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from . import render_chapter, settings
from .chapters import CHAPTERS
from .errors import ConfigurationError, InvalidInputError
from .geom.bezier import BezierCurve
from .geom.vector import Vec2

log = logging.getLogger("bezierlab.cli")


def parse_points(text: str) -> List[Vec2]:
    """Parse ``"x,y x,y ..."`` into points."""
    points = []
    for token in text.split():
        parts = token.split(",")
        if len(parts) != 2:
            raise InvalidInputError(f"Expected x,y but got {token!r}")
        try:
            points.append(Vec2(float(parts[0]), float(parts[1])))
        except ValueError:
            raise InvalidInputError(f"Non-numeric coordinate in {token!r}") from None
    return points


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a Bezier curve chapter figure")
    parser.add_argument("chapter", choices=sorted(CHAPTERS), help="Figure to render")
    parser.add_argument(
        "--points",
        help='Control points for the aligning figure, e.g. "70,250 20,110 220,60"',
    )
    parser.add_argument("--width", type=int, default=settings.CANVAS_WIDTH, help="Canvas width")
    parser.add_argument("--height", type=int, default=settings.CANVAS_HEIGHT, help="Canvas height")
    parser.add_argument("--dpi", type=int, default=100, help="Output resolution")
    parser.add_argument("--out", default=None, help="Output file (.png or .svg)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    kwargs = {}
    if args.points:
        if args.chapter != "aligning":
            parser.error("--points only applies to the aligning chapter")
        try:
            kwargs["curve"] = BezierCurve(parse_points(args.points))
        except (ConfigurationError, InvalidInputError) as exc:
            parser.error(str(exc))

    out = args.out or f"{args.chapter}.png"
    log.debug("rendering %s at %dx%d", args.chapter, args.width, args.height)
    render_chapter(args.chapter, out, args.width, args.height, dpi=args.dpi, **kwargs)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
