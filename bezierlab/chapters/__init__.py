"""Didactic figures built on the curve engine."""

from typing import Callable, Dict

from ..errors import ConfigurationError
from . import aligning, circles_cubic

CHAPTERS: Dict[str, Callable] = {
    "aligning": aligning.draw,
    "circles_cubic": circles_cubic.draw,
}


def get_chapter(name: str) -> Callable:
    try:
        return CHAPTERS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown chapter {name!r}; choose from {', '.join(sorted(CHAPTERS))}"
        ) from None


__all__ = ["CHAPTERS", "get_chapter", "aligning", "circles_cubic"]
