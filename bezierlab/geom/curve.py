from __future__ import annotations

from abc import ABC, abstractmethod

from .vector import Vec2


class Curve(ABC):
    """Abstract parametric plane curve."""

    @abstractmethod
    def evaluate(self, t: float) -> Vec2:
        """Return point on curve for parameter ``t``, nominally in [0,1]."""
        raise NotImplementedError

    @abstractmethod
    def derivative(self, t: float) -> Vec2:
        """Return first derivative with respect to ``t``."""
        raise NotImplementedError

    def normal(self, t: float) -> Vec2:
        """Unit normal at ``t``: the tangent rotated a quarter turn counter-clockwise."""
        d = self.derivative(t).normalized()
        return Vec2(-d.y, d.x)
