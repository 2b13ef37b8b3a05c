"""
segment.py
----------

Straight line segment from a start point to an end point. Also the building
block of the de Casteljau reduction in `bezier.py`.
"""

from __future__ import annotations

__all__ = ["Segment",]

from dataclasses import dataclass

from .core import ParametricFunction2D, Point, PointLike, T, as_point


@dataclass(frozen=True)
class Segment(ParametricFunction2D):
    """
    Line segment parameterized as `start_point + t * (end_point - start_point)`.

    Example:
        >>> Segment((0, 0), (1, 2)).evaluate(0.5)
        Point(x=0.5, y=1.0)
    """
    start_point: PointLike
    end_point: PointLike

    def __post_init__(self):
        object.__setattr__(self, "start_point", as_point(self.start_point))
        object.__setattr__(self, "end_point", as_point(self.end_point))

    def _evaluate(self, t: T) -> Point:
        p0, p1 = self.start_point, self.end_point
        return Point(p0.x + t.value * (p1.x - p0.x), p0.y + t.value * (p1.y - p0.y))
