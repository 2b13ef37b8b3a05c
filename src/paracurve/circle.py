"""
circle.py
---------

Circles and circular arcs.

Angles are measured in "turns" (1.0 == one full revolution), with 0 on the
positive x-axis and positive turns running counter-clockwise.
"""

from __future__ import annotations

__all__ = ["Circle", "CircleArc",]

import math
from dataclasses import dataclass, field
from typing import Union

from .core import ParametricFunction2D, Point, PointLike, T, as_point, as_t

TAU = 2.0 * math.pi


def _point_on_circle(centre: Point, radius: float, turns: float) -> Point:
    return Point(
        centre.x + radius * math.cos(turns * TAU),
        centre.y + radius * math.sin(turns * TAU),
    )


@dataclass(frozen=True)
class Circle(ParametricFunction2D):
    """
    Full circle of `radius` around `centre`.

    `start_angle` shifts where the sweep begins; t still covers one full
    revolution over [0, 1]:

        centre + radius * (cos, sin)((t + start_angle) * 2pi)
    """
    centre: PointLike
    radius: float
    start_angle: Union[T, float] = field(default_factory=T.start)

    def __post_init__(self):
        object.__setattr__(self, "centre", as_point(self.centre))
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "start_angle", as_t(self.start_angle))

    def _evaluate(self, t: T) -> Point:
        return _point_on_circle(self.centre, self.radius, t.value + self.start_angle.value)


@dataclass(frozen=True)
class CircleArc(ParametricFunction2D):
    """
    Circular arc from `start_angle` to `end_angle` (turns).

    The angle itself is interpolated linearly, `theta = end * t + start * (1 - t)`,
    and used as an absolute turn fraction. There is no wrap-around handling:
    start=0.9, end=0.1 sweeps backwards through 0.5 rather than across 0.
    """
    centre: PointLike
    radius: float
    start_angle: Union[T, float] = field(default_factory=T.start)
    end_angle: Union[T, float] = field(default_factory=T.end)

    def __post_init__(self):
        object.__setattr__(self, "centre", as_point(self.centre))
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "start_angle", as_t(self.start_angle))
        object.__setattr__(self, "end_angle", as_t(self.end_angle))

    def _evaluate(self, t: T) -> Point:
        theta = self.end_angle.value * t.value + (1.0 - t.value) * self.start_angle.value
        return _point_on_circle(self.centre, self.radius, theta)
