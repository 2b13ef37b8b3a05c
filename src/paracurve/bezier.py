"""
bezier.py
---------

Bezier curves of order 2, 3 and 4 and the splines built from them.

Evaluation is a recursive de Casteljau reduction: an order-k curve evaluates
the k segments between consecutive control points at t, and hands the k
resulting points to the order-(k - 1) curve evaluated at the same t. Order 2
reduces to a single `Segment` between two segment evaluations.

Splines decompose a flat point list into order-k curves sharing endpoints:
windows of k + 1 points at indices 0, k, 2k, ... Trailing points that do not
complete a window are dropped.
"""

from __future__ import annotations

__all__ = [
    "BezierSecond", "BezierThird", "BezierFourth",
    "BezierSecondSpline", "BezierThirdSpline", "BezierFourthSpline",
    "spline_windows",
]

import logging
from dataclasses import dataclass, field
from typing import ClassVar, Sequence

from .core import ParametricFunction2D, Point, PointLike, T, as_point
from .segment import Segment
from .transform import Concat

logger = logging.getLogger(__name__)


def _reduce(points: Sequence[Point], t: T) -> list[Point]:
    """One de Casteljau step: evaluate the segments between consecutive points."""
    return [Segment(a, b).evaluate(t) for a, b in zip(points, points[1:])]


# =============================================================================
# Bezier curves
# =============================================================================
@dataclass(frozen=True)
class BezierSecond(ParametricFunction2D):
    """Quadratic Bezier curve: start -> control -> end."""
    start_point: PointLike
    end_point: PointLike
    control: PointLike

    order: ClassVar[int] = 2

    def __post_init__(self):
        for name in ("start_point", "end_point", "control"):
            object.__setattr__(self, name, as_point(getattr(self, name)))

    @property
    def points(self) -> tuple[Point, ...]:
        """Control polygon in curve order."""
        return (self.start_point, self.control, self.end_point)

    def _evaluate(self, t: T) -> Point:
        a, b = _reduce(self.points, t)
        return Segment(a, b).evaluate(t)


@dataclass(frozen=True)
class BezierThird(ParametricFunction2D):
    """Cubic Bezier curve: start -> control1 -> control2 -> end."""
    start_point: PointLike
    end_point: PointLike
    control1: PointLike
    control2: PointLike

    order: ClassVar[int] = 3

    def __post_init__(self):
        for name in ("start_point", "end_point", "control1", "control2"):
            object.__setattr__(self, name, as_point(getattr(self, name)))

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.start_point, self.control1, self.control2, self.end_point)

    def _evaluate(self, t: T) -> Point:
        a, b, c = _reduce(self.points, t)
        return BezierSecond(start_point=a, end_point=c, control=b).evaluate(t)


@dataclass(frozen=True)
class BezierFourth(ParametricFunction2D):
    """Quartic Bezier curve: start -> control1 -> control2 -> control3 -> end."""
    start_point: PointLike
    end_point: PointLike
    control1: PointLike
    control2: PointLike
    control3: PointLike

    order: ClassVar[int] = 4

    def __post_init__(self):
        for name in ("start_point", "end_point", "control1", "control2", "control3"):
            object.__setattr__(self, name, as_point(getattr(self, name)))

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.start_point, self.control1, self.control2, self.control3, self.end_point)

    def _evaluate(self, t: T) -> Point:
        a, b, c, d = _reduce(self.points, t)
        return BezierThird(start_point=a, end_point=d, control1=b, control2=c).evaluate(t)


# =============================================================================
# Splines
# =============================================================================
def spline_windows(points: Sequence[PointLike], order: int) -> list[tuple[Point, ...]]:
    """
    Split `points` into windows of `order + 1` points with stride `order`.

    Consecutive windows share one endpoint. Points after the last complete
    window are not returned.

    Example:
        >>> [len(w) for w in spline_windows([(0, 0)] * 8, 3)]
        [4, 4]
    """
    pts = [as_point(p) for p in points]
    return [tuple(pts[i:i + order + 1]) for i in range(0, len(pts) - order, order)]


@dataclass(frozen=True)
class _BezierSpline(ParametricFunction2D):
    points: Sequence[PointLike]
    _concat: Concat = field(init=False, repr=False, compare=False)

    curve_type: ClassVar[type] = None

    def __post_init__(self):
        points = tuple(as_point(p) for p in self.points)
        object.__setattr__(self, "points", points)

        order = self.curve_type.order
        windows = spline_windows(points, order)
        if not windows:
            raise ValueError(
                f"{type(self).__name__} needs at least {order + 1} points, got {len(points)}."
            )
        used = len(windows) * order + 1
        if used < len(points):
            logger.debug(
                f"{type(self).__name__}: dropping {len(points) - used} trailing "
                f"point(s) that do not complete an order-{order} segment."
            )

        curves = [self.curve_type(w[0], w[-1], *w[1:-1]) for w in windows]
        logger.debug(f"{type(self).__name__}: built {len(curves)} segment(s).")
        object.__setattr__(self, "_concat", Concat(curves))

    @property
    def segments(self) -> tuple[ParametricFunction2D, ...]:
        """The Bezier curves making up the spline, in order."""
        return self._concat.functions

    def _evaluate(self, t: T) -> Point:
        return self._concat.evaluate(t)


@dataclass(frozen=True)
class BezierSecondSpline(_BezierSpline):
    """Chain of quadratic Bezier curves: p0 c p2 c p4 ..."""
    curve_type: ClassVar[type] = BezierSecond


@dataclass(frozen=True)
class BezierThirdSpline(_BezierSpline):
    """Chain of cubic Bezier curves: p0 c c p3 c c p6 ..."""
    curve_type: ClassVar[type] = BezierThird


@dataclass(frozen=True)
class BezierFourthSpline(_BezierSpline):
    """Chain of quartic Bezier curves: p0 c c c p4 c c c p8 ..."""
    curve_type: ClassVar[type] = BezierFourth
