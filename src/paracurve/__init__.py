"""
paracurve
---------

2D parametric curves evaluated on a normalized parameter t in [0, 1]:
segments, circles, arcs, Bezier curves and splines, and combinators that
concatenate, repeat and transform any of them.

Example:
    >>> from paracurve import BezierSecond, Repeat
    >>> hump = BezierSecond((0, 0), (2, 0), (1, 1))
    >>> hump.evaluate(0.5)
    Point(x=1.0, y=0.5)
    >>> len(Repeat(hump, 3).linspace(12))
    13
"""

from .core import (
    T, Point, ParametricFunction, ParametricFunction1D, ParametricFunction2D,
    Function1D, Function2D, XYFunction,
)
from .segment import Segment
from .circle import Circle, CircleArc
from .bezier import (
    BezierSecond, BezierThird, BezierFourth,
    BezierSecondSpline, BezierThirdSpline, BezierFourthSpline,
)
from .transform import Concat, Repeat, Rotate, Translate, Scale, RotateTranslate
from .config import SamplingConfig
from .rng import RNG, get_rng
from .sampling import sample_array, random_sample_array, curve_to_path, join_paths
from .logging_utils import configure_logging

__all__ = [
    "T", "Point",
    "ParametricFunction", "ParametricFunction1D", "ParametricFunction2D",
    "Function1D", "Function2D", "XYFunction",
    "Segment", "Circle", "CircleArc",
    "BezierSecond", "BezierThird", "BezierFourth",
    "BezierSecondSpline", "BezierThirdSpline", "BezierFourthSpline",
    "Concat", "Repeat", "Rotate", "Translate", "Scale", "RotateTranslate",
    "SamplingConfig", "RNG", "get_rng",
    "sample_array", "random_sample_array", "curve_to_path", "join_paths",
    "configure_logging",
]
