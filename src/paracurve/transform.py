"""
transform.py
------------

Combinators: evaluators built from other evaluators.

Time remapping:
    Concat           - children share [0, 1] in equal consecutive slices
    Repeat           - one child replayed n times (Concat of n references)

Geometry (applied to the child's output point):
    Rotate           - rotation about a centre, angle in turns
    Translate        - offset by a vector
    Scale            - independent x/y scaling about a centre
    RotateTranslate  - Rotate + Translate in either order

Children are held by reference and never copied, so a single curve may appear
under several parents (or several times under one parent, as in Repeat).
"""

from __future__ import annotations

__all__ = ["Concat", "Repeat", "Rotate", "Translate", "Scale", "RotateTranslate",]

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from .core import (
    ParametricFunction2D, Point, PointLike, T,
    as_point, as_t, check_function,
)

TAU = 2.0 * math.pi


# ---------------------------------------------------------------------------
# Time remapping
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Concat(ParametricFunction2D):
    """
    Concatenation of curves, each owning an equal 1/N slice of [0, 1].

    The exact boundaries are delegated without remapping: `T.start()` goes to
    the first child, `T.end()` to the last. Any other t lands in slice
    `floor(N * t)` and is rescaled to the child's own [0, 1].

    Raises:
        ValueError: If `functions` is empty.
        TypeError: If any item is not a ParametricFunction2D.
    """
    functions: Sequence[ParametricFunction2D]

    def __post_init__(self):
        functions = tuple(self.functions)
        if not functions:
            raise ValueError("Concat requires at least one function.")
        for i, func in enumerate(functions):
            check_function(func, f"functions[{i}]")
        object.__setattr__(self, "functions", functions)

    def _evaluate(self, t: T) -> Point:
        functions = self.functions
        if t == T.start():
            return functions[0].evaluate(t)
        if t == T.end():
            return functions[-1].evaluate(t)

        n = len(functions)
        gap = 1.0 / n
        # n * t may round up to n for t just below 1
        index = min(math.floor(n * t.value), n - 1)
        local_t = T((t.value - index * gap) / gap)
        return functions[index].evaluate(local_t)


@dataclass(frozen=True)
class Repeat(ParametricFunction2D):
    """
    `function` played `n` times over [0, 1].

    Equivalent to `Concat([function] * n)`: for k in [0, n) and x in [0, 1],
    `evaluate((k + x) / n) == function.evaluate(x)`.
    """
    function: ParametricFunction2D
    n: int
    _concat: Concat = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        check_function(self.function)
        if self.n < 1:
            raise ValueError(f"Repeat count must be >= 1, got n={self.n}.")
        object.__setattr__(self, "_concat", Concat([self.function] * self.n))

    def _evaluate(self, t: T) -> Point:
        return self._concat.evaluate(t)


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Rotate(ParametricFunction2D):
    """`function` rotated about `centre` by `angle` turns (counter-clockwise)."""
    function: ParametricFunction2D
    centre: PointLike
    angle: Union[T, float]

    def __post_init__(self):
        check_function(self.function)
        object.__setattr__(self, "centre", as_point(self.centre))
        object.__setattr__(self, "angle", as_t(self.angle))

    def _evaluate(self, t: T) -> Point:
        p = self.function.evaluate(t)
        c = self.centre
        cos_a = math.cos(self.angle.value * TAU)
        sin_a = math.sin(self.angle.value * TAU)
        dx, dy = p.x - c.x, p.y - c.y
        return Point(c.x + dx * cos_a - dy * sin_a, c.y + dx * sin_a + dy * cos_a)


@dataclass(frozen=True)
class Translate(ParametricFunction2D):
    """`function` shifted by the vector `by`."""
    function: ParametricFunction2D
    by: PointLike

    def __post_init__(self):
        check_function(self.function)
        object.__setattr__(self, "by", as_point(self.by))

    def _evaluate(self, t: T) -> Point:
        p = self.function.evaluate(t)
        return Point(p.x + self.by.x, p.y + self.by.y)


@dataclass(frozen=True)
class Scale(ParametricFunction2D):
    """
    `function` scaled about `centre` by `scale_x` / `scale_y`.

    `scale_y` defaults to `scale_x` (uniform scaling). Factors (1, 1) leave
    the curve unchanged; negative factors mirror it through `centre`.
    """
    function: ParametricFunction2D
    centre: PointLike
    scale_x: float
    scale_y: Optional[float] = None

    def __post_init__(self):
        check_function(self.function)
        object.__setattr__(self, "centre", as_point(self.centre))
        object.__setattr__(self, "scale_x", float(self.scale_x))
        scale_y = self.scale_x if self.scale_y is None else self.scale_y
        object.__setattr__(self, "scale_y", float(scale_y))

    def _evaluate(self, t: T) -> Point:
        p = self.function.evaluate(t)
        c = self.centre
        return Point(
            c.x + (p.x - c.x) * self.scale_x,
            c.y + (p.y - c.y) * self.scale_y,
        )


@dataclass(frozen=True)
class RotateTranslate(ParametricFunction2D):
    """
    Rotation about `centre` by `angle` turns combined with a shift by `by`.

    rotate_first=True  -> Translate(Rotate(function))
    rotate_first=False -> Rotate(Translate(function))

    The two orders differ in general: translating first moves the curve
    before it is swung around the (fixed) centre.
    """
    function: ParametricFunction2D
    by: PointLike
    centre: PointLike
    angle: Union[T, float]
    rotate_first: bool = True
    _chain: ParametricFunction2D = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        check_function(self.function)
        object.__setattr__(self, "by", as_point(self.by))
        object.__setattr__(self, "centre", as_point(self.centre))
        object.__setattr__(self, "angle", as_t(self.angle))

        if self.rotate_first:
            chain = Translate(Rotate(self.function, self.centre, self.angle), self.by)
        else:
            chain = Rotate(Translate(self.function, self.by), self.centre, self.angle)
        object.__setattr__(self, "_chain", chain)

    def _evaluate(self, t: T) -> Point:
        return self._chain.evaluate(t)
