"""
core.py
-------

Shared evaluation contract for all parametric curves.

Every curve is a function of a normalized parameter `T` in [0, 1]. Concrete
curves implement a single method, `_evaluate(t)`; the public `evaluate()` and the
sampling helpers (`linspace`, `start`, `end`, `random_point`, `random_points`)
are derived from it in `ParametricFunction`.

Two flavours of the contract exist:
  - `ParametricFunction2D`: t -> Point (all curves and combinators)
  - `ParametricFunction1D`: t -> float (scalar components, see `XYFunction`)

Plain callables are turned into evaluators through explicit wrappers
(`Function1D`, `Function2D`), never by implicit conversion.
"""

from __future__ import annotations

__all__ = [
    "T", "Point", "PointLike",
    "ParametricFunction", "ParametricFunction1D", "ParametricFunction2D",
    "Function1D", "Function2D", "XYFunction",
    "as_point", "as_t", "check_function",
]

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, NamedTuple, Optional, TypeAlias, Union

from .rng import RNGBackend, get_rng


# =============================================================================
# Parameter & point types
# =============================================================================
class T:
    """
    The curve parameter: a float held in [0, 1].

    Values <= 0 become 0.0, values >= 1 become 1.0 (infinities included),
    anything in between is kept unchanged. NaN has no place in the interval
    and raises ValueError.

    Example:
        >>> T(1.7).value
        1.0
        >>> T(-3) == T.start()
        True
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[float, int]) -> None:
        value = float(value)
        if math.isnan(value):
            raise ValueError("T cannot be NaN.")
        if value <= 0.0:
            value = 0.0
        elif value >= 1.0:
            value = 1.0
        self._value = value

    @property
    def value(self) -> float:
        return self._value

    @classmethod
    def start(cls) -> T:
        return cls(0.0)

    @classmethod
    def end(cls) -> T:
        return cls(1.0)

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_value"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, T):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __float__(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"T({self._value!r})"


class Point(NamedTuple):
    """2D point (x, y). Plain tuple semantics, copied freely."""
    x: float
    y: float


PointLike: TypeAlias = Union[Point, tuple[float, float]]


def as_point(value: PointLike) -> Point:
    """Coerce anything unpackable into two numbers into a `Point`."""
    if isinstance(value, Point):
        return value
    try:
        x, y = value
        return Point(float(x), float(y))
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"Expected a point-like pair (x, y), got {type(value).__name__}: {value!r}"
        ) from exc


def as_t(value: Union[T, float]) -> T:
    """Return `value` as a `T`; numbers are clamped into [0, 1]."""
    if isinstance(value, T):
        return value
    if not isinstance(value, Real):
        raise TypeError(f"Expected T or a real number, got {type(value).__name__}.")
    return T(value)


# =============================================================================
# Evaluation contract
# =============================================================================
class ParametricFunction(ABC):
    """
    Base class for everything that can be evaluated at a parameter `T`.

    Subclasses implement `_evaluate(t)`; everything else is derived:

      - `evaluate(t)` / `__call__(t)`: accepts a `T` or a plain number
      - `linspace(n)`: n + 1 evenly spaced samples, both ends included
      - `start()` / `end()`: values at `T.start()` / `T.end()`
      - `random_point()` / `random_points(n)`: values at uniformly random `T`

    Random draws use the calling thread's RNG unless an explicit `rng`
    (`RNG`, `random.Random` or `numpy.random.Generator`) is passed.
    """

    # -------------------------------------------------------------------------
    # Abstract interface
    # -------------------------------------------------------------------------
    @abstractmethod
    def _evaluate(self, t: T) -> Any:
        """Return the value of the function at `t`."""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Derived operations
    # -------------------------------------------------------------------------
    def evaluate(self, t: Union[T, float]) -> Any:
        """Return the value of the function at `t` (numbers are clamped)."""
        return self._evaluate(as_t(t))

    def __call__(self, t: Union[T, float]) -> Any:
        return self.evaluate(t)

    def linspace(self, n: int) -> list:
        """
        Return n + 1 equally spaced samples from `T.start()` to `T.end()`.

        Args:
            n: Number of intervals, must be >= 1.

        Raises:
            ValueError: If `n` < 1.
        """
        if n < 1:
            raise ValueError(f"linspace requires at least one interval, got n={n}.")
        return [self._evaluate(T(i / n)) for i in range(n + 1)]

    def start(self) -> Any:
        """Return the start, or "first", value of the function."""
        return self._evaluate(T.start())

    def end(self) -> Any:
        """Return the end, or "last", value of the function."""
        return self._evaluate(T.end())

    def random_point(self, rng: Optional[RNGBackend] = None) -> Any:
        """Return the value at a uniformly drawn parameter in [0, 1)."""
        if rng is None:
            rng = get_rng(thread_safe=True)
        return self._evaluate(T(rng.random()))

    def random_points(self, n: int, rng: Optional[RNGBackend] = None) -> list:
        """Return `n` independent `random_point()` draws."""
        if n < 0:
            raise ValueError(f"Number of random points must be non-negative, got n={n}.")
        if rng is None:
            rng = get_rng(thread_safe=True)
        return [self.random_point(rng) for _ in range(n)]

    @classmethod
    def reseed(cls, seed: Optional[int] = None) -> None:
        """Re-seed the calling thread's RNG (for deterministic replay)."""
        get_rng(thread_safe=True).seed(seed)


class ParametricFunction2D(ParametricFunction):
    """Parametric function t -> Point. All curves and combinators derive from it."""

    @abstractmethod
    def _evaluate(self, t: T) -> Point:
        raise NotImplementedError

    def evaluate(self, t: Union[T, float]) -> Point:
        return self._evaluate(as_t(t))


class ParametricFunction1D(ParametricFunction):
    """Parametric function t -> float."""

    @abstractmethod
    def _evaluate(self, t: T) -> float:
        raise NotImplementedError

    def evaluate(self, t: Union[T, float]) -> float:
        return self._evaluate(as_t(t))


def check_function(value: Any, name: str = "function") -> ParametricFunction2D:
    """Raise TypeError unless `value` is a 2D evaluator."""
    if not isinstance(value, ParametricFunction2D):
        raise TypeError(
            f"{name} must be a ParametricFunction2D, got {type(value).__name__}. "
            "Wrap plain callables with Function2D."
        )
    return value


# =============================================================================
# Function adapters
# =============================================================================
@dataclass(frozen=True)
class Function1D(ParametricFunction1D):
    """Any unary numeric function used as a 1D evaluator; receives `t.value`."""
    func: Callable[[float], float]

    def __post_init__(self):
        if not callable(self.func):
            raise TypeError(f"func must be callable, got {type(self.func).__name__}.")

    def _evaluate(self, t: T) -> float:
        return float(self.func(t.value))


@dataclass(frozen=True)
class Function2D(ParametricFunction2D):
    """
    A callable `T -> (x, y)` used as a 2D evaluator.

    Example:
        >>> diagonal = Function2D(lambda t: (t.value, t.value))
        >>> diagonal.evaluate(0.25)
        Point(x=0.25, y=0.25)
    """
    func: Callable[[T], PointLike]

    def __post_init__(self):
        if not callable(self.func):
            raise TypeError(f"func must be callable, got {type(self.func).__name__}.")

    def _evaluate(self, t: T) -> Point:
        return as_point(self.func(t))


@dataclass(frozen=True)
class XYFunction(ParametricFunction2D):
    """2D evaluator built from independent x and y components at the same t."""
    x: Union[ParametricFunction1D, Callable[[float], float]]
    y: Union[ParametricFunction1D, Callable[[float], float]]

    def __post_init__(self):
        for name in ("x", "y"):
            component = getattr(self, name)
            if not isinstance(component, ParametricFunction1D):
                object.__setattr__(self, name, Function1D(component))

    def _evaluate(self, t: T) -> Point:
        return Point(self.x.evaluate(t), self.y.evaluate(t))
