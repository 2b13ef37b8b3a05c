"""
sampling.py
-----------

Array and Matplotlib `Path` views of sampled curves.

The evaluation contract returns plain Python lists of `Point`s; consumers that
plot, rasterize or post-process samples usually want NumPy arrays or
Matplotlib paths instead. Nothing here draws: paths are geometry only and can
be wrapped in a `PathPatch` (or transformed with `Affine2D`) by the caller.

Core API:

    sample_array(curve, n=None, config=None) -> NDArray
        linspace samples as an (n + 1, 2) array ((n + 1,) for 1D functions).

    random_sample_array(curve, n=None, config=None, rng=None) -> NDArray
        random_points samples as an (n, 2) array ((n,) for 1D functions).

    curve_to_path(curve, n=None, config=None) -> mplPath
        Polyline Path (MOVETO + LINETO) through the linspace samples.

    join_paths(paths, preserve_moveto=False) -> mplPath
        Chains the pieces of a composite curve, storing each shared joint once.
"""

from __future__ import annotations

__all__ = ["sample_array", "random_sample_array", "curve_to_path", "join_paths",]

from typing import Optional

import numpy as np
from numpy.typing import NDArray
from matplotlib.path import Path as mplPath

from .config import DEFAULT_CONFIG, SamplingConfig
from .core import ParametricFunction, ParametricFunction2D
from .rng import RNGBackend


def _codes(path: mplPath) -> NDArray:
    """Path codes, with the implicit MOVETO + LINETOs filled in for code-less paths."""
    if path.codes is not None:
        return path.codes
    codes = np.full(len(path.vertices), mplPath.LINETO, dtype=mplPath.code_type)
    codes[:1] = mplPath.MOVETO
    return codes


def _resolve_n(n: Optional[int], config: SamplingConfig) -> int:
    if n is None:
        return config.samples
    if not isinstance(n, (int, np.integer)):
        raise TypeError(f"n must be an integer, got {type(n).__name__}.")
    return int(n)


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------
def sample_array(
        curve  : ParametricFunction,
        n      : Optional[int]            = None,
        config : Optional[SamplingConfig] = None,
    ) -> NDArray[np.float64]:
    """Return `curve.linspace(n)` as a float array.

    Args:
        curve: Any 1D or 2D parametric function.
        n: Number of intervals. Defaults to `config.samples`.
        config: Sampling defaults. Defaults to `SamplingConfig()`.

    Returns:
        Array of shape (n + 1, 2) for 2D curves, (n + 1,) for 1D functions.

    Raises:
        ValueError: If `n` < 1.
    """
    config = config or DEFAULT_CONFIG
    return np.asarray(curve.linspace(_resolve_n(n, config)), dtype=np.float64)


def random_sample_array(
        curve  : ParametricFunction,
        n      : Optional[int]            = None,
        config : Optional[SamplingConfig] = None,
        rng    : Optional[RNGBackend]     = None,
    ) -> NDArray[np.float64]:
    """Return `curve.random_points(n)` as a float array.

    The RNG is, in order of precedence: `rng`, a dedicated RNG seeded with
    `config.seed`, the calling thread's RNG.
    """
    config = config or DEFAULT_CONFIG
    if rng is None:
        rng = config.make_rng()
    points = curve.random_points(_resolve_n(n, config), rng=rng)
    if not points and isinstance(curve, ParametricFunction2D):
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray(points, dtype=np.float64)


# ---------------------------------------------------------------------------
# Matplotlib paths
# ---------------------------------------------------------------------------
def curve_to_path(
        curve  : ParametricFunction2D,
        n      : Optional[int]            = None,
        config : Optional[SamplingConfig] = None,
    ) -> mplPath:
    """Polyline approximation of a 2D curve as a Matplotlib Path.

    Raises:
        TypeError: If `curve` is not a 2D parametric function.
    """
    if not isinstance(curve, ParametricFunction2D):
        raise TypeError(f"Expected a ParametricFunction2D, got {type(curve).__name__}.")

    verts = sample_array(curve, n, config)
    codes = np.full(len(verts), mplPath.LINETO, dtype=mplPath.code_type)
    codes[0] = mplPath.MOVETO
    return mplPath(verts, codes)


def join_paths(
        paths           : list[mplPath],
        preserve_moveto : bool           = False,
    ) -> mplPath:
    """Chain sampled pieces of a composite curve into one Path.

    Pieces of a spline or a `Concat` meet at shared joints: the last vertex of
    one piece is the first vertex of the next. By default every piece after the
    first loses its leading MOVETO vertex, so the result is a single polyline
    with each joint stored once (e.g. `curve_to_path` over `spline.segments`).

    With `preserve_moveto=True` the pieces are kept as separate subpaths
    (`Path.make_compound_path`), which suits curves that do not touch.

    Raises:
        ValueError: If `paths` is empty.
        TypeError: If any element of `paths` is not a Matplotlib Path.
    """
    if not paths:
        raise ValueError("Expected a non-empty list of Matplotlib paths.")
    bad = [type(p).__name__ for p in paths if not isinstance(p, mplPath)]
    if bad:
        raise TypeError(f"Expected a list of Matplotlib paths, got {bad[0]}.")

    if preserve_moveto:
        return mplPath.make_compound_path(*paths)

    head, *tail = paths
    tail = [p for p in tail if len(p.vertices) > 1]
    verts = np.concatenate([head.vertices] + [p.vertices[1:] for p in tail])
    codes = np.concatenate([_codes(head)] + [_codes(p)[1:] for p in tail])
    return mplPath(verts, codes)
