"""
rng.py
------

Randomness source for curve sampling.

`random_point()` / `random_points()` draw their parameters from here. Each
thread gets its own generator through `get_rng(thread_safe=True)`, so curves
shared between threads can be sampled without coordination. Every `RNG`
additionally guards its backend with a lock, which makes a single instance safe
to pass around explicitly.

Backends:
  - `random.Random` (default, no NumPy needed for scalar draws)
  - `numpy.random.Generator` (`use_numpy=True`), also exposed via `as_numpy()`
"""

from __future__ import annotations

__all__ = ["RNGBackend", "RNG", "get_rng", "set_global_seed",]

import os
import time
import random
import threading
from numbers import Real
from typing import Any, Optional, TypeAlias, Union

import numpy as np

# ---------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------
RNGBackend: TypeAlias = Union[random.Random, np.random.Generator, "RNG"]


def _entropy_seed() -> int:
    """PID/time mixed seed, distinct across processes and threads."""
    return (
        os.getpid()
        ^ threading.get_ident()
        ^ (time.time_ns() & 0xFFFFFFFF)
        ^ random.getrandbits(32)
    )


# ---------------------------------------------------------------------
# RNG class
# ---------------------------------------------------------------------
class RNG:
    """Lock-guarded random generator used for random curve sampling.

    Attributes:
        _rng:  Backend RNG (random.Random or numpy.random.Generator).
        _lock: threading.Lock for safe concurrent access.
    """

    def __init__(self, seed: Optional[int] = None, use_numpy: bool = False):
        self._lock = threading.Lock()
        self._use_numpy = use_numpy
        seed_val = _entropy_seed() if seed is None else seed

        if use_numpy:
            self._rng: RNGBackend = np.random.default_rng(seed_val)
        else:
            self._rng: RNGBackend = random.Random(seed_val)

    # -----------------------------------------------------------------
    # Seeding
    # -----------------------------------------------------------------
    def seed(self, seed: Optional[int] = None) -> None:
        """Reinitialize the backend in place (preserves object identity).

        A seed of 0 is a valid seed; only None falls back to entropy.
        """
        with self._lock:
            seed_val = _entropy_seed() if seed is None else seed
            if self._use_numpy:
                self._rng = np.random.default_rng(seed_val)
            else:
                self._rng.seed(seed_val)

    # -----------------------------------------------------------------
    # Draws
    # -----------------------------------------------------------------
    def random(self, *a, **kw) -> Union[float, np.ndarray]:
        """Uniform draw in [0, 1). Scalar results are always Python floats."""
        with self._lock:
            out = self._rng.random(*a, **kw)
            if self._use_numpy and isinstance(out, Real):
                return float(out)
            return out

    def uniform(self, *a, **kw) -> Union[float, np.ndarray]:
        with self._lock:
            out = self._rng.uniform(*a, **kw)
            if self._use_numpy and isinstance(out, Real):
                return float(out)
            return out

    # -----------------------------------------------------------------
    # State & introspection
    # -----------------------------------------------------------------
    def getstate(self) -> Any:
        with self._lock:
            if self._use_numpy:
                return self._rng.bit_generator.state
            return self._rng.getstate()

    def setstate(self, state: Any) -> None:
        with self._lock:
            if self._use_numpy:
                self._rng.bit_generator.state = state
            else:
                self._rng.setstate(state)

    def as_numpy(self) -> np.random.Generator:
        """Return a NumPy Generator (the backend itself when NumPy-backed)."""
        if self._use_numpy:
            return self._rng
        with self._lock:
            return np.random.default_rng(self._rng.getrandbits(64))

    def __repr__(self) -> str:
        backend = "numpy" if self._use_numpy else "stdlib"
        return f"<RNG backend={backend} pid={os.getpid()} id={id(self)}>"


# =============================================================================
# GLOBAL & THREAD-LOCAL ACCESSORS
# =============================================================================
_global_rng = RNG()
_thread_local = threading.local()


def get_rng(thread_safe: bool = False, use_numpy: bool = False) -> RNG:
    """Return an RNG instance (process-global or owned by the calling thread).

    Thread-local instances are kept per backend, so `use_numpy` is always
    honoured. The process-global RNG ignores `use_numpy`.
    """
    if thread_safe:
        attr = "np_rng" if use_numpy else "rng"
        inst = getattr(_thread_local, attr, None)
        if inst is None:
            inst = RNG(use_numpy=use_numpy)
            setattr(_thread_local, attr, inst)
        return inst
    return _global_rng


def set_global_seed(seed: int) -> None:
    """Re-seed the process-global RNG."""
    _global_rng.seed(seed)
