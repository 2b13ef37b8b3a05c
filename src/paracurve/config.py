"""
config.py - Sampling configuration.

Defaults used by the array/Path helpers in `sampling.py`. Frozen, so a single
instance can be shared between threads.
"""

from dataclasses import dataclass
from typing import Optional

from .rng import RNG, get_rng


@dataclass(frozen=True)
class SamplingConfig:
    """Immutable settings for sampling curves into arrays and paths."""
    samples: int = 100              # linspace intervals (samples + 1 points)
    seed: Optional[int] = None      # None - thread-local RNG
    use_numpy: bool = False

    def __post_init__(self):
        if not isinstance(self.samples, int) or self.samples < 1:
            raise ValueError(f"samples must be a positive integer, got {self.samples!r}.")

    def make_rng(self) -> RNG:
        """Dedicated seeded RNG if `seed` is set, else the calling thread's RNG."""
        if self.seed is None:
            return get_rng(thread_safe=True, use_numpy=self.use_numpy)
        return RNG(seed=self.seed, use_numpy=self.use_numpy)


DEFAULT_CONFIG = SamplingConfig()
