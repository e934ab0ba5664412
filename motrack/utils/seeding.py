from __future__ import annotations
import numpy as np

class RNG:
    """Seed holder for stimulus generation.

    `rs` is one shared stream; `trial(k)` gives an independent stream per trial,
    so trial k of a stimulus set can be regenerated without replaying trials 0..k-1.
    """
    def __init__(self, seed: int | None = None):
        self.reseed(seed)

    def reseed(self, seed: int | None):
        self._seed = int(seed) if seed is not None else None
        self._rng = np.random.default_rng(self._seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def rs(self) -> np.random.Generator:
        return self._rng

    def trial(self, k: int) -> np.random.Generator:
        if self._seed is None:
            return np.random.default_rng()
        return np.random.default_rng([self._seed, int(k)])

def as_generator(rng: int | RNG | np.random.Generator | None = None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, RNG):
        return rng.rs
    return RNG(rng).rs
