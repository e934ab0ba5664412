from __future__ import annotations

import math
import time
from typing import Any, Callable, Mapping

import numpy as np
import pandas as pd

from .config import ConfigurationError, Settings, get_limits, get_setting
from .validate import is_distance_at_least
from ..utils.seeding import RNG, as_generator

DEFAULT_MAX_ATTEMPTS = 10_000

# densest packing of equal discs in the plane (hexagonal)
HEX_PACKING_DENSITY = math.pi / (2.0 * math.sqrt(3.0))


class InfeasibleLayoutError(RuntimeError):
    """No layout satisfying the minimum distance was found within the budget."""
    def __init__(self, msg: str, attempts: int = 0, elapsed: float = 0.0):
        super().__init__(msg)
        self.attempts = attempts
        self.elapsed = elapsed


class SamplingCancelled(RuntimeError):
    """The caller's `should_stop` hook asked the sampler to give up."""
    def __init__(self, msg: str, attempts: int = 0):
        super().__init__(msg)
        self.attempts = attempts


def is_layout_feasible(n: int, xlim, ylim, min_dist: float, border_distance: float = 0.0) -> bool:
    """
    Necessary condition for placing n centres pairwise >= min_dist apart.

    Discs of diameter min_dist around the centres are disjoint and lie inside the
    sampling rectangle grown by min_dist/2 on each side, so their total area cannot
    exceed the hexagonal packing density times that area. False means the request
    is certainly impossible; True does not promise that sampling will be quick.
    """
    if n <= 1 or min_dist <= 0:
        return True
    w = (xlim[1] - xlim[0]) - 2.0 * border_distance
    h = (ylim[1] - ylim[0]) - 2.0 * border_distance
    if w < 0 or h < 0:
        return False
    disc = math.pi * (min_dist / 2.0) ** 2
    return n * disc <= HEX_PACKING_DENSITY * (w + min_dist) * (h + min_dist)


class PositionSampler:
    """Random object positions inside the arena given by `xlim`/`ylim`."""
    def __init__(self, cfg: Settings | Mapping[str, Any], verbose: bool = False):
        self.cfg = cfg
        self.verbose = bool(verbose)
        self.last_attempts = 0

    # ==========================================================
    # bounds
    # ==========================================================
    def sampling_box(self, border_distance: float = 0.0):
        xlim = get_limits(self.cfg, "xlim")
        ylim = get_limits(self.cfg, "ylim")
        b = float(border_distance)
        box = (xlim[0] + b, xlim[1] - b), (ylim[0] + b, ylim[1] - b)
        for name, (lo, hi) in zip(("x", "y"), box):
            if lo > hi:
                raise ConfigurationError(
                    f"border_distance={b} leaves no room along {name} "
                    f"(arena {xlim if name == 'x' else ylim})")
        return box

    def min_dist(self) -> float:
        md = get_setting(self.cfg, "min_dist")
        if md is None:
            raise ConfigurationError("setting `min_dist` is required when check_distance=True")
        try:
            md = float(md)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"setting `min_dist` must be a number, got {md!r}") from e
        if not md >= 0.0:
            raise ConfigurationError(f"setting `min_dist` must be non-negative, got {md!r}")
        return md

    # ==========================================================
    # sampling
    # ==========================================================
    def draw(self, n: int, rng: np.random.Generator, box) -> pd.DataFrame:
        """One candidate: n uniform points, identifiers 1..n."""
        (x0, x1), (y0, y1) = box
        return pd.DataFrame({
            "object": np.arange(1, n + 1),
            "x": rng.uniform(x0, x1, size=n),
            "y": rng.uniform(y0, y1, size=n),
        })

    def sample(self,
               n: int,
               rng: int | RNG | np.random.Generator | None = None,
               check_distance: bool = True,
               border_distance: float = 0.0,
               max_attempts: int | None = DEFAULT_MAX_ATTEMPTS,
               timeout: float | None = None,
               should_stop: Callable[[], bool] | None = None) -> pd.DataFrame:
        """
        Rejection sampling:
          1) draw all n positions uniformly inside the (border-inset) arena;
          2) without check_distance the first draw is returned;
          3) otherwise the draw is kept only if every pair is >= min_dist apart,
             else it is discarded as a whole and step 1 repeats.

        `border_distance` only narrows the sampling box; it is not part of the
        distance check. The loop stops with InfeasibleLayoutError after
        `max_attempts` draws (None = unbounded) or `timeout` seconds, and with
        SamplingCancelled when `should_stop()` returns True.
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
            raise ValueError(f"n must be a non-negative integer, got {n!r}")
        n = int(n)
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1 or None, got {max_attempts!r}")

        box = self.sampling_box(border_distance)
        self.last_attempts = 0
        if n == 0:
            return self.draw(0, as_generator(rng), box)

        min_dist = self.min_dist() if check_distance else None

        if check_distance and not is_layout_feasible(n, box[0], box[1], min_dist):
            raise InfeasibleLayoutError(
                f"{n} objects with min_dist={min_dist} cannot fit into "
                f"x={box[0]}, y={box[1]}")

        rng = as_generator(rng)
        t0 = time.monotonic()
        warned = False
        attempts = 0
        while True:
            if should_stop is not None and should_stop():
                raise SamplingCancelled(
                    f"sampling cancelled after {attempts} attempt(s)", attempts=attempts)

            attempts += 1
            self.last_attempts = attempts
            p = self.draw(n, rng, box)
            if not check_distance or is_distance_at_least(p, min_dist):
                if self.verbose:
                    print(f"[PositionSampler] n={n} accepted after {attempts} attempt(s)")
                return p

            elapsed = time.monotonic() - t0
            if max_attempts is not None:
                if attempts >= max_attempts:
                    raise InfeasibleLayoutError(
                        f"no layout with min_dist={min_dist} for n={n} "
                        f"after {attempts} attempts", attempts=attempts, elapsed=elapsed)
                if self.verbose and not warned and attempts * 2 > max_attempts:
                    warned = True
                    print(f"[PositionSampler] WARNING: n={n} min_dist={min_dist} still "
                          f"rejected after {attempts}/{max_attempts} attempts")
            if timeout is not None and elapsed >= timeout:
                raise InfeasibleLayoutError(
                    f"no layout with min_dist={min_dist} for n={n} "
                    f"within {timeout:.3f}s ({attempts} attempts)",
                    attempts=attempts, elapsed=elapsed)


def generate_positions_random(n: int,
                              settings: Settings | Mapping[str, Any],
                              check_distance: bool = True,
                              border_distance: float = 0.0,
                              *,
                              rng: int | RNG | np.random.Generator | None = None,
                              max_attempts: int | None = DEFAULT_MAX_ATTEMPTS,
                              timeout: float | None = None,
                              should_stop: Callable[[], bool] | None = None,
                              verbose: bool = False) -> pd.DataFrame:
    """
    Random object positions (DataFrame with `object`, `x`, `y`).

        pos = generate_positions_random(8, default_settings())
        # start further from the arena borders
        pos = generate_positions_random(8, default_settings(), border_distance=3)
    """
    sampler = PositionSampler(settings, verbose=verbose)
    return sampler.sample(n, rng=rng, check_distance=check_distance,
                          border_distance=border_distance, max_attempts=max_attempts,
                          timeout=timeout, should_stop=should_stop)
