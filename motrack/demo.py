#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Generate one random layout, save it as CSV and PNG.

    python -m motrack.demo --n 8 --targets 1 2 3 4 --seed 42
    python -m motrack.demo --cfg arena.yaml --border-distance 3
"""
from __future__ import annotations

import argparse
import os
from typing import List, Sequence

import matplotlib

from .scenario.config import default_settings, load_settings
from .scenario.sampler import DEFAULT_MAX_ATTEMPTS, PositionSampler
from .scenario.validate import is_distance_at_least, is_valid_position
from .utils.seeding import RNG


def run_demo(n: int = 8, seed: int | None = 42,
             targets: Sequence[int] | None = None,
             border_distance: float = 0.0,
             check_distance: bool = True,
             max_attempts: int | None = DEFAULT_MAX_ATTEMPTS,
             cfg_path: str | None = None,
             out_csv: str | None = "positions.csv",
             out_png: str | None = "positions.png",
             verbose: bool = True):
    s = load_settings(cfg_path) if cfg_path else default_settings()
    sampler = PositionSampler(s, verbose=verbose)
    pos = sampler.sample(n, rng=RNG(seed), check_distance=check_distance,
                         border_distance=border_distance, max_attempts=max_attempts)

    print(f"[motrack.demo] n={n} seed={seed} xlim={s.xlim} ylim={s.ylim} min_dist={s.min_dist}")
    print(f"[motrack.demo] attempts={sampler.last_attempts} "
          f"valid={is_valid_position(pos)} "
          f"min_dist_ok={is_distance_at_least(pos, s.min_dist)}")

    if out_csv:
        pos.to_csv(out_csv, index=False)
        print(f"[Saved] positions CSV -> {os.path.abspath(out_csv)}")
    if out_png:
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from .render.plot import plot_position

        fig = plot_position(pos, s, targets=targets)
        fig.savefig(out_png, dpi=150)
        plt.close(fig)
        print(f"[Saved] plot -> {os.path.abspath(out_png)}")
    return pos


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="motrack-demo", description=__doc__,
                                 formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--n", type=int, default=8, help="number of objects")
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--targets", type=int, nargs="*", default=None,
                    help="object ids drawn as targets")
    ap.add_argument("--border-distance", type=float, default=0.0)
    ap.add_argument("--no-check-distance", action="store_true",
                    help="accept the first draw regardless of min_dist")
    ap.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS,
                    help="0 = retry without limit")
    ap.add_argument("--cfg", type=str, default=None, help="path to settings yaml")
    ap.add_argument("--out-csv", type=str, default="positions.csv")
    ap.add_argument("--out-png", type=str, default="positions.png")
    ap.add_argument("--quiet", action="store_true")
    return ap


def main(argv: List[str] | None = None):
    args = build_parser().parse_args(argv)
    run_demo(n=args.n, seed=args.seed, targets=args.targets,
             border_distance=args.border_distance,
             check_distance=not args.no_check_distance,
             max_attempts=args.max_attempts or None,
             cfg_path=args.cfg,
             out_csv=args.out_csv or None, out_png=args.out_png or None,
             verbose=not args.quiet)


if __name__ == "__main__":
    main()
