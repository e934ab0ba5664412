from __future__ import annotations

from typing import Iterable

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.patches import Circle

from ..scenario.config import Settings, default_settings


def prepare_presentation(position: pd.DataFrame,
                         settings: Settings | None = None,
                         targets: Iterable | None = None) -> pd.DataFrame:
    """
    Copy of `position` with `target`, `fill` and `border` columns.

    `targets` (object identifiers) replaces any `target` column already present;
    without it an existing column is kept, otherwise every object is a distractor.
    `fill`/`border` already in the frame win over the settings colours.
    """
    s = settings if settings is not None else default_settings()
    p = position.copy()

    if targets is not None:
        p["target"] = p["object"].isin(list(targets))
    elif "target" not in p.columns:
        p["target"] = False
    p["target"] = p["target"].astype(bool)

    if "fill" not in p.columns:
        p["fill"] = p["target"].map({True: s.fill_target, False: s.fill_object})
    if "border" not in p.columns:
        p["border"] = p["target"].map({True: s.border_target, False: s.border_object})
    return p


def plot_position(position: pd.DataFrame,
                  settings: Settings | None = None,
                  targets: Iterable | None = None,
                  ax=None,
                  figsize=(6, 6)):
    """
    Draw a position set: one circle of radius `settings.r` per object,
    arena limits from `xlim`/`ylim`, optional arena frame.

        pos = generate_positions_random(8, default_settings())
        fig = plot_position(pos, default_settings(), targets=[1, 2, 3, 4])

    Returns the matplotlib Figure.
    """
    s = settings if settings is not None else default_settings()
    p = prepare_presentation(position, s, targets)

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    for x, y, fill, border in zip(p["x"], p["y"], p["fill"], p["border"]):
        ax.add_patch(Circle((x, y), s.r, facecolor=fill, edgecolor=border))

    (x0, x1), (y0, y1) = s.xlim, s.ylim
    ax.set_xlim(x0, x1)
    ax.set_ylim(y0, y1)
    ax.set_aspect("equal")
    ax.margins(0)
    ax.set_facecolor("none")

    if s.arena_border:
        # left, bottom, top, right
        for xs, ys in (((x0, x0), (y0, y1)),
                       ((x0, x1), (y0, y0)),
                       ((x0, x1), (y1, y1)),
                       ((x1, x1), (y0, y1))):
            ax.plot(xs, ys, color="black", linewidth=1.0)
    return fig
