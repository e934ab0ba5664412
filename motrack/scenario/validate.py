"""
motrack/scenario/validate.py — predicates over position sets

A position set is a DataFrame with one row per object and columns
`object`, `x`, `y` (plus optional presentation columns).

Both predicates are total: they return False on unreadable input instead of
raising, and never modify the frame they are given.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
from pandas.api import types as ptypes

from ..utils.math import pairwise_distances

POSITION_COLUMNS = ("object", "x", "y")


def _as_frame(position) -> pd.DataFrame | None:
    if position is None:
        return None
    if isinstance(position, pd.DataFrame):
        return position
    try:
        return pd.DataFrame(position)
    except (TypeError, ValueError):
        return None


def _is_coordinate_dtype(col: pd.Series) -> bool:
    return (ptypes.is_numeric_dtype(col)
            and not ptypes.is_bool_dtype(col)
            and not ptypes.is_complex_dtype(col))


def is_valid_position(position) -> bool:
    """
    True if the position set satisfies:
      1. each `object` appears only once
      2. no missing `x`, `y`
      3. `x` and `y` are numeric

    No restriction is placed on the type of `object`. An empty set is valid.
    """
    df = _as_frame(position)
    if df is None:
        return False
    if len(df) == 0:
        return True
    if any(c not in df.columns for c in POSITION_COLUMNS):
        return False

    x, y = df["x"], df["y"]
    if x.isna().any() or y.isna().any():
        return False
    if not (_is_coordinate_dtype(x) and _is_coordinate_dtype(y)):
        return False
    try:
        sizes = df.groupby("object", sort=False, dropna=False).size()
    except TypeError:
        # unhashable identifiers cannot be told apart
        return False
    return bool((sizes == 1).all())


def is_distance_at_least(position, min_distance: float) -> bool:
    """
    True if every pairwise Euclidean distance between objects is >= min_distance.

    With fewer than two objects there is no pair, so the result is True for any
    threshold.
    """
    df = _as_frame(position)
    if df is None:
        return False
    if len(df) < 2:
        return True
    if "x" not in df.columns or "y" not in df.columns:
        return False
    if not (_is_coordinate_dtype(df["x"]) and _is_coordinate_dtype(df["y"])):
        return False
    try:
        pts = df[["x", "y"]].to_numpy(dtype=float)
        thr = float(min_distance)
    except (KeyError, TypeError, ValueError):
        return False
    d = pairwise_distances(pts)
    # NaN compares False, so a missing coordinate fails the check
    return bool(np.all(d >= thr))
