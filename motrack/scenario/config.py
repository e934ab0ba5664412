# motrack/scenario/config.py
from __future__ import annotations

import dataclasses as dc
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

import yaml


class ConfigurationError(ValueError):
    """Missing or malformed settings."""


@dataclass(frozen=True)
class Settings:
    # —— arena / objects (used by the generator) ——
    xlim: Tuple[float, float] = (-10.0, 10.0)
    ylim: Tuple[float, float] = (-10.0, 10.0)
    min_dist: float = 1.0          # minimum distance between object centres
    # —— presentation (used by the renderer only) ——
    r: float = 0.5                 # object radius
    arena_border: bool = True
    fill_object: str = "gray"
    fill_target: str = "green"
    border_object: str = "black"
    border_target: str = "black"


SETTING_KEYS = tuple(f.name for f in dc.fields(Settings))


def default_settings() -> Settings:
    return Settings()


def settings(parent: Settings | None = None, **overrides) -> Settings:
    """
    Custom copy of the settings: defaults -> parent -> overrides.

        settings(xlim=(0, 10), ylim=(0, 10))
        settings(base, min_dist=2.0)
    """
    unknown = sorted(k for k in overrides if k not in SETTING_KEYS)
    if unknown:
        raise ConfigurationError(f"unknown setting(s): {unknown}; known: {list(SETTING_KEYS)}")
    base = parent if parent is not None else default_settings()
    if not isinstance(base, Settings):
        raise ConfigurationError(f"parent must be Settings, got {type(base).__name__}")
    return dc.replace(base, **{k: _range_to_tuple(v) for k, v in overrides.items()})


def _range_to_tuple(x):
    # yaml gives ranges as lists
    if isinstance(x, list) and len(x) == 2 and all(isinstance(v, (int, float)) for v in x):
        return (float(x[0]), float(x[1]))
    return x


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(path: str, parent: Settings | None = None) -> Settings:
    """Settings from a YAML mapping; keys may sit at top level or under `settings:`."""
    raw = load_yaml(path)
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"{path}: expected a mapping, got {type(raw).__name__}")
    if "settings" in raw:
        raw = raw["settings"] or {}
        if not isinstance(raw, Mapping):
            raise ConfigurationError(f"{path}: `settings` must be a mapping")
    bad = [k for k in raw if not isinstance(k, str)]
    if bad:
        raise ConfigurationError(f"{path}: setting names must be strings, got {bad[0]!r}")
    return settings(parent, **dict(raw))


def dump_settings(s: Settings) -> Dict[str, Any]:
    d = dc.asdict(s)
    for k, v in d.items():
        if isinstance(v, tuple):
            d[k] = list(v)
    return d


def save_settings(path: str, s: Settings):
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump({"settings": dump_settings(s)}, f, sort_keys=False)


def get_setting(cfg: Settings | Mapping[str, Any], key: str, default=None):
    """Read one key from a Settings record or a plain mapping."""
    if isinstance(cfg, Mapping):
        return cfg.get(key, default)
    return getattr(cfg, key, default)


def get_limits(cfg: Settings | Mapping[str, Any], key: str) -> Tuple[float, float]:
    """`xlim`/`ylim` as a float pair; fails fast when absent or malformed."""
    if cfg is None:
        raise ConfigurationError("settings are required")
    lim = get_setting(cfg, key)
    if lim is None:
        raise ConfigurationError(f"setting `{key}` is required")
    try:
        lo, hi = lim
        lo, hi = float(lo), float(hi)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"setting `{key}` must be a (min, max) pair, got {lim!r}") from e
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise ConfigurationError(f"setting `{key}` must be finite, got {lim!r}")
    if lo > hi:
        raise ConfigurationError(f"setting `{key}` must satisfy min <= max, got {lim!r}")
    return lo, hi
