"""
motrack — random object layouts for visual search / object tracking stimuli

Objects are circles placed uniformly into a square arena; layouts are redrawn
until every pair of centres is at least `min_dist` apart.

Core:
  - generate_positions_random / PositionSampler: rejection sampling of layouts
  - is_valid_position / is_distance_at_least: checks over position sets

Settings:
  - default_settings / settings: defaults overridden by keyword arguments
  - load_settings / save_settings: the same record as YAML

Rendering:
  - plot_position: matplotlib figure of a layout (import from motrack.render.plot)

CLI:
  - python -m motrack.demo
"""

from .scenario.config import (
    ConfigurationError,
    Settings,
    default_settings,
    settings,
    load_settings,
    save_settings,
    dump_settings,
)
from .scenario.validate import is_valid_position, is_distance_at_least
from .scenario.sampler import (
    DEFAULT_MAX_ATTEMPTS,
    InfeasibleLayoutError,
    SamplingCancelled,
    PositionSampler,
    generate_positions_random,
    is_layout_feasible,
)

__all__ = [
    "ConfigurationError",
    "Settings",
    "default_settings",
    "settings",
    "load_settings",
    "save_settings",
    "dump_settings",
    "is_valid_position",
    "is_distance_at_least",
    "DEFAULT_MAX_ATTEMPTS",
    "InfeasibleLayoutError",
    "SamplingCancelled",
    "PositionSampler",
    "generate_positions_random",
    "is_layout_feasible",
]
