# tests/conftest.py
import matplotlib
matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest
from motrack.scenario.config import settings
from motrack.scenario.sampler import PositionSampler

@pytest.fixture
def cfg_base():
    return dict(
        xlim=(-10.0, 10.0), ylim=(-10.0, 10.0),
        min_dist=1.0, r=0.5, arena_border=True,
    )

@pytest.fixture
def settings_factory(cfg_base):
    def _make_settings(overrides: dict = None):
        cfg = dict(cfg_base)
        if overrides:
            cfg.update(overrides)
        return settings(**cfg)
    return _make_settings

@pytest.fixture
def rng():
    return np.random.default_rng(123)

@pytest.fixture
def sampler_factory(settings_factory):
    def _make_sampler(overrides: dict = None, verbose: bool = False):
        return PositionSampler(settings_factory(overrides), verbose=verbose)
    return _make_sampler

@pytest.fixture
def example_pos():
    # 8 objects on a diagonal, consecutive spacing sqrt(2)
    i = np.arange(1, 9)
    return pd.DataFrame({"object": i, "x": i.astype(float), "y": (4 - i).astype(float)})
