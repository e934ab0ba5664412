# tests/test_sampler.py
import numpy as np
import pytest
from motrack.scenario.config import ConfigurationError, default_settings
from motrack.scenario.sampler import (
    InfeasibleLayoutError, SamplingCancelled, generate_positions_random, is_layout_feasible,
)
from motrack.scenario.validate import is_distance_at_least, is_valid_position
from motrack.utils.math import pairwise_distances

def test_generated_positions_constraints(sampler_factory, rng):
    sampler = sampler_factory({"min_dist": 2.0})
    pos = sampler.sample(12, rng=rng)
    assert list(pos.columns) == ["object", "x", "y"]
    assert len(pos) == 12
    assert pos["object"].is_unique
    assert list(pos["object"]) == list(range(1, 13))
    assert is_valid_position(pos)

    d = pairwise_distances(pos[["x", "y"]].to_numpy())
    assert d.size == 12 * 11 // 2
    assert np.all(d >= 2.0)

    assert pos["x"].between(-10, 10).all()
    assert pos["y"].between(-10, 10).all()

def test_border_distance_bounds():
    s = default_settings()
    for seed in range(20):
        pos = generate_positions_random(5, s, border_distance=3, rng=seed)
        assert pos["x"].between(-7, 7).all()
        assert pos["y"].between(-7, 7).all()

def test_zero_objects():
    pos = generate_positions_random(0, default_settings())
    assert len(pos) == 0
    assert is_valid_position(pos)

def test_seed_reproducibility():
    s = default_settings()
    p1 = generate_positions_random(8, s, rng=2024)
    p2 = generate_positions_random(8, s, rng=2024)
    assert np.allclose(p1[["x", "y"]], p2[["x", "y"]])

def test_without_check_distance_first_draw(sampler_factory):
    # min_dist far too large: only accepted because it is not checked
    sampler = sampler_factory({"min_dist": 100.0})
    pos = sampler.sample(6, rng=0, check_distance=False)
    assert len(pos) == 6
    assert sampler.last_attempts == 1
    assert not is_distance_at_least(pos, 100.0)

def test_resampling_counts_attempts(sampler_factory):
    # 10 objects 3 apart in 20x20: usually takes a few dozen draws
    sampler = sampler_factory({"min_dist": 3.0})
    pos = sampler.sample(10, rng=np.random.default_rng(7), max_attempts=None)
    assert sampler.last_attempts >= 1
    assert is_distance_at_least(pos, 3.0)

def test_mapping_settings_accepted():
    cfg = {"xlim": (0, 5), "ylim": (0, 5), "min_dist": 0.5}
    pos = generate_positions_random(4, cfg, rng=1)
    assert pos["x"].between(0, 5).all() and pos["y"].between(0, 5).all()

@pytest.mark.parametrize("cfg", [
    {"ylim": (0, 1), "min_dist": 0.1},
    {"xlim": (0, 1), "min_dist": 0.1},
    {"xlim": None, "ylim": (0, 1), "min_dist": 0.1},
    {"xlim": (1, 0), "ylim": (0, 1), "min_dist": 0.1},
    {"xlim": "ab", "ylim": (0, 1), "min_dist": 0.1},
])
def test_missing_or_bad_limits_fail_fast(cfg):
    with pytest.raises(ConfigurationError):
        generate_positions_random(3, cfg, should_stop=lambda: pytest.fail("sampled"))

def test_min_dist_required_only_when_checked():
    cfg = {"xlim": (0, 1), "ylim": (0, 1)}
    assert len(generate_positions_random(0, cfg)) == 0
    with pytest.raises(ConfigurationError):
        generate_positions_random(3, cfg)
    assert len(generate_positions_random(3, cfg, check_distance=False)) == 3

def test_negative_min_dist_rejected():
    with pytest.raises(ConfigurationError):
        generate_positions_random(3, {"xlim": (0, 1), "ylim": (0, 1), "min_dist": -1})

def test_border_too_wide():
    with pytest.raises(ConfigurationError):
        generate_positions_random(3, default_settings(), border_distance=11)

@pytest.mark.parametrize("n", [-1, 2.5, True, "3"])
def test_invalid_n(n):
    with pytest.raises(ValueError):
        generate_positions_random(n, default_settings())

def test_impossible_layout_detected_upfront():
    cfg = {"xlim": (0, 1), "ylim": (0, 1), "min_dist": 5.0}
    assert not is_layout_feasible(10, cfg["xlim"], cfg["ylim"], cfg["min_dist"])
    with pytest.raises(InfeasibleLayoutError):
        generate_positions_random(10, cfg, max_attempts=None)

def test_attempt_budget_exhausted():
    # passes the packing bound but is practically never drawn
    cfg = {"xlim": (0, 10), "ylim": (0, 10), "min_dist": 3.0}
    assert is_layout_feasible(12, cfg["xlim"], cfg["ylim"], cfg["min_dist"])
    with pytest.raises(InfeasibleLayoutError) as ei:
        generate_positions_random(12, cfg, rng=0, max_attempts=25)
    assert ei.value.attempts == 25

def test_timeout():
    cfg = {"xlim": (0, 10), "ylim": (0, 10), "min_dist": 3.0}
    with pytest.raises(InfeasibleLayoutError):
        generate_positions_random(12, cfg, rng=0, max_attempts=None, timeout=0.05)

def test_should_stop_cancels():
    calls = []
    def stop():
        calls.append(1)
        return len(calls) > 3
    cfg = {"xlim": (0, 10), "ylim": (0, 10), "min_dist": 3.0}
    with pytest.raises(SamplingCancelled) as ei:
        generate_positions_random(12, cfg, rng=0, max_attempts=None, should_stop=stop)
    assert ei.value.attempts == 3

def test_feasibility_bound():
    assert is_layout_feasible(0, (0, 0), (0, 0), 10.0)
    assert is_layout_feasible(1, (0, 0), (0, 0), 10.0)
    assert is_layout_feasible(100, (0, 1), (0, 1), 0.0)
    assert not is_layout_feasible(2, (0, 1), (0, 1), 5.0)
    assert not is_layout_feasible(2, (-10, 10), (-10, 10), 1.0, border_distance=11)

def test_verbose_messages(sampler_factory, capsys):
    sampler = sampler_factory(verbose=True)
    sampler.sample(3, rng=0)
    assert "[PositionSampler]" in capsys.readouterr().out
