"""Tests for seismoslide.parametric module."""

import numpy as np
import pytest

from seismoslide.parametric import (
    ParametricRange,
    ScenarioSweepConfig,
    generate_scenarios,
    run_scenario_sweep,
)


# ---- ParametricRange ----

def test_parametric_range_fields():
    pr = ParametricRange(name="ky", low=0.05, high=0.3)
    assert pr.name == "ky"
    assert pr.low == 0.05
    assert pr.high == 0.3
    assert pr.log_scale is False


# ---- ScenarioSweepConfig ----

def test_sweep_config_defaults():
    cfg = ScenarioSweepConfig()
    assert cfg.num_samples == 1000
    assert cfg.seed == 42
    assert cfg.ranges == []
    assert cfg.fixed == {}


# ---- generate_scenarios ----

def test_generate_scenarios_count_and_bounds():
    cfg = ScenarioSweepConfig(
        ranges=[ParametricRange("ts", 0.05, 1.5)],
        num_samples=50,
    )
    scenarios = generate_scenarios(cfg)
    assert scenarios["ts"].shape == (50,)
    assert np.all((scenarios["ts"] >= 0.05) & (scenarios["ts"] <= 1.5))


def test_generate_scenarios_log_scale():
    cfg = ScenarioSweepConfig(
        ranges=[ParametricRange("im2", 1.0, 100.0, log_scale=True)],
        num_samples=200,
    )
    values = generate_scenarios(cfg)["im2"]
    assert np.all((values >= 1.0) & (values <= 100.0))
    # LHS in log space puts half the samples below the geometric midpoint
    assert np.sum(values < 10.0) == 100


def test_generate_scenarios_reproducible():
    cfg = ScenarioSweepConfig(
        ranges=[ParametricRange("ky", 0.05, 0.3), ParametricRange("ir", 0.1, 1.0)],
        num_samples=20,
        seed=7,
    )
    a = generate_scenarios(cfg)
    b = generate_scenarios(cfg)
    np.testing.assert_array_equal(a["ky"], b["ky"])
    np.testing.assert_array_equal(a["ir"], b["ir"])


def test_generate_scenarios_fixed_fields():
    cfg = ScenarioSweepConfig(
        ranges=[ParametricRange("ts", 0.05, 1.5)],
        fixed={"h_ratio": 0.5},
        num_samples=10,
    )
    scenarios = generate_scenarios(cfg)
    np.testing.assert_array_equal(scenarios["h_ratio"], np.full(10, 0.5))


def test_generate_scenarios_no_ranges():
    with pytest.raises(ValueError, match="At least one"):
        generate_scenarios(ScenarioSweepConfig())


def test_generate_scenarios_unknown_name():
    cfg = ScenarioSweepConfig(ranges=[ParametricRange("rpm", 0.0, 1.0)])
    with pytest.raises(ValueError, match="Unknown scenario field"):
        generate_scenarios(cfg)


def test_generate_scenarios_log_scale_needs_positive_bounds():
    cfg = ScenarioSweepConfig(ranges=[ParametricRange("ts", 0.0, 1.0, log_scale=True)])
    with pytest.raises(ValueError, match="positive bounds"):
        generate_scenarios(cfg)


def test_generate_scenarios_swept_and_fixed():
    cfg = ScenarioSweepConfig(
        ranges=[ParametricRange("ts", 0.05, 1.5)],
        fixed={"ts": 0.3},
    )
    with pytest.raises(ValueError, match="both swept and fixed"):
        generate_scenarios(cfg)


def test_generate_scenarios_duplicate_range():
    cfg = ScenarioSweepConfig(
        ranges=[ParametricRange("ts", 0.05, 1.5), ParametricRange("ts", 0.1, 1.0)],
    )
    with pytest.raises(ValueError, match="more than one range"):
        generate_scenarios(cfg)


# ---- run_scenario_sweep ----

def _displacement_config(n=40):
    return ScenarioSweepConfig(
        ranges=[
            ParametricRange("im1", 0.1, 0.8, log_scale=True),
            ParametricRange("im2", 5.0, 60.0, log_scale=True),
            ParametricRange("ts", 0.05, 1.5),
        ],
        fixed={"ky": 0.05, "h_ratio": 0.5, "ir": 0.4},
        num_samples=n,
    )


def test_run_displacement_sweep():
    scenarios, pred = run_scenario_sweep("displacement", "PGA,PGV", _displacement_config())
    assert pred.median.shape == (40,)
    assert np.all(np.isfinite(pred.median))
    assert np.all(pred.median > 0)
    np.testing.assert_array_equal(scenarios["ky"], 0.05)


def test_run_kim_sweep_verbose(capsys):
    cfg = ScenarioSweepConfig(
        ranges=[ParametricRange("ts", 0.0, 1.5)],
        fixed={"im1": 0.3, "im2": 0.4, "h_ratio": 0.5, "ir": 0.4},
        num_samples=25,
    )
    _, pred = run_scenario_sweep("kim_tm", "k-Tm", cfg, verbose=1)
    assert pred.variant == "k-Tm"
    out = capsys.readouterr().out
    assert "25 scenarios" in out
    assert "Sweep complete" in out


def test_run_sweep_missing_field():
    cfg = ScenarioSweepConfig(
        ranges=[ParametricRange("im1", 0.1, 0.8)],
        fixed={"im2": 25.0, "ts": 0.3, "h_ratio": 0.5, "ir": 0.4},
        num_samples=5,
    )
    with pytest.raises(ValueError, match="ky"):
        run_scenario_sweep("displacement", "PGA,PGV", cfg)


def test_run_sweep_unknown_variant():
    with pytest.raises(ValueError, match="k-PGA"):
        run_scenario_sweep("kim_sa", "k-Tm", _displacement_config())


def test_run_sweep_unknown_model():
    with pytest.raises(ValueError, match="Unknown model"):
        run_scenario_sweep("kim", "k-PGA", _displacement_config())
