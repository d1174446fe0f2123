"""Scenario sweeps over the predictive models.

Generates slope and ground-motion scenarios by Latin Hypercube Sampling and
evaluates one model variant over the whole sample in a single batch.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from seismoslide.models import (
    EvaluationConfig,
    Prediction,
    model_registry,
    predict_displacement,
    predict_kim_sa,
    predict_kim_tm,
)


# ---------------------------------------------------------------------------
# Configuration dataclasses
# ---------------------------------------------------------------------------

@dataclass
class ParametricRange:
    """Defines the sweep range for a single scenario field.

    Parameters
    ----------
    name : field name; must be one of "im1", "im2", "im3", "ky", "ts",
        "h_ratio", "ir"
    low : lower bound of the range
    high : upper bound of the range
    log_scale : if True, sample uniformly in log-space (intensity measures
        typically span orders of magnitude)
    """

    name: str
    low: float
    high: float
    log_scale: bool = False


_FIELD_NAMES = frozenset({"im1", "im2", "im3", "ky", "ts", "h_ratio", "ir"})

# Non-IM fields each model family needs
_MODEL_FIELDS = {
    "displacement": ("ky", "ts", "h_ratio", "ir"),
    "kim_sa": ("ts", "h_ratio", "ir"),
    "kim_tm": ("ts", "h_ratio", "ir"),
}


@dataclass
class ScenarioSweepConfig:
    """Configuration for a scenario sweep.

    Parameters
    ----------
    ranges : list of ParametricRange objects defining the swept fields
    fixed : values held constant across all scenarios, keyed by field name
    num_samples : total number of LHS samples to generate
    seed : random seed for reproducibility
    """

    ranges: list[ParametricRange] = field(default_factory=list)
    fixed: dict[str, float] = field(default_factory=dict)
    num_samples: int = 1000
    seed: int = 42


def _check_field_name(name: str) -> None:
    if name not in _FIELD_NAMES:
        raise ValueError(
            f"Unknown scenario field '{name}'. "
            f"Must be one of {sorted(_FIELD_NAMES)}."
        )


# ---------------------------------------------------------------------------
# Latin Hypercube sampling
# ---------------------------------------------------------------------------

def generate_scenarios(config: ScenarioSweepConfig) -> dict[str, NDArray]:
    """Generate scenarios by Latin Hypercube Sampling.

    Parameters
    ----------
    config : sweep configuration with field ranges and sample count

    Returns
    -------
    Mapping of field name to a ``(num_samples,)`` array.  Fixed fields are
    repeated for every sample.

    Raises
    ------
    ValueError
        If a field name is not recognised or appears twice, if no ranges
        are specified, or if a log-scale range has a non-positive bound.
    """
    from scipy.stats.qmc import LatinHypercube

    if not config.ranges:
        raise ValueError("At least one ParametricRange must be specified.")
    if config.num_samples < 1:
        raise ValueError(f"num_samples must be >= 1, got {config.num_samples}.")

    seen: set[str] = set()
    for pr in config.ranges:
        _check_field_name(pr.name)
        if pr.name in seen:
            raise ValueError(f"Field '{pr.name}' has more than one range.")
        seen.add(pr.name)
        if pr.log_scale and (pr.low <= 0 or pr.high <= 0):
            raise ValueError(
                f"log_scale requires positive bounds for '{pr.name}', "
                f"got [{pr.low}, {pr.high}]."
            )
    for name in config.fixed:
        _check_field_name(name)
        if name in seen:
            raise ValueError(f"Field '{name}' is both swept and fixed.")

    sampler = LatinHypercube(d=len(config.ranges), seed=config.seed)
    # unit_samples has shape (num_samples, n_dim) in [0, 1)
    unit_samples = sampler.random(n=config.num_samples)

    scenarios: dict[str, NDArray] = {}
    for j, pr in enumerate(config.ranges):
        u = unit_samples[:, j]
        if pr.log_scale:
            # Map [0, 1) -> [log(low), log(high)] -> exp
            log_low = np.log(pr.low)
            log_high = np.log(pr.high)
            scenarios[pr.name] = np.exp(log_low + u * (log_high - log_low))
        else:
            scenarios[pr.name] = pr.low + u * (pr.high - pr.low)

    for name, value in config.fixed.items():
        scenarios[name] = np.full(config.num_samples, float(value))

    return scenarios


# ---------------------------------------------------------------------------
# Sweep runner
# ---------------------------------------------------------------------------

def run_scenario_sweep(
    model: str,
    variant: str,
    config: ScenarioSweepConfig,
    eval_config: EvaluationConfig | None = None,
    verbose: int = 0,
) -> tuple[dict[str, NDArray], Prediction]:
    """Sample scenarios and evaluate one model variant over all of them.

    Parameters
    ----------
    model : "displacement", "kim_sa" or "kim_tm"
    variant : variant key within *model*
    config : scenario sweep configuration
    eval_config : batch evaluation settings (None = defaults)
    verbose : 0 = silent, 1 = summary lines

    Returns
    -------
    The sampled scenarios and the corresponding :class:`Prediction`.

    Raises
    ------
    ValueError
        If *model* or *variant* is unknown, or a field the model needs is
        neither swept nor fixed.
    """
    model_registry(model).get(variant)

    scenarios = generate_scenarios(config)
    missing = [name for name in _MODEL_FIELDS[model] if name not in scenarios]
    if missing:
        raise ValueError(
            f"Fields {missing} are required by the {model} model; add a "
            f"ParametricRange or a fixed value for each."
        )

    if verbose >= 1:
        print(
            f"Scenario sweep: {config.num_samples} scenarios, "
            f"model={model}, variant={variant}"
        )

    t_start = time.perf_counter()
    ims: dict[str, Optional[NDArray]] = {
        name: scenarios.get(name) for name in ("im1", "im2", "im3")
    }
    if model == "displacement":
        prediction = predict_displacement(
            ims["im1"], ims["im2"], ims["im3"], scenarios["ky"],
            scenarios["ts"], scenarios["h_ratio"], scenarios["ir"],
            variant, eval_config,
        )
    else:
        predict = predict_kim_sa if model == "kim_sa" else predict_kim_tm
        prediction = predict(
            ims["im1"], ims["im2"], ims["im3"],
            scenarios["ts"], scenarios["h_ratio"], scenarios["ir"],
            variant, eval_config,
        )

    total_time = time.perf_counter() - t_start
    if verbose >= 1:
        n_clamped = int(np.count_nonzero(prediction.clamped))
        print(
            f"  Sweep complete: {total_time:.3f}s total, "
            f"{n_clamped} scenario(s) clamped to a calibration or physical bound"
        )

    return scenarios, prediction
