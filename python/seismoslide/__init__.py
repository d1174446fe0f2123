"""Seismoslide: predictive models for earthquake-induced sliding displacement."""

from seismoslide.coefficients import (
    CoefficientRegistry,
    DisplacementVariant,
    KimVariant,
    NetworkCoefficients,
    DISPLACEMENT_VARIANTS,
    KIM_SA_VARIANTS,
    KIM_TM_VARIANTS,
)
from seismoslide.models import (
    EvaluationConfig,
    Prediction,
    available_variants,
    predict_displacement,
    predict_kim_sa,
    predict_kim_tm,
)
from seismoslide.parametric import (
    ParametricRange,
    ScenarioSweepConfig,
    generate_scenarios,
    run_scenario_sweep,
)

__version__ = "0.1.0"

__all__ = [
    # Coefficient registries
    "CoefficientRegistry",
    "DisplacementVariant",
    "KimVariant",
    "NetworkCoefficients",
    "DISPLACEMENT_VARIANTS",
    "KIM_SA_VARIANTS",
    "KIM_TM_VARIANTS",
    # Models
    "EvaluationConfig",
    "Prediction",
    "available_variants",
    "predict_displacement",
    "predict_kim_sa",
    "predict_kim_tm",
    # Scenario sweeps
    "ParametricRange",
    "ScenarioSweepConfig",
    "generate_scenarios",
    "run_scenario_sweep",
]
