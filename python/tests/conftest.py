"""Shared fixtures for seismoslide tests."""

import numpy as np
import pytest

from seismoslide.coefficients import DisplacementVariant, KimVariant, NetworkCoefficients


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "regression: known-point checks against reference values")
    config.addinivalue_line("markers", "slow: tests taking more than a few seconds")


@pytest.fixture
def linear_network():
    """One predictor, one hidden unit: output = 0.5 + 2 * tanh((x - 1))."""
    return NetworkCoefficients(
        x_min=[0.0],
        x_max=[2.0],
        weights=[[1.0]],
        hidden_bias=[0.0],
        output_weights=[2.0],
        output_bias=0.5,
    )


@pytest.fixture
def zero_network_3():
    """Three-predictor network whose output is always ln(1) = 0."""
    return NetworkCoefficients(
        x_min=[-5.0, -5.0, -5.0],
        x_max=[1.0, 1.0, 1.0],
        weights=np.zeros((3, 2)),
        hidden_bias=[0.0, 0.0],
        output_weights=[0.0, 0.0],
        output_bias=0.0,
    )


@pytest.fixture
def toy_displacement_variant(zero_network_3):
    """Network displacement variant with known sigma and zero correction."""
    return DisplacementVariant(
        key="toy",
        intensity_measures=("im1", "im2"),
        sigma_rigid=(0.4, 0.5),
        sigma_flexible=(0.5, 0.4, 0.1),
        correction=np.zeros(13),
        network=zero_network_3,
    )


@pytest.fixture
def toy_kim_variant():
    """k-IM variant over [ln IM1, ln IM2, ln Ts, h, IR] with ln Ts in [ln 0.02, ln 2]."""
    network = NetworkCoefficients(
        x_min=[-6.0, -6.0, np.log(0.02), 0.0, 0.1],
        x_max=[1.0, 1.0, np.log(2.0), 1.0, 1.0],
        weights=np.zeros((5, 1)),
        hidden_bias=[0.0],
        output_weights=[0.0],
        output_bias=0.0,
    )
    return KimVariant(
        key="k-toy",
        intensity_measures=("im1", "im2"),
        description="PGA, SA(1s)",
        anchor="im1",
        sigma=(0.2, 0.0, 0.0, 0.0, 0.0, 0.0),
        network=network,
    )
