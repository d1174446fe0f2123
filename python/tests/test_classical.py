"""Tests for seismoslide.classical -- rigid baseline and correction term."""

import numpy as np

from seismoslide.classical import (
    correction_basis,
    correction_term,
    rigid_baseline_basis,
    rigid_displacement,
)
from seismoslide.coefficients import DISPLACEMENT_VARIANTS


def test_rigid_basis_columns():
    basis = rigid_baseline_basis(np.array([0.5]), np.array([-1.0]), np.array([2.0]))
    np.testing.assert_allclose(basis, [[1.0, 0.5, 0.25, 0.125, 0.0625, -1.0, 2.0]])


def test_rigid_displacement_known_point():
    # Saygili & Rathje (2008) PGA-PGV form at PGA = 0.3 g, PGV = 25 cm/s, Ky = 0.1 g
    c = DISPLACEMENT_VARIANTS.get("PGA,PGV").rigid_baseline
    r = 0.1 / 0.3
    expected = (
        -1.56 - 4.58 * r - 20.84 * r ** 2 + 44.75 * r ** 3 - 30.5 * r ** 4
        - 0.64 * np.log(0.3) + 1.55 * np.log(25.0)
    )
    out = rigid_displacement(c, np.array([r]), np.log([0.3]), np.log([25.0]))
    np.testing.assert_allclose(out, [expected], rtol=1e-12)


def test_correction_basis_columns():
    ts, h, ir = 0.5, 0.4, 0.3
    basis = correction_basis(np.array([ts]), np.array([h]), np.array([ir]))
    expected = [
        1.0, ts, ts ** 2, ts ** 3, np.log(ts), ts * np.log(ts),
        h, h ** 2, ir, ir ** 2, ts * h, ts * ir, ir * h,
    ]
    assert basis.shape == (1, 13)
    np.testing.assert_allclose(basis[0], expected)


def test_correction_term_is_dot_product():
    c = np.arange(13, dtype=float)
    ts, h, ir = np.array([0.2, 1.0]), np.array([0.5, 0.3]), np.array([0.4, 0.9])
    out = correction_term(c, ts, h, ir)
    np.testing.assert_allclose(out, correction_basis(ts, h, ir) @ c)


def test_correction_zero_period_not_finite():
    c = DISPLACEMENT_VARIANTS.get("PGA,SI").correction
    out = correction_term(c, np.array([0.0, 0.3]), np.array([0.5, 0.5]), np.array([0.4, 0.4]))
    assert not np.isfinite(out[0])
    assert np.isfinite(out[1])
