"""Logarithmic standard-deviation models.

Displacement form
    ``ratio = Ky / Kmax`` clamped to ``KY_KMAX_RANGE``.  The flexible
    branch ``c . [1, ratio, ratio^2]`` applies by default; scenarios whose
    deposit period is below ``RIGID_PERIOD_THRESHOLD`` take the rigid
    branch ``c . [1, ratio]`` instead.  The switch is a step, not a blend.

SA-conditioned k-IM form
    ``c0 + c1 x + c2 x^2 + c3 x^3 + c4 y + c5 x y`` with ``x = ln Ts`` and
    ``y = ln IR``.

Tm-conditioned k-IM form
    ``c0 + c1 x + c2 x^2 + c3 x^3 + c4 y + c5 y^2 + c6 x y`` with
    ``x = ln(Ts / Tm)`` clamped to ``LN_PERIOD_RATIO_RANGE``.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from seismoslide.coefficients import DisplacementVariant
from seismoslide.coefficients.registry import (
    N_SIGMA_KIM_SA_TERMS,
    N_SIGMA_KIM_TM_TERMS,
)
from seismoslide.conditioning import RIGID_PERIOD_THRESHOLD

KY_KMAX_RANGE = (0.05, 0.95)
LN_PERIOD_RATIO_RANGE = (-2.5, 3.0)


def _check_terms(coefficients: NDArray, expected: int, form: str) -> NDArray:
    coefficients = np.asarray(coefficients, dtype=np.float64)
    if coefficients.shape != (expected,):
        raise ValueError(
            f"The {form} sigma form takes {expected} coefficients, "
            f"got shape {coefficients.shape}."
        )
    return coefficients


def clamp_ky_ratio(ky_ratio: NDArray) -> NDArray:
    """Clamp Ky / Kmax to ``KY_KMAX_RANGE``."""
    return np.clip(np.asarray(ky_ratio, dtype=np.float64), *KY_KMAX_RANGE)


def displacement_sigma(
    variant: DisplacementVariant,
    ky_ratio: NDArray,
    ts: NDArray,
) -> NDArray:
    """Standard deviation of ln(D).

    Parameters
    ----------
    variant : displacement bundle supplying both sigma branches.
    ky_ratio : (n,) unclamped Ky / Kmax.
    ts : (n,) physically clamped deposit period.

    Returns
    -------
    (n,) sigma of ln(D).
    """
    ratio = clamp_ky_ratio(ky_ratio)
    ones = np.ones_like(ratio)
    flexible = np.column_stack([ones, ratio, ratio ** 2]) @ variant.sigma_flexible
    rigid = np.column_stack([ones, ratio]) @ variant.sigma_rigid

    sigma = flexible
    is_rigid = np.asarray(ts) < RIGID_PERIOD_THRESHOLD
    sigma[is_rigid] = rigid[is_rigid]
    return sigma


def kim_sigma_sa(coefficients: NDArray, ln_ts: NDArray, ln_ir: NDArray) -> NDArray:
    """Sigma of ln(k-IM) for the SA-conditioned models.

    Parameters
    ----------
    coefficients : 6 polynomial coefficients.
    ln_ts : (n,) log of the clamped deposit period.
    ln_ir : (n,) log of the clamped impedance ratio.
    """
    c = _check_terms(coefficients, N_SIGMA_KIM_SA_TERMS, "SA-conditioned")
    x = ln_ts
    y = ln_ir
    return c[0] + c[1] * x + c[2] * x ** 2 + c[3] * x ** 3 + c[4] * y + c[5] * x * y


def period_ratio(ln_ts: NDArray, ln_tm: NDArray) -> NDArray:
    """``ln(Ts / Tm)`` clamped to ``LN_PERIOD_RATIO_RANGE``."""
    return np.clip(np.asarray(ln_ts) - np.asarray(ln_tm), *LN_PERIOD_RATIO_RANGE)


def kim_sigma_tm(
    coefficients: NDArray,
    ln_period_ratio: NDArray,
    ln_ir: NDArray,
) -> NDArray:
    """Sigma of ln(k-IM) for the Tm-conditioned models.

    Parameters
    ----------
    coefficients : 7 polynomial coefficients.
    ln_period_ratio : (n,) clamped ``ln(Ts / Tm)``, see :func:`period_ratio`.
    ln_ir : (n,) log of the clamped impedance ratio.
    """
    c = _check_terms(coefficients, N_SIGMA_KIM_TM_TERMS, "Tm-conditioned")
    x = ln_period_ratio
    y = ln_ir
    return (
        c[0] + c[1] * x + c[2] * x ** 2 + c[3] * x ** 3
        + c[4] * y + c[5] * y ** 2 + c[6] * x * y
    )
