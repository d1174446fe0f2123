"""Closed-form polynomial terms of the displacement models.

Two independent polynomials:

* the rigid-block baseline of Saygili & Rathje (2008), which replaces the
  network for the ``PGA,PGV``, ``PGA,Tm`` and ``PGA,IA`` variants, and
* the finite-deposit correction, added in log space to every displacement
  prediction to account for a deposit of finite, possibly flexible period.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def rigid_baseline_basis(ky_ratio: NDArray, ln_im1: NDArray, ln_im2: NDArray) -> NDArray:
    """Basis ``[1, r, r^2, r^3, r^4, ln IM1, ln IM2]`` with ``r = Ky / IM1``.

    Returns
    -------
    (n, 7) array.
    """
    r = np.asarray(ky_ratio, dtype=np.float64)
    return np.column_stack([
        np.ones_like(r), r, r ** 2, r ** 3, r ** 4, ln_im1, ln_im2,
    ])


def rigid_displacement(
    coefficients: NDArray,
    ky_ratio: NDArray,
    ln_im1: NDArray,
    ln_im2: NDArray,
) -> NDArray:
    """Natural log of the rigid-block sliding displacement."""
    return rigid_baseline_basis(ky_ratio, ln_im1, ln_im2) @ coefficients


def correction_basis(ts: NDArray, h_ratio: NDArray, ir: NDArray) -> NDArray:
    """The 13-term finite-deposit basis.

    ``[1, Ts, Ts^2, Ts^3, ln Ts, Ts ln Ts, h, h^2, IR, IR^2, Ts h, Ts IR,
    IR h]`` on the clamped period, depth ratio and impedance ratio.  A zero
    or negative period has no logarithm; the affected rows come out
    non-finite.

    Returns
    -------
    (n, 13) array.
    """
    ts = np.asarray(ts, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        ln_ts = np.log(ts)
        ts_ln_ts = ts * ln_ts
    return np.column_stack([
        np.ones_like(ts), ts, ts ** 2, ts ** 3, ln_ts, ts_ln_ts,
        h_ratio, h_ratio ** 2, ir, ir ** 2,
        ts * h_ratio, ts * ir, ir * h_ratio,
    ])


def correction_term(
    coefficients: NDArray,
    ts: NDArray,
    h_ratio: NDArray,
    ir: NDArray,
) -> NDArray:
    """Additive log-space correction for a finite soil deposit."""
    basis = correction_basis(ts, h_ratio, ir)
    with np.errstate(invalid="ignore"):
        return basis @ coefficients
