"""Predictor construction from flat batch inputs.

Turns per-scenario fields into the predictor matrix a variant expects:
log-transforms the intensity measures the variant declares, clamps the
geotechnical predictors to their physical ranges, and projects every
predictor column onto the variant's calibration domain.  Clamping is a
silent projection, not an error; the per-scenario ``clamped`` mask and the
log record whether it happened.

All functions take 1-D arrays of equal length (one entry per scenario) and
never modify their inputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

import numpy as np
from numpy.typing import NDArray

from seismoslide.coefficients import DisplacementVariant, KimVariant

logger = logging.getLogger(__name__)

# Physical period range of the soil deposit for the correction term (s)
TS_MIN = 0.0416
TS_MAX = 2.0

H_RATIO_MIN = 0.1
H_RATIO_MAX = 1.0
IR_MIN = 0.1
IR_MAX = 1.0

# Below this deposit period the response is treated as rigid (s)
RIGID_PERIOD_THRESHOLD = 0.02


# ---------------------------------------------------------------------------
# Conditioned-input records
# ---------------------------------------------------------------------------

@dataclass
class DisplacementInputs:
    """Conditioned inputs of a displacement model.

    Parameters
    ----------
    ln_im1, ln_im2 : natural logs of the first two intensity measures.
    predictors : (n, n_predictors) clamped network predictors, ``None``
        for rigid-baseline variants.
    ky_ratio : Ky / Kmax.  Taken from the clamped predictors for network
        variants, from the raw Ky / IM1 otherwise.
    ts, h_ratio, ir : physically clamped deposit period, depth ratio and
        impedance ratio.
    clamped : (n,) True where a network predictor or a physical input
        (Ts, h, IR) was moved onto a bound.
    """

    ln_im1: NDArray
    ln_im2: NDArray
    predictors: Optional[NDArray]
    ky_ratio: NDArray
    ts: NDArray
    h_ratio: NDArray
    ir: NDArray
    clamped: NDArray


@dataclass
class KimInputs:
    """Conditioned inputs of a k-IM model.

    Parameters
    ----------
    predictors : (n, n_predictors) clamped network predictors.
    ts : raw deposit period, used for the near-zero-period mask.
    anchor : raw value of the intensity measure the k-IM filters.
    clamped : (n,) True where any predictor was moved onto a bound.
    """

    predictors: NDArray
    ts: NDArray
    anchor: NDArray
    clamped: NDArray


# ---------------------------------------------------------------------------
# Elementary transforms
# ---------------------------------------------------------------------------

def clamp_period(ts: NDArray) -> NDArray:
    """Clamp the deposit period to ``[TS_MIN, TS_MAX]``.

    Only strictly positive periods are raised to ``TS_MIN``; zero and
    negative values mean "no deposit" and pass through unchanged.
    """
    out = np.array(ts, dtype=np.float64)
    out[(out < TS_MIN) & (out > 0)] = TS_MIN
    out[out > TS_MAX] = TS_MAX
    return out


def clamp_range(values: NDArray, low: float, high: float) -> NDArray:
    """Return a copy of *values* clipped to ``[low, high]``."""
    return np.clip(np.asarray(values, dtype=np.float64), low, high)


def clamp_to_domain(
    predictors: NDArray,
    x_min: NDArray,
    x_max: NDArray,
) -> tuple[NDArray, NDArray]:
    """Project every predictor column onto its calibration interval.

    Parameters
    ----------
    predictors : (n, n_predictors) array.
    x_min, x_max : (n_predictors,) bounds.

    Returns
    -------
    clamped_predictors : (n, n_predictors) projected copy.
    clamped : (n,) bool, True where at least one column moved.
    """
    predictors = np.asarray(predictors, dtype=np.float64)
    if predictors.ndim != 2 or predictors.shape[1] != len(x_min):
        raise ValueError(
            f"Predictor matrix of shape {predictors.shape} does not match "
            f"{len(x_min)} domain bounds."
        )
    outside = (predictors < x_min) | (predictors > x_max)
    return np.clip(predictors, x_min, x_max), outside.any(axis=1)


def check_required_fields(
    variant: DisplacementVariant | KimVariant,
    fields: Mapping[str, Optional[NDArray]],
) -> None:
    """Raise ``ValueError`` if an intensity measure *variant* needs is absent."""
    missing = [name for name in variant.intensity_measures if fields.get(name) is None]
    if missing:
        raise ValueError(
            f"Variant '{variant.key}' requires {missing} but "
            f"{'it was' if len(missing) == 1 else 'they were'} not supplied."
        )


def log_intensity_measures(
    fields: Mapping[str, Optional[NDArray]],
    names: tuple[str, ...],
    key: str,
) -> dict[str, NDArray]:
    """Natural log of each intensity measure listed in *names*.

    Undeclared measures are never touched, so a variant without a third IM
    works whether or not ``im3`` was supplied.

    Raises
    ------
    ValueError
        If a declared measure is missing from *fields*.
    """
    logs: dict[str, NDArray] = {}
    for name in names:
        values = fields.get(name)
        if values is None:
            raise ValueError(
                f"Variant '{key}' requires '{name}' but it was not supplied."
            )
        values = np.asarray(values, dtype=np.float64)
        n_bad = int(np.count_nonzero(~(values > 0)))
        if n_bad:
            logger.warning(
                "%d non-positive or NaN values in '%s'; their logarithm is "
                "not finite.", n_bad, name,
            )
        with np.errstate(divide="ignore", invalid="ignore"):
            logs[name] = np.log(values)

    if "im3" not in names and fields.get("im3") is not None:
        logger.debug("Variant '%s' takes two intensity measures; im3 ignored.", key)
    return logs


def physical_clamp_mask(ts: NDArray, h_ratio: NDArray, ir: NDArray) -> NDArray:
    """True where :func:`clamp_period` or :func:`clamp_range` moves a value.

    Non-positive periods pass through :func:`clamp_period` unchanged and
    are not flagged.  NaN compares false and is not flagged either.
    """
    ts = np.asarray(ts, dtype=np.float64)
    h_ratio = np.asarray(h_ratio, dtype=np.float64)
    ir = np.asarray(ir, dtype=np.float64)
    return (
        ((ts > 0) & (ts < TS_MIN)) | (ts > TS_MAX)
        | (h_ratio < H_RATIO_MIN) | (h_ratio > H_RATIO_MAX)
        | (ir < IR_MIN) | (ir > IR_MAX)
    )


# ---------------------------------------------------------------------------
# Per-family conditioners
# ---------------------------------------------------------------------------

def condition_displacement(
    variant: DisplacementVariant,
    fields: Mapping[str, Optional[NDArray]],
) -> DisplacementInputs:
    """Build the conditioned inputs of a displacement model.

    The ``clamped`` mask covers the calibration-domain projection of the
    network predictors and the physical clamps of Ts, h and IR, so
    rigid-baseline variants report clamping as well.

    Parameters
    ----------
    variant : displacement coefficient bundle.
    fields : flat arrays keyed ``im1``, ``im2``, ``im3`` (may be ``None``),
        ``ky``, ``ts``, ``h_ratio``, ``ir``.
    """
    logs = log_intensity_measures(fields, variant.intensity_measures, variant.key)
    ky = np.asarray(fields["ky"], dtype=np.float64)

    physical = physical_clamp_mask(fields["ts"], fields["h_ratio"], fields["ir"])
    ts = clamp_period(fields["ts"])
    h_ratio = clamp_range(fields["h_ratio"], H_RATIO_MIN, H_RATIO_MAX)
    ir = clamp_range(fields["ir"], IR_MIN, IR_MAX)

    if variant.uses_network:
        net = variant.network
        with np.errstate(divide="ignore", invalid="ignore"):
            ln_ky = np.log(ky)
        columns = [logs[name] for name in variant.intensity_measures] + [ln_ky]
        predictors, clamped = clamp_to_domain(
            np.column_stack(columns), net.x_min, net.x_max,
        )
        # Ky in the last column, Kmax (IM1) in the first
        ky_ratio = np.exp(predictors[:, -1]) / np.exp(predictors[:, 0])
    else:
        predictors = None
        clamped = np.zeros(ky.shape[0], dtype=bool)
        with np.errstate(divide="ignore", invalid="ignore"):
            ky_ratio = ky / np.asarray(fields["im1"], dtype=np.float64)

    clamped = clamped | physical

    return DisplacementInputs(
        ln_im1=logs["im1"],
        ln_im2=logs["im2"],
        predictors=predictors,
        ky_ratio=ky_ratio,
        ts=ts,
        h_ratio=h_ratio,
        ir=ir,
        clamped=clamped,
    )


def condition_kim(
    variant: KimVariant,
    fields: Mapping[str, Optional[NDArray]],
) -> KimInputs:
    """Build the conditioned inputs of a k-IM model.

    The deposit period enters as ``ln Ts``; its calibration bounds
    ``[ln 0.02, ln 2]`` do the physical clamping, so a period below
    ``RIGID_PERIOD_THRESHOLD`` is evaluated at exactly 0.02 s.  A zero
    period has ``ln Ts = -inf`` and projects onto the same bound.

    Parameters
    ----------
    variant : k-IM coefficient bundle.
    fields : flat arrays keyed ``im1``, ``im2``, ``im3`` (may be ``None``),
        ``ts``, ``h_ratio``, ``ir``.
    """
    logs = log_intensity_measures(fields, variant.intensity_measures, variant.key)
    ts = np.asarray(fields["ts"], dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore"):
        ln_ts = np.log(ts)
    columns = [logs[name] for name in variant.intensity_measures] + [
        ln_ts,
        np.asarray(fields["h_ratio"], dtype=np.float64),
        np.asarray(fields["ir"], dtype=np.float64),
    ]
    net = variant.network
    predictors, clamped = clamp_to_domain(
        np.column_stack(columns), net.x_min, net.x_max,
    )

    return KimInputs(
        predictors=predictors,
        ts=ts,
        anchor=np.asarray(fields[variant.anchor], dtype=np.float64),
        clamped=clamped,
    )
