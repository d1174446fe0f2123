"""Near-zero-period correction for the k-IM models.

As the deposit period shrinks to zero the filtered loading parameter must
converge to the unfiltered intensity measure.  For periods below
``RIGID_PERIOD_THRESHOLD`` the prediction is therefore replaced by a line
through the raw IM (the anchor) at ``Ts = 0`` and the model prediction at
``Ts = 0.02 s``, evaluated at the actual period.  The network already
returns its 0.02 s value for these scenarios because ``ln Ts`` is clamped
to its lower calibration bound.

The sigma correction uses the same IM anchor as the median.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from seismoslide.conditioning import RIGID_PERIOD_THRESHOLD

logger = logging.getLogger(__name__)


def near_zero_period(ts: NDArray) -> NDArray:
    """Boolean mask of scenarios below ``RIGID_PERIOD_THRESHOLD``."""
    return np.asarray(ts) < RIGID_PERIOD_THRESHOLD


def interpolate_to_anchor(
    prediction: NDArray,
    anchor: NDArray,
    ts: NDArray,
) -> NDArray:
    """``anchor + (prediction - anchor) / threshold * ts``, elementwise."""
    return anchor + (prediction - anchor) / RIGID_PERIOD_THRESHOLD * ts


def apply_boundary_correction(
    median: NDArray,
    sigma: NDArray,
    anchor: NDArray,
    ts: NDArray,
) -> tuple[NDArray, NDArray]:
    """Correct median and sigma of near-zero-period scenarios.

    Parameters
    ----------
    median : (n,) median k-IM evaluated with the clamped period.
    sigma : (n,) sigma of ln(k-IM) evaluated with the clamped period.
    anchor : (n,) raw intensity measure the k-IM filters.
    ts : (n,) raw deposit period.

    Returns
    -------
    Corrected copies of *median* and *sigma*.
    """
    median = np.array(median, dtype=np.float64)
    sigma = np.array(sigma, dtype=np.float64)
    anchor = np.asarray(anchor, dtype=np.float64)
    ts = np.asarray(ts, dtype=np.float64)
    mask = near_zero_period(ts)
    n_corrected = int(np.count_nonzero(mask))
    if n_corrected == 0:
        return median, sigma

    logger.debug(
        "%d scenarios below Ts = %.2f s interpolated toward the raw IM.",
        n_corrected, RIGID_PERIOD_THRESHOLD,
    )
    median[mask] = interpolate_to_anchor(median[mask], anchor[mask], ts[mask])
    sigma[mask] = interpolate_to_anchor(sigma[mask], anchor[mask], ts[mask])
    return median, sigma
