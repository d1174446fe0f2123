"""Forward pass of the single-hidden-layer regression networks.

All networks share one topology: min-max scaling of the predictors onto
``[-1, 1]``, one hidden layer with the symmetric sigmoid
``2 / (1 + exp(-2 z)) - 1`` and a linear output.  The output is the natural
log of the target quantity.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from seismoslide.coefficients import NetworkCoefficients


def normalize_predictors(
    predictors: NDArray,
    x_min: NDArray,
    x_max: NDArray,
) -> NDArray:
    """Affine map of each column from ``[x_min, x_max]`` onto ``[-1, 1]``."""
    return 2.0 * (predictors - x_min) / (x_max - x_min) - 1.0


def symmetric_sigmoid(z: NDArray) -> NDArray:
    """Hidden-layer activation, algebraically equal to ``tanh(z)``.

    Evaluated in the exact form the coefficients were calibrated with.
    Large negative *z* overflows ``exp`` and saturates cleanly at -1.
    """
    with np.errstate(over="ignore"):
        return 2.0 / (1.0 + np.exp(-2.0 * z)) - 1.0


def evaluate_network(predictors: NDArray, network: NetworkCoefficients) -> NDArray:
    """Evaluate *network* on a clamped predictor matrix.

    Parameters
    ----------
    predictors : (n, n_predictors) array, already clamped to the network's
        calibration bounds.
    network : weights and bounds of the network.

    Returns
    -------
    (n,) natural log of the predicted quantity.

    Raises
    ------
    ValueError
        If the predictor width does not match the network.
    """
    predictors = np.asarray(predictors, dtype=np.float64)
    if predictors.ndim != 2 or predictors.shape[1] != network.n_predictors:
        raise ValueError(
            f"Network expects (n, {network.n_predictors}) predictors, "
            f"got shape {predictors.shape}."
        )

    x_norm = normalize_predictors(predictors, network.x_min, network.x_max)
    hidden = symmetric_sigmoid(x_norm @ network.weights + network.hidden_bias)
    return hidden @ network.output_weights + network.output_bias
