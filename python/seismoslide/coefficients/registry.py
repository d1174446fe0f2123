"""Immutable coefficient bundles and the registries that resolve them by key.

Every calibrated constant a predictive model needs lives in one frozen
bundle per variant.  The evaluation code is written once and receives a
bundle; it never branches on the variant name.  Bundles validate their own
dimensions on construction, so a malformed table is rejected at import
time rather than on the first batch.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Optional

import numpy as np
from numpy.typing import NDArray

# Intensity-measure fields a variant may declare, in predictor order
INTENSITY_MEASURES = ("im1", "im2", "im3")

# Number of terms in each polynomial basis
N_RIGID_BASELINE_TERMS = 7
N_CORRECTION_TERMS = 13
N_SIGMA_RIGID_TERMS = 2
N_SIGMA_FLEXIBLE_TERMS = 3
N_SIGMA_KIM_SA_TERMS = 6
N_SIGMA_KIM_TM_TERMS = 7


def _frozen_array(values, ndim: int, name: str) -> NDArray:
    """Copy *values* into a read-only float64 array of the given rank."""
    arr = np.array(values, dtype=np.float64)
    if arr.ndim != ndim:
        raise ValueError(
            f"'{name}' must be {ndim}-D, got an array of shape {arr.shape}."
        )
    arr.setflags(write=False)
    return arr


def _check_length(arr: NDArray, expected: int, name: str, key: str) -> None:
    if arr.shape[0] != expected:
        raise ValueError(
            f"Variant '{key}': '{name}' needs {expected} coefficients, "
            f"got {arr.shape[0]}."
        )


def _check_intensity_measures(key: str, names: tuple[str, ...]) -> None:
    if names not in (INTENSITY_MEASURES[:2], INTENSITY_MEASURES):
        raise ValueError(
            f"Variant '{key}': intensity measures must be ('im1', 'im2') or "
            f"('im1', 'im2', 'im3'), got {names}."
        )


@dataclass(frozen=True, eq=False)
class NetworkCoefficients:
    """Weights of a single-hidden-layer regression network.

    Parameters
    ----------
    x_min, x_max : (n_predictors,) calibration bounds.  Used both to clamp
        the predictors and to scale them onto ``[-1, 1]``.
    weights : (n_predictors, n_hidden) input-to-hidden weight matrix.
    hidden_bias : (n_hidden,) hidden-unit biases.
    output_weights : (n_hidden,) hidden-to-output weights.
    output_bias : scalar output bias.
    """

    x_min: NDArray
    x_max: NDArray
    weights: NDArray
    hidden_bias: NDArray
    output_weights: NDArray
    output_bias: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x_min", _frozen_array(self.x_min, 1, "x_min"))
        object.__setattr__(self, "x_max", _frozen_array(self.x_max, 1, "x_max"))
        object.__setattr__(self, "weights", _frozen_array(self.weights, 2, "weights"))
        object.__setattr__(
            self, "hidden_bias", _frozen_array(self.hidden_bias, 1, "hidden_bias")
        )
        object.__setattr__(
            self, "output_weights",
            _frozen_array(self.output_weights, 1, "output_weights"),
        )
        object.__setattr__(self, "output_bias", float(self.output_bias))

        n_pred, n_hidden = self.weights.shape
        if self.x_min.shape != (n_pred,) or self.x_max.shape != (n_pred,):
            raise ValueError(
                f"Domain bounds of length {self.x_min.shape[0]}/"
                f"{self.x_max.shape[0]} do not match the {n_pred} weight rows."
            )
        if self.hidden_bias.shape != (n_hidden,):
            raise ValueError(
                f"hidden_bias has {self.hidden_bias.shape[0]} entries, "
                f"expected {n_hidden}."
            )
        if self.output_weights.shape != (n_hidden,):
            raise ValueError(
                f"output_weights has {self.output_weights.shape[0]} entries, "
                f"expected {n_hidden}."
            )
        if np.any(self.x_max <= self.x_min):
            raise ValueError("Every x_max must exceed the matching x_min.")

    @property
    def n_predictors(self) -> int:
        return self.weights.shape[0]

    @property
    def n_hidden(self) -> int:
        return self.weights.shape[1]


@dataclass(frozen=True, eq=False)
class DisplacementVariant:
    """Calibrated constants for one sliding-displacement model.

    The median comes either from a network over ``[ln IM..., ln Ky]`` or,
    for the two-IM variants fitted with the classical rigid-block form,
    from the polynomial in *rigid_baseline*.  Exactly one of the two must
    be given.

    Parameters
    ----------
    key : IM-combination key, e.g. ``"PGA,PGV"``.
    intensity_measures : fields consumed, ``("im1", "im2")`` or
        ``("im1", "im2", "im3")``.
    sigma_rigid : coefficients of ``[1, ratio]``.
    sigma_flexible : coefficients of ``[1, ratio, ratio**2]``.
    correction : coefficients of the 13-term finite-deposit correction.
    rigid_baseline : coefficients of ``[1, r, r**2, r**3, r**4, ln IM1,
        ln IM2]`` (classical variants only).
    network : network weights (network variants only).
    """

    key: str
    intensity_measures: tuple[str, ...]
    sigma_rigid: NDArray
    sigma_flexible: NDArray
    correction: NDArray
    rigid_baseline: Optional[NDArray] = None
    network: Optional[NetworkCoefficients] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "intensity_measures", tuple(self.intensity_measures))
        _check_intensity_measures(self.key, self.intensity_measures)

        for name, n_terms in (
            ("sigma_rigid", N_SIGMA_RIGID_TERMS),
            ("sigma_flexible", N_SIGMA_FLEXIBLE_TERMS),
            ("correction", N_CORRECTION_TERMS),
        ):
            arr = _frozen_array(getattr(self, name), 1, name)
            _check_length(arr, n_terms, name, self.key)
            object.__setattr__(self, name, arr)

        if (self.rigid_baseline is None) == (self.network is None):
            raise ValueError(
                f"Variant '{self.key}' needs exactly one of 'rigid_baseline' "
                f"or 'network'."
            )
        if self.rigid_baseline is not None:
            arr = _frozen_array(self.rigid_baseline, 1, "rigid_baseline")
            _check_length(arr, N_RIGID_BASELINE_TERMS, "rigid_baseline", self.key)
            object.__setattr__(self, "rigid_baseline", arr)
            if len(self.intensity_measures) != 2:
                raise ValueError(
                    f"Variant '{self.key}': the rigid baseline takes exactly "
                    f"two intensity measures."
                )
        else:
            # [ln IM..., ln Ky]
            expected = len(self.intensity_measures) + 1
            if self.network.n_predictors != expected:
                raise ValueError(
                    f"Variant '{self.key}': network expects "
                    f"{self.network.n_predictors} predictors but the variant "
                    f"supplies {expected}."
                )

    @property
    def uses_network(self) -> bool:
        return self.network is not None


@dataclass(frozen=True, eq=False)
class KimVariant:
    """Calibrated constants for one equivalent-loading-parameter model.

    Parameters
    ----------
    key : target k-IM, e.g. ``"k-PGV"``.
    intensity_measures : fields consumed, ``("im1", "im2")`` or
        ``("im1", "im2", "im3")``.
    description : physical meaning of the consumed fields, in order.
    anchor : field whose raw value the prediction must approach as the
        deposit period goes to zero.
    sigma : sigma-polynomial coefficients (6 for the SA-conditioned form,
        7 for the Tm-conditioned form).
    network : network over ``[ln IM..., ln Ts, h_ratio, IR]``.
    """

    key: str
    intensity_measures: tuple[str, ...]
    description: str
    anchor: str
    sigma: NDArray
    network: NetworkCoefficients

    def __post_init__(self) -> None:
        object.__setattr__(self, "intensity_measures", tuple(self.intensity_measures))
        _check_intensity_measures(self.key, self.intensity_measures)
        object.__setattr__(self, "sigma", _frozen_array(self.sigma, 1, "sigma"))

        if self.anchor not in self.intensity_measures:
            raise ValueError(
                f"Variant '{self.key}': anchor '{self.anchor}' is not one of "
                f"{self.intensity_measures}."
            )
        # [ln IM..., ln Ts, h_ratio, IR]
        expected = len(self.intensity_measures) + 3
        if self.network.n_predictors != expected:
            raise ValueError(
                f"Variant '{self.key}': network expects "
                f"{self.network.n_predictors} predictors but the variant "
                f"supplies {expected}."
            )


class CoefficientRegistry:
    """Read-only lookup of coefficient bundles by variant key.

    Parameters
    ----------
    name : model family name used in error messages.
    variants : bundles to register; keys must be unique.
    sigma_terms : if given, every bundle's ``sigma`` row must have this
        many coefficients.
    """

    def __init__(
        self,
        name: str,
        variants: Iterable,
        sigma_terms: int | None = None,
    ) -> None:
        table: dict[str, object] = {}
        for variant in variants:
            if variant.key in table:
                raise ValueError(f"Duplicate {name} variant '{variant.key}'.")
            if sigma_terms is not None:
                _check_length(variant.sigma, sigma_terms, "sigma", variant.key)
            table[variant.key] = variant
        self.name = name
        self._variants = MappingProxyType(table)

    def get(self, key: str):
        """Return the bundle registered under *key*.

        Raises
        ------
        ValueError
            If *key* is not registered.
        """
        try:
            return self._variants[key]
        except KeyError:
            raise ValueError(
                f"Unknown {self.name} variant '{key}'. "
                f"Must be one of {list(self._variants)}."
            ) from None

    def keys(self) -> list[str]:
        return list(self._variants)

    def __contains__(self, key: object) -> bool:
        return key in self._variants

    def __iter__(self) -> Iterator[str]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __repr__(self) -> str:
        return f"CoefficientRegistry({self.name!r}, keys={self.keys()})"
