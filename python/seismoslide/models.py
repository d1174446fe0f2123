"""Public predictive models: sliding displacement and k-IM.

Three entry points share one evaluation path:

1. Validate and flatten the batch (:mod:`seismoslide.batch`).
2. Condition the predictors (:mod:`seismoslide.conditioning`).
3. Median from the network or the rigid-block polynomial, plus the
   finite-deposit correction for displacement.
4. Sigma from the matching polynomial form.
5. Near-zero-period correction for k-IM.
6. Reshape to the caller's batch shape.

Each call is a pure function of its arguments.  The coefficient registries
are read-only, so concurrent calls need no locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.stats import norm

from seismoslide.batch import flatten_batch, iter_chunks, restore_shape, take_chunk
from seismoslide.boundary import apply_boundary_correction
from seismoslide.classical import correction_term, rigid_displacement
from seismoslide.coefficients import (
    DISPLACEMENT_VARIANTS,
    KIM_SA_VARIANTS,
    KIM_TM_VARIANTS,
    CoefficientRegistry,
    DisplacementVariant,
    KimVariant,
)
from seismoslide.conditioning import (
    check_required_fields,
    condition_displacement,
    condition_kim,
)
from seismoslide.network import evaluate_network
from seismoslide.sigma import displacement_sigma, kim_sigma_sa, kim_sigma_tm, period_ratio

logger = logging.getLogger(__name__)

MODEL_REGISTRIES: dict[str, CoefficientRegistry] = {
    "displacement": DISPLACEMENT_VARIANTS,
    "kim_sa": KIM_SA_VARIANTS,
    "kim_tm": KIM_TM_VARIANTS,
}

# (median, sigma_ln, clamped) for one flat chunk
_ChunkResult = tuple[NDArray, NDArray, NDArray]


# ---------------------------------------------------------------------------
# Configuration and result records
# ---------------------------------------------------------------------------

@dataclass
class EvaluationConfig:
    """Configuration for batch evaluation.

    Parameters
    ----------
    chunk_size : number of scenarios evaluated per pass; ``0`` evaluates
        the whole batch at once.
    max_workers : threads used to evaluate chunks concurrently; ``1``
        evaluates them in order on the calling thread.
    log_clamping : emit one INFO record per batch when scenarios are
        clamped.
    """

    chunk_size: int = 0
    max_workers: int = 1
    log_clamping: bool = True


@dataclass
class Prediction:
    """Median and logarithmic standard deviation for a batch.

    Parameters
    ----------
    median : median of the target quantity, in the batch shape.
    sigma_ln : standard deviation of its natural log, in the batch shape.
    clamped : True where at least one input was projected onto a bound:
        a calibration-domain bound of the network predictors, or for
        displacement the physical range of Ts, h or IR.
    variant : key of the variant that produced the prediction.
    """

    median: NDArray
    sigma_ln: NDArray
    clamped: NDArray
    variant: str

    def exceedance_probability(self, threshold: ArrayLike) -> NDArray:
        """Probability that the lognormal target exceeds *threshold*.

        ``1 - Phi((ln threshold - ln median) / sigma_ln)``, broadcast
        against the batch shape.
        """
        threshold = np.asarray(threshold, dtype=np.float64)
        with np.errstate(divide="ignore"):
            z = (np.log(threshold) - np.log(self.median)) / self.sigma_ln
        return norm.sf(z)

    def percentile(self, p: float) -> NDArray:
        """Value of the target at non-exceedance probability *p*.

        Raises
        ------
        ValueError
            If *p* is not strictly between 0 and 1.
        """
        if not 0.0 < p < 1.0:
            raise ValueError(f"p must lie in (0, 1), got {p}.")
        return self.median * np.exp(norm.ppf(p) * self.sigma_ln)


def model_registry(model: str) -> CoefficientRegistry:
    """Coefficient registry of a model family.

    Parameters
    ----------
    model : ``"displacement"``, ``"kim_sa"`` or ``"kim_tm"``.
    """
    if model not in MODEL_REGISTRIES:
        raise ValueError(
            f"Unknown model '{model}'. Must be one of {sorted(MODEL_REGISTRIES)}."
        )
    return MODEL_REGISTRIES[model]


def available_variants(model: str) -> list[str]:
    """Variant keys of a model family, see :func:`model_registry`."""
    return model_registry(model).keys()


# ---------------------------------------------------------------------------
# Per-chunk evaluation
# ---------------------------------------------------------------------------

def _evaluate_displacement(
    variant: DisplacementVariant,
    fields: dict[str, Optional[NDArray]],
) -> _ChunkResult:
    inputs = condition_displacement(variant, fields)

    if variant.uses_network:
        ln_d = evaluate_network(inputs.predictors, variant.network)
    else:
        ln_d = rigid_displacement(
            variant.rigid_baseline, inputs.ky_ratio, inputs.ln_im1, inputs.ln_im2,
        )
    ln_d = ln_d + correction_term(
        variant.correction, inputs.ts, inputs.h_ratio, inputs.ir,
    )
    # Near-zero periods keep this median; only sigma switches branch.
    median = np.exp(ln_d)
    sigma = displacement_sigma(variant, inputs.ky_ratio, inputs.ts)
    return median, sigma, inputs.clamped


def _sigma_sa(variant: KimVariant, predictors: NDArray) -> NDArray:
    ln_ir = np.log(predictors[:, -1])
    return kim_sigma_sa(variant.sigma, predictors[:, -3], ln_ir)


def _sigma_tm(variant: KimVariant, predictors: NDArray) -> NDArray:
    # Tm sits immediately before ln Ts in every Tm-conditioned variant
    ln_ir = np.log(predictors[:, -1])
    ratio = period_ratio(predictors[:, -3], predictors[:, -4])
    return kim_sigma_tm(variant.sigma, ratio, ln_ir)


def _evaluate_kim(
    variant: KimVariant,
    fields: dict[str, Optional[NDArray]],
    sigma_form: Callable[[KimVariant, NDArray], NDArray],
) -> _ChunkResult:
    inputs = condition_kim(variant, fields)
    median = np.exp(evaluate_network(inputs.predictors, variant.network))
    sigma = sigma_form(variant, inputs.predictors)
    median, sigma = apply_boundary_correction(median, sigma, inputs.anchor, inputs.ts)
    return median, sigma, inputs.clamped


# ---------------------------------------------------------------------------
# Batch driver
# ---------------------------------------------------------------------------

def _check_config(config: EvaluationConfig) -> None:
    if config.chunk_size < 0:
        raise ValueError(f"chunk_size must be >= 0, got {config.chunk_size}.")
    if config.max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {config.max_workers}.")


def _run_batch(
    evaluate: Callable[[dict[str, Optional[NDArray]]], _ChunkResult],
    flat: dict[str, Optional[NDArray]],
    shape: tuple[int, ...],
    key: str,
    config: EvaluationConfig,
) -> Prediction:
    """Evaluate a flattened batch chunk by chunk and reshape the result.

    Chunks write to disjoint slices of preallocated outputs, so the result
    does not depend on the chunking or on the number of workers.
    """
    n = int(np.prod(shape, dtype=np.int64))
    median = np.empty(n, dtype=np.float64)
    sigma = np.empty(n, dtype=np.float64)
    clamped = np.empty(n, dtype=bool)
    chunks = list(iter_chunks(n, config.chunk_size))

    def work(chunk: slice) -> None:
        m, s, c = evaluate(take_chunk(flat, chunk))
        median[chunk] = m
        sigma[chunk] = s
        clamped[chunk] = c

    if config.max_workers > 1 and len(chunks) > 1:
        from joblib import Parallel, delayed

        # threads share the preallocated outputs
        Parallel(n_jobs=config.max_workers, prefer="threads")(
            delayed(work)(chunk) for chunk in chunks
        )
    else:
        for chunk in chunks:
            work(chunk)

    n_clamped = int(np.count_nonzero(clamped))
    if config.log_clamping and n_clamped:
        logger.info(
            "Variant '%s': %d of %d scenarios clamped to a calibration or "
            "physical bound.",
            key, n_clamped, n,
        )
    logger.debug(
        "Evaluated variant '%s' on %d scenarios in %d chunk(s).", key, n, len(chunks),
    )
    return Prediction(
        median=restore_shape(median, shape),
        sigma_ln=restore_shape(sigma, shape),
        clamped=restore_shape(clamped, shape),
        variant=key,
    )


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def predict_displacement(
    im1: ArrayLike,
    im2: ArrayLike,
    im3: Optional[ArrayLike],
    ky: ArrayLike,
    ts: ArrayLike,
    h_ratio: ArrayLike,
    ir: ArrayLike,
    variant: str,
    config: EvaluationConfig | None = None,
) -> Prediction:
    """Median and sigma of the permanent sliding displacement.

    Parameters
    ----------
    im1 : first intensity measure (PGA, g).
    im2 : second intensity measure (PGV, Tm, IA, SI per *variant*).
    im3 : third intensity measure for three-IM variants, else ``None``.
    ky : yield acceleration (g).
    ts : natural period of the full soil deposit (s).
    h_ratio : sliding depth over deposit thickness.
    ir : soil-to-bedrock impedance ratio.
    variant : IM combination, e.g. ``"PGA,PGV"`` or ``"PGA,Tm,IA"``; see
        ``available_variants("displacement")``.
    config : evaluation settings (None uses defaults).

    Returns
    -------
    :class:`Prediction` with the median displacement (cm) and the sigma of
    ln(D), both in the batch shape.

    Raises
    ------
    ValueError
        For an unknown *variant*, a missing required IM, or inconsistent
        batch shapes.
    """
    if config is None:
        config = EvaluationConfig()
    _check_config(config)

    bundle = DISPLACEMENT_VARIANTS.get(variant)
    flat, shape = flatten_batch(
        im1=im1, im2=im2, im3=im3, ky=ky, ts=ts, h_ratio=h_ratio, ir=ir,
    )
    check_required_fields(bundle, flat)

    def evaluate(fields):
        return _evaluate_displacement(bundle, fields)

    return _run_batch(evaluate, flat, shape, variant, config)


def _predict_kim(
    registry: CoefficientRegistry,
    sigma_form: Callable[[KimVariant, NDArray], NDArray],
    im1, im2, im3, ts, h_ratio, ir,
    variant: str,
    config: EvaluationConfig | None,
) -> Prediction:
    if config is None:
        config = EvaluationConfig()
    _check_config(config)

    bundle = registry.get(variant)
    flat, shape = flatten_batch(
        im1=im1, im2=im2, im3=im3, ts=ts, h_ratio=h_ratio, ir=ir,
    )
    check_required_fields(bundle, flat)

    def evaluate(fields):
        return _evaluate_kim(bundle, fields, sigma_form)

    return _run_batch(evaluate, flat, shape, variant, config)


def predict_kim_sa(
    im1: ArrayLike,
    im2: ArrayLike,
    im3: Optional[ArrayLike],
    ts: ArrayLike,
    h_ratio: ArrayLike,
    ir: ArrayLike,
    variant: str,
    config: EvaluationConfig | None = None,
) -> Prediction:
    """Median and sigma of an SA-conditioned equivalent loading parameter.

    Parameters
    ----------
    im1 : PGA (g), or ASI for ``k-ASI``.
    im2 : spectral acceleration for ``k-PGA`` / ``k-ASI``, otherwise the
        intensity measure being filtered (PGV, IA, SI, CAV).
    im3 : spectral acceleration for the three-IM targets, else ``None``.
    ts : natural period of the full soil deposit (s).
    h_ratio : sliding depth over deposit thickness.
    ir : soil-to-bedrock impedance ratio.
    variant : target k-IM, see ``available_variants("kim_sa")``.
    config : evaluation settings (None uses defaults).

    Returns
    -------
    :class:`Prediction` with the median k-IM and the sigma of ln(k-IM).
    """
    return _predict_kim(
        KIM_SA_VARIANTS, _sigma_sa, im1, im2, im3, ts, h_ratio, ir, variant, config,
    )


def predict_kim_tm(
    im1: ArrayLike,
    im2: ArrayLike,
    im3: Optional[ArrayLike],
    ts: ArrayLike,
    h_ratio: ArrayLike,
    ir: ArrayLike,
    variant: str,
    config: EvaluationConfig | None = None,
) -> Prediction:
    """Median and sigma of a Tm-conditioned equivalent loading parameter.

    Parameters
    ----------
    im1 : PGA (g), or ASI for ``k-ASI``.
    im2 : mean period Tm for ``k-PGA``, ``k-Tm`` and ``k-ASI``, otherwise
        the intensity measure being filtered (PGV, IA, SI, CAV).
    im3 : Tm for the three-IM targets, else ``None``.
    ts : natural period of the full soil deposit (s).
    h_ratio : sliding depth over deposit thickness.
    ir : soil-to-bedrock impedance ratio.
    variant : target k-IM, see ``available_variants("kim_tm")``.
    config : evaluation settings (None uses defaults).

    Returns
    -------
    :class:`Prediction` with the median k-IM and the sigma of ln(k-IM).
    """
    return _predict_kim(
        KIM_TM_VARIANTS, _sigma_tm, im1, im2, im3, ts, h_ratio, ir, variant, config,
    )
