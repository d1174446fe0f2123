"""Tests for seismoslide.models -- end-to-end predictions."""

import logging

import numpy as np
import pytest

from seismoslide.coefficients import DISPLACEMENT_VARIANTS, KIM_SA_VARIANTS, KIM_TM_VARIANTS
from seismoslide.models import (
    EvaluationConfig,
    Prediction,
    available_variants,
    predict_displacement,
    predict_kim_sa,
    predict_kim_tm,
)

RTOL = 1e-6

# (ts, h_ratio, ir) scenarios shared by the k-IM reference points
KIM_SCENARIOS = [(0.3, 0.5, 0.4), (0.01, 0.8, 0.6)]

# variant: ((im1, im2, im3), [(median, sigma) per KIM_SCENARIOS entry])
KIM_SA_REFERENCE = {
    "k-PGA": ((0.3, 0.25, None), [
        (0.327257866172585, 0.197530209491083),
        (0.293325640232729, 0.160975603356444),
    ]),
    "k-PGV": ((0.3, 25.0, 0.12), [
        (32.193489786086, 0.12653046493437),
        (24.2598118427802, 12.5244190623771),
    ]),
    "k-IA": ((0.3, 0.8, 0.25), [
        (1.16692959496836, 0.317716765339583),
        (0.813285856035449, 0.432532908199808),
    ]),
    "k-SI": ((0.3, 60.0, 0.12), [
        (69.9892310067337, 0.0522093847158347),
        (57.3191579186616, 30.0126136491875),
    ]),
    "k-CAV": ((0.3, 0.9, 0.25), [
        (1.02437228045344, 0.152651488853734),
        (0.952037065659216, 0.475007078028751),
    ]),
    "k-ASI": ((0.2, 0.4, None), [
        (0.247513742263857, 0.10446384782655),
        (0.251410064393513, 0.104037587485192),
    ]),
}

KIM_TM_REFERENCE = {
    "k-PGA": ((0.3, 0.4, None), [
        (0.322526791226157, 0.181148898515182),
        (0.330653823750372, 0.176132076009022),
    ]),
    "k-PGV": ((0.3, 25.0, 0.4), [
        (31.688631576386, 0.13294718814166),
        (24.281673363307, 12.5002368430753),
    ]),
    "k-Tm": ((0.3, 0.4, None), [
        (0.52959568630042, 0.124229679017967),
        (0.399922875299638, 0.249133350013912),
    ]),
    "k-IA": ((0.3, 0.8, 0.4), [
        (1.05038536784733, 0.216983772594069),
        (1.20618117419737, 0.428609622114989),
    ]),
    "k-SI": ((0.3, 60.0, 0.4), [
        (78.7406473339471, 0.0696317357790044),
        (61.3970472047401, 30.0017701464465),
    ]),
    "k-CAV": ((0.3, 0.9, 0.4), [
        (1.00149363787271, 0.114870550309013),
        (0.977034108116441, 0.467460176046549),
    ]),
    "k-ASI": ((0.2, 0.4, None), [
        (0.232655247609079, 0.116912567464797),
        (0.204299355205043, 0.110455838449561),
    ]),
}

# (ky, ts, h_ratio, ir) scenarios for the displacement reference points
DISP_SCENARIOS = [(0.1, 0.3, 0.5, 0.4), (0.05, 1.2, 0.8, 0.6)]

# variant: ((im1, im2, im3), [(median, flexible sigma, rigid sigma) per scenario])
DISP_REFERENCE = {
    "PGA,PGV": ((0.3, 25.0, None), [
        (6.02927471825428, 0.669666666666667, 0.583333333333333),
        (27.657498449253, 0.601833333333333, 0.496666666666667),
    ]),
    "PGA,Tm": ((0.3, 0.4, None), [
        (4.7276993063263, 0.631666666666667, 0.686666666666667),
        (14.7247509998473, 0.6345, 0.643333333333333),
    ]),
    "PGA,IA": ((0.3, 0.8, None), [
        (4.92405614557437, 0.782666666666667, 0.646666666666667),
        (82.3220741205528, 0.684333333333333, 0.553333333333333),
    ]),
    "PGA,SI": ((0.3, 60.0, None), [
        (3.7249751746768, 0.618666666666667, 0.540333333333333),
        (10.0433873981348, 0.552833333333333, 0.456166666666667),
    ]),
    "PGA,Tm,IA": ((0.3, 0.4, 0.8), [
        (4.50665901132937, 0.384333333333333, 0.400666666666667),
        (21.7911452755797, 0.281166666666667, 0.277833333333333),
    ]),
    "PGA,Tm,CAV": ((0.3, 0.4, 0.9), [
        (5.45293903394105, 0.506333333333333, 0.506666666666667),
        (20.5805853475597, 0.415166666666667, 0.403833333333333),
    ]),
    "PGA,PGV,IA": ((0.3, 25.0, 0.8), [
        (5.96716125410365, 0.442, 0.435),
        (39.8927593516547, 0.329, 0.3095),
    ]),
    "PGA,PGV,CAV": ((0.3, 25.0, 0.9), [
        (6.52923168774329, 0.497333333333333, 0.487333333333333),
        (47.3883686704576, 0.393666666666667, 0.378166666666667),
    ]),
}


def _kim_batch(ims, scenarios):
    im1, im2, im3 = ims
    n = len(scenarios)
    ts, h, ir = (np.array(col) for col in zip(*scenarios))
    return (
        np.full(n, im1), np.full(n, im2), None if im3 is None else np.full(n, im3),
        ts, h, ir,
    )


# ---- Known points ----

@pytest.mark.regression
@pytest.mark.parametrize("variant", list(KIM_SA_REFERENCE))
def test_kim_sa_reference(variant):
    ims, expected = KIM_SA_REFERENCE[variant]
    pred = predict_kim_sa(*_kim_batch(ims, KIM_SCENARIOS), variant)
    np.testing.assert_allclose(pred.median, [e[0] for e in expected], rtol=RTOL)
    np.testing.assert_allclose(pred.sigma_ln, [e[1] for e in expected], rtol=RTOL)
    assert pred.variant == variant


@pytest.mark.regression
@pytest.mark.parametrize("variant", list(KIM_TM_REFERENCE))
def test_kim_tm_reference(variant):
    ims, expected = KIM_TM_REFERENCE[variant]
    pred = predict_kim_tm(*_kim_batch(ims, KIM_SCENARIOS), variant)
    np.testing.assert_allclose(pred.median, [e[0] for e in expected], rtol=RTOL)
    np.testing.assert_allclose(pred.sigma_ln, [e[1] for e in expected], rtol=RTOL)


@pytest.mark.regression
@pytest.mark.parametrize("variant", list(DISP_REFERENCE))
def test_displacement_reference(variant):
    (im1, im2, im3), expected = DISP_REFERENCE[variant]
    ky, ts, h, ir = (np.array(col) for col in zip(*DISP_SCENARIOS))
    pred = predict_displacement(im1, im2, im3, ky, ts, h, ir, variant)
    np.testing.assert_allclose(pred.median, [e[0] for e in expected], rtol=RTOL)
    np.testing.assert_allclose(pred.sigma_ln, [e[1] for e in expected], rtol=RTOL)


@pytest.mark.regression
@pytest.mark.parametrize("variant", list(DISP_REFERENCE))
def test_displacement_zero_period_uses_rigid_sigma(variant):
    (im1, im2, im3), expected = DISP_REFERENCE[variant]
    ky, _, h, ir = DISP_SCENARIOS[0]
    pred = predict_displacement(im1, im2, im3, ky, 0.0, h, ir, variant)
    np.testing.assert_allclose(pred.sigma_ln, expected[0][2], rtol=RTOL)
    # no median correction near zero period: ln(0) leaves the median undefined
    assert np.isnan(pred.median)


def test_every_variant_covered():
    assert sorted(KIM_SA_REFERENCE) == sorted(KIM_SA_VARIANTS.keys())
    assert sorted(KIM_TM_REFERENCE) == sorted(KIM_TM_VARIANTS.keys())
    assert sorted(DISP_REFERENCE) == sorted(DISPLACEMENT_VARIANTS.keys())


# ---- Shapes and determinism ----

class TestBatchShapes:

    def test_scalar_inputs_give_0d_outputs(self):
        pred = predict_kim_sa(0.3, 25.0, 0.12, 0.3, 0.5, 0.4, "k-PGV")
        assert pred.median.shape == ()
        assert pred.sigma_ln.shape == ()
        assert pred.clamped.shape == ()

    def test_2d_batch(self):
        ts = np.array([[0.1, 0.3, 0.6], [0.9, 1.2, 1.5]])
        pred = predict_displacement(0.3, 0.4, 0.8, 0.1, ts, 0.5, 0.4, "PGA,Tm,IA")
        assert pred.median.shape == (2, 3)
        assert pred.clamped.dtype == bool

    def test_batch_matches_single_scenarios(self):
        ts = np.array([0.01, 0.3, 1.0])
        batch = predict_kim_tm(0.3, 0.9, 0.4, ts, 0.5, 0.4, "k-CAV")
        for i, t in enumerate(ts):
            single = predict_kim_tm(0.3, 0.9, 0.4, t, 0.5, 0.4, "k-CAV")
            np.testing.assert_allclose(batch.median[i], single.median, rtol=1e-12)
            np.testing.assert_allclose(batch.sigma_ln[i], single.sigma_ln, rtol=1e-12)

    def test_deterministic(self):
        args = (0.3, 25.0, 0.8, 0.1, np.linspace(0.05, 1.5, 20), 0.5, 0.4, "PGA,PGV,IA")
        a = predict_displacement(*args)
        b = predict_displacement(*args)
        np.testing.assert_array_equal(a.median, b.median)
        np.testing.assert_array_equal(a.sigma_ln, b.sigma_ln)

    def test_shape_mismatch_raises(self):
        with pytest.raises(ValueError, match="share one shape"):
            predict_kim_sa(np.ones(3), np.ones(4), None, 0.3, 0.5, 0.4, "k-PGA")

    def test_inputs_not_modified(self):
        ts = np.array([0.01, 5.0])
        ir = np.array([0.05, 2.0])
        predict_displacement(0.3, 25.0, None, 0.1, ts, 0.5, ir, "PGA,PGV")
        np.testing.assert_array_equal(ts, [0.01, 5.0])
        np.testing.assert_array_equal(ir, [0.05, 2.0])


# ---- Clamping ----

def test_out_of_domain_predictors_flagged():
    pred = predict_kim_sa(
        np.array([0.3, 50.0]), 25.0, 0.12, 0.3, 0.5, 0.4, "k-PGV",
    )
    assert pred.clamped.tolist() == [False, True]


def test_clamping_idempotent():
    network = KIM_SA_VARIANTS.get("k-PGA").network
    upper_im1 = float(np.exp(network.x_max[0]))
    beyond = predict_kim_sa(upper_im1 * 10.0, 0.25, None, 0.3, 0.5, 0.4, "k-PGA")
    at_bound = predict_kim_sa(upper_im1, 0.25, None, 0.3, 0.5, 0.4, "k-PGA")
    # the anchor differs but only enters below Ts = 0.02 s
    np.testing.assert_allclose(beyond.median, at_bound.median, rtol=1e-12)
    assert bool(beyond.clamped)


def test_ky_ratio_below_clamp_behaves_as_bound():
    # Ky/PGA = 0.02 and 0.05 give the same sigma
    a = predict_displacement(1.0, 25.0, None, 0.02, 0.3, 0.5, 0.4, "PGA,PGV")
    b = predict_displacement(1.0, 25.0, None, 0.05, 0.3, 0.5, 0.4, "PGA,PGV")
    np.testing.assert_allclose(a.sigma_ln, b.sigma_ln, rtol=1e-12)


# ---- Physical clamps of the displacement inputs ----

@pytest.mark.parametrize("variant, ims", [
    ("PGA,PGV", (0.3, 25.0, None)),
    ("PGA,SI", (0.3, 60.0, None)),
    ("PGA,Tm,IA", (0.3, 0.4, 0.8)),
])
def test_displacement_physical_clamps_flagged(variant, ims):
    ts = np.array([10.0, 2.0, 0.3])
    h = np.array([0.01, 0.1, 0.5])
    ir = np.array([5.0, 1.0, 0.4])
    pred = predict_displacement(*ims, 0.1, ts, h, ir, variant)
    # the first scenario is evaluated at the bounds of the second
    np.testing.assert_allclose(pred.median[0], pred.median[1], rtol=1e-12)
    assert pred.clamped.tolist() == [True, False, False]


def test_rigid_baseline_short_period_flagged():
    pred = predict_displacement(0.3, 25.0, None, 0.1, 0.01, 0.5, 0.4, "PGA,PGV")
    assert bool(pred.clamped)


# ---- Clamping log ----

def test_clamping_logged_once_per_batch(caplog):
    im1 = np.array([0.3, 50.0, 50.0, 0.3, 50.0])
    cfg = EvaluationConfig(chunk_size=1)
    with caplog.at_level(logging.INFO, logger="seismoslide.models"):
        predict_kim_sa(im1, 25.0, 0.12, 0.3, 0.5, 0.4, "k-PGV", cfg)
    records = [r for r in caplog.records if "clamped" in r.getMessage()]
    assert len(records) == 1
    assert "3 of 5 scenarios clamped" in records[0].getMessage()


def test_clamping_log_disabled(caplog):
    cfg = EvaluationConfig(log_clamping=False)
    with caplog.at_level(logging.INFO, logger="seismoslide.models"):
        pred = predict_kim_sa(50.0, 25.0, 0.12, 0.3, 0.5, 0.4, "k-PGV", cfg)
    assert bool(pred.clamped)
    assert "clamped" not in caplog.text


# ---- Near-zero period ----

class TestBoundaryBehaviour:

    @pytest.mark.parametrize("predict, variant, ims", [
        (predict_kim_sa, "k-PGV", (0.3, 25.0, 0.12)),
        (predict_kim_sa, "k-PGA", (0.3, 0.25, None)),
        (predict_kim_tm, "k-Tm", (0.3, 0.4, None)),
        (predict_kim_tm, "k-SI", (0.3, 60.0, 0.4)),
    ])
    def test_continuous_at_threshold(self, predict, variant, ims):
        ts = np.array([0.02 - 1e-12, 0.02])
        pred = predict(*ims, ts, 0.5, 0.4, variant)
        np.testing.assert_allclose(pred.median[0], pred.median[1], rtol=1e-6)
        np.testing.assert_allclose(pred.sigma_ln[0], pred.sigma_ln[1], rtol=1e-6)

    def test_zero_period_returns_anchor(self):
        pred = predict_kim_sa(0.3, 25.0, 0.12, 0.0, 0.5, 0.4, "k-PGV")
        np.testing.assert_allclose(pred.median, 25.0)
        np.testing.assert_allclose(pred.sigma_ln, 25.0)

    def test_anchor_follows_variant(self):
        pga = predict_kim_sa(0.3, 0.25, None, 0.0, 0.5, 0.4, "k-PGA")
        tm = predict_kim_tm(0.3, 0.4, None, 0.0, 0.5, 0.4, "k-Tm")
        np.testing.assert_allclose(pga.median, 0.3)
        np.testing.assert_allclose(tm.median, 0.4)


# ---- Errors ----

def test_unknown_variant_raises():
    with pytest.raises(ValueError, match="k-PGV"):
        predict_kim_sa(0.3, 25.0, 0.12, 0.3, 0.5, 0.4, "k-XYZ")


def test_tm_only_variant_not_in_sa_model():
    with pytest.raises(ValueError, match="Unknown"):
        predict_kim_sa(0.3, 0.4, None, 0.3, 0.5, 0.4, "k-Tm")


def test_missing_im3_raises():
    with pytest.raises(ValueError, match="im3"):
        predict_displacement(0.3, 0.4, None, 0.1, 0.3, 0.5, 0.4, "PGA,Tm,IA")


def test_unused_im3_ignored():
    a = predict_displacement(0.3, 25.0, None, 0.1, 0.3, 0.5, 0.4, "PGA,PGV")
    b = predict_displacement(0.3, 25.0, 99.0, 0.1, 0.3, 0.5, 0.4, "PGA,PGV")
    np.testing.assert_array_equal(a.median, b.median)


def test_available_variants():
    assert available_variants("displacement") == DISPLACEMENT_VARIANTS.keys()
    assert "k-Tm" in available_variants("kim_tm")
    with pytest.raises(ValueError, match="kim_sa"):
        available_variants("kim")


# ---- EvaluationConfig ----

def test_evaluation_config_defaults():
    cfg = EvaluationConfig()
    assert cfg.chunk_size == 0
    assert cfg.max_workers == 1
    assert cfg.log_clamping is True


@pytest.mark.parametrize("cfg", [
    EvaluationConfig(chunk_size=-1),
    EvaluationConfig(max_workers=0),
])
def test_invalid_config(cfg):
    with pytest.raises(ValueError):
        predict_kim_sa(0.3, 0.25, None, 0.3, 0.5, 0.4, "k-PGA", cfg)


@pytest.mark.parametrize("cfg", [
    EvaluationConfig(chunk_size=7),
    EvaluationConfig(chunk_size=7, max_workers=4),
    EvaluationConfig(chunk_size=1, max_workers=3),
])
def test_chunked_matches_single_pass(cfg):
    rng = np.random.default_rng(7)
    n = 50
    im1 = rng.uniform(0.05, 1.0, n)
    im2 = rng.uniform(5.0, 80.0, n)
    im3 = rng.uniform(0.1, 1.0, n)
    ts = rng.uniform(0.0, 1.5, n)
    h = rng.uniform(0.1, 1.0, n)
    ir = rng.uniform(0.1, 1.0, n)

    single = predict_kim_sa(im1, im2, im3, ts, h, ir, "k-PGV")
    chunked = predict_kim_sa(im1, im2, im3, ts, h, ir, "k-PGV", cfg)
    np.testing.assert_allclose(single.median, chunked.median, rtol=1e-12)
    np.testing.assert_allclose(single.sigma_ln, chunked.sigma_ln, rtol=1e-12)
    np.testing.assert_array_equal(single.clamped, chunked.clamped)


# ---- Prediction helpers ----

class TestPrediction:

    def _prediction(self):
        return Prediction(
            median=np.array([10.0, 2.0]),
            sigma_ln=np.array([0.5, 0.8]),
            clamped=np.array([False, False]),
            variant="PGA,PGV",
        )

    def test_exceedance_at_median_is_half(self):
        pred = self._prediction()
        np.testing.assert_allclose(pred.exceedance_probability(pred.median), 0.5)

    def test_exceedance_monotonic(self):
        pred = self._prediction()
        low = pred.exceedance_probability(1.0)
        high = pred.exceedance_probability(100.0)
        assert np.all(low > high)

    def test_exceedance_zero_threshold(self):
        pred = self._prediction()
        np.testing.assert_allclose(pred.exceedance_probability(0.0), 1.0)

    def test_percentile(self):
        pred = self._prediction()
        np.testing.assert_allclose(pred.percentile(0.5), pred.median)
        np.testing.assert_allclose(
            pred.percentile(0.84), pred.median * np.exp(0.994457883 * pred.sigma_ln),
            rtol=1e-8,
        )

    @pytest.mark.parametrize("p", [0.0, 1.0, -0.1, 1.5])
    def test_percentile_out_of_range(self, p):
        with pytest.raises(ValueError, match="p must"):
            self._prediction().percentile(p)
