#!/usr/bin/env python3
"""End-to-end example: k-IM and sliding-displacement predictions with seismoslide.

Usage:
    python python_example.py

Evaluates a single slope scenario with every model family, then sweeps the
deposit period and reports exceedance probabilities for a displacement
threshold.
"""

import logging

import numpy as np

import seismoslide as ss

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Ground motion: PGA (g), PGV (cm/s), SA(1s) (g), Tm (s)
PGA, PGV, SA1, TM = 0.35, 30.0, 0.20, 0.45
# Slope: yield acceleration (g), depth ratio, impedance ratio
KY, H_RATIO, IR = 0.08, 0.6, 0.5

# --- 1. Equivalent loading parameters at Ts = 0.4 s ---
print("Equivalent loading parameters at Ts = 0.4 s")
k_pga = ss.predict_kim_sa(PGA, SA1, None, 0.4, H_RATIO, IR, "k-PGA")
k_pgv = ss.predict_kim_tm(PGA, PGV, TM, 0.4, H_RATIO, IR, "k-PGV")
print(f"  k-PGA (SA):  median={float(k_pga.median):.3f} g, sigma={float(k_pga.sigma_ln):.3f}")
print(f"  k-PGV (Tm):  median={float(k_pgv.median):.2f} cm/s, sigma={float(k_pgv.sigma_ln):.3f}")

# --- 2. Sliding displacement for every variant ---
print("\nSliding displacement at Ts = 0.4 s")
im2_values = {"PGV": PGV, "Tm": TM, "IA": 1.1, "SI": 70.0}
for variant in ss.available_variants("displacement"):
    names = variant.split(",")
    im2 = im2_values[names[1]]
    im3 = 1.1 if len(names) == 3 else None
    pred = ss.predict_displacement(PGA, im2, im3, KY, 0.4, H_RATIO, IR, variant)
    print(f"  {variant:<12s} D50={float(pred.median):7.2f} cm  sigma={float(pred.sigma_ln):.3f}")

# --- 3. Period sweep and exceedance probability ---
print("\nP(D > 10 cm) versus deposit period (PGA,PGV,IA)")
ts = np.linspace(0.05, 1.5, 8)
pred = ss.predict_displacement(PGA, PGV, 1.1, KY, ts, H_RATIO, IR, "PGA,PGV,IA")
for t, p in zip(ts, pred.exceedance_probability(10.0)):
    print(f"  Ts={t:.2f} s  P={p:.3f}")

# --- 4. Latin Hypercube scenario sweep ---
print("\nScenario sweep over ground-motion intensity and deposit period")
config = ss.ScenarioSweepConfig(
    ranges=[
        ss.ParametricRange("im1", 0.1, 1.0, log_scale=True),
        ss.ParametricRange("im2", 0.05, 1.0, log_scale=True),
        ss.ParametricRange("ts", 0.0, 2.0),
    ],
    fixed={"h_ratio": H_RATIO, "ir": IR},
    num_samples=500,
)
scenarios, pred = ss.run_scenario_sweep(
    "kim_sa", "k-PGA", config,
    eval_config=ss.EvaluationConfig(chunk_size=100, max_workers=2),
    verbose=1,
)
print(f"  median k-PGA / PGA: {np.median(pred.median / scenarios['im1']):.3f}")
print(f"  84th percentile range: [{pred.percentile(0.84).min():.3f}, {pred.percentile(0.84).max():.3f}] g")
