"""Calibrated coefficient tables for every supported model variant.

Three registries, one per model family:

* ``DISPLACEMENT_VARIANTS`` -- sliding displacement, keyed by IM combination
* ``KIM_SA_VARIANTS``       -- SA-conditioned k-IM models, keyed by target
* ``KIM_TM_VARIANTS``       -- Tm-conditioned k-IM models, keyed by target
"""

from seismoslide.coefficients.registry import (
    INTENSITY_MEASURES,
    CoefficientRegistry,
    DisplacementVariant,
    KimVariant,
    NetworkCoefficients,
)
from seismoslide.coefficients.displacement import DISPLACEMENT_VARIANTS
from seismoslide.coefficients.kim_sa import KIM_SA_VARIANTS
from seismoslide.coefficients.kim_tm import KIM_TM_VARIANTS

__all__ = [
    "INTENSITY_MEASURES",
    "CoefficientRegistry",
    "DisplacementVariant",
    "KimVariant",
    "NetworkCoefficients",
    "DISPLACEMENT_VARIANTS",
    "KIM_SA_VARIANTS",
    "KIM_TM_VARIANTS",
]
