"""Derive the background greenhouse forcing that reproduces the reference climate."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from .constants import DEFAULT_REFERENCE, ReferenceConstants

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BaselineCalibration:
    """Calibrated background forcing together with the reference it was derived from."""

    reference: ReferenceConstants
    baseline_forcing: float


def calibrate(reference: ReferenceConstants = DEFAULT_REFERENCE) -> float:
    """Return F0 such that ``(1 - a0) S0 / 4 + F0 = sigma T_obs^4``."""

    absorbed = (1.0 - reference.albedo) * reference.solar_constant / 4.0
    outgoing = reference.sigma * reference.surface_temperature**4
    return outgoing - absorbed


@lru_cache(maxsize=None)
def baseline_calibration(
    reference: ReferenceConstants = DEFAULT_REFERENCE,
) -> BaselineCalibration:
    """Calibrate once per reference state and reuse the result afterwards."""

    baseline_forcing = calibrate(reference)
    LOGGER.debug(
        "Calibrated baseline greenhouse forcing F0 = %.3f W/m^2 (T_obs = %.2f K, albedo = %.2f)",
        baseline_forcing,
        reference.surface_temperature,
        reference.albedo,
    )
    return BaselineCalibration(reference=reference, baseline_forcing=baseline_forcing)


__all__ = ["BaselineCalibration", "baseline_calibration", "calibrate"]
