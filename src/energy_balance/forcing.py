"""Radiative forcing terms added to the top-of-atmosphere energy balance."""

from __future__ import annotations

import math

from .constants import CO2_FORCING_COEFFICIENT, DEFAULT_REFERENCE


def forcing_co2(
    concentration: float,
    reference: float = DEFAULT_REFERENCE.co2_reference,
) -> float:
    """CO2 forcing relative to ``reference`` in W/m^2 (3.71 W/m^2 per doubling).

    Raises
    ------
    ValueError
        If either concentration is not a positive finite number, since the
        logarithm is undefined there.
    """

    for label, value in (("concentration", concentration), ("reference", reference)):
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"CO2 {label} must be a positive number of ppm, got {value!r}.")
    return CO2_FORCING_COEFFICIENT * math.log(concentration / reference)


def net_forcing(baseline: float, other: float = 0.0, delta: float = 0.0) -> float:
    """Background forcing plus the anthropogenic and 'other' perturbations."""
    return baseline + other + delta


__all__ = ["forcing_co2", "net_forcing"]
