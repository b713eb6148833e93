"""Reference values and numerical policy constants for the energy balance model."""

from __future__ import annotations

from dataclasses import dataclass

# Stefan-Boltzmann constant (W m^-2 K^-4).
STEFAN_BOLTZMANN = 5.670374419e-8

# Myhre et al. (1998) simplified expression: dF = 5.35 ln(C / C0).
CO2_FORCING_COEFFICIENT = 5.35

# Lower bound on absorbed + forcing before the fourth root (W/m^2).
ENERGY_BALANCE_FLOOR = 1e-3

ALBEDO_BOUNDS: tuple[float, float] = (0.0, 0.8)

KELVIN_OFFSET = 273.15


@dataclass(frozen=True, slots=True)
class ReferenceConstants:
    """Preindustrial reference state used to calibrate the background forcing."""

    sigma: float = STEFAN_BOLTZMANN
    solar_constant: float = 1361.0
    albedo: float = 0.30
    surface_temperature: float = 288.0
    co2_reference: float = 280.0
    co2_current: float = 420.0


@dataclass(frozen=True, slots=True)
class SurfaceAlbedo:
    """Albedo endpoints for each surface type in the composed albedo model."""

    ocean: float = 0.06
    land: float = 0.25
    ice: float = 0.60


DEFAULT_REFERENCE = ReferenceConstants()
DEFAULT_SURFACE_ALBEDO = SurfaceAlbedo()

__all__ = [
    "ALBEDO_BOUNDS",
    "CO2_FORCING_COEFFICIENT",
    "DEFAULT_REFERENCE",
    "DEFAULT_SURFACE_ALBEDO",
    "ENERGY_BALANCE_FLOOR",
    "KELVIN_OFFSET",
    "ReferenceConstants",
    "STEFAN_BOLTZMANN",
    "SurfaceAlbedo",
]
