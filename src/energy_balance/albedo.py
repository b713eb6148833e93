"""Planetary albedo from a mix of ocean, land and ice plus a cloud adjustment."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import ALBEDO_BOUNDS, DEFAULT_SURFACE_ALBEDO, SurfaceAlbedo


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


@dataclass(frozen=True, slots=True)
class SurfaceFractions:
    """Area fractions of open ocean, ice-free land and ice."""

    ocean: float
    land: float
    ice: float

    @property
    def total(self) -> float:
        return self.ocean + self.land + self.ice


def surface_fractions(ice_fraction: float, land_fraction: float) -> SurfaceFractions:
    """Split the planet into ocean, land and ice.

    Ice covers ``ice_fraction`` of the area; the remainder is divided between land
    and ocean according to ``land_fraction``. Both inputs are clamped to [0, 1].
    """

    ice = clamp(ice_fraction, 0.0, 1.0)
    land = clamp(land_fraction, 0.0, 1.0)
    non_ice = clamp(1.0 - ice, 0.0, 1.0)
    return SurfaceFractions(
        ocean=clamp(1.0 - land, 0.0, 1.0) * non_ice,
        land=land * non_ice,
        ice=ice,
    )


def compose_albedo(
    ice_fraction: float,
    land_fraction: float,
    cloud_delta: float = 0.0,
    *,
    surface_albedo: SurfaceAlbedo = DEFAULT_SURFACE_ALBEDO,
) -> float:
    """Area-weighted surface albedo plus ``cloud_delta``, bounded to [0, 0.8]."""

    fractions = surface_fractions(ice_fraction, land_fraction)
    surface = (
        fractions.ocean * surface_albedo.ocean
        + fractions.land * surface_albedo.land
        + fractions.ice * surface_albedo.ice
    )
    lower, upper = ALBEDO_BOUNDS
    return clamp(surface + cloud_delta, lower, upper)


__all__ = ["SurfaceFractions", "clamp", "compose_albedo", "surface_fractions"]
