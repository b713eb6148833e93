"""Evaluate the zero-dimensional energy balance model for one set of inputs.

The exercise comes in four flavours that differ only in how albedo and the
extra forcing are supplied:

``direct``
    Planetary albedo and the CO2 forcing dF are entered directly.
``co2``
    Albedo is composed from ice/land fractions and a cloud adjustment; dF is
    derived from the CO2 concentration.
``direct_albedo_co2``
    Direct albedo with CO2-derived forcing.
``composed_direct_forcing``
    Composed albedo with a directly entered dF.

All of them share calibration and the equilibrium solve; :class:`ModelConfig`
selects the albedo and forcing modes.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Literal, Mapping

import pandas as pd

from .albedo import compose_albedo, surface_fractions
from .calibration import BaselineCalibration, baseline_calibration
from .equilibrium import solve_equilibrium
from .forcing import forcing_co2, net_forcing
from .inputs import ModelInputs

AlbedoMode = Literal["direct", "composed"]
ForcingMode = Literal["direct", "co2"]

ALBEDO_MODES: tuple[str, ...] = ("direct", "composed")
FORCING_MODES: tuple[str, ...] = ("direct", "co2")


@dataclass(frozen=True, slots=True)
class ModelConfig:
    """Which albedo and forcing inputs a variant exposes."""

    albedo_mode: AlbedoMode = "direct"
    forcing_mode: ForcingMode = "direct"

    def __post_init__(self) -> None:
        if self.albedo_mode not in ALBEDO_MODES:
            raise ValueError(
                f"Unknown albedo mode '{self.albedo_mode}'; expected one of {ALBEDO_MODES}."
            )
        if self.forcing_mode not in FORCING_MODES:
            raise ValueError(
                f"Unknown forcing mode '{self.forcing_mode}'; expected one of {FORCING_MODES}."
            )

    @property
    def input_names(self) -> tuple[str, ...]:
        """Inputs read by this configuration, in display order."""

        names = ["solar_constant"]
        if self.albedo_mode == "direct":
            names.append("albedo")
        else:
            names.extend(["ice_fraction", "land_fraction", "cloud_albedo_delta"])
        names.append("delta_forcing" if self.forcing_mode == "direct" else "co2_ppm")
        names.append("other_forcing")
        return tuple(names)


VARIANTS: Mapping[str, ModelConfig] = {
    "direct": ModelConfig(albedo_mode="direct", forcing_mode="direct"),
    "co2": ModelConfig(albedo_mode="composed", forcing_mode="co2"),
    "direct_albedo_co2": ModelConfig(albedo_mode="direct", forcing_mode="co2"),
    "composed_direct_forcing": ModelConfig(albedo_mode="composed", forcing_mode="direct"),
}
DEFAULT_VARIANT = "direct"


def get_variant(name: str) -> ModelConfig:
    key = str(name).strip().lower()
    if key not in VARIANTS:
        raise KeyError(f"Unknown model variant '{name}'; expected one of {sorted(VARIANTS)}.")
    return VARIANTS[key]


@dataclass(frozen=True, slots=True)
class ModelOutputs:
    """Derived quantities for one evaluation of the model."""

    albedo: float
    absorbed_shortwave: float
    baseline_forcing: float
    delta_forcing: float
    other_forcing: float
    net_forcing: float
    temperature_k: float
    temperature_c: float
    delta_temperature: float
    no_greenhouse_temperature_k: float
    no_greenhouse_temperature_c: float
    canonical_no_greenhouse_temperature_k: float
    ocean_fraction: float | None = None
    land_fraction: float | None = None
    ice_fraction: float | None = None

    def to_dict(self) -> dict[str, float | None]:
        return asdict(self)

    def to_series(self) -> pd.Series:
        """Return the outputs as a :class:`pandas.Series` indexed by field name."""
        return pd.Series(self.to_dict(), dtype=float)


def compute(
    inputs: ModelInputs,
    config: ModelConfig | None = None,
    calibration: BaselineCalibration | None = None,
) -> ModelOutputs:
    """Solve the energy balance for ``inputs`` under ``config``.

    Parameters
    ----------
    inputs:
        Current input values. Only the fields exposed by ``config`` are read.
    config:
        Albedo and forcing modes; defaults to the ``direct`` variant.
    calibration:
        Calibrated background forcing; defaults to the memoised calibration of
        the standard reference state.

    Returns
    -------
    ModelOutputs
        Albedo, absorbed flux, forcing components, equilibrium and
        no-greenhouse temperatures, and the change relative to the reference
        temperature.
    """

    config = config or VARIANTS[DEFAULT_VARIANT]
    calibration = calibration or baseline_calibration()
    reference = calibration.reference

    fractions = None
    if config.albedo_mode == "composed":
        fractions = surface_fractions(inputs.ice_fraction, inputs.land_fraction)
        albedo = compose_albedo(
            inputs.ice_fraction, inputs.land_fraction, inputs.cloud_albedo_delta
        )
    else:
        albedo = inputs.albedo

    if config.forcing_mode == "co2":
        delta = forcing_co2(inputs.co2_ppm, reference.co2_reference)
    else:
        delta = inputs.delta_forcing

    total = net_forcing(calibration.baseline_forcing, inputs.other_forcing, delta)
    state = solve_equilibrium(inputs.solar_constant, albedo, total, sigma=reference.sigma)
    canonical = solve_equilibrium(
        reference.solar_constant, reference.albedo, 0.0, sigma=reference.sigma
    )

    return ModelOutputs(
        albedo=albedo,
        absorbed_shortwave=state.absorbed_shortwave,
        baseline_forcing=calibration.baseline_forcing,
        delta_forcing=delta,
        other_forcing=inputs.other_forcing,
        net_forcing=total,
        temperature_k=state.temperature,
        temperature_c=state.temperature_c,
        delta_temperature=state.temperature - reference.surface_temperature,
        no_greenhouse_temperature_k=state.no_greenhouse_temperature,
        no_greenhouse_temperature_c=state.no_greenhouse_temperature_c,
        canonical_no_greenhouse_temperature_k=canonical.no_greenhouse_temperature,
        ocean_fraction=None if fractions is None else fractions.ocean,
        land_fraction=None if fractions is None else fractions.land,
        ice_fraction=None if fractions is None else fractions.ice,
    )


__all__ = [
    "ALBEDO_MODES",
    "AlbedoMode",
    "DEFAULT_VARIANT",
    "FORCING_MODES",
    "ForcingMode",
    "ModelConfig",
    "ModelOutputs",
    "VARIANTS",
    "compute",
    "get_variant",
]
