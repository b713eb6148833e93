"""Closed-form equilibrium of the zero-dimensional energy balance.

The surface temperature satisfies

    (1 - alpha) S / 4 + F_net = sigma T^4

with the left-hand side floored at a small positive value so extreme negative
forcing still yields a finite temperature. The floor is a numerical policy, not
physics: temperatures computed while it is active are not meaningful.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .constants import ENERGY_BALANCE_FLOOR, KELVIN_OFFSET, STEFAN_BOLTZMANN

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EquilibriumState:
    """Solution of the energy balance for one set of inputs."""

    absorbed_shortwave: float
    temperature: float
    no_greenhouse_temperature: float

    @property
    def temperature_c(self) -> float:
        return kelvin_to_celsius(self.temperature)

    @property
    def no_greenhouse_temperature_c(self) -> float:
        return kelvin_to_celsius(self.no_greenhouse_temperature)


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - KELVIN_OFFSET


def absorbed_shortwave(solar_constant: float, albedo: float) -> float:
    """Globally averaged absorbed solar flux (W/m^2)."""
    return (1.0 - albedo) * solar_constant / 4.0


def solve_equilibrium(
    solar_constant: float,
    albedo: float,
    net_forcing: float,
    *,
    sigma: float = STEFAN_BOLTZMANN,
    floor: float = ENERGY_BALANCE_FLOOR,
) -> EquilibriumState:
    """Return the equilibrium and no-greenhouse temperatures in Kelvin."""

    absorbed = absorbed_shortwave(solar_constant, albedo)
    balance = absorbed + net_forcing
    if balance < floor:
        LOGGER.debug(
            "Energy balance %.3f W/m^2 below floor; using %.0e W/m^2 instead.", balance, floor
        )
        balance = floor
    temperature = (balance / sigma) ** 0.25
    no_greenhouse = (absorbed / sigma) ** 0.25
    return EquilibriumState(
        absorbed_shortwave=absorbed,
        temperature=temperature,
        no_greenhouse_temperature=no_greenhouse,
    )


__all__ = [
    "EquilibriumState",
    "absorbed_shortwave",
    "kelvin_to_celsius",
    "solve_equilibrium",
]
