"""Student-controlled inputs and the ranges the input controls allow."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace
from typing import Mapping

import numpy as np

from .constants import DEFAULT_REFERENCE

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParameterRange:
    """Bounds and increment of a single input control."""

    minimum: float
    maximum: float
    step: float
    unit: str = ""

    def clip(self, value: float) -> float:
        return float(min(self.maximum, max(self.minimum, value)))

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum

    def grid(self, num: int | None = None) -> np.ndarray:
        """Evenly spaced values across the range (one per step when ``num`` is None)."""

        if num is None:
            num = int(round((self.maximum - self.minimum) / self.step)) + 1
        if num < 2:
            raise ValueError(f"A parameter grid needs at least two points, got {num}.")
        return np.linspace(self.minimum, self.maximum, num)


PARAMETER_RANGES: Mapping[str, ParameterRange] = {
    "solar_constant": ParameterRange(1200.0, 1500.0, 1.0, "W/m^2"),
    "albedo": ParameterRange(0.1, 0.6, 0.01),
    "ice_fraction": ParameterRange(0.0, 0.6, 0.01),
    "land_fraction": ParameterRange(0.0, 0.5, 0.01),
    "cloud_albedo_delta": ParameterRange(-0.1, 0.1, 0.005),
    "delta_forcing": ParameterRange(0.0, 8.0, 0.01, "W/m^2"),
    "co2_ppm": ParameterRange(150.0, 1200.0, 1.0, "ppm"),
    "other_forcing": ParameterRange(-5.0, 5.0, 0.01, "W/m^2"),
}


@dataclass(frozen=True, slots=True)
class ModelInputs:
    """Current values of every input control.

    Each variant reads only the fields it exposes; the rest keep their defaults.
    """

    solar_constant: float = DEFAULT_REFERENCE.solar_constant
    albedo: float = DEFAULT_REFERENCE.albedo
    ice_fraction: float = 0.12
    land_fraction: float = 0.29
    cloud_albedo_delta: float = 0.0
    delta_forcing: float = 0.0
    co2_ppm: float = DEFAULT_REFERENCE.co2_current
    other_forcing: float = 0.0

    @classmethod
    def from_mapping(
        cls,
        values: Mapping[str, object] | None,
        *,
        base: "ModelInputs | None" = None,
    ) -> "ModelInputs":
        """Overlay ``values`` (e.g. the ``inputs`` config section) on ``base``."""

        start = base if base is not None else cls()
        if not values:
            return start
        known = {field.name for field in fields(cls)}
        unknown = sorted(str(key) for key in values if key not in known)
        if unknown:
            raise KeyError(
                f"Unknown model input(s) {unknown}; expected one of {sorted(known)}."
            )
        updates: dict[str, float] = {}
        for key, raw in values.items():
            if raw is None:
                continue
            try:
                value = float(raw)
            except (TypeError, ValueError):
                raise ValueError(f"Model input '{key}' must be numeric, got {raw!r}.") from None
            if not math.isfinite(value):
                raise ValueError(f"Model input '{key}' must be finite, got {raw!r}.")
            updates[str(key)] = value
        return replace(start, **updates)

    def to_dict(self) -> dict[str, float]:
        return {field.name: getattr(self, field.name) for field in fields(self)}


def baseline_inputs() -> ModelInputs:
    """Input values restored by 'Reset to baseline'."""
    return ModelInputs()


def constrain_inputs(inputs: ModelInputs) -> ModelInputs:
    """Clip every input to its control range, warning about each adjusted value."""

    updates: dict[str, float] = {}
    for name, bounds in PARAMETER_RANGES.items():
        value = getattr(inputs, name)
        if bounds.contains(value):
            continue
        clipped = bounds.clip(value)
        LOGGER.warning(
            "Input '%s' = %g outside [%g, %g]; using %g",
            name,
            value,
            bounds.minimum,
            bounds.maximum,
            clipped,
        )
        updates[name] = clipped
    return replace(inputs, **updates) if updates else inputs


__all__ = [
    "ModelInputs",
    "PARAMETER_RANGES",
    "ParameterRange",
    "baseline_inputs",
    "constrain_inputs",
]
