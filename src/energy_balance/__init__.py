"""Zero-dimensional planetary energy balance model for classroom exercises."""

from .albedo import SurfaceFractions, compose_albedo, surface_fractions
from .calibration import BaselineCalibration, baseline_calibration, calibrate
from .constants import DEFAULT_REFERENCE, ReferenceConstants, SurfaceAlbedo
from .equilibrium import EquilibriumState, kelvin_to_celsius, solve_equilibrium
from .forcing import forcing_co2, net_forcing
from .inputs import (
    PARAMETER_RANGES,
    ModelInputs,
    ParameterRange,
    baseline_inputs,
    constrain_inputs,
)
from .model import VARIANTS, ModelConfig, ModelOutputs, compute, get_variant
from .sweep import sweep_parameter

__all__ = [
    "BaselineCalibration",
    "DEFAULT_REFERENCE",
    "EquilibriumState",
    "ModelConfig",
    "ModelInputs",
    "ModelOutputs",
    "PARAMETER_RANGES",
    "ParameterRange",
    "ReferenceConstants",
    "SurfaceAlbedo",
    "SurfaceFractions",
    "VARIANTS",
    "baseline_calibration",
    "baseline_inputs",
    "calibrate",
    "compose_albedo",
    "compute",
    "constrain_inputs",
    "forcing_co2",
    "get_variant",
    "kelvin_to_celsius",
    "net_forcing",
    "solve_equilibrium",
    "surface_fractions",
    "sweep_parameter",
]
