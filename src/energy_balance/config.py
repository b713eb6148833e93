"""Read the ``energy_balance`` section of ``config.yaml`` into model settings."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from config_paths import (
    REPO_ROOT,
    get_config_path,
    results_path,
    run_directory_from_config,
)

from .calibration import BaselineCalibration, baseline_calibration
from .constants import DEFAULT_REFERENCE, ReferenceConstants
from .inputs import ModelInputs
from .model import DEFAULT_VARIANT, ModelConfig, get_variant

DEFAULT_CONFIG_PATH = REPO_ROOT / "config.yaml"
DEFAULT_OUTPUT_DIRECTORY = "results/energy_balance"
SECTION = "energy_balance"


@dataclass(slots=True)
class ExerciseSettings:
    """Everything needed to evaluate and report one configured run."""

    variant: str
    model_config: ModelConfig
    inputs: ModelInputs
    calibration: BaselineCalibration
    output_root: Path
    repo_root: Path = REPO_ROOT
    run_directory: str | None = None
    sweep_parameter: str | None = None
    sweep_steps: int | None = None

    @property
    def output_directory(self) -> Path:
        """Where sweep tables and plots go, inside the run subdirectory if one is set."""
        return results_path(self.output_root, self.run_directory, repo_root=self.repo_root)


def load_config(config_path: str | Path | None = None) -> Dict[str, Any]:
    """Load ``config.yaml`` (defaults to the repository root copy)."""

    path = Path(config_path) if config_path is not None else get_config_path(DEFAULT_CONFIG_PATH)
    path = path.expanduser().resolve()
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _section(config: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = config.get(key) or {}
    if not isinstance(value, Mapping):
        raise ValueError(f"Configuration section '{key}' must be a mapping.")
    return value


def reference_from_config(cfg: Mapping[str, Any] | None) -> ReferenceConstants:
    """Override fields of the default reference state with ``cfg`` values."""

    if not cfg:
        return DEFAULT_REFERENCE
    known = {field.name for field in fields(ReferenceConstants)}
    unknown = sorted(str(key) for key in cfg if key not in known)
    if unknown:
        raise KeyError(f"Unknown reference constant(s) {unknown}; expected one of {sorted(known)}.")
    values = {str(key): float(value) for key, value in cfg.items() if value is not None}
    for key, value in values.items():
        if key == "albedo":
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Reference albedo must lie in [0, 1), got {value}.")
        elif not value > 0:
            raise ValueError(f"Reference constant '{key}' must be positive, got {value}.")
    return replace(DEFAULT_REFERENCE, **values)


def settings_from_config(
    config: Mapping[str, Any],
    *,
    repo_root: Path | None = None,
) -> ExerciseSettings:
    """Build :class:`ExerciseSettings` from the root configuration mapping."""

    root = repo_root or REPO_ROOT
    cfg = _section(config, SECTION)

    variant = str(cfg.get("variant", DEFAULT_VARIANT)).strip().lower()
    model_config = get_variant(variant)
    reference = reference_from_config(_section(cfg, "reference"))
    inputs = ModelInputs.from_mapping(
        _section(cfg, "inputs"),
        base=ModelInputs(
            solar_constant=reference.solar_constant,
            albedo=reference.albedo,
            co2_ppm=reference.co2_current,
        ),
    )

    sweep_cfg = _section(cfg, "sweep")
    sweep_parameter = sweep_cfg.get("parameter")
    sweep_steps = sweep_cfg.get("steps")

    output_root = Path(str(cfg.get("output_directory", DEFAULT_OUTPUT_DIRECTORY))).expanduser()
    if not output_root.is_absolute():
        output_root = root / output_root

    return ExerciseSettings(
        variant=variant,
        model_config=model_config,
        inputs=inputs,
        calibration=baseline_calibration(reference),
        output_root=output_root,
        repo_root=root,
        run_directory=run_directory_from_config(config),
        sweep_parameter=str(sweep_parameter) if sweep_parameter else None,
        sweep_steps=int(sweep_steps) if sweep_steps is not None else None,
    )


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_OUTPUT_DIRECTORY",
    "ExerciseSettings",
    "load_config",
    "reference_from_config",
    "settings_from_config",
]
