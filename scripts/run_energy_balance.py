"""Evaluate the energy balance exercise from ``config.yaml`` and the command line.

Usage
-----
```bash
python scripts/run_energy_balance.py                        # configured variant and inputs
python scripts/run_energy_balance.py --variant direct --albedo 0.32 --delta-forcing 3.7
python scripts/run_energy_balance.py --variant co2 --sweep co2_ppm --steps 40 --plot
```

Inputs come from the ``energy_balance.inputs`` section of ``config.yaml`` and are
overridden by the matching flags. Values outside the ranges of the exercise
controls are clipped with a warning before the model runs.

Output
------
The results panel (albedo, absorbed shortwave, forcings, equilibrium and
no-greenhouse temperatures) is printed to stdout. With ``--sweep`` the chosen input
is varied across its range and the table is written to
``results/energy_balance/sweep_<input>_<variant>.csv`` (plus a PNG with ``--plot``).
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import pandas as pd

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from config_paths import (  # noqa: E402
    get_config_path,
    sanitize_run_directory,
)
from energy_balance import (  # noqa: E402
    PARAMETER_RANGES,
    VARIANTS,
    ModelOutputs,
    compute,
    constrain_inputs,
    get_variant,
    sweep_parameter,
)
from energy_balance.config import ExerciseSettings, load_config, settings_from_config  # noqa: E402

LOGGER = logging.getLogger("energy_balance.run")

# Command-line flag -> ModelInputs field.
INPUT_FLAGS: dict[str, str] = {
    "solar_constant": "solar_constant",
    "albedo": "albedo",
    "ice_fraction": "ice_fraction",
    "land_fraction": "land_fraction",
    "cloud_albedo_delta": "cloud_albedo_delta",
    "delta_forcing": "delta_forcing",
    "co2": "co2_ppm",
    "other_forcing": "other_forcing",
}


def _configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Zero-dimensional energy balance: equilibrium temperature from solar input, "
        "albedo and radiative forcing."
    )
    parser.add_argument("--config", help="Path to the configuration file.")
    parser.add_argument("--variant", choices=sorted(VARIANTS), help="Model variant to evaluate.")
    for flag, field in INPUT_FLAGS.items():
        bounds = PARAMETER_RANGES[field]
        unit = f" {bounds.unit}" if bounds.unit else ""
        parser.add_argument(
            f"--{flag.replace('_', '-')}",
            dest=flag,
            type=float,
            help=f"{field} ({bounds.minimum:g} to {bounds.maximum:g}{unit}).",
        )
    parser.add_argument("--sweep", choices=sorted(PARAMETER_RANGES), help="Input to sweep.")
    parser.add_argument("--steps", type=int, help="Number of sweep points (default: one per step).")
    parser.add_argument("--plot", action="store_true", help="Also write a PNG of the sweep.")
    parser.add_argument("--output-dir", help="Directory for sweep outputs.")
    parser.add_argument("--run-subdir", help="Subdirectory under results/ for this run.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def apply_arguments(settings: ExerciseSettings, args: argparse.Namespace) -> ExerciseSettings:
    """Overlay command-line choices on the configured settings."""

    if args.variant:
        settings.variant = args.variant
        settings.model_config = get_variant(args.variant)
    overrides = {
        field: getattr(args, flag)
        for flag, field in INPUT_FLAGS.items()
        if getattr(args, flag, None) is not None
    }
    if overrides:
        settings.inputs = replace(settings.inputs, **overrides)
    if args.sweep:
        settings.sweep_parameter = args.sweep
    if args.steps is not None:
        settings.sweep_steps = args.steps
    if args.run_subdir:
        settings.run_directory = sanitize_run_directory(args.run_subdir)
    if args.output_dir:
        # An explicit directory is used as given, without a run subdirectory.
        settings.output_root = Path(args.output_dir).expanduser().resolve()
        settings.run_directory = None
    return settings


def format_summary(settings: ExerciseSettings, outputs: ModelOutputs) -> str:
    """Render the results panel as plain text."""

    inputs = settings.inputs
    config = settings.model_config
    reference = settings.calibration.reference
    lines = [
        f"Energy balance exercise ({settings.variant})",
        f"  Solar constant S:              {inputs.solar_constant:8.0f} W/m^2",
    ]
    if config.forcing_mode == "co2":
        lines.append(f"  CO2 concentration:             {inputs.co2_ppm:8.0f} ppm")
    if config.albedo_mode == "composed":
        lines.extend(
            [
                f"  Ice fraction:                  {inputs.ice_fraction:8.2f}",
                f"  Land fraction (of non-ice):    {inputs.land_fraction:8.2f}",
                f"  Cloud albedo adjustment:       {inputs.cloud_albedo_delta:8.3f}",
                f"  Ocean / land / ice area:       {outputs.ocean_fraction:.3f} / "
                f"{outputs.land_fraction:.3f} / {outputs.ice_fraction:.3f}",
            ]
        )
    forcing_label = "CO2 forcing dF:" if config.forcing_mode == "co2" else "dF (input):"
    lines.extend(
        [
            "Results",
            f"  Planetary albedo:              {outputs.albedo:8.3f}",
            f"  Absorbed shortwave:            {outputs.absorbed_shortwave:8.1f} W/m^2",
            f"  Baseline greenhouse F0:        {outputs.baseline_forcing:8.2f} W/m^2",
            f"  {forcing_label:<31}{outputs.delta_forcing:8.2f} W/m^2",
            f"  Other forcing:                 {outputs.other_forcing:8.2f} W/m^2",
            f"  Total forcing:                 {outputs.net_forcing:8.2f} W/m^2",
            f"  Equilibrium T:                 {outputs.temperature_k:8.2f} K "
            f"({outputs.temperature_c:.2f} C)",
            f"  dT from {reference.surface_temperature:g} K:              "
            f"{outputs.delta_temperature:8.2f} C",
            f"  No-GHG effective T:            {outputs.no_greenhouse_temperature_k:8.1f} K "
            f"({outputs.no_greenhouse_temperature_c:.1f} C)",
            f"  Canonical no-GHG T (a={reference.albedo:.2f}): "
            f"{outputs.canonical_no_greenhouse_temperature_k:8.1f} K",
        ]
    )
    return "\n".join(lines)


def write_sweep(frame: pd.DataFrame, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(path, index=False)
    LOGGER.info("Wrote sweep table to %s", path)
    return path


def plot_sweep(frame: pd.DataFrame, parameter: str, path: Path) -> Path:
    """Plot equilibrium and no-greenhouse temperatures against the swept input."""

    path.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(7, 4))
    ax.plot(frame[parameter], frame["temperature_k"], label="Equilibrium T")
    ax.plot(
        frame[parameter],
        frame["no_greenhouse_temperature_k"],
        linestyle="--",
        label="No-greenhouse T",
    )
    unit = PARAMETER_RANGES[parameter].unit
    ax.set_xlabel(f"{parameter} ({unit})" if unit else parameter)
    ax.set_ylabel("Temperature (K)")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    LOGGER.info("Wrote sweep plot to %s", path)
    return path


def run_sweep(settings: ExerciseSettings, *, plot: bool = False) -> pd.DataFrame:
    parameter = settings.sweep_parameter
    if parameter is None:
        raise ValueError("No sweep parameter configured.")
    if parameter not in PARAMETER_RANGES:
        raise KeyError(f"Cannot sweep '{parameter}'; expected one of {sorted(PARAMETER_RANGES)}.")
    values = PARAMETER_RANGES[parameter].grid(settings.sweep_steps)
    frame = sweep_parameter(
        parameter, values, settings.inputs, settings.model_config, settings.calibration
    )
    stem = f"sweep_{parameter}_{settings.variant}"
    write_sweep(frame, settings.output_directory / f"{stem}.csv")
    if plot:
        plot_sweep(frame, parameter, settings.output_directory / f"{stem}.png")
    return frame


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    default_path = (ROOT / "config.yaml").resolve()
    if args.config:
        config_path = Path(args.config).expanduser().resolve()
    else:
        config_path = get_config_path(default_path)
    # Only the implicit default may be absent; a requested file must exist.
    if config_path != default_path or config_path.exists():
        config = load_config(config_path)
    else:
        LOGGER.info("No configuration found at %s; using baseline inputs.", config_path)
        config = {}
    settings = apply_arguments(settings_from_config(config, repo_root=ROOT), args)
    settings.inputs = constrain_inputs(settings.inputs)

    outputs = compute(settings.inputs, settings.model_config, settings.calibration)
    print(format_summary(settings, outputs))

    if settings.sweep_parameter:
        run_sweep(settings, plot=args.plot)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
