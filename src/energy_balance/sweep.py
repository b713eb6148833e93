"""Evaluate the model across a range of values for a single input."""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from typing import Iterable

import pandas as pd

from .calibration import BaselineCalibration, baseline_calibration
from .inputs import ModelInputs
from .model import ModelConfig, compute

LOGGER = logging.getLogger(__name__)

INPUT_NAMES: tuple[str, ...] = tuple(field.name for field in fields(ModelInputs))


def sweep_parameter(
    parameter: str,
    values: Iterable[float],
    inputs: ModelInputs,
    config: ModelConfig,
    calibration: BaselineCalibration | None = None,
) -> pd.DataFrame:
    """Return one row of model outputs per value of ``parameter``.

    All other inputs are held at ``inputs``. The swept column comes first,
    followed by the :class:`~energy_balance.model.ModelOutputs` fields.
    """

    if parameter not in INPUT_NAMES:
        raise KeyError(f"Cannot sweep unknown input '{parameter}'; expected one of {INPUT_NAMES}.")
    if parameter not in config.input_names:
        LOGGER.warning(
            "Input '%s' is not used by this configuration; outputs will not vary.", parameter
        )

    calibration = calibration or baseline_calibration()
    rows: list[dict[str, float | None]] = []
    for value in values:
        outputs = compute(replace(inputs, **{parameter: float(value)}), config, calibration)
        rows.append({parameter: float(value), **outputs.to_dict()})
    LOGGER.info("Evaluated %d values of '%s'", len(rows), parameter)
    return pd.DataFrame(rows)


__all__ = ["INPUT_NAMES", "sweep_parameter"]
