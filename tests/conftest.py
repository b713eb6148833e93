"""Make ``src/`` and the repository root importable and share model fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import yaml

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

for path in (ROOT, SRC):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from energy_balance import BaselineCalibration, baseline_calibration  # noqa: E402


@pytest.fixture
def calibration() -> BaselineCalibration:
    return baseline_calibration()


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a mapping to ``tmp_path/config.yaml`` and return the path."""

    def _write(config: dict) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(config), encoding="utf-8")
        return path

    return _write
