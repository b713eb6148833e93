from pathlib import Path

import pytest

from config_paths import (
    CONFIG_ENV_VAR,
    get_config_path,
    results_path,
    run_directory_from_config,
    sanitize_run_directory,
)
from energy_balance import DEFAULT_REFERENCE, VARIANTS, compute
from energy_balance.config import load_config, reference_from_config, settings_from_config


def test_load_config_reads_yaml(write_config):
    path = write_config({"energy_balance": {"variant": "co2"}})
    assert load_config(path) == {"energy_balance": {"variant": "co2"}}


def test_load_config_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_config_honours_environment_override(write_config, monkeypatch: pytest.MonkeyPatch):
    path = write_config({"energy_balance": {"variant": "direct"}})
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert get_config_path() == path.resolve()
    assert load_config()["energy_balance"]["variant"] == "direct"


def test_settings_from_empty_config_use_baseline(tmp_path: Path):
    settings = settings_from_config({}, repo_root=tmp_path)
    assert settings.variant == "direct"
    assert settings.model_config is VARIANTS["direct"]
    assert settings.calibration.reference == DEFAULT_REFERENCE
    assert settings.output_directory == tmp_path / "results" / "energy_balance"
    assert settings.sweep_parameter is None


def test_settings_from_config(tmp_path: Path):
    config = {
        "energy_balance": {
            "variant": "CO2",
            "inputs": {"co2_ppm": 560, "ice_fraction": 0.2},
            "sweep": {"parameter": "co2_ppm", "steps": 11},
            "output_directory": "results/ebm",
        },
        "results": {"run_directory": "classroom"},
    }
    settings = settings_from_config(config, repo_root=tmp_path)
    assert settings.model_config is VARIANTS["co2"]
    assert settings.inputs.co2_ppm == 560.0
    assert settings.inputs.ice_fraction == 0.2
    assert settings.sweep_parameter == "co2_ppm"
    assert settings.sweep_steps == 11
    assert settings.output_directory == (tmp_path / "results" / "classroom" / "ebm").resolve()


def test_reference_override_recalibrates(tmp_path: Path):
    config = {"energy_balance": {"reference": {"surface_temperature": 290.0, "solar_constant": 1365}}}
    settings = settings_from_config(config, repo_root=tmp_path)
    assert settings.inputs.solar_constant == 1365.0
    outputs = compute(settings.inputs, settings.model_config, settings.calibration)
    assert outputs.temperature_k == pytest.approx(290.0, abs=1e-6)
    assert outputs.delta_temperature == pytest.approx(0.0, abs=1e-6)


def test_reference_from_config_validation():
    assert reference_from_config(None) is DEFAULT_REFERENCE
    with pytest.raises(KeyError, match="temperature"):
        reference_from_config({"temperature": 300})
    with pytest.raises(ValueError, match="albedo"):
        reference_from_config({"albedo": -0.1})


def test_reference_albedo_must_be_below_one(tmp_path: Path):
    assert reference_from_config({"albedo": 0.0}).albedo == 0.0
    with pytest.raises(ValueError, match="albedo"):
        reference_from_config({"albedo": 1.5})
    with pytest.raises(ValueError, match="albedo"):
        settings_from_config({"energy_balance": {"reference": {"albedo": 1.0}}}, repo_root=tmp_path)


def test_unknown_variant_in_config(tmp_path: Path):
    with pytest.raises(KeyError):
        settings_from_config({"energy_balance": {"variant": "fancy"}}, repo_root=tmp_path)


def test_section_must_be_mapping(tmp_path: Path):
    with pytest.raises(ValueError, match="energy_balance"):
        settings_from_config({"energy_balance": ["co2"]}, repo_root=tmp_path)


def test_sanitize_run_directory():
    assert sanitize_run_directory(None) is None
    assert sanitize_run_directory("  ") is None
    assert sanitize_run_directory("../week1/./run") == "week1/run"
    with pytest.raises(ValueError):
        sanitize_run_directory("/tmp/run")


def test_results_path_nests_only_results_tree(tmp_path: Path):
    assert run_directory_from_config({"results": {"run_directory": "a/b"}}) == "a/b"
    assert run_directory_from_config({"results": None}) is None
    nested = results_path(Path("results/x.csv"), "run1", repo_root=tmp_path)
    assert nested == (tmp_path / "results" / "run1" / "x.csv").resolve()
    outside = results_path(Path("data/x.csv"), "run1", repo_root=tmp_path)
    assert outside == tmp_path / "data" / "x.csv"
    unnested = results_path(Path("results/x.csv"), None, repo_root=tmp_path)
    assert unnested == tmp_path / "results" / "x.csv"
