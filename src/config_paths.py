"""Locate the exercise configuration file and the results directory for a run."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

REPO_ROOT = Path(__file__).resolve().parents[1]

CONFIG_ENV_VAR = "EBM_CONFIG_PATH"
RESULTS_DIRNAME = "results"


def get_config_path(default: Path | None = None) -> Path:
    """Return the configuration path; ``EBM_CONFIG_PATH`` takes precedence when set."""

    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser().resolve()
    if default is not None:
        return default.resolve()
    return (REPO_ROOT / "config.yaml").resolve()


def sanitize_run_directory(value: str | None) -> str | None:
    """Normalise a run-directory name to a relative path without '.' or '..' parts."""

    if value is None:
        return None
    candidate = value.strip()
    if not candidate:
        return None
    path = Path(candidate)
    if path.is_absolute():
        raise ValueError(f"results.run_directory must be a relative path, got '{value}'.")
    parts = [part for part in path.parts if part not in ("", ".", "..")]
    if not parts:
        return None
    return "/".join(parts)


def run_directory_from_config(config: Mapping[str, object] | None) -> str | None:
    """Run subdirectory configured as ``results.run_directory``, sanitised."""

    results_cfg = config.get("results") if isinstance(config, Mapping) else None
    if isinstance(results_cfg, Mapping) and results_cfg.get("run_directory") is not None:
        return sanitize_run_directory(str(results_cfg["run_directory"]))
    return None


def results_path(
    path: Path,
    run_directory: str | None = None,
    *,
    repo_root: Path | None = None,
) -> Path:
    """Absolute location of ``path``, placed in ``results/<run_directory>/`` if given.

    Only paths below ``<repo_root>/results`` are nested; anything else is made
    absolute against ``repo_root`` and returned as is.
    """

    root = repo_root or REPO_ROOT
    target = path if path.is_absolute() else root / path
    results_root = root / RESULTS_DIRNAME
    if not run_directory or not target.is_relative_to(results_root):
        return target
    return (results_root / run_directory / target.relative_to(results_root)).resolve()


__all__ = [
    "CONFIG_ENV_VAR",
    "REPO_ROOT",
    "get_config_path",
    "results_path",
    "run_directory_from_config",
    "sanitize_run_directory",
]
