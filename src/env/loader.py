# load pathfinder settings from config/pathfinder.yaml
# src/env/loader.py

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .schema import PathfinderSettings


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
CONFIG_FILE = "pathfinder.yaml"

# Selects the active profile when none is passed explicitly.
PROFILE_ENV_VAR = "SCENE_NAV_PROFILE"

_INT_FIELDS = (
    "approximation_window_radius",
    "approximation_max_hops",
    "approximate_radius",
    "trace_buffer_size",
)


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML config file, requiring a mapping at the top level."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _select_profile(cfg: Dict[str, Any], requested: Optional[str]) -> Tuple[str, Dict[str, Any]]:
    """Return (active_profile_name, active_profile_mapping)."""
    profile_name = requested or os.getenv(PROFILE_ENV_VAR) or cfg.get("profile")
    if not profile_name:
        raise ValueError(f"{CONFIG_FILE} must define a 'profile' key.")
    profiles = cfg.get("profiles")
    if not isinstance(profiles, dict):
        raise ValueError(f"{CONFIG_FILE} must define a 'profiles' mapping.")
    if profile_name not in profiles:
        raise KeyError(f"Profile '{profile_name}' not found in {CONFIG_FILE} profiles.")
    return profile_name, profiles[profile_name] or {}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_pathfinder_settings(
    profile: Optional[str] = None,
    config_root: Optional[Path] = None,
) -> PathfinderSettings:
    """Main entry point: returns fully resolved PathfinderSettings."""
    root = Path(config_root) if config_root is not None else CONFIG_ROOT
    cfg = _load_yaml(root / CONFIG_FILE)

    active_name, raw = _select_profile(cfg, profile)
    if not isinstance(raw, dict):
        raise ValueError(f"Profile '{active_name}' must be a mapping, got {type(raw)}")

    # Start from dataclass defaults; only override keys the profile sets.
    defaults = PathfinderSettings(name=active_name)
    values: Dict[str, Any] = {}
    for key in _INT_FIELDS:
        value = raw.get(key, getattr(defaults, key))
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"'{key}' must be an integer, got {value!r}")
        values[key] = value

    settings = PathfinderSettings(
        name=active_name,
        log_level=str(raw.get("log_level", defaults.log_level)).upper(),
        **values,
    )

    _validate_settings(settings)
    return settings


def _validate_settings(settings: PathfinderSettings) -> None:
    """Minimal sanity checks for the settings."""
    if settings.approximation_window_radius < 0:
        raise ValueError(
            f"approximation_window_radius must be >= 0, got {settings.approximation_window_radius}"
        )
    if settings.approximation_max_hops <= 0:
        raise ValueError(
            f"approximation_max_hops must be > 0, got {settings.approximation_max_hops}"
        )
    if settings.approximate_radius < 0:
        raise ValueError(f"approximate_radius must be >= 0, got {settings.approximate_radius}")
    if settings.trace_buffer_size <= 0:
        raise ValueError(f"trace_buffer_size must be > 0, got {settings.trace_buffer_size}")

    # level names only; numeric strings are not accepted
    if not isinstance(logging.getLevelName(settings.log_level), int):
        raise ValueError(f"Unknown log_level: {settings.log_level}")
