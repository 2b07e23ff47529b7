# env package
# src/env/__init__.py
"""
Configuration loading for scene_nav.

Exports:
    - PathfinderSettings: resolved settings for the active profile
    - load_pathfinder_settings: read config/pathfinder.yaml
"""

from __future__ import annotations

from .loader import load_pathfinder_settings
from .schema import PathfinderSettings

__all__ = [
    "PathfinderSettings",
    "load_pathfinder_settings",
]
