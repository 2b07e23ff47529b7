# scene_nav package
# src/scene_nav/__init__.py
"""
scene_nav package: tile pathfinding inside the currently loaded scene.

Exports:
    - WorldPoint / WorldArea / SceneRegion: coordinate model
    - MovementFlag: collision bit definitions
    - LoadedScene: collision snapshot of one loaded region
    - LocalPathfinder: BFS search with approximate-target fallback
    - SearchTracer: structured per-search logging
"""

from __future__ import annotations

from .coords import SCENE_SIZE, SceneRegion, WorldArea, WorldPoint
from .collision import MovementFlag
from .scene import LoadedScene
from .tracing import SearchTracer
from .nav import LocalPathfinder

__all__ = [
    "SCENE_SIZE",
    "SceneRegion",
    "WorldArea",
    "WorldPoint",
    "MovementFlag",
    "LoadedScene",
    "SearchTracer",
    "LocalPathfinder",
]
