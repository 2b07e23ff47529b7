# src/scene_nav/nav/__init__.py
"""
Navigation subsystem for scene_nav.

Provides:
- is_walkable: single-step movement rule over collision flags
- run_bfs / build_path / resolve_approximate: the search core
- reduce_path: dense -> sparse waypoint reduction
- LocalPathfinder: the public search API bound to a loaded scene
"""

from __future__ import annotations

from .walkability import is_walkable
from .bfs import (
    APPROXIMATION_MAX_HOPS,
    APPROXIMATION_WINDOW_RADIUS,
    NEIGHBOR_OFFSETS,
    BFSState,
    build_path,
    resolve_approximate,
    run_bfs,
)
from .sparse import reduce_path
from .pathfinder import DEFAULT_APPROXIMATE_RADIUS, LocalPathfinder

__all__ = [
    "is_walkable",
    "APPROXIMATION_MAX_HOPS",
    "APPROXIMATION_WINDOW_RADIUS",
    "NEIGHBOR_OFFSETS",
    "BFSState",
    "build_path",
    "resolve_approximate",
    "run_bfs",
    "reduce_path",
    "DEFAULT_APPROXIMATE_RADIUS",
    "LocalPathfinder",
]
