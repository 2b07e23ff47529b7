# src/scene_nav/scene.py
"""
LoadedScene: a stable snapshot of one loaded region.

A LoadedScene bundles a SceneRegion (coordinate mapping) with the collision
grids captured for each plane. It satisfies both collaborator protocols the
pathfinder needs:

- CollisionDataProvider.flags_for(plane)
- CoordinateMapper.to_grid / to_world

The pathfinder only ever reads from a scene. Whoever builds the snapshot
(game bridge, dump loader, tests) must not mutate it while a search runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .collision import CollisionGrid
from .coords import GridCoordinate, SceneRegion, WorldPoint

# Number of elevation planes the game keeps collision maps for.
PLANE_COUNT = 4


def open_grid(size: int) -> List[List[int]]:
    """A size x size grid with no collision bits set."""
    return [[0] * size for _ in range(size)]


@dataclass
class LoadedScene:
    """Collision snapshot for the currently loaded region."""

    region: SceneRegion
    # plane -> grid[x][y]
    collision_maps: Dict[int, List[List[int]]] = field(default_factory=dict)

    @classmethod
    def empty(cls, region: SceneRegion) -> "LoadedScene":
        """Scene with open (all-zero) collision grids on every plane."""
        return cls(
            region=region,
            collision_maps={p: open_grid(region.size) for p in range(PLANE_COUNT)},
        )

    # ------------------------------------------------------------------
    # CoordinateMapper
    # ------------------------------------------------------------------

    @property
    def plane(self) -> int:
        return self.region.plane

    @property
    def size(self) -> int:
        return self.region.size

    def to_grid(self, world: WorldPoint) -> Optional[GridCoordinate]:
        return self.region.to_grid(world)

    def to_world(self, grid: GridCoordinate, plane: Optional[int] = None) -> WorldPoint:
        return self.region.to_world(grid, plane)

    def contains(self, world: WorldPoint) -> bool:
        return self.region.contains(world)

    def clamp(self, world: WorldPoint) -> WorldPoint:
        return self.region.clamp(world)

    # ------------------------------------------------------------------
    # CollisionDataProvider
    # ------------------------------------------------------------------

    def flags_for(self, plane: int) -> Optional[CollisionGrid]:
        return self.collision_maps.get(plane)

    # ------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------

    def flags_at(self, world: WorldPoint) -> Optional[int]:
        """Raw collision word at a world point, or None if not loaded."""
        grid = self.flags_for(world.plane)
        local = self.region.to_grid(world)
        if grid is None or local is None:
            return None
        x, y = local
        return grid[x][y]


__all__ = [
    "PLANE_COUNT",
    "LoadedScene",
    "open_grid",
]
