# src/scene_nav/testing/fakes.py
"""
Test helpers for scene_nav.

Provides:
- FakeScene: mutable in-memory scene implementing both CollisionDataProvider
  and CoordinateMapper, with helpers to carve walls and unload data.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from ..collision import BLOCK_FULL, CollisionGrid, MovementFlag
from ..coords import SCENE_SIZE, GridCoordinate, SceneRegion, WorldPoint
from ..scene import open_grid


class FakeScene:
    """
    In-memory scene used for unit and integration tests.

    Features:
    - Starts fully open on the active plane.
    - Helpers take LOCAL grid coordinates; world() converts them to
      WorldPoints on the active plane.
    - unload() makes flags_for() return None, like a scene that has not
      finished loading.
    """

    def __init__(
        self,
        base_x: int = 3200,
        base_y: int = 3200,
        plane: int = 0,
        size: int = SCENE_SIZE,
    ) -> None:
        self.region = SceneRegion(base_x=base_x, base_y=base_y, plane=plane, size=size)
        self.grids: Dict[int, List[List[int]]] = {plane: open_grid(size)}
        self.flags_requests: List[int] = []

    # ------------------------------------------------------------------
    # CoordinateMapper protocol
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
    # CollisionDataProvider protocol
    # ------------------------------------------------------------------

    def flags_for(self, plane: int) -> Optional[CollisionGrid]:
        self.flags_requests.append(plane)
        return self.grids.get(plane)

    # ------------------------------------------------------------------
    # Test-only helpers
    # ------------------------------------------------------------------

    def world(self, x: int, y: int) -> WorldPoint:
        """World point for local grid cell (x, y) on the active plane."""
        return self.region.to_world((x, y))

    def local(self, point: WorldPoint) -> GridCoordinate:
        """Inverse of world(); fails loudly for points outside the scene."""
        cell = self.region.to_grid(point)
        assert cell is not None, f"{point} is outside the fake scene"
        return cell

    def set_flags(self, x: int, y: int, value: int) -> None:
        self.grids[self.plane][x][y] = value

    def block(self, x: int, y: int) -> None:
        """Make local cell (x, y) fully impassable."""
        self.grids[self.plane][x][y] |= BLOCK_FULL

    def block_direction(self, x: int, y: int, flag: MovementFlag) -> None:
        """Add a single directional wall bit to local cell (x, y)."""
        self.grids[self.plane][x][y] |= int(flag)

    def wall_column(self, x: int, y_from: int, y_to: int) -> None:
        """Block local cells (x, y_from..y_to) inclusive."""
        for y in range(y_from, y_to + 1):
            self.block(x, y)

    def unload(self) -> None:
        """Drop all collision data."""
        self.grids.clear()
