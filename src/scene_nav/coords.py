# src/scene_nav/coords.py
"""
Coordinate model for scene_nav.

Two coordinate spaces exist:

- World coordinates (WorldPoint): absolute, persistent tile positions plus
  an elevation plane.
- Grid coordinates (GridCoordinate): indices into the currently loaded
  scene, relative to the scene origin (base_x, base_y). Always in
  [0, size) on both axes.

SceneRegion is the concrete mapper between the two. It does NOT know about
collision data; that lives in scene_nav.collision / scene_nav.scene.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

# Edge length of a loaded scene, in tiles.
SCENE_SIZE = 104

# (x, y) indices into a loaded scene grid.
GridCoordinate = Tuple[int, int]

# Returned by distance_to() for points on different planes.
UNREACHABLE_DISTANCE = 2**31 - 1

# Packed layout: x in bits 0-13, y in bits 14-28, plane in bits 29-31.
PACK_MAX_X = 0x3FFF
PACK_MAX_Y = 0x7FFF
PACK_MAX_PLANE = 0x7


@dataclass(frozen=True)
class WorldPoint:
    """Absolute tile position on a given plane."""

    x: int
    y: int
    plane: int = 0

    def dx(self, offset: int) -> "WorldPoint":
        return WorldPoint(self.x + offset, self.y, self.plane)

    def dy(self, offset: int) -> "WorldPoint":
        return WorldPoint(self.x, self.y + offset, self.plane)

    def distance_to(self, other: "WorldPoint") -> int:
        """
        Chebyshev distance in tiles.

        Points on different planes are never comparable; they report
        UNREACHABLE_DISTANCE instead.
        """
        if self.plane != other.plane:
            return UNREACHABLE_DISTANCE
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.plane)


@dataclass(frozen=True)
class WorldArea:
    """Axis-aligned rectangle of world tiles on a single plane."""

    x: int
    y: int
    width: int
    height: int
    plane: int = 0

    def contains(self, point: WorldPoint) -> bool:
        return (
            point.plane == self.plane
            and self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )


@dataclass(frozen=True)
class SceneRegion:
    """
    The currently loaded square region of the world.

    Responsibilities:
    - Convert world <-> grid coordinates (local = world - origin).
    - Answer "is this point in the loaded scene?".
    - Clamp out-of-scene points onto the nearest scene edge.
    """

    base_x: int
    base_y: int
    plane: int = 0
    size: int = SCENE_SIZE

    # ------------------------------------------------------------------
    # Grid queries
    # ------------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def to_grid(self, world: WorldPoint) -> Optional[GridCoordinate]:
        """
        Convert a world point into grid indices.

        Returns None when the point falls outside the loaded scene. The
        plane is not checked here; see contains() for that.
        """
        x = world.x - self.base_x
        y = world.y - self.base_y
        if not self.in_bounds(x, y):
            return None
        return (x, y)

    def to_world(self, grid: GridCoordinate, plane: Optional[int] = None) -> WorldPoint:
        x, y = grid
        return WorldPoint(
            self.base_x + x,
            self.base_y + y,
            self.plane if plane is None else plane,
        )

    # ------------------------------------------------------------------
    # World queries
    # ------------------------------------------------------------------

    def contains(self, world: WorldPoint) -> bool:
        """True if the point is inside the scene and on the scene's plane."""
        return world.plane == self.plane and self.to_grid(world) is not None

    def clamp(self, world: WorldPoint) -> WorldPoint:
        """
        Clamp a world point onto the scene.

        Points already inside are returned unchanged (apart from the plane,
        which is always the scene plane).
        """
        max_x = self.base_x + self.size - 1
        max_y = self.base_y + self.size - 1
        return WorldPoint(
            max(self.base_x, min(world.x, max_x)),
            max(self.base_y, min(world.y, max_y)),
            self.plane,
        )


# ---------------------------------------------------------------------------
# Packing helpers
# ---------------------------------------------------------------------------


def pack(point: WorldPoint) -> int:
    """Compress a world point into a single int key."""
    return pack_xyz(point.x, point.y, point.plane)


def pack_xyz(x: int, y: int, plane: int) -> int:
    if not (0 <= x <= PACK_MAX_X and 0 <= y <= PACK_MAX_Y and 0 <= plane <= PACK_MAX_PLANE):
        raise ValueError(f"Cannot pack out-of-range point ({x}, {y}, {plane})")
    return x | (y << 14) | (plane << 29)


def unpack(packed: int) -> WorldPoint:
    return WorldPoint(
        packed & PACK_MAX_X,
        (packed >> 14) & PACK_MAX_Y,
        (packed >> 29) & PACK_MAX_PLANE,
    )


__all__ = [
    "SCENE_SIZE",
    "GridCoordinate",
    "UNREACHABLE_DISTANCE",
    "PACK_MAX_X",
    "PACK_MAX_Y",
    "PACK_MAX_PLANE",
    "WorldPoint",
    "WorldArea",
    "SceneRegion",
    "pack",
    "pack_xyz",
    "unpack",
]
