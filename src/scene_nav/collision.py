# src/scene_nav/collision.py
"""
Collision flag definitions and collaborator protocols for scene_nav.

The game exposes, per plane, a square matrix of collision words. Each word
is a bitmask that independently encodes:

- which cardinal (and diagonal) directions are blocked when leaving or
  entering the tile, and
- whether the tile itself is fully impassable (object / floor / floor
  decoration).

This module only names those bits and defines the narrow interfaces the
pathfinder consumes. It does NOT decide walkability; see
scene_nav.nav.walkability.
"""

from __future__ import annotations

import enum
from typing import Optional, Protocol, Sequence, Set

from .coords import GridCoordinate, WorldPoint

# Flag matrix indexed as grid[x][y].
CollisionGrid = Sequence[Sequence[int]]


class MovementFlag(enum.IntFlag):
    """Collision bits as reported by the game client."""

    BLOCK_MOVEMENT_NORTH_WEST = 0x1
    BLOCK_MOVEMENT_NORTH = 0x2
    BLOCK_MOVEMENT_NORTH_EAST = 0x4
    BLOCK_MOVEMENT_EAST = 0x8
    BLOCK_MOVEMENT_SOUTH_EAST = 0x10
    BLOCK_MOVEMENT_SOUTH = 0x20
    BLOCK_MOVEMENT_SOUTH_WEST = 0x40
    BLOCK_MOVEMENT_WEST = 0x80

    BLOCK_MOVEMENT_OBJECT = 0x100
    BLOCK_MOVEMENT_FLOOR_DECORATION = 0x40000
    BLOCK_MOVEMENT_FLOOR = 0x200000

    BLOCK_MOVEMENT_FULL = (
        BLOCK_MOVEMENT_OBJECT | BLOCK_MOVEMENT_FLOOR_DECORATION | BLOCK_MOVEMENT_FLOOR
    )


# Plain-int aliases used on the hot path (avoid IntFlag arithmetic per cell).
BLOCK_NORTH = int(MovementFlag.BLOCK_MOVEMENT_NORTH)
BLOCK_EAST = int(MovementFlag.BLOCK_MOVEMENT_EAST)
BLOCK_SOUTH = int(MovementFlag.BLOCK_MOVEMENT_SOUTH)
BLOCK_WEST = int(MovementFlag.BLOCK_MOVEMENT_WEST)
BLOCK_FULL = int(MovementFlag.BLOCK_MOVEMENT_FULL)

_DECODED_FLAGS = (
    MovementFlag.BLOCK_MOVEMENT_NORTH_WEST,
    MovementFlag.BLOCK_MOVEMENT_NORTH,
    MovementFlag.BLOCK_MOVEMENT_NORTH_EAST,
    MovementFlag.BLOCK_MOVEMENT_EAST,
    MovementFlag.BLOCK_MOVEMENT_SOUTH_EAST,
    MovementFlag.BLOCK_MOVEMENT_SOUTH,
    MovementFlag.BLOCK_MOVEMENT_SOUTH_WEST,
    MovementFlag.BLOCK_MOVEMENT_WEST,
    MovementFlag.BLOCK_MOVEMENT_OBJECT,
    MovementFlag.BLOCK_MOVEMENT_FLOOR_DECORATION,
    MovementFlag.BLOCK_MOVEMENT_FLOOR,
    MovementFlag.BLOCK_MOVEMENT_FULL,
)


def set_flags(value: int) -> Set[MovementFlag]:
    """
    Decode a raw collision word into the set of individual flags it carries.

    BLOCK_MOVEMENT_FULL is reported as soon as any of its component bits
    is present, matching is_fully_blocked().
    """
    return {flag for flag in _DECODED_FLAGS if value & flag}


def is_fully_blocked(value: int) -> bool:
    """True if any of the "whole tile is impassable" bits is set."""
    return (value & BLOCK_FULL) != 0


# ---------------------------------------------------------------------------
# Collaborator protocols
# ---------------------------------------------------------------------------


class CollisionDataProvider(Protocol):
    """Source of per-plane collision grids for the loaded scene."""

    def flags_for(self, plane: int) -> Optional[CollisionGrid]:
        """Return the flag grid for `plane`, or None if nothing is loaded."""
        ...


class CoordinateMapper(Protocol):
    """
    World <-> grid conversion for the loaded scene.

    `plane` is the active plane searches run on; `size` is the scene edge
    length in tiles.
    """

    plane: int
    size: int

    def to_grid(self, world: WorldPoint) -> Optional[GridCoordinate]:
        ...

    def to_world(self, grid: GridCoordinate, plane: Optional[int] = None) -> WorldPoint:
        ...

    def contains(self, world: WorldPoint) -> bool:
        ...

    def clamp(self, world: WorldPoint) -> WorldPoint:
        ...


__all__ = [
    "CollisionGrid",
    "MovementFlag",
    "BLOCK_NORTH",
    "BLOCK_EAST",
    "BLOCK_SOUTH",
    "BLOCK_WEST",
    "BLOCK_FULL",
    "set_flags",
    "is_fully_blocked",
    "CollisionDataProvider",
    "CoordinateMapper",
]
