# src/scene_nav/nav/walkability.py
"""
Walkability rule: can the player step from one grid cell to an adjacent one?

Cardinal steps check the outgoing wall on the source and the incoming wall
on the target. Diagonal steps additionally refuse to cut a corner: both
cells that share an edge with source and target (the "corner" cells) must
not be fully impassable, even when source and target themselves allow the
move.
"""

from __future__ import annotations

from ..collision import (
    BLOCK_EAST,
    BLOCK_FULL,
    BLOCK_NORTH,
    BLOCK_SOUTH,
    BLOCK_WEST,
    CollisionGrid,
)
from ..coords import GridCoordinate

# dx -> (flag blocking the move on the source, flag blocking it on the target)
_X_BLOCKERS = {
    1: (BLOCK_EAST, BLOCK_WEST),
    -1: (BLOCK_WEST, BLOCK_EAST),
}
# dy -> same, north is +y
_Y_BLOCKERS = {
    1: (BLOCK_NORTH, BLOCK_SOUTH),
    -1: (BLOCK_SOUTH, BLOCK_NORTH),
}


def is_walkable(
    flags: CollisionGrid,
    source: GridCoordinate,
    target: GridCoordinate,
) -> bool:
    """
    Decide whether a single step from `source` to `target` is allowed.

    Both cells must be in bounds and at Chebyshev distance <= 1. Steps
    larger than one tile are rejected.
    """
    sx, sy = source
    tx, ty = target
    dx = tx - sx
    dy = ty - sy

    target_flags = flags[tx][ty]
    if target_flags & BLOCK_FULL:
        return False

    if dx == 0 and dy == 0:
        return True

    if abs(dx) > 1 or abs(dy) > 1:
        return False

    source_flags = flags[sx][sy]

    # Cardinal
    if dx == 0 or dy == 0:
        out_flag, in_flag = _X_BLOCKERS[dx] if dx else _Y_BLOCKERS[dy]
        return not (source_flags & out_flag) and not (target_flags & in_flag)

    # Diagonal
    x_out, x_in = _X_BLOCKERS[dx]
    y_out, y_in = _Y_BLOCKERS[dy]

    if source_flags & (x_out | y_out):
        return False
    if target_flags & (x_in | y_in):
        return False

    # Corner cells: one step along each axis of the diagonal.
    x_corner = flags[sx + dx][sy]
    y_corner = flags[sx][sy + dy]
    return not (x_corner & BLOCK_FULL) and not (y_corner & BLOCK_FULL)


__all__ = ["is_walkable"]
