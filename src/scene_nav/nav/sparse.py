# src/scene_nav/nav/sparse.py
"""
Sparse path reduction: keep only the tiles where the walking direction
changes, plus the final tile.
"""

from __future__ import annotations

from typing import List, Sequence

from ..coords import WorldPoint


def reduce_path(dense: Sequence[WorldPoint], start: WorldPoint) -> List[WorldPoint]:
    """
    Compress a dense path into direction-change waypoints.

    `start` is the tile the dense path departs from (it is not part of
    `dense`). The last point of `dense` is always kept.
    """
    if not dense:
        return []

    sparse: List[WorldPoint] = []
    prev = start

    for current, nxt in zip(dense, dense[1:]):
        incoming = (current.x - prev.x, current.y - prev.y)
        outgoing = (nxt.x - current.x, nxt.y - current.y)
        if incoming != outgoing:
            sparse.append(current)
        prev = current

    sparse.append(dense[-1])
    return sparse


__all__ = ["reduce_path"]
