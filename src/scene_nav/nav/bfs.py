# src/scene_nav/nav/bfs.py
"""
Breadth-first search over a loaded scene grid.

- Unit cost per step, 8-directional movement gated by is_walkable().
- Neighbours are expanded in a fixed order (W, E, S, N, SW, SE, NW, NE).
  Ties between equally short paths are broken by insertion order, so this
  order decides WHICH shortest path is returned. Do not reorder.
- Distance / parent buffers are allocated fresh per call and owned by the
  returned BFSState; nothing is shared between searches.

Also hosts the two consumers of a finished BFSState:
- build_path(): walk parents back from an endpoint.
- resolve_approximate(): pick the best reachable substitute near an
  unreachable target.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from ..collision import CollisionGrid, CoordinateMapper
from ..coords import GridCoordinate, WorldPoint
from .walkability import is_walkable

# W, E, S, N, SW, SE, NW, NE (north is +y)
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
    (1, 1),
)

# Half-width of the square window scanned around an unreachable target
# (21 x 21 tiles). Tuned value carried over from the game client's own
# behaviour; not derived from the scene size.
APPROXIMATION_WINDOW_RADIUS = 10

# Candidates whose BFS distance is at or above this are rejected as
# excessively long detours.
APPROXIMATION_MAX_HOPS = 100

UNVISITED = -1

DistanceMap = List[List[int]]
ParentMap = List[List[Optional[GridCoordinate]]]


@dataclass
class BFSState:
    """Result of one BFS run. Owned by the caller after run_bfs() returns."""

    size: int
    distance: DistanceMap
    parent: ParentMap
    target_reached: bool
    visited: int

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def distance_at(self, cell: GridCoordinate) -> int:
        x, y = cell
        return self.distance[x][y]


def new_state(size: int) -> BFSState:
    return BFSState(
        size=size,
        distance=[[UNVISITED] * size for _ in range(size)],
        parent=[[None] * size for _ in range(size)],
        target_reached=False,
        visited=0,
    )


def run_bfs(
    flags: CollisionGrid,
    start: GridCoordinate,
    target: Optional[GridCoordinate],
    size: int,
) -> BFSState:
    """
    Explore the grid outward from `start`.

    Stops as soon as `target` is dequeued. With target=None the whole
    reachable component is explored (used by the approximate searches).
    """
    state = new_state(size)
    distance = state.distance
    parent = state.parent

    sx, sy = start
    if not state.in_bounds(sx, sy):
        return state

    distance[sx][sy] = 0
    queue: Deque[GridCoordinate] = deque([start])
    visited = 1

    while queue:
        current = queue.popleft()

        if target is not None and current == target:
            state.target_reached = True
            break

        cx, cy = current
        next_distance = distance[cx][cy] + 1

        for ox, oy in NEIGHBOR_OFFSETS:
            nx = cx + ox
            ny = cy + oy
            if not (0 <= nx < size and 0 <= ny < size):
                continue
            if distance[nx][ny] != UNVISITED:
                continue
            neighbor = (nx, ny)
            if not is_walkable(flags, current, neighbor):
                continue
            distance[nx][ny] = next_distance
            parent[nx][ny] = current
            queue.append(neighbor)
            visited += 1

    state.visited = visited
    return state


def build_path(
    parent: ParentMap,
    endpoint: GridCoordinate,
    mapper: CoordinateMapper,
    plane: int,
) -> List[WorldPoint]:
    """
    Reconstruct the path start -> endpoint from a parent map.

    The start cell (the first cell without a parent) is dropped, so the
    result runs from the first step up to and including `endpoint`. An
    endpoint without a parent yields an empty path.
    """
    cells: List[GridCoordinate] = []
    current: Optional[GridCoordinate] = endpoint
    while current is not None:
        cells.append(current)
        cx, cy = current
        current = parent[cx][cy]

    cells.reverse()
    # Drop the start cell.
    cells = cells[1:]
    return [mapper.to_world(cell, plane) for cell in cells]


def resolve_approximate(
    target: GridCoordinate,
    state: BFSState,
    mapper: CoordinateMapper,
    plane: int,
    *,
    window_radius: int = APPROXIMATION_WINDOW_RADIUS,
    max_hops: int = APPROXIMATION_MAX_HOPS,
) -> List[WorldPoint]:
    """
    Path to the best reachable stand-in for an unreachable target.

    Scans the (2r+1)^2 window centred on `target`, west to east and, within
    a column, south to north. A candidate must be visited with a distance
    below `max_hops`. The winner has the smallest BFS distance; ties go to
    the candidate closest (Euclidean) to the target. Scan order settles any
    remaining tie (first seen wins).
    """
    best = find_approximate_endpoint(
        target, state, window_radius=window_radius, max_hops=max_hops
    )
    if best is None:
        return []
    return build_path(state.parent, best, mapper, plane)


def find_approximate_endpoint(
    target: GridCoordinate,
    state: BFSState,
    *,
    window_radius: int = APPROXIMATION_WINDOW_RADIUS,
    max_hops: int = APPROXIMATION_MAX_HOPS,
) -> Optional[GridCoordinate]:
    tx, ty = target
    best: Optional[GridCoordinate] = None
    best_hops = math.inf
    best_euclidean = math.inf

    for ox in range(-window_radius, window_radius + 1):
        for oy in range(-window_radius, window_radius + 1):
            x = tx + ox
            y = ty + oy
            if not state.in_bounds(x, y):
                continue

            hops = state.distance[x][y]
            if hops == UNVISITED or hops >= max_hops:
                continue

            euclidean = math.hypot(ox, oy)
            if hops < best_hops or (hops == best_hops and euclidean < best_euclidean):
                best = (x, y)
                best_hops = hops
                best_euclidean = euclidean

    return best


__all__ = [
    "NEIGHBOR_OFFSETS",
    "APPROXIMATION_WINDOW_RADIUS",
    "APPROXIMATION_MAX_HOPS",
    "UNVISITED",
    "BFSState",
    "DistanceMap",
    "ParentMap",
    "new_state",
    "run_bfs",
    "build_path",
    "resolve_approximate",
    "find_approximate_endpoint",
]
