# src/scene_nav/nav/pathfinder.py
"""
LocalPathfinder: routes inside the currently loaded scene.

- BFS over the scene's collision grid (see bfs.py / walkability.py).
- Falls back to the best nearby reachable tile when the exact target
  cannot be reached.
- Clamps targets outside the loaded scene onto the nearest scene edge
  before searching.

Every public search returns a list of WorldPoints running from the first
step after `start` up to the resolved endpoint. Failure of any kind is an
empty list; nothing here raises for "no path".

This module does not send input or packets and never mutates collision
data.
"""

from __future__ import annotations

import logging
import random
from time import perf_counter
from typing import TYPE_CHECKING, List, Optional

from ..collision import CollisionDataProvider, CoordinateMapper
from ..coords import GridCoordinate, WorldArea, WorldPoint
from ..scene import LoadedScene
from ..tracing import (
    OUTCOME_APPROXIMATE,
    OUTCOME_EXACT,
    OUTCOME_NO_CANDIDATE,
    OUTCOME_NO_COLLISION_DATA,
    OUTCOME_SAME_POINT,
    OUTCOME_START_OUTSIDE_SCENE,
    OUTCOME_TARGET_OUTSIDE_SCENE,
    SearchTracer,
)
from .bfs import (
    APPROXIMATION_MAX_HOPS,
    APPROXIMATION_WINDOW_RADIUS,
    UNVISITED,
    BFSState,
    build_path,
    resolve_approximate,
    run_bfs,
)
from .sparse import reduce_path

if TYPE_CHECKING:
    from env.schema import PathfinderSettings

log = logging.getLogger(__name__)

# Radius used by find_approximate_path() when the caller gives none.
DEFAULT_APPROXIMATE_RADIUS = 5


class LocalPathfinder:
    """
    Pathfinder bound to one collision provider and one coordinate mapper.

    Collaborators:
        collision: CollisionDataProvider (flags_for(plane))
        mapper:    CoordinateMapper (to_grid / to_world, plus `plane`)

    The mapper must also expose `size` (scene edge length) and `clamp()` /
    `contains()`; SceneRegion and LoadedScene both do.

    Each call allocates its own BFS buffers, so one instance may serve
    concurrent callers as long as the collision snapshot is not mutated.
    """

    def __init__(
        self,
        collision: CollisionDataProvider,
        mapper: CoordinateMapper,
        *,
        settings: Optional["PathfinderSettings"] = None,
        tracer: Optional[SearchTracer] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._collision = collision
        self._mapper = mapper
        self._tracer = tracer or SearchTracer()
        self._rng = rng or random.Random()

        if settings is not None:
            self._window_radius = settings.approximation_window_radius
            self._max_hops = settings.approximation_max_hops
            self._default_radius = settings.approximate_radius
        else:
            self._window_radius = APPROXIMATION_WINDOW_RADIUS
            self._max_hops = APPROXIMATION_MAX_HOPS
            self._default_radius = DEFAULT_APPROXIMATE_RADIUS

    @classmethod
    def for_scene(cls, scene: LoadedScene, **kwargs) -> "LocalPathfinder":
        """Build a pathfinder that reads both collaborators from one scene."""
        return cls(scene, scene, **kwargs)

    @property
    def tracer(self) -> SearchTracer:
        return self._tracer

    # ------------------------------------------------------------------
    # Scene queries
    # ------------------------------------------------------------------

    def is_in_scene(self, point: WorldPoint) -> bool:
        return self._mapper.contains(point)

    # ------------------------------------------------------------------
    # Public searches
    # ------------------------------------------------------------------

    def find_path(self, start: WorldPoint, target: WorldPoint) -> List[WorldPoint]:
        """
        Shortest path from start to target.

        A target outside the loaded scene is first clamped onto the nearest
        scene edge, so the route heads toward it as far as the scene allows.
        """
        if not self.is_in_scene(target):
            clamped = self._mapper.clamp(target)
            log.debug("target %s outside scene, clamped to %s", target, clamped)
            target = clamped
        return self.find_scene_path(start, target)

    def find_sparse_path(self, start: WorldPoint, target: WorldPoint) -> List[WorldPoint]:
        """find_path() reduced to direction-change waypoints."""
        return reduce_path(self.find_path(start, target), start)

    def find_scene_path(self, start: WorldPoint, target: WorldPoint) -> List[WorldPoint]:
        """
        Core search between two points of the loaded scene.

        Exact route if the target is reachable, otherwise a route to the
        best reachable tile near it, otherwise empty.
        """
        t0 = perf_counter()
        path: List[WorldPoint] = []
        outcome = OUTCOME_NO_CANDIDATE
        visited = 0

        try:
            if start == target:
                outcome = OUTCOME_SAME_POINT
                return path

            start_cell = self._mapper.to_grid(start)
            if start_cell is None:
                outcome = OUTCOME_START_OUTSIDE_SCENE
                return path

            target_cell = self._mapper.to_grid(target)
            if target_cell is None:
                outcome = OUTCOME_TARGET_OUTSIDE_SCENE
                return path

            plane = self._mapper.plane
            flags = self._collision.flags_for(plane)
            if flags is None:
                outcome = OUTCOME_NO_COLLISION_DATA
                return path

            state = run_bfs(flags, start_cell, target_cell, self._mapper.size)
            visited = state.visited

            if state.target_reached:
                outcome = OUTCOME_EXACT
                path = build_path(state.parent, target_cell, self._mapper, plane)
                return path

            path = self._resolve(target_cell, state, plane)
            if path:
                outcome = OUTCOME_APPROXIMATE
            return path
        finally:
            self._trace("find_scene_path", start, target, outcome, path, visited, t0)

    def find_approximate_path(
        self,
        start: WorldPoint,
        target: WorldPoint,
        radius: Optional[int] = None,
    ) -> List[WorldPoint]:
        """
        Path to a random reachable tile within `radius` tiles of target.

        Useful to avoid walking to the exact same tile every time. Falls
        back to find_path() for targets outside the scene and to the
        nearest-substitute resolver when no tile in the radius is reachable.
        """
        if radius is None:
            radius = self._default_radius

        if not self.is_in_scene(target):
            return self.find_path(start, target)

        t0 = perf_counter()
        path: List[WorldPoint] = []
        outcome = OUTCOME_NO_CANDIDATE
        visited = 0

        try:
            if self._mapper.to_grid(start) is None:
                outcome = OUTCOME_START_OUTSIDE_SCENE
                return path
            state = self._explore(start)
            if state is None:
                outcome = OUTCOME_NO_COLLISION_DATA
                return path
            visited = state.visited
            plane = self._mapper.plane

            target_cell = self._mapper.to_grid(target)
            tx, ty = target_cell
            candidates = [
                (x, y)
                for x in range(tx - radius, tx + radius + 1)
                for y in range(ty - radius, ty + radius + 1)
                if state.in_bounds(x, y) and state.distance[x][y] != UNVISITED
            ]

            if candidates:
                outcome = OUTCOME_APPROXIMATE
                selected = self._rng.choice(candidates)
                path = build_path(state.parent, selected, self._mapper, plane)
                return path

            path = self._resolve(target_cell, state, plane)
            if path:
                outcome = OUTCOME_APPROXIMATE
            return path
        finally:
            self._trace("find_approximate_path", start, target, outcome, path, visited, t0)

    def find_path_to_area(self, start: WorldPoint, area: WorldArea) -> List[WorldPoint]:
        """
        Path to a random reachable tile inside `area`.

        Only the part of the area inside the loaded scene is considered.
        Empty if the area is on another plane, lies entirely outside the
        scene, or has no reachable tile.
        """
        t0 = perf_counter()
        path: List[WorldPoint] = []
        outcome = OUTCOME_NO_CANDIDATE
        visited = 0
        anchor = WorldPoint(area.x, area.y, area.plane)

        try:
            if area.plane != self._mapper.plane:
                outcome = OUTCOME_TARGET_OUTSIDE_SCENE
                return path

            origin = self._mapper.to_world((0, 0))
            size = self._mapper.size
            min_x = max(area.x, origin.x)
            max_x = min(area.x + area.width - 1, origin.x + size - 1)
            min_y = max(area.y, origin.y)
            max_y = min(area.y + area.height - 1, origin.y + size - 1)
            if min_x > max_x or min_y > max_y:
                outcome = OUTCOME_TARGET_OUTSIDE_SCENE
                return path

            if self._mapper.to_grid(start) is None:
                outcome = OUTCOME_START_OUTSIDE_SCENE
                return path
            state = self._explore(start)
            if state is None:
                outcome = OUTCOME_NO_COLLISION_DATA
                return path
            visited = state.visited

            candidates = []
            for wx in range(min_x, max_x + 1):
                for wy in range(min_y, max_y + 1):
                    x = wx - origin.x
                    y = wy - origin.y
                    if state.distance[x][y] != UNVISITED:
                        candidates.append((x, y))

            if not candidates:
                return path

            outcome = OUTCOME_APPROXIMATE
            selected = self._rng.choice(candidates)
            path = build_path(state.parent, selected, self._mapper, self._mapper.plane)
            return path
        finally:
            self._trace("find_path_to_area", start, anchor, outcome, path, visited, t0)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _explore(self, start: WorldPoint) -> Optional[BFSState]:
        """
        Full BFS from start with no target.

        Returns None when the start is outside the scene or the active plane
        has no collision data.
        """
        start_cell = self._mapper.to_grid(start)
        if start_cell is None:
            return None

        flags = self._collision.flags_for(self._mapper.plane)
        if flags is None:
            log.debug("no collision data for plane %s", self._mapper.plane)
            return None

        return run_bfs(flags, start_cell, None, self._mapper.size)

    def _resolve(self, target: GridCoordinate, state: BFSState, plane: int) -> List[WorldPoint]:
        return resolve_approximate(
            target,
            state,
            self._mapper,
            plane,
            window_radius=self._window_radius,
            max_hops=self._max_hops,
        )

    def _trace(
        self,
        operation: str,
        start: WorldPoint,
        target: Optional[WorldPoint],
        outcome: str,
        path: List[WorldPoint],
        visited: int,
        t0: float,
    ) -> None:
        self._tracer.record(
            operation=operation,
            start=start,
            target=target,
            outcome=outcome,
            path_length=len(path),
            visited=visited,
            duration_s=perf_counter() - t0,
        )


__all__ = [
    "DEFAULT_APPROXIMATE_RADIUS",
    "LocalPathfinder",
]
