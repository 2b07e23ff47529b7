# PathfinderSettings dataclass
# src/env/schema.py

from dataclasses import dataclass

from scene_nav.nav.bfs import APPROXIMATION_MAX_HOPS, APPROXIMATION_WINDOW_RADIUS
from scene_nav.nav.pathfinder import DEFAULT_APPROXIMATE_RADIUS


@dataclass
class PathfinderSettings:
    """Resolved pathfinder configuration for one active profile."""
    name: str
    approximation_window_radius: int = APPROXIMATION_WINDOW_RADIUS
    approximation_max_hops: int = APPROXIMATION_MAX_HOPS
    approximate_radius: int = DEFAULT_APPROXIMATE_RADIUS
    log_level: str = "INFO"       # any logging level name
    trace_buffer_size: int = 1000  # SearchTracer rolling buffer length
