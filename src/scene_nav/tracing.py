# src/scene_nav/tracing.py
"""
Search tracing for scene_nav.

A thin, structured logging layer around pathfinder searches so callers
(overlays, debugging tools) can see why a search came back empty without
the search itself ever raising.

It does NOT:
- Influence search results
- Cache paths
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from .coords import WorldPoint

# Outcome labels, one per way a search can end.
OUTCOME_SAME_POINT = "same_point"
OUTCOME_START_OUTSIDE_SCENE = "start_outside_scene"
OUTCOME_TARGET_OUTSIDE_SCENE = "target_outside_scene"
OUTCOME_NO_COLLISION_DATA = "no_collision_data"
OUTCOME_EXACT = "exact"
OUTCOME_APPROXIMATE = "approximate"
OUTCOME_NO_CANDIDATE = "no_candidate"


@dataclass
class SearchTraceRecord:
    """Structured record of a single search."""

    timestamp: float           # wall-clock time (time.time())
    duration_s: float

    operation: str             # "find_scene_path", "find_path_to_area", ...
    start: Tuple[int, int, int]
    target: Optional[Tuple[int, int, int]]

    outcome: str
    path_length: int
    visited: int               # cells reached by the BFS, 0 if none ran


class SearchTracer:
    """
    In-memory search tracer with logging.

    - Keeps a rolling buffer of recent SearchTraceRecord entries.
    - Emits one log line per search (info level).
    """

    def __init__(
        self,
        *,
        logger: Optional[logging.Logger] = None,
        max_records: int = 1_000,
    ) -> None:
        self._logger = logger or logging.getLogger("scene_nav.search")
        self._records: Deque[SearchTraceRecord] = deque(maxlen=max_records)

    def record(
        self,
        *,
        operation: str,
        start: WorldPoint,
        target: Optional[WorldPoint],
        outcome: str,
        path_length: int,
        visited: int,
        duration_s: float,
    ) -> None:
        """Record a finished search. Never raises."""
        try:
            record = SearchTraceRecord(
                timestamp=time.time(),
                duration_s=float(duration_s),
                operation=operation,
                start=start.as_tuple(),
                target=target.as_tuple() if target is not None else None,
                outcome=outcome,
                path_length=int(path_length),
                visited=int(visited),
            )
        except Exception:
            self._logger.exception("Failed to build SearchTraceRecord")
            return

        self._records.append(record)

        self._logger.info(
            "search op=%s outcome=%s length=%d visited=%d duration=%.4fs "
            "start=%s target=%s",
            record.operation,
            record.outcome,
            record.path_length,
            record.visited,
            record.duration_s,
            record.start,
            record.target,
        )

    def get_records(self) -> List[SearchTraceRecord]:
        return list(self._records)

    def last(self) -> Optional[SearchTraceRecord]:
        return self._records[-1] if self._records else None


__all__ = [
    "OUTCOME_SAME_POINT",
    "OUTCOME_START_OUTSIDE_SCENE",
    "OUTCOME_TARGET_OUTSIDE_SCENE",
    "OUTCOME_NO_COLLISION_DATA",
    "OUTCOME_EXACT",
    "OUTCOME_APPROXIMATE",
    "OUTCOME_NO_CANDIDATE",
    "SearchTraceRecord",
    "SearchTracer",
]
