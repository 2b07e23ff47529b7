# src/scene_nav/render.py
"""
Terminal debug view of a scene and a path, rendered with `rich`.

One character per tile, north at the top:

    #  fully blocked tile
    .  open tile (directional walls are not drawn)
    S  start
    o  path step
    X  path endpoint

The map is cropped to the bounding box of start + path plus a margin, and
clipped to the scene. With nothing to frame, the whole scene is drawn.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from rich.text import Text

from .collision import is_fully_blocked
from .coords import GridCoordinate, WorldPoint
from .scene import LoadedScene

BLOCKED = "#"
OPEN = "."
START = "S"
STEP = "o"
END = "X"

_STYLES = {
    BLOCKED: "grey50",
    OPEN: "dim",
    START: "bold green",
    STEP: "yellow",
    END: "bold red",
}


def render_scene(
    scene: LoadedScene,
    path: Sequence[WorldPoint],
    start: Optional[WorldPoint] = None,
    margin: int = 3,
) -> Text:
    region = scene.region
    grid = scene.flags_for(region.plane)

    marks: Dict[GridCoordinate, str] = {}
    for i, point in enumerate(path):
        cell = region.to_grid(point)
        if cell is not None:
            marks[cell] = END if i == len(path) - 1 else STEP
    if start is not None:
        cell = region.to_grid(start)
        if cell is not None:
            marks[cell] = START

    if marks:
        xs = [x for x, _ in marks]
        ys = [y for _, y in marks]
        min_x = max(0, min(xs) - margin)
        max_x = min(region.size - 1, max(xs) + margin)
        min_y = max(0, min(ys) - margin)
        max_y = min(region.size - 1, max(ys) + margin)
    else:
        min_x, max_x, min_y, max_y = 0, region.size - 1, 0, region.size - 1

    text = Text()
    # north (+y) at the top
    for y in range(max_y, min_y - 1, -1):
        for x in range(min_x, max_x + 1):
            symbol = marks.get((x, y))
            if symbol is None:
                blocked = grid is not None and is_fully_blocked(grid[x][y])
                symbol = BLOCKED if blocked else OPEN
            text.append(symbol, style=_STYLES[symbol])
        text.append("\n")
    return text


__all__ = ["render_scene", "BLOCKED", "OPEN", "START", "STEP", "END"]
