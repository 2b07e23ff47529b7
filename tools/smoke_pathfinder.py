#!/usr/bin/env python3
"""
tools/smoke_pathfinder.py

Minimal harness to sanity-check LocalPathfinder wiring.

Default mode:
    - Builds a synthetic FakeScene with an L-shaped wall (no game client)
    - Calls:
        - find_path() (exact)
        - find_path() into the wall (approximate substitute)
        - find_sparse_path()
        - find_approximate_path()
        - find_path_to_area()
    - Prints each result and the trace records

Use --dump PATH to save the synthetic scene as a collision dump that
scene-nav-path can load.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List

# ---------------------------------------------------------------------------
# Ensure src/ is on sys.path when running as a script
# ---------------------------------------------------------------------------

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# ---------------------------------------------------------------------------
# Imports from the project
# ---------------------------------------------------------------------------

from rich.console import Console

from scene_nav.coords import WorldArea, WorldPoint  # type: ignore[import]
from scene_nav.dump import save_scene  # type: ignore[import]
from scene_nav.logging_config import configure_logging  # type: ignore[import]
from scene_nav.nav import LocalPathfinder  # type: ignore[import]
from scene_nav.render import render_scene  # type: ignore[import]
from scene_nav.scene import LoadedScene  # type: ignore[import]
from scene_nav.testing import FakeScene  # type: ignore[import]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build_scene() -> FakeScene:
    scene = FakeScene()
    scene.wall_column(20, 5, 30)
    for x in range(10, 21):
        scene.block(x, 30)
    return scene


def _fmt(path: List[WorldPoint]) -> str:
    if not path:
        return "<empty>"
    return f"{len(path)} steps, ends at {path[-1].as_tuple()}"


def _as_loaded_scene(scene: FakeScene) -> LoadedScene:
    return LoadedScene(region=scene.region, collision_maps=dict(scene.grids))


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    parser = argparse.ArgumentParser(description="LocalPathfinder smoke test.")
    parser.add_argument("--seed", type=int, default=0, help="RNG seed for approximate searches")
    parser.add_argument("--dump", type=Path, default=None, help="Save the synthetic scene here")
    parser.add_argument("--no-render", action="store_true", help="Skip the rich map")
    args = parser.parse_args()

    configure_logging(logging.INFO)
    console = Console()

    scene = _build_scene()
    pf = LocalPathfinder(scene, scene, rng=random.Random(args.seed))
    start = scene.world(5, 10)

    console.rule("exact")
    exact = pf.find_path(start, scene.world(40, 10))
    console.print(_fmt(exact))

    console.rule("approximate (target inside wall)")
    approx = pf.find_path(start, scene.world(20, 12))
    console.print(_fmt(approx))

    console.rule("sparse")
    sparse = pf.find_sparse_path(start, scene.world(40, 10))
    console.print([p.as_tuple() for p in sparse])

    console.rule("random tile near target")
    near = pf.find_approximate_path(start, scene.world(40, 10), radius=3)
    console.print(_fmt(near))

    console.rule("area")
    area = pf.find_path_to_area(start, WorldArea(3230, 3240, width=4, height=4))
    console.print(_fmt(area))

    console.rule("trace")
    for record in pf.tracer.get_records():
        console.print(record)

    loaded = _as_loaded_scene(scene)
    if not args.no_render:
        console.rule("map")
        console.print(render_scene(loaded, exact, start=start))

    if args.dump is not None:
        path = save_scene(loaded, args.dump)
        console.print(f"Saved collision dump to {path}")


if __name__ == "__main__":
    main()
