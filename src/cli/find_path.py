# src/cli/find_path.py
"""
scene-nav-path: run one search against a saved collision dump.

    scene-nav-path --scene dumps/lumbridge.json --start 3222,3218 --target 3235,3225

Prints {"path": [[x, y, plane], ...], "length": n} as JSON on stdout.
Logs go to stderr.
"""

import argparse
import json
import random
from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console

from env import load_pathfinder_settings
from scene_nav.coords import WorldPoint
from scene_nav.dump import SceneDumpError, load_scene
from scene_nav.logging_config import configure_logging
from scene_nav.nav import LocalPathfinder, reduce_path
from scene_nav.render import render_scene
from scene_nav.tracing import SearchTracer


def _parse_xy(value: str) -> Tuple[int, int]:
    parts = value.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {value!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected integer X,Y, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scene-nav-path",
        description="Find a tile path inside a saved scene collision dump.",
    )
    parser.add_argument("--scene", required=True, type=Path, help="Collision dump (JSON)")
    parser.add_argument("--start", required=True, type=_parse_xy, help="Start tile as X,Y")
    parser.add_argument("--target", required=True, type=_parse_xy, help="Target tile as X,Y")
    parser.add_argument(
        "--plane",
        type=int,
        default=None,
        help="Plane of start/target (defaults to the dump's plane)",
    )
    parser.add_argument("--sparse", action="store_true", help="Only print direction changes")
    parser.add_argument(
        "--approximate",
        type=int,
        metavar="RADIUS",
        default=None,
        help="Walk to a random reachable tile within RADIUS of the target",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for --approximate")
    parser.add_argument("--render", action="store_true", help="Also draw the path")
    parser.add_argument("--profile", default=None, help="Profile name (from pathfinder.yaml)")
    parser.add_argument(
        "--config-root",
        type=Path,
        default=None,
        help="Directory holding pathfinder.yaml (defaults to ./config)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_pathfinder_settings(args.profile, config_root=args.config_root)
    except (FileNotFoundError, KeyError, ValueError) as exc:
        parser.error(f"config: {exc}")

    configure_logging(settings.log_level)

    try:
        scene = load_scene(args.scene)
    except (FileNotFoundError, SceneDumpError) as exc:
        parser.error(str(exc))

    plane = scene.plane if args.plane is None else args.plane
    if plane != scene.plane:
        parser.error(f"dump only holds plane {scene.plane}, got --plane {plane}")
    if args.approximate is not None and args.approximate < 0:
        parser.error("--approximate RADIUS must be >= 0")

    start = WorldPoint(args.start[0], args.start[1], plane)
    target = WorldPoint(args.target[0], args.target[1], plane)

    pathfinder = LocalPathfinder.for_scene(
        scene,
        settings=settings,
        tracer=SearchTracer(max_records=settings.trace_buffer_size),
        rng=random.Random(args.seed),
    )

    if args.approximate is not None:
        path = pathfinder.find_approximate_path(start, target, args.approximate)
    else:
        path = pathfinder.find_path(start, target)
    if args.sparse:
        path = reduce_path(path, start)

    print(json.dumps(
        {
            "path": [list(p.as_tuple()) for p in path],
            "length": len(path),
        },
        indent=2,
        sort_keys=True,
    ))

    if args.render:
        Console().print(render_scene(scene, path, start=start))


if __name__ == "__main__":
    main()
