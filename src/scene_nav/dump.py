# src/scene_nav/dump.py
"""
Collision snapshot persistence.

A dump captures the active plane of a LoadedScene as JSON so searches can be
replayed offline (CLI, tests, bug reports):

    {
      "version": 1,
      "region": {"base_x": 3200, "base_y": 3200, "plane": 0, "size": 104},
      "collision": {"<pack(world point)>": flags, ...}
    }

Only non-zero cells are written; every absent cell loads as open (0).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from .coords import PACK_MAX_PLANE, PACK_MAX_X, PACK_MAX_Y, SceneRegion, pack_xyz, unpack
from .scene import LoadedScene, open_grid

log = logging.getLogger(__name__)

DUMP_VERSION = 1

_REGION_KEYS = ("base_x", "base_y", "plane", "size")


class SceneDumpError(ValueError):
    """Raised when a collision dump is malformed."""


# ---------------------------------------------------------------------------
# dict <-> scene
# ---------------------------------------------------------------------------


def scene_to_dict(scene: LoadedScene) -> Dict[str, Any]:
    """Serialize the active plane of `scene` into a JSON-ready dict."""
    region = scene.region
    _check_packable(region)
    grid = scene.flags_for(region.plane)

    collision: Dict[str, int] = {}
    if grid is not None:
        for x in range(region.size):
            for y in range(region.size):
                value = grid[x][y]
                if value:
                    key = pack_xyz(region.base_x + x, region.base_y + y, region.plane)
                    collision[str(key)] = int(value)

    return {
        "version": DUMP_VERSION,
        "region": {
            "base_x": region.base_x,
            "base_y": region.base_y,
            "plane": region.plane,
            "size": region.size,
        },
        "collision": collision,
    }


def scene_from_dict(data: Any) -> LoadedScene:
    """Rebuild a LoadedScene from a dict produced by scene_to_dict()."""
    if not isinstance(data, dict):
        raise SceneDumpError(f"Expected mapping at top of dump, got {type(data)}")

    version = data.get("version")
    if version != DUMP_VERSION:
        raise SceneDumpError(f"Unsupported dump version: {version!r}")

    region = _parse_region(data.get("region"))

    raw_collision = data.get("collision", {})
    if not isinstance(raw_collision, dict):
        raise SceneDumpError("'collision' must be a mapping of packed point -> flags")

    grid = open_grid(region.size)
    for key, value in raw_collision.items():
        try:
            point = unpack(int(key))
        except (TypeError, ValueError) as exc:
            raise SceneDumpError(f"Invalid packed point key: {key!r}") from exc

        if isinstance(value, bool) or not isinstance(value, int):
            raise SceneDumpError(f"Flags for {key} must be an integer, got {value!r}")

        if point.plane != region.plane:
            raise SceneDumpError(f"{point} is not on dump plane {region.plane}")
        local = region.to_grid(point)
        if local is None:
            raise SceneDumpError(f"{point} lies outside the dumped region")

        x, y = local
        grid[x][y] = value

    return LoadedScene(region=region, collision_maps={region.plane: grid})


def _parse_region(raw: Any) -> SceneRegion:
    if not isinstance(raw, dict):
        raise SceneDumpError("'region' must be a mapping")

    values: Dict[str, int] = {}
    for key in _REGION_KEYS:
        value = raw.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise SceneDumpError(f"region.{key} must be an integer, got {value!r}")
        values[key] = value

    if values["size"] <= 0:
        raise SceneDumpError(f"region.size must be > 0, got {values['size']}")
    if values["base_x"] < 0 or values["base_y"] < 0:
        raise SceneDumpError("region base coordinates must be non-negative")
    if not 0 <= values["plane"] <= 3:
        raise SceneDumpError(f"region.plane must be in 0..3, got {values['plane']}")

    region = SceneRegion(**values)
    _check_packable(region)
    return region


def _check_packable(region: SceneRegion) -> None:
    """Every cell of the region must fit the packed point key layout."""
    max_x = region.base_x + region.size - 1
    max_y = region.base_y + region.size - 1
    if region.base_x < 0 or region.base_y < 0 or max_x > PACK_MAX_X or max_y > PACK_MAX_Y:
        raise SceneDumpError(
            f"Region {region} lies outside the packable range (0..{PACK_MAX_X}, 0..{PACK_MAX_Y})"
        )
    if not 0 <= region.plane <= PACK_MAX_PLANE:
        raise SceneDumpError(f"Region plane {region.plane} cannot be packed")


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


def save_scene(scene: LoadedScene, path: Union[str, Path]) -> Path:
    """Write `scene` to `path` as JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = scene_to_dict(scene)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True)
    log.info("saved scene dump %s (%d non-empty cells)", path, len(data["collision"]))
    return path


def load_scene(path: Union[str, Path]) -> LoadedScene:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing scene dump: {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise SceneDumpError(f"{path} is not valid JSON: {exc}") from exc
    scene = scene_from_dict(data)
    log.debug("loaded scene dump %s region=%s", path, scene.region)
    return scene


__all__ = [
    "DUMP_VERSION",
    "SceneDumpError",
    "scene_to_dict",
    "scene_from_dict",
    "save_scene",
    "load_scene",
]
