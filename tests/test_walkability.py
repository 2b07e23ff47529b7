# tests/test_walkability.py
"""
Unit tests for the single-step walkability rule.

Grids are tiny synthetic flag matrices indexed [x][y], north is +y.
"""

from __future__ import annotations

from scene_nav.collision import MovementFlag
from scene_nav.nav import is_walkable
from scene_nav.scene import open_grid

FULL = int(MovementFlag.BLOCK_MOVEMENT_FULL)


def test_open_grid_allows_every_neighbour() -> None:
    flags = open_grid(3)
    for x in range(3):
        for y in range(3):
            assert is_walkable(flags, (1, 1), (x, y))


def test_same_cell_is_walkable() -> None:
    flags = open_grid(3)
    assert is_walkable(flags, (1, 1), (1, 1))


def test_fully_blocked_target_is_never_walkable() -> None:
    flags = open_grid(3)
    flags[2][1] = FULL
    assert not is_walkable(flags, (1, 1), (2, 1))


def test_any_full_component_bit_blocks_target() -> None:
    flags = open_grid(3)
    flags[2][1] = int(MovementFlag.BLOCK_MOVEMENT_OBJECT)
    assert not is_walkable(flags, (1, 1), (2, 1))


def test_steps_longer_than_one_tile_are_rejected() -> None:
    flags = open_grid(5)
    assert not is_walkable(flags, (0, 0), (2, 0))
    assert not is_walkable(flags, (0, 0), (2, 2))


def test_cardinal_east_blocked_by_source_east_wall() -> None:
    flags = open_grid(3)
    flags[1][1] = int(MovementFlag.BLOCK_MOVEMENT_EAST)
    assert not is_walkable(flags, (1, 1), (2, 1))
    # wall only applies to the east side
    assert is_walkable(flags, (1, 1), (0, 1))


def test_cardinal_east_blocked_by_target_west_wall() -> None:
    flags = open_grid(3)
    flags[2][1] = int(MovementFlag.BLOCK_MOVEMENT_WEST)
    assert not is_walkable(flags, (1, 1), (2, 1))


def test_cardinal_north_and_south() -> None:
    flags = open_grid(3)
    flags[1][1] = int(MovementFlag.BLOCK_MOVEMENT_NORTH)
    assert not is_walkable(flags, (1, 1), (1, 2))
    assert is_walkable(flags, (1, 1), (1, 0))

    flags = open_grid(3)
    flags[1][0] = int(MovementFlag.BLOCK_MOVEMENT_NORTH)
    # moving south into a tile that blocks entry from the north
    assert not is_walkable(flags, (1, 1), (1, 0))


def test_diagonal_blocked_by_source_component_wall() -> None:
    flags = open_grid(3)
    flags[1][1] = int(MovementFlag.BLOCK_MOVEMENT_NORTH)
    assert not is_walkable(flags, (1, 1), (2, 2))

    flags = open_grid(3)
    flags[1][1] = int(MovementFlag.BLOCK_MOVEMENT_EAST)
    assert not is_walkable(flags, (1, 1), (2, 2))


def test_diagonal_blocked_by_target_opposite_wall() -> None:
    flags = open_grid(3)
    flags[2][2] = int(MovementFlag.BLOCK_MOVEMENT_SOUTH)
    assert not is_walkable(flags, (1, 1), (2, 2))

    flags = open_grid(3)
    flags[2][2] = int(MovementFlag.BLOCK_MOVEMENT_WEST)
    assert not is_walkable(flags, (1, 1), (2, 2))


def test_diagonal_cannot_cut_x_corner() -> None:
    flags = open_grid(3)
    flags[2][1] = FULL
    assert not is_walkable(flags, (1, 1), (2, 2))


def test_diagonal_cannot_cut_y_corner() -> None:
    flags = open_grid(3)
    flags[1][2] = FULL
    assert not is_walkable(flags, (1, 1), (2, 2))


def test_diagonal_ignores_directional_walls_on_corner_cells() -> None:
    flags = open_grid(3)
    flags[2][1] = int(MovementFlag.BLOCK_MOVEMENT_NORTH | MovementFlag.BLOCK_MOVEMENT_WEST)
    assert is_walkable(flags, (1, 1), (2, 2))


def test_diagonal_south_west_corner_cells() -> None:
    flags = open_grid(3)
    flags[0][1] = FULL
    assert not is_walkable(flags, (1, 1), (0, 0))
    # other diagonals out of (1, 1) do not touch (0, 1) as a corner
    assert is_walkable(flags, (1, 1), (2, 0))
