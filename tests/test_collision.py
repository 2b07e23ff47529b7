# tests/test_collision.py
"""
Unit tests for collision flag decoding.
"""

from __future__ import annotations

from scene_nav.collision import BLOCK_FULL, MovementFlag, is_fully_blocked, set_flags


def test_full_is_union_of_object_floor_and_decoration() -> None:
    assert BLOCK_FULL == 0x240100
    assert MovementFlag.BLOCK_MOVEMENT_FULL == (
        MovementFlag.BLOCK_MOVEMENT_OBJECT
        | MovementFlag.BLOCK_MOVEMENT_FLOOR_DECORATION
        | MovementFlag.BLOCK_MOVEMENT_FLOOR
    )


def test_set_flags_decodes_directional_bits() -> None:
    flags = set_flags(0x2 | 0x80)
    assert flags == {
        MovementFlag.BLOCK_MOVEMENT_NORTH,
        MovementFlag.BLOCK_MOVEMENT_WEST,
    }


def test_set_flags_reports_full_for_any_component_bit() -> None:
    for bit in (0x100, 0x40000, 0x200000):
        decoded = set_flags(bit)
        assert MovementFlag.BLOCK_MOVEMENT_FULL in decoded
        assert MovementFlag(bit) in decoded
    assert MovementFlag.BLOCK_MOVEMENT_FULL in set_flags(0x240100)
    assert MovementFlag.BLOCK_MOVEMENT_FULL not in set_flags(0x2 | 0x80)
    assert set_flags(0) == set()


def test_is_fully_blocked() -> None:
    assert is_fully_blocked(0x100)
    assert is_fully_blocked(0x200000)
    assert not is_fully_blocked(0x2 | 0x8)
    assert not is_fully_blocked(0)
