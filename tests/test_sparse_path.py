# tests/test_sparse_path.py
"""
Unit tests for dense -> sparse path reduction.
"""

from __future__ import annotations

from scene_nav.coords import WorldPoint
from scene_nav.nav import reduce_path


def _points(*xy: tuple) -> list:
    return [WorldPoint(x, y, 0) for x, y in xy]


def test_empty_dense_path_reduces_to_empty() -> None:
    assert reduce_path([], WorldPoint(0, 0, 0)) == []


def test_straight_line_keeps_only_endpoint() -> None:
    dense = _points((1, 0), (2, 0), (3, 0), (4, 0))
    assert reduce_path(dense, WorldPoint(0, 0, 0)) == _points((4, 0))


def test_single_step_keeps_that_step() -> None:
    dense = _points((1, 1))
    assert reduce_path(dense, WorldPoint(0, 0, 0)) == _points((1, 1))


def test_direction_changes_are_kept() -> None:
    # east, east, north-east, north, north
    dense = _points((1, 0), (2, 0), (3, 1), (3, 2), (3, 3))
    sparse = reduce_path(dense, WorldPoint(0, 0, 0))
    assert sparse == _points((2, 0), (3, 1), (3, 3))


def test_turn_on_first_step_uses_start_as_reference() -> None:
    # start -> (1, 1) is diagonal, then east
    dense = _points((1, 1), (2, 1), (3, 1))
    sparse = reduce_path(dense, WorldPoint(0, 0, 0))
    assert sparse == _points((1, 1), (3, 1))


def test_sparse_is_ordered_subsequence_of_dense() -> None:
    dense = _points((0, 1), (1, 2), (2, 2), (2, 1), (3, 0), (4, 0))
    sparse = reduce_path(dense, WorldPoint(0, 0, 0))

    it = iter(dense)
    assert all(p in it for p in sparse)
    assert sparse[-1] == dense[-1]
