# tests/test_tracing.py
"""
Unit tests for SearchTracer.
"""

from __future__ import annotations

import logging

from scene_nav.coords import WorldPoint
from scene_nav.tracing import SearchTracer


def _record(tracer: SearchTracer, outcome: str = "exact", length: int = 3) -> None:
    tracer.record(
        operation="find_scene_path",
        start=WorldPoint(1, 2, 0),
        target=WorldPoint(4, 2, 0),
        outcome=outcome,
        path_length=length,
        visited=12,
        duration_s=0.001,
    )


def test_tracer_keeps_rolling_buffer() -> None:
    tracer = SearchTracer(max_records=2)
    _record(tracer, length=1)
    _record(tracer, length=2)
    _record(tracer, length=3)

    records = tracer.get_records()
    assert [r.path_length for r in records] == [2, 3]
    assert tracer.last().path_length == 3


def test_tracer_emits_one_info_line_per_search(caplog) -> None:
    tracer = SearchTracer()
    with caplog.at_level(logging.INFO, logger="scene_nav.search"):
        _record(tracer, outcome="approximate")

    messages = [r.getMessage() for r in caplog.records if r.name == "scene_nav.search"]
    assert len(messages) == 1
    assert "outcome=approximate" in messages[0]
    assert "length=3" in messages[0]


def test_tracer_never_raises_on_bad_input() -> None:
    tracer = SearchTracer()
    tracer.record(
        operation="find_scene_path",
        start=None,  # type: ignore[arg-type]
        target=None,
        outcome="exact",
        path_length=0,
        visited=0,
        duration_s=0.0,
    )
    assert tracer.get_records() == []
    assert tracer.last() is None
