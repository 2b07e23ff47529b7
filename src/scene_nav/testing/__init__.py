# src/scene_nav/testing/__init__.py
"""Test helpers for scene_nav."""

from __future__ import annotations

from .fakes import FakeScene

__all__ = ["FakeScene"]
