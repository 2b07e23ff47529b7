# src/scene_nav/logging_config.py
"""
Central logging configuration for scene_nav entry points.

Call configure_logging() once from a main entrypoint, for example:

    from scene_nav.logging_config import configure_logging
    configure_logging("DEBUG")

Library modules only create loggers; they never attach handlers.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO, Union


def configure_logging(level: Union[int, str] = logging.INFO, stream: TextIO = sys.stderr) -> None:
    """
    Configure root logging if no handlers are attached yet.

    Args:
        level: logging level or level name (e.g. logging.DEBUG, "INFO")
        stream: where log lines go; stderr keeps stdout free for command output
    """
    root = logging.getLogger()

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        return

    handler = logging.StreamHandler(stream=stream)
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
