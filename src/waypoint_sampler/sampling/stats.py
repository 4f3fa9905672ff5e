"""Diagnostic reporting for waypoint sampling runs."""

from __future__ import annotations

import logging
from collections.abc import Callable

_logger = logging.getLogger(__name__)

StatsReporter = Callable[[int, int, int], None]
"""``(original_count, sampled_count, turn_count) -> None``."""


def log_waypoint_stats(original_count: int, sampled_count: int, turn_count: int) -> None:
    """Log sampling figures and the compression ratio at ``INFO`` level."""
    ratio = f"{original_count / sampled_count:.1f}:1" if sampled_count else "n/a"
    _logger.info(
        "Waypoint sampling: original %d, sampled %d, turns %d, compression %s",
        original_count,
        sampled_count,
        turn_count,
        ratio,
    )
