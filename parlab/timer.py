"""Wall-clock timing helpers used by the benchmark drivers."""

from __future__ import annotations

import time
from typing import Any, Callable


def current_seconds() -> float:
    """Return the current time in seconds from an arbitrary fixed point."""
    return time.perf_counter()


def best_time(func: Callable[[], Any], repeats: int = 3) -> float:
    """Run ``func`` ``repeats`` times and return the shortest run in seconds."""
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")
    best = float("inf")
    for _ in range(repeats):
        start = current_seconds()
        func()
        best = min(best, current_seconds() - start)
    return best