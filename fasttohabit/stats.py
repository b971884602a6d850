# -*- coding: utf-8 -*-
"""Derived statistics shared by the stores.

Nothing here is cached: callers recompute on every read.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Sequence

import numpy as np


def clamped_ratio(value: float, goal: float) -> float:
    """value / goal capped at 1.0; 0 when the goal is not positive."""
    if goal <= 0:
        return 0.0
    return float(min(value / goal, 1.0))


def longest(values: Iterable[float]) -> float:
    arr = np.asarray(list(values), dtype=float)
    if arr.size == 0:
        return 0.0
    return float(np.max(arr))


def average(values: Iterable[float]) -> float:
    arr = np.asarray(list(values), dtype=float)
    if arr.size == 0:
        return 0.0
    return float(np.mean(arr))


def consecutive_streak(timestamps: Sequence[Optional[datetime]], window_hours: float) -> int:
    """Count leading timestamps (newest first) each within ``window_hours`` of the previous one.

    Stops at the first gap wider than the window or the first missing timestamp.
    """
    if not timestamps or timestamps[0] is None:
        return 0
    window_seconds = window_hours * 3600
    streak = 0
    previous = timestamps[0]
    for ts in timestamps:
        if ts is None:
            break
        if (previous - ts).total_seconds() > window_seconds:
            break
        streak += 1
        previous = ts
    return streak


def change(newest_first: Sequence[float]) -> Optional[float]:
    """Newest minus oldest, or None with fewer than two values."""
    if len(newest_first) < 2:
        return None
    return round(float(newest_first[0]) - float(newest_first[-1]), 2)
