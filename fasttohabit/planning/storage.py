# -*- coding: utf-8 -*-
"""Planning — read-only day preview over stored water logs and meals."""

from __future__ import annotations

from datetime import date
from typing import Optional

from .models import DaySummary

from ..kv_store import KeyValueStore
from ..meals.storage import meals_for_day
from ..water.storage import logs_for_day


def get_day_summary(kv: KeyValueStore, day: date, today: Optional[date] = None) -> DaySummary:
    """Water and meals recorded for ``day``. Reads storage directly; nothing is written."""
    logs = sorted(logs_for_day(kv, day), key=lambda log: log.timestamp)
    meals = meals_for_day(kv, day)
    return DaySummary(
        date=day.isoformat(),
        water_logs=logs,
        total_water_ml=sum(log.amount_ml for log in logs),
        meals=meals,
        completed_meals=sum(1 for m in meals if m.is_completed),
        is_today=(today or date.today()) == day,
    )
