# -*- coding: utf-8 -*-
"""Water intake — day-partitioned log store and goal."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, List, Optional

from pydantic import TypeAdapter

from .models import WaterGoal, WaterLog

from .. import stats
from ..kv_store import KeyValueStore
from ..observable import Observable
from ..persistence import ignore_failure, load_value, replace_today, save_value

logger = logging.getLogger(__name__)

LOGS_KEY = "waterLogs"
GOAL_KEY = "waterGoal"

_logs_adapter = TypeAdapter(List[WaterLog])
_goal_adapter = TypeAdapter(WaterGoal)


def load_all_logs(kv: KeyValueStore) -> List[WaterLog]:
    """Every stored log across all days; empty when the key is missing or unreadable."""
    result = load_value(kv, LOGS_KEY, _logs_adapter)
    ignore_failure(result, logger)
    return result.value_or([])


def logs_for_day(kv: KeyValueStore, day: date) -> List[WaterLog]:
    return [log for log in load_all_logs(kv) if log.timestamp.date() == day]


class WaterIntakeStore(Observable):
    def __init__(self, kv: KeyValueStore, *, clock: Callable[[], datetime] = datetime.now) -> None:
        super().__init__()
        self._kv = kv
        self._clock = clock
        self._goal: WaterGoal = self._load_goal()
        self._load_day(clock().date())

    @property
    def day(self) -> date:
        """Calendar day the in-memory log belongs to."""
        self._roll_over()
        return self._day

    @property
    def today_logs(self) -> List[WaterLog]:
        self._roll_over()
        return list(self._today_logs)

    @property
    def goal(self) -> WaterGoal:
        return self._goal

    # ---- derived ----

    @property
    def today_total_ml(self) -> int:
        return sum(log.amount_ml for log in self.today_logs)

    @property
    def today_glasses_count(self) -> int:
        return len(self.today_logs)

    @property
    def progress(self) -> float:
        return stats.clamped_ratio(self.today_total_ml, self._goal.daily_goal_ml)

    @property
    def is_goal_reached(self) -> bool:
        return self.today_total_ml >= self._goal.daily_goal_ml

    @property
    def remaining_glasses(self) -> int:
        return max(self._goal.daily_goal_glasses - self.today_glasses_count, 0)

    # ---- mutations ----

    def log_water(self, amount_ml: Optional[int] = None) -> WaterLog:
        self._roll_over()
        amount = self._goal.glass_size if amount_ml is None else amount_ml
        log = WaterLog(timestamp=self._clock(), amount_ml=amount)
        self._today_logs.append(log)
        self._save_logs()
        self._notify()
        return log

    def undo_last_log(self) -> Optional[WaterLog]:
        self._roll_over()
        if not self._today_logs:
            return None
        removed = self._today_logs.pop()
        self._save_logs()
        self._notify()
        return removed

    def clear_today_logs(self) -> None:
        self._roll_over()
        self._today_logs = []
        self._save_logs()
        self._notify()

    def update_goal(self, goal: WaterGoal) -> None:
        self._goal = goal
        ignore_failure(save_value(self._kv, GOAL_KEY, _goal_adapter, goal), logger)
        self._notify()

    # ---- persistence ----

    def _load_day(self, day: date) -> None:
        self._day = day
        self._today_logs: List[WaterLog] = logs_for_day(self._kv, day)

    def _roll_over(self) -> None:
        today = self._clock().date()
        if today != self._day:
            logger.info("Water log day changed from %s to %s; reloading", self._day, today)
            self._load_day(today)

    def _save_logs(self) -> None:
        day = self._day
        combined = replace_today(
            load_all_logs(self._kv),
            self._today_logs,
            lambda log: log.timestamp.date() == day,
        )
        ignore_failure(save_value(self._kv, LOGS_KEY, _logs_adapter, combined), logger)

    def _load_goal(self) -> WaterGoal:
        result = load_value(self._kv, GOAL_KEY, _goal_adapter)
        ignore_failure(result, logger)
        return result.value_or(WaterGoal.default())
