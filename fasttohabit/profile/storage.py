# -*- coding: utf-8 -*-
"""Profile — scalar settings slots."""

from __future__ import annotations

import logging
import math
from typing import Optional

from pydantic import TypeAdapter

from ..kv_store import KeyValueStore
from ..observable import Observable
from ..persistence import ignore_failure, load_value, remove_value, save_value

logger = logging.getLogger(__name__)

USER_WEIGHT_KEY = "userWeight"
USER_GOAL_WEIGHT_KEY = "userGoalWeight"
ONBOARDING_KEY = "hasCompletedOnboarding"

_str_adapter = TypeAdapter(str)
_bool_adapter = TypeAdapter(bool)


def parse_weight(text: Optional[str]) -> Optional[float]:
    """Parse user-entered weight. Returns None for blank, non-numeric or non-positive input."""
    if text is None:
        return None
    value = text.strip().replace(",", ".")
    if not value:
        return None
    try:
        weight = float(value)
    except ValueError:
        return None
    if not math.isfinite(weight) or weight <= 0:
        return None
    return weight


class ProfileStore(Observable):
    def __init__(self, kv: KeyValueStore) -> None:
        super().__init__()
        self._kv = kv

    @property
    def current_weight(self) -> Optional[str]:
        return self._read_str(USER_WEIGHT_KEY)

    def set_current_weight(self, weight: Optional[str]) -> None:
        self._write_str(USER_WEIGHT_KEY, weight)

    @property
    def goal_weight(self) -> Optional[str]:
        return self._read_str(USER_GOAL_WEIGHT_KEY)

    def set_goal_weight(self, weight: Optional[str]) -> None:
        self._write_str(USER_GOAL_WEIGHT_KEY, weight)

    @property
    def has_completed_onboarding(self) -> bool:
        result = load_value(self._kv, ONBOARDING_KEY, _bool_adapter)
        ignore_failure(result, logger)
        return result.value_or(False)

    def complete_onboarding(self, completed: bool = True) -> None:
        ignore_failure(save_value(self._kv, ONBOARDING_KEY, _bool_adapter, completed), logger)
        self._notify()

    def remaining_to_goal(self) -> Optional[float]:
        """Current minus goal weight, when both slots parse."""
        current = parse_weight(self.current_weight)
        goal = parse_weight(self.goal_weight)
        if current is None or goal is None:
            return None
        return round(current - goal, 2)

    def _read_str(self, key: str) -> Optional[str]:
        result = load_value(self._kv, key, _str_adapter)
        ignore_failure(result, logger)
        return result.value if result.ok else None

    def _write_str(self, key: str, value: Optional[str]) -> None:
        if value is None:
            ignore_failure(remove_value(self._kv, key), logger)
        else:
            ignore_failure(save_value(self._kv, key, _str_adapter, value), logger)
        self._notify()
