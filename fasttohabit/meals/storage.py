# -*- coding: utf-8 -*-
"""Meal planning — day-partitioned store of today's planned meals."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Iterable, List, Optional, Set

from pydantic import TypeAdapter

from .models import MealType, PlannedMeal

from ..kv_store import KeyValueStore
from ..observable import Observable
from ..persistence import ignore_failure, load_value, replace_today, save_value

logger = logging.getLogger(__name__)

MEALS_KEY = "plannedMeals"

_meals_adapter = TypeAdapter(List[PlannedMeal])


def load_all_meals(kv: KeyValueStore) -> List[PlannedMeal]:
    result = load_value(kv, MEALS_KEY, _meals_adapter)
    ignore_failure(result, logger)
    return result.value_or([])


def meals_for_day(kv: KeyValueStore, day: date) -> List[PlannedMeal]:
    meals = [m for m in load_all_meals(kv) if m.scheduled_time.date() == day]
    return sorted(meals, key=lambda m: m.scheduled_time)


class MealPlanStore(Observable):
    def __init__(self, kv: KeyValueStore, *, clock: Callable[[], datetime] = datetime.now) -> None:
        super().__init__()
        self._kv = kv
        self._clock = clock
        self._load_day(clock().date())

    @property
    def day(self) -> date:
        """Calendar day the in-memory list belongs to."""
        self._roll_over()
        return self._day

    @property
    def today_meals(self) -> List[PlannedMeal]:
        self._roll_over()
        return list(self._today_meals)

    @property
    def sorted_meals(self) -> List[PlannedMeal]:
        # sorted() is stable, so meals at the same time keep insertion order.
        return sorted(self.today_meals, key=lambda m: m.scheduled_time)

    @property
    def completed_count(self) -> int:
        return sum(1 for m in self.today_meals if m.is_completed)

    @property
    def total_count(self) -> int:
        return len(self.today_meals)

    def add_meal(
        self,
        meal_type: MealType,
        scheduled_time: datetime,
        notes: Optional[str] = None,
    ) -> PlannedMeal:
        self._roll_over()
        meal = PlannedMeal(meal_type=meal_type, scheduled_time=scheduled_time, notes=notes)
        self._today_meals.append(meal)
        self._held_ids.add(meal.id)
        self._save_meals()
        self._notify()
        return meal

    def update_meal(self, meal: PlannedMeal) -> None:
        self._roll_over()
        index = self._index_of(meal.id)
        if index is None:
            return
        self._today_meals[index] = meal
        self._save_meals()
        self._notify()

    def toggle_completion(self, meal_id: str) -> None:
        self._roll_over()
        index = self._index_of(meal_id)
        if index is None:
            return
        current = self._today_meals[index]
        self._today_meals[index] = current.model_copy(update={"is_completed": not current.is_completed})
        self._save_meals()
        self._notify()

    def delete_meal(self, offsets: Iterable[int]) -> None:
        """Delete by positions in ``sorted_meals``; out-of-range offsets are skipped."""
        ordered = self.sorted_meals
        doomed = {ordered[i].id for i in offsets if 0 <= i < len(ordered)}
        self._today_meals = [m for m in self._today_meals if m.id not in doomed]
        self._save_meals()
        self._notify()

    def clear_all_meals(self) -> None:
        self._roll_over()
        self._today_meals = []
        self._save_meals()
        self._notify()

    def _index_of(self, meal_id: str) -> Optional[int]:
        for index, meal in enumerate(self._today_meals):
            if meal.id == meal_id:
                return index
        return None

    def _load_day(self, day: date) -> None:
        self._day = day
        self._today_meals: List[PlannedMeal] = [
            m for m in load_all_meals(self._kv) if m.scheduled_time.date() == day
        ]
        # Every id this list has held; their stored copies are replaced on save
        # even when the meal is scheduled on another day.
        self._held_ids: Set[str] = {m.id for m in self._today_meals}

    def _roll_over(self) -> None:
        today = self._clock().date()
        if today != self._day:
            logger.info("Meal plan day changed from %s to %s; reloading", self._day, today)
            self._load_day(today)

    def _save_meals(self) -> None:
        day = self._day
        held = self._held_ids
        combined = replace_today(
            load_all_meals(self._kv),
            self._today_meals,
            lambda m: m.id in held or m.scheduled_time.date() == day,
        )
        ignore_failure(save_value(self._kv, MEALS_KEY, _meals_adapter, combined), logger)
