# -*- coding: utf-8 -*-
"""Planning — Pydantic models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from ..meals.models import PlannedMeal
from ..water.models import WaterLog


class DaySummary(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    water_logs: List[WaterLog] = Field(default_factory=list)
    total_water_ml: int = Field(0, ge=0)
    meals: List[PlannedMeal] = Field(default_factory=list)
    completed_meals: int = Field(0, ge=0)
    is_today: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.water_logs and not self.meals
