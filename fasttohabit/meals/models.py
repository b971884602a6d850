# -*- coding: utf-8 -*-
"""Meal planning — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class PlannedMeal(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    meal_type: MealType
    scheduled_time: datetime
    notes: Optional[str] = Field(None, max_length=2000)
    is_completed: bool = False
