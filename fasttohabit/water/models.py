# -*- coding: utf-8 -*-
"""Water intake — Pydantic models."""

from __future__ import annotations

from datetime import datetime, time
from uuid import uuid4

from pydantic import BaseModel, Field


class WaterLog(BaseModel):
    model_config = {"frozen": True}

    id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime
    amount_ml: int = Field(..., ge=0)


class WaterGoal(BaseModel):
    daily_goal_glasses: int = Field(8, ge=0)
    glass_size: int = Field(250, ge=0, description="ml per glass")
    start_time: time = Field(time(7, 0), description="Reminders start")
    end_time: time = Field(time(23, 0), description="Reminders end")
    is_reminder_enabled: bool = True

    @property
    def daily_goal_ml(self) -> int:
        return self.daily_goal_glasses * self.glass_size

    @classmethod
    def default(cls) -> "WaterGoal":
        return cls()
