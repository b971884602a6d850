# -*- coding: utf-8 -*-
"""Fasting — Pydantic models."""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field

MIN_GOAL_HOURS = 1.0
MAX_GOAL_HOURS = 48.0
DEFAULT_EXTENDED_RATIO = 1.1


class FastPreset(str, Enum):
    twelve_twelve = "12:12"
    fourteen_ten = "14:10"
    sixteen_eight = "16:8"
    eighteen_six = "18:6"
    twenty_four = "20:4"
    omad = "OMAD"
    custom = "Custom"

    @property
    def default_duration_hours(self) -> float:
        return _PRESET_HOURS[self]

    @property
    def tagline(self) -> str:
        return _PRESET_TAGLINES[self]


_PRESET_HOURS = {
    FastPreset.twelve_twelve: 12.0,
    FastPreset.fourteen_ten: 14.0,
    FastPreset.sixteen_eight: 16.0,
    FastPreset.eighteen_six: 18.0,
    FastPreset.twenty_four: 20.0,
    FastPreset.omad: 24.0,
    FastPreset.custom: 0.0,
}

_PRESET_TAGLINES = {
    FastPreset.twelve_twelve: "Beginner",
    FastPreset.fourteen_ten: "Balanced",
    FastPreset.sixteen_eight: "Intermediate",
    FastPreset.eighteen_six: "Advanced",
    FastPreset.twenty_four: "Warrior",
    FastPreset.omad: "Expert",
    FastPreset.custom: "Custom",
}


class FastStatus(str, Enum):
    active = "active"
    completed = "completed"
    cancelled = "cancelled"


class FastOutcome(str, Enum):
    early = "early"
    on_time = "on_time"
    extended = "extended"


def clamp_goal_hours(hours: float) -> float:
    """Input-boundary clamp for custom fast durations."""
    return float(min(max(hours, MIN_GOAL_HOURS), MAX_GOAL_HOURS))


def classify_outcome(
    elapsed_seconds: float,
    goal_hours: float,
    extended_ratio: float = DEFAULT_EXTENDED_RATIO,
) -> FastOutcome:
    goal_seconds = goal_hours * 3600
    if elapsed_seconds < goal_seconds:
        return FastOutcome.early
    # Rounded so 16h x 1.1 is exactly 17h36m rather than a hair above it.
    if elapsed_seconds >= round(goal_seconds * extended_ratio, 6):
        return FastOutcome.extended
    return FastOutcome.on_time


class FastingSession(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    preset: FastPreset
    start_date: datetime
    goal_duration_hours: float = Field(..., ge=0)
    end_date: Optional[datetime] = None
    status: FastStatus = FastStatus.active
    note: Optional[str] = None
    completion_date: Optional[datetime] = None
    outcome: Optional[FastOutcome] = None

    @property
    def goal_seconds(self) -> float:
        return self.goal_duration_hours * 3600

    @property
    def expected_end_date(self) -> datetime:
        if self.end_date is not None:
            return self.end_date
        return self.start_date + timedelta(hours=self.goal_duration_hours)

    def elapsed_seconds(self, now: Optional[datetime] = None) -> float:
        reference = self.completion_date or now or datetime.now()
        return (reference - self.start_date).total_seconds()

    def elapsed_hours(self, now: Optional[datetime] = None) -> float:
        return self.elapsed_seconds(now) / 3600

    def progress(self, now: Optional[datetime] = None) -> float:
        if self.goal_duration_hours <= 0:
            return 0.0
        return min(self.elapsed_seconds(now) / self.goal_seconds, 1.0)

    def remaining_seconds(self, now: Optional[datetime] = None) -> float:
        return max(self.goal_seconds - self.elapsed_seconds(now), 0.0)

    def classify(self, end: datetime, extended_ratio: float = DEFAULT_EXTENDED_RATIO) -> FastOutcome:
        actual = (end - self.start_date).total_seconds()
        return classify_outcome(actual, self.goal_duration_hours, extended_ratio)


def new_session(
    preset: FastPreset,
    *,
    goal_hours: Optional[float] = None,
    start_date: Optional[datetime] = None,
) -> FastingSession:
    """Build an active session from a preset; custom hours are clamped to the allowed range."""
    if goal_hours is None:
        goal_hours = preset.default_duration_hours
    return FastingSession(
        preset=preset,
        start_date=start_date or datetime.now(),
        goal_duration_hours=clamp_goal_hours(goal_hours),
    )
