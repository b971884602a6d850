# -*- coding: utf-8 -*-
"""Weight — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field


class WeightEntry(BaseModel):
    model_config = {"frozen": True}

    id: str = Field(default_factory=lambda: str(uuid4()))
    weight: float = Field(..., gt=0, description="kg")
    date: datetime
    note: Optional[str] = None
