# -*- coding: utf-8 -*-
"""Fasting domain (active session, history, outcomes)."""

from .models import FastingSession, FastOutcome, FastPreset, FastStatus
from .storage import FastSessionStore

__all__ = [
    "FastingSession",
    "FastOutcome",
    "FastPreset",
    "FastStatus",
    "FastSessionStore",
]
