# -*- coding: utf-8 -*-
"""Fasting — active session and history store.

Persisted under two keys: the optional active session and the ordered
history of completed fasts (newest first). Both are loaded once at
construction; afterwards the in-memory copy is authoritative.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from pydantic import TypeAdapter

from .models import FastingSession, FastOutcome, FastPreset, FastStatus, new_session

from .. import stats
from ..config import settings
from ..kv_store import KeyValueStore
from ..observable import Observable
from ..persistence import ignore_failure, load_value, remove_value, save_value

logger = logging.getLogger(__name__)

ACTIVE_SESSION_KEY = "fastSession.active"
HISTORY_KEY = "fastSession.history"

_session_adapter = TypeAdapter(FastingSession)
_history_adapter = TypeAdapter(List[FastingSession])


def _sort_key(session: FastingSession) -> datetime:
    return session.completion_date or session.start_date


class FastSessionStore(Observable):
    def __init__(
        self,
        kv: KeyValueStore,
        *,
        clock: Callable[[], datetime] = datetime.now,
        streak_window_hours: Optional[float] = None,
        extended_ratio: Optional[float] = None,
    ) -> None:
        super().__init__()
        self._kv = kv
        self._clock = clock
        self.streak_window_hours = (
            settings.streak_window_hours if streak_window_hours is None else streak_window_hours
        )
        self.extended_ratio = settings.extended_ratio if extended_ratio is None else extended_ratio
        self._active: Optional[FastingSession] = self._load_active()
        self._history: List[FastingSession] = self._load_history()

    # ---- state ----

    @property
    def active_session(self) -> Optional[FastingSession]:
        return self._active

    @property
    def history(self) -> List[FastingSession]:
        return list(self._history)

    @property
    def is_fasting(self) -> bool:
        return self._active is not None

    # ---- lifecycle ----

    def start(self, session: FastingSession) -> None:
        """Make ``session`` the active fast. Any current active fast is overwritten."""
        if self._active is not None and self._active.id != session.id:
            logger.warning(
                "Starting fast %s discards active fast %s without recording it",
                session.id,
                self._active.id,
            )
        self._active = session
        self._persist_active()
        self._notify()

    def start_fast(
        self,
        preset: FastPreset,
        goal_hours: Optional[float] = None,
        start_date: Optional[datetime] = None,
    ) -> FastingSession:
        session = new_session(preset, goal_hours=goal_hours, start_date=start_date or self._clock())
        self.start(session)
        return session

    def complete_active_session(
        self,
        completion_date: Optional[datetime] = None,
        note: Optional[str] = None,
        outcome: Optional[FastOutcome] = None,
    ) -> Optional[FastingSession]:
        if self._active is None:
            return None
        completed_at = completion_date or self._clock()
        if outcome is None:
            outcome = self._active.classify(completed_at, self.extended_ratio)
        session = self._active.model_copy(
            update={
                "status": FastStatus.completed,
                "completion_date": completed_at,
                "end_date": completed_at,
                "note": note,
                "outcome": outcome,
            }
        )
        self._active = None
        self._history.insert(0, session)
        self._persist_active()
        self._persist_history()
        logger.info("Completed fast %s (%s)", session.id, outcome.value)
        self._notify()
        return session

    def cancel_active_session(self) -> None:
        if self._active is None:
            return
        self._active = None
        self._persist_active()
        self._notify()

    def delete_history_entry(self, session_id: str) -> None:
        self._history = [s for s in self._history if s.id != session_id]
        self._persist_history()
        self._notify()

    def clear_history(self) -> None:
        self._history = []
        self._persist_history()
        self._notify()

    # ---- derived statistics ----

    @property
    def completed_count(self) -> int:
        return len(self._history)

    @property
    def longest_fast_hours(self) -> float:
        now = self._clock()
        return stats.longest(s.elapsed_hours(now) for s in self._history)

    @property
    def average_fast_hours(self) -> float:
        now = self._clock()
        return stats.average(s.elapsed_hours(now) for s in self._history)

    @property
    def current_streak(self) -> int:
        return stats.consecutive_streak(
            [s.completion_date for s in self._history],
            self.streak_window_hours,
        )

    # ---- persistence ----

    def _persist_active(self) -> None:
        if self._active is None:
            ignore_failure(remove_value(self._kv, ACTIVE_SESSION_KEY), logger)
        else:
            ignore_failure(save_value(self._kv, ACTIVE_SESSION_KEY, _session_adapter, self._active), logger)

    def _persist_history(self) -> None:
        ignore_failure(save_value(self._kv, HISTORY_KEY, _history_adapter, self._history), logger)

    def _load_active(self) -> Optional[FastingSession]:
        result = load_value(self._kv, ACTIVE_SESSION_KEY, _session_adapter)
        ignore_failure(result, logger)
        return result.value if result.ok else None

    def _load_history(self) -> List[FastingSession]:
        result = load_value(self._kv, HISTORY_KEY, _history_adapter)
        ignore_failure(result, logger)
        return sorted(result.value_or([]), key=_sort_key, reverse=True)
