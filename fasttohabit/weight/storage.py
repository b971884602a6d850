# -*- coding: utf-8 -*-
"""Weight — persisted entry list.

The manager keeps no entries in memory: every call reloads the stored list.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from pydantic import TypeAdapter

from .models import WeightEntry

from .. import stats
from ..kv_store import KeyValueStore
from ..persistence import ignore_failure, load_value, save_value
from ..profile.storage import ProfileStore

logger = logging.getLogger(__name__)

ENTRIES_KEY = "weightEntries"

_entries_adapter = TypeAdapter(List[WeightEntry])


def _newest_first(entries: List[WeightEntry]) -> List[WeightEntry]:
    return sorted(entries, key=lambda e: e.date, reverse=True)


class WeightEntryManager:
    def __init__(
        self,
        kv: KeyValueStore,
        *,
        clock: Callable[[], datetime] = datetime.now,
        profile: Optional[ProfileStore] = None,
    ) -> None:
        self._kv = kv
        self._clock = clock
        self._profile = profile or ProfileStore(kv)

    def load_entries(self) -> List[WeightEntry]:
        result = load_value(self._kv, ENTRIES_KEY, _entries_adapter)
        ignore_failure(result, logger)
        return _newest_first(result.value_or([]))

    def save_entries(self, entries: List[WeightEntry]) -> bool:
        return ignore_failure(save_value(self._kv, ENTRIES_KEY, _entries_adapter, entries), logger)

    def add_entry(self, weight: float, note: Optional[str] = None) -> WeightEntry:
        entry = WeightEntry(weight=weight, date=self._clock(), note=note)
        entries = self.load_entries()
        entries.append(entry)
        self.save_entries(_newest_first(entries))
        self._profile.set_current_weight(str(float(weight)))
        return entry

    def delete_entry(self, entry_id: str) -> None:
        entries = [e for e in self.load_entries() if e.id != entry_id]
        self.save_entries(entries)

    def latest_entry(self) -> Optional[WeightEntry]:
        entries = self.load_entries()
        return entries[0] if entries else None

    def weight_change(self) -> Optional[float]:
        return stats.change([e.weight for e in self.load_entries()])
