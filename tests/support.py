# -*- coding: utf-8 -*-

from __future__ import annotations

from datetime import datetime, timedelta

from fasttohabit.kv_store import MemoryKeyValueStore


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class BrokenKeyValueStore(MemoryKeyValueStore):
    """Reads work, every write fails like a full disk."""

    def set(self, key: str, value: bytes) -> None:
        raise OSError("disk full")

    def remove(self, key: str) -> None:
        raise OSError("disk full")

