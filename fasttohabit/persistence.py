# -*- coding: utf-8 -*-
"""Typed load/save over a key-value store, plus the day-partition helper.

Loads and saves never raise. They return a ``Result`` and each store decides
what to do with a failure. In practice the stores log it and carry on.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from pydantic import TypeAdapter

from .kv_store import KeyValueStore

T = TypeVar("T")

logger = logging.getLogger(__name__)

_BACKEND_ERRORS = (sqlite3.Error, OSError)


class StorageError(Exception):
    """A key could not be read, decoded, encoded or written."""

    def __init__(self, key: str, action: str, cause: BaseException) -> None:
        super().__init__(f"{action} {key!r} failed: {cause}")
        self.key = key
        self.action = action
        self.cause = cause


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[StorageError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: T) -> T:
        if self.error is not None or self.value is None:
            return default
        return self.value


def load_value(kv: KeyValueStore, key: str, adapter: TypeAdapter[T]) -> Result[T]:
    """Read and decode ``key``. A missing key is an ok result with no value."""
    try:
        raw = kv.get(key)
    except _BACKEND_ERRORS as exc:
        return Result(error=StorageError(key, "read", exc))
    if raw is None:
        return Result()
    try:
        return Result(value=adapter.validate_json(raw))
    except ValueError as exc:
        return Result(error=StorageError(key, "decode", exc))


def save_value(kv: KeyValueStore, key: str, adapter: TypeAdapter[T], value: T) -> Result[None]:
    try:
        data = adapter.dump_json(value)
    except (ValueError, TypeError) as exc:
        return Result(error=StorageError(key, "encode", exc))
    try:
        kv.set(key, data)
    except _BACKEND_ERRORS as exc:
        return Result(error=StorageError(key, "write", exc))
    return Result()


def remove_value(kv: KeyValueStore, key: str) -> Result[None]:
    try:
        kv.remove(key)
    except _BACKEND_ERRORS as exc:
        return Result(error=StorageError(key, "remove", exc))
    return Result()


def ignore_failure(result: Result, log: logging.Logger = logger) -> bool:
    """Best-effort persistence: log a failed result and report whether it succeeded."""
    if result.error is not None:
        log.warning("Ignoring storage failure: %s", result.error)
        return False
    return True


def is_same_day(a: datetime, b: datetime) -> bool:
    return a.date() == b.date()


def replace_today(
    all_records: Iterable[T],
    today_records: Iterable[T],
    in_today: Callable[[T], bool],
) -> List[T]:
    """Keep every stored record outside today verbatim, then append today's list.

    The in-memory list is the only authority for the current day, so stored
    records for today are dropped even if the in-memory list no longer has them.
    """
    kept = [record for record in all_records if not in_today(record)]
    return kept + list(today_records)
