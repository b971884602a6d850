# -*- coding: utf-8 -*-
"""Wires every store to a single key-value backend."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .config import settings
from .fasting.storage import FastSessionStore
from .kv_store import KeyValueStore, SQLiteKeyValueStore
from .meals.storage import MealPlanStore
from .profile.storage import ProfileStore
from .water.storage import WaterIntakeStore
from .weight.storage import WeightEntryManager

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@dataclass
class AppStores:
    kv: KeyValueStore
    fasting: FastSessionStore
    water: WaterIntakeStore
    meals: MealPlanStore
    weight: WeightEntryManager
    profile: ProfileStore


def create_app_stores(
    kv: Optional[KeyValueStore] = None,
    *,
    clock: Callable[[], datetime] = datetime.now,
) -> AppStores:
    """Build all stores. Without ``kv`` the SQLite backend at ``settings.app_db_path`` is opened.

    Errors opening the backend propagate: there is nothing to fall back to.
    """
    if kv is None:
        kv = SQLiteKeyValueStore(settings.app_db_path)
    profile = ProfileStore(kv)
    stores = AppStores(
        kv=kv,
        fasting=FastSessionStore(kv, clock=clock),
        water=WaterIntakeStore(kv, clock=clock),
        meals=MealPlanStore(kv, clock=clock),
        weight=WeightEntryManager(kv, clock=clock, profile=profile),
        profile=profile,
    )
    logger.info(
        "Loaded stores: active_fast=%s history=%d water_today=%d meals_today=%d",
        stores.fasting.is_fasting,
        stores.fasting.completed_count,
        stores.water.today_glasses_count,
        stores.meals.total_count,
    )
    return stores
