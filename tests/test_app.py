# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import tempfile
import unittest
from datetime import date, datetime
from pathlib import Path

from fasttohabit.app import create_app_stores
from fasttohabit.fasting.models import FastPreset
from fasttohabit.kv_store import MemoryKeyValueStore, SQLiteKeyValueStore
from fasttohabit.meals.models import MealType
from fasttohabit.planning.storage import get_day_summary

from tests.support import FakeClock

TODAY = datetime(2025, 10, 5, 9, 0)


class TestDaySummary(unittest.TestCase):
    def test_summary_for_past_and_current_day(self) -> None:
        kv = MemoryKeyValueStore()
        clock = FakeClock(TODAY)
        stores = create_app_stores(kv, clock=clock)
        stores.water.log_water(250)
        breakfast = stores.meals.add_meal(MealType.breakfast, TODAY.replace(hour=8))
        stores.meals.toggle_completion(breakfast.id)

        clock.advance(days=1)
        stores = create_app_stores(kv, clock=clock)
        stores.water.log_water(500)
        stores.water.log_water(300)

        past = get_day_summary(kv, TODAY.date(), today=clock.now.date())
        self.assertEqual(past.date, "2025-10-05")
        self.assertEqual(past.total_water_ml, 250)
        self.assertEqual(len(past.meals), 1)
        self.assertEqual(past.completed_meals, 1)
        self.assertFalse(past.is_today)

        current = get_day_summary(kv, clock.now.date(), today=clock.now.date())
        self.assertEqual(current.total_water_ml, 800)
        self.assertEqual(current.meals, [])
        self.assertTrue(current.is_today)

        empty = get_day_summary(kv, date(2025, 1, 1), today=clock.now.date())
        self.assertTrue(empty.is_empty)


class TestCreateAppStores(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="fasttohabit-test-"))

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp, ignore_errors=True)

    def test_state_survives_restart_on_sqlite(self) -> None:
        db_path = self._tmp / "fasttohabit.db"
        clock = FakeClock(TODAY)
        stores = create_app_stores(SQLiteKeyValueStore(db_path), clock=clock)
        stores.fasting.start_fast(FastPreset.sixteen_eight)
        stores.water.log_water()
        stores.weight.add_entry(70.0)
        stores.profile.complete_onboarding()

        restarted = create_app_stores(SQLiteKeyValueStore(db_path), clock=clock)
        self.assertTrue(restarted.fasting.is_fasting)
        self.assertEqual(restarted.water.today_total_ml, 250)
        self.assertEqual(restarted.profile.current_weight, "70.0")
        self.assertTrue(restarted.profile.has_completed_onboarding)

    def test_weight_entry_notifies_profile_observers(self) -> None:
        stores = create_app_stores(MemoryKeyValueStore(), clock=FakeClock(TODAY))
        seen = []
        stores.profile.subscribe(lambda profile: seen.append(profile.current_weight))
        stores.weight.add_entry(70.0)
        self.assertEqual(seen, ["70.0"])
        self.assertEqual(stores.profile.current_weight, "70.0")

    def test_stores_do_not_share_state(self) -> None:
        stores = create_app_stores(MemoryKeyValueStore(), clock=FakeClock(TODAY))
        stores.fasting.start_fast(FastPreset.omad)
        stores.fasting.cancel_active_session()
        self.assertEqual(stores.water.today_glasses_count, 0)
        self.assertEqual(stores.meals.total_count, 0)
        self.assertEqual(stores.weight.load_entries(), [])


if __name__ == "__main__":
    unittest.main()
