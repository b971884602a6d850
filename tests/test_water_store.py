# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import datetime, time

from fasttohabit.kv_store import MemoryKeyValueStore
from fasttohabit.water.models import WaterGoal, WaterLog
from fasttohabit.water.storage import GOAL_KEY, LOGS_KEY, WaterIntakeStore, load_all_logs

from tests.support import FakeClock

TODAY = datetime(2025, 10, 5, 9, 30)


class TestWaterIntakeStore(unittest.TestCase):
    def setUp(self) -> None:
        self.kv = MemoryKeyValueStore()
        self.clock = FakeClock(TODAY)
        self.store = WaterIntakeStore(self.kv, clock=self.clock)

    def test_default_goal(self) -> None:
        goal = self.store.goal
        self.assertEqual(goal.daily_goal_glasses, 8)
        self.assertEqual(goal.glass_size, 250)
        self.assertEqual(goal.daily_goal_ml, 2000)
        self.assertEqual(goal.start_time, time(7, 0))
        self.assertEqual(goal.end_time, time(23, 0))
        self.assertTrue(goal.is_reminder_enabled)

    def test_log_water_defaults_to_glass_size(self) -> None:
        self.store.update_goal(WaterGoal(daily_goal_glasses=6, glass_size=300))
        log = self.store.log_water()
        self.assertEqual(log.amount_ml, 300)
        self.assertEqual(self.store.today_total_ml, 300)
        self.store.log_water(amount_ml=120)
        self.assertEqual(self.store.today_total_ml, 420)
        self.assertEqual(self.store.today_glasses_count, 2)

    def test_undo_on_empty_is_noop(self) -> None:
        self.assertIsNone(self.store.undo_last_log())
        self.assertEqual(self.store.today_glasses_count, 0)
        self.assertEqual(self.store.remaining_glasses, 8)
        self.assertIsNone(self.kv.get(LOGS_KEY))

    def test_undo_removes_most_recent(self) -> None:
        self.store.log_water(100)
        self.clock.advance(minutes=5)
        self.store.log_water(200)
        removed = self.store.undo_last_log()
        self.assertEqual(removed.amount_ml, 200)
        self.assertEqual([log.amount_ml for log in load_all_logs(self.kv)], [100])

    def test_progress_and_goal(self) -> None:
        self.store.update_goal(WaterGoal(daily_goal_glasses=2, glass_size=250))
        self.store.log_water()
        self.assertAlmostEqual(self.store.progress, 0.5)
        self.assertFalse(self.store.is_goal_reached)
        self.assertEqual(self.store.remaining_glasses, 1)
        self.store.log_water()
        self.store.log_water()
        self.assertEqual(self.store.progress, 1.0)
        self.assertTrue(self.store.is_goal_reached)
        self.assertEqual(self.store.remaining_glasses, 0)

    def test_zero_goal_progress_is_zero(self) -> None:
        self.store.update_goal(WaterGoal(daily_goal_glasses=0, glass_size=250))
        self.store.log_water()
        self.assertEqual(self.store.progress, 0.0)

    def test_goal_is_persisted(self) -> None:
        goal = WaterGoal(daily_goal_glasses=10, glass_size=350, is_reminder_enabled=False)
        self.store.update_goal(goal)
        self.assertIsNotNone(self.kv.get(GOAL_KEY))
        self.assertEqual(WaterIntakeStore(self.kv, clock=self.clock).goal, goal)

    def test_malformed_goal_falls_back_to_default(self) -> None:
        kv = MemoryKeyValueStore({GOAL_KEY: b'{"daily_goal_glasses": "lots"}', LOGS_KEY: b"nope"})
        store = WaterIntakeStore(kv, clock=self.clock)
        self.assertEqual(store.goal, WaterGoal.default())
        self.assertEqual(store.today_logs, [])


class TestWaterDayPartition(unittest.TestCase):
    def test_previous_day_preserved_after_date_change(self) -> None:
        kv = MemoryKeyValueStore()
        clock = FakeClock(TODAY)
        store = WaterIntakeStore(kv, clock=clock)
        yesterday_log = store.log_water(250)

        clock.advance(days=1)
        tomorrow = WaterIntakeStore(kv, clock=clock)
        self.assertEqual(tomorrow.today_logs, [])
        self.assertEqual(load_all_logs(kv), [yesterday_log])

        tomorrow.log_water(500)
        tomorrow.undo_last_log()
        tomorrow.log_water(300)
        stored = load_all_logs(kv)
        self.assertEqual(stored[0], yesterday_log)
        self.assertEqual([log.amount_ml for log in stored], [250, 300])

    def test_today_list_is_sole_authority(self) -> None:
        stale_today = WaterLog(timestamp=TODAY.replace(hour=8), amount_ml=999)
        other_day = WaterLog(timestamp=datetime(2025, 10, 1, 12), amount_ml=150)
        kv = MemoryKeyValueStore()
        store = WaterIntakeStore(kv, clock=FakeClock(TODAY))
        # Another writer sneaks a record for today into storage after construction.
        kv.set(LOGS_KEY, ("[" + other_day.model_dump_json() + "," + stale_today.model_dump_json() + "]").encode())
        store.log_water(200)
        amounts = sorted(log.amount_ml for log in load_all_logs(kv))
        self.assertEqual(amounts, [150, 200])

    def test_open_store_rolls_over_at_midnight(self) -> None:
        kv = MemoryKeyValueStore()
        clock = FakeClock(TODAY.replace(hour=23, minute=0))
        store = WaterIntakeStore(kv, clock=clock)
        late = store.log_water(100)

        clock.advance(hours=2)
        self.assertEqual(store.today_total_ml, 0)
        self.assertEqual(store.day, clock.now.date())
        store.log_water(200)
        store.log_water(300)

        self.assertEqual(store.today_total_ml, 500)
        self.assertEqual(store.today_glasses_count, 2)
        stored = load_all_logs(kv)
        self.assertEqual([log.id for log in stored].count(late.id), 1)
        self.assertEqual(stored[0], late)
        self.assertEqual(len(stored), 3)

    def test_undo_after_midnight_keeps_yesterday(self) -> None:
        kv = MemoryKeyValueStore()
        clock = FakeClock(TODAY.replace(hour=23, minute=30))
        store = WaterIntakeStore(kv, clock=clock)
        late = store.log_water(250)
        clock.advance(hours=1)
        self.assertIsNone(store.undo_last_log())
        self.assertEqual(load_all_logs(kv), [late])

    def test_clear_today_logs(self) -> None:
        kv = MemoryKeyValueStore()
        store = WaterIntakeStore(kv, clock=FakeClock(TODAY))
        store.log_water()
        store.clear_today_logs()
        self.assertEqual(store.today_total_ml, 0)
        self.assertEqual(load_all_logs(kv), [])


if __name__ == "__main__":
    unittest.main()
