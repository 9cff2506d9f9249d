"""Tests for voyages and their history."""

from datetime import datetime, timedelta

import pandas as pd
import pytest

from minnow import Boat, Order, Voyage


class TestVoyageStep:
    def test_initial_history(self, voyage):
        assert len(voyage.history) == 1
        assert voyage.history[0]["order"] is None
        assert voyage.history[0]["speed"] == 0.0
        assert voyage.history[0]["time"] == datetime(2024, 1, 1, 8, 0)
        assert voyage.distance_travelled == 0.0

    def test_step_applies_order(self, voyage):
        state = voyage.step("full_speed", duration_hours=2.0)
        assert state["order"] == "full_speed"
        assert state["message"] == "Full speed ahead!"
        assert state["speed"] == 25.0
        assert state["distance"] == 50.0
        assert state["time"] == datetime(2024, 1, 1, 10, 0)
        assert voyage.boat.speed == 25.0

    def test_step_accepts_order_enum(self, voyage):
        state = voyage.step(Order.HALF_SPEED)
        assert state["order"] == "half_speed"
        assert state["speed"] == 12.5

    def test_unknown_order(self, voyage):
        with pytest.raises(ValueError, match="Unknown order"):
            voyage.step("reverse")
        assert len(voyage.history) == 1

    @pytest.mark.parametrize(
        "duration", [0.0, -1.0, float("nan"), float("inf"), float("-inf"), 1e12]
    )
    def test_invalid_duration_leaves_voyage_unchanged(self, voyage, duration):
        with pytest.raises(ValueError):
            voyage.step("full_speed", duration_hours=duration)
        assert voyage.boat.speed == 0.0
        assert voyage.distance_travelled == 0.0
        assert voyage.current_time == datetime(2024, 1, 1, 8, 0)
        assert len(voyage.history) == 1

    def test_default_start_time(self, minnow):
        before = datetime.now()
        v = Voyage(minnow)
        assert before <= v.current_time <= datetime.now()


class TestVoyageRun:
    def test_run_scenario(self, voyage):
        states = voyage.run(["full_speed", "full_stop", "half_speed"])
        assert [s["speed"] for s in states] == [25.0, 0.0, 12.5]
        assert [s["message"] for s in states] == [
            "Full speed ahead!",
            "All stop!",
            "Half speed ahead!",
        ]
        assert len(voyage.history) == 4
        assert voyage.distance_travelled == 37.5
        assert voyage.current_time == datetime(2024, 1, 1, 8, 0) + timedelta(hours=3)

    def test_to_dataframe(self, voyage):
        voyage.run(["full_speed", "half_speed"])
        df = voyage.to_dataframe()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["order", "message", "speed", "distance"]
        assert df.index.name == "time"
        assert list(df["speed"]) == [0.0, 25.0, 12.5]
        assert df["distance"].sum() == pytest.approx(37.5)

    def test_summary(self, voyage):
        voyage.step("full_speed", duration_hours=3.0)
        voyage.step("full_stop", duration_hours=1.0)
        summary = voyage.summary()
        assert summary["steps"] == 2
        assert summary["distance"] == 75.0
        assert summary["max_speed_reached"] == 25.0
        assert summary["mean_speed"] == pytest.approx(18.75)

    def test_summary_without_steps(self, voyage):
        assert voyage.summary() == {
            "steps": 0,
            "distance": 0.0,
            "max_speed_reached": 0.0,
            "mean_speed": 0.0,
        }

    def test_boat_already_under_way(self):
        boat = Boat("Dinghy", max_speed=8.0)
        boat.full_speed()
        v = Voyage(boat, start_time=datetime(2024, 1, 1))
        assert v.history[0]["speed"] == 8.0
