"""Tests for mode dispatch, cycle labelling and the clock helpers."""
from datetime import datetime, timezone
import zoneinfo

import pytest

from sleepcycle.calculator import Mode, CycleOption, calculate, label_cycles, sort_by_cycles_desc
from sleepcycle.cycles import WallClockTime as T
from sleepcycle.utils_time import from_12_hour, now_wall_clock

AMS = zoneinfo.ZoneInfo("Europe/Amsterdam")


class TestCalculate:
    def test_wakeup_mode_labels_ascending(self):
        ref, options = calculate(Mode.WAKEUP, T(22, 30), 15)
        assert ref == T(22, 30)
        assert [o.cycles for o in options] == [2, 3, 4, 5, 6, 7]
        assert options[0].time == T(1, 45)
        assert options[-1].time == T(9, 15)

    def test_bedtime_mode_labels_descending(self):
        _, options = calculate("bedtime", T(7, 0), 15)
        assert [o.cycles for o in options] == [7, 6, 5, 4, 3, 2]
        assert options[0].time == T(20, 15)
        assert options[-1].time == T(3, 45)

    def test_now_mode_uses_clock_snapshot(self):
        now = datetime(2026, 1, 15, 22, 30, tzinfo=AMS)
        ref, options = calculate(Mode.NOW, sleep_delay=15, now=now)
        assert ref == T(22, 30)
        assert [o.time for o in options] == [
            T(1, 45), T(3, 15), T(4, 45), T(6, 15), T(7, 45), T(9, 15),
        ]

    def test_now_mode_ignores_given_time(self):
        now = datetime(2026, 1, 15, 8, 0, tzinfo=AMS)
        ref, _ = calculate(Mode.NOW, T(22, 30), now=now)
        assert ref == T(8, 0)

    @pytest.mark.parametrize("mode", [Mode.WAKEUP, Mode.BEDTIME])
    def test_time_required_outside_now_mode(self, mode):
        with pytest.raises(ValueError):
            calculate(mode, None)

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            calculate("nap", T(12, 0))


class TestCycleOption:
    def test_hours_of_sleep_and_label(self):
        o = CycleOption(T(6, 15), 5)
        assert o.hours_of_sleep == 7.5
        assert o.label == "6:15 AM"

    def test_sort_by_cycles_desc(self):
        options = label_cycles(Mode.WAKEUP, [T(1, 0)] * 6)
        assert [o.cycles for o in sort_by_cycles_desc(options)] == [7, 6, 5, 4, 3, 2]


class TestClockHelpers:
    def test_now_converts_to_configured_zone(self):
        # CET is UTC+1 in January
        utc = datetime(2026, 1, 15, 22, 5, tzinfo=timezone.utc)
        assert now_wall_clock(utc) == T(23, 5)

    def test_naive_now_is_read_as_configured_zone(self):
        assert now_wall_clock(datetime(2026, 1, 15, 22, 5)) == T(22, 5)

    def test_now_without_argument_is_in_range(self):
        t = now_wall_clock()
        assert 0 <= t.hours <= 23

    @pytest.mark.parametrize("hour, minute, period, expected", [
        (12, 0, "AM", T(0, 0)),
        (12, 30, "PM", T(12, 30)),
        (1, 5, "am", T(1, 5)),
        (11, 59, "PM", T(23, 59)),
    ])
    def test_from_12_hour(self, hour, minute, period, expected):
        assert from_12_hour(hour, minute, period) == expected

    @pytest.mark.parametrize("hour, period", [(0, "AM"), (13, "PM"), (5, "XM")])
    def test_from_12_hour_rejects_bad_input(self, hour, period):
        with pytest.raises(ValueError):
            from_12_hour(hour, 0, period)
