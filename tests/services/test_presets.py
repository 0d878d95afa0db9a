"""Tests for PresetGenerator — the eight relative ranges."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from rangectl.domain.instants import UTC
from rangectl.domain.ranges import PickerConstraints
from rangectl.errors import UnknownPresetError, UnknownTimezoneError
from rangectl.infrastructure.clock import FixedClock
from rangectl.services.presets import PRESETS, PresetGenerator
from rangectl.services.validation import ConstraintValidator


class TestCatalog:
    def test_order_and_labels(self, presets: PresetGenerator) -> None:
        assert [(p.id, p.label) for p in presets.list_presets()] == [
            ("today", "Today"),
            ("yesterday", "Yesterday"),
            ("tomorrow", "Tomorrow"),
            ("last7days", "Last 7 Days"),
            ("last30days", "Last 30 Days"),
            ("thisMonth", "This Month"),
            ("lastMonth", "Last Month"),
            ("lastQuarter", "Last 90 Days"),
        ]

    def test_get_preset_unknown(self, presets: PresetGenerator) -> None:
        assert presets.get_preset("nextYear") is None

    def test_build_unknown_raises(self, presets: PresetGenerator) -> None:
        with pytest.raises(UnknownPresetError) as excinfo:
            presets.build("nextYear")
        assert excinfo.value.preset_id == "nextYear"


class TestBuild:
    def test_last_7_days(self, presets: PresetGenerator) -> None:
        result = presets.build("last7days")
        assert result.label == "Last 7 Days"
        assert result.start_date == date(2025, 6, 4)
        assert result.end_date == date(2025, 6, 10)
        assert result.start_time == "00:00"
        assert result.end_time == "23:59"
        assert result.start == datetime(2025, 6, 4, tzinfo=UTC)
        assert result.end == datetime(2025, 6, 10, 23, 59, 59, 999_000, tzinfo=UTC)
        assert result.day_count == 7

    @pytest.mark.parametrize(
        ("preset_id", "first", "last"),
        [
            ("today", date(2025, 6, 10), date(2025, 6, 10)),
            ("yesterday", date(2025, 6, 9), date(2025, 6, 9)),
            ("tomorrow", date(2025, 6, 11), date(2025, 6, 11)),
            ("last30days", date(2025, 5, 12), date(2025, 6, 10)),
            ("thisMonth", date(2025, 6, 1), date(2025, 6, 30)),
            ("lastMonth", date(2025, 5, 1), date(2025, 5, 31)),
            ("lastQuarter", date(2025, 3, 13), date(2025, 6, 10)),
        ],
    )
    def test_days(self, presets: PresetGenerator, preset_id: str, first: date, last: date) -> None:
        result = presets.build(preset_id)
        assert (result.start_date, result.end_date) == (first, last)

    def test_last_month_in_january(self, presets: PresetGenerator) -> None:
        result = presets.build("lastMonth", now=datetime(2025, 1, 20, 12, 0, tzinfo=UTC))
        assert (result.start_date, result.end_date) == (date(2024, 12, 1), date(2024, 12, 31))

    def test_this_month_leap_february(self, presets: PresetGenerator) -> None:
        result = presets.build("thisMonth", now=datetime(2024, 2, 10, tzinfo=UTC))
        assert result.end_date == date(2024, 2, 29)

    def test_deterministic(self, presets: PresetGenerator) -> None:
        assert presets.build_all() == presets.build_all()

    def test_build_all_shares_today(self, presets: PresetGenerator) -> None:
        results = presets.build_all()
        assert [r.id for r in results] == [p.id for p in PRESETS]
        assert results[0].start_date == date(2025, 6, 10)


class TestZones:
    def test_today_follows_zone(self, presets: PresetGenerator) -> None:
        # 15:00Z on the 10th is already the 11th in Tokyo.
        assert presets.build("today", zone="Asia/Tokyo").start_date == date(2025, 6, 11)

    def test_instants_use_zone_midnight(self, presets: PresetGenerator) -> None:
        result = presets.build("last7days", zone="America/New_York")
        assert result.start == datetime(2025, 6, 4, 4, 0, tzinfo=UTC)
        assert result.end == datetime(2025, 6, 11, 3, 59, 59, 999_000, tzinfo=UTC)
        assert result.zone == "America/New_York"

    def test_default_zone(self, fixed_clock: FixedClock) -> None:
        generator = PresetGenerator(fixed_clock, default_zone="Asia/Tokyo")
        assert generator.build("today").zone == "Asia/Tokyo"

    def test_naive_now_is_civil(self, presets: PresetGenerator) -> None:
        naive = datetime(2025, 6, 10, 23, 30)
        assert presets.today(naive, "Asia/Tokyo") == date(2025, 6, 10)

    def test_unknown_zone(self, presets: PresetGenerator) -> None:
        with pytest.raises(UnknownTimezoneError):
            presets.build("today", zone="Mars/Olympus")


class TestPresetRange:
    def test_to_range_validates(self, presets: PresetGenerator) -> None:
        date_range = presets.build("last7days").to_range()
        assert date_range.start.time == "00:00"
        assert date_range.end.time == "23:59"
        result = ConstraintValidator().validate_range(date_range, PickerConstraints())
        assert result.valid

    def test_today_fails_a_full_day_minimum(self, presets: PresetGenerator) -> None:
        # The HH:MM contract puts "today" at 23h59m, one minute short of a day.
        date_range = presets.build("today").to_range()
        result = ConstraintValidator().validate_range(date_range, PickerConstraints(min_duration=86_400_000))
        assert result.errors == ["Duration must be at least 1 day"]
