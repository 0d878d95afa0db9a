"""Tests for ConstraintValidator — single dates and full ranges."""

from __future__ import annotations

from datetime import date

import pytest

from rangectl.domain.durations import MS_PER_DAY, MS_PER_HOUR
from rangectl.domain.ranges import ComparisonFrame, DateTimeRange, PickerConstraints
from rangectl.errors import UnknownTimezoneError
from rangectl.services.timezone import TimezoneConverter
from rangectl.services.validation import ConstraintValidator, validate_date, validate_range


def _range(start: str | None, start_time: str | None, end: str | None, end_time: str | None) -> DateTimeRange:
    return DateTimeRange.of(start, start_time, end, end_time)


class TestValidateDate:
    def test_no_constraints(self, validator: ConstraintValidator) -> None:
        result = validator.validate_date("2025-01-15", PickerConstraints())
        assert result.valid
        assert result.error is None

    def test_before_min(self, validator: ConstraintValidator) -> None:
        result = validator.validate_date("2025-01-15", PickerConstraints(min_date="2025-01-20"))
        assert not result.valid
        assert result.error == "Date is before minimum allowed"

    def test_after_max(self, validator: ConstraintValidator) -> None:
        result = validator.validate_date("2025-02-15", PickerConstraints(max_date="2025-01-31"))
        assert result.error == "Date is after maximum allowed"

    def test_bounds_are_inclusive(self, validator: ConstraintValidator) -> None:
        constraints = PickerConstraints(min_date="2025-01-15", max_date="2025-01-15")
        assert validator.validate_date("2025-01-15", constraints).valid

    def test_min_date_compares_time_of_day(self, validator: ConstraintValidator) -> None:
        constraints = PickerConstraints(min_date="2025-01-15T12:00")
        assert not validator.validate_date("2025-01-15T09:00", constraints).valid

    @pytest.mark.parametrize("moment", ["2025-12-25", "2025-12-25T00:00", "2025-12-25T23:59:59"])
    def test_blackout_ignores_time_of_day(self, validator: ConstraintValidator, moment: str) -> None:
        constraints = PickerConstraints(blackout_dates=[date(2025, 12, 25)])
        result = validator.validate_date(moment, constraints)
        assert result.error == "This date is not available"

    def test_disabled_sunday(self, validator: ConstraintValidator) -> None:
        result = validator.validate_date("2025-01-05", PickerConstraints(disabled_days=[0]))
        assert not result.valid
        assert result.error == "This day is disabled"

    def test_enabled_weekday(self, validator: ConstraintValidator) -> None:
        assert validator.validate_date("2025-01-06", PickerConstraints(disabled_days=[0])).valid

    def test_first_failing_check_wins(self, validator: ConstraintValidator) -> None:
        constraints = PickerConstraints(
            min_date="2025-02-01", blackout_dates=["2025-01-05"], disabled_days=[0]
        )
        assert validator.validate_date("2025-01-05", constraints).error == "Date is before minimum allowed"

    def test_module_shortcut(self) -> None:
        assert not validate_date("2025-01-05", PickerConstraints(disabled_days=[0])).valid


class TestValidateRangeCompleteness:
    def test_missing_start(self, validator: ConstraintValidator) -> None:
        result = validator.validate_range(_range(None, "09:00", "2025-01-15", "10:00"), PickerConstraints())
        assert result.errors == ["Start date and time are required"]

    def test_missing_both(self, validator: ConstraintValidator) -> None:
        result = validator.validate_range(DateTimeRange(), PickerConstraints())
        assert result.errors == ["Start date and time are required", "End date and time are required"]

    def test_incomplete_skips_other_checks(self, validator: ConstraintValidator) -> None:
        constraints = PickerConstraints(min_date="2030-01-01")
        result = validator.validate_range(_range("2025-01-15", None, "2025-01-15", "10:00"), constraints)
        assert result.errors == ["Start date and time are required"]


class TestValidateRange:
    def test_valid(self, validator: ConstraintValidator) -> None:
        result = validator.validate_range(
            _range("2025-01-15", "09:00", "2025-01-15", "10:00"), PickerConstraints()
        )
        assert result.valid
        assert result.errors == []

    def test_min_duration_message(self, validator: ConstraintValidator) -> None:
        result = validator.validate_range(
            _range("2025-01-15", "09:00", "2025-01-15", "10:00"),
            PickerConstraints(min_duration=2 * MS_PER_HOUR),
        )
        assert not result.valid
        assert "Duration must be at least 2 hours" in result.errors

    def test_min_duration_exact_passes(self, validator: ConstraintValidator) -> None:
        result = validator.validate_range(
            _range("2025-01-15", "09:00", "2025-01-15", "11:00"),
            PickerConstraints(min_duration=2 * MS_PER_HOUR),
        )
        assert result.valid

    def test_min_duration_one_ms_short_fails(self, validator: ConstraintValidator) -> None:
        result = validator.validate_range(
            _range("2025-01-15", "09:00", "2025-01-15", "11:00"),
            PickerConstraints(min_duration=2 * MS_PER_HOUR + 1),
        )
        assert result.errors == ["Duration must be at least 2 hours"]

    def test_max_duration(self, validator: ConstraintValidator) -> None:
        result = validator.validate_range(
            _range("2025-01-01", "00:00", "2025-01-04", "00:00"),
            PickerConstraints(max_duration=2 * MS_PER_DAY),
        )
        assert result.errors == ["Duration must not exceed 2 days"]

    def test_zero_min_duration_is_skipped(self, validator: ConstraintValidator) -> None:
        result = validator.validate_range(
            _range("2025-01-15", "10:00", "2025-01-15", "09:00"), PickerConstraints(min_duration=0)
        )
        assert result.errors == ["Start must be before end"]

    def test_zero_max_duration_is_skipped(self, validator: ConstraintValidator) -> None:
        result = validator.validate_range(
            _range("2025-01-15", "09:00", "2025-01-16", "09:00"), PickerConstraints(max_duration=0)
        )
        assert result.valid

    @pytest.mark.parametrize(
        ("start_time", "end_time", "ordered"),
        [("09:00", "09:01", True), ("09:00", "09:00", False), ("10:00", "09:00", False)],
    )
    def test_order_error_iff_not_strictly_before(
        self, validator: ConstraintValidator, start_time: str, end_time: str, ordered: bool
    ) -> None:
        result = validator.validate_range(
            _range("2025-01-15", start_time, "2025-01-15", end_time), PickerConstraints()
        )
        assert ("Start must be before end" not in result.errors) is ordered

    def test_errors_accumulate_in_order(self, validator: ConstraintValidator) -> None:
        constraints = PickerConstraints(
            min_date="2025-01-10", disabled_days=[0], min_duration=MS_PER_HOUR
        )
        # Start is before min and end falls on a Sunday.
        result = validator.validate_range(_range("2025-01-09", "10:00", "2025-01-12", "09:00"), constraints)
        assert result.errors == [
            "Start: Date is before minimum allowed",
            "End: This day is disabled",
        ]

    def test_all_error_kinds_ordered(self, validator: ConstraintValidator) -> None:
        constraints = PickerConstraints(blackout_dates=["2025-01-15"], min_duration=MS_PER_HOUR)
        result = validator.validate_range(_range("2025-01-15", "10:00", "2025-01-15", "09:30"), constraints)
        assert result.errors == [
            "Start: This date is not available",
            "End: This date is not available",
            "Start must be before end",
            "Duration must be at least 1 hour",
        ]

    def test_module_shortcut(self) -> None:
        result = validate_range(_range("2025-01-15", "09:00", "2025-01-15", "08:00"), PickerConstraints())
        assert result.first_error == "Start must be before end"


class TestComparisonFrame:
    # New York springs forward at 02:00 on 2025-03-09: noon to noon is 23 real hours.
    DST_RANGE = _range("2025-03-08", "12:00", "2025-03-09", "12:00")

    def test_civil_frame_measures_wall_clock(self, validator: ConstraintValidator) -> None:
        assert validator.duration_ms(self.DST_RANGE, "America/New_York") == 24 * MS_PER_HOUR

    def test_instant_frame_measures_elapsed(self) -> None:
        validator = ConstraintValidator(frame=ComparisonFrame.INSTANT)
        assert validator.duration_ms(self.DST_RANGE, "America/New_York") == 23 * MS_PER_HOUR

    def test_instant_frame_changes_verdict(self, validator: ConstraintValidator) -> None:
        constraints = PickerConstraints(min_duration=MS_PER_DAY)
        assert validator.validate_range(self.DST_RANGE, constraints, "America/New_York").valid
        instant = ConstraintValidator(TimezoneConverter(), frame="instant")
        result = instant.validate_range(self.DST_RANGE, constraints, "America/New_York")
        assert result.errors == ["Duration must be at least 1 day"]

    def test_instant_frame_rejects_unknown_zone(self) -> None:
        validator = ConstraintValidator(frame="instant")
        with pytest.raises(UnknownTimezoneError):
            validator.validate_range(self.DST_RANGE, PickerConstraints(), "Mars/Olympus")

    def test_civil_frame_ignores_zone(self, validator: ConstraintValidator) -> None:
        assert validator.validate_range(self.DST_RANGE, PickerConstraints(), "Mars/Olympus").valid
