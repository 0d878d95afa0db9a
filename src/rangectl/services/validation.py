"""ConstraintValidator — deterministic checks of dates and ranges.

Business-rule failures are returned, never raised. ``validate_date`` stops at
the first failing check; ``validate_range`` accumulates everything after the
completeness gate, in this order: per-side errors, ordering, duration.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from rangectl.domain.civil import CivilDateTime, as_civil
from rangectl.domain.durations import format_duration
from rangectl.domain.instants import elapsed_ms
from rangectl.domain.ranges import (
    END_PREFIX,
    MSG_AFTER_MAX,
    MSG_BEFORE_MIN,
    MSG_BLACKOUT,
    MSG_DISABLED_DAY,
    MSG_END_REQUIRED,
    MSG_MAX_DURATION,
    MSG_MIN_DURATION,
    MSG_ORDER,
    MSG_START_REQUIRED,
    START_PREFIX,
    ComparisonFrame,
    DateTimeRange,
    DateValidation,
    PickerConstraints,
    RangeValidation,
)
from rangectl.domain.zones import DEFAULT_ZONE
from rangectl.services.timezone import TimezoneConverter

logger = logging.getLogger(__name__)


class ConstraintValidator:
    """Validate picker input against a :class:`PickerConstraints` set.

    Args:
        converter: Needed only for :attr:`ComparisonFrame.INSTANT`.
        frame: Where ordering and duration are evaluated. ``CIVIL`` compares
            the naive combined date+time values, so a range crossing a DST
            transition is measured in wall-clock time. ``INSTANT`` converts
            both sides to UTC first and measures real elapsed time.
    """

    def __init__(
        self,
        converter: TimezoneConverter | None = None,
        *,
        frame: ComparisonFrame | str = ComparisonFrame.CIVIL,
    ) -> None:
        self.frame = ComparisonFrame(frame)
        if converter is None and self.frame is ComparisonFrame.INSTANT:
            converter = TimezoneConverter()
        self._converter = converter

    def validate_date(self, date: Any, constraints: PickerConstraints) -> DateValidation:
        """Check one date: min, max, blackout day, disabled weekday."""
        value = as_civil(date)

        if constraints.min_date is not None and value < constraints.min_date:
            return DateValidation(valid=False, error=MSG_BEFORE_MIN)
        if constraints.max_date is not None and value > constraints.max_date:
            return DateValidation(valid=False, error=MSG_AFTER_MAX)
        if value.to_date() in constraints.blackout_dates:
            return DateValidation(valid=False, error=MSG_BLACKOUT)
        if value.weekday_index in constraints.disabled_days:
            return DateValidation(valid=False, error=MSG_DISABLED_DAY)
        return DateValidation(valid=True)

    def validate_range(
        self,
        date_range: DateTimeRange,
        constraints: PickerConstraints,
        zone: str = DEFAULT_ZONE,
    ) -> RangeValidation:
        """Check a full range; *zone* matters only in the instant frame."""
        errors: list[str] = []

        if not date_range.start.is_complete:
            errors.append(MSG_START_REQUIRED)
        if not date_range.end.is_complete:
            errors.append(MSG_END_REQUIRED)
        if errors:
            return RangeValidation(valid=False, errors=errors)

        for prefix, side in ((START_PREFIX, date_range.start), (END_PREFIX, date_range.end)):
            check = self.validate_date(side.date, constraints)
            if not check.valid:
                errors.append(f"{prefix}{check.error}")

        start = date_range.start.combined()
        end = date_range.end.combined()
        start_key, end_key = self._comparable(start, end, zone)
        if start_key >= end_key:
            errors.append(MSG_ORDER)

        duration = elapsed_ms(start_key, end_key)
        if constraints.min_duration and duration < constraints.min_duration:
            errors.append(MSG_MIN_DURATION.format(duration=format_duration(constraints.min_duration)))
        if constraints.max_duration and duration > constraints.max_duration:
            errors.append(MSG_MAX_DURATION.format(duration=format_duration(constraints.max_duration)))

        logger.debug(
            "Validated range %s -> %s (%s frame, %d ms): %d error(s)",
            start,
            end,
            self.frame,
            duration,
            len(errors),
        )
        return RangeValidation(valid=not errors, errors=errors)

    def duration_ms(self, date_range: DateTimeRange, zone: str = DEFAULT_ZONE) -> int:
        """Milliseconds from start to end of a complete range, in this frame."""
        start_key, end_key = self._comparable(
            date_range.start.combined(), date_range.end.combined(), zone
        )
        return elapsed_ms(start_key, end_key)

    def _comparable(
        self, start: CivilDateTime, end: CivilDateTime, zone: str
    ) -> tuple[datetime, datetime]:
        if self.frame is ComparisonFrame.INSTANT:
            assert self._converter is not None
            return (
                self._converter.civil_to_instant(start, zone),
                self._converter.civil_to_instant(end, zone),
            )
        return start.to_datetime(), end.to_datetime()


_default_validator = ConstraintValidator()


def validate_date(date: Any, constraints: PickerConstraints) -> DateValidation:
    """Module-level shortcut using a civil-frame validator."""
    return _default_validator.validate_date(date, constraints)


def validate_range(date_range: DateTimeRange, constraints: PickerConstraints) -> RangeValidation:
    """Module-level shortcut using a civil-frame validator."""
    return _default_validator.validate_range(date_range, constraints)
