"""Range, constraint and validation-result models.

Either side of a :class:`DateTimeRange` may be partially or fully unset while
the user is still editing. Durations are only meaningful once both sides are
complete.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from rangectl.domain.civil import TIME_PATTERN, CivilDateTime, as_calendar_day, as_civil

# Canonical messages. UIs and tests match on this wording.
MSG_BEFORE_MIN = "Date is before minimum allowed"
MSG_AFTER_MAX = "Date is after maximum allowed"
MSG_BLACKOUT = "This date is not available"
MSG_DISABLED_DAY = "This day is disabled"
MSG_START_REQUIRED = "Start date and time are required"
MSG_END_REQUIRED = "End date and time are required"
MSG_ORDER = "Start must be before end"
MSG_MIN_DURATION = "Duration must be at least {duration}"
MSG_MAX_DURATION = "Duration must not exceed {duration}"
START_PREFIX = "Start: "
END_PREFIX = "End: "


class ComparisonFrame(StrEnum):
    """Where range ordering and duration are evaluated."""

    CIVIL = "civil"  # naive combined wall-clock values
    INSTANT = "instant"  # both sides converted to UTC instants first


class DateTimeValue(BaseModel):
    """One side of a range: a calendar date plus an ``HH:MM`` time."""

    model_config = {"frozen": True}

    date: CivilDateTime | None = None
    time: str | None = Field(default=None, pattern=TIME_PATTERN.pattern)

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Any:
        return None if value is None else as_civil(value)

    @property
    def is_complete(self) -> bool:
        return self.date is not None and self.time is not None

    def combined(self) -> CivilDateTime:
        """Date with the time applied. Only valid when :attr:`is_complete`."""
        if self.date is None or self.time is None:
            msg = "cannot combine an incomplete date/time value"
            raise ValueError(msg)
        return self.date.with_time(self.time)


class DateTimeRange(BaseModel):
    """Start and end values as edited in the picker."""

    model_config = {"frozen": True}

    start: DateTimeValue = Field(default_factory=DateTimeValue)
    end: DateTimeValue = Field(default_factory=DateTimeValue)

    @classmethod
    def of(
        cls,
        start_date: Any,
        start_time: str | None,
        end_date: Any,
        end_time: str | None,
    ) -> DateTimeRange:
        """Shorthand for building a range from four loose values."""
        return cls(
            start=DateTimeValue(date=start_date, time=start_time),
            end=DateTimeValue(date=end_date, time=end_time),
        )


class PickerConstraints(BaseModel):
    """Declarative availability rules; every field is optional.

    Attributes:
        min_date: Earliest acceptable civil value.
        max_date: Latest acceptable civil value.
        blackout_dates: Calendar days that can never be selected.
        min_duration: Shortest allowed range, in milliseconds.
        max_duration: Longest allowed range, in milliseconds.
        disabled_days: Weekdays never selectable (0 = Sunday ... 6 = Saturday).
    """

    model_config = {"frozen": True}

    min_date: CivilDateTime | None = None
    max_date: CivilDateTime | None = None
    blackout_dates: frozenset[date] = Field(default_factory=frozenset)
    min_duration: int | None = Field(default=None, ge=0)
    max_duration: int | None = Field(default=None, ge=0)
    disabled_days: frozenset[int] = Field(default_factory=frozenset)

    @field_validator("min_date", "max_date", mode="before")
    @classmethod
    def _coerce_bound(cls, value: Any) -> Any:
        return None if value is None else as_civil(value)

    @field_validator("blackout_dates", mode="before")
    @classmethod
    def _coerce_blackouts(cls, value: Any) -> Any:
        if value is None:
            return frozenset()
        return frozenset(as_calendar_day(item) for item in value)

    @field_validator("disabled_days")
    @classmethod
    def _check_weekdays(cls, value: frozenset[int]) -> frozenset[int]:
        bad = sorted(day for day in value if not 0 <= day <= 6)
        if bad:
            msg = f"weekday indices must be within 0-6, got {bad}"
            raise ValueError(msg)
        return value


class DateValidation(BaseModel):
    """Outcome of checking one date. ``error`` is set only when invalid."""

    model_config = {"frozen": True}

    valid: bool
    error: str | None = None


class RangeValidation(BaseModel):
    """Outcome of checking a full range, errors in reporting order."""

    model_config = {"frozen": True}

    valid: bool
    errors: list[str] = Field(default_factory=list)

    @property
    def first_error(self) -> str | None:
        return self.errors[0] if self.errors else None
