"""Civil (wall-clock) date-time values and calendar helpers.

A :class:`CivilDateTime` is a set of wall-clock fields with no zone attached.
It only becomes an absolute instant once a zone is chosen, which is the job
of :class:`rangectl.services.timezone.TimezoneConverter`.

INVARIANT: Construction rejects impossible calendar dates (Feb 30, hour 24).
"""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta
from typing import Any

from pydantic import BaseModel, Field, model_validator

TIME_PATTERN: re.Pattern[str] = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

MONTH_NAMES: tuple[str, ...] = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

MINUTES_PER_DAY = 24 * 60


class CivilDateTime(BaseModel):
    """Wall-clock fields interpreted relative to some zone."""

    model_config = {"frozen": True}

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    hour: int = Field(default=0, ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)
    second: int = Field(default=0, ge=0, le=59)
    microsecond: int = Field(default=0, ge=0, le=999_999)

    @model_validator(mode="after")
    def _check_calendar_day(self) -> CivilDateTime:
        last_day = calendar.monthrange(self.year, self.month)[1]
        if self.day > last_day:
            msg = f"day {self.day} is out of range for {self.year}-{self.month:02d}"
            raise ValueError(msg)
        return self

    # --- Construction ---

    @classmethod
    def from_datetime(cls, value: datetime) -> CivilDateTime:
        """Take the wall-clock fields of *value*, ignoring any tzinfo."""
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            microsecond=value.microsecond,
        )

    @classmethod
    def from_date(cls, value: date) -> CivilDateTime:
        return cls(year=value.year, month=value.month, day=value.day)

    @classmethod
    def parse(cls, text: str) -> CivilDateTime:
        """Parse ``YYYY-MM-DD`` or ``YYYY-MM-DD[T ]HH:MM[:SS]``.

        A trailing offset or ``Z`` is not allowed: civil values carry no zone.
        """
        parsed = datetime.fromisoformat(text.strip())
        if parsed.tzinfo is not None:
            msg = f"civil date-time must not carry an offset: {text!r}"
            raise ValueError(msg)
        return cls.from_datetime(parsed)

    # --- Conversion ---

    def to_datetime(self) -> datetime:
        """Naive ``datetime`` with the same wall-clock fields."""
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.microsecond,
        )

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return self.to_datetime().isoformat()

    def __str__(self) -> str:
        return self.isoformat()

    # --- Derived fields ---

    @property
    def minute_of_day(self) -> int:
        return self.hour * 60 + self.minute

    @property
    def weekday_index(self) -> int:
        """Weekday with Sunday as 0 and Saturday as 6."""
        return (self.to_date().weekday() + 1) % 7

    # --- Wall-clock arithmetic ---

    def with_time(self, time_text: str) -> CivilDateTime:
        """Replace hour and minute from an ``HH:MM`` string, zeroing seconds."""
        hours, minutes = parse_time(time_text)
        return self.model_copy(
            update={"hour": hours, "minute": minutes, "second": 0, "microsecond": 0}
        )

    def start_of_day(self) -> CivilDateTime:
        return CivilDateTime.from_date(self.to_date())

    def end_of_day(self) -> CivilDateTime:
        """23:59:59.999 on the same calendar day."""
        return self.model_copy(
            update={"hour": 23, "minute": 59, "second": 59, "microsecond": 999_000}
        )

    def shift_days(self, days: int) -> CivilDateTime:
        return CivilDateTime.from_datetime(self.to_datetime() + timedelta(days=days))

    # --- Ordering on wall-clock fields ---

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CivilDateTime):
            return NotImplemented
        return self.to_datetime() < other.to_datetime()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CivilDateTime):
            return NotImplemented
        return self.to_datetime() <= other.to_datetime()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CivilDateTime):
            return NotImplemented
        return self.to_datetime() > other.to_datetime()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CivilDateTime):
            return NotImplemented
        return self.to_datetime() >= other.to_datetime()


def as_civil(value: Any) -> CivilDateTime:
    """Coerce a ``CivilDateTime``, ``datetime``, ``date`` or ISO string.

    Aware datetimes keep their own wall-clock fields; the offset is dropped.
    """
    if isinstance(value, CivilDateTime):
        return value
    if isinstance(value, datetime):
        return CivilDateTime.from_datetime(value)
    if isinstance(value, date):
        return CivilDateTime.from_date(value)
    if isinstance(value, str):
        return CivilDateTime.parse(value)
    if isinstance(value, dict):
        return CivilDateTime.model_validate(value)
    msg = f"cannot interpret {type(value).__name__} as a civil date-time"
    raise TypeError(msg)


def as_calendar_day(value: Any) -> date:
    """Reduce any civil-like value to its calendar day."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return as_civil(value).to_date()


# --- HH:MM time strings ---


def is_valid_time(text: str) -> bool:
    """Check an ``HH:MM`` 24-hour string, e.g. ``"09:30"``."""
    return TIME_PATTERN.match(text) is not None


def parse_time(text: str) -> tuple[int, int]:
    """Split ``"HH:MM"`` into ``(hours, minutes)``."""
    match = TIME_PATTERN.match(text)
    if match is None:
        msg = f"time must be HH:MM (00:00-23:59), got {text!r}"
        raise ValueError(msg)
    return int(match.group(1)), int(match.group(2))


def format_time(hours: int, minutes: int) -> str:
    return f"{hours:02d}:{minutes:02d}"


def shift_time(text: str, minutes: int) -> str:
    """Move an ``HH:MM`` string by *minutes*, wrapping around midnight.

    Examples:
        >>> shift_time("23:00", 60)
        '00:00'
        >>> shift_time("00:10", -15)
        '23:55'
    """
    hours, mins = parse_time(text)
    total = (hours * 60 + mins + minutes) % MINUTES_PER_DAY
    return format_time(total // 60, total % 60)


def combine_date_time(value: Any, time_text: str) -> CivilDateTime:
    """Apply an ``HH:MM`` time to the calendar day of *value*."""
    return as_civil(value).with_time(time_text)


# --- Calendar helpers ---


def is_same_day(first: Any, second: Any) -> bool:
    """Compare two civil-like values by calendar day only."""
    return as_calendar_day(first) == as_calendar_day(second)


def date_range(start: Any, end: Any) -> list[date]:
    """Every calendar day from *start* through *end*, inclusive."""
    current = as_calendar_day(start)
    last = as_calendar_day(end)
    days: list[date] = []
    while current <= last:
        days.append(current)
        current += timedelta(days=1)
    return days


def days_between(start: Any, end: Any) -> int:
    """Absolute number of calendar days separating two values."""
    return abs((as_calendar_day(end) - as_calendar_day(start)).days)


def shift_months(value: datetime, months: int) -> datetime:
    """Move *value* by whole calendar months, clamping the day of month."""
    index = value.month - 1 + months
    year = value.year + index // 12
    month = index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def month_info(year: int, month: int) -> dict[str, Any]:
    """Layout facts a calendar grid needs for one month.

    ``month`` is 1-based. ``starting_day_of_week`` uses Sunday = 0.
    """
    first = date(year, month, 1)
    return {
        "year": year,
        "month": month,
        "days_in_month": calendar.monthrange(year, month)[1],
        "starting_day_of_week": (first.weekday() + 1) % 7,
        "month_name": MONTH_NAMES[month],
    }
