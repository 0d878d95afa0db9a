"""PresetGenerator — deterministic relative ranges ("Today", "Last 7 Days", ...).

Each preset is a pure function of "today" in a reference zone. For a fixed
``now`` repeated calls return identical ranges.

INVARIANT: ``start_time`` is always ``"00:00"`` and ``end_time`` always
``"23:59"``, even though the instants carry 00:00:00.000 / 23:59:59.999.
"""

from __future__ import annotations

import calendar
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from pydantic import BaseModel

from rangectl.domain.civil import CivilDateTime
from rangectl.domain.instants import as_instant
from rangectl.domain.ranges import DateTimeRange
from rangectl.domain.zones import DEFAULT_ZONE
from rangectl.errors import UnknownPresetError
from rangectl.infrastructure.clock import Clock, SystemClock
from rangectl.services.timezone import TimezoneConverter

logger = logging.getLogger(__name__)

START_TIME = "00:00"
END_TIME = "23:59"

DayBounds = tuple[date, date]


def _single_day(offset: int) -> Callable[[date], DayBounds]:
    def bounds(today: date) -> DayBounds:
        day = today + timedelta(days=offset)
        return day, day

    return bounds


def _trailing_days(count: int) -> Callable[[date], DayBounds]:
    """Today plus the ``count - 1`` preceding days, both ends inclusive."""

    def bounds(today: date) -> DayBounds:
        return today - timedelta(days=count - 1), today

    return bounds


def _this_month(today: date) -> DayBounds:
    last = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last)


def _last_month(today: date) -> DayBounds:
    last = today.replace(day=1) - timedelta(days=1)
    return last.replace(day=1), last


@dataclass(frozen=True)
class RangePreset:
    """A named relative range and the rule that computes its days."""

    id: str
    label: str
    bounds: Callable[[date], DayBounds]
    category: str = "relative"


PRESETS: tuple[RangePreset, ...] = (
    RangePreset("today", "Today", _single_day(0)),
    RangePreset("yesterday", "Yesterday", _single_day(-1)),
    RangePreset("tomorrow", "Tomorrow", _single_day(1)),
    RangePreset("last7days", "Last 7 Days", _trailing_days(7)),
    RangePreset("last30days", "Last 30 Days", _trailing_days(30)),
    RangePreset("thisMonth", "This Month", _this_month),
    RangePreset("lastMonth", "Last Month", _last_month),
    RangePreset("lastQuarter", "Last 90 Days", _trailing_days(90)),
)

_PRESETS_BY_ID: dict[str, RangePreset] = {preset.id: preset for preset in PRESETS}


class PresetRange(BaseModel):
    """A concrete range produced by a preset.

    Attributes:
        start: UTC instant of 00:00:00.000 on ``start_date`` in ``zone``.
        end: UTC instant of 23:59:59.999 on ``end_date`` in ``zone``.
    """

    model_config = {"frozen": True}

    id: str
    label: str
    zone: str
    start_date: date
    end_date: date
    start: datetime
    start_time: str = START_TIME
    end: datetime
    end_time: str = END_TIME

    @property
    def day_count(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def to_range(self) -> DateTimeRange:
        """The same range as picker input, ready for the validator."""
        return DateTimeRange.of(self.start_date, self.start_time, self.end_date, self.end_time)


class PresetGenerator:
    """Build preset ranges relative to a clock's "now" in a reference zone."""

    def __init__(
        self,
        clock: Clock | None = None,
        converter: TimezoneConverter | None = None,
        *,
        default_zone: str = DEFAULT_ZONE,
    ) -> None:
        self._clock: Clock = clock or SystemClock()
        self._converter = converter or TimezoneConverter()
        self._default_zone = default_zone

    def list_presets(self) -> list[RangePreset]:
        return list(PRESETS)

    def get_preset(self, preset_id: str) -> RangePreset | None:
        return _PRESETS_BY_ID.get(preset_id)

    def today(self, now: datetime | None = None, zone: str | None = None) -> date:
        """Calendar date of *now* in *zone*.

        Aware *now* values are converted; naive ones are read as civil time
        already in *zone*.
        """
        zone = self._converter.resolve_zone(zone or self._default_zone)
        if now is None:
            now = self._clock.now()
        if now.tzinfo is None:
            return now.date()
        return self._converter.instant_to_civil(as_instant(now), zone).to_date()

    def build(
        self,
        preset_id: str,
        now: datetime | None = None,
        zone: str | None = None,
    ) -> PresetRange:
        """Compute one preset. Raises ``UnknownPresetError`` for a bad id."""
        preset = self.get_preset(preset_id)
        if preset is None:
            raise UnknownPresetError(preset_id)
        zone = zone or self._default_zone
        return self._materialize(preset, self.today(now, zone), zone)

    def build_all(self, now: datetime | None = None, zone: str | None = None) -> list[PresetRange]:
        """Every preset for one shared "today", in display order."""
        zone = zone or self._default_zone
        today = self.today(now, zone)
        return [self._materialize(preset, today, zone) for preset in PRESETS]

    def _materialize(self, preset: RangePreset, today: date, zone: str) -> PresetRange:
        first, last = preset.bounds(today)
        start = self._converter.civil_to_instant(CivilDateTime.from_date(first), zone)
        end = self._converter.civil_to_instant(CivilDateTime.from_date(last).end_of_day(), zone)
        logger.debug("Built preset %s for %s in %s", preset.id, today, zone)
        return PresetRange(
            id=preset.id,
            label=preset.label,
            zone=zone,
            start_date=first,
            end_date=last,
            start=start,
            end=end,
        )
