"""TimezoneConverter — instant / civil-time conversion for cataloged zones.

All operations keep the semantic instant fixed: a DST transition changes the
wall-clock rendering of an instant, never the instant itself.

INVARIANT: Every public method rejects identifiers outside the catalog with
:class:`~rangectl.errors.UnknownTimezoneError`; no method falls back to a zero
or guessed offset.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any

from rangectl.domain.civil import MINUTES_PER_DAY, MONTH_NAMES, CivilDateTime, as_civil, shift_months
from rangectl.domain.instants import UTC, as_instant
from rangectl.domain.zones import SUPPORTED_ZONES, DstDetection, TimezoneOffset, is_cataloged
from rangectl.errors import UnknownTimezoneError
from rangectl.infrastructure.zonedb import ZoneBackend, ZoneInfoBackend

logger = logging.getLogger(__name__)

# Window sampled on either side of a nominal instant when resolving civil
# times. Assumes at most one transition per zone within it.
_TRANSITION_WINDOW = timedelta(days=1)

FORMAT_STYLES = ("short", "long")


class TimezoneConverter:
    """Convert between instants and civil time in cataloged zones.

    Args:
        backend: Zone database capability. Defaults to ``zoneinfo``.
        dst_detection: How :meth:`get_timezone_info` decides ``is_dst``.
    """

    def __init__(
        self,
        backend: ZoneBackend | None = None,
        *,
        dst_detection: DstDetection | str = DstDetection.HEURISTIC,
    ) -> None:
        self._backend: ZoneBackend = backend or ZoneInfoBackend()
        self._dst_detection = DstDetection(dst_detection)

    # --- Catalog ---

    def list_supported_zones(self) -> list[str]:
        """The curated catalog in display order. Not the full IANA registry."""
        return list(SUPPORTED_ZONES)

    def resolve_zone(self, zone: str) -> str:
        """Return *zone* unchanged if usable, else raise ``UnknownTimezoneError``."""
        if not is_cataloged(zone) or not self._backend.has_zone(zone):
            raise UnknownTimezoneError(zone)
        return zone

    # --- Offsets ---

    def _offset(self, instant: datetime, zone: str) -> int:
        moment = as_instant(instant)
        utc = CivilDateTime.from_datetime(moment)
        local = self._backend.wall_clock(moment, zone)
        day_delta = (local.to_date() - utc.to_date()).days
        return day_delta * MINUTES_PER_DAY + local.minute_of_day - utc.minute_of_day

    def get_offset_minutes(self, instant: datetime, zone: str) -> int:
        """Signed minutes *zone* is ahead of UTC at *instant*.

        Computed from the wall-clock fields of the same instant rendered in
        UTC and in *zone*, corrected for the two landing on different days.
        """
        return self._offset(instant, self.resolve_zone(zone))

    def is_daylight_savings(self, instant: datetime, zone: str) -> bool:
        """Heuristic DST test: offset now exceeds the offset six months later.

        Assumes exactly one of the two samples lies outside DST. Zones with
        irregular or non-annual DST calendars can be misclassified; see
        :meth:`dst_from_rules` for the zone database's own answer.
        """
        zone = self.resolve_zone(zone)
        moment = as_instant(instant)
        later = shift_months(moment, 6)
        return self._offset(moment, zone) > self._offset(later, zone)

    def dst_from_rules(self, instant: datetime, zone: str) -> bool:
        """DST flag read from the zone database's transition rules."""
        zone = self.resolve_zone(zone)
        return self._backend.dst_minutes(as_instant(instant), zone) != 0

    def get_timezone_info(self, instant: datetime, zone: str) -> TimezoneOffset:
        """Offset, abbreviation and DST flag of *zone* at *instant*."""
        zone = self.resolve_zone(zone)
        moment = as_instant(instant)
        if self._dst_detection is DstDetection.RULES:
            is_dst = self.dst_from_rules(moment, zone)
        else:
            is_dst = self.is_daylight_savings(moment, zone)
        return TimezoneOffset(
            zone=zone,
            minutes=self._offset(moment, zone),
            abbreviation=self._backend.abbreviation(moment, zone),
            is_dst=is_dst,
        )

    # --- Conversion ---

    def instant_to_civil(self, instant: datetime, zone: str) -> CivilDateTime:
        """Wall-clock fields of *instant* as displayed in *zone*."""
        zone = self.resolve_zone(zone)
        return self._backend.wall_clock(as_instant(instant), zone)

    def civil_to_instant(self, civil: Any, zone: str) -> datetime:
        """Resolve civil fields in *zone* to an aware UTC instant.

        The civil fields are first read as if they were UTC (the nominal
        instant). Each offset the zone uses around that nominal instant
        yields a candidate, which is kept only if the zone reports that same
        offset at the candidate itself:

        * one candidate: the unambiguous answer;
        * two candidates (fall-back overlap): the earlier instant wins;
        * none (spring-forward gap): the pre-transition offset is applied,
          which moves the nonexistent time forward by the gap.
        """
        zone = self.resolve_zone(zone)
        fields = as_civil(civil)
        nominal = fields.to_datetime().replace(tzinfo=UTC)

        offsets = {
            self._offset(nominal - _TRANSITION_WINDOW, zone),
            self._offset(nominal, zone),
            self._offset(nominal + _TRANSITION_WINDOW, zone),
        }
        candidates = sorted(
            nominal - timedelta(minutes=offset)
            for offset in offsets
            if self._offset(nominal - timedelta(minutes=offset), zone) == offset
        )

        if len(candidates) == 1:
            return candidates[0]
        if candidates:
            logger.debug("Ambiguous civil time %s in %s; using earlier instant", fields, zone)
            return candidates[0]

        before = self._offset(nominal - _TRANSITION_WINDOW, zone)
        resolved = nominal - timedelta(minutes=before)
        logger.debug("Civil time %s does not exist in %s; resolved to %s", fields, zone, resolved)
        return resolved

    # --- Day boundaries ---

    def start_of_day(self, instant: datetime, zone: str) -> datetime:
        """Instant of local midnight on *instant*'s calendar day in *zone*."""
        local = self.instant_to_civil(instant, zone)
        return self.civil_to_instant(local.start_of_day(), zone)

    def end_of_day(self, instant: datetime, zone: str) -> datetime:
        """Instant of local 23:59:59.999 on *instant*'s calendar day in *zone*."""
        local = self.instant_to_civil(instant, zone)
        return self.civil_to_instant(local.end_of_day(), zone)

    # --- Display ---

    def format_in_timezone(self, instant: datetime, zone: str, style: str = "short") -> str:
        """en-US style display string.

        ``short``: ``01/15/2025, 07:00:00``.
        ``long``: ``January 15, 2025 at 07:00:00``.
        """
        if style not in FORMAT_STYLES:
            msg = f"style must be one of {FORMAT_STYLES}, got {style!r}"
            raise ValueError(msg)
        local = self.instant_to_civil(instant, zone)
        clock = f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
        if style == "long":
            return f"{MONTH_NAMES[local.month]} {local.day:02d}, {local.year} at {clock}"
        return f"{local.month:02d}/{local.day:02d}/{local.year}, {clock}"
