"""Zone database access behind a small protocol.

:class:`ZoneInfoBackend` reads the stdlib ``zoneinfo`` database (backed by the
``tzdata`` distribution when the host has no system tz files). Any other
backend only needs the four methods of :class:`ZoneBackend`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from functools import lru_cache
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rangectl.domain.civil import CivilDateTime
from rangectl.domain.instants import as_instant

logger = logging.getLogger(__name__)


class ZoneBackend(Protocol):
    """Read-only lookups a timezone database must answer."""

    def has_zone(self, zone: str) -> bool: ...

    def wall_clock(self, instant: datetime, zone: str) -> CivilDateTime: ...

    def abbreviation(self, instant: datetime, zone: str) -> str: ...

    def dst_minutes(self, instant: datetime, zone: str) -> int: ...


@lru_cache(maxsize=128)
def load_zone(zone: str) -> ZoneInfo:
    """Load (and memoize) a ``ZoneInfo``. Failures are not cached."""
    return ZoneInfo(zone)


class ZoneInfoBackend:
    """:class:`ZoneBackend` over the stdlib ``zoneinfo`` module."""

    def has_zone(self, zone: str) -> bool:
        try:
            load_zone(zone)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            logger.debug("Zone %s not found in the zone database", zone)
            return False
        return True

    def _localize(self, instant: datetime, zone: str) -> datetime:
        return as_instant(instant).astimezone(load_zone(zone))

    def wall_clock(self, instant: datetime, zone: str) -> CivilDateTime:
        return CivilDateTime.from_datetime(self._localize(instant, zone))

    def abbreviation(self, instant: datetime, zone: str) -> str:
        return self._localize(instant, zone).tzname() or zone

    def dst_minutes(self, instant: datetime, zone: str) -> int:
        dst = self._localize(instant, zone).dst() or timedelta(0)
        return int(dst.total_seconds() // 60)
