"""Curated zone catalog and offset value types.

The catalog is deliberately short: it covers the major regions plus UTC and
GMT, not the full IANA registry. Callers must not assume completeness.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

SUPPORTED_ZONES: tuple[str, ...] = (
    # UTC
    "UTC",
    "GMT",
    # Americas
    "America/New_York",
    "America/Chicago",
    "America/Denver",
    "America/Los_Angeles",
    "America/Anchorage",
    "Pacific/Honolulu",
    "America/Toronto",
    "America/Mexico_City",
    "America/Buenos_Aires",
    "America/Sao_Paulo",
    # Europe
    "Europe/London",
    "Europe/Paris",
    "Europe/Berlin",
    "Europe/Amsterdam",
    "Europe/Brussels",
    "Europe/Vienna",
    "Europe/Prague",
    "Europe/Warsaw",
    "Europe/Moscow",
    "Europe/Istanbul",
    # Asia
    "Asia/Dubai",
    "Asia/Kolkata",
    "Asia/Bangkok",
    "Asia/Singapore",
    "Asia/Hong_Kong",
    "Asia/Shanghai",
    "Asia/Tokyo",
    "Asia/Seoul",
    "Asia/Jakarta",
    "Asia/Manila",
    # Australia
    "Australia/Sydney",
    "Australia/Melbourne",
    "Australia/Brisbane",
    "Australia/Perth",
    "Australia/Adelaide",
    # Pacific
    "Pacific/Auckland",
    "Pacific/Fiji",
)

_ZONE_SET = frozenset(SUPPORTED_ZONES)

DEFAULT_ZONE = "UTC"


def is_cataloged(zone: str) -> bool:
    return zone in _ZONE_SET


class DstDetection(StrEnum):
    """How the DST flag on :class:`TimezoneOffset` is decided."""

    HEURISTIC = "heuristic"  # offset now vs. six months later
    RULES = "rules"  # the zone database's own dst() answer


class TimezoneOffset(BaseModel):
    """Offset of a zone at one specific instant.

    Attributes:
        zone: Cataloged zone identifier.
        minutes: Signed minutes ahead of UTC (negative = behind).
        abbreviation: Zone database abbreviation, e.g. ``EST`` or ``+07``.
        is_dst: Whether daylight saving is in effect.
    """

    model_config = {"frozen": True}

    zone: str
    minutes: int
    abbreviation: str
    is_dst: bool

    @property
    def label(self) -> str:
        """``UTC-05:00`` style rendering of :attr:`minutes`."""
        sign = "-" if self.minutes < 0 else "+"
        hours, mins = divmod(abs(self.minutes), 60)
        return f"UTC{sign}{hours:02d}:{mins:02d}"
