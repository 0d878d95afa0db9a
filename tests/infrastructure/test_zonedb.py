"""Tests for the zoneinfo-backed zone database and the clocks."""

from __future__ import annotations

from datetime import datetime

from rangectl.domain.instants import UTC
from rangectl.infrastructure.clock import FixedClock, SystemClock
from rangectl.infrastructure.zonedb import ZoneInfoBackend, load_zone


class TestZoneInfoBackend:
    def test_has_zone(self) -> None:
        backend = ZoneInfoBackend()
        assert backend.has_zone("America/New_York")
        assert not backend.has_zone("Mars/Olympus")

    def test_has_zone_rejects_path_like_keys(self) -> None:
        assert not ZoneInfoBackend().has_zone("../etc/passwd")

    def test_wall_clock(self) -> None:
        moment = datetime(2025, 1, 15, 12, 0, tzinfo=UTC)
        local = ZoneInfoBackend().wall_clock(moment, "America/New_York")
        assert local.isoformat() == "2025-01-15T07:00:00"

    def test_abbreviation(self) -> None:
        backend = ZoneInfoBackend()
        assert backend.abbreviation(datetime(2025, 1, 15, tzinfo=UTC), "America/New_York") == "EST"
        assert backend.abbreviation(datetime(2025, 7, 15, tzinfo=UTC), "America/New_York") == "EDT"

    def test_dst_minutes(self) -> None:
        backend = ZoneInfoBackend()
        assert backend.dst_minutes(datetime(2025, 7, 15, tzinfo=UTC), "Europe/Berlin") == 60
        assert backend.dst_minutes(datetime(2025, 1, 15, tzinfo=UTC), "Europe/Berlin") == 0

    def test_load_zone_is_cached(self) -> None:
        assert load_zone("Asia/Tokyo") is load_zone("Asia/Tokyo")


class TestClocks:
    def test_system_clock_is_aware_utc(self) -> None:
        assert SystemClock().now().tzinfo is UTC

    def test_fixed_clock(self) -> None:
        instant = datetime(2025, 6, 10, 15, 0, tzinfo=UTC)
        clock = FixedClock(instant)
        assert clock.now() == instant
        assert clock.now() == clock.now()

    def test_fixed_clock_normalises_naive(self) -> None:
        assert FixedClock(datetime(2025, 6, 10, 15, 0)).now().tzinfo is UTC
