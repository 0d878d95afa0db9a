"""Clock capability used wherever "now" matters (presets)."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from rangectl.domain.instants import UTC, as_instant


class Clock(Protocol):
    """Anything that can report the current instant."""

    def now(self) -> datetime: ...


class SystemClock:
    """The host's real-time clock, always returning aware UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedClock:
    """A clock stopped at one instant."""

    def __init__(self, instant: datetime) -> None:
        self._instant = as_instant(instant)

    def now(self) -> datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"
