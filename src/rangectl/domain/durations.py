"""Duration formatting and parsing, in whole milliseconds."""

from __future__ import annotations

import re

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

_UNIT_MS: dict[str, int] = {
    "ms": 1,
    "s": MS_PER_SECOND,
    "m": MS_PER_MINUTE,
    "h": MS_PER_HOUR,
    "d": MS_PER_DAY,
}

_DURATION_RE = re.compile(r"^\s*(\d+)\s*(ms|s|m|h|d)?\s*$")


def _unit(amount: int, name: str) -> str:
    return f"{amount} {name}{'s' if amount > 1 else ''}"


def format_duration(ms: int) -> str:
    """Render *ms* as its largest non-zero whole unit.

    Only one unit is ever reported, so 26 hours is ``"1 day"``.

    Examples:
        >>> format_duration(2 * MS_PER_HOUR)
        '2 hours'
        >>> format_duration(90 * MS_PER_MINUTE)
        '1 hour'
        >>> format_duration(1500)
        '1 second'
    """
    seconds = ms // MS_PER_SECOND
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24
    if days > 0:
        return _unit(days, "day")
    if hours > 0:
        return _unit(hours, "hour")
    if minutes > 0:
        return _unit(minutes, "minute")
    return _unit(seconds, "second")


def parse_duration(text: str) -> int:
    """Parse ``"90m"``, ``"2h"``, ``"3d"``, ``"45s"``, ``"500ms"`` or bare ms."""
    match = _DURATION_RE.match(text)
    if match is None:
        msg = f"invalid duration {text!r} (expected e.g. 90m, 2h, 3d, 500ms)"
        raise ValueError(msg)
    amount, unit = match.groups()
    return int(amount) * _UNIT_MS[unit or "ms"]
