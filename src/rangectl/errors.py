"""Exception hierarchy for rangectl.

Business-rule invalidity (a date outside its bounds, a range that is too
short) is never raised: it comes back as a validation result. Exceptions are
reserved for defects in the call itself, such as a zone identifier that is
not in the catalog.
"""

from __future__ import annotations


class RangectlError(Exception):
    """Base class for every error raised by rangectl."""

    code = "RANGECTL_ERROR"


class TimezoneError(RangectlError):
    """Raised when a timezone operation cannot be carried out."""

    code = "TIMEZONE_ERROR"


class UnknownTimezoneError(TimezoneError):
    """The zone identifier is not cataloged or cannot be loaded."""

    code = "UNKNOWN_TIMEZONE"

    def __init__(self, zone: str) -> None:
        super().__init__(f"Unknown timezone: {zone!r}")
        self.zone = zone


class UnknownPresetError(RangectlError):
    """No preset is registered under the requested id."""

    code = "UNKNOWN_PRESET"

    def __init__(self, preset_id: str) -> None:
        super().__init__(f"Unknown preset: {preset_id!r}")
        self.preset_id = preset_id
