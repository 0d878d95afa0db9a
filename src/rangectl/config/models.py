"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rangectl.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator

from rangectl.domain.civil import CivilDateTime, as_calendar_day, as_civil
from rangectl.domain.durations import parse_duration
from rangectl.domain.ranges import ComparisonFrame, PickerConstraints
from rangectl.domain.zones import DEFAULT_ZONE, DstDetection, is_cataloged


class TimezoneConfig(BaseModel):
    """[timezone] section."""

    model_config = {"frozen": True}

    default_zone: str = DEFAULT_ZONE
    dst_detection: DstDetection = DstDetection.HEURISTIC
    format_style: str = Field(default="short", pattern=r"^(short|long)$")

    @field_validator("default_zone")
    @classmethod
    def _check_zone(cls, value: str) -> str:
        if not is_cataloged(value):
            msg = f"default_zone {value!r} is not a supported timezone"
            raise ValueError(msg)
        return value


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    comparison_frame: ComparisonFrame = ComparisonFrame.CIVIL


class ConstraintsConfig(BaseModel):
    """[constraints] section — defaults applied to every validation.

    Durations accept integer milliseconds or strings such as ``"2h"``.
    """

    model_config = {"frozen": True}

    min_date: CivilDateTime | None = None
    max_date: CivilDateTime | None = None
    blackout_dates: list[date] = Field(default_factory=list)
    disabled_days: list[int] = Field(default_factory=list)
    min_duration: int | None = Field(default=None, ge=0)
    max_duration: int | None = Field(default=None, ge=0)

    @field_validator("min_date", "max_date", mode="before")
    @classmethod
    def _coerce_bound(cls, value: Any) -> Any:
        return None if value is None else as_civil(value)

    @field_validator("blackout_dates", mode="before")
    @classmethod
    def _coerce_blackouts(cls, value: Any) -> Any:
        return [as_calendar_day(item) for item in value or []]

    @field_validator("disabled_days")
    @classmethod
    def _check_weekdays(cls, value: list[int]) -> list[int]:
        bad = sorted(day for day in value if not 0 <= day <= 6)
        if bad:
            msg = f"weekday indices must be within 0-6, got {bad}"
            raise ValueError(msg)
        return value

    @field_validator("min_duration", "max_duration", mode="before")
    @classmethod
    def _coerce_duration(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_duration(value)
        return value

    def to_constraints(self, **overrides: Any) -> PickerConstraints:
        """Build PickerConstraints, letting non-empty *overrides* win."""
        values: dict[str, Any] = self.model_dump()
        for key, value in overrides.items():
            if value is None or value == [] or value == ():
                continue
            values[key] = value
        return PickerConstraints.model_validate(values)


class RangeConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    timezone: TimezoneConfig = Field(default_factory=TimezoneConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    constraints: ConstraintsConfig = Field(default_factory=ConstraintsConfig)
