"""PickerService — CLI-facing operations over the conversion, validation and
preset engines.

Every method returns a :class:`ServiceResult`. Domain exceptions
(:class:`~rangectl.errors.RangectlError`) become ``ok=False`` results with the
exception's code; validation failures become ``VALIDATION_FAILED`` with the
ordered messages in ``error.detail["errors"]``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

import structlog

from rangectl.domain.civil import as_civil
from rangectl.domain.durations import format_duration
from rangectl.domain.instants import format_instant
from rangectl.domain.ranges import ComparisonFrame, DateTimeRange, PickerConstraints
from rangectl.errors import RangectlError
from rangectl.services.base import BaseService
from rangectl.services.presets import PresetRange
from rangectl.services.result import VALIDATION_FAILED, ServiceResult
from rangectl.services.validation import ConstraintValidator

log = structlog.get_logger(__name__)


def _preset_payload(preset: PresetRange) -> dict[str, Any]:
    return {
        "id": preset.id,
        "label": preset.label,
        "zone": preset.zone,
        "start_date": preset.start_date.isoformat(),
        "start_time": preset.start_time,
        "end_date": preset.end_date.isoformat(),
        "end_time": preset.end_time,
        "start": format_instant(preset.start),
        "end": format_instant(preset.end),
        "days": preset.day_count,
    }


class PickerService(BaseService):
    """Zone conversion, constraint validation and preset operations."""

    # --- Zones ---

    def list_zones(self) -> ServiceResult:
        zones = self.converter.list_supported_zones()
        items = [{"id": zone, "default": zone == self.zone} for zone in zones]
        return ServiceResult.success("list_zones", {"items": items, "count": len(items)})

    def zone_info(self, instant: datetime | None = None, zone: str | None = None) -> ServiceResult:
        """Offset, abbreviation and DST flag of a zone at an instant (default now)."""
        op = "zone_info"
        zone = zone or self.zone
        instant = instant or self._clock.now()
        try:
            info = self.converter.get_timezone_info(instant, zone)
            local = self.converter.instant_to_civil(instant, zone)
        except RangectlError as exc:
            return self._failure(op, exc)
        return ServiceResult.success(
            op,
            {
                "zone": info.zone,
                "instant": format_instant(instant),
                "local": local.isoformat(),
                "offset": info.label,
                "offset_minutes": info.minutes,
                "abbreviation": info.abbreviation,
                "is_dst": info.is_dst,
            },
            meta={"dst_detection": self._settings.timezone.dst_detection.value},
        )

    def to_utc(self, civil: Any, zone: str | None = None) -> ServiceResult:
        """Resolve a wall-clock value in *zone* to a UTC instant.

        Adds a warning when the wall-clock value falls in a DST gap and was
        shifted forward.
        """
        op = "to_utc"
        zone = zone or self.zone
        fields = as_civil(civil)
        try:
            instant = self.converter.civil_to_instant(fields, zone)
            shown = self.converter.instant_to_civil(instant, zone)
        except RangectlError as exc:
            return self._failure(op, exc)

        warnings: list[str] = []
        if shown != fields:
            warnings.append(f"{fields} does not exist in {zone}; resolved to {shown}")
            log.info("picker.gap_resolved", zone=zone, civil=str(fields), resolved=str(shown))
        return ServiceResult.success(
            op,
            {"zone": zone, "civil": fields.isoformat(), "instant": format_instant(instant)},
            warnings=warnings,
        )

    def from_utc(self, instant: datetime, zone: str | None = None) -> ServiceResult:
        """Wall-clock fields of a UTC instant in *zone*."""
        op = "from_utc"
        zone = zone or self.zone
        try:
            local = self.converter.instant_to_civil(instant, zone)
            offset = self.converter.get_timezone_info(instant, zone)
        except RangectlError as exc:
            return self._failure(op, exc)
        return ServiceResult.success(
            op,
            {
                "zone": zone,
                "instant": format_instant(instant),
                "civil": local.isoformat(),
                "offset": offset.label,
            },
        )

    def format_in_zone(
        self, instant: datetime, zone: str | None = None, *, style: str | None = None
    ) -> ServiceResult:
        op = "format_in_zone"
        zone = zone or self.zone
        style = style or self._settings.timezone.format_style
        try:
            text = self.converter.format_in_timezone(instant, zone, style)
        except RangectlError as exc:
            return self._failure(op, exc)
        return ServiceResult.success(
            op, {"zone": zone, "style": style, "instant": format_instant(instant), "text": text}
        )

    # --- Validation ---

    def check_date(self, date: Any, constraints: PickerConstraints) -> ServiceResult:
        op = "validate_date"
        value = as_civil(date)
        check = self.validator.validate_date(value, constraints)
        if not check.valid:
            return ServiceResult.failure(
                op,
                VALIDATION_FAILED,
                check.error or "Invalid date",
                detail={"date": value.isoformat(), "errors": [check.error]},
            )
        return ServiceResult.success(op, {"date": value.isoformat(), "valid": True})

    def check_range(
        self,
        date_range: DateTimeRange,
        constraints: PickerConstraints,
        zone: str | None = None,
        *,
        frame: ComparisonFrame | str | None = None,
    ) -> ServiceResult:
        """Validate a full range; every message is kept, in evaluation order.

        *frame* overrides the configured comparison frame for this call.
        """
        op = "validate_range"
        zone = zone or self.zone
        validator = self.validator
        if frame is not None and ComparisonFrame(frame) is not validator.frame:
            validator = ConstraintValidator(self.converter, frame=frame)
        meta = {"frame": validator.frame.value, "zone": zone}
        try:
            result = validator.validate_range(date_range, constraints, zone)
        except RangectlError as exc:
            return self._failure(op, exc)

        log.debug("picker.validate_range", valid=result.valid, errors=len(result.errors))
        if not result.valid:
            return ServiceResult.failure(
                op,
                VALIDATION_FAILED,
                result.first_error or "Invalid range",
                detail={"errors": list(result.errors)},
            )

        start = date_range.start.combined()
        end = date_range.end.combined()
        duration = validator.duration_ms(date_range, zone)
        return ServiceResult.success(
            op,
            {
                "valid": True,
                "start": start.isoformat(),
                "end": end.isoformat(),
                "duration_ms": duration,
                "duration": format_duration(duration),
            },
            meta=meta,
        )

    # --- Presets ---

    def list_presets(self, now: datetime | None = None, zone: str | None = None) -> ServiceResult:
        op = "list_presets"
        try:
            presets = self.presets.build_all(now, zone or self.zone)
        except RangectlError as exc:
            return self._failure(op, exc)
        items = [_preset_payload(preset) for preset in presets]
        return ServiceResult.success(op, {"items": items, "count": len(items)})

    def show_preset(
        self, preset_id: str, now: datetime | None = None, zone: str | None = None
    ) -> ServiceResult:
        op = "show_preset"
        try:
            preset = self.presets.build(preset_id, now, zone or self.zone)
        except RangectlError as exc:
            return self._failure(op, exc)
        return ServiceResult.success(op, _preset_payload(preset))

