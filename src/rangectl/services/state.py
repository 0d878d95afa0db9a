"""PickerState — immutable snapshot of a picker's working values.

Every edit produces a new snapshot through a pure transition; nothing is
mutated in place. Date edits are checked on their own with
``validate_date``; whole-range edits run ``validate_range``. Only the first
error is kept on the snapshot (the full list is available from the
validator).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from rangectl.domain.ranges import DateTimeRange, DateTimeValue, PickerConstraints, RangeValidation
from rangectl.domain.zones import DEFAULT_ZONE, is_cataloged
from rangectl.errors import UnknownTimezoneError
from rangectl.services.validation import ConstraintValidator

_default_validator = ConstraintValidator()


class ActiveField(StrEnum):
    START_DATE = "startDate"
    START_TIME = "startTime"
    END_DATE = "endDate"
    END_TIME = "endTime"


class PickerState(BaseModel):
    """What the picker currently holds. Transitions return new instances."""

    model_config = {"frozen": True}

    range: DateTimeRange = Field(default_factory=DateTimeRange)
    active_field: ActiveField | None = None
    zone: str = DEFAULT_ZONE
    constraints: PickerConstraints = Field(default_factory=PickerConstraints)
    error: str | None = None

    @field_validator("zone")
    @classmethod
    def _check_zone(cls, value: str) -> str:
        if not is_cataloged(value):
            msg = f"{value!r} is not a supported timezone"
            raise ValueError(msg)
        return value

    # --- Single-field edits ---

    def _with_side(self, side: str, value: DateTimeValue, error: str | None) -> PickerState:
        new_range = self.range.model_copy(update={side: value})
        return self.model_copy(update={"range": new_range, "error": error})

    def _date_error(self, date: Any, validator: ConstraintValidator | None) -> str | None:
        if date is None:
            return None
        check = (validator or _default_validator).validate_date(date, self.constraints)
        return check.error

    def with_start_date(self, date: Any, validator: ConstraintValidator | None = None) -> PickerState:
        side = DateTimeValue(date=date, time=self.range.start.time)
        return self._with_side("start", side, self._date_error(side.date, validator))

    def with_end_date(self, date: Any, validator: ConstraintValidator | None = None) -> PickerState:
        side = DateTimeValue(date=date, time=self.range.end.time)
        return self._with_side("end", side, self._date_error(side.date, validator))

    def with_start_time(self, time: str | None) -> PickerState:
        side = DateTimeValue(date=self.range.start.date, time=time)
        return self._with_side("start", side, self.error)

    def with_end_time(self, time: str | None) -> PickerState:
        side = DateTimeValue(date=self.range.end.date, time=time)
        return self._with_side("end", side, self.error)

    # --- Whole-state edits ---

    def with_range(
        self, new_range: DateTimeRange, validator: ConstraintValidator | None = None
    ) -> PickerState:
        result = self.check(validator, new_range)
        return self.model_copy(update={"range": new_range, "error": result.first_error})

    def with_zone(self, zone: str) -> PickerState:
        """Switch the reference zone. Raises ``UnknownTimezoneError`` for an uncataloged id."""
        if not is_cataloged(zone):
            raise UnknownTimezoneError(zone)
        return self.model_copy(update={"zone": zone})

    def with_active_field(self, field: ActiveField | str | None) -> PickerState:
        active = None if field is None else ActiveField(field)
        return self.model_copy(update={"active_field": active})

    def with_constraints(self, constraints: PickerConstraints) -> PickerState:
        return self.model_copy(update={"constraints": constraints})

    def check(
        self,
        validator: ConstraintValidator | None = None,
        date_range: DateTimeRange | None = None,
    ) -> RangeValidation:
        """Validate *date_range* (default: the current range) in this zone."""
        return (validator or _default_validator).validate_range(
            date_range or self.range, self.constraints, self.zone
        )

    def validated(self, validator: ConstraintValidator | None = None) -> PickerState:
        """Snapshot with ``error`` refreshed from a full range validation."""
        return self.model_copy(update={"error": self.check(validator).first_error})

    def reset(self) -> PickerState:
        """Clear the range, focus and error; keep zone and constraints."""
        return self.model_copy(
            update={"range": DateTimeRange(), "active_field": None, "error": None}
        )
