"""rangectl — timezone-aware date-time ranges: conversion, validation, presets."""

from rangectl.domain.civil import CivilDateTime
from rangectl.domain.ranges import (
    ComparisonFrame,
    DateTimeRange,
    DateTimeValue,
    DateValidation,
    PickerConstraints,
    RangeValidation,
)
from rangectl.domain.zones import SUPPORTED_ZONES, TimezoneOffset
from rangectl.errors import RangectlError, TimezoneError, UnknownPresetError, UnknownTimezoneError
from rangectl.services.presets import PresetGenerator, PresetRange
from rangectl.services.state import PickerState
from rangectl.services.timezone import TimezoneConverter
from rangectl.services.validation import ConstraintValidator, validate_date, validate_range

__version__ = "0.1.0"

__all__ = [
    "SUPPORTED_ZONES",
    "CivilDateTime",
    "ComparisonFrame",
    "ConstraintValidator",
    "DateTimeRange",
    "DateTimeValue",
    "DateValidation",
    "PickerConstraints",
    "PickerState",
    "PresetGenerator",
    "PresetRange",
    "RangeValidation",
    "RangectlError",
    "TimezoneConverter",
    "TimezoneError",
    "TimezoneOffset",
    "UnknownPresetError",
    "UnknownTimezoneError",
    "__version__",
    "validate_date",
    "validate_range",
]
