"""BaseService — settings-driven wiring shared by CLI-facing services.

Builds the converter, validator and preset generator from one
:class:`RangeSettings` so every operation in an invocation sees the same
zone database, DST policy and comparison frame.
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import structlog

from rangectl.errors import RangectlError
from rangectl.infrastructure.clock import Clock, SystemClock
from rangectl.services.presets import PresetGenerator
from rangectl.services.result import ServiceResult
from rangectl.services.timezone import TimezoneConverter
from rangectl.services.validation import ConstraintValidator

if TYPE_CHECKING:
    from rangectl.config.settings import RangeSettings
    from rangectl.infrastructure.zonedb import ZoneBackend

log = structlog.get_logger(__name__)


class BaseService:
    """Common construction and error mapping for service classes.

    Usage::

        class PickerService(BaseService):
            def list_zones(self) -> ServiceResult:
                return ServiceResult.success("list_zones", {...})
    """

    def __init__(
        self,
        settings: RangeSettings,
        *,
        clock: Clock | None = None,
        backend: ZoneBackend | None = None,
    ) -> None:
        self._settings = settings
        self._clock: Clock = clock or SystemClock()
        self._backend = backend

    @property
    def zone(self) -> str:
        return self._settings.effective_zone

    @cached_property
    def converter(self) -> TimezoneConverter:
        return TimezoneConverter(
            self._backend, dst_detection=self._settings.timezone.dst_detection
        )

    @cached_property
    def validator(self) -> ConstraintValidator:
        return ConstraintValidator(
            self.converter, frame=self._settings.validation.comparison_frame
        )

    @cached_property
    def presets(self) -> PresetGenerator:
        return PresetGenerator(self._clock, self.converter, default_zone=self.zone)

    def _failure(self, op: str, exc: RangectlError) -> ServiceResult:
        """Turn a domain exception into an ``ok=False`` result."""
        log.debug("service.failure", op=op, code=exc.code, error=str(exc))
        detail = {key: value for key, value in vars(exc).items() if not key.startswith("_")}
        return ServiceResult.failure(op, exc.code, str(exc), detail=detail)
