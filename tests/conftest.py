"""Shared pytest fixtures for rangectl tests."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from rangectl.config.settings import RangeSettings
from rangectl.domain.instants import UTC
from rangectl.infrastructure.clock import FixedClock
from rangectl.services.presets import PresetGenerator
from rangectl.services.timezone import TimezoneConverter
from rangectl.services.validation import ConstraintValidator

# Tuesday, mid-afternoon UTC; the same calendar day in every Americas and
# European zone of the catalog.
FIXED_NOW = datetime(2025, 6, 10, 15, 0, tzinfo=UTC)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def converter() -> TimezoneConverter:
    return TimezoneConverter()


@pytest.fixture
def validator() -> ConstraintValidator:
    """Civil-frame validator, the default configuration."""
    return ConstraintValidator()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(FIXED_NOW)


@pytest.fixture
def presets(fixed_clock: FixedClock, converter: TimezoneConverter) -> PresetGenerator:
    return PresetGenerator(fixed_clock, converter)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> RangeSettings:
    """Settings built with no config file and no RANGECTL_* env vars."""
    monkeypatch.delenv("RANGECTL_CONFIG", raising=False)
    return RangeSettings.from_cli(cwd=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory so no rangectl.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.delenv("RANGECTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
