"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``RANGECTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``rangectl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from rangectl.config.discovery import find_config
from rangectl.config.models import ConstraintsConfig, TimezoneConfig, ValidationConfig

# TOML file in effect while a RangeSettings instance is being constructed.
_active_toml: ContextVar[Path | None] = ContextVar("_active_toml", default=None)


class RangeSettings(BaseSettings):
    """Settings for the rangectl CLI and the services it builds.

    Attributes:
        config_path: The TOML file that was loaded, if any.
        zone: Per-invocation zone override (``--zone``); falls back to
            ``timezone.default_zone``.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="RANGECTL_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    zone: str | None = None

    # --- TOML sections ---
    timezone: TimezoneConfig = Field(default_factory=TimezoneConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    constraints: ConstraintsConfig = Field(default_factory=ConstraintsConfig)

    @property
    def effective_zone(self) -> str:
        return self.zone or self.timezone.default_zone

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        toml_path = _active_toml.get()
        if toml_path is None:
            return (init_settings, env_settings)
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> RangeSettings:
        """Construct settings from a CLI invocation.

        Discovers ``rangectl.toml`` via walk-up from *cwd* unless an explicit
        *config_path* is given. Flags left as ``None`` do not override lower
        layers. Broken TOML or invalid values surface as ``ClickException``.
        """
        import click

        toml_path: Path | None
        if config_path:
            p = Path(config_path)
            toml_path = p if p.is_file() else None
        else:
            toml_path = find_config(cwd)

        if toml_path is not None:
            try:
                tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

        overrides = {key: value for key, value in cli_flags.items() if value is not None}
        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **overrides)
        except ValidationError as exc:
            msg = f"Invalid configuration: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _active_toml.reset(token)
