"""Command group: relative range presets (today, last 7 days, ...)."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from rangectl.commands._base import INSTANT, RangeGroup

if TYPE_CHECKING:
    from rangectl.commands._context import AppContext

_PRESET_EXAMPLES = """\
  rangectl preset list
  rangectl preset list --zone Asia/Tokyo
  rangectl preset show last7days --now 2025-06-10T12:00:00Z
  rangectl -q preset list"""

_now_option = click.option(
    "--now", type=INSTANT, default=None, help="Reference instant (default: current time)."
)
_zone_option = click.option("-z", "--zone", "zone_id", default=None, help="Zone that defines 'today'.")


@click.group(cls=RangeGroup, examples=_PRESET_EXAMPLES)
def preset() -> None:
    """Compute relative ranges such as "Last 7 Days"."""


@preset.command("list", examples="  rangectl preset list --now 2025-06-10T12:00:00Z")
@_now_option
@_zone_option
@click.pass_obj
def list_cmd(app: AppContext, now: datetime | None, zone_id: str | None) -> None:
    """Compute every preset for the same 'today'."""
    app.emit(app.service.list_presets(now, zone_id))


@preset.command(examples="  rangectl preset show thisMonth --zone Europe/Paris")
@click.argument("preset_id")
@_now_option
@_zone_option
@click.pass_obj
def show(app: AppContext, preset_id: str, now: datetime | None, zone_id: str | None) -> None:
    """Compute one preset by PRESET_ID."""
    app.emit(app.service.show_preset(preset_id, now, zone_id))
