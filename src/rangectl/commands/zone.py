"""Command group: the zone catalog, offsets and instant/civil conversion."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from rangectl.commands._base import CIVIL, INSTANT, RangeGroup
from rangectl.services.timezone import FORMAT_STYLES

if TYPE_CHECKING:
    from rangectl.commands._context import AppContext
    from rangectl.domain.civil import CivilDateTime

_ZONE_EXAMPLES = """\
  rangectl zone list
  rangectl zone info --zone America/New_York
  rangectl zone to-utc 2025-01-15T09:00 --zone America/New_York
  rangectl zone from-utc 2025-07-01T12:00:00Z --zone Europe/Berlin
  rangectl zone format 2025-01-15T12:00:00Z --zone Asia/Tokyo --style long"""

_zone_option = click.option(
    "-z", "--zone", "zone_id", default=None, help="Zone identifier (defaults to the configured zone)."
)


@click.group(cls=RangeGroup, examples=_ZONE_EXAMPLES)
def zone() -> None:
    """Inspect supported zones and convert between civil time and UTC."""


@zone.command("list", examples="  rangectl zone list\n  rangectl --json zone list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List the supported zone identifiers."""
    app.emit(app.service.list_zones())


@zone.command(
    examples="""\
  rangectl zone info --zone Europe/London
  rangectl zone info --zone America/New_York --at 2025-07-01T12:00:00Z"""
)
@_zone_option
@click.option("--at", "instant", type=INSTANT, default=None, help="Instant to inspect (default: now).")
@click.pass_obj
def info(app: AppContext, zone_id: str | None, instant: datetime | None) -> None:
    """Show offset, abbreviation and DST flag of a zone."""
    app.emit(app.service.zone_info(instant, zone_id))


@zone.command(
    "to-utc",
    examples="""\
  rangectl zone to-utc 2025-01-15T09:00 --zone America/New_York
  rangectl -q zone to-utc 2025-03-09T02:30 --zone America/New_York""",
)
@click.argument("civil", type=CIVIL)
@_zone_option
@click.pass_obj
def to_utc(app: AppContext, civil: CivilDateTime, zone_id: str | None) -> None:
    """Resolve a wall-clock CIVIL value in a zone to a UTC instant."""
    app.emit(app.service.to_utc(civil, zone_id))


@zone.command(
    "from-utc",
    examples="  rangectl zone from-utc 2025-01-15T14:00:00Z --zone America/New_York",
)
@click.argument("instant", type=INSTANT)
@_zone_option
@click.pass_obj
def from_utc(app: AppContext, instant: datetime, zone_id: str | None) -> None:
    """Show the wall-clock fields of a UTC INSTANT in a zone."""
    app.emit(app.service.from_utc(instant, zone_id))


@zone.command(
    "format",
    examples="""\
  rangectl zone format 2025-01-15T12:00:00Z --zone America/New_York
  rangectl zone format 2025-01-15T12:00:00Z --style long""",
)
@click.argument("instant", type=INSTANT)
@_zone_option
@click.option(
    "--style", type=click.Choice(FORMAT_STYLES), default=None, help="Display style (default: config)."
)
@click.pass_obj
def format_cmd(app: AppContext, instant: datetime, zone_id: str | None, style: str | None) -> None:
    """Render an INSTANT as en-US display text in a zone."""
    app.emit(app.service.format_in_zone(instant, zone_id, style=style))
