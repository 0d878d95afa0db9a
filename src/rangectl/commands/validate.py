"""Command group: check dates and ranges against picker constraints."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from rangectl.commands._base import CIVIL, DURATION, TIME, WEEKDAY, RangeGroup
from rangectl.domain.ranges import ComparisonFrame, DateTimeRange, DateTimeValue

if TYPE_CHECKING:
    from rangectl.commands._context import AppContext
    from rangectl.domain.civil import CivilDateTime
    from rangectl.domain.ranges import PickerConstraints

_VALIDATE_EXAMPLES = """\
  rangectl validate date 2025-01-15 --min-date 2025-01-20
  rangectl validate date 2025-01-18 --disable-day sat --disable-day sun
  rangectl validate range --start-date 2025-01-15 --start-time 09:00 \\
      --end-date 2025-01-15 --end-time 10:00 --min-duration 2h
  rangectl --json validate range --start-date 2025-03-08 --start-time 12:00 \\
      --end-date 2025-03-09 --end-time 12:00 --frame instant -z America/New_York"""


def _constraint_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Constraint flags shared by both validate commands.

    Values given here override the ``[constraints]`` section of the config.
    """
    options = [
        click.option("--min-date", type=CIVIL, default=None, help="Earliest allowed date."),
        click.option("--max-date", type=CIVIL, default=None, help="Latest allowed date."),
        click.option(
            "--blackout", "blackout_dates", type=CIVIL, multiple=True, help="Unavailable day (repeatable)."
        ),
        click.option(
            "--disable-day",
            "disabled_days",
            type=WEEKDAY,
            multiple=True,
            help="Disabled weekday, 0-6 or sun..sat (repeatable).",
        ),
        click.option("--min-duration", type=DURATION, default=None, help="e.g. 30m, 2h, 1d."),
        click.option("--max-duration", type=DURATION, default=None, help="e.g. 30m, 2h, 1d."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _constraints(app: AppContext, options: dict[str, Any]) -> PickerConstraints:
    blackouts = [value.to_date() for value in options.pop("blackout_dates", ())]
    return app.settings.constraints.to_constraints(blackout_dates=blackouts, **options)


@click.group(cls=RangeGroup, examples=_VALIDATE_EXAMPLES)
def validate() -> None:
    """Check dates and ranges against min/max, blackout and duration rules."""


@validate.command(
    "date",
    examples="""\
  rangectl validate date 2025-01-15 --min-date 2025-01-20
  rangectl validate date 2025-12-25 --blackout 2025-12-25""",
)
@click.argument("value", type=CIVIL)
@_constraint_options
@click.pass_obj
def date_cmd(app: AppContext, value: CivilDateTime, **options: Any) -> None:
    """Check one date VALUE (YYYY-MM-DD[THH:MM])."""
    app.emit(app.service.check_date(value, _constraints(app, options)))


@validate.command(
    "range",
    examples="""\
  rangectl validate range --start-date 2025-01-15 --start-time 09:00 \\
      --end-date 2025-01-15 --end-time 10:00 --min-duration 2h
  rangectl validate range --start-date 2025-01-15 --start-time 09:00""",
)
@click.option("--start-date", type=CIVIL, default=None, help="Start day (YYYY-MM-DD).")
@click.option("--start-time", type=TIME, default=None, help="Start time (HH:MM).")
@click.option("--end-date", type=CIVIL, default=None, help="End day (YYYY-MM-DD).")
@click.option("--end-time", type=TIME, default=None, help="End time (HH:MM).")
@click.option(
    "--frame",
    type=click.Choice([frame.value for frame in ComparisonFrame]),
    default=None,
    help="Compare wall-clock values (civil) or UTC instants (instant).",
)
@click.option("-z", "--zone", "zone_id", default=None, help="Zone for the instant frame.")
@_constraint_options
@click.pass_obj
def range_cmd(
    app: AppContext,
    start_date: CivilDateTime | None,
    start_time: str | None,
    end_date: CivilDateTime | None,
    end_time: str | None,
    frame: str | None,
    zone_id: str | None,
    **options: Any,
) -> None:
    """Check a start/end range. Every failing rule is reported."""
    date_range = DateTimeRange(
        start=DateTimeValue(date=start_date, time=start_time),
        end=DateTimeValue(date=end_date, time=end_time),
    )
    result = app.service.check_range(date_range, _constraints(app, options), zone_id, frame=frame)
    app.emit(result)
