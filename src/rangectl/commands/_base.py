"""Click base classes with --examples support, plus rangectl parameter types.

RangeCommand and RangeGroup accept an ``examples`` parameter; ``--examples``
prints them and exits, keeping ``--help`` short.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

import click

from rangectl.domain.civil import CivilDateTime, as_civil, is_valid_time
from rangectl.domain.durations import parse_duration
from rangectl.domain.instants import parse_instant


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class RangeCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class RangeGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = RangeCommand`` so subcommands accept ``examples``
    without an explicit ``cls=``.
    """

    command_class = RangeCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


# --- Parameter types ---


class CivilType(click.ParamType):
    """``YYYY-MM-DD`` or ``YYYY-MM-DDTHH:MM[:SS]`` without an offset."""

    name = "civil"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> CivilDateTime:
        if isinstance(value, CivilDateTime):
            return value
        try:
            return as_civil(str(value))
        except ValueError as exc:
            self.fail(f"{value!r} is not a civil date-time: {exc}", param, ctx)


class InstantType(click.ParamType):
    """ISO 8601 instant; ``Z`` or no offset means UTC."""

    name = "instant"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> datetime:
        if isinstance(value, datetime):
            return value
        try:
            return parse_instant(str(value))
        except ValueError:
            self.fail(f"{value!r} is not an ISO 8601 instant", param, ctx)


class TimeType(click.ParamType):
    """``HH:MM`` on a 24-hour clock."""

    name = "hh:mm"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> str:
        text = str(value).strip()
        if not is_valid_time(text):
            self.fail(f"{value!r} is not a HH:MM time", param, ctx)
        return text


class DurationType(click.ParamType):
    """``90m``, ``2h``, ``3d``, ``45s``, ``500ms`` or bare milliseconds."""

    name = "duration"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> int:
        if isinstance(value, int):
            return value
        try:
            return parse_duration(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


WEEKDAY_NAMES = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")


class WeekdayType(click.ParamType):
    """Weekday as 0-6 (Sunday is 0) or a three-letter name."""

    name = "weekday"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> int:
        text = str(value).strip().lower()
        if text.isdigit() and 0 <= int(text) <= 6:
            return int(text)
        if text[:3] in WEEKDAY_NAMES:
            return WEEKDAY_NAMES.index(text[:3])
        self.fail(f"{value!r} is not a weekday (0-6 or sun..sat)", param, ctx)


CIVIL = CivilType()
INSTANT = InstantType()
TIME = TimeType()
DURATION = DurationType()
WEEKDAY = WeekdayType()
