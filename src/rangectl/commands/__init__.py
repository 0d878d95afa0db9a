"""Subcommand modules for rangectl.

Provides register_commands() which uses deferred imports to keep
``rangectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the zone, validate and preset groups on the root CLI group."""
    from rangectl.commands.preset import preset
    from rangectl.commands.validate import validate
    from rangectl.commands.zone import zone

    cli.add_command(zone)
    cli.add_command(validate)
    cli.add_command(preset)
