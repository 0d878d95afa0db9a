"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed down with ``@click.pass_obj``.
Provides a lazily built PickerService and centralized result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rangectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rangectl.config.settings import RangeSettings
    from rangectl.services.picker import PickerService
    from rangectl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The service is built on first use so ``--help`` and ``--version`` never
    touch the zone database.
    """

    def __init__(self, settings: RangeSettings) -> None:
        self.settings = settings
        self._service: PickerService | None = None

        from rangectl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> PickerService:
        if self._service is None:
            from rangectl.services.picker import PickerService

            self._service = PickerService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr unless in JSON mode, where
          they are already part of the payload.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
