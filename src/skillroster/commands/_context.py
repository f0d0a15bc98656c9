"""AppContext — the object every command receives via ``@click.pass_obj``.

Built once by the root group from :class:`RosterSettings`. It sets up
logging, opens the roster only when a command needs it, and turns a
:class:`ServiceResult` into output and an exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from skillroster.config.logging import configure_logging
from skillroster.output.formatters import OutputSettings, format_result
from skillroster.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from skillroster.config.settings import RosterSettings
    from skillroster.infrastructure.store import Roster
    from skillroster.services.result import ServiceResult


class AppContext:
    """Per-invocation state: settings, the lazily opened roster, output mode."""

    def __init__(self, settings: RosterSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._roster: Roster | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @property
    def roster(self) -> Roster:
        """Open the roster on first use; ``--help`` never touches storage."""
        if self._roster is None:
            from skillroster.infrastructure.store import Roster

            self._roster = Roster(self.settings)
        return self._roster

    def close(self) -> None:
        if self._roster is not None:
            self._roster.close()
            self._roster = None

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Success goes to stdout with exit 0; warnings follow on stderr
        unless the JSON payload already carries them. Failure goes to
        stderr and exits 1.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
