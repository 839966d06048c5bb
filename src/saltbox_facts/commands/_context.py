"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the facts service and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from saltbox_facts.output.formatters import format_result

if TYPE_CHECKING:
    from saltbox_facts.config.settings import FactsSettings
    from saltbox_facts.services.facts import FactsService
    from saltbox_facts.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: FactsSettings) -> None:
        self.settings = settings

        from saltbox_facts.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def service(self) -> FactsService:
        from saltbox_facts.services.facts import FactsService

        return FactsService(self.settings)

    def emit(self, result: ServiceResult, *, table: bool = False) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they never pollute the JSON on stdout.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, table=table)
        if result.ok:
            click.echo(output)
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
