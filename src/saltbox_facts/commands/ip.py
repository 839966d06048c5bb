"""Command: resolve only the public IP facts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from saltbox_facts.commands._base import FactsCommand

if TYPE_CHECKING:
    from saltbox_facts.commands._context import AppContext


@click.command(
    cls=FactsCommand,
    examples="""\
  saltbox-facts ip
  saltbox-facts ip --table
  SALTBOX_FACTS_NETWORK__TIMEOUT=10 saltbox-facts ip""",
)
@click.option("--table", is_flag=True, help="Human-readable table instead of JSON.")
@click.pass_obj
def ip(app: AppContext, table: bool) -> None:
    """Resolve the public IPv4/IPv6 addresses."""
    app.emit(app.service().ip(), table=table)
