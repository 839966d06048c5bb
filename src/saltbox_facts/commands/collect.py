"""Command: emit the full host facts snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from saltbox_facts.commands._base import FactsCommand

if TYPE_CHECKING:
    from saltbox_facts.commands._context import AppContext


@click.command(
    cls=FactsCommand,
    examples="""\
  saltbox-facts collect
  saltbox-facts collect | jq .ip.public_ip
  saltbox-facts -v --log-json collect 2>facts.log""",
)
@click.pass_obj
def collect(app: AppContext) -> None:
    """Print IP, user, group, and timezone facts as one line of JSON."""
    app.emit(app.service().collect())
