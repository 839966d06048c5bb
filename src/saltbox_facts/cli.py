"""Root CLI group for saltbox-facts with global flags and command registration.

Invoked without a subcommand, the root group runs ``collect`` so the bare
``saltbox-facts`` call prints the full snapshot.
"""

from __future__ import annotations

import click

from saltbox_facts import __version__
from saltbox_facts.commands import register_commands
from saltbox_facts.commands._base import FactsGroup
from saltbox_facts.commands._context import AppContext
from saltbox_facts.commands.collect import collect
from saltbox_facts.config.settings import FactsSettings


@click.group(
    cls=FactsGroup,
    invoke_without_command=True,
    examples="""\
  saltbox-facts
  saltbox-facts -c /etc/saltbox-facts/saltbox-facts.toml
  saltbox-facts --log-json -v ip""",
)
@click.version_option(version=__version__, prog_name="saltbox-facts")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """saltbox-facts — host facts snapshot for provisioning."""
    ctx.ensure_object(dict)
    settings = FactsSettings.from_cli(
        config_path=config_path,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        ctx.invoke(collect)


register_commands(cli)
