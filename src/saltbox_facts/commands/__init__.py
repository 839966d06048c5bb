"""Subcommand modules for saltbox-facts.

Provides register_commands() which uses deferred imports to keep
``saltbox-facts --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from saltbox_facts.commands.collect import collect
    from saltbox_facts.commands.ip import ip

    cli.add_command(collect)
    cli.add_command(ip)
