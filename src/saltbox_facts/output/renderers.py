"""Rich renderers for human-readable IP facts (``ip --table``)."""

from __future__ import annotations

from typing import Any

from rich.table import Table
from rich.text import Text

from saltbox_facts.output.console import create_console, get_output

# (label, field suffix, address field)
_ROWS = (("IPv4", "ipv4", "public_ip"), ("IPv6", "ipv6", "public_ipv6"))


def _status_cell(failed: bool, error: str | None) -> Text:
    if not failed:
        return Text("ok", style="facts.ok")
    if error:
        return Text("failed", style="facts.error")
    return Text("skipped", style="facts.muted")


def render_ip_table(data: dict[str, Any]) -> str:
    """Render IP facts (the ``ip`` operation's data) as a table."""
    console = create_console()

    table = Table(show_header=True, header_style="bold")
    table.add_column("Family")
    table.add_column("Address", style="facts.address")
    table.add_column("Status")
    table.add_column("Detail", style="facts.muted", overflow="fold")

    for family, suffix, address_key in _ROWS:
        error = data.get(f"error_{suffix}")
        failed = data.get(f"failed_{suffix}", True)
        address = data.get(address_key) or "-"
        table.add_row(family, address, _status_cell(failed, error), error or "")

    console.print(table)
    check_error = data.get("ipv6_check_error")
    if check_error:
        console.print(Text(f"WARNING: {check_error}", style="facts.warning"))

    return get_output(console).rstrip("\n")
